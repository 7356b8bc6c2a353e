from __future__ import annotations
import typing
from itertools import islice, takewhile, dropwhile
from ..types import *

if typing.TYPE_CHECKING:
    from ..coaster import Coaster
    from .memory import Memory
    from .grouping import GroupBy
    from .unique import Unique
    from .concat import Concat

class _CoreOperations(Generic[T]):
    # --- rollercoaster combinators ---

    def memory(self: 'Coaster[T]') -> 'Memory[T]':
        """
        wrap the sequence so that pulled items can be remembered for the next iteration.
        useful when an item has to be read first and then handled by a later iteration.
        """
        from .memory import Memory
        return Memory(self)

    def group_by(self: 'Coaster[T]', key_selector: KeySelector[T, K]) -> 'GroupBy[K, T]':
        """group runs of adjacent elements that share the same key"""
        from .grouping import GroupBy
        return GroupBy(self, key_selector)

    def unique(self: 'Coaster[T]') -> 'Unique[T]':
        """keep the first occurrence of every element. elements must be hashable."""
        from .unique import Unique
        return Unique(self)

    def unique_by(self: 'Coaster[T]', key_selector: KeySelector[T, H]) -> 'Unique[T]':
        """keep the first element for every key. keys must be hashable."""
        from .unique import Unique
        return Unique(self, key_selector)

    def append(self: 'Coaster[T]', other: Iterable[T]) -> 'Concat[T]':
        """yield the elements of other after this sequence"""
        from .concat import Concat
        return Concat(self, other, ConcatSide.END)

    def prepend(self: 'Coaster[T]', other: Iterable[T]) -> 'Concat[T]':
        """yield the elements of other before this sequence. same as other.append(self)."""
        from .concat import Concat
        return Concat(self, other, ConcatSide.START)

    # --- basic lazy adapters ---

    def where(self: 'Coaster[T]', predicate: Predicate[T]) -> 'Coaster[T]':
        """filter elements based on a predicate"""
        from ..coaster import Coaster
        return Coaster(item for item in self if predicate(item))

    def select(self: 'Coaster[T]', selector: Selector[T, U]) -> 'Coaster[U]':
        """project each element to a new form"""
        from ..coaster import Coaster
        return Coaster(selector(item) for item in self)

    def take(self: 'Coaster[T]', count: int) -> 'Coaster[T]':
        """take the first 'count' elements"""
        from ..coaster import Coaster
        if count < 0:
            raise ValueError("count must not be negative")
        # islice stops pulling as soon as count is reached
        return Coaster(islice(self, count))

    def skip(self: 'Coaster[T]', count: int) -> 'Coaster[T]':
        """skip the first 'count' elements"""
        from ..coaster import Coaster
        if count < 0:
            raise ValueError("count must not be negative")
        return Coaster(islice(self, count, None))

    def take_while(self: 'Coaster[T]', predicate: Predicate[T]) -> 'Coaster[T]':
        """
        take elements while predicate is true.
        the first element that fails the predicate is consumed from the source;
        pull through memory() first if it has to be kept.
        """
        from ..coaster import Coaster
        return Coaster(takewhile(predicate, self))

    def skip_while(self: 'Coaster[T]', predicate: Predicate[T]) -> 'Coaster[T]':
        """skip elements while predicate is true"""
        from ..coaster import Coaster
        return Coaster(dropwhile(predicate, self))
