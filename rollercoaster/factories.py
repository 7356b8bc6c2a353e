import typing
from itertools import repeat as _repeat
from .types import *

if typing.TYPE_CHECKING:
    from .coaster import Coaster
    from .extensions.memory import Memory
    from .extensions.grouping import GroupBy
    from .extensions.unique import Unique
    from .extensions.concat import Concat

def from_iterable(data: Iterable[T]) -> 'Coaster[T]':
    """create coaster from iterable"""
    from .coaster import Coaster
    return Coaster(data)

def from_range(start: int, count: int) -> 'Coaster[int]':
    """create coaster from range"""
    from .coaster import Coaster
    return Coaster(range(start, start + count))

def repeat(item: T, count: int) -> 'Coaster[T]':
    """create coaster with repeated item"""
    from .coaster import Coaster
    return Coaster(_repeat(item, count))

def empty() -> 'Coaster[Any]':
    """create empty coaster"""
    from .coaster import Coaster
    return Coaster(())

def generate(generator_func: Callable[[], T], count: int) -> 'Coaster[T]':
    """generate sequence by calling a function lazily, once per pulled item"""
    from .coaster import Coaster
    return Coaster(generator_func() for _ in range(count))

# --- free-function forms of the combinators ---

def memory(data: Iterable[T]) -> 'Memory[T]':
    """wrap any iterable in a pushback memory"""
    from .extensions.memory import Memory
    return Memory(data)

def group_by(data: Iterable[T], key_selector: KeySelector[T, K]) -> 'GroupBy[K, T]':
    """group runs of adjacent items of any iterable by key"""
    from .extensions.grouping import GroupBy
    return GroupBy(data, key_selector)

def unique(data: Iterable[T]) -> 'Unique[T]':
    """first occurrence of every item of any iterable"""
    from .extensions.unique import Unique
    return Unique(data)

def unique_by(data: Iterable[T], key_selector: KeySelector[T, H]) -> 'Unique[T]':
    """first item for every key of any iterable"""
    from .extensions.unique import Unique
    return Unique(data, key_selector)

def append(data: Iterable[T], other: Iterable[T]) -> 'Concat[T]':
    """items of data, then items of other"""
    from .extensions.concat import Concat
    return Concat(data, other, ConcatSide.END)

def prepend(data: Iterable[T], other: Iterable[T]) -> 'Concat[T]':
    """items of other, then items of data"""
    from .extensions.concat import Concat
    return Concat(data, other, ConcatSide.START)

# --- aliases ---
coaster = from_iterable
C = from_iterable
