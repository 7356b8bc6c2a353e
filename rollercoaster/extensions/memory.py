from __future__ import annotations
import logging
from ..coaster import Coaster
from ..types import *

logger = logging.getLogger(__name__)

_MISSING = object()


class Memory(Coaster[T]):
    """
    a sequence that can remember items for the next iterations.

    remembered items are kept on a stack: the most recently remembered item
    is the next one produced. unlike a one-slot peek, the caller owns every
    item it pulled and can push back as many of them as it needs, which are
    then replayed in reverse order before the wrapped sequence resumes.
    """

    def __init__(self, source: Iterable[T]):
        super().__init__(source)
        self._items: List[T] = []

    def __next__(self) -> T:
        if self._items:
            return self._items.pop()
        return next(self._underlying)

    def remember(self, item: T) -> None:
        """puts the item into memory so that it is returned on the next iteration"""
        self._items.append(item)

    def forget(self) -> None:
        """forgets the last remembered item. does nothing if nothing is remembered."""
        if self._items:
            self._items.pop()

    def clear(self) -> None:
        """forgets every remembered item, so the wrapped sequence is read next"""
        if self._items:
            logger.debug("memory cleared %d remembered item(s)", len(self._items))
        self._items.clear()

    def peek(self, default: Any = _MISSING) -> T:
        """
        returns the next item without consuming it.
        when the sequence is exhausted, returns default if given, otherwise raises StopIteration.
        """
        try:
            item = next(self)
        except StopIteration:
            if default is _MISSING:
                raise
            return default
        self.remember(item)
        return item

    @property
    def remembered(self) -> int:
        """number of items waiting to be replayed"""
        return len(self._items)
