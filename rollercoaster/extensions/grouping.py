from __future__ import annotations
import logging
from ..coaster import Coaster
from ..types import *
from .memory import Memory

logger = logging.getLogger(__name__)

# marks "no key yet" so that None stays a valid key
_NO_KEY = object()


class GroupBy(Coaster[Group[K, T]]):
    """
    groups adjacent items that share a key into Group records.

    grouping is by adjacency, not a full partition: [a, b, a] gives three groups.
    the first item of the next run is pushed back into an internal Memory,
    so no item is ever dropped between groups. if the key selector raises, the
    items of the unfinished scan are pushed back as well before the error propagates.
    """

    def __init__(self, source: Iterable[T], key_selector: KeySelector[T, K]):
        if not callable(key_selector):
            raise TypeError("key selector must be callable")
        super().__init__(Memory(source))
        self._key_selector = key_selector
        self._emitted = 0
        self._exhausted = False

    def __next__(self) -> Group[K, T]:
        if self._exhausted:
            raise StopIteration

        accumulation: List[T] = []
        current_key: Any = _NO_KEY

        for item in self._underlying:
            try:
                key = self._key_selector(item)
            except Exception:
                # hand the scan back so a retry sees the same items in order
                self._underlying.remember(item)
                for kept in reversed(accumulation):
                    self._underlying.remember(kept)
                raise
            if current_key is not _NO_KEY and key != current_key:
                # belongs to the next group
                self._underlying.remember(item)
                break
            current_key = key
            accumulation.append(item)

        if not accumulation:
            self._exhausted = True
            logger.debug("group_by exhausted after %d group(s)", self._emitted)
            raise StopIteration

        self._emitted += 1
        return Group(current_key, accumulation)
