from __future__ import annotations
import logging
from ..coaster import Coaster
from ..types import *

logger = logging.getLogger(__name__)


def _identity(item):
    return item


class Unique(Coaster[T]):
    """
    yields only the first item seen for every key, in source order.
    keys are kept in a set that only grows, so memory is proportional to the
    number of distinct keys.
    """

    def __init__(self, source: Iterable[T], key_selector: Optional[KeySelector[T, H]] = None):
        if key_selector is not None and not callable(key_selector):
            raise TypeError("key selector must be callable")
        super().__init__(source)
        self._key_selector = key_selector if key_selector is not None else _identity
        self._seen: Set[H] = set()
        self._exhausted = False

    def __next__(self) -> T:
        if self._exhausted:
            raise StopIteration

        for item in self._underlying:
            key = self._key_selector(item)
            if key not in self._seen:
                self._seen.add(key)
                return item

        self._exhausted = True
        logger.debug("unique exhausted with %d distinct key(s)", len(self._seen))
        raise StopIteration
