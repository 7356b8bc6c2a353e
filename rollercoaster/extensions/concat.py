from __future__ import annotations
import logging
from ..coaster import Coaster
from ..types import *

logger = logging.getLogger(__name__)


class Concat(Coaster[T]):
    """attaches a secondary sequence before (START) or after (END) the primary one"""

    def __init__(self, primary: Iterable[T], secondary: Iterable[T], side: ConcatSide = ConcatSide.END):
        if not isinstance(side, ConcatSide):
            raise TypeError("side must be a ConcatSide")
        super().__init__(primary)
        self._secondary: Iterator[T] = iter(secondary)
        self._side = side
        self._switched = False

    def __next__(self) -> T:
        if self._side is ConcatSide.START:
            first, second = self._secondary, self._underlying
        else:
            first, second = self._underlying, self._secondary

        try:
            return next(first)
        except StopIteration:
            pass

        if not self._switched:
            self._switched = True
            logger.debug("concat (%s) switched to its second sequence", self._side.value)
        return next(second)

    @property
    def side(self) -> ConcatSide:
        return self._side
