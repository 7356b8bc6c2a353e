from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IProducer(ABC, Generic[T]):
    @abstractmethod
    def __next__(self) -> T:
        """produce the next item or raise StopIteration when exhausted"""
        pass

    def __iter__(self) -> Iterator[T]:
        return self

# --- base coaster implementation ---

class _BaseCoaster(IProducer[T]):
    def __init__(self, source: Iterable[T]):
        """wrap any iterable; the resulting iterator is owned by this coaster"""
        self._underlying: Iterator[T] = iter(source)

    def __next__(self) -> T:
        return next(self._underlying)

# --- main coaster class ---

class Coaster(
    _BaseCoaster[T],
    _CoreOperations[T]
):
    """
    a lazy, single-pass sequence that can be chained with rollercoaster operations.
    every operation pulls from the one it wraps only when it is itself pulled.
    """
    def __init__(self, source: Iterable[T]):
        super().__init__(source)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._underlying!r})"
