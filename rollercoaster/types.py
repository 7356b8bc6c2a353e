from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Hashable
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')  # group keys only need ==
H = TypeVar('H', bound=Hashable)  # unique keys need __hash__ and ==
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[U, T], U]


class ConcatSide(Enum):
    """which end of the primary sequence the secondary one is attached to"""
    START = "start"
    END = "end"


class Group(Generic[K, T]):
    """a maximal run of adjacent items that share one key"""

    def __init__(self, key: K, items: List[T]):
        self.key = key
        self.items = items

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self.key == other.key and self.items == other.items

    def __repr__(self) -> str:
        return f"Group(key={self.key!r}, items={self.items!r})"
