from __future__ import annotations
import typing
from functools import reduce
from ..types import *

if typing.TYPE_CHECKING:
    import numpy as np
    import pandas as pd
    from ..coaster import Coaster

_NO_SEED = object()


class TerminalAccessor(Generic[T]):
    """
    operations that pull the whole chain (or as much as they need) and return a plain value.
    a coaster is single-pass: whatever a terminal operation consumed is gone.
    """
    def __init__(self, coaster_instance: 'Coaster[T]'):
        self._coaster = coaster_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._coaster)

    def array(self) -> np.ndarray:
        """convert to numpy array. needs the frames extra."""
        import numpy as np
        return np.array(self.list())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._coaster)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary. later items overwrite earlier ones with the same key."""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._coaster}

    def pandas(self) -> pd.Series:
        """convert to pandas series. needs the frames extra."""
        import pandas as pd
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe. groups become rows with key and items columns."""
        import pandas as pd
        data = self.list()
        if data and all(isinstance(item, Group) for item in data):
            return pd.DataFrame({'key': [g.key for g in data], 'items': [g.items for g in data]})
        return pd.DataFrame(data)

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._coaster)
        return sum(1 for x in self._coaster if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition. stops at the first match."""
        if predicate is None:
            for _ in self._coaster:
                return True
            return False
        return any(predicate(x) for x in self._coaster)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return all(predicate(x) for x in self._coaster)

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        if predicate is None:
            for item in self._coaster:
                return item
            raise ValueError("sequence contains no elements")
        for item in self._coaster:
            if predicate(item): return item
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        try: return self.first(predicate)
        except ValueError: return default

    def single(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get single element, erroring if not exactly one"""
        data = [x for x in self._coaster if predicate(x)] if predicate else self.list()
        if len(data) == 0: raise ValueError("sequence contains no matching elements")
        if len(data) > 1: raise ValueError("sequence contains more than one matching element")
        return data[0]

    def aggregate(self, accumulator: Accumulator[T, T], seed: Any = _NO_SEED) -> T:
        """applies accumulator function over sequence"""
        if seed is not _NO_SEED:
            return reduce(accumulator, self._coaster, seed)
        for first in self._coaster:
            return reduce(accumulator, self._coaster, first)
        raise ValueError("cannot aggregate empty sequence without seed")
