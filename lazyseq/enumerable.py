from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.grouping import GroupingAccessor
from .extensions.stats import StatsAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor
from .extensions.zip import ZipAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """open a fresh cursor over the sequence"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data_func: Callable[[], Iterable[T]]):
        """
        init with a function that returns an iterable when called.
        the function is re-invoked for every iteration, so nothing runs
        until a consumer pulls and a restartable source stays restartable.
        """
        self._data_func = data_func

    def _get_data(self) -> List[T]:
        """materialize the current data into a new list"""
        return list(self)

    def __iter__(self) -> Iterator[T]:
        data = self._data_func()
        return iter(data if data is not None else ())

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, linq-inspired enumerable over python iterables."""
    def __init__(self, data_func: Callable[[], Iterable[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.zip = ZipAccessor(self)
        self.group = GroupingAccessor(self)
        self.stats = StatsAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)

    def __repr__(self) -> str:
        return f"Enumerable({getattr(self._data_func, '__name__', 'source')})"
