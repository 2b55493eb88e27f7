from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, NamedTuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[K, K], int]
Action = Callable[[T], Any]
IndexedAction = Callable[[T, int], Any]
ToString = Callable[[T], str]


def natural_order(left: Any, right: Any) -> int:
    """three-way comparison using the operands' own ordering"""
    return (left > right) - (left < right)


class Pair(NamedTuple):
    """two elements taken from the same position of two sequences"""
    first: Any
    second: Any


class Triple(NamedTuple):
    """three elements taken from the same position of three sequences"""
    first: Any
    second: Any
    third: Any


class MemoizedEnumerable(Generic[T]):
    """
    buffers a one-shot iterable as it is pulled, so it can be inspected and
    then iterated again from the top without losing elements.
    """

    def __init__(self, data_func: Callable[[], Iterable[T]]):
        self._source_func = data_func
        self._cache = []
        self._source_iterator = None
        self._is_fully_enumerated = False

    def _get_iterator(self):
        """get or create the source iterator"""
        if self._source_iterator is None:
            self._source_iterator = iter(self._source_func())
        return self._source_iterator

    def _materialize_to_index(self, target_index: int):
        """materialize the cache up to (and including) the target index"""
        if self._is_fully_enumerated:
            return

        iterator = self._get_iterator()
        while len(self._cache) <= target_index:
            try:
                self._cache.append(next(iterator))
            except StopIteration:
                self._is_fully_enumerated = True
                break

    def __iter__(self) -> Iterator[T]:
        # index-based so a second consumer started mid-way still sees every element
        index = 0
        while True:
            self._materialize_to_index(index)
            if index >= len(self._cache):
                return
            yield self._cache[index]
            index += 1

    def __getitem__(self, index: int) -> T:
        """support forward indexing by materializing up to the requested index"""
        if index < 0:
            raise IndexError("negative indexes are not supported")
        self._materialize_to_index(index)
        if index < len(self._cache):
            return self._cache[index]
        raise IndexError("index out of range")

    def __len__(self):
        """get the length by fully materializing"""
        for _ in self:
            pass
        return len(self._cache)

    def __repr__(self) -> str:
        state = "complete" if self._is_fully_enumerated else "partial"
        return f"MemoizedEnumerable(cached={len(self._cache)}, {state})"
