from __future__ import annotations
import typing
from ..types import *
from ..cursor import scoped
from ..errors import EmptyInputError
from ..guard import require_non_null

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

_MISSING = object()

class StatsAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _compare_by(self, key_selector: KeySelector[T, K], comparer: Optional[Comparer[K]],
                    is_better: Callable[[int], bool]) -> T:
        """single pass; a candidate replaces the current best only on strict improvement"""
        require_non_null("key_selector", key_selector)
        compare = comparer if comparer is not None else natural_order

        with scoped(self._enumerable) as cursor:
            current = next(cursor, _MISSING)
            if current is _MISSING:
                raise EmptyInputError()
            current_key = key_selector(current)
            for candidate in cursor:
                candidate_key = key_selector(candidate)
                if is_better(compare(candidate_key, current_key)):
                    current, current_key = candidate, candidate_key
            return current

    def min_by(self, key_selector: KeySelector[T, K], comparer: Optional[Comparer[K]] = None) -> T:
        """element with the smallest key; the first one wins ties"""
        return self._compare_by(key_selector, comparer, lambda result: result < 0)

    def max_by(self, key_selector: KeySelector[T, K], comparer: Optional[Comparer[K]] = None) -> T:
        """element with the largest key; the first one wins ties"""
        return self._compare_by(key_selector, comparer, lambda result: result > 0)
