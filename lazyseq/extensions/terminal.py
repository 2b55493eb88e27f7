from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from itertools import islice
from ..types import *
from ..config import DEFAULT_DELIMITER, CSV_DELIMITER
from ..cursor import scoped
from ..errors import EmptyInputError
from ..guard import require_non_null

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

_MISSING = object()

class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return self._enumerable._get_data()

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def set(self, selector: Optional[Selector[T, U]] = None) -> Set[Any]:
        """convert to set, optionally projecting each element first"""
        if selector is None: return set(self._enumerable)
        return {selector(item) for item in self._enumerable}

    def hash_set(self, selector: Selector[T, U]) -> Set[U]:
        """set of projected elements; the selector is required"""
        require_non_null("selector", selector)
        return self.set(selector)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._enumerable._get_data())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._enumerable)
        return sum(1 for x in self._enumerable if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition; stops at the first hit"""
        if predicate is None: return self.has_at_least(1)
        return any(predicate(x) for x in self._enumerable)

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        with scoped(self._enumerable) as cursor:
            for item in cursor:
                if predicate is None or predicate(item): return item
        if predicate is None: raise EmptyInputError()
        raise EmptyInputError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        try: return self.first(predicate)
        except EmptyInputError: return default

    # --- cardinality ---

    def has_exactly_one(self) -> bool:
        """true when the sequence has one element, without reading past the second"""
        with scoped(self._enumerable) as cursor:
            return next(cursor, _MISSING) is not _MISSING and next(cursor, _MISSING) is _MISSING

    def has_at_least(self, count: int) -> bool:
        """
        true when the sequence has `count` or more elements. reading stops as
        soon as `count` is reached, so this is safe on infinite sequences.
        zero or fewer is always satisfied.
        """
        if count <= 0: return True
        with scoped(self._enumerable) as cursor:
            return sum(1 for _ in islice(cursor, count)) == count

    # --- text ---

    def join_with(self, delimiter: str = DEFAULT_DELIMITER,
                  to_string: Optional[ToString[T]] = None) -> str:
        """render each element as text and join with the delimiter"""
        render = to_string if to_string is not None else str
        return delimiter.join(render(item) for item in self._enumerable)

    def csv(self, to_string: Optional[ToString[T]] = None) -> str:
        """comma-joined rendering, no quoting"""
        return self.join_with(CSV_DELIMITER, to_string)
