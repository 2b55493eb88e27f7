from __future__ import annotations
import typing
from bisect import bisect_left
from functools import cmp_to_key
from itertools import chain, islice, takewhile, dropwhile
from ..types import *
from ..guard import require_non_null

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: filter(predicate, self))

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: map(selector, self))

    def select_with_index(self: 'Enumerable[T]', selector: Callable[[T, int], U]) -> 'Enumerable[U]':
        """project each element to a new form, using the element's index"""
        from ..enumerable import Enumerable
        def map_with_index_data():
            for index, item in enumerate(self):
                yield selector(item, index)
        return Enumerable(map_with_index_data)

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
        """project and flatten sequences"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: chain.from_iterable(map(selector, self)))

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements; safe on infinite sequences"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: islice(self, max(count, 0)))

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: islice(self, max(count, 0), None))

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements while predicate is true"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: takewhile(predicate, self))

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: dropwhile(predicate, self))

    def skip_none(self: 'Enumerable[Optional[T]]') -> 'Enumerable[T]':
        """drop elements that are None"""
        return self.where(lambda item: item is not None)

    # --- concatenation ---

    def append(self: 'Enumerable[T]', *elements: T) -> 'Enumerable[T]':
        """appends values to the end of the sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: chain(self, elements))

    def prepend(self: 'Enumerable[T]', *elements: T) -> 'Enumerable[T]':
        """adds values to the beginning of the sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: chain(elements, self))

    def concat(self: 'Enumerable[T]', other: Optional[Iterable[T]]) -> 'Enumerable[T]':
        """concatenate another sequence; None counts as empty"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: chain(self, other if other is not None else ()))

    # --- ordering ---

    def sort_by(self: 'Enumerable[T]', key_selector: KeySelector[T, K],
                sorter: Optional[Iterable[K]],
                comparer: Optional[Comparer[K]] = None) -> 'Enumerable[T]':
        """
        reorder elements to follow the keys in `sorter`.
        the source is read once into a key -> element lookup; when two elements
        share a key the later one wins. sorter keys with no element are skipped,
        and elements whose key is never named by the sorter are dropped.
        with a comparer, keys match when comparer(a, b) == 0.
        """
        from ..enumerable import Enumerable
        require_non_null("key_selector", key_selector)

        def sorted_by_hash():
            lookup = {key_selector(item): item for item in self}
            for key in sorter if sorter is not None else ():
                if key in lookup:
                    yield lookup[key]

        def sorted_by_comparer():
            sort_key = cmp_to_key(comparer)
            # stable sort keeps source order within equal keys, so the last of a run wins
            entries = sorted(((key_selector(item), item) for item in self),
                             key=lambda entry: sort_key(entry[0]))
            keys, items = [], []
            for key, item in entries:
                if keys and comparer(keys[-1], key) == 0:
                    items[-1] = item
                else:
                    keys.append(key)
                    items.append(item)

            wrapped_keys = [sort_key(key) for key in keys]
            for key in sorter if sorter is not None else ():
                index = bisect_left(wrapped_keys, sort_key(key))
                if index < len(keys) and comparer(keys[index], key) == 0:
                    yield items[index]

        return Enumerable(sorted_by_comparer if comparer is not None else sorted_by_hash)
