from __future__ import annotations
import typing
import logging
from contextlib import ExitStack
from ..types import *
from ..cursor import scoped
from ..errors import LengthMismatchError
from ..guard import require_non_null

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


def _lockstep(sources: Tuple[Optional[Iterable[Any]], ...],
              names: Tuple[str, ...]) -> Iterator[Tuple[Any, ...]]:
    """
    advance one cursor per source together, one step per output tuple.
    every cursor is advanced on every step; when some run out and others
    don't, the ones still holding elements are reported as too long.
    """
    with ExitStack() as stack:
        cursors = [stack.enter_context(scoped(source)) for source in sources]
        while True:
            step = tuple(next(cursor, _EXHAUSTED) for cursor in cursors)
            exhausted = [value is _EXHAUSTED for value in step]
            if all(exhausted):
                return
            if any(exhausted):
                longer = tuple(name for name, done in zip(names, exhausted) if not done)
                logger.debug("length mismatch between %s: %s ran long", names, longer)
                raise LengthMismatchError(longer)
            yield step


class ZipAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    # --- strict-length merge ---

    def merge(self, other: Optional[Iterable[T]]) -> 'Enumerable[Pair]':
        """
        pair elements by position. both sequences must have the same length:
        a LengthMismatchError is raised once the shorter one runs out.
        """
        from ..enumerable import Enumerable
        def merge_data():
            for first, second in _lockstep((self._enumerable, other), ("first", "second")):
                yield Pair(first, second)
        return Enumerable(merge_data)

    def merge3(self, second: Optional[Iterable[T]], third: Optional[Iterable[T]]) -> 'Enumerable[Triple]':
        """triple elements by position; all three must have the same length"""
        from ..enumerable import Enumerable
        def merge_data():
            sources = (self._enumerable, second, third)
            for items in _lockstep(sources, ("first", "second", "third")):
                yield Triple(*items)
        return Enumerable(merge_data)

    # --- strict-length zip ---

    def zip(self, other: Optional[Iterable[U]]) -> 'Enumerable[Tuple[T, U]]':
        """tuple elements by position; raises LengthMismatchError on unequal lengths"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: _lockstep((self._enumerable, other), ("first", "second")))

    def zip3(self, second: Optional[Iterable[U]], third: Optional[Iterable[V]]) -> 'Enumerable[Tuple[T, U, V]]':
        from ..enumerable import Enumerable
        names = ("first", "second", "third")
        return Enumerable(lambda: _lockstep((self._enumerable, second, third), names))

    def zip4(self, second: Optional[Iterable[Any]], third: Optional[Iterable[Any]],
             fourth: Optional[Iterable[Any]]) -> 'Enumerable[Tuple[Any, Any, Any, Any]]':
        from ..enumerable import Enumerable
        names = ("first", "second", "third", "fourth")
        return Enumerable(lambda: _lockstep((self._enumerable, second, third, fourth), names))

    def zip_with(self, other: Optional[Iterable[U]], result_selector: Callable[[T, U, int], V]) -> 'Enumerable[V]':
        """zip two sequences with a selector that also receives the position"""
        from ..enumerable import Enumerable
        require_non_null("result_selector", result_selector)
        def zip_with_data():
            pairs = _lockstep((self._enumerable, other), ("first", "second"))
            for index, (first, second) in enumerate(pairs):
                yield result_selector(first, second, index)
        return Enumerable(zip_with_data)

    # --- lenient ---

    def interlace(self, other: Optional[Iterable[T]]) -> 'Enumerable[T]':
        """
        alternate elements: a0, b0, a1, b1, ...
        unlike merge and zip this stops quietly at the end of the shorter sequence.
        """
        from ..enumerable import Enumerable
        def interlace_data():
            with scoped(self._enumerable) as firsts, scoped(other) as seconds:
                while True:
                    first = next(firsts, _EXHAUSTED)
                    if first is _EXHAUSTED: return
                    second = next(seconds, _EXHAUSTED)
                    if second is _EXHAUSTED: return
                    yield first
                    yield second
        return Enumerable(interlace_data)
