from __future__ import annotations
import typing
import logging
from itertools import islice
from ..types import *
from ..cursor import scoped
from ..guard import require_argument, require_non_null
from ..randomizer import Randomizer, default_randomizer

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


class UtilityAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    # --- eager traversal ---

    def for_each(self, action: Action[T]) -> 'Enumerable[T]':
        """
        performs the specified action on each element of a sequence for side-effects.
        this is an EAGER operation that executes immediately.
        returns the original enumerable to allow chaining.
        """
        require_non_null("action", action)
        for item in self._enumerable:
            action(item)
        return self._enumerable

    def for_each_indexed(self, action: IndexedAction[T],
                         indexes: Optional[Iterable[int]] = None) -> 'Enumerable[T]':
        """
        eager, like for_each, but the action also receives the element's index.
        when `indexes` is given only those positions fire; the whole sequence
        is still walked.
        """
        require_non_null("action", action)
        allowed = set(indexes) if indexes is not None else None
        for index, item in enumerate(self._enumerable):
            if allowed is None or index in allowed:
                action(item, index)
        return self._enumerable

    # --- lazy traversal ---

    def tap(self, action: Action[T]) -> 'Enumerable[T]':
        """
        runs the action on each element as it passes through, then yields it.
        lazy: the action fires when a consumer pulls the element, once per pull.
        example: .where(...).util.tap(print).select(...)
        """
        from ..enumerable import Enumerable
        require_non_null("action", action)
        def tap_data():
            for item in self._enumerable:
                action(item)
                yield item
        return Enumerable(tap_data)

    def tap_indexed(self, action: IndexedAction[T],
                    indexes: Optional[Iterable[int]] = None) -> 'Enumerable[T]':
        """lazy counterpart of for_each_indexed; every element is still yielded"""
        from ..enumerable import Enumerable
        require_non_null("action", action)
        allowed = set(indexes) if indexes is not None else None
        def tap_data():
            for index, item in enumerate(self._enumerable):
                if allowed is None or index in allowed:
                    action(item, index)
                yield item
        return Enumerable(tap_data)

    # --- generation ---

    def to_circular(self) -> 'Enumerable[T]':
        """
        repeat the sequence forever, re-reading it from the top on every pass.
        an empty sequence stays empty. a source that runs dry on a later pass
        (a one-shot iterator) ends the sequence instead of spinning.
        """
        from ..enumerable import Enumerable
        def circular_data():
            if not self._enumerable.to.has_at_least(1):
                return
            while True:
                yielded = False
                with scoped(self._enumerable) as cursor:
                    for item in cursor:
                        yielded = True
                        yield item
                if not yielded:
                    return
        return Enumerable(circular_data)

    def to_stepped(self, step: int) -> 'Enumerable[T]':
        """every step-th element starting from the first"""
        from ..enumerable import Enumerable
        require_argument("step", step < 1, "cannot be negative or zero")
        def stepped_data():
            with scoped(self._enumerable) as cursor:
                yield from islice(cursor, 0, None, step)
        return Enumerable(stepped_data)

    # --- random sampling ---

    def shuffle(self, randomizer: Optional[Randomizer] = None,
                count: Optional[int] = None) -> 'Enumerable[T]':
        """
        draws elements without replacement, in draw order.
        a private copy of the source is taken on the first pull and only that
        copy shrinks, so the source is never touched. `count` defaults to the
        whole sequence, i.e. a full shuffle.
        """
        from ..enumerable import Enumerable
        def shuffle_data():
            provider = randomizer if randomizer is not None else default_randomizer()
            working = list(self._enumerable)
            draws = len(working) if count is None else min(count, len(working))
            logger.debug("drawing %d of %d elements", max(draws, 0), len(working))
            for _ in range(draws):
                index = provider.next(len(working))
                yield working.pop(index)
        return Enumerable(shuffle_data)
