from __future__ import annotations
import typing
import logging
from itertools import batched
from ..types import *
from ..cursor import scoped
from ..guard import require_argument

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def in_batches_of(self, batch_size: int) -> 'Enumerable[List[T]]':
        """
        split the sequence into lists of batch_size elements. the last batch
        holds whatever is left and is omitted when nothing is. requires python 3.12+.
        """
        from ..enumerable import Enumerable
        require_argument("batch_size", batch_size < 1, "batch size must be positive")
        def batched_data():
            with scoped(self._enumerable) as cursor:
                for batch in batched(cursor, batch_size):
                    if len(batch) < batch_size:
                        logger.debug("partial final batch of %d", len(batch))
                    # a new list per batch, never a shared buffer
                    yield list(batch)
        return Enumerable(batched_data)
