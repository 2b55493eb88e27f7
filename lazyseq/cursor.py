from contextlib import contextmanager
from typing import Iterable, Iterator, Optional, TypeVar

T = TypeVar('T')


def release(iterator: Iterator) -> None:
    """close a cursor if it holds resources (generators do, list iterators don't)"""
    close = getattr(iterator, "close", None)
    if close is not None:
        close()


@contextmanager
def scoped(source: Optional[Iterable[T]]) -> Iterator[Iterator[T]]:
    """
    open a cursor over `source` (None counts as empty) and release it however
    the block exits: exhaustion, break, error, or the enclosing generator
    being closed.
    """
    iterator = iter(source if source is not None else ())
    try:
        yield iterator
    finally:
        release(iterator)
