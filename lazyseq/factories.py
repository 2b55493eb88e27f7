import typing
from collections.abc import Iterator as _IteratorABC
from .types import *
from .cursor import scoped

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

_MISSING = object()

def from_iterable(data: Optional[Iterable[T]]) -> 'Enumerable[T]':
    """create enumerable from iterable; None becomes an empty sequence"""
    from .enumerable import Enumerable
    return Enumerable(lambda: empty_if_absent(data))

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .enumerable import Enumerable
    return Enumerable(lambda: range(start, start + count))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    return Enumerable(lambda: [item] * count)

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: ())

# --- absent / empty normalization ---

def empty_if_absent(source: Optional[Iterable[T]]) -> Iterable[T]:
    """the source itself, or an empty sequence when it is None"""
    return source if source is not None else ()

def absent_if_empty(source: Optional[Iterable[T]]) -> Optional[Iterable[T]]:
    """
    None when the source is None or has no elements, else the source.
    a one-shot iterator would lose its first element to the check, so it is
    buffered and the buffer is returned in its place.
    """
    if source is None:
        return None

    if isinstance(source, _IteratorABC):
        buffered = MemoizedEnumerable(lambda: source)
        try:
            buffered[0]
        except IndexError:
            return None
        return buffered

    with scoped(source) as cursor:
        has_any = next(cursor, _MISSING) is not _MISSING
    return source if has_any else None

def skip_absent(source: Optional[Iterable[Optional[T]]]) -> 'Enumerable[T]':
    """lazily drop None elements; a None source is empty"""
    return from_iterable(source).skip_none()

# --- aliases ---
lazyseq = from_iterable
P = from_iterable
