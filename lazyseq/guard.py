from typing import Any, Optional

from .errors import InvalidArgumentError


def require_argument(name: str, is_violated: bool, message: Optional[str] = None) -> None:
    """raise InvalidArgumentError for `name` when the condition holds"""
    if is_violated:
        raise InvalidArgumentError(name, message)


def require_non_null(name: str, value: Any) -> None:
    """raise InvalidArgumentError when `value` is None"""
    if value is None:
        raise InvalidArgumentError(name, "cannot be None")
