from typing import Optional, Tuple


class LazySeqError(Exception):
    """base class for every error raised by lazyseq operators."""
    pass


class InvalidArgumentError(LazySeqError, ValueError):
    """an argument has a value the operator can never work with (zero batch size, null selector...)."""

    def __init__(self, argument_name: str, message: Optional[str] = None):
        self.argument_name = argument_name
        detail = message or "invalid value"
        super().__init__(f"{argument_name}: {detail}")


class LengthMismatchError(LazySeqError, ValueError):
    """a strict multi-sequence combinator found sequences of different lengths."""

    def __init__(self, longer: Tuple[str, ...], message: Optional[str] = None):
        self.longer = longer
        names = ", ".join(longer)
        super().__init__(message or f"sequences are not the same length: {names} ran long")


class EmptyInputError(LazySeqError, ValueError):
    """an operator that needs at least one element got none."""

    def __init__(self, message: str = "sequence contains no elements"):
        super().__init__(message)
