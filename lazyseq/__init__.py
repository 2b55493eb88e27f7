r"""
'   _
'  | | __ _ _____   _ ___  ___  __ _
'  | |/ _` |_  / | | / __|/ _ \/ _` |
'  | | (_| |/ /| |_| \__ \  __/ (_| |
'  |_|\__,_/___|\__, |___/\___|\__, |
'               |___/             |_|
"""

import logging

# expose the main class
from .enumerable import Enumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    lazyseq,
    P,
    # normalization
    empty_if_absent,
    absent_if_empty,
    skip_absent
)

# expose supporting types
from .types import (
    Pair,
    Triple,
    MemoizedEnumerable,
    natural_order
)
from .randomizer import (
    Randomizer,
    NumpyRandomizer,
    default_randomizer,
    set_default_randomizer,
    seed_default_randomizer
)
from .errors import (
    LazySeqError,
    InvalidArgumentError,
    LengthMismatchError,
    EmptyInputError
)
from .guard import require_argument, require_non_null

# library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Enumerable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "lazyseq",
    "P",
    "empty_if_absent",
    "absent_if_empty",
    "skip_absent",
    "Pair",
    "Triple",
    "MemoizedEnumerable",
    "natural_order",
    "Randomizer",
    "NumpyRandomizer",
    "default_randomizer",
    "set_default_randomizer",
    "seed_default_randomizer",
    "LazySeqError",
    "InvalidArgumentError",
    "LengthMismatchError",
    "EmptyInputError",
    "require_argument",
    "require_non_null"
]
