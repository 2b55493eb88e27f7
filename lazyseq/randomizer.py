import logging
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from .guard import require_argument, require_non_null

logger = logging.getLogger(__name__)


class Randomizer(ABC):
    """source of uniformly distributed integers, injected into sampling operators"""

    @abstractmethod
    def next(self, bound_exclusive: int) -> int:
        """return an int in [0, bound_exclusive)"""
        pass


class NumpyRandomizer(Randomizer):
    """randomizer backed by a numpy generator; unseeded means seeded from the os."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def next(self, bound_exclusive: int) -> int:
        require_argument("bound_exclusive", bound_exclusive < 1, "must be positive")
        # convert numpy's integer to a native python int
        return int(self._rng.integers(0, bound_exclusive))


_default: Randomizer = NumpyRandomizer()


def default_randomizer() -> Randomizer:
    """the process-wide randomizer used when an operator is given none"""
    return _default


def set_default_randomizer(randomizer: Randomizer) -> None:
    global _default
    require_non_null("randomizer", randomizer)
    logger.debug("default randomizer replaced with %s", type(randomizer).__name__)
    _default = randomizer


def seed_default_randomizer(seed: int) -> None:
    """reseed the default randomizer, mostly for reproducible runs"""
    set_default_randomizer(NumpyRandomizer(seed))
