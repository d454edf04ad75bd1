"""
Uniform random sources consumed by the samplers.

The samplers only ever ask for one value in a closed range. Anything that
implements UniformSource can drive them; RandomGenerator wraps the standard
library Mersenne Twister.
"""

import logging
import random
from abc import ABC, abstractmethod

from .config import get_default_seed

logger = logging.getLogger(__name__)


class UniformSource(ABC):
    """Source of uniformly distributed draws over closed ranges."""

    @abstractmethod
    def uniform(self, low: float, high: float) -> float:
        """Return a float v with low <= v <= high."""
        pass

    @abstractmethod
    def integer(self, low: int, high: int) -> int:
        """Return an int v with low <= v <= high."""
        pass


class RandomGenerator(UniformSource):
    """UniformSource backed by ``random.Random``."""

    def __init__(self, seed: int | None = None):
        self._random = random.Random(seed)

    def seed(self, seed: int | None) -> None:
        """Reseed the underlying generator."""
        self._random.seed(seed)

    def uniform(self, low: float, high: float) -> float:
        return self._random.uniform(low, high)

    def integer(self, low: int, high: int) -> int:
        return self._random.randint(low, high)


_default_generator: RandomGenerator | None = None


def default_generator() -> RandomGenerator:
    """Process-wide generator, seeded from RANDOMDIST_SEED on first use."""
    global _default_generator
    if _default_generator is None:
        seed = get_default_seed()
        logger.debug("Creating default generator (seed=%s)", seed)
        _default_generator = RandomGenerator(seed)
    return _default_generator
