"""Common sampler surface: single draws, lazy sequences and fixed-size lists."""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import partial
from typing import Any

from ..context import SamplingContext, default_context
from ..distributions import Descriptor
from ..generator import UniformSource
from .sequence import VariateSequence, draw_many


class Sampler(ABC):
    """Base class for samplers bound to a SamplingContext."""

    def __init__(self, context: SamplingContext | None = None):
        self.context = context if context is not None else default_context()

    @abstractmethod
    def sample(self, distribution: Any, generator: UniformSource | None = None) -> Any:
        """Draw a single variate from ``distribution``."""
        pass

    def sequence(
        self,
        distribution: Descriptor,
        max_count: int | None = None,
        generator: UniformSource | None = None,
    ) -> VariateSequence[Any]:
        """Lazy sequence of variates; unbounded unless ``max_count`` is given."""
        generator = self.context.resolve(generator)
        return VariateSequence(partial(self.sample, distribution, generator), max_count)

    def draw_many(
        self,
        count: int,
        distribution: Descriptor,
        generator: UniformSource | None = None,
    ) -> list[Any]:
        """List of exactly ``count`` variates."""
        return draw_many(self, count, distribution, generator)
