"""
Sampling state shared by the samplers of one caller.

A SamplingContext owns everything that outlives a single draw:

- the gaussian spare cache (one slot per numeric type)
- the generator used when a call does not pass one
- the rejection-loop policy
- the metric instruments

Contexts are not synchronized. Give each thread its own context.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from opentelemetry.metrics import MeterProvider

from .config import get_max_rejections
from .generator import UniformSource, default_generator
from .telemetry import SamplerMetrics

logger = logging.getLogger(__name__)


class RejectionLimitError(RuntimeError):
    """Raised when a rejection loop exceeds the context's max_rejections."""

    def __init__(self, distribution: str, attempts: int):
        super().__init__(
            f"{distribution} sampling gave up after {attempts} attempts; "
            "max_rejections was exceeded"
        )
        self.distribution = distribution
        self.attempts = attempts


@dataclass
class GaussianCache:
    """
    Spare standard-normal values left over from Box-Muller pairs.

    Keyed by numeric type name. The stored value is unscaled, so whichever
    gaussian draw comes next for that type consumes it, whatever its mean and
    standard deviation.
    """

    spares: dict[str, Any] = field(default_factory=dict)

    def take(self, numeric: str) -> Any | None:
        """Remove and return the spare for a numeric type, if any."""
        return self.spares.pop(numeric, None)

    def store(self, numeric: str, value: Any) -> None:
        self.spares[numeric] = value

    def clear(self) -> None:
        self.spares.clear()

    def __contains__(self, numeric: str) -> bool:
        return numeric in self.spares


class SamplingContext:
    """Explicit owner of sampling state, threaded through the samplers."""

    def __init__(
        self,
        generator: UniformSource | None = None,
        max_rejections: int | None = None,
        meter_provider: MeterProvider | None = None,
    ):
        self._generator = generator
        self.max_rejections = max_rejections if max_rejections is not None else get_max_rejections()
        if self.max_rejections is not None:
            assert self.max_rejections > 0
        self.gaussian_cache = GaussianCache()
        self.metrics = SamplerMetrics(meter_provider)
        logger.debug("Created sampling context (max_rejections=%s)", self.max_rejections)

    @property
    def generator(self) -> UniformSource:
        """Generator given at construction, else the process-wide default."""
        if self._generator is None:
            return default_generator()
        return self._generator

    def resolve(self, generator: UniformSource | None) -> UniformSource:
        return generator if generator is not None else self.generator

    def check_rejections(self, distribution: str, attempts: int) -> None:
        """Raise RejectionLimitError once attempts exceeds max_rejections."""
        if self.max_rejections is not None and attempts > self.max_rejections:
            logger.warning(
                "Giving up on %s after %d rejected candidates", distribution, attempts
            )
            raise RejectionLimitError(distribution, attempts)


_default_context: SamplingContext | None = None


def default_context() -> SamplingContext:
    """Process-wide context used by samplers built without one."""
    global _default_context
    if _default_context is None:
        _default_context = SamplingContext()
    return _default_context
