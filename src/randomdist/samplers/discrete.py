"""
Sampling algorithms for discrete distributions.

Outcomes are built with OutcomeType arithmetic (zero, one, +) while
probabilities and frequencies stay in their own ProbabilityType, so integer
outcomes can be driven by float32 or float64 probabilities.
"""

from typing import Any

from ..context import SamplingContext
from ..distributions import (
    Bernoulli,
    Binomial,
    DiscreteDistribution,
    DiscreteUniform,
    Geometric,
    Poisson,
)
from ..generator import UniformSource
from ..numeric import FLOAT64, INT, OutcomeType, ProbabilityType
from .base import Sampler


class DiscreteSampler(Sampler):
    """Draw variates of discrete distributions."""

    def __init__(
        self,
        outcome: OutcomeType = INT,
        probability: ProbabilityType = FLOAT64,
        context: SamplingContext | None = None,
    ):
        super().__init__(context)
        self.outcome = outcome
        self.probability = probability

    def sample(
        self, distribution: DiscreteDistribution, generator: UniformSource | None = None
    ) -> Any:
        generator = self.context.resolve(generator)
        p_type = self.probability
        with p_type.ieee():
            match distribution:
                case Bernoulli(probability=p):
                    value = self._bernoulli(p_type.coerce(p), generator)
                case Binomial(trials=n, probability=p):
                    value = self._binomial(n, p_type.coerce(p), generator)
                case Geometric(probability=p):
                    value = self._geometric(p_type.coerce(p), generator)
                case Poisson(frequency=lam):
                    value = self._poisson(p_type.coerce(lam), generator)
                case DiscreteUniform(min=low, max=high):
                    value = self.outcome.random_within(low, high, generator)
                case _:
                    raise TypeError(f"Not a discrete distribution: {distribution!r}")
        self.context.metrics.record_variate(distribution.name, self.outcome.name)
        return value

    def bernoulli(self, probability: Any, generator: UniformSource | None = None) -> Any:
        return self.sample(Bernoulli(probability), generator)

    def binomial(
        self, trials: int, probability: Any, generator: UniformSource | None = None
    ) -> Any:
        return self.sample(Binomial(trials, probability), generator)

    def geometric(self, probability: Any, generator: UniformSource | None = None) -> Any:
        return self.sample(Geometric(probability), generator)

    def poisson(self, frequency: Any, generator: UniformSource | None = None) -> Any:
        return self.sample(Poisson(frequency), generator)

    def uniform(self, low: Any, high: Any, generator: UniformSource | None = None) -> Any:
        return self.sample(DiscreteUniform(low, high), generator)

    def _bernoulli(self, p: Any, generator: UniformSource) -> Any:
        failure, success = self.outcome.bernoulli_values
        x = self.probability.random_probability(generator)
        return success if x < p else failure

    def _binomial(self, trials: int, p: Any, generator: UniformSource) -> Any:
        assert trials >= 0
        total = self.outcome.zero
        for _ in range(trials):
            total = self.outcome.add(total, self._bernoulli(p, generator))
        return total

    def _geometric(self, p: Any, generator: UniformSource) -> Any:
        """Number of failures before the first success; each failure counts against the cap."""
        failure, success = self.outcome.bernoulli_values
        count = failure
        failures = 0
        while self._bernoulli(p, generator) != success:
            count = self.outcome.add(count, success)
            failures += 1
            self.context.check_rejections("geometric", failures)
        return count

    def _poisson(self, lam: Any, generator: UniformSource) -> Any:
        """
        Knuth's recurrence with a single uniform draw.

        The walk stops early once adding the next term no longer changes the
        cumulative sum: exp(-lam) underflowed to 0 for a large frequency, or a
        draw at the top of the range lies above the sum's rounding limit.
        """
        assert lam > 0
        p_type = self.probability
        one_p = p_type.coerce(1)
        x = self.outcome.zero
        x_d = p_type.coerce(0)
        p = p_type.exp(-lam)
        s = p
        u = p_type.random_probability(generator)
        while u > s:
            x = self.outcome.add(x, self.outcome.one)
            x_d = x_d + one_p
            p = p * (lam / x_d)
            total = s + p
            if total == s:
                break
            s = total
        return x
