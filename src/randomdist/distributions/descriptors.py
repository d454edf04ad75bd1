"""
Immutable descriptors of the supported distributions.

A descriptor only names a distribution and holds its parameters. The numeric
type of the result is chosen by the sampler, which coerces the parameters
when it draws. Parameter preconditions are documented per class and
asserted by the samplers, not here.
"""

from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(frozen=True)
class Pareto:
    """
    Pareto distribution - heavy-tailed, power-law sizes.

    https://en.wikipedia.org/wiki/Pareto_distribution
    scale > 0, shape > 0.
    """

    scale: Any
    shape: Any

    name: ClassVar[str] = "pareto"


@dataclass(frozen=True)
class Weibull:
    """
    Weibull distribution - time to failure.

    https://en.wikipedia.org/wiki/Weibull_distribution
    scale > 0, shape > 0.
    """

    scale: Any
    shape: Any

    name: ClassVar[str] = "weibull"


@dataclass(frozen=True)
class Gaussian:
    """Gaussian (normal) distribution. https://en.wikipedia.org/wiki/Normal_distribution"""

    mean: Any = 0
    standard_deviation: Any = 1

    name: ClassVar[str] = "gaussian"

    @classmethod
    def standard(cls) -> "Gaussian":
        """Gaussian with mean 0 and standard deviation 1."""
        return cls(0, 1)


@dataclass(frozen=True)
class LogNormal:
    """
    Log-normal distribution: exp of a gaussian with the given mean and sd.

    https://en.wikipedia.org/wiki/Log-normal_distribution
    """

    mean: Any = 0
    standard_deviation: Any = 1

    name: ClassVar[str] = "log_normal"


@dataclass(frozen=True)
class Exponential:
    """
    Exponential distribution - time between events.

    https://en.wikipedia.org/wiki/Exponential_distribution
    rate > 0.
    """

    rate: Any

    name: ClassVar[str] = "exponential"


@dataclass(frozen=True)
class Gamma:
    """
    Gamma distribution. https://en.wikipedia.org/wiki/Gamma_distribution

    rate > 0, shape > 0. The rejection sampler accepts quickly only for
    shape comfortably above 1.
    """

    rate: Any
    shape: Any

    name: ClassVar[str] = "gamma"


@dataclass(frozen=True)
class Beta:
    """Beta distribution on [0, 1]. https://en.wikipedia.org/wiki/Beta_distribution"""

    shape1: Any
    shape2: Any

    name: ClassVar[str] = "beta"


@dataclass(frozen=True)
class Uniform:
    """Continuous uniform distribution over [min, max], both bounds included."""

    min: Any
    max: Any

    name: ClassVar[str] = "uniform"

    @classmethod
    def within(cls, bounds: tuple[Any, Any]) -> "Uniform":
        """Uniform distribution over a closed (low, high) pair."""
        low, high = bounds
        return cls(low, high)


ContinuousDistribution = (
    Pareto | Weibull | Gaussian | LogNormal | Exponential | Gamma | Beta | Uniform
)


@dataclass(frozen=True)
class Bernoulli:
    """
    Bernoulli distribution - single binary outcome.

    https://en.wikipedia.org/wiki/Bernoulli_distribution
    probability within the probability type's range.
    """

    probability: Any

    name: ClassVar[str] = "bernoulli"


@dataclass(frozen=True)
class Binomial:
    """
    Binomial distribution - successes in a fixed number of Bernoulli trials.

    https://en.wikipedia.org/wiki/Binomial_distribution
    trials >= 0.
    """

    trials: int
    probability: Any

    name: ClassVar[str] = "binomial"


@dataclass(frozen=True)
class Geometric:
    """
    Geometric distribution - failures before the first success.

    https://en.wikipedia.org/wiki/Geometric_distribution
    Sampling never ends for probability 0. A context with max_rejections
    counts each failure against the cap, so a valid draw whose value exceeds
    max_rejections raises RejectionLimitError: the cap truncates the tail.
    """

    probability: Any

    name: ClassVar[str] = "geometric"


@dataclass(frozen=True)
class Poisson:
    """
    Poisson distribution - count of events in a fixed interval.

    https://en.wikipedia.org/wiki/Poisson_distribution
    frequency > 0 and exp(-frequency) must not underflow to zero.
    """

    frequency: Any

    name: ClassVar[str] = "poisson"


@dataclass(frozen=True)
class DiscreteUniform:
    """Discrete uniform distribution over [min, max], both bounds included."""

    min: Any
    max: Any

    name: ClassVar[str] = "discrete_uniform"

    @classmethod
    def within(cls, bounds: tuple[Any, Any]) -> "DiscreteUniform":
        low, high = bounds
        return cls(low, high)


DiscreteDistribution = Bernoulli | Binomial | Geometric | Poisson | DiscreteUniform
