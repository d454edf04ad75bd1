"""
Sampling algorithms for continuous distributions.

Every algorithm is written against a NumericType, so the same code produces
float64 or float32 variates. Parameters are coerced to that type before any
arithmetic. Degenerate draws (log of 0, pow of 0 with a negative exponent)
are not special-cased: they yield inf or nan.
"""

from typing import Any

from ..context import SamplingContext
from ..distributions import (
    Beta,
    ContinuousDistribution,
    Exponential,
    Gamma,
    Gaussian,
    LogNormal,
    Pareto,
    Uniform,
    Weibull,
)
from ..generator import UniformSource
from ..numeric import FLOAT64, NumericType
from .base import Sampler


class ContinuousSampler(Sampler):
    """
    Draw variates of continuous distributions in one numeric type.

    Gaussian draws come in pairs from the polar Box-Muller method; the second
    value of each pair is kept in the context's gaussian cache and returned,
    rescaled, by the next gaussian or log-normal draw of the same type.

    Set ``strict_parity`` to use the legacy beta acceptance test
    u2 <= u1^(a-1) * u1^(b-1) instead of the beta density.
    """

    def __init__(
        self,
        numeric: NumericType = FLOAT64,
        context: SamplingContext | None = None,
        strict_parity: bool = False,
    ):
        super().__init__(context)
        self.numeric = numeric
        self.strict_parity = strict_parity

    def sample(
        self, distribution: ContinuousDistribution, generator: UniformSource | None = None
    ) -> Any:
        generator = self.context.resolve(generator)
        t = self.numeric
        with t.ieee():
            match distribution:
                case Pareto(scale=scale, shape=shape):
                    value = self._pareto(t.coerce(scale), t.coerce(shape), generator)
                case Weibull(scale=scale, shape=shape):
                    value = self._weibull(t.coerce(scale), t.coerce(shape), generator)
                case Gaussian(mean=mean, standard_deviation=sd):
                    value = self._gaussian(t.coerce(mean), t.coerce(sd), generator)
                case LogNormal(mean=mean, standard_deviation=sd):
                    value = t.exp(self._gaussian(t.coerce(mean), t.coerce(sd), generator))
                case Exponential(rate=rate):
                    value = self._exponential(t.coerce(rate), generator)
                case Gamma(rate=rate, shape=shape):
                    value = self._gamma(t.coerce(rate), t.coerce(shape), generator)
                case Beta(shape1=shape1, shape2=shape2):
                    value = self._beta(t.coerce(shape1), t.coerce(shape2), generator)
                case Uniform(min=low, max=high):
                    value = t.random_within(t.coerce(low), t.coerce(high), generator)
                case _:
                    raise TypeError(f"Not a continuous distribution: {distribution!r}")
        self.context.metrics.record_variate(distribution.name, t.name)
        return value

    def pareto(self, scale: Any, shape: Any, generator: UniformSource | None = None) -> Any:
        return self.sample(Pareto(scale, shape), generator)

    def weibull(self, scale: Any, shape: Any, generator: UniformSource | None = None) -> Any:
        return self.sample(Weibull(scale, shape), generator)

    def gaussian(
        self, mean: Any = 0, standard_deviation: Any = 1, generator: UniformSource | None = None
    ) -> Any:
        return self.sample(Gaussian(mean, standard_deviation), generator)

    def log_normal(
        self, mean: Any = 0, standard_deviation: Any = 1, generator: UniformSource | None = None
    ) -> Any:
        return self.sample(LogNormal(mean, standard_deviation), generator)

    def exponential(self, rate: Any, generator: UniformSource | None = None) -> Any:
        return self.sample(Exponential(rate), generator)

    def gamma(self, rate: Any, shape: Any, generator: UniformSource | None = None) -> Any:
        return self.sample(Gamma(rate, shape), generator)

    def beta(self, shape1: Any, shape2: Any, generator: UniformSource | None = None) -> Any:
        return self.sample(Beta(shape1, shape2), generator)

    def uniform(self, low: Any, high: Any, generator: UniformSource | None = None) -> Any:
        return self.sample(Uniform(low, high), generator)

    def _unit(self, generator: UniformSource) -> Any:
        return self.numeric.random_within(0, 1, generator)

    def _pareto(self, scale: Any, shape: Any, generator: UniformSource) -> Any:
        assert shape > 0
        assert scale > 0
        t = self.numeric
        one = t.coerce(1)
        u = self._unit(generator)
        return scale * t.pow(one - u, -one / shape)

    def _weibull(self, scale: Any, shape: Any, generator: UniformSource) -> Any:
        assert shape > 0
        assert scale > 0
        t = self.numeric
        one = t.coerce(1)
        u = self._unit(generator)
        return scale * t.pow(-t.log(one - u), one / shape)

    def _gaussian(self, mean: Any, sd: Any, generator: UniformSource) -> Any:
        """Polar Box-Muller; https://en.wikipedia.org/wiki/Marsaglia_polar_method"""
        t = self.numeric
        cache = self.context.gaussian_cache
        spare = cache.take(t.name)
        if spare is not None:
            return mean + spare * sd

        zero, one, two = t.coerce(0), t.coerce(1), t.coerce(2)
        rejected = 0
        while True:
            x1 = two * self._unit(generator) - one
            x2 = two * self._unit(generator) - one
            w = x1 * x1 + x2 * x2
            if w < one and w != zero:
                break
            rejected += 1
            self.context.check_rejections("gaussian", rejected)
        self.context.metrics.record_rejections("gaussian", t.name, rejected)

        multiplier = t.sqrt(-two * t.log(w) / w)
        cache.store(t.name, x2 * multiplier)
        return mean + x1 * multiplier * sd

    def _exponential(self, rate: Any, generator: UniformSource) -> Any:
        assert rate > 0
        t = self.numeric
        u = self._unit(generator)
        return -(t.coerce(1) / rate) * t.log(u)

    def _gamma(self, rate: Any, shape: Any, generator: UniformSource) -> Any:
        t = self.numeric
        one = t.coerce(1)
        lam = rate / shape
        rejected = 0
        while True:
            u = self._unit(generator)
            v = self._exponential(lam, generator)
            if (shape - one) * t.exp(one - lam * v) >= u:
                break
            rejected += 1
            self.context.check_rejections("gamma", rejected)
        self.context.metrics.record_rejections("gamma", t.name, rejected)
        return v

    def _beta(self, shape1: Any, shape2: Any, generator: UniformSource) -> Any:
        one = self.numeric.coerce(1)
        if self.strict_parity or (shape1 > one and shape2 > one):
            return self._beta_envelope(shape1, shape2, generator)
        return self._beta_johnk(shape1, shape2, generator)

    def _beta_envelope(self, shape1: Any, shape2: Any, generator: UniformSource) -> Any:
        """Uniform proposal under a flat envelope at the density's mode."""
        t = self.numeric
        one, two = t.coerce(1), t.coerce(2)
        a1, b1 = shape1 - one, shape2 - one
        total = shape1 + shape2 - two
        max_value = t.pow(a1 / total, a1) * t.pow(b1 / total, b1)
        rejected = 0
        while True:
            u1 = self._unit(generator)
            u2 = t.random_within(0, max_value, generator)
            if self.strict_parity:
                density = t.pow(u1, a1) * t.pow(u1, b1)
            else:
                density = t.pow(u1, a1) * t.pow(one - u1, b1)
            if u2 <= density:
                break
            rejected += 1
            self.context.check_rejections("beta", rejected)
        self.context.metrics.record_rejections("beta", t.name, rejected)
        return u1

    def _beta_johnk(self, shape1: Any, shape2: Any, generator: UniformSource) -> Any:
        """Jöhnk's algorithm, valid for any positive shapes."""
        t = self.numeric
        zero, one = t.coerce(0), t.coerce(1)
        rejected = 0
        while True:
            x = t.pow(self._unit(generator), one / shape1)
            y = t.pow(self._unit(generator), one / shape2)
            s = x + y
            if zero < s <= one:
                break
            rejected += 1
            self.context.check_rejections("beta", rejected)
        self.context.metrics.record_rejections("beta", t.name, rejected)
        return x / s
