"""Distribution descriptors and their configuration factory."""

from .descriptors import (
    Bernoulli,
    Beta,
    Binomial,
    ContinuousDistribution,
    DiscreteDistribution,
    DiscreteUniform,
    Exponential,
    Gamma,
    Gaussian,
    Geometric,
    LogNormal,
    Pareto,
    Poisson,
    Uniform,
    Weibull,
)
from .factory import Descriptor, DistributionFactory, load_distributions

__all__ = [
    "ContinuousDistribution",
    "Pareto",
    "Weibull",
    "Gaussian",
    "LogNormal",
    "Exponential",
    "Gamma",
    "Beta",
    "Uniform",
    "DiscreteDistribution",
    "Bernoulli",
    "Binomial",
    "Geometric",
    "Poisson",
    "DiscreteUniform",
    "Descriptor",
    "DistributionFactory",
    "load_distributions",
]
