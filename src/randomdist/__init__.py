"""
randomdist - variates of named probability distributions.

Converts uniform random draws into samples of continuous (pareto, weibull,
gaussian, log-normal, exponential, gamma, beta, uniform) and discrete
(bernoulli, binomial, geometric, poisson, uniform) distributions, over
float32 or float64 numeric types.
"""

__version__ = "1.0.0"

from .context import GaussianCache, RejectionLimitError, SamplingContext, default_context
from .distributions import (
    Bernoulli,
    Beta,
    Binomial,
    DiscreteUniform,
    DistributionFactory,
    Exponential,
    Gamma,
    Gaussian,
    Geometric,
    LogNormal,
    Pareto,
    Poisson,
    Uniform,
    Weibull,
    load_distributions,
)
from .generator import RandomGenerator, UniformSource, default_generator
from .numeric import FLOAT32, FLOAT64, INT, INT64
from .samplers import ContinuousSampler, DiscreteSampler, VariateSequence, draw_many
from .statistics import DistributionMoment

__all__ = [
    "__version__",
    "SamplingContext",
    "GaussianCache",
    "RejectionLimitError",
    "default_context",
    "Pareto",
    "Weibull",
    "Gaussian",
    "LogNormal",
    "Exponential",
    "Gamma",
    "Beta",
    "Uniform",
    "Bernoulli",
    "Binomial",
    "Geometric",
    "Poisson",
    "DiscreteUniform",
    "DistributionFactory",
    "load_distributions",
    "UniformSource",
    "RandomGenerator",
    "default_generator",
    "FLOAT64",
    "FLOAT32",
    "INT",
    "INT64",
    "ContinuousSampler",
    "DiscreteSampler",
    "VariateSequence",
    "draw_many",
    "DistributionMoment",
]
