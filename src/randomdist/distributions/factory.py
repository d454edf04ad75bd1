"""Build distribution descriptors from configuration dictionaries and YAML files."""

import logging
from pathlib import Path
from typing import Any

from ..config import get_config_path, load_yaml
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

logger = logging.getLogger(__name__)

Descriptor = ContinuousDistribution | DiscreteDistribution

_ALIASES = {
    "normal": "gaussian",
    "lognormal": "log_normal",
    "exp": "exponential",
    "randint": "discrete_uniform",
    "uniform_int": "discrete_uniform",
}


def _param(config: dict[str, Any], dist_type: str, *keys: str, default: Any = None) -> Any:
    """First value present under any of keys; raise if none is and there is no default."""
    for key in keys:
        if key in config:
            return config[key]
    if default is not None:
        return default
    raise ValueError(f"{dist_type} distribution requires '{keys[0]}'")


class DistributionFactory:
    """Factory for creating distribution descriptors from configuration dictionaries."""

    @classmethod
    def create(cls, config: dict[str, Any]) -> Descriptor:
        """
        Create a descriptor from a configuration dictionary.

        Examples:
            # Gaussian distribution
            {"distribution": "normal", "mean": 100, "stddev": 20}

            # Gamma distribution
            {"distribution": "gamma", "rate": 3.0, "shape": 3.0}

            # Binomial distribution
            {"distribution": "binomial", "trials": 20, "p": 0.25}

            # Discrete uniform over 1..6
            {"distribution": "discrete_uniform", "min": 1, "max": 6}
        """
        if "distribution" not in config:
            raise ValueError("Distribution config requires 'distribution'")
        dist_type = str(config["distribution"]).lower().replace("-", "_")
        dist_type = _ALIASES.get(dist_type, dist_type)
        logger.debug("Creating %s distribution from %s", dist_type, config)

        if dist_type == "pareto":
            return Pareto(
                scale=_param(config, dist_type, "scale"),
                shape=_param(config, dist_type, "shape"),
            )

        if dist_type == "weibull":
            return Weibull(
                scale=_param(config, dist_type, "scale"),
                shape=_param(config, dist_type, "shape"),
            )

        if dist_type == "gaussian":
            return Gaussian(
                mean=_param(config, dist_type, "mean", "mu", default=0.0),
                standard_deviation=_param(
                    config, dist_type, "standard_deviation", "stddev", "sd", "sigma", default=1.0
                ),
            )

        if dist_type == "log_normal":
            return LogNormal(
                mean=_param(config, dist_type, "mean", "mu", default=0.0),
                standard_deviation=_param(
                    config, dist_type, "standard_deviation", "stddev", "sd", "sigma", default=1.0
                ),
            )

        if dist_type == "exponential":
            return Exponential(rate=_param(config, dist_type, "rate", "lambda"))

        if dist_type == "gamma":
            return Gamma(
                rate=_param(config, dist_type, "rate"),
                shape=_param(config, dist_type, "shape"),
            )

        if dist_type == "beta":
            return Beta(
                shape1=_param(config, dist_type, "shape1", "alpha", "a"),
                shape2=_param(config, dist_type, "shape2", "beta", "b"),
            )

        if dist_type == "uniform":
            return Uniform(
                min=_param(config, dist_type, "min", "low", default=0.0),
                max=_param(config, dist_type, "max", "high", default=1.0),
            )

        if dist_type == "bernoulli":
            return Bernoulli(probability=_param(config, dist_type, "probability", "p"))

        if dist_type == "binomial":
            return Binomial(
                trials=int(_param(config, dist_type, "trials", "n")),
                probability=_param(config, dist_type, "probability", "p"),
            )

        if dist_type == "geometric":
            return Geometric(probability=_param(config, dist_type, "probability", "p"))

        if dist_type == "poisson":
            return Poisson(frequency=_param(config, dist_type, "frequency", "lambda", "mean"))

        if dist_type == "discrete_uniform":
            return DiscreteUniform(
                min=int(_param(config, dist_type, "min", "low")),
                max=int(_param(config, dist_type, "max", "high")),
            )

        raise ValueError(f"Unknown distribution type: {dist_type}")

    @staticmethod
    def is_discrete(descriptor: Descriptor) -> bool:
        return isinstance(descriptor, Bernoulli | Binomial | Geometric | Poisson | DiscreteUniform)


def load_distributions(path: Path | None = None) -> dict[str, Descriptor]:
    """
    Load named distributions from the ``distributions`` mapping of a YAML file.

    Uses RANDOMDIST_CONFIG when no path is given; returns an empty mapping
    when neither is set.
    """
    path = path or get_config_path()
    if path is None:
        return {}
    data = load_yaml(path)
    raw = data.get("distributions") or {}
    if not isinstance(raw, dict):
        raise ValueError(f"'distributions' in {path} must be a mapping")
    result: dict[str, Descriptor] = {}
    for name, config in raw.items():
        if not isinstance(config, dict):
            raise ValueError(f"Distribution '{name}' in {path} must be a mapping")
        result[str(name)] = DistributionFactory.create(config)
    logger.debug("Loaded %d distributions from %s", len(result), path)
    return result
