"""Tests for building distributions from configuration."""

from pathlib import Path

import pytest

from randomdist import (
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


@pytest.mark.parametrize(
    ("config", "expected"),
    [
        ({"distribution": "pareto", "scale": 1, "shape": 2}, Pareto(1, 2)),
        ({"distribution": "weibull", "scale": 2, "shape": 3}, Weibull(2, 3)),
        ({"distribution": "normal", "mean": 100, "stddev": 20}, Gaussian(100, 20)),
        ({"distribution": "gaussian"}, Gaussian(0.0, 1.0)),
        ({"distribution": "log-normal", "mu": 1, "sigma": 0.5}, LogNormal(1, 0.5)),
        ({"distribution": "exponential", "lambda": 4}, Exponential(4)),
        ({"distribution": "gamma", "rate": 3, "shape": 3}, Gamma(3, 3)),
        ({"distribution": "beta", "alpha": 2, "beta": 5}, Beta(2, 5)),
        ({"distribution": "uniform", "low": -1, "high": 1}, Uniform(-1, 1)),
        ({"distribution": "Bernoulli", "p": 0.2}, Bernoulli(0.2)),
        ({"distribution": "binomial", "n": "20", "p": 0.25}, Binomial(20, 0.25)),
        ({"distribution": "geometric", "probability": 0.7}, Geometric(0.7)),
        ({"distribution": "poisson", "lambda": 3.5}, Poisson(3.5)),
        ({"distribution": "randint", "min": 1, "max": 6}, DiscreteUniform(1, 6)),
    ],
)
def test_create_from_config(config: dict, expected: object) -> None:
    """Config dicts with aliases and synonyms build the expected descriptor."""
    assert DistributionFactory.create(config) == expected


def test_create_unknown_distribution_raises() -> None:
    """An unknown distribution name is a configuration error."""
    with pytest.raises(ValueError, match="Unknown distribution type: zipf"):
        DistributionFactory.create({"distribution": "zipf"})


def test_create_missing_parameter_names_it() -> None:
    """The error message names the missing parameter."""
    with pytest.raises(ValueError, match="'rate'"):
        DistributionFactory.create({"distribution": "exponential"})


def test_create_requires_distribution_key() -> None:
    """A config without a distribution name is rejected."""
    with pytest.raises(ValueError):
        DistributionFactory.create({"mean": 1})


def test_is_discrete() -> None:
    """Descriptors are classified as discrete or continuous."""
    assert DistributionFactory.is_discrete(Poisson(1.0))
    assert DistributionFactory.is_discrete(DiscreteUniform(0, 1))
    assert not DistributionFactory.is_discrete(Uniform(0, 1))


def test_load_distributions_from_yaml(tmp_path: Path) -> None:
    """Named entries of the distributions mapping become descriptors."""
    path = tmp_path / "distributions.yaml"
    path.write_text(
        "distributions:\n"
        "  latency: {distribution: log_normal, mean: 4.0, standard_deviation: 0.5}\n"
        "  retries: {distribution: geometric, probability: 0.7}\n",
        encoding="utf-8",
    )
    loaded = load_distributions(path)
    assert loaded == {"latency": LogNormal(4.0, 0.5), "retries": Geometric(0.7)}


def test_load_distributions_uses_env_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Without an explicit path RANDOMDIST_CONFIG is used."""
    path = tmp_path / "env.yaml"
    path.write_text("distributions:\n  coin: {distribution: bernoulli, p: 0.5}\n", encoding="utf-8")
    monkeypatch.setenv("RANDOMDIST_CONFIG", str(path))
    assert load_distributions() == {"coin": Bernoulli(0.5)}


def test_load_distributions_without_config_is_empty() -> None:
    """No path and no env variable means no named distributions."""
    assert load_distributions() == {}


def test_load_distributions_missing_file_is_empty(tmp_path: Path) -> None:
    """A missing file yields no named distributions."""
    assert load_distributions(tmp_path / "missing.yaml") == {}


def test_load_distributions_rejects_non_mapping_entry(tmp_path: Path) -> None:
    """Each named entry must be a mapping."""
    path = tmp_path / "bad.yaml"
    path.write_text("distributions:\n  coin: 0.5\n", encoding="utf-8")
    with pytest.raises(ValueError, match="coin"):
        load_distributions(path)
