"""Descriptive statistics for sampled data."""

from .moments import DistributionMoment

__all__ = [
    "DistributionMoment",
]
