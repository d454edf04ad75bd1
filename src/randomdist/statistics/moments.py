"""
Sample moments for checking sampler output against known distributions.

All moments are population moments (divided by n), matching how sampled
data is compared with the theoretical mean and variance.
"""

from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class DistributionMoment:
    """
    Mean, variance, skewness and excess kurtosis of a sample.

    Example:
        m = DistributionMoment.from_data(sampler.draw_many(10000, Gaussian(0, 1)))
        round(m.skewness), round(m.excess_kurtosis)  # (0, 0) for a normal sample
    """

    count: int
    mean: float
    variance: float
    skewness: float
    kurtosis: float

    @property
    def standard_deviation(self) -> float:
        return float(np.sqrt(self.variance))

    @property
    def excess_kurtosis(self) -> float:
        return self.kurtosis - 3.0

    @classmethod
    def from_data(cls, data: Iterable[float]) -> "DistributionMoment":
        values = np.fromiter((float(v) for v in data), dtype=np.float64)
        if values.size == 0:
            raise ValueError("DistributionMoment requires at least one value")
        mean = values.mean()
        deviations = values - mean
        variance = np.mean(deviations**2)
        if variance == 0:
            skewness = kurtosis = float("nan")
        else:
            skewness = np.mean(deviations**3) / variance**1.5
            kurtosis = np.mean(deviations**4) / variance**2
        return cls(
            count=int(values.size),
            mean=float(mean),
            variance=float(variance),
            skewness=float(skewness),
            kurtosis=float(kurtosis),
        )
