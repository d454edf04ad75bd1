"""Shared fixtures: seeded contexts and instrumented uniform sources."""

from collections.abc import Callable, Iterable

import pytest

from randomdist import ContinuousSampler, DiscreteSampler, RandomGenerator, SamplingContext
from randomdist.generator import UniformSource

SEED = 20161206


class CountingGenerator(RandomGenerator):
    """RandomGenerator that counts the draws it hands out."""

    def __init__(self, seed: int | None = None):
        super().__init__(seed)
        self.draws = 0

    def uniform(self, low: float, high: float) -> float:
        self.draws += 1
        return super().uniform(low, high)

    def integer(self, low: int, high: int) -> int:
        self.draws += 1
        return super().integer(low, high)


class ScriptedSource(UniformSource):
    """Replays unit draws in order, scaled into the requested range; repeats the last one."""

    def __init__(self, units: Iterable[float]):
        self.units = list(units)
        self.position = 0

    def _next_unit(self) -> float:
        index = min(self.position, len(self.units) - 1)
        self.position += 1
        return self.units[index]

    def uniform(self, low: float, high: float) -> float:
        return low + (high - low) * self._next_unit()

    def integer(self, low: int, high: int) -> int:
        return low + int(round((high - low) * self._next_unit()))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep RANDOMDIST_* settings from the outer environment out of tests."""
    for name in ("RANDOMDIST_SEED", "RANDOMDIST_MAX_REJECTIONS", "RANDOMDIST_CONFIG"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def generator() -> RandomGenerator:
    return RandomGenerator(SEED)


@pytest.fixture
def context(generator: RandomGenerator) -> SamplingContext:
    return SamplingContext(generator=generator)


@pytest.fixture
def continuous(context: SamplingContext) -> ContinuousSampler:
    return ContinuousSampler(context=context)


@pytest.fixture
def discrete(context: SamplingContext) -> DiscreteSampler:
    return DiscreteSampler(context=context)


@pytest.fixture
def counting_generator() -> CountingGenerator:
    return CountingGenerator(SEED)


@pytest.fixture
def scripted() -> Callable[[Iterable[float]], ScriptedSource]:
    return ScriptedSource
