"""
Lazy sequences of variates.

A VariateSequence pulls one sample per ``next()``. Unbounded sequences never
raise StopIteration; bounded ones stop after ``max_count`` items and stay
exhausted. Sequences cannot be rewound; build a new one to sample again.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from ..distributions import Descriptor
    from ..generator import UniformSource
    from .base import Sampler

T = TypeVar("T")


class VariateSequence(Iterator[T], Generic[T]):
    """Iterator over samples produced by a bound sampling callable."""

    def __init__(self, sample: Callable[[], T], max_count: int | None = None):
        if max_count is not None:
            assert max_count >= 0
        self._sample = sample
        self.max_count = max_count
        self.emitted = 0

    @property
    def bounded(self) -> bool:
        return self.max_count is not None

    @property
    def exhausted(self) -> bool:
        return self.max_count is not None and self.emitted >= self.max_count

    def __iter__(self) -> VariateSequence[T]:
        return self

    def __next__(self) -> T:
        if self.exhausted:
            raise StopIteration
        value = self._sample()
        self.emitted += 1
        return value

    def __length_hint__(self) -> int:
        if self.max_count is None:
            return NotImplemented
        return self.max_count - self.emitted


def draw_many(
    sampler: Sampler,
    count: int,
    distribution: Descriptor,
    generator: UniformSource | None = None,
) -> list[Any]:
    """Collect exactly ``count`` samples of ``distribution`` into a list."""
    assert count >= 0
    return list(sampler.sequence(distribution, max_count=count, generator=generator))
