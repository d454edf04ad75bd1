"""
Numeric capabilities that sampling algorithms are written against.

The samplers never call ``math`` or ``numpy`` directly. They go through a
numeric type object, so the same algorithm runs for every floating width:

- NumericType: arithmetic values plus sqrt/log/exp/pow and a closed-range draw
- ProbabilityType: ordered values with a canonical [0, 1] range, used for
  Bernoulli probabilities and Poisson frequencies
- OutcomeType: values a discrete distribution can produce (zero, one, +, *)

Floating types wrap numpy scalars so that log(0), division by zero and
overflow produce inf/nan instead of raising.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from .generator import UniformSource


class NumericType(ABC):
    """Values a continuous distribution can be sampled in."""

    name: str

    @abstractmethod
    def coerce(self, value: Any) -> Any:
        """Convert a parameter or a raw draw to this type."""
        pass

    @abstractmethod
    def sqrt(self, value: Any) -> Any:
        pass

    @abstractmethod
    def log(self, value: Any) -> Any:
        """Natural logarithm."""
        pass

    @abstractmethod
    def exp(self, value: Any) -> Any:
        pass

    @abstractmethod
    def pow(self, base: Any, exponent: Any) -> Any:
        pass

    @abstractmethod
    def random_within(self, low: Any, high: Any, generator: UniformSource) -> Any:
        """Draw one value uniformly from the closed range [low, high]."""
        pass

    def ieee(self) -> AbstractContextManager[Any]:
        """Context in which arithmetic degeneracies propagate silently."""
        return np.errstate(all="ignore")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class ProbabilityType(ABC):
    """Values usable as a Bernoulli probability or Poisson frequency."""

    name: str

    @property
    @abstractmethod
    def probability_range(self) -> tuple[Any, Any]:
        """Closed range of legal probabilities, usually (0, 1)."""
        pass

    @abstractmethod
    def coerce(self, value: Any) -> Any:
        pass

    @abstractmethod
    def exp(self, value: Any) -> Any:
        pass

    @abstractmethod
    def random_within(self, low: Any, high: Any, generator: UniformSource) -> Any:
        pass

    def random_probability(self, generator: UniformSource) -> Any:
        """Draw a value within probability_range, comparable to a probability parameter."""
        low, high = self.probability_range
        return self.random_within(low, high, generator)

    def ieee(self) -> AbstractContextManager[Any]:
        return np.errstate(all="ignore")


class OutcomeType(ABC):
    """Values a discrete distribution can produce."""

    name: str

    @property
    @abstractmethod
    def bernoulli_values(self) -> tuple[Any, Any]:
        """The (failure, success) pair, e.g. (0, 1)."""
        pass

    @property
    def zero(self) -> Any:
        return self.bernoulli_values[0]

    @property
    def one(self) -> Any:
        return self.bernoulli_values[1]

    def add(self, lhs: Any, rhs: Any) -> Any:
        return lhs + rhs

    def multiply(self, lhs: Any, rhs: Any) -> Any:
        return lhs * rhs

    @abstractmethod
    def coerce(self, value: Any) -> Any:
        pass

    @abstractmethod
    def random_within(self, low: Any, high: Any, generator: UniformSource) -> Any:
        pass


class FloatingPoint(NumericType, ProbabilityType):
    """
    IEEE floating point type backed by a numpy scalar dtype.

    One instance exists per width (FLOAT64, FLOAT32). Results stay in the
    wrapped dtype as long as every operand has been coerced first.
    """

    def __init__(self, dtype: type[np.floating[Any]]):
        self.dtype = dtype
        self.name = np.dtype(dtype).name

    @property
    def probability_range(self) -> tuple[Any, Any]:
        return self.dtype(0), self.dtype(1)

    def coerce(self, value: Any) -> Any:
        return self.dtype(value)

    def sqrt(self, value: Any) -> Any:
        return np.sqrt(self.dtype(value))

    def log(self, value: Any) -> Any:
        return np.log(self.dtype(value))

    def exp(self, value: Any) -> Any:
        return np.exp(self.dtype(value))

    def pow(self, base: Any, exponent: Any) -> Any:
        return np.power(self.dtype(base), self.dtype(exponent))

    def random_within(self, low: Any, high: Any, generator: UniformSource) -> Any:
        return self.dtype(generator.uniform(float(low), float(high)))


class Integral(OutcomeType):
    """Integer outcomes. ``dtype=None`` uses unbounded Python ints."""

    def __init__(self, dtype: type[np.integer[Any]] | None = None):
        self.dtype = dtype
        self.name = np.dtype(dtype).name if dtype is not None else "int"

    @property
    def bernoulli_values(self) -> tuple[Any, Any]:
        return self.coerce(0), self.coerce(1)

    def coerce(self, value: Any) -> Any:
        if self.dtype is None:
            return int(value)
        return self.dtype(value)

    def random_within(self, low: Any, high: Any, generator: UniformSource) -> Any:
        return self.coerce(generator.integer(int(low), int(high)))

    def __repr__(self) -> str:
        return f"Integral({self.name!r})"


FLOAT64 = FloatingPoint(np.float64)
FLOAT32 = FloatingPoint(np.float32)
INT = Integral()
INT64 = Integral(np.int64)
