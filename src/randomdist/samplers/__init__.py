"""Samplers turning uniform draws into variates of named distributions."""

from .base import Sampler
from .continuous import ContinuousSampler
from .discrete import DiscreteSampler
from .sequence import VariateSequence, draw_many

__all__ = [
    "Sampler",
    "ContinuousSampler",
    "DiscreteSampler",
    "VariateSequence",
    "draw_many",
]
