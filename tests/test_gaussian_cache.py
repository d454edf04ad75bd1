"""Tests for the Box-Muller spare cache held by SamplingContext."""

import math

import pytest

from randomdist import FLOAT32, FLOAT64, ContinuousSampler, GaussianCache, SamplingContext


def test_second_draw_consumes_cached_spare(counting_generator) -> None:
    """Two consecutive draws run the Box-Muller loop once in total."""
    context = SamplingContext(generator=counting_generator)
    sampler = ContinuousSampler(context=context)

    sampler.gaussian()
    first_draws = counting_generator.draws
    assert first_draws >= 2
    assert first_draws % 2 == 0
    assert FLOAT64.name in context.gaussian_cache

    sampler.gaussian()
    assert counting_generator.draws == first_draws
    assert FLOAT64.name not in context.gaussian_cache

    sampler.gaussian()
    assert counting_generator.draws > first_draws


def test_spare_is_rescaled_by_the_next_draw(scripted) -> None:
    """The cached value is a raw standard normal; mean and sd apply on retrieval."""
    # (0.75, 0.5) -> x1 = 0.5, x2 = 0.0, w = 0.25: spare is exactly 0
    context = SamplingContext(generator=scripted([0.75, 0.5]))
    sampler = ContinuousSampler(context=context)

    first = sampler.gaussian(0.0, 1.0)
    assert first == pytest.approx(0.5 * (-2 * math.log(0.25) / 0.25) ** 0.5)
    assert sampler.gaussian(5.0, 2.0) == 5.0


def test_rejected_pairs_are_redrawn(scripted) -> None:
    """Pairs outside the unit circle are discarded before the accepted one."""
    source = scripted([1.0, 1.0, 0.75, 0.5])
    sampler = ContinuousSampler(context=SamplingContext(generator=source))
    sampler.gaussian()
    assert source.position == 4


def test_log_normal_shares_the_gaussian_spare(counting_generator) -> None:
    """A log-normal draw consumes the spare left by a gaussian draw."""
    context = SamplingContext(generator=counting_generator)
    sampler = ContinuousSampler(context=context)
    sampler.gaussian()
    draws = counting_generator.draws
    assert sampler.log_normal() > 0
    assert counting_generator.draws == draws


def test_cache_is_per_numeric_type(counting_generator) -> None:
    """float32 and float64 draws keep separate spares."""
    context = SamplingContext(generator=counting_generator)
    ContinuousSampler(FLOAT64, context).gaussian()
    draws = counting_generator.draws

    ContinuousSampler(FLOAT32, context).gaussian()
    assert counting_generator.draws > draws
    assert FLOAT64.name in context.gaussian_cache
    assert FLOAT32.name in context.gaussian_cache


def test_samplers_sharing_a_context_share_the_cache(counting_generator) -> None:
    """Two samplers on one context consume each other's spares."""
    context = SamplingContext(generator=counting_generator)
    ContinuousSampler(context=context).gaussian()
    draws = counting_generator.draws
    ContinuousSampler(context=context).gaussian()
    assert counting_generator.draws == draws


def test_contexts_do_not_share_the_cache(counting_generator) -> None:
    """Separate contexts each run their own Box-Muller loop."""
    ContinuousSampler(context=SamplingContext(generator=counting_generator)).gaussian()
    draws = counting_generator.draws
    ContinuousSampler(context=SamplingContext(generator=counting_generator)).gaussian()
    assert counting_generator.draws > draws


def test_gaussian_cache_take_clears_slot() -> None:
    """take() empties the slot it returns."""
    cache = GaussianCache()
    cache.store("float64", 1.5)
    assert cache.take("float64") == 1.5
    assert cache.take("float64") is None
    cache.store("float32", 2.0)
    cache.clear()
    assert "float32" not in cache
