"""Unit tests for the uniform distribution over intervals of any kind."""

from __future__ import annotations

import logging

import numpy as np
import pytest
from hypothesis import given, settings

from uniform_intervals.math.intervals import (
    INTERVAL_CLOSED_CLOSED,
    INTERVAL_OPEN_CLOSED,
    INTERVAL_OPEN_OPEN,
    IntervalKind,
)
from uniform_intervals.sampling.distributions import UniformDistributionWrapper, uniform

from .strategies.interval_strategies import integer_ranges, interval_kinds


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (IntervalKind.CLOSED_CLOSED, {3, 4, 5, 6, 7}),
        (IntervalKind.CLOSED_OPEN, {3, 4, 5, 6}),
        (IntervalKind.OPEN_CLOSED, {4, 5, 6, 7}),
        (IntervalKind.OPEN_OPEN, {4, 5, 6}),
    ],
)
def test_integer_samples_match_interval(kind: IntervalKind, expected: set[int]) -> None:
    """Verify that integer samples cover exactly the elements of the requested interval."""
    # Arrange - Create a seeded generator and a distribution over the interval between 3 and 7
    rng = np.random.default_rng(seed=0)
    distribution = UniformDistributionWrapper(kind, 3, 7)

    # Act - Draw many samples from the distribution
    samples = distribution.sample(rng, size=2000)

    # Assert - Expect the samples to include every element and exclude every non-element
    assert set(samples.tolist()) == expected


@pytest.mark.parametrize("kind", list(IntervalKind))
def test_float_samples_match_interval(kind: IntervalKind) -> None:
    """Verify that float samples over a few representable values honor the interval's endpoints."""
    # Arrange - Build an interval spanning five consecutive single-precision values
    rng = np.random.default_rng(seed=1)
    values = [np.float32(1.0)]
    for _ in range(4):
        values.append(np.nextafter(values[-1], np.float32(2.0)))
    a, b = values[0], values[-1]
    distribution = UniformDistributionWrapper(kind, a, b)

    # Act - Draw many samples from the distribution
    samples = distribution.sample(rng, size=2000)

    # Assert - Expect exactly the representable values that belong to the interval
    expected = {float(v) for v in values if distribution.interval.contains(v)}
    assert samples.dtype == np.float32
    assert set(samples.tolist()) == expected


def test_closed_unit_interval_can_produce_upper_endpoint() -> None:
    """Verify that the closed interval [0, 1] in single precision can produce exactly 1.0."""
    # Arrange - Create a distribution over [0, 1] and the largest single-precision unit value
    zero, one = np.float32(0.0), np.float32(1.0)
    distribution = UniformDistributionWrapper(INTERVAL_CLOSED_CLOSED, zero, one)
    largest_unit = np.nextafter(np.float32(1.0), np.float32(0.0))

    # Act - Map the largest unit value onto the sampler's range
    value = distribution.sampler.from_unit(largest_unit)

    # Assert - Expect the closed upper endpoint
    assert value == np.float32(1.0)
    assert distribution.interval.contains(value)


@settings(max_examples=50)
@given(interval_kinds(), integer_ranges(-50, 50))
def test_integer_samples_stay_within_interval(kind: IntervalKind, ab: tuple[int, int]) -> None:
    """Verify that integer samples never fall outside the requested interval."""
    # Arrange - Create a distribution over any non-empty integer interval
    a, b = ab
    distribution = UniformDistributionWrapper(kind, a, b)
    if distribution.interval.is_empty:
        return

    # Act - Draw samples with a seeded generator
    samples = distribution.sample(np.random.default_rng(seed=2), size=200)

    # Assert - Expect every sample to be an element of the interval
    assert all(distribution.interval.contains(x) for x in samples.tolist())


def test_distribution_exposes_normalized_bounds() -> None:
    """Verify that the distribution reports the bounds given to its sampler."""
    # Arrange/Act - Create a distribution over the open interval (3, 7)
    distribution = UniformDistributionWrapper("()", 3, 7)

    # Assert - Expect the parsed kind, the normalized bounds, and a readable representation
    assert distribution.kind is INTERVAL_OPEN_OPEN
    assert (distribution.lo, distribution.hi) == (4, 6)
    assert distribution.bounds == "[4, 6]"
    assert repr(distribution) == "UniformDistributionWrapper((3, 7))"


def test_distribution_warns_about_empty_ranges(caplog: pytest.LogCaptureFixture) -> None:
    """Verify that constructing a distribution over an empty interval logs a warning."""
    # Arrange/Act - Create a distribution over an open interval without any integers
    with caplog.at_level(logging.WARNING, logger="uniform_intervals"):
        distribution = UniformDistributionWrapper(INTERVAL_OPEN_CLOSED, 5, 5)

    # Assert - Expect a warning, and the (empty) normalized range to be unchanged
    assert "empty range" in caplog.text
    assert (distribution.lo, distribution.hi) == (6, 5)


def test_distribution_warns_about_infinite_ranges(caplog: pytest.LogCaptureFixture) -> None:
    """Verify that a closed interval ending at the largest finite float logs a warning."""
    # Arrange/Act - Create a distribution over [0, max_finite]
    with caplog.at_level(logging.WARNING, logger="uniform_intervals"):
        max_double = np.finfo(float).max
        distribution = UniformDistributionWrapper(INTERVAL_CLOSED_CLOSED, 0.0, max_double)

    # Assert - Expect a warning about the out-of-contract infinite bound
    assert "non-finite range" in caplog.text
    assert distribution.hi == np.inf


def test_uniform_defaults_to_closed_open() -> None:
    """Verify that uniform() draws from [a, b) unless another interval kind is requested."""
    # Arrange - Create a seeded generator
    rng = np.random.default_rng(seed=3)

    # Act - Draw single values from [0, 2) and from the closed interval [0, 1]
    default_draws = {uniform(rng, 0, 2) for _ in range(200)}
    closed_draws = {uniform(rng, 0, 1, kind=INTERVAL_CLOSED_CLOSED) for _ in range(200)}

    # Assert - Expect the excluded upper endpoint to be missing only from the half-open draws
    assert default_draws == {0, 1}
    assert closed_draws == {0, 1}
    assert 0.0 <= uniform(None, 0.0, 1.0) < 1.0
