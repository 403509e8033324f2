"""Define a uniform distribution over an interval that is open or closed on either boundary."""

from __future__ import annotations

import logging
from typing import Generic

import numpy as np

from uniform_intervals.math.bounds import NormalizedRange, normalize_interval
from uniform_intervals.math.intervals import (
    INTERVAL_CLOSED_OPEN,
    IntervalKind,
    IntervalKindLike,
    NumT,
    SemanticInterval,
)
from uniform_intervals.math.numeric import NumericDomain
from uniform_intervals.sampling.samplers import UniformSampler, uniform_sampler

logger = logging.getLogger(__name__)


class UniformDistributionWrapper(Generic[NumT]):
    """A uniform distribution over the interval (kind, a, b), backed by a native uniform sampler.

    The interval is translated once, at construction, into the bounds expected by the underlying
    integer sampler ([lo, hi]) or float sampler ([lo, hi)). Drawing forwards to that sampler.
    """

    def __init__(self, kind: IntervalKindLike, a: NumT, b: NumT) -> None:
        """Initialize the distribution over the interval with the given kind and endpoints.

        :param kind: Kind of interval (open or closed on either boundary)
        :param a: Left endpoint of the interval
        :param b: Right endpoint of the interval
        """
        self.kind = IntervalKind.parse(kind)
        self.interval: SemanticInterval[NumT] = SemanticInterval(self.kind, a, b)
        self.normalized: NormalizedRange[NumT] = normalize_interval(self.kind, a, b)
        self.sampler: UniformSampler = uniform_sampler(self.normalized.lo, self.normalized.hi)

        logger.debug("Uniform distribution over %s samples from %s.", self.interval, self.bounds)
        if self.normalized.is_empty:
            logger.warning(
                "Uniform distribution over %s has an empty range %s.",
                self.interval,
                self.bounds,
            )
        elif not self.normalized.is_finite:
            logger.warning(
                "Uniform distribution over %s has a non-finite range %s.",
                self.interval,
                self.bounds,
            )

    def __repr__(self) -> str:
        """Return a readable representation of the distribution."""
        return f"UniformDistributionWrapper({self.interval})"

    @property
    def lo(self) -> NumT:
        """Retrieve the lower bound given to the underlying sampler."""
        return self.normalized.lo

    @property
    def hi(self) -> NumT:
        """Retrieve the upper bound given to the underlying sampler."""
        return self.normalized.hi

    @property
    def bounds(self) -> str:
        """Describe the range given to the underlying sampler in its native bracket convention."""
        right = "]" if self.normalized.domain is NumericDomain.INTEGER else ")"
        return f"[{self.lo}, {self.hi}{right}"

    def sample(
        self,
        rng: np.random.Generator | None = None,
        size: int | tuple[int, ...] | None = None,
    ) -> NumT | np.ndarray:
        """Sample value(s) uniformly from the interval.

        :param rng: Optional NumPy random number generator; defaults to np.random.default_rng()
        :param size: Optional output shape; if None, a single value is returned
        :return: Value(s) drawn uniformly from the interval
        """
        return self.sampler.sample(rng, size)


def uniform(
    rng: np.random.Generator | None,
    a: NumT,
    b: NumT,
    kind: IntervalKindLike = INTERVAL_CLOSED_OPEN,
) -> NumT:
    """Draw a single value uniformly from the interval (kind, a, b), which defaults to [a, b).

    :param rng: NumPy random number generator (if None, np.random.default_rng() is used)
    :param a: Left endpoint of the interval
    :param b: Right endpoint of the interval
    :param kind: Kind of interval (default: closed on the left, open on the right)
    :return: Value drawn uniformly from the interval
    """
    return UniformDistributionWrapper(kind, a, b).sample(rng)
