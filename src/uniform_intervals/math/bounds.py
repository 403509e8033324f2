"""Define functions translating an interval of any kind into the range expected by uniform samplers.

Uniform samplers have a fixed native contract: integers are drawn from a closed range [lo, hi], and
floats are drawn from a half-open range [lo, hi). For any interval kind, the functions

    lower_bound(kind, a, b)  and  upper_bound(kind, a, b)

compute (lo, hi) such that sampling uniformly from (lo, hi) under the sampler's native contract is
equivalent to sampling uniformly from the interval denoted by (kind, a, b). Conceptually:

    [a, b] == [lower_bound(CLOSED_CLOSED, a, b), upper_bound(CLOSED_CLOSED, a, b)]
    (a, b) == [lower_bound(OPEN_OPEN, a, b), upper_bound(OPEN_OPEN, a, b)]
    [a, b) == [lower_bound(CLOSED_OPEN, a, b), upper_bound(CLOSED_OPEN, a, b)]
    (a, b] == [lower_bound(OPEN_CLOSED, a, b), upper_bound(OPEN_CLOSED, a, b)]

Integers step by exactly one. Floats step by one representable value (one ULP), so the results stay
exact across zero, across subnormals, and near the largest finite value.

Callers are trusted: empty intervals produce lo > hi, NumPy integers wrap at their limits, and a
closed upper endpoint at the largest finite float becomes +inf. None of these are rejected here.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic

import numpy as np

from uniform_intervals.math.intervals import IntervalKind, IntervalKindLike, NumT
from uniform_intervals.math.numeric import (
    NumericDomain,
    cast_like,
    next_after,
    numeric_domain,
    positive_infinity,
    wrapping_decrement,
    wrapping_increment,
)


@dataclass(frozen=True)
class NormalizedRange(Generic[NumT]):
    """A (lo, hi) pair ready for a uniform sampler: [lo, hi] for integers, [lo, hi) for floats."""

    lo: NumT
    hi: NumT
    domain: NumericDomain

    def __iter__(self) -> Iterator[NumT]:
        """Return an iterator over the bounds of the range, so that `lo, hi = normalized` works."""
        return iter((self.lo, self.hi))

    @property
    def is_empty(self) -> bool:
        """Check whether a sampler given this range would have no value to produce."""
        if self.domain is NumericDomain.INTEGER:
            return bool(self.lo > self.hi)
        return not bool(self.lo < self.hi)

    @property
    def is_finite(self) -> bool:
        """Check whether both bounds are finite (always true for integers)."""
        if self.domain is NumericDomain.INTEGER:
            return True
        return bool(np.isfinite(self.lo) and np.isfinite(self.hi))


def lower_bound(kind: IntervalKindLike, a: NumT, b: NumT) -> NumT:
    """Compute the lower bound passed to a uniform sampler to realize the given interval.

    :param kind: Kind of interval (open or closed on either boundary)
    :param a: Left endpoint of the interval
    :param b: Right endpoint of the interval
    :return: a if the interval is closed on the left; otherwise the successor of a (toward b)
    """
    kind = IntervalKind.parse(kind)
    domain = numeric_domain(a, b)

    if not kind.lower_open:
        return a
    if domain is NumericDomain.INTEGER:
        return wrapping_increment(a)
    return next_after(a, cast_like(b, a))


def upper_bound(kind: IntervalKindLike, a: NumT, b: NumT) -> NumT:
    """Compute the upper bound passed to a uniform sampler to realize the given interval.

    :param kind: Kind of interval (open or closed on either boundary)
    :param a: Left endpoint of the interval
    :param b: Right endpoint of the interval
    :return: Integers: b if closed on the right, else b - 1. Floats: b if open on the right,
        else the least representable value greater than b.
    """
    kind = IntervalKind.parse(kind)
    domain = numeric_domain(a, b)
    b = cast_like(b, a)

    if domain is NumericDomain.INTEGER:
        return wrapping_decrement(b) if kind.upper_open else b
    if kind.upper_open:
        return b
    return next_after(b, positive_infinity(b))


def normalize_interval(kind: IntervalKindLike, a: NumT, b: NumT) -> NormalizedRange[NumT]:
    """Compute both bounds passed to a uniform sampler to realize the given interval."""
    return NormalizedRange(
        lo=lower_bound(kind, a, b),
        hi=upper_bound(kind, a, b),
        domain=numeric_domain(a, b),
    )
