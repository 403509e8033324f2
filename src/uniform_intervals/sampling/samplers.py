"""Define uniform samplers with the native contracts assumed by the interval normalizer.

- UniformIntSampler draws integers from the closed range [lo, hi].
- UniformRealSampler draws floats from the half-open range [lo, hi).

Both samplers draw from a NumPy random number generator and return values of the same type as
their bounds (Python scalars stay Python scalars, NumPy scalars keep their dtype).
"""

from __future__ import annotations

from typing import Union

import numpy as np

from uniform_intervals.math.numeric import Integer, NumericDomain, Real, next_after, numeric_domain

MAX_UINT64 = (1 << 64) - 1
"""Largest span (hi - lo) that can be sampled for unbounded Python integers."""

MAX_GRID_SIZE = 64
"""Largest count of floats in [lo, hi) for which samples are drawn by index instead of scaling."""


class UniformIntSampler:
    """A sampler drawing integers uniformly from the closed range [lo, hi]."""

    def __init__(self, lo: Integer, hi: Integer) -> None:
        """Initialize the sampler with its inclusive bounds."""
        self.lo = lo
        self.hi = hi

    def sample(
        self,
        rng: np.random.Generator | None = None,
        size: int | tuple[int, ...] | None = None,
    ) -> Integer | np.ndarray:
        """Sample integers uniformly from the range [lo, hi].

        :param rng: Optional NumPy random number generator; defaults to np.random.default_rng()
        :param size: Optional output shape; if None, a single integer is returned
        :return: Integer(s) drawn uniformly from [lo, hi]
        :raises ValueError: If the range is empty, or too wide to sample for Python integers
        """
        rng = np.random.default_rng() if rng is None else rng

        if isinstance(self.lo, np.integer):
            return rng.integers(self.lo, self.hi, size=size, dtype=type(self.lo), endpoint=True)

        # Python ints are unbounded, so draw an offset from lo rather than the value itself
        span = self.hi - self.lo
        if span > MAX_UINT64:
            raise ValueError(f"Cannot sample from [{self.lo}, {self.hi}]: range exceeds 64 bits.")
        if span < 0:
            raise ValueError(f"Cannot sample from empty range [{self.lo}, {self.hi}].")

        offsets = rng.integers(0, span, size=size, dtype=np.uint64, endpoint=True)
        if size is None:
            return self.lo + int(offsets)
        return offsets.astype(object) + self.lo


class UniformRealSampler:
    """A sampler drawing floats uniformly from the half-open range [lo, hi)."""

    def __init__(self, lo: Real, hi: Real) -> None:
        """Initialize the sampler with its inclusive lower bound and exclusive upper bound."""
        self.lo = lo
        self.hi = hi
        self.dtype = np.dtype(type(lo))
        self.grid = self._enumerate_values()

    def _enumerate_values(self) -> list[Real] | None:
        """List the representable values in [lo, hi), or return None if there are too many."""
        if not self.lo < self.hi:
            return None

        values = [self.lo]
        while len(values) <= MAX_GRID_SIZE:
            value = next_after(values[-1], self.hi)
            if not value < self.hi:
                return values
            values.append(value)
        return None

    def from_unit(self, u: Real | np.ndarray) -> Real | np.ndarray:
        """Map value(s) from the unit range [0, 1) onto [lo, hi] in the type of the bounds.

        Rounding may map values of u close to 1 onto hi itself; sample() redraws those.
        Rounding to nearest gives lo half the weight of each interior value, which is only
        noticeable for ranges holding a few values; sample() draws those from self.grid instead.

        :param u: Value(s) in [0, 1)
        :return: Corresponding value(s) lo + (hi - lo) * u
        """
        if isinstance(u, np.ndarray):
            u = u.astype(self.dtype, copy=False)
        else:
            u = type(self.lo)(u)

        with np.errstate(over="ignore", invalid="ignore"):
            span = self.hi - self.lo
            if np.isfinite(span):
                return self.lo + span * u
            return self.lo * (1 - u) + self.hi * u  # Span overflowed, so interpolate instead

    def _draw_units(
        self,
        rng: np.random.Generator,
        size: int | tuple[int, ...] | None,
    ) -> Real | np.ndarray:
        """Draw value(s) uniformly from [0, 1) with at least the precision of the bounds."""
        unit_dtype = np.float32 if self.dtype == np.float32 else np.float64
        return rng.random(size=size, dtype=unit_dtype)

    def sample(
        self,
        rng: np.random.Generator | None = None,
        size: int | tuple[int, ...] | None = None,
    ) -> Real | np.ndarray:
        """Sample floats uniformly from the range [lo, hi).

        If the range holds no values (lo >= hi), lo is returned without drawing from the generator.

        :param rng: Optional NumPy random number generator; defaults to np.random.default_rng()
        :param size: Optional output shape; if None, a single float is returned
        :return: Float(s) drawn uniformly from [lo, hi)
        :raises ValueError: If either bound is infinite or NaN
        """
        rng = np.random.default_rng() if rng is None else rng

        if not (np.isfinite(self.lo) and np.isfinite(self.hi)):
            raise ValueError(f"Cannot sample from [{self.lo}, {self.hi}): bounds must be finite.")
        if not self.lo < self.hi:
            if size is None:
                return self.lo
            return np.full(size, self.lo, dtype=self.dtype)

        if self.grid is not None:
            indices = rng.integers(len(self.grid), size=size)
            if size is None:
                return self.grid[int(indices)]
            return np.array(self.grid, dtype=self.dtype)[indices]

        if size is None:
            while True:
                value = self.from_unit(self._draw_units(rng, None))
                if self.lo <= value < self.hi:
                    return value

        values = self.from_unit(self._draw_units(rng, size))
        rejected = ~((self.lo <= values) & (values < self.hi))
        while np.any(rejected):
            redrawn = self._draw_units(rng, int(np.count_nonzero(rejected)))
            values[rejected] = self.from_unit(redrawn)
            rejected = ~((self.lo <= values) & (values < self.hi))
        return values


UniformSampler = Union[UniformIntSampler, UniformRealSampler]


def uniform_sampler(lo: Integer | Real, hi: Integer | Real) -> UniformSampler:
    """Construct the uniform sampler matching the numeric domain of the given bounds."""
    if numeric_domain(lo, hi) is NumericDomain.INTEGER:
        return UniformIntSampler(lo, hi)
    return UniformRealSampler(lo, hi)
