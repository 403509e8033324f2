"""Define strategies for generating interval kinds and endpoints for property-based testing."""

from __future__ import annotations

import hypothesis.strategies as st
import numpy as np
from hypothesis import assume

from uniform_intervals.math.intervals import IntervalKind

NUMPY_INTEGER_TYPES = [
    np.int8,
    np.int16,
    np.int32,
    np.int64,
    np.uint8,
    np.uint16,
    np.uint32,
    np.uint64,
]
"""Fixed-width NumPy integer types accepted as interval endpoints."""

FLOAT_WIDTHS = {np.float16: 16, np.float32: 32, np.float64: 64, float: 64}
"""Bit widths of the floating-point types accepted as interval endpoints."""


def interval_kinds() -> st.SearchStrategy[IntervalKind]:
    """Generate any of the four interval kinds."""
    return st.sampled_from(list(IntervalKind))


@st.composite
def integer_ranges(draw: st.DrawFn, min_value: int, max_value: int) -> tuple[int, int]:
    """Generate random [a,b] ranges of Python integers."""
    a = draw(st.integers(min_value=min_value, max_value=max_value))
    b = draw(st.integers(min_value=min_value, max_value=max_value))
    return (min(a, b), max(a, b))


@st.composite
def numpy_integer_ranges(draw: st.DrawFn) -> tuple[np.integer, np.integer]:
    """Generate random [a,b] ranges of NumPy integers, away from the limits of their type."""
    int_type = draw(st.sampled_from(NUMPY_INTEGER_TYPES))
    info = np.iinfo(int_type)
    a, b = draw(integer_ranges(int(info.min) + 1, int(info.max) - 1))
    return (int_type(a), int_type(b))


@st.composite
def float_ranges(draw: st.DrawFn, strict: bool = False) -> tuple[float, float]:
    """Generate random [a,b] ranges of finite floats of any supported type.

    :param strict: Whether the generated range must satisfy a < b (default: False)
    """
    float_type = draw(st.sampled_from(list(FLOAT_WIDTHS)))
    finite_floats = st.floats(
        allow_nan=False,
        allow_infinity=False,
        width=FLOAT_WIDTHS[float_type],
    )
    a = float_type(draw(finite_floats))
    b = float_type(draw(finite_floats))
    if strict:
        assume(a != b)
    return (min(a, b), max(a, b))
