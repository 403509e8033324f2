"""Define helpers for the two numeric domains (integers and binary floats) of interval endpoints.

Both Python scalars and NumPy scalars are supported. Every helper returns a value of the same
concrete type as its (first) input, so callers never silently change precision or width.
"""

from __future__ import annotations

import math
import sys
from enum import Enum
from typing import Any, Union

import numpy as np

Integer = Union[int, np.integer]
"""An integer endpoint: a Python int (unbounded) or a fixed-width NumPy integer scalar."""

Real = Union[float, np.floating]
"""A binary floating-point endpoint: a Python float (binary64) or a NumPy floating scalar."""

Number = Union[Integer, Real]
"""Any endpoint accepted by the interval normalizer."""

_SIGNED_VIEWS = {
    np.dtype(np.float16): np.int16,
    np.dtype(np.float32): np.int32,
    np.dtype(np.float64): np.int64,
}
"""Signed integer types sharing a bit width with each IEEE-754 interchange format."""


class NumericDomain(Enum):
    """An enumeration of the numeric domains over which intervals are normalized."""

    INTEGER = 0
    FLOAT = 1


def _domain_of(value: Any) -> NumericDomain:
    """Identify the numeric domain of a single endpoint."""
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"Boolean value {value!r} is not a numeric interval endpoint.")
    if isinstance(value, (int, np.integer)):
        return NumericDomain.INTEGER
    if isinstance(value, (float, np.floating)):
        return NumericDomain.FLOAT
    raise TypeError(f"Expected an integer or floating-point endpoint, got {type(value).__name__}.")


def numeric_domain(a: Any, b: Any) -> NumericDomain:
    """Resolve the shared numeric domain of the endpoints of an interval.

    :param a: Left endpoint of the interval
    :param b: Right endpoint of the interval
    :return: Numeric domain to which both endpoints belong
    :raises TypeError: If either endpoint isn't numeric, or the endpoints mix integers and floats
    """
    domain_a = _domain_of(a)
    domain_b = _domain_of(b)
    if domain_a != domain_b:
        raise TypeError(
            f"Cannot mix numeric domains within one interval: {type(a).__name__} "
            f"and {type(b).__name__}.",
        )
    return domain_a


def cast_like(value: Number, like: Number) -> Number:
    """Convert the given value into the concrete numeric type of `like`."""
    if type(value) is type(like):
        return value
    return type(like)(value)


def next_after(x: Real, y: Real) -> Real:
    """Find the next representable float after x in the direction of y (IEEE-754 nextafter).

    :param x: Starting floating-point value
    :param y: Direction target (converted to the type of x)
    :return: Neighbor of x toward y, with the same type as x (x itself if x == y)
    """
    if isinstance(x, np.floating):
        return np.nextafter(x, cast_like(y, x))
    return math.nextafter(x, y)


def positive_infinity(x: Real) -> Real:
    """Retrieve positive infinity in the floating-point type of x."""
    return type(x)(math.inf)


def max_finite(x: Real) -> Real:
    """Retrieve the largest finite value representable in the floating-point type of x."""
    if isinstance(x, np.floating):
        return np.finfo(type(x)).max
    return sys.float_info.max


def wrapping_increment(x: Integer) -> Integer:
    """Compute x + 1 in the type of x; NumPy integers wrap around at their maximum value."""
    if isinstance(x, np.integer):
        with np.errstate(over="ignore"):
            return x + type(x)(1)
    return x + 1


def wrapping_decrement(x: Integer) -> Integer:
    """Compute x - 1 in the type of x; NumPy integers wrap around at their minimum value."""
    if isinstance(x, np.integer):
        with np.errstate(over="ignore"):
            return x - type(x)(1)
    return x - 1


def float_to_bits(x: Real) -> int:
    """Retrieve the raw IEEE-754 bit pattern of a float as an unsigned integer.

    :param x: Half-, single-, or double-precision float (Python floats are double precision)
    :return: Unsigned integer holding the bits of x (e.g., 0x3F800000 for np.float32(1.0))
    :raises TypeError: If x has no IEEE-754 interchange format (e.g., np.longdouble)
    """
    dtype = np.dtype(type(x))
    if dtype not in _SIGNED_VIEWS:
        raise TypeError(f"Cannot retrieve the bit pattern of a {dtype} value.")

    signed = int(np.array(x, dtype=dtype).view(_SIGNED_VIEWS[dtype]))
    return signed % (1 << (8 * dtype.itemsize))


def _ordered_bits(x: Real) -> int:
    """Map a float onto an integer line where adjacent floats are adjacent integers."""
    bits = float_to_bits(x)
    sign_bit = 1 << (8 * np.dtype(type(x)).itemsize - 1)
    if bits & sign_bit:
        return -(bits ^ sign_bit)  # Both zeros map onto 0
    return bits


def ulp_distance(x: Real, y: Real) -> int:
    """Count the steps between two floats of the same type, moving one representable value per step.

    :param x: First floating-point value (not NaN)
    :param y: Second floating-point value (converted to the type of x)
    :return: Non-negative number of nextafter() steps separating x and y
    """
    return abs(_ordered_bits(cast_like(y, x)) - _ordered_bits(x))
