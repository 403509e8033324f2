"""Define tags for the four kinds of intervals and a dataclass for a requested interval."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

from uniform_intervals.math.numeric import (
    NumericDomain,
    cast_like,
    next_after,
    numeric_domain,
    wrapping_increment,
)

NumT = TypeVar("NumT")
"""Type variable representing the numeric type of interval endpoints."""


class IntervalKind(Enum):
    """An enumeration of whether an interval is open or closed on either boundary."""

    CLOSED_CLOSED = "[]"
    """Both endpoints are possible values: [a, b]."""

    CLOSED_OPEN = "[)"
    """Only the left endpoint is a possible value: [a, b)."""

    OPEN_CLOSED = "(]"
    """Only the right endpoint is a possible value: (a, b]."""

    OPEN_OPEN = "()"
    """Neither endpoint is a possible value: (a, b)."""

    @property
    def brackets(self) -> str:
        """Retrieve the pair of brackets denoting this kind of interval (e.g., "[)")."""
        return self.value

    @property
    def lower_open(self) -> bool:
        """Check whether the left endpoint is excluded from intervals of this kind."""
        return self.value[0] == "("

    @property
    def upper_open(self) -> bool:
        """Check whether the right endpoint is excluded from intervals of this kind."""
        return self.value[1] == ")"

    @classmethod
    def parse(cls, spec: IntervalKindLike) -> IntervalKind:
        """Interpret an interval kind given as a member, a bracket pair, or a case-insensitive name.

        :param spec: IntervalKind, bracket pair (e.g., "(]"), or name (e.g., "open-closed")
        :return: Interval kind denoted by the given value
        :raises ValueError: If the value doesn't name any interval kind
        :raises TypeError: If the value is neither an IntervalKind nor a string
        """
        if isinstance(spec, IntervalKind):
            return spec
        if not isinstance(spec, str):
            raise TypeError(f"Cannot interpret {type(spec).__name__} as an interval kind.")

        text = spec.strip()
        for kind in cls:
            if kind.brackets == text:
                return kind

        name = text.upper().replace("-", "_")
        if name in cls.__members__:
            return cls[name]
        if name in _KIND_ALIASES:
            return _KIND_ALIASES[name]

        raise ValueError(f"Unrecognized interval kind: '{spec}'.")


IntervalKindLike = Union[IntervalKind, str]
"""An interval kind, or a string that IntervalKind.parse() understands."""

INTERVAL_CLOSED_CLOSED = IntervalKind.CLOSED_CLOSED
INTERVAL_CLOSED_OPEN = IntervalKind.CLOSED_OPEN
INTERVAL_OPEN_CLOSED = IntervalKind.OPEN_CLOSED
INTERVAL_OPEN_OPEN = IntervalKind.OPEN_OPEN

INTERVAL_CLOSED = INTERVAL_CLOSED_CLOSED
"""Shorthand for an interval including both endpoints."""

INTERVAL_OPEN = INTERVAL_OPEN_OPEN
"""Shorthand for an interval excluding both endpoints."""

_KIND_ALIASES = {"CLOSED": INTERVAL_CLOSED, "OPEN": INTERVAL_OPEN}


@dataclass(frozen=True)
class SemanticInterval(Generic[NumT]):
    """The set of values requested by a caller, given as an interval kind and two endpoints."""

    kind: IntervalKind
    low: NumT
    """Left endpoint of the interval (a possible value only if closed on the left)."""

    high: NumT
    """Right endpoint of the interval (a possible value only if closed on the right)."""

    def __str__(self) -> str:
        """Return a readable bracketed representation of the interval (e.g., "(0.0, 1.0]")."""
        left, right = self.kind.brackets
        return f"{left}{self.low}, {self.high}{right}"

    @property
    def domain(self) -> NumericDomain:
        """Retrieve the numeric domain of the interval's endpoints."""
        return numeric_domain(self.low, self.high)

    def contains(self, x: NumT) -> bool:
        """Check whether the given value is an element of the interval."""
        above_low = self.low < x if self.kind.lower_open else self.low <= x
        below_high = x < self.high if self.kind.upper_open else x <= self.high
        return bool(above_low and below_high)

    @property
    def is_empty(self) -> bool:
        """Check whether no value of the endpoints' numeric type lies within the interval."""
        if self.low > self.high:
            return True
        if self.low == self.high:
            return self.kind != IntervalKind.CLOSED_CLOSED
        if self.kind != IntervalKind.OPEN_OPEN:
            return False

        # An open interval between neighboring values contains nothing
        if self.domain is NumericDomain.INTEGER:
            return wrapping_increment(self.low) == self.high
        return next_after(self.low, cast_like(self.high, self.low)) == self.high
