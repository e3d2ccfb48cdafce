from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Any, TypeAlias

Bound: TypeAlias = int | float | Fraction | Decimal


def is_nan(value: Any) -> bool:
    """NaN test that also works for Decimal (whose NaNs refuse ordering)."""
    if isinstance(value, Decimal):
        return value.is_nan()
    return value != value


@dataclass(frozen=True, kw_only=True)
class Interval:
    """A numeric range with optional open ends.

    A missing bound (None) means the interval is unbounded on that side.
    Only closed, bounded intervals can be stored in an IntervalTree; the
    other shapes exist so callers can describe them and get a clear error.
    """

    lower: Bound | None
    upper: Bound | None
    lower_closed: bool = True
    upper_closed: bool = True

    def __post_init__(self) -> None:
        if self.lower is None or self.upper is None:
            return
        if is_nan(self.lower) or is_nan(self.upper):
            return
        if self.lower > self.upper:
            raise ValueError(
                f"Interval lower ({self.lower}) must be <= upper ({self.upper})"
            )

    @classmethod
    def closed(cls, lower: Bound, upper: Bound) -> "Interval":
        """[lower, upper]"""
        return cls(lower=lower, upper=upper)

    @classmethod
    def open(cls, lower: Bound, upper: Bound) -> "Interval":
        """(lower, upper)"""
        return cls(lower=lower, upper=upper, lower_closed=False, upper_closed=False)

    @classmethod
    def closed_open(cls, lower: Bound, upper: Bound) -> "Interval":
        """[lower, upper)"""
        return cls(lower=lower, upper=upper, upper_closed=False)

    @classmethod
    def open_closed(cls, lower: Bound, upper: Bound) -> "Interval":
        """(lower, upper]"""
        return cls(lower=lower, upper=upper, lower_closed=False)

    @classmethod
    def at_least(cls, lower: Bound) -> "Interval":
        """[lower, +inf)"""
        return cls(lower=lower, upper=None, upper_closed=False)

    @classmethod
    def greater_than(cls, lower: Bound) -> "Interval":
        """(lower, +inf)"""
        return cls(lower=lower, upper=None, lower_closed=False, upper_closed=False)

    @classmethod
    def at_most(cls, upper: Bound) -> "Interval":
        """(-inf, upper]"""
        return cls(lower=None, upper=upper, lower_closed=False)

    @classmethod
    def less_than(cls, upper: Bound) -> "Interval":
        """(-inf, upper)"""
        return cls(lower=None, upper=upper, lower_closed=False, upper_closed=False)

    @classmethod
    def all(cls) -> "Interval":
        """(-inf, +inf)"""
        return cls(lower=None, upper=None, lower_closed=False, upper_closed=False)

    @property
    def has_lower_bound(self) -> bool:
        return self.lower is not None

    @property
    def has_upper_bound(self) -> bool:
        return self.upper is not None

    @property
    def is_closed(self) -> bool:
        """True if both ends are bounded and inclusive."""
        return (
            self.has_lower_bound
            and self.has_upper_bound
            and self.lower_closed
            and self.upper_closed
        )

    def contains(self, point: Bound) -> bool:
        """Return True if point lies within this interval's bounds."""
        if is_nan(point) or is_nan(self.lower) or is_nan(self.upper):
            return False
        if self.lower is not None:
            if point < self.lower or (point == self.lower and not self.lower_closed):
                return False
        if self.upper is not None:
            if point > self.upper or (point == self.upper and not self.upper_closed):
                return False
        return True

    def __contains__(self, point: Bound) -> bool:
        return self.contains(point)

    def __str__(self) -> str:
        """Human-friendly range notation, e.g. [-10..3] or (1..+∞)."""
        left = "[" if self.lower_closed and self.lower is not None else "("
        right = "]" if self.upper_closed and self.upper is not None else ")"
        lower = "-∞" if self.lower is None else self.lower
        upper = "+∞" if self.upper is None else self.upper
        return f"{left}{lower}..{upper}{right}"
