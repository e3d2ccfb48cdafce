"""Numeric domains in which bounds, centers and query points are compared.

ExactDomain compares values as they are: Python orders int, float,
Fraction and Decimal against each other without rounding, and centers are
computed with Fraction arithmetic. FloatDomain converts everything to float
first, trading precision on very large integers for cheaper comparisons.
"""

import math
import numbers
from abc import ABC, abstractmethod
from decimal import Decimal
from fractions import Fraction
from typing import Any, Literal, TypeAlias

from typing_extensions import override

DomainName: TypeAlias = Literal["exact", "float"]


class Domain(ABC):
    name: str

    @abstractmethod
    def key(self, value: Any) -> Any:
        """Convert a bound or point into this domain's comparison key."""
        pass

    @abstractmethod
    def is_finite(self, key: Any) -> bool:
        pass

    @abstractmethod
    def midpoint(self, low: Any, high: Any) -> Any:
        """Return the center of [low, high], never outside that range."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class ExactDomain(Domain):
    name = "exact"

    @override
    def key(self, value: Any) -> Any:
        return value

    @override
    def is_finite(self, key: Any) -> bool:
        if isinstance(key, numbers.Rational):
            return True
        if isinstance(key, Decimal):
            return key.is_finite()
        return math.isfinite(key)

    @override
    def midpoint(self, low: Any, high: Any) -> Any:
        mid = (Fraction(low) + Fraction(high)) / 2
        if mid.denominator == 1:
            return int(mid)
        return mid


class FloatDomain(Domain):
    name = "float"

    @override
    def key(self, value: Any) -> float:
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf

    @override
    def is_finite(self, key: Any) -> bool:
        return math.isfinite(key)

    @override
    def midpoint(self, low: Any, high: Any) -> float:
        mid = (low + high) / 2
        if math.isinf(mid):
            # low + high overflowed
            mid = low / 2 + high / 2
        return min(max(mid, low), high)


_DOMAINS: dict[DomainName, type[Domain]] = {
    "exact": ExactDomain,
    "float": FloatDomain,
}


def resolve_domain(domain: "DomainName | Domain") -> Domain:
    """Return a Domain instance for a domain name or pass one through."""
    if isinstance(domain, Domain):
        return domain
    if domain not in _DOMAINS:
        valid = ", ".join(sorted(_DOMAINS))
        raise ValueError(
            f"Unknown comparison domain: {domain!r}\n" f"Valid domains: {valid}\n"
        )
    return _DOMAINS[domain]()
