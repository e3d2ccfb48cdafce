"""Checks that run over every interval before a tree is built."""

import numbers
from collections.abc import Iterable
from decimal import Decimal
from typing import Any, NamedTuple

from stabtree.domain import Domain
from stabtree.errors import InvalidInterval
from stabtree.interval import Interval


class Entry(NamedTuple):
    """A validated interval with its bounds converted to domain keys."""

    lower: Any
    upper: Any
    interval: Interval


def _is_number(value: Any) -> bool:
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def validate(interval: Interval, domain: Domain) -> Entry:
    """Return the keyed entry for interval or raise InvalidInterval.

    Raises:
        InvalidInterval: If the interval is unbounded, open on either end,
            has a non-numeric bound, or a bound that is not finite in domain
    """
    if not interval.has_lower_bound or not interval.has_upper_bound:
        raise InvalidInterval(
            interval,
            "unbounded",
            f"Intervals cannot be unbounded.\n"
            f"Got: {interval}\n"
            f"Hint: Give both bounds, e.g. Interval.closed(0, 10)",
        )
    if not interval.lower_closed or not interval.upper_closed:
        raise InvalidInterval(
            interval,
            "open",
            f"Intervals must have inclusive (closed) bounds.\n"
            f"Got: {interval}\n"
            f"Hint: Use Interval.closed(lower, upper)",
        )
    if not _is_number(interval.lower) or not _is_number(interval.upper):
        raise InvalidInterval(
            interval,
            "not_numeric",
            f"Interval bounds must be numbers.\n"
            f"Got {type(interval.lower).__name__!r} and "
            f"{type(interval.upper).__name__!r}: {interval}",
        )

    lower = domain.key(interval.lower)
    upper = domain.key(interval.upper)
    if not domain.is_finite(lower) or not domain.is_finite(upper):
        raise InvalidInterval(
            interval,
            "non_finite",
            f"Interval bounds must be finite numbers in the {domain.name!r} domain.\n"
            f"Got: {interval}",
        )
    return Entry(lower, upper, interval)


def validate_all(intervals: Iterable[Interval], domain: Domain) -> list[Entry]:
    """Validate every interval, then drop duplicates (first one wins)."""
    entries = [validate(interval, domain) for interval in intervals]
    unique: dict[Interval, Entry] = {}
    for entry in entries:
        unique.setdefault(entry.interval, entry)
    return list(unique.values())
