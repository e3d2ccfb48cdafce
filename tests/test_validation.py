"""Tests for interval validation during tree construction."""

import math
from decimal import Decimal

import pytest

from stabtree import IntervalTree, InvalidInterval, Interval
from stabtree.domain import ExactDomain, FloatDomain
from stabtree.validation import validate, validate_all

WELL_FORMED = [
    Interval.closed(-10, 3),
    Interval.closed(-2, 5),
    Interval.closed(4, 10),
    Interval.closed(5, 20),
    Interval.closed(11, 14),
    Interval.closed(-10, 3),
    Interval.closed(-2, 5),
]


@pytest.mark.parametrize(
    ("bad", "reason"),
    [
        (Interval.at_least(-2), "unbounded"),
        (Interval.greater_than(-2), "unbounded"),
        (Interval.at_most(7), "unbounded"),
        (Interval.less_than(7), "unbounded"),
        (Interval.all(), "unbounded"),
        (Interval.open(0, 1), "open"),
        (Interval.closed_open(0, 1), "open"),
        (Interval.open_closed(0, 1), "open"),
        (Interval.closed(math.nan, 1), "non_finite"),
        (Interval.closed(0, math.inf), "non_finite"),
        (Interval.closed(-math.inf, 0), "non_finite"),
        (Interval.closed(Decimal("NaN"), Decimal(1)), "non_finite"),
        (Interval.closed(Decimal(0), Decimal("Infinity")), "non_finite"),
        (Interval.closed("a", "b"), "not_numeric"),  # type: ignore[arg-type]
        (Interval.closed(False, True), "not_numeric"),
    ],
)
def test_bad_interval_aborts_construction(bad: Interval, reason: str) -> None:
    """One bad interval fails the whole build, wherever it sits."""
    for intervals in ([*WELL_FORMED, bad], [bad, *WELL_FORMED], [bad]):
        with pytest.raises(InvalidInterval) as excinfo:
            IntervalTree(intervals)
        assert excinfo.value.reason == reason
        assert excinfo.value.interval == bad


def test_invalid_interval_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="must have inclusive"):
        IntervalTree([Interval.open(0, 1)])


def test_unbounded_message() -> None:
    with pytest.raises(InvalidInterval, match="cannot be unbounded"):
        IntervalTree([Interval.at_least(-2)])


def test_non_finite_message_names_domain() -> None:
    with pytest.raises(InvalidInterval, match="finite numbers in the 'float' domain"):
        IntervalTree([Interval.closed(0, 10**400)], domain="float")


def test_huge_int_is_finite_in_exact_domain() -> None:
    entry = validate(Interval.closed(0, 10**400), ExactDomain())
    assert entry.upper == 10**400


def test_validate_converts_bounds_to_domain_keys() -> None:
    entry = validate(Interval.closed(1, 2), FloatDomain())
    assert entry == (1.0, 2.0, Interval.closed(1, 2))
    assert isinstance(entry.lower, float)


def test_validate_all_drops_duplicates_keeping_order() -> None:
    entries = validate_all(WELL_FORMED, ExactDomain())
    assert [entry.interval for entry in entries] == WELL_FORMED[:5]


def test_validate_all_accepts_generators() -> None:
    entries = validate_all((Interval.closed(i, i + 1) for i in range(3)), ExactDomain())
    assert len(entries) == 3
