"""Tests for shared value objects."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from shared.domain.exceptions import ValidationError
from shared.domain.value_objects import DateRange, Money, add_months


def test_money_coerces_amount_to_decimal():
    assert Money(15000).amount == Decimal("15000")
    assert Money("12.50").amount == Decimal("12.50")


def test_money_rejects_negative_amount_and_unknown_currency():
    with pytest.raises(ValidationError):
        Money(Decimal("-1"))
    with pytest.raises(ValidationError):
        Money(Decimal("1"), "XYZ")


def test_money_multiplies_by_whole_quantities_only():
    assert Money(Decimal("5000")) * 3 == Money(Decimal("15000"))
    assert 2 * Money(Decimal("1.25")) == Money(Decimal("2.50"))
    with pytest.raises(TypeError):
        Money(Decimal("1")) * 1.5
    with pytest.raises(TypeError):
        Money(Decimal("1")) * True


@pytest.mark.parametrize(
    "start, months, expected",
    [
        (date(2024, 1, 15), 3, date(2024, 4, 15)),
        (date(2024, 1, 31), 1, date(2024, 2, 29)),
        (date(2024, 12, 10), 1, date(2025, 1, 10)),
        (date(2024, 3, 31), 13, date(2025, 4, 30)),
    ],
)
def test_add_months(start, months, expected):
    assert add_months(start, months) == expected


def test_date_range_days_and_ordering():
    assert DateRange(date(2024, 3, 1), date(2024, 3, 4)).days == 3
    assert DateRange(date(2024, 3, 1), date(2024, 3, 1)).days == 0
    with pytest.raises(ValidationError):
        DateRange(date(2024, 3, 4), date(2024, 3, 1))


def test_date_range_for_months():
    period = DateRange.for_months(date(2024, 1, 15), 3)
    assert (period.start_date, period.end_date) == (date(2024, 1, 15), date(2024, 4, 15))
