"""
Common Value Objects

Value objects used across multiple domains:
- Money: Represents monetary amounts with currency
- DateRange: Represents a rental period (start to end)
- add_months: Calendar month arithmetic used by monthly rentals
"""

import calendar
import math
from abc import ABC
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from shared.domain.exceptions import ValidationError

SUPPORTED_CURRENCIES = ('LKR', 'USD', 'EUR')

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects

    Value objects are immutable and have no identity.
    Two value objects are equal if all their attributes are equal.
    """
    pass


@dataclass(frozen=True)
class Money(ValueObject):
    """
    Money value object

    Represents a non-negative monetary amount in a single currency.
    """
    amount: Decimal
    currency: str = 'LKR'

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValidationError("Amount cannot be negative")
        if self.currency not in SUPPORTED_CURRENCIES:
            raise ValidationError(f"Unsupported currency: {self.currency}")

    def __mul__(self, factor) -> 'Money':
        """Multiply money by a quantity (months, days)"""
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError("Can only multiply Money by an integer or Decimal")
        return Money(self.amount * factor, self.currency)

    __rmul__ = __mul__

    def __str__(self):
        return f"{self.currency} {self.amount:,.2f}"

    def __repr__(self):
        return f"Money({self.amount}, '{self.currency}')"


def add_months(start: date, months: int) -> date:
    """
    Advance a date by whole calendar months.

    The day of month is kept when the target month has it and clamped to
    the target month's last day otherwise (Jan 31 + 1 month -> Feb 28/29).
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return start.replace(year=year, month=month, day=day)


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Date range value object

    Represents a rental period from start_date to end_date. Unlike a hotel
    stay, a zero-length range is representable; callers that bill by the
    day reject it themselves.
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        if _as_datetime(self.end_date) < _as_datetime(self.start_date):
            raise ValidationError(
                f"End date ({self.end_date}) must not be before start date ({self.start_date})"
            )

    @classmethod
    def for_months(cls, start_date: date, months: int) -> 'DateRange':
        """Range covering ``months`` calendar months from ``start_date``"""
        return cls(start_date, add_months(start_date, months))

    @property
    def days(self) -> int:
        """
        Number of billable days, rounding partial days up.

        For plain dates this is the calendar difference; datetimes with a
        time-of-day component count any started day as a full one.
        """
        delta = _as_datetime(self.end_date) - _as_datetime(self.start_date)
        return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)

    def __str__(self):
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"


def _as_datetime(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)
