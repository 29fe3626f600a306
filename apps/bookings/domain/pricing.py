"""
Booking pricing

Computes a booking's end date, billable duration and total from the
listing's unit price and the requested dates:

- room: priced per calendar month, ``total = price_per_month * months``
- vehicle: priced per started day, ``total = price_per_day * days``

Quotes are immutable; the booking stores the quoted total as a snapshot.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Union

from shared.domain.exceptions import ValidationError
from shared.domain.value_objects import DateRange, Money, ValueObject

ROOM = 'room'
VEHICLE = 'vehicle'

UNITS = {ROOM: 'month', VEHICLE: 'day'}

Price = Union[Money, Decimal, int, str]


@dataclass(frozen=True)
class PriceQuote(ValueObject):
    kind: str
    unit_price: Money
    start_date: date
    end_date: date
    duration: int
    total: Money

    @property
    def unit(self) -> str:
        """Billing unit of ``duration``: 'month' or 'day'"""
        return UNITS[self.kind]

    @property
    def period(self) -> DateRange:
        return DateRange(self.start_date, self.end_date)

    def __str__(self):
        return f"{self.total} for {self.duration} {self.unit}(s) from {self.start_date.isoformat()}"


def quote_room(unit_price: Price, start_date: date, months: int, currency: str = 'LKR') -> PriceQuote:
    """
    Quote a monthly room rental.

    The end date is ``months`` calendar months after the start, with the
    day clamped to the end of shorter months.

    Raises:
        ValidationError: non-positive price or month count
    """
    price = _positive_price(unit_price, currency)
    months = _positive_duration(months, 'Duration in months')
    period = DateRange.for_months(start_date, months)
    return PriceQuote(ROOM, price, period.start_date, period.end_date, months, price * months)


def quote_vehicle(unit_price: Price, start_date: date, end_date: date, currency: str = 'LKR') -> PriceQuote:
    """
    Quote a daily vehicle rental; partial days are billed as full days.

    Raises:
        ValidationError: non-positive price, end before start or a
            zero-length rental
    """
    price = _positive_price(unit_price, currency)
    period = DateRange(start_date, end_date)
    days = period.days
    if days <= 0:
        raise ValidationError("Vehicle rental must last at least one day")
    return PriceQuote(VEHICLE, price, start_date, end_date, days, price * days)


def quote_booking(
    kind: str,
    unit_price: Price,
    start_date: date,
    end_date: Optional[date] = None,
    duration: Optional[int] = None,
    currency: str = 'LKR',
) -> PriceQuote:
    """Dispatch to the calculator for ``kind``"""
    if kind == ROOM:
        if duration is None:
            raise ValidationError("Room bookings need a duration in months")
        return quote_room(unit_price, start_date, duration, currency)
    if kind == VEHICLE:
        if end_date is None:
            raise ValidationError("Vehicle bookings need an end date")
        return quote_vehicle(unit_price, start_date, end_date, currency)
    raise ValidationError(f"Unknown booking kind: {kind!r}")


def _positive_price(unit_price: Price, currency: str) -> Money:
    if isinstance(unit_price, Money):
        price = unit_price
    else:
        try:
            price = Money(Decimal(str(unit_price)), currency)
        except ArithmeticError:
            raise ValidationError(f"Invalid unit price: {unit_price!r}") from None
    if not price.amount.is_finite() or price.amount <= 0:
        raise ValidationError(f"Unit price must be positive, got {price.amount}")
    return price


def _positive_duration(value: int, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{label} must be a whole number, got {value!r}")
    if value <= 0:
        raise ValidationError(f"{label} must be at least 1, got {value}")
    return value
