"""
Booking status and buckets

Booking status state machine:
- PENDING -> CONFIRMED (payment confirmed)
- PENDING -> CANCELLED
- CONFIRMED -> COMPLETED (rental period over)
- CONFIRMED -> CANCELLED
COMPLETED and CANCELLED are terminal.

Bookings are also split into temporal buckets for display. Bucketing
never changes status; "today" is always passed in by the caller.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Iterable, Tuple, Union

from shared.domain.exceptions import ValidationError


class BookingStatus(Enum):
    PENDING = 'pending'
    CONFIRMED = 'confirmed'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'


TRANSITIONS = {
    BookingStatus.PENDING: frozenset({BookingStatus.CONFIRMED, BookingStatus.CANCELLED}),
    BookingStatus.CONFIRMED: frozenset({BookingStatus.COMPLETED, BookingStatus.CANCELLED}),
    BookingStatus.COMPLETED: frozenset(),
    BookingStatus.CANCELLED: frozenset(),
}

StatusLike = Union[BookingStatus, str]


def as_status(value: StatusLike) -> BookingStatus:
    if isinstance(value, BookingStatus):
        return value
    try:
        return BookingStatus(str(getattr(value, 'value', value)))
    except ValueError:
        raise ValidationError(f"Unknown booking status: {value!r}") from None


def can_transition(current: StatusLike, target: StatusLike) -> bool:
    return as_status(target) in TRANSITIONS[as_status(current)]


def ensure_transition(current: StatusLike, target: StatusLike) -> BookingStatus:
    """
    Validate a status change and return the target status.

    Raises:
        ValidationError: the move is not in the transition table
    """
    current, target = as_status(current), as_status(target)
    if target not in TRANSITIONS[current]:
        raise ValidationError(
            f"Cannot move booking from {current.value} to {target.value}"
        )
    return target


def is_terminal(status: StatusLike) -> bool:
    return not TRANSITIONS[as_status(status)]


@dataclass(frozen=True)
class BookingBuckets:
    upcoming: Tuple[Any, ...]
    past: Tuple[Any, ...]

    @property
    def counts(self) -> dict:
        return {'upcoming': len(self.upcoming), 'past': len(self.past)}


def is_upcoming(booking: Any, today: date) -> bool:
    """
    A booking is upcoming when it is not cancelled and starts today or later.

    Comparison is by calendar day; datetimes are truncated to their date.
    """
    if as_status(booking.status) is BookingStatus.CANCELLED:
        return False
    return _as_date(booking.start_date) >= _as_date(today)


def classify_bookings(bookings: Iterable[Any], today: date) -> BookingBuckets:
    """Partition ``bookings`` into upcoming and past, keeping input order"""
    upcoming, past = [], []
    for booking in bookings:
        (upcoming if is_upcoming(booking, today) else past).append(booking)
    return BookingBuckets(tuple(upcoming), tuple(past))


def _as_date(value: Union[date, datetime]) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value
