"""Tests for booking status transitions and upcoming/past bucketing."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

import pytest

from apps.bookings.domain.lifecycle import (
    BookingStatus,
    can_transition,
    classify_bookings,
    ensure_transition,
    is_terminal,
    is_upcoming,
)
from shared.domain.exceptions import ValidationError

TODAY = date(2024, 6, 1)


@dataclass
class FakeBooking:
    ref: str
    start_date: date
    status: str = "confirmed"


def test_future_confirmed_booking_is_upcoming():
    assert is_upcoming(FakeBooking("a", date(2024, 6, 10)), TODAY)


def test_booking_starting_today_is_upcoming():
    assert is_upcoming(FakeBooking("a", TODAY), TODAY)
    assert is_upcoming(FakeBooking("a", datetime(2024, 6, 1, 0, 30)), datetime(2024, 6, 1, 18, 0))


def test_cancelled_future_booking_is_past():
    assert not is_upcoming(FakeBooking("a", date(2030, 1, 1), "cancelled"), TODAY)


def test_classification_is_an_order_preserving_partition():
    bookings = [
        FakeBooking("old", date(2024, 5, 1), "completed"),
        FakeBooking("soon", date(2024, 6, 2)),
        FakeBooking("dropped", date(2024, 7, 1), "cancelled"),
        FakeBooking("later", date(2024, 8, 1), "pending"),
    ]

    buckets = classify_bookings(bookings, TODAY)

    assert [b.ref for b in buckets.upcoming] == ["soon", "later"]
    assert [b.ref for b in buckets.past] == ["old", "dropped"]
    assert not any(booking in buckets.past for booking in buckets.upcoming)
    assert len(buckets.upcoming) + len(buckets.past) == len(bookings)
    assert buckets.counts == {"upcoming": 2, "past": 2}


def test_classification_of_empty_input():
    buckets = classify_bookings([], TODAY)
    assert buckets.upcoming == () and buckets.past == ()


@pytest.mark.parametrize(
    "current, target",
    [
        ("pending", "confirmed"),
        ("pending", "cancelled"),
        ("confirmed", "completed"),
        ("confirmed", "cancelled"),
    ],
)
def test_allowed_transitions(current, target):
    assert can_transition(current, target)
    assert ensure_transition(current, target) is BookingStatus(target)


@pytest.mark.parametrize(
    "current, target",
    [
        ("completed", "cancelled"),
        ("cancelled", "confirmed"),
        ("pending", "completed"),
        ("confirmed", "pending"),
    ],
)
def test_illegal_transitions_are_rejected(current, target):
    assert not can_transition(current, target)
    with pytest.raises(ValidationError):
        ensure_transition(current, target)


def test_terminal_states():
    assert is_terminal("completed") and is_terminal(BookingStatus.CANCELLED)
    assert not is_terminal("pending")


def test_unknown_status_is_rejected():
    with pytest.raises(ValidationError):
        can_transition("archived", "cancelled")
