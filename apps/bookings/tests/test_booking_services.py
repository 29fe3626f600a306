"""Tests for booking services and the completion task."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model

from apps.bookings.models import Booking
from apps.bookings.services import cancel_booking, classify_for, create_booking
from apps.bookings.tasks import complete_finished_bookings
from apps.listings.models import Location, Room, Vehicle
from shared.domain.exceptions import ValidationError


@pytest.fixture
def student(db):
    return get_user_model().objects.create_user(username="student", password="pass")


@pytest.fixture
def room(db):
    return Room.objects.create(
        name="Cozy single",
        room_type=Room.RoomType.SINGLE,
        location=Location.NEAR_UNIVERSITY,
        price_per_month=Decimal("15000"),
    )


@pytest.fixture
def vehicle(db):
    return Vehicle.objects.create(
        brand="Honda",
        model="Dio",
        vehicle_type=Vehicle.VehicleType.BIKE,
        location=Location.KALUPAHANA,
        rental_price_per_day=Decimal("1500"),
    )


@pytest.mark.django_db
def test_create_room_booking_snapshots_price(student, room):
    booking = create_booking(
        student, "room", room.pk, date(2024, 1, 15), "card", duration=3, today=date(2024, 1, 1)
    )

    room.price_per_month = Decimal("99000")
    room.name = "Renamed"
    room.save()
    booking.refresh_from_db()

    assert booking.total_amount == Decimal("45000")
    assert booking.end_date == date(2024, 4, 15)
    assert booking.item_name == "Cozy single"
    assert booking.status == Booking.Status.CONFIRMED


@pytest.mark.django_db
def test_snapshot_fields_cannot_be_changed(student, room):
    booking = create_booking(
        student, "room", room.pk, date(2024, 1, 15), "cash", duration=1, today=date(2024, 1, 1)
    )
    booking = Booking.objects.get(pk=booking.pk)
    booking.total_amount = Decimal("1")

    with pytest.raises(ValidationError):
        booking.save()


@pytest.mark.django_db
def test_unsupported_payment_method_is_rejected(student, vehicle):
    with pytest.raises(ValidationError):
        create_booking(
            student,
            "vehicle",
            vehicle.pk,
            date(2024, 3, 1),
            "crypto",
            end_date=date(2024, 3, 4),
            today=date(2024, 2, 1),
        )
    assert not Booking.objects.exists()


@pytest.mark.django_db
def test_cancel_completed_booking_is_rejected(student, vehicle):
    booking = create_booking(
        student, "vehicle", vehicle.pk, date(2024, 3, 1), "cash",
        end_date=date(2024, 3, 4), today=date(2024, 2, 1),
    )
    Booking.objects.filter(pk=booking.pk).update(status=Booking.Status.COMPLETED)

    with pytest.raises(ValidationError):
        cancel_booking(booking)


@pytest.mark.django_db
def test_completion_task_completes_only_finished_confirmed_bookings(student, vehicle):
    today = date.today()
    finished = create_booking(
        student, "vehicle", vehicle.pk, today, "card",
        end_date=today + timedelta(days=1), today=today,
    )
    ongoing = create_booking(
        student, "vehicle", vehicle.pk, today, "card",
        end_date=today + timedelta(days=30), today=today,
    )
    Booking.objects.filter(pk=finished.pk).update(
        start_date=today - timedelta(days=5), end_date=today - timedelta(days=2)
    )

    result = complete_finished_bookings.delay().get()

    assert result == {"completed": 1}
    assert Booking.objects.get(pk=finished.pk).status == Booking.Status.COMPLETED
    assert Booking.objects.get(pk=ongoing.pk).status == Booking.Status.CONFIRMED


@pytest.mark.django_db
def test_classify_for_user(student, vehicle):
    today = date(2024, 2, 1)
    create_booking(
        student, "vehicle", vehicle.pk, date(2024, 3, 1), "card",
        end_date=date(2024, 3, 2), today=today,
    )
    buckets = classify_for(student, today=today)
    assert buckets.counts == {"upcoming": 1, "past": 0}
