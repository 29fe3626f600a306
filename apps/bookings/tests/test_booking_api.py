"""Integration tests for booking API endpoints."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.listings.models import Location, Room, Vehicle


class BookingAPITests(APITestCase):
    """Covers quotes, creation, bucketing and cancellation."""

    def setUp(self) -> None:
        user_model = get_user_model()
        self.student = user_model.objects.create_user(
            username="student", email="student@example.com", password="StudentPass123"
        )
        self.owner = user_model.objects.create_user(
            username="owner", email="owner@example.com", password="OwnerPass123"
        )
        self.room = Room.objects.create(
            owner=self.owner,
            name="Cozy single",
            room_type=Room.RoomType.SINGLE,
            location=Location.NEAR_UNIVERSITY,
            price_per_month=Decimal("15000"),
            images=["https://img.example.com/room-1.jpg"],
        )
        self.car = Vehicle.objects.create(
            owner=self.owner,
            brand="Toyota",
            model="Aqua",
            vehicle_type=Vehicle.VehicleType.CAR,
            location=Location.BELIHULOYA_TOWN,
            rental_price_per_day=Decimal("5000"),
        )
        self.today = timezone.localdate()
        self.client.force_authenticate(self.student)
        self.list_url = reverse("bookings:booking-list")

    def _room_payload(self, **overrides) -> dict:
        payload = {
            "booking_type": "room",
            "item_id": self.room.id,
            "start_date": str(self.today + timedelta(days=7)),
            "duration": 3,
            "payment_method": "card",
        }
        payload.update(overrides)
        return payload

    def test_quote_vehicle_without_booking(self) -> None:
        start = self.today + timedelta(days=1)
        response = self.client.post(
            reverse("bookings:booking-quote"),
            {
                "booking_type": "vehicle",
                "item_id": self.car.id,
                "start_date": str(start),
                "end_date": str(start + timedelta(days=3)),
            },
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["duration"], 3)
        self.assertEqual(Decimal(response.data["total_amount"]), Decimal("15000"))
        self.assertEqual(response.data["item_name"], "Toyota Aqua")
        self.assertFalse(Booking.objects.exists())

    def test_student_can_book_room(self) -> None:
        response = self.client.post(self.list_url, self._room_payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        booking = Booking.objects.get()
        self.assertEqual(booking.status, Booking.Status.CONFIRMED)
        self.assertEqual(booking.total_amount, Decimal("45000"))
        self.assertEqual(booking.item_name, "Cozy single")
        self.assertEqual(booking.item_images, ["https://img.example.com/room-1.jpg"])
        self.assertEqual(booking.owner, self.owner)
        self.assertEqual(response.data["bucket"], "upcoming")

    def test_room_booking_requires_duration(self) -> None:
        payload = self._room_payload()
        del payload["duration"]
        response = self.client.post(self.list_url, payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_vehicle_end_before_start_is_rejected(self) -> None:
        start = self.today + timedelta(days=5)
        response = self.client.post(
            self.list_url,
            {
                "booking_type": "vehicle",
                "item_id": self.car.id,
                "start_date": str(start),
                "end_date": str(start - timedelta(days=2)),
                "payment_method": "cash",
            },
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Booking.objects.exists())

    def test_start_in_past_is_rejected(self) -> None:
        payload = self._room_payload(start_date=str(self.today - timedelta(days=1)))
        response = self.client.post(self.list_url, payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_unavailable_listing_cannot_be_booked(self) -> None:
        self.room.is_available = False
        self.room.save()
        response = self.client.post(self.list_url, self._room_payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_list_filters_by_bucket(self) -> None:
        self.client.post(self.list_url, self._room_payload(), format="json")
        past = Booking.objects.create(
            user=self.student,
            booking_type="vehicle",
            item_id=self.car.id,
            item_name="Toyota Aqua",
            start_date=self.today - timedelta(days=10),
            end_date=self.today - timedelta(days=8),
            unit_price=Decimal("5000"),
            duration=2,
            total_amount=Decimal("10000"),
            payment_method="cash",
            status=Booking.Status.COMPLETED,
        )
        upcoming = self.client.get(self.list_url, {"bucket": "upcoming"})
        self.assertEqual(upcoming.status_code, status.HTTP_200_OK, upcoming.data)
        self.assertEqual([item["booking_type"] for item in upcoming.data], ["room"])

        past_resp = self.client.get(self.list_url, {"bucket": "past"})
        self.assertEqual([item["id"] for item in past_resp.data], [past.id])

        buckets = self.client.get(reverse("bookings:booking-buckets"))
        self.assertEqual(buckets.data["counts"], {"upcoming": 1, "past": 1})

    def test_cancel_moves_booking_to_past(self) -> None:
        created = self.client.post(self.list_url, self._room_payload(), format="json")
        cancel_url = reverse("bookings:booking-cancel", args=[created.data["id"]])

        response = self.client.post(cancel_url)
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["status"], "cancelled")
        self.assertEqual(response.data["bucket"], "past")

        again = self.client.post(cancel_url)
        self.assertEqual(again.status_code, status.HTTP_400_BAD_REQUEST)

    def test_users_only_see_their_own_bookings(self) -> None:
        self.client.post(self.list_url, self._room_payload(), format="json")
        self.client.force_authenticate(self.owner)
        response = self.client.get(self.list_url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [])

    def test_anonymous_user_cannot_book(self) -> None:
        self.client.force_authenticate(None)
        response = self.client.post(self.list_url, self._room_payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
