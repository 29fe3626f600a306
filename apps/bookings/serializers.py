"""Serializers for the booking domain."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.utils import timezone  # type: ignore
from rest_framework import serializers  # type: ignore

from apps.listings.models import ListingKind

from .domain.lifecycle import is_upcoming
from .models import Booking


class BookingQuoteSerializer(serializers.Serializer):
    """Booking inputs: rooms take a month count, vehicles an end date."""

    booking_type = serializers.ChoiceField(choices=ListingKind.choices)
    item_id = serializers.IntegerField(min_value=1)
    start_date = serializers.DateField()
    end_date = serializers.DateField(required=False)
    duration = serializers.IntegerField(min_value=1, required=False)

    def validate(self, attrs):  # type: ignore
        if attrs["start_date"] < timezone.localdate():
            raise serializers.ValidationError({"start_date": "Start date cannot be in the past."})
        if attrs["booking_type"] == ListingKind.ROOM and "duration" not in attrs:
            raise serializers.ValidationError({"duration": "Room bookings need a duration in months."})
        if attrs["booking_type"] == ListingKind.VEHICLE and "end_date" not in attrs:
            raise serializers.ValidationError({"end_date": "Vehicle bookings need an end date."})
        return attrs


class BookingCreateSerializer(BookingQuoteSerializer):
    payment_method = serializers.ChoiceField(choices=Booking.PaymentMethod.choices)

    def validate_payment_method(self, value: str) -> str:
        if value not in settings.RENTALS["PAYMENT_METHODS"]:
            raise serializers.ValidationError("Payment method is not accepted.")
        return value


class PriceQuoteSerializer(serializers.Serializer):
    """Read-only rendering of a PriceQuote for one listing."""

    booking_type = serializers.CharField(source="kind")
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    duration = serializers.IntegerField()
    unit = serializers.CharField()
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2, source="unit_price.amount")
    total_amount = serializers.DecimalField(max_digits=14, decimal_places=2, source="total.amount")
    currency = serializers.CharField(source="total.currency")
    display_total = serializers.SerializerMethodField()

    def get_display_total(self, quote) -> str:  # type: ignore
        return str(quote.total)


class BookingSerializer(serializers.ModelSerializer):
    """Detailed booking representation."""

    user_id = serializers.ReadOnlyField(source="user.id")
    owner_id = serializers.ReadOnlyField()
    bucket = serializers.SerializerMethodField()

    class Meta:
        model = Booking
        fields = [
            "id",
            "user_id",
            "booking_type",
            "item_id",
            "item_name",
            "item_images",
            "start_date",
            "end_date",
            "unit_price",
            "duration",
            "total_amount",
            "currency",
            "payment_method",
            "status",
            "bucket",
            "owner_id",
            "cancelled_at",
            "created_at",
        ]
        read_only_fields = fields

    def get_bucket(self, obj: Booking) -> str:
        today = self.context.get("today") or timezone.localdate()
        return "upcoming" if is_upcoming(obj, today) else "past"
