"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin  # type: ignore

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "booking_type",
        "item_name",
        "user",
        "status",
        "payment_method",
        "start_date",
        "end_date",
        "total_amount",
        "created_at",
    )
    list_filter = ("status", "booking_type", "payment_method", "start_date")
    search_fields = ("item_name", "user__username", "user__email")
    readonly_fields = Booking.SNAPSHOT_FIELDS[:-1] + ("owner", "created_at", "updated_at", "cancelled_at")
