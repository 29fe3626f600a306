"""Admin registrations for listings; owners manage their rooms and vehicles here."""

from __future__ import annotations

from django.contrib import admin  # type: ignore

from .models import Room, Vehicle


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ("name", "room_type", "location", "price_per_month", "is_available", "owner_name")
    list_filter = ("room_type", "location", "is_available")
    search_fields = ("name", "location", "address", "owner_name")
    readonly_fields = ("created_at",)


@admin.register(Vehicle)
class VehicleAdmin(admin.ModelAdmin):
    list_display = ("brand", "model", "vehicle_type", "location", "rental_price_per_day", "is_available")
    list_filter = ("vehicle_type", "location", "is_available")
    search_fields = ("brand", "model", "location", "owner_name")
    readonly_fields = ("created_at",)
