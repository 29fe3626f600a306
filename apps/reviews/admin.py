"""Admin registration for reviews."""

from __future__ import annotations

from django.contrib import admin  # type: ignore

from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("booking_type", "item_id", "user_name", "rating", "created_at")
    list_filter = ("booking_type", "rating")
    search_fields = ("user_name", "comment")
    readonly_fields = ("created_at",)
