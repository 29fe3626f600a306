"""Admin registration for favorites."""

from __future__ import annotations

from django.contrib import admin  # type: ignore

from .models import Favorite


@admin.register(Favorite)
class FavoriteAdmin(admin.ModelAdmin):
    list_display = ("user", "item_type", "item_id", "created_at")
    list_filter = ("item_type",)
    search_fields = ("user__username",)
