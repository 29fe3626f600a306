"""Serializers for rooms and vehicles."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from rest_framework import serializers  # type: ignore

from apps.favorites.domain.store import FavoriteKey
from apps.reviews.domain.ratings import EMPTY_SUMMARY

from .models import Room, Vehicle


class ListingSerializerMixin(serializers.Serializer):
    """
    Per-item state shared by both listing kinds.

    Expects ``ratings`` (item id -> RatingSummary) and ``favorites``
    (FavoriteSet) in the serializer context; both are optional.
    """

    kind = serializers.ReadOnlyField()
    currency = serializers.SerializerMethodField()
    owner_contact = serializers.SerializerMethodField()
    average_rating = serializers.SerializerMethodField()
    review_count = serializers.SerializerMethodField()
    is_favorite = serializers.SerializerMethodField()

    def _summary(self, obj):  # type: ignore
        return self.context.get("ratings", {}).get(obj.pk, EMPTY_SUMMARY)

    def get_currency(self, obj) -> str:  # type: ignore
        return settings.RENTALS["CURRENCY"]

    def get_owner_contact(self, obj) -> dict:  # type: ignore
        return obj.owner_contact()

    def get_average_rating(self, obj) -> float:  # type: ignore
        return self._summary(obj).average

    def get_review_count(self, obj) -> int:  # type: ignore
        return self._summary(obj).count

    def get_is_favorite(self, obj) -> bool:  # type: ignore
        favorites = self.context.get("favorites")
        request = self.context.get("request")
        if favorites is None or request is None or not request.user.is_authenticated:
            return False
        return favorites.contains(FavoriteKey(request.user.pk, obj.kind, obj.pk))


class RoomSerializer(ListingSerializerMixin, serializers.ModelSerializer):
    class Meta:
        model = Room
        fields = [
            "id",
            "kind",
            "name",
            "room_type",
            "location",
            "address",
            "price_per_month",
            "currency",
            "images",
            "amenities",
            "description",
            "available_from",
            "latitude",
            "longitude",
            "is_available",
            "owner_contact",
            "average_rating",
            "review_count",
            "is_favorite",
            "created_at",
        ]
        read_only_fields = fields


class VehicleSerializer(ListingSerializerMixin, serializers.ModelSerializer):
    name = serializers.ReadOnlyField()

    class Meta:
        model = Vehicle
        fields = [
            "id",
            "kind",
            "name",
            "brand",
            "model",
            "vehicle_type",
            "location",
            "address",
            "rental_price_per_day",
            "currency",
            "images",
            "specifications",
            "description",
            "is_available",
            "owner_contact",
            "average_rating",
            "review_count",
            "is_favorite",
            "created_at",
        ]
        read_only_fields = fields
