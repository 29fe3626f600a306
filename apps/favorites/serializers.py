"""Serializers for the favorites domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.listings.models import ListingKind

from .models import Favorite


class FavoriteSerializer(serializers.ModelSerializer):
    """Serializer for listing favorites."""

    user_id = serializers.ReadOnlyField(source='user.id')

    class Meta:
        model = Favorite
        fields = ['id', 'user_id', 'item_type', 'item_id', 'created_at']
        read_only_fields = fields


class FavoriteToggleSerializer(serializers.Serializer):
    """Serializer for toggling favorite status."""

    item_type = serializers.ChoiceField(choices=ListingKind.choices)
    item_id = serializers.IntegerField(min_value=1)
