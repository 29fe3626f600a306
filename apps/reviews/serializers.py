"""Serializers for reviews.

Provide both read and write serializers for the ``Review`` model. The
creating user is inferred from the request in the view.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.listings.models import ListingKind

from .models import Review


class ReviewCreateSerializer(serializers.Serializer):
    """Serializer for submitting a review of a room or vehicle."""

    booking_type = serializers.ChoiceField(choices=ListingKind.choices)
    item_id = serializers.IntegerField(min_value=1)
    rating = serializers.IntegerField(min_value=1, max_value=5)
    comment = serializers.CharField(required=False, allow_blank=True, max_length=2000)


class ReviewSerializer(serializers.ModelSerializer):
    """Read serializer for reviews."""

    user_id = serializers.ReadOnlyField(source='user.id')

    class Meta:
        model = Review
        fields = [
            'id',
            'user_id',
            'user_name',
            'booking_type',
            'item_id',
            'rating',
            'comment',
            'created_at',
        ]
        read_only_fields = fields


class ItemQuerySerializer(serializers.Serializer):
    booking_type = serializers.ChoiceField(choices=ListingKind.choices)
    item_id = serializers.IntegerField(min_value=1)


class RatingSummarySerializer(serializers.Serializer):
    average = serializers.FloatField()
    count = serializers.IntegerField()
    has_reviews = serializers.BooleanField()
    display = serializers.CharField()
