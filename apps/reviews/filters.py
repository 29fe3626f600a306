"""Filter set for review listings."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Review


class ReviewFilterSet(django_filters.FilterSet):
    """Narrow reviews to one item and optionally a minimum rating."""

    min_rating = django_filters.NumberFilter(field_name="rating", lookup_expr="gte")

    class Meta:
        model = Review
        fields = ["booking_type", "item_id", "rating"]
