"""Filter set for a user's booking list."""

from __future__ import annotations

import django_filters  # type: ignore
from django.utils import timezone  # type: ignore

from .domain.lifecycle import is_upcoming
from .models import Booking


class BookingFilterSet(django_filters.FilterSet):
    """
    ``booking_type`` and ``status`` filter in the database; ``bucket``
    (upcoming|past) is decided by the lifecycle classifier.
    """

    bucket = django_filters.ChoiceFilter(
        choices=(("upcoming", "upcoming"), ("past", "past")),
        method="filter_bucket",
    )

    class Meta:
        model = Booking
        fields = ["booking_type", "status"]

    def filter_bucket(self, queryset, name, value):  # type: ignore
        today = timezone.localdate()
        wanted = value == "upcoming"
        ids = [booking.pk for booking in queryset if is_upcoming(booking, today) is wanted]
        return queryset.filter(pk__in=ids)
