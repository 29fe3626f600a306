"""Review model."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from apps.listings.models import ListingKind


class Review(models.Model):
    """A 1..5 star rating of one room or vehicle."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="reviews",
    )
    user_name = models.CharField(max_length=150, blank=True)
    booking_type = models.CharField(max_length=20, choices=ListingKind.choices)
    item_id = models.PositiveBigIntegerField()
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)],
    )
    comment = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Review")
        verbose_name_plural = _("Reviews")
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(rating__gte=1, rating__lte=5),
                name="review_rating_range",
            ),
        ]
        indexes = [
            models.Index(fields=["booking_type", "item_id"], name="reviews_rev_booking_1e0c9b_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.rating}* on {self.booking_type} {self.item_id} by {self.user_id}"
