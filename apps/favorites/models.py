"""Model definition for favorites.

The ``Favorite`` model represents a bookmark created by a user for a
particular room or vehicle. Duplicate favorites are prevented via a unique
constraint on (user, item type, item id).
"""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore

from apps.listings.models import ListingKind

from .domain.store import FavoriteKey


class Favorite(models.Model):
    """A user's favorite room or vehicle."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='favorites'
    )
    item_type = models.CharField(max_length=20, choices=ListingKind.choices)
    item_id = models.PositiveBigIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(
                fields=['user', 'item_type', 'item_id'],
                name='favorite_unique_per_user_item',
            ),
        ]

    def __str__(self) -> str:
        return f"Favorite {self.item_type} {self.item_id} by user {self.user_id}"

    @property
    def key(self) -> FavoriteKey:
        return FavoriteKey(self.user_id, self.item_type, self.item_id)
