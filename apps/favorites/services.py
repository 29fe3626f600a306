"""Favorite toggling at the storage boundary."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from django.db import IntegrityError, transaction  # type: ignore

from shared.infrastructure.store import DjangoRecordStore

from apps.listings.services import listing_store

from .domain.store import FavoriteKey, FavoriteSet
from .models import Favorite

logger = logging.getLogger(__name__)

favorites_store = DjangoRecordStore(Favorite, name="favorites")


@dataclass(frozen=True)
class ToggleResult:
    key: FavoriteKey
    is_favorite: bool

    @property
    def action(self) -> str:
        return "added" if self.is_favorite else "removed"


def favorite_set_for(user, item_type: Optional[str] = None) -> FavoriteSet:  # type: ignore
    """Load a user's favorites (optionally of one type) into a FavoriteSet."""

    if user is None or not user.is_authenticated:
        return FavoriteSet()
    lookups = {"user": user}
    if item_type is not None:
        lookups["item_type"] = item_type
    return FavoriteSet(favorite.key for favorite in favorites_store.fetch_all(**lookups))


def toggle_favorite(user, item_type: str, item_id: Any) -> ToggleResult:  # type: ignore
    """
    Flip favorite membership of one item for ``user``.

    Removal is tried first; when nothing was removed the favorite is
    inserted under the unique constraint. Losing that race to a concurrent
    toggle means the row now exists, so this toggle removes it instead.

    Raises:
        NotFoundError: no listing ``item_id`` of ``item_type``
    """
    listing_store(item_type).fetch_by_id(item_id)
    key = FavoriteKey(user.pk, item_type, int(item_id))
    lookup = {"user": user, "item_type": item_type, "item_id": key.item_id}

    with transaction.atomic():
        if favorites_store.delete_by_key(**lookup):
            result = ToggleResult(key, is_favorite=False)
        else:
            try:
                with transaction.atomic():
                    favorites_store.insert(**lookup)
                result = ToggleResult(key, is_favorite=True)
            except IntegrityError:
                favorites_store.delete_by_key(**lookup)
                result = ToggleResult(key, is_favorite=False)

    logger.info("Favorite %s %s", key, result.action)
    return result
