"""Review services: submission and per-item rating summaries."""

from __future__ import annotations

import logging
from typing import Any, Dict, Hashable, Iterable, Optional

from shared.domain.exceptions import ValidationError
from shared.infrastructure.store import DjangoRecordStore

from apps.listings.services import listing_store

from .domain.ratings import RatingSummary, summarize_by_item, summarize_reviews
from .models import Review

logger = logging.getLogger(__name__)

reviews_store = DjangoRecordStore(Review, name="reviews")


def rating_summary(booking_type: str, item_id: Any) -> RatingSummary:
    return summarize_reviews(reviews_store.fetch_all(booking_type=booking_type, item_id=item_id))


def rating_summaries(booking_type: str, item_ids: Iterable[Any]) -> Dict[Hashable, RatingSummary]:
    """Summaries for many items of one kind from a single query."""

    reviews = reviews_store.fetch_all(booking_type=booking_type, item_id__in=list(item_ids))
    return summarize_by_item(reviews)


def submit_review(user, booking_type: str, item_id: Any, rating: int, comment: Optional[str] = "") -> Review:  # type: ignore
    """
    Record a review of an existing listing.

    Raises:
        ValidationError: rating outside 1..5
        NotFoundError: no listing ``item_id`` of ``booking_type``
    """
    if isinstance(rating, bool) or not isinstance(rating, int) or not 1 <= rating <= 5:
        raise ValidationError(f"Rating must be an integer from 1 to 5, got {rating!r}")
    listing_store(booking_type).fetch_by_id(item_id)

    review = reviews_store.insert(
        user=user,
        user_name=user.get_full_name() or user.get_username(),
        booking_type=booking_type,
        item_id=item_id,
        rating=rating,
        comment=comment or "",
    )
    logger.info("Review %s submitted for %s %s", review.pk, booking_type, item_id)
    return review
