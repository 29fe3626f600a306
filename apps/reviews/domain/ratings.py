"""
Review ratings

Reduces a collection of 1..5 star ratings to an average and a count. An
empty collection averages to 0.0; ``has_reviews`` tells that case apart
from a genuine average of zero.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterable

from shared.domain.value_objects import ValueObject


@dataclass(frozen=True)
class RatingSummary(ValueObject):
    average: float = 0.0
    count: int = 0

    @property
    def has_reviews(self) -> bool:
        return self.count > 0

    @property
    def display(self) -> str:
        """Average rendered with one decimal place, as shown on listing cards"""
        return f"{self.average:.1f}"


EMPTY_SUMMARY = RatingSummary()


def summarize_ratings(ratings: Iterable[int]) -> RatingSummary:
    """Arithmetic mean (unrounded) and count of ``ratings``"""
    total = 0
    count = 0
    for rating in ratings:
        total += rating
        count += 1
    if not count:
        return EMPTY_SUMMARY
    return RatingSummary(average=total / count, count=count)


def summarize_reviews(reviews: Iterable[Any]) -> RatingSummary:
    return summarize_ratings(review.rating for review in reviews)


def summarize_by_item(reviews: Iterable[Any]) -> Dict[Hashable, RatingSummary]:
    """
    Summaries keyed by ``review.item_id``.

    Items without reviews are absent; look them up with
    ``summaries.get(item_id, EMPTY_SUMMARY)``.
    """
    grouped: Dict[Hashable, list] = defaultdict(list)
    for review in reviews:
        grouped[review.item_id].append(review.rating)
    return {item_id: summarize_ratings(ratings) for item_id, ratings in grouped.items()}
