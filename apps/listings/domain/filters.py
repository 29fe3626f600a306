"""
Listing filters

Narrows a listing collection by free-text search, category, location,
price range and required amenities. Filtering is a pure function of the
listings and the config: no store access, no mutation, input order kept.

A listing is anything exposing ``category``, ``location``, ``unit_price``,
``amenities`` (``None`` when the kind has no amenity set) and
``search_fields()``; both listing models qualify.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, FrozenSet, Iterable, List, Mapping, Optional, Protocol, Sequence

from shared.domain.exceptions import ValidationError


class Listing(Protocol):
    category: str
    location: str
    unit_price: Decimal
    amenities: Optional[Sequence[str]]

    def search_fields(self) -> Sequence[str]: ...


@dataclass(frozen=True)
class ListingFilterConfig:
    """
    Active filter values.

    Empty sets mean "no constraint" and ``max_price=None`` means unbounded,
    so ``ListingFilterConfig()`` keeps every listing.
    """
    search_term: str = ''
    categories: FrozenSet[str] = frozenset()
    locations: FrozenSet[str] = frozenset()
    min_price: Decimal = Decimal('0')
    max_price: Optional[Decimal] = None
    required_amenities: FrozenSet[str] = frozenset()

    def __post_init__(self):
        for name in ('categories', 'locations', 'required_amenities'):
            value = getattr(self, name)
            if not isinstance(value, frozenset):
                object.__setattr__(self, name, frozenset(value))
        if self.min_price < 0 or (self.max_price is not None and self.max_price < 0):
            raise ValidationError("Price bounds cannot be negative")
        if self.max_price is not None and self.min_price > self.max_price:
            raise ValidationError(
                f"min_price ({self.min_price}) is greater than max_price ({self.max_price})"
            )

    @classmethod
    def from_params(cls, params: Mapping[str, Any], category_key: str = 'category') -> 'ListingFilterConfig':
        """
        Build a config from query parameters.

        Recognised keys: ``search``, ``category_key`` (``category`` if
        absent), ``location``, ``min_price``, ``max_price`` and
        ``amenities``. Set-valued keys take comma separated values.
        """
        categories = _split(params.get(category_key) or params.get('category'))
        max_price = _parse_price(params.get('max_price'), 'max_price')
        return cls(
            search_term=(params.get('search') or '').strip(),
            categories=categories,
            locations=_split(params.get('location')),
            min_price=_parse_price(params.get('min_price'), 'min_price') or Decimal('0'),
            max_price=max_price,
            required_amenities=_split(params.get('amenities')),
        )


def filter_listings(listings: Iterable[Listing], config: ListingFilterConfig) -> List[Listing]:
    """Return the listings satisfying every active predicate, in input order"""
    return [listing for listing in listings if matches(listing, config)]


def matches(listing: Listing, config: ListingFilterConfig) -> bool:
    return (
        _matches_search(listing, config.search_term)
        and (not config.categories or listing.category in config.categories)
        and (not config.locations or listing.location in config.locations)
        and _matches_price(listing.unit_price, config)
        and _matches_amenities(listing.amenities, config.required_amenities)
    )


def _matches_search(listing: Listing, term: str) -> bool:
    if not term:
        return True
    needle = term.casefold()
    return any(needle in (value or '').casefold() for value in listing.search_fields())


def _matches_price(price: Decimal, config: ListingFilterConfig) -> bool:
    if price < config.min_price:
        return False
    return config.max_price is None or price <= config.max_price


def _matches_amenities(amenities: Optional[Sequence[str]], required: FrozenSet[str]) -> bool:
    # Kinds without an amenity set are not constrained
    if not required or amenities is None:
        return True
    return required.issubset(amenities)


def _split(raw: Any) -> FrozenSet[str]:
    if not raw:
        return frozenset()
    if isinstance(raw, str):
        raw = raw.split(',')
    return frozenset(item.strip() for item in raw if item and item.strip())


def _parse_price(raw: Any, name: str) -> Optional[Decimal]:
    if raw is None or raw == '':
        return None
    try:
        value = Decimal(str(raw).strip())
    except InvalidOperation:
        raise ValidationError(f"{name} must be a number, got {raw!r}") from None
    if not value.is_finite():
        raise ValidationError(f"{name} must be a finite number")
    if value < 0:
        raise ValidationError(f"{name} cannot be negative")
    return value
