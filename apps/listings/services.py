"""Catalog read services.

Listings are fetched through a ``DjangoRecordStore`` and narrowed by the
pure filter engine. ``CatalogLoader`` fetches asynchronously and lets only
the newest request per key publish its result.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Hashable, List, Mapping, Optional

from django.conf import settings  # type: ignore

from shared.application.requests import LatestRequestGate
from shared.domain.exceptions import ValidationError
from shared.infrastructure.store import DjangoRecordStore

from .domain.filters import ListingFilterConfig, filter_listings
from .models import LISTING_MODELS, ListingBase, ListingKind

logger = logging.getLogger(__name__)


def listing_store(kind: str) -> DjangoRecordStore:
    """Record store for the ``listings:<kind>`` collection."""

    try:
        model = LISTING_MODELS[kind]
    except KeyError:
        raise ValidationError(f"Unknown listing kind: {kind!r}") from None
    return DjangoRecordStore(model, name=f"listings:{kind}")


class CatalogLoader:
    """Fetch available listings of one kind and apply a filter config."""

    def __init__(
        self,
        stores: Optional[Mapping[str, Any]] = None,
        gate: Optional[LatestRequestGate] = None,
    ):
        self.stores: Dict[str, Any] = dict(stores) if stores is not None else {
            kind: listing_store(kind) for kind in ListingKind.values
        }
        self.gate = gate or LatestRequestGate()

    def _store(self, kind: str):  # type: ignore
        try:
            return self.stores[kind]
        except KeyError:
            raise ValidationError(f"Unknown listing kind: {kind!r}") from None

    async def load(
        self,
        kind: str,
        config: ListingFilterConfig,
        client: Hashable = None,
    ) -> List[ListingBase]:
        """
        Return the available listings of ``kind`` matching ``config``.

        Loads for one ``client`` supersede each other; without a client
        there is no request stream to order and the load is never stale.

        Raises:
            StaleResponseError: a newer load for the same kind and client
                was issued while this one was in flight
            TransientFetchError: the store is unavailable
        """
        store = self._store(kind)
        if client is None:
            records = await store.afetch_all(is_available=True)
        else:
            records = await self.gate.run(
                (kind, client),
                lambda: store.afetch_all(is_available=True),
            )
        listings = filter_listings(records, config)
        logger.debug("Loaded %s of %s %s listings", len(listings), len(records), kind)
        return listings


def get_available_listing(kind: str, pk: Any) -> ListingBase:
    """Fetch one listing; unavailable listings are reported as not found."""

    return listing_store(kind).fetch_by_id(pk, is_available=True)


def featured_listings(kind: str, limit: Optional[int] = None) -> List[ListingBase]:
    """Newest available listings of ``kind`` for the home page."""

    if limit is None:
        limit = settings.RENTALS["FEATURED_LIMIT"]
    return listing_store(kind).fetch_all(is_available=True, limit=limit)
