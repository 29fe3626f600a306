"""
Record Store

Thin query/command interface over a Django model. The catalog core never
talks to the ORM directly: it receives records fetched through a store and
hands new records back to it.

Each store exposes fetch-all-matching, fetch-by-id, insert and
delete-by-composite-key. Database failures surface as
``TransientFetchError`` and missing ids as ``NotFoundError``.
"""

from __future__ import annotations

import logging
from typing import Any, List

from django.db import DatabaseError, IntegrityError, transaction  # type: ignore
from django.db.models import Model, Q, QuerySet  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from shared.domain.exceptions import NotFoundError, TransientFetchError

logger = logging.getLogger(__name__)


def lock_queryset_if_possible(queryset: QuerySet) -> QuerySet:
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


class DjangoRecordStore:
    """Store for one collection backed by ``model``."""

    def __init__(self, model: type[Model], name: str | None = None):
        self.model = model
        self.name = name or model._meta.label_lower

    def __repr__(self) -> str:
        return f"DjangoRecordStore({self.name})"

    def _query(self, *conditions: Q, **lookups: Any) -> QuerySet:
        return self.model.objects.filter(*conditions, **lookups)

    def _transient(self, exc: DatabaseError) -> TransientFetchError:
        logger.warning("Store %s unavailable: %s", self.name, exc)
        return TransientFetchError(f"{self.name} is temporarily unavailable")

    # ===== Sync interface =====

    def fetch_all(self, *conditions: Q, limit: int | None = None, **lookups: Any) -> List[Model]:
        """Records matching the lookups; ``limit`` is applied in the query"""
        queryset = self._query(*conditions, **lookups)
        if limit is not None:
            queryset = queryset[:limit]
        try:
            return list(queryset)
        except DatabaseError as exc:
            raise self._transient(exc) from exc

    def fetch_by_id(self, pk: Any, **lookups: Any) -> Model:
        try:
            return self._query(pk=pk, **lookups).get()
        except (self.model.DoesNotExist, ValueError, TypeError):
            # Malformed ids cannot name a record
            raise NotFoundError(self.name, pk) from None
        except DatabaseError as exc:
            raise self._transient(exc) from exc

    def insert(self, **fields: Any) -> Model:
        try:
            return self.model.objects.create(**fields)
        except IntegrityError:
            raise
        except DatabaseError as exc:
            raise self._transient(exc) from exc

    def delete_by_key(self, **key: Any) -> int:
        """Delete records matching the composite ``key``; returns the count"""
        try:
            deleted, _ = self._query(**key).delete()
        except DatabaseError as exc:
            raise self._transient(exc) from exc
        return deleted

    # ===== Async interface =====

    async def afetch_all(self, *conditions: Q, **lookups: Any) -> List[Model]:
        try:
            return [record async for record in self._query(*conditions, **lookups)]
        except DatabaseError as exc:
            raise self._transient(exc) from exc

    async def afetch_by_id(self, pk: Any, **lookups: Any) -> Model:
        try:
            return await self._query(pk=pk, **lookups).aget()
        except (self.model.DoesNotExist, ValueError, TypeError):
            raise NotFoundError(self.name, pk) from None
        except DatabaseError as exc:
            raise self._transient(exc) from exc
