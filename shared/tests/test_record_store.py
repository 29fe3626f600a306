"""Tests for the record store and the domain error to HTTP mapping."""

from __future__ import annotations

from decimal import Decimal
from unittest import mock

import pytest
from django.db import DatabaseError, connection
from django.test.utils import CaptureQueriesContext
from rest_framework import status

from apps.listings.models import Location, Room
from shared.domain.exceptions import NotFoundError, StaleResponseError, TransientFetchError, ValidationError
from shared.infrastructure.exception_handler import domain_exception_handler
from shared.infrastructure.store import DjangoRecordStore


@pytest.fixture
def store():
    return DjangoRecordStore(Room, name="listings:room")


@pytest.mark.django_db
def test_insert_and_fetch(store):
    room = store.insert(
        name="Cozy single",
        room_type="single",
        location=Location.NEAR_UNIVERSITY,
        price_per_month=Decimal("12000"),
    )
    assert store.fetch_by_id(room.pk).name == "Cozy single"
    assert [r.pk for r in store.fetch_all(room_type="single")] == [room.pk]
    assert store.delete_by_key(pk=room.pk) == 1
    assert store.fetch_all() == []


@pytest.mark.django_db
def test_missing_id_is_not_found(store):
    with pytest.raises(NotFoundError) as excinfo:
        store.fetch_by_id(404)
    assert excinfo.value.resource == "listings:room"


def test_database_errors_become_transient(store):
    with mock.patch.object(Room.objects, "filter", side_effect=DatabaseError("connection lost")):
        with pytest.raises(TransientFetchError):
            store.fetch_all()


@pytest.mark.parametrize(
    "exc, expected",
    [
        (ValidationError("bad dates"), status.HTTP_400_BAD_REQUEST),
        (NotFoundError("listings:room", 1), status.HTTP_404_NOT_FOUND),
        (TransientFetchError("down"), status.HTTP_503_SERVICE_UNAVAILABLE),
        (StaleResponseError(("room", 1), 3), status.HTTP_503_SERVICE_UNAVAILABLE),
    ],
)
def test_domain_errors_map_to_http(exc, expected):
    response = domain_exception_handler(exc, {"view": None})
    assert response.status_code == expected


def test_other_errors_are_left_to_drf():
    assert domain_exception_handler(RuntimeError("boom"), {"view": None}) is None


@pytest.mark.django_db
@pytest.mark.parametrize("pk", ["abc", None, [1, 2]])
def test_malformed_id_is_not_found(store, pk):
    with pytest.raises(NotFoundError):
        store.fetch_by_id(pk)


@pytest.mark.django_db
def test_fetch_all_limit_is_applied_in_query(store):
    for index in range(3):
        store.insert(
            name=f"Room {index}",
            room_type="single",
            location=Location.NEAR_UNIVERSITY,
            price_per_month=Decimal("10000"),
        )

    with CaptureQueriesContext(connection) as queries:
        rooms = store.fetch_all(limit=2)

    assert len(rooms) == 2
    assert len(queries) == 1
    assert "LIMIT 2" in queries[0]["sql"]
