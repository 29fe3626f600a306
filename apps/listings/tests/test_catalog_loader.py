"""Tests for the async catalog loader and the last-request-wins gate."""

from __future__ import annotations

import asyncio
import threading
from dataclasses import dataclass, field
from decimal import Decimal

import pytest

from apps.listings.domain.filters import ListingFilterConfig
from apps.listings.services import CatalogLoader
from shared.application.requests import LatestRequestGate
from shared.domain.exceptions import StaleResponseError, TransientFetchError, ValidationError


@dataclass
class FakeRoom:
    name: str
    category: str
    location: str
    unit_price: Decimal
    amenities: list = field(default_factory=list)
    description: str = ""

    def search_fields(self):
        return (self.name, self.location, self.description)


class FakeStore:
    def __init__(self, records, delay: float = 0.0, error: Exception | None = None):
        self.records = records
        self.delay = delay
        self.error = error
        self.lookups: list[dict] = []

    async def afetch_all(self, **lookups):
        self.lookups.append(lookups)
        await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return list(self.records)


ROOMS = [
    FakeRoom("Cozy single", "single", "Near University", Decimal("12000")),
    FakeRoom("Family apartment", "apartment", "Belihuloya Town", Decimal("45000")),
]


def test_load_filters_available_records():
    store = FakeStore(ROOMS)
    loader = CatalogLoader(stores={"room": store})

    result = asyncio.run(loader.load("room", ListingFilterConfig(categories={"single"})))

    assert [room.name for room in result] == ["Cozy single"]
    assert store.lookups == [{"is_available": True}]


def test_unknown_kind_is_rejected():
    loader = CatalogLoader(stores={"room": FakeStore(ROOMS)})
    with pytest.raises(ValidationError):
        asyncio.run(loader.load("boat", ListingFilterConfig()))


def test_transient_store_failure_propagates():
    loader = CatalogLoader(stores={"room": FakeStore(ROOMS, error=TransientFetchError("down"))})
    with pytest.raises(TransientFetchError):
        asyncio.run(loader.load("room", ListingFilterConfig()))


def test_superseded_load_is_discarded():
    slow = FakeStore(ROOMS, delay=0.05)
    loader = CatalogLoader(stores={"room": slow})

    async def scenario():
        first = asyncio.create_task(loader.load("room", ListingFilterConfig(), client=1))
        await asyncio.sleep(0)
        second = asyncio.create_task(loader.load("room", ListingFilterConfig(), client=1))
        return await asyncio.gather(first, second, return_exceptions=True)

    first, second = asyncio.run(scenario())

    assert isinstance(first, StaleResponseError)
    assert len(second) == 2


def test_different_clients_do_not_supersede_each_other():
    loader = CatalogLoader(stores={"room": FakeStore(ROOMS, delay=0.01)})

    async def scenario():
        return await asyncio.gather(
            loader.load("room", ListingFilterConfig(), client="a"),
            loader.load("room", ListingFilterConfig(), client="b"),
        )

    first, second = asyncio.run(scenario())
    assert len(first) == len(second) == 2


def test_gate_tokens_are_monotonic_per_key():
    gate = LatestRequestGate()
    older = gate.begin("rooms")
    newer = gate.begin("rooms")

    assert newer > older
    assert not gate.is_current("rooms", older)
    assert gate.accept("rooms", newer, "fresh") == "fresh"
    with pytest.raises(StaleResponseError):
        gate.accept("rooms", older, "stale")


def test_loads_without_client_are_never_superseded():
    loader = CatalogLoader(stores={"room": FakeStore(ROOMS, delay=0.01)})

    async def scenario():
        first = asyncio.create_task(loader.load("room", ListingFilterConfig(categories={"single"})))
        await asyncio.sleep(0)
        second = asyncio.create_task(loader.load("room", ListingFilterConfig(categories={"apartment"})))
        return await asyncio.gather(first, second)

    first, second = asyncio.run(scenario())

    assert [room.name for room in first] == ["Cozy single"]
    assert [room.name for room in second] == ["Family apartment"]
    assert len(loader.gate) == 0


class InterleavingTokens(dict):
    """Registers a newer request from another thread while a token is checked."""

    def __init__(self, gate):
        super().__init__()
        self.gate = gate
        self.thread = None
        self.newer: list[int] = []

    def get(self, key, default=None):
        value = super().get(key, default)
        if self.thread is None:
            self.thread = threading.Thread(target=lambda: self.newer.append(self.gate.begin(key)))
            self.thread.start()
            self.thread.join(timeout=0.05)
        return value


def test_newer_request_survives_concurrent_accept():
    gate = LatestRequestGate()
    older = gate.begin("rooms")
    tokens = InterleavingTokens(gate)
    tokens.update(gate._latest)
    gate._latest = tokens

    assert gate.accept("rooms", older, "old") == "old"
    tokens.thread.join()

    newer = tokens.newer[0]
    assert gate.is_current("rooms", newer)
    assert gate.accept("rooms", newer, "new") == "new"


def test_failed_fetch_releases_its_key():
    gate = LatestRequestGate()

    async def failing():
        raise TransientFetchError("down")

    with pytest.raises(TransientFetchError):
        asyncio.run(gate.run(("room", 1), failing))

    assert len(gate) == 0


def test_stale_fetch_keeps_newer_token():
    gate = LatestRequestGate()

    async def fetch_while_superseded():
        newer.append(gate.begin("rooms"))
        return "old"

    newer: list[int] = []
    with pytest.raises(StaleResponseError):
        asyncio.run(gate.run("rooms", fetch_while_superseded))

    assert gate.is_current("rooms", newer[0])
