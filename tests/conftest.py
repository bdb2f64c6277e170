from __future__ import annotations

import json

import pytest

from betsheet import create_app
from betsheet.domain import BetEntry, BetType
from betsheet.repositories.blob_store import InMemoryBlobStore
from betsheet.repositories.entry_repository import EntryRepository


def make_entry(
    number: str,
    amount: int,
    bet_type: BetType = BetType.TOP,
    customer_name: str = "Somchai",
    created_at: str = "2024-01-01T00:00:00.000Z",
    entry_id: str | None = None,
) -> BetEntry:
    return BetEntry(
        id=entry_id or f"{customer_name}-{number}-{bet_type.value}-{created_at}",
        customer_name=customer_name,
        number=number,
        amount=amount,
        type=bet_type,
        created_at=created_at,
    )


def legacy_grid(**cells: dict[str, int]) -> list[dict[str, int]]:
    """50 zero rows, with overrides keyed as row_<index>."""

    rows = [{"leftTop": 0, "leftBottom": 0, "rightTop": 0, "rightBottom": 0} for _ in range(50)]
    for name, values in cells.items():
        rows[int(name.removeprefix("row_"))].update(values)
    return rows


@pytest.fixture
def store() -> InMemoryBlobStore:
    return InMemoryBlobStore()


@pytest.fixture
def repo(store: InMemoryBlobStore) -> EntryRepository:
    return EntryRepository(store)


@pytest.fixture
def app(store: InMemoryBlobStore):
    return create_app({"TESTING": True, "STORAGE_BACKEND": "memory", "LEADERBOARD_SIZE": 10}, store=store)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seed(store: InMemoryBlobStore):
    def _seed(entries: list[BetEntry]) -> None:
        store.set("up-down-bets-v1", json.dumps({"entries": [e.to_record() for e in entries]}))

    return _seed
