"""Repository layer for the canonical bet entry list.

Reads try the canonical key first and then each legacy key, newest schema
first. Writes only ever target the canonical key, so legacy blobs are
migrated on read and never round-tripped.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from betsheet.domain import UNRECOGNIZED, BetEntry, ParseResult, Recognized
from betsheet.repositories.blob_store import BlobStore
from betsheet.services.legacy_migration import migrate_legacy_grid
from betsheet.services.normalizer import normalize_entries, to_records

logger = logging.getLogger(__name__)

STORAGE_KEY = "up-down-bets-v1"
LEGACY_STORAGE_KEYS = (
    "up-down-sheet-v4",
    "up-down-sheet-v3",
    "up-down-sheet-v2",
    "up-down-sheet-mockup-v1",
)


@dataclass(frozen=True)
class StorageKeys:
    """Recognized keys in read priority order."""

    canonical: str = STORAGE_KEY
    legacy: tuple[str, ...] = field(default=LEGACY_STORAGE_KEYS)

    def in_priority_order(self) -> tuple[str, ...]:
        return (self.canonical, *self.legacy)


class CorruptBlob(Exception):
    """A blob matched a schema's envelope but not its contents."""


def _unwrap(decoded: Any, field_name: str) -> Any:
    if isinstance(decoded, Mapping) and field_name in decoded:
        return decoded[field_name]
    return decoded


def _entries_adapter(decoded: Any) -> ParseResult:
    if isinstance(decoded, Mapping) and "entries" in decoded:
        if not isinstance(decoded["entries"], list):
            raise CorruptBlob("'entries' is present but is not a list")
        return normalize_entries(decoded["entries"])

    result = normalize_entries(decoded)
    # A bare list where no record survives is not an entry list (e.g. the legacy grid array).
    if isinstance(result, Recognized) and decoded and not result.entries:
        return UNRECOGNIZED
    return result


def _legacy_grid_adapter(decoded: Any) -> ParseResult:
    return migrate_legacy_grid(_unwrap(decoded, "rows"))


SchemaAdapter = Callable[[Any], ParseResult]

DEFAULT_ADAPTERS: tuple[SchemaAdapter, ...] = (_entries_adapter, _legacy_grid_adapter)


class EntryRepository:
    """Load and save the entry list through a key/value storage port.

    ``store`` may be None when no persistence is available: ``load`` then
    returns an empty list and ``save`` does nothing.
    """

    def __init__(
        self,
        store: BlobStore | None,
        keys: StorageKeys | None = None,
        adapters: Sequence[SchemaAdapter] = DEFAULT_ADAPTERS,
    ) -> None:
        self._store = store
        self._keys = keys or StorageKeys()
        self._adapters = tuple(adapters)

    @property
    def keys(self) -> StorageKeys:
        return self._keys

    def load(self) -> list[BetEntry]:
        if self._store is None:
            return []

        for key in self._keys.in_priority_order():
            raw = self._store.get(key)
            if not raw:
                continue

            try:
                decoded = json.loads(raw)
            except ValueError:
                logger.warning("Skipping storage key %s: blob is not valid JSON", key)
                continue

            result = self._parse(key, decoded)
            if result is not UNRECOGNIZED:
                if key != self._keys.canonical:
                    logger.info("Loaded %d entries from legacy key %s", len(result.entries), key)
                return result.entries

        return []

    def _parse(self, key: str, decoded: Any) -> ParseResult:
        for adapter in self._adapters:
            try:
                result = adapter(decoded)
            except CorruptBlob as exc:
                logger.warning("Skipping storage key %s: %s", key, exc)
                return UNRECOGNIZED
            if result is not UNRECOGNIZED:
                return result
        return UNRECOGNIZED

    def save(self, entries: Sequence[BetEntry]) -> None:
        if self._store is None:
            return

        payload = json.dumps({"entries": to_records(list(entries))}, ensure_ascii=False)
        self._store.set(self._keys.canonical, payload)
