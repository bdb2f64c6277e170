"""Storage ports: opaque get/set-by-key string stores."""

from __future__ import annotations

from typing import Any, Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from betsheet.models.storage_blob import StorageBlob


class BlobStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryBlobStore:
    """Process-local store. State is lost on restart."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class SqlBlobStore:
    """Blobs in the ``storage_blobs`` table, one short transaction per call."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def get(self, key: str) -> str | None:
        with self._session_factory() as session:
            stmt = select(StorageBlob.value).where(StorageBlob.key == key)
            return session.scalar(stmt)

    def set(self, key: str, value: str) -> None:
        with self._session_factory.begin() as session:
            blob = session.get(StorageBlob, key)
            if blob is None:
                session.add(StorageBlob(key=key, value=value))
            else:
                blob.value = value


class MongoBlobStore:
    """Blobs in a Mongo collection, keyed by ``_id``."""

    def __init__(self, collection: Any) -> None:
        self._collection = collection

    def get(self, key: str) -> str | None:
        doc = self._collection.find_one({"_id": key}, {"value": 1})
        if not doc:
            return None
        value = doc.get("value")
        return str(value) if value is not None else None

    def set(self, key: str, value: str) -> None:
        self._collection.replace_one({"_id": key}, {"_id": key, "value": value}, upsert=True)
