"""Storage wiring: SQLAlchemy engine, Mongo client and the entry repository.

The repository is built once per app and stored in ``app.extensions``; each
request reloads through it, so a write from another process is picked up on
the next request.
"""

from __future__ import annotations

import logging

from flask import Flask, current_app
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from betsheet.models.base import Base
from betsheet.repositories.blob_store import BlobStore, InMemoryBlobStore, MongoBlobStore, SqlBlobStore
from betsheet.repositories.entry_repository import EntryRepository, StorageKeys

logger = logging.getLogger(__name__)


def create_app_engine(database_url: str) -> Engine:
    return create_engine(database_url, pool_pre_ping=True, future=True)


def create_sql_store(database_url: str) -> SqlBlobStore:
    engine = create_app_engine(database_url)
    # Create tables on first use (there is a single key/value table).
    Base.metadata.create_all(bind=engine)
    session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    return SqlBlobStore(session_factory)


def create_mongo_store(uri: str, database: str, collection: str) -> MongoBlobStore:
    from pymongo import MongoClient

    client = MongoClient(uri)
    return MongoBlobStore(client[database][collection])


def create_blob_store(config: dict) -> BlobStore | None:
    """Build the storage port selected by STORAGE_BACKEND.

    "none" disables persistence; the app then runs with an empty, in-memory
    only entry list.
    """

    backend = str(config.get("STORAGE_BACKEND", "sql")).lower().strip()
    if backend == "memory":
        return InMemoryBlobStore()
    if backend == "mongo":
        return create_mongo_store(
            str(config["MONGODB_URI"]),
            str(config["MONGODB_DB"]),
            str(config["MONGODB_COLLECTION"]),
        )
    if backend == "none":
        return None
    return create_sql_store(str(config["DATABASE_URL"]))


def storage_keys_from_config(config: dict) -> StorageKeys:
    return StorageKeys(
        canonical=str(config["STORAGE_KEY"]),
        legacy=tuple(config["LEGACY_STORAGE_KEYS"]),
    )


def init_db(app: Flask, store: BlobStore | None = None) -> None:
    """Attach the entry repository to the app."""

    if store is None:
        store = create_blob_store(app.config)

    logger.info("Storage backend: %s", type(store).__name__ if store is not None else "none")
    app.extensions["blob_store"] = store
    app.extensions["entry_repository"] = EntryRepository(store, storage_keys_from_config(app.config))


def get_entry_repository() -> EntryRepository:
    repo: EntryRepository | None = current_app.extensions.get("entry_repository")
    if repo is None:
        raise RuntimeError("Entry repository not initialized")
    return repo
