"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from betsheet.repositories.entry_repository import (
    LEGACY_STORAGE_KEYS as DEFAULT_LEGACY_KEYS,
    STORAGE_KEY as DEFAULT_STORAGE_KEY,
)


def resolve_legacy_keys() -> tuple[str, ...]:
    """Legacy keys in read priority order (LEGACY_STORAGE_KEYS, comma separated)."""

    raw = os.getenv("LEGACY_STORAGE_KEYS")
    if raw is None:
        return DEFAULT_LEGACY_KEYS
    return tuple(key.strip() for key in raw.split(",") if key.strip())


def resolve_leaderboard_size() -> int:
    raw = os.getenv("LEADERBOARD_SIZE")
    try:
        return int(raw) if raw else 10
    except ValueError:
        return 10


def resolve_storage_settings() -> dict[str, Any]:
    """Storage settings read from the environment at call time.

    Scripts call this after loading .env; BaseConfig captures the same values
    when this module is imported.
    """

    return {
        "STORAGE_BACKEND": os.getenv("STORAGE_BACKEND", "sql").lower().strip(),  # "memory" | "sql" | "mongo" | "none"
        "STORAGE_KEY": os.getenv("STORAGE_KEY", DEFAULT_STORAGE_KEY),
        "LEGACY_STORAGE_KEYS": resolve_legacy_keys(),
        "DATABASE_URL": os.getenv("DATABASE_URL", "sqlite:///./betsheet.db"),
        "MONGODB_URI": os.getenv("MONGODB_URI", "mongodb://localhost:27017"),
        "MONGODB_DB": os.getenv("MONGODB_DB", "betsheet"),
        "MONGODB_COLLECTION": os.getenv("MONGODB_COLLECTION", "storage_blobs"),
    }


_storage = resolve_storage_settings()


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    STORAGE_BACKEND: str = _storage["STORAGE_BACKEND"]
    STORAGE_KEY: str = _storage["STORAGE_KEY"]
    LEGACY_STORAGE_KEYS: tuple[str, ...] = _storage["LEGACY_STORAGE_KEYS"]

    # SQL backend
    DATABASE_URL: str = _storage["DATABASE_URL"]

    # Mongo backend
    MONGODB_URI: str = _storage["MONGODB_URI"]
    MONGODB_DB: str = _storage["MONGODB_DB"]
    MONGODB_COLLECTION: str = _storage["MONGODB_COLLECTION"]

    LEADERBOARD_SIZE: int = resolve_leaderboard_size()


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    return DevelopmentConfig
