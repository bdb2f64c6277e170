"""ORM models."""

from betsheet.models.storage_blob import StorageBlob

__all__ = ["StorageBlob"]
