"""Key/value blob table backing the SQL storage port."""

from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from betsheet.models.base import Base


class StorageBlob(Base):
    """One serialized document per storage key."""

    __tablename__ = "storage_blobs"

    key: Mapped[str] = mapped_column(String(200), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
