"""Domain types shared across services and repositories."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any


TOP_RANGE = (0, 49)
BOTTOM_RANGE = (50, 99)


class BetType(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"

    @property
    def number_range(self) -> tuple[int, int]:
        return TOP_RANGE if self is BetType.TOP else BOTTOM_RANGE


@dataclass(frozen=True)
class BetEntry:
    """One customer's wager on one number for one half.

    Entries are never edited once created; corrections are new entries.
    """

    id: str
    customer_name: str
    number: str
    amount: int
    type: BetType
    created_at: str

    def to_record(self) -> dict[str, Any]:
        """Persisted (camelCase) form."""

        return {
            "id": self.id,
            "customerName": self.customer_name,
            "number": self.number,
            "amount": self.amount,
            "type": self.type.value,
            "createdAt": self.created_at,
        }


@dataclass(frozen=True)
class LegacyGridRow:
    """Accumulated totals for numbers ``i`` (left) and ``i + 50`` (right)."""

    left_top: int = 0
    left_bottom: int = 0
    right_top: int = 0
    right_bottom: int = 0


@dataclass(frozen=True)
class Recognized:
    entries: list[BetEntry]


class _Unrecognized:
    _instance: _Unrecognized | None = None

    def __new__(cls) -> _Unrecognized:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNRECOGNIZED"

    def __bool__(self) -> bool:
        return False


UNRECOGNIZED = _Unrecognized()

ParseResult = Recognized | _Unrecognized


def utc_now_iso() -> str:
    """Current instant as an ISO-8601 UTC string with millisecond precision."""

    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_entry_id() -> str:
    now_ms = int(datetime.now(timezone.utc).timestamp() * 1000)
    return f"{now_ms}-{uuid.uuid4().hex[:8]}"
