"""Canonicalize persisted or incoming entry records.

The parse is lossy on purpose: a malformed record is dropped on its own and
never aborts the rest of the batch.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from betsheet.domain import (
    UNRECOGNIZED,
    BetEntry,
    BetType,
    ParseResult,
    Recognized,
    new_entry_id,
    utc_now_iso,
)
from betsheet.utils.parsing import normalize_name, to_int_in_range, to_non_negative_int, zero_pad2

logger = logging.getLogger(__name__)


def normalize_entry(source: Any) -> BetEntry | None:
    """Return the canonical entry for one record, or None if it is invalid."""

    if not isinstance(source, Mapping):
        return None

    customer_name = normalize_name(source.get("customerName"))
    number = to_int_in_range(source.get("number"), 0, 99)
    amount = to_non_negative_int(source.get("amount"))

    if not customer_name or number is None or amount <= 0:
        return None

    raw_id = source.get("id")
    created_at = source.get("createdAt")
    if not isinstance(created_at, str) or not created_at:
        created_at = utc_now_iso()

    return BetEntry(
        id=str(raw_id) if raw_id is not None else new_entry_id(),
        customer_name=customer_name,
        number=zero_pad2(number),
        amount=amount,
        type=BetType.BOTTOM if source.get("type") == BetType.BOTTOM.value else BetType.TOP,
        created_at=created_at,
    )


def normalize_entries(value: Any) -> ParseResult:
    """Interpret ``value`` as a list of entry records.

    Only a list is recognized. Each element is validated independently and
    dropped when the name is empty, the number is outside 00-99 or the
    amount is not positive.
    """

    if not isinstance(value, list):
        return UNRECOGNIZED

    entries: list[BetEntry] = []
    for source in value:
        entry = normalize_entry(source)
        if entry is not None:
            entries.append(entry)

    dropped = len(value) - len(entries)
    if dropped:
        logger.debug("Dropped %d malformed entry record(s) of %d", dropped, len(value))

    return Recognized(entries)


def to_records(entries: list[BetEntry]) -> list[dict[str, Any]]:
    return [entry.to_record() for entry in entries]
