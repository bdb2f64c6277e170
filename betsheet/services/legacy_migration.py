"""One-way migration of the 50-row legacy grid into canonical entries.

The grid held running totals with no customer attribution: row ``i`` carried
top/bottom totals for number ``i`` (left pair) and number ``i + 50`` (right
pair). Each non-zero bucket becomes one synthesized entry owned by a
placeholder customer. Identifiers depend only on number and bucket, so
migrating the same grid twice yields the same ids.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from betsheet.domain import (
    UNRECOGNIZED,
    BetEntry,
    BetType,
    LegacyGridRow,
    ParseResult,
    Recognized,
    utc_now_iso,
)
from betsheet.utils.parsing import to_non_negative_int, zero_pad2

logger = logging.getLogger(__name__)

LEGACY_ROW_COUNT = 50
LEGACY_CUSTOMER_NAME = "Legacy Data"


def normalize_legacy_rows(value: Any) -> list[LegacyGridRow] | None:
    """Coerce a 50-element list into grid rows; anything else is None."""

    if not isinstance(value, list) or len(value) != LEGACY_ROW_COUNT:
        return None

    rows: list[LegacyGridRow] = []
    for raw in value:
        source = raw if isinstance(raw, Mapping) else {}
        rows.append(
            LegacyGridRow(
                left_top=to_non_negative_int(source.get("leftTop")),
                left_bottom=to_non_negative_int(source.get("leftBottom")),
                right_top=to_non_negative_int(source.get("rightTop")),
                right_bottom=to_non_negative_int(source.get("rightBottom")),
            )
        )
    return rows


def _legacy_entry(number: int, bet_type: BetType, amount: int, created_at: str) -> BetEntry:
    padded = zero_pad2(number)
    return BetEntry(
        id=f"legacy-{number}-{bet_type.value}",
        customer_name=LEGACY_CUSTOMER_NAME,
        number=padded,
        amount=amount,
        type=bet_type,
        created_at=created_at,
    )


def convert_legacy_rows(rows: list[LegacyGridRow], now: str | None = None) -> list[BetEntry]:
    created_at = now or utc_now_iso()
    entries: list[BetEntry] = []

    for index, row in enumerate(rows):
        buckets = (
            (index, BetType.TOP, row.left_top),
            (index, BetType.BOTTOM, row.left_bottom),
            (index + LEGACY_ROW_COUNT, BetType.TOP, row.right_top),
            (index + LEGACY_ROW_COUNT, BetType.BOTTOM, row.right_bottom),
        )
        for number, bet_type, amount in buckets:
            if amount > 0:
                entries.append(_legacy_entry(number, bet_type, amount, created_at))

    return entries


def migrate_legacy_grid(value: Any, now: str | None = None) -> ParseResult:
    rows = normalize_legacy_rows(value)
    if rows is None:
        return UNRECOGNIZED

    entries = convert_legacy_rows(rows, now=now)
    logger.info("Migrated legacy grid into %d entries", len(entries))
    return Recognized(entries)
