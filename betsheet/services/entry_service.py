"""Business logic for recording a customer's bets."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from betsheet.domain import BetEntry, BetType, new_entry_id, utc_now_iso
from betsheet.errors import ValidationError
from betsheet.repositories.entry_repository import EntryRepository
from betsheet.utils.parsing import (
    digits_only,
    normalize_name,
    to_int_in_range,
    to_non_negative_int,
    zero_pad2,
)

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 80
MAX_AMOUNT_DIGITS = 9


@dataclass(frozen=True)
class ParsedDraft:
    number: str
    amount: int
    type: BetType


def _draft_text(value: Any) -> str:
    if value is None:
        return ""
    return digits_only(str(value))


def parse_drafts(drafts: Sequence[Mapping[str, Any]], bet_type: BetType) -> list[ParsedDraft]:
    """Validate one half's draft rows.

    Blank rows are skipped. The first invalid row raises ValidationError; a
    number outside the half's range is rejected, never clamped or moved to
    the other half.
    """

    min_value, max_value = bet_type.number_range
    label = bet_type.value.capitalize()
    parsed: list[ParsedDraft] = []

    for row, draft in enumerate(drafts, start=1):
        raw_number = _draft_text(draft.get("number"))
        raw_amount = _draft_text(draft.get("amount"))

        if not raw_number and not raw_amount:
            continue

        details = {"field": f"{bet_type.value}_bets", "row": row}

        if not raw_number or not raw_amount:
            raise ValidationError(
                f"{label} row {row}: number and amount are both required",
                details=details,
            )

        number = to_int_in_range(raw_number, min_value, max_value)
        if number is None:
            raise ValidationError(
                f"{label} row {row}: number must be between {zero_pad2(min_value)}-{zero_pad2(max_value)}",
                details=details,
            )

        if len(raw_amount) > MAX_AMOUNT_DIGITS:
            raise ValidationError(
                f"{label} row {row}: amount must be at most {MAX_AMOUNT_DIGITS} digits",
                details=details,
            )

        amount = to_non_negative_int(raw_amount)
        if amount <= 0:
            raise ValidationError(
                f"{label} row {row}: amount must be greater than 0",
                details=details,
            )

        parsed.append(ParsedDraft(number=zero_pad2(number), amount=amount, type=bet_type))

    return parsed


class EntryService:
    """Entry use-cases."""

    def __init__(self, repository: EntryRepository) -> None:
        self._repo = repository

    def list_entries(self) -> list[BetEntry]:
        return self._repo.load()

    def submit(
        self,
        customer_name: Any,
        top_bets: Sequence[Mapping[str, Any]] = (),
        bottom_bets: Sequence[Mapping[str, Any]] = (),
        now: str | None = None,
    ) -> list[BetEntry]:
        """Record a batch of bets for one customer.

        Either every row is accepted and saved, or ValidationError is raised
        and nothing is written.
        """

        name = normalize_name(customer_name)
        if not name:
            raise ValidationError("Customer name is required", details={"field": "customer_name"})
        if len(name) > MAX_NAME_LENGTH:
            raise ValidationError(
                f"Customer name must be at most {MAX_NAME_LENGTH} characters",
                details={"field": "customer_name"},
            )

        drafts = parse_drafts(top_bets, BetType.TOP) + parse_drafts(bottom_bets, BetType.BOTTOM)
        if not drafts:
            raise ValidationError("Enter at least one top or bottom bet", details={"field": "bets"})

        created_at = now or utc_now_iso()
        new_entries = [
            BetEntry(
                id=new_entry_id(),
                customer_name=name,
                number=draft.number,
                amount=draft.amount,
                type=draft.type,
                created_at=created_at,
            )
            for draft in drafts
        ]

        self._repo.save([*new_entries, *self._repo.load()])
        logger.info("Recorded %d bet(s) for %s", len(new_entries), name)
        return new_entries
