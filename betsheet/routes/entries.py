"""Entry routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from betsheet.db import get_entry_repository
from betsheet.schemas.entry import BetEntrySchema, EntrySubmissionSchema
from betsheet.services.entry_service import EntryService
from betsheet.utils.responses import created, ok

entries_bp = Blueprint("entries", __name__)

_entries_schema = BetEntrySchema(many=True)
_submission_schema = EntrySubmissionSchema()


@entries_bp.get("/entries")
def list_entries():
    """List every entry in storage order (newest first)."""

    service = EntryService(get_entry_repository())
    return ok(_entries_schema.dump(service.list_entries()))


@entries_bp.post("/entries")
def create_entries():
    """Record one customer's top and bottom bets in a single batch."""

    payload = request.get_json(silent=True) or {}
    data = _submission_schema.load(payload)

    service = EntryService(get_entry_repository())
    new_entries = service.submit(
        data["customer_name"],
        top_bets=data["top_bets"],
        bottom_bets=data["bottom_bets"],
    )
    return created(_entries_schema.dump(new_entries))
