"""Summary routes (controllers). Every view is recomputed from storage."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from betsheet.db import get_entry_repository
from betsheet.domain import BetType
from betsheet.errors import NotFoundError, ValidationError
from betsheet.schemas.summary import (
    BetSummarySchema,
    CustomerSummarySchema,
    LeaderboardItemSchema,
    NumberSummarySchema,
)
from betsheet.services.aggregation_service import (
    build_bet_summary,
    build_customer_summaries,
    build_leaderboard,
    build_number_summaries,
    find_number_summary,
)
from betsheet.utils.parsing import to_int_in_range, zero_pad2
from betsheet.utils.responses import ok

summary_bp = Blueprint("summary", __name__)

_bet_summary_schema = BetSummarySchema()
_number_schema = NumberSummarySchema()
_numbers_schema = NumberSummarySchema(many=True)
_customers_schema = CustomerSummarySchema(many=True)
_leaders_schema = LeaderboardItemSchema(many=True)


@summary_bp.get("/summary")
def get_summary():
    entries = get_entry_repository().load()
    return ok(_bet_summary_schema.dump(build_bet_summary(entries)))


@summary_bp.get("/numbers")
def list_number_summaries():
    entries = get_entry_repository().load()
    return ok(_numbers_schema.dump(build_number_summaries(entries)))


@summary_bp.get("/numbers/<raw_number>")
def get_number_summary(raw_number: str):
    parsed = to_int_in_range(raw_number, 0, 99) if raw_number.isascii() and raw_number.isdigit() else None
    if parsed is None:
        raise ValidationError("number must be between 00-99")

    number = zero_pad2(parsed)
    summary = find_number_summary(get_entry_repository().load(), number)
    if summary is None:
        raise NotFoundError(message=f"No bets on number {number}")
    return ok(_number_schema.dump(summary))


@summary_bp.get("/leaderboard")
def get_leaderboard():
    """Top numbers per half. Query params: limit (default LEADERBOARD_SIZE)."""

    raw_limit = (request.args.get("limit") or "").strip()
    limit = int(current_app.config.get("LEADERBOARD_SIZE", 10))
    if raw_limit:
        try:
            limit = int(raw_limit)
        except ValueError as e:
            raise ValidationError("limit must be an integer") from e
        if limit <= 0:
            raise ValidationError("limit must be positive")

    summaries = build_number_summaries(get_entry_repository().load())
    return ok(
        {
            "top": _leaders_schema.dump(build_leaderboard(summaries, BetType.TOP, limit)),
            "bottom": _leaders_schema.dump(build_leaderboard(summaries, BetType.BOTTOM, limit)),
        }
    )


@summary_bp.get("/customers")
def list_customer_summaries():
    entries = get_entry_repository().load()
    return ok(_customers_schema.dump(build_customer_summaries(entries)))
