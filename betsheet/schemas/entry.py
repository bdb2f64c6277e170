"""Marshmallow schemas for bet entries."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate


class BetEntrySchema(Schema):
    """Serialize BetEntry using the persisted camelCase field names."""

    id = fields.Str(required=True)
    customer_name = fields.Str(required=True, data_key="customerName")
    number = fields.Str(required=True)
    amount = fields.Int(required=True)
    type = fields.Function(lambda entry: entry.type.value)
    created_at = fields.Str(required=True, data_key="createdAt")


class BetDraftSchema(Schema):
    """One form row. Values stay raw; the service applies digit-only parsing."""

    class Meta:
        unknown = EXCLUDE

    number = fields.Raw(required=False, load_default="", allow_none=True)
    amount = fields.Raw(required=False, load_default="", allow_none=True)


class EntrySubmissionSchema(Schema):
    """Validate a create-entries payload."""

    class Meta:
        unknown = EXCLUDE

    # Length is checked after whitespace is collapsed, in EntryService.
    customer_name = fields.Str(required=True, data_key="customerName")
    top_bets = fields.List(
        fields.Nested(BetDraftSchema),
        data_key="topBets",
        load_default=list,
        validate=validate.Length(max=100),
    )
    bottom_bets = fields.List(
        fields.Nested(BetDraftSchema),
        data_key="bottomBets",
        load_default=list,
        validate=validate.Length(max=100),
    )
