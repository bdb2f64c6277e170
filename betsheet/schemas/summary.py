"""Schemas for derived summaries."""

from __future__ import annotations

from marshmallow import Schema, fields

from betsheet.schemas.entry import BetEntrySchema


class BetSummarySchema(Schema):
    top_total = fields.Int(data_key="topTotal")
    bottom_total = fields.Int(data_key="bottomTotal")
    total_amount = fields.Int(data_key="totalAmount")
    total_entries = fields.Int(data_key="totalEntries")
    unique_people = fields.Int(data_key="uniquePeople")
    active_numbers = fields.Int(data_key="activeNumbers")


class NumberSummarySchema(Schema):
    number = fields.Str()
    people_count = fields.Int(data_key="peopleCount")
    bet_count = fields.Int(data_key="betCount")
    total_amount = fields.Int(data_key="totalAmount")
    top_amount = fields.Int(data_key="topAmount")
    bottom_amount = fields.Int(data_key="bottomAmount")
    entries = fields.List(fields.Nested(BetEntrySchema))


class CustomerSummarySchema(Schema):
    customer_name = fields.Str(data_key="customerName")
    bet_count = fields.Int(data_key="betCount")
    total_amount = fields.Int(data_key="totalAmount")
    top_amount = fields.Int(data_key="topAmount")
    bottom_amount = fields.Int(data_key="bottomAmount")
    numbers = fields.List(fields.Str())
    entries = fields.List(fields.Nested(BetEntrySchema))


class LeaderboardItemSchema(Schema):
    rank = fields.Int()
    number = fields.Str()
    amount = fields.Int()
