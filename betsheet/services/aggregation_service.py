"""Derived views over the canonical entry list.

Every function here is a pure projection: it never relies on the physical
order of its input and sorts explicitly wherever order is observable.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from betsheet.domain import BetEntry, BetType
from betsheet.utils.parsing import name_key


@dataclass(frozen=True)
class BetSummary:
    top_total: int
    bottom_total: int
    total_amount: int
    total_entries: int
    unique_people: int
    active_numbers: int


@dataclass(frozen=True)
class NumberSummary:
    number: str
    people_count: int
    bet_count: int
    total_amount: int
    top_amount: int
    bottom_amount: int
    entries: list[BetEntry] = field(default_factory=list)

    def amount_for(self, bet_type: BetType) -> int:
        return self.top_amount if bet_type is BetType.TOP else self.bottom_amount


@dataclass(frozen=True)
class CustomerSummary:
    customer_name: str
    bet_count: int
    total_amount: int
    top_amount: int
    bottom_amount: int
    numbers: list[str] = field(default_factory=list)
    entries: list[BetEntry] = field(default_factory=list)


@dataclass(frozen=True)
class LeaderboardItem:
    rank: int
    number: str
    amount: int


def newest_first(entries: Iterable[BetEntry]) -> list[BetEntry]:
    # sorted() is stable with reverse=True, so equal timestamps keep input order.
    return sorted(entries, key=lambda e: e.created_at, reverse=True)


def _number_value(number: str) -> int:
    return int(number)


def _split_amounts(entries: Iterable[BetEntry]) -> tuple[int, int]:
    top = 0
    bottom = 0
    for entry in entries:
        if entry.type is BetType.TOP:
            top += entry.amount
        else:
            bottom += entry.amount
    return top, bottom


def build_bet_summary(entries: Sequence[BetEntry]) -> BetSummary:
    top_total, bottom_total = _split_amounts(entries)
    return BetSummary(
        top_total=top_total,
        bottom_total=bottom_total,
        total_amount=top_total + bottom_total,
        total_entries=len(entries),
        unique_people=len({name_key(e.customer_name) for e in entries}),
        active_numbers=len({e.number for e in entries}),
    )


def build_number_summaries(entries: Sequence[BetEntry]) -> list[NumberSummary]:
    """Group entries by number, ascending by numeric value.

    Numbers with no entries are omitted.
    """

    groups: dict[str, list[BetEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.number, []).append(entry)

    summaries: list[NumberSummary] = []
    for number in sorted(groups, key=_number_value):
        group = groups[number]
        top_amount, bottom_amount = _split_amounts(group)
        summaries.append(
            NumberSummary(
                number=number,
                people_count=len({name_key(e.customer_name) for e in group}),
                bet_count=len(group),
                total_amount=top_amount + bottom_amount,
                top_amount=top_amount,
                bottom_amount=bottom_amount,
                entries=newest_first(group),
            )
        )
    return summaries


def find_number_summary(entries: Sequence[BetEntry], number: str) -> NumberSummary | None:
    summaries = build_number_summaries([e for e in entries if e.number == number])
    return summaries[0] if summaries else None


def build_leaderboard(
    summaries: Sequence[NumberSummary],
    bet_type: BetType,
    limit: int = 10,
) -> list[LeaderboardItem]:
    """Numbers with the largest amount staked on one half.

    Ties keep ascending number order.
    """

    ordered = sorted(summaries, key=lambda s: _number_value(s.number))
    ranked = sorted(
        (s for s in ordered if s.amount_for(bet_type) > 0),
        key=lambda s: s.amount_for(bet_type),
        reverse=True,
    )
    return [
        LeaderboardItem(rank=i, number=s.number, amount=s.amount_for(bet_type))
        for i, s in enumerate(ranked[: max(0, limit)], start=1)
    ]


def build_customer_summaries(entries: Sequence[BetEntry]) -> list[CustomerSummary]:
    """Group entries per customer (case-insensitive), biggest total first."""

    groups: dict[str, list[BetEntry]] = {}
    for entry in entries:
        groups.setdefault(name_key(entry.customer_name), []).append(entry)

    summaries: list[tuple[str, CustomerSummary]] = []
    for key, group in groups.items():
        ordered = newest_first(group)
        top_amount, bottom_amount = _split_amounts(group)
        summaries.append(
            (
                key,
                CustomerSummary(
                    customer_name=ordered[0].customer_name,
                    bet_count=len(group),
                    total_amount=top_amount + bottom_amount,
                    top_amount=top_amount,
                    bottom_amount=bottom_amount,
                    numbers=sorted({e.number for e in group}, key=_number_value),
                    entries=ordered,
                ),
            )
        )

    summaries.sort(key=lambda item: (-item[1].total_amount, item[0]))
    return [summary for _, summary in summaries]
