from __future__ import annotations

from betsheet.domain import BetType
from betsheet.services.aggregation_service import (
    build_bet_summary,
    build_customer_summaries,
    build_leaderboard,
    build_number_summaries,
    find_number_summary,
)
from tests.conftest import make_entry


def _sample():
    return [
        make_entry("09", 100, BetType.TOP, "Somchai", "2024-01-01T10:00:00.000Z"),
        make_entry("00", 50, BetType.TOP, "Nok", "2024-01-01T09:00:00.000Z"),
        make_entry("50", 70, BetType.BOTTOM, "somchai", "2024-01-01T11:00:00.000Z"),
        make_entry("10", 30, BetType.TOP, "Ploy", "2024-01-01T08:00:00.000Z"),
        make_entry("09", 25, BetType.BOTTOM, "Nok", "2024-01-01T12:00:00.000Z"),
    ]


def test_bet_summary_totals() -> None:
    summary = build_bet_summary(_sample())

    assert summary.top_total == 180
    assert summary.bottom_total == 95
    assert summary.total_amount == summary.top_total + summary.bottom_total
    assert summary.total_entries == 5
    assert summary.unique_people == 3
    assert summary.active_numbers == 4


def test_bet_summary_of_nothing() -> None:
    summary = build_bet_summary([])

    assert (summary.total_amount, summary.total_entries, summary.unique_people, summary.active_numbers) == (0, 0, 0, 0)


def test_number_summaries_sorted_numerically() -> None:
    summaries = build_number_summaries(_sample())

    assert [s.number for s in summaries] == ["00", "09", "10", "50"]


def test_number_summaries_account_for_every_entry() -> None:
    entries = _sample()
    summaries = build_number_summaries(entries)

    assert sum(s.bet_count for s in summaries) == len(entries)
    assert sum(s.total_amount for s in summaries) == build_bet_summary(entries).total_amount


def test_number_summary_rollup() -> None:
    nine = find_number_summary(_sample(), "09")

    assert nine is not None
    assert (nine.bet_count, nine.people_count) == (2, 2)
    assert (nine.top_amount, nine.bottom_amount, nine.total_amount) == (100, 25, 125)
    assert [e.created_at for e in nine.entries] == [
        "2024-01-01T12:00:00.000Z",
        "2024-01-01T10:00:00.000Z",
    ]


def test_people_count_dedups_names() -> None:
    entries = [
        make_entry("12", 10, customer_name="Somchai", entry_id="a"),
        make_entry("12", 20, customer_name=" somchai ", entry_id="b"),
    ]

    (summary,) = build_number_summaries(entries)

    assert summary.people_count == 1
    assert summary.bet_count == 2


def test_equal_timestamps_keep_input_order() -> None:
    entries = [make_entry("33", amount, entry_id=f"e{amount}") for amount in (1, 2, 3)]

    (summary,) = build_number_summaries(entries)

    assert [e.id for e in summary.entries] == ["e1", "e2", "e3"]


def test_missing_number_has_no_summary() -> None:
    assert find_number_summary(_sample(), "77") is None


def test_leaderboard_ranks_by_half() -> None:
    entries = [
        make_entry("05", 10, entry_id="a"),
        make_entry("07", 40, entry_id="b"),
        make_entry("03", 40, entry_id="c"),
        make_entry("60", 99, BetType.BOTTOM, entry_id="d"),
    ]
    summaries = build_number_summaries(entries)

    top = build_leaderboard(summaries, BetType.TOP, limit=2)
    bottom = build_leaderboard(summaries, BetType.BOTTOM)

    assert [(i.rank, i.number, i.amount) for i in top] == [(1, "03", 40), (2, "07", 40)]
    assert [(i.rank, i.number, i.amount) for i in bottom] == [(1, "60", 99)]


def test_customer_summaries_group_case_insensitively() -> None:
    customers = build_customer_summaries(_sample())

    assert [c.customer_name for c in customers] == ["somchai", "Nok", "Ploy"]
    somchai = customers[0]
    assert (somchai.bet_count, somchai.total_amount) == (2, 170)
    assert somchai.numbers == ["09", "50"]
    assert (somchai.top_amount, somchai.bottom_amount) == (100, 70)
