from __future__ import annotations

from betsheet.domain import UNRECOGNIZED, BetType, Recognized
from betsheet.services.legacy_migration import (
    LEGACY_CUSTOMER_NAME,
    migrate_legacy_grid,
    normalize_legacy_rows,
)
from tests.conftest import legacy_grid

NOW = "2024-02-01T10:00:00.000Z"


def test_only_fifty_element_lists_are_recognized() -> None:
    assert normalize_legacy_rows(legacy_grid()[:49]) is None
    assert normalize_legacy_rows({"rows": legacy_grid()}) is None
    assert migrate_legacy_grid([]) is UNRECOGNIZED


def test_malformed_cells_default_to_zero() -> None:
    rows = legacy_grid()
    rows[0] = {"leftTop": "abc", "leftBottom": -4, "rightTop": "12"}
    rows[1] = None

    parsed = normalize_legacy_rows(rows)

    assert parsed is not None
    assert (parsed[0].left_top, parsed[0].left_bottom, parsed[0].right_top, parsed[0].right_bottom) == (0, 0, 12, 0)
    assert parsed[1].left_top == 0


def test_zero_bucket_creates_no_entry() -> None:
    result = migrate_legacy_grid(legacy_grid(row_3={"leftTop": 0, "leftBottom": 30}), now=NOW)

    assert isinstance(result, Recognized)
    assert len(result.entries) == 1
    entry = result.entries[0]
    assert (entry.number, entry.type, entry.amount) == ("03", BetType.BOTTOM, 30)


def test_right_side_maps_to_number_plus_fifty() -> None:
    result = migrate_legacy_grid(
        legacy_grid(row_7={"leftTop": 10, "rightTop": 20, "rightBottom": 5}),
        now=NOW,
    )

    assert [(e.number, e.type, e.amount) for e in result.entries] == [
        ("07", BetType.TOP, 10),
        ("57", BetType.TOP, 20),
        ("57", BetType.BOTTOM, 5),
    ]
    assert {e.customer_name for e in result.entries} == {LEGACY_CUSTOMER_NAME}
    assert {e.created_at for e in result.entries} == {NOW}


def test_migration_is_deterministic() -> None:
    grid = legacy_grid(row_0={"leftTop": 1, "leftBottom": 2}, row_49={"rightBottom": 9})

    first = migrate_legacy_grid(grid)
    second = migrate_legacy_grid(grid)

    def key(result):
        return [(e.id, e.number, e.amount, e.type) for e in result.entries]

    assert key(first) == key(second)
    assert [e.id for e in first.entries] == ["legacy-0-top", "legacy-0-bottom", "legacy-99-bottom"]
