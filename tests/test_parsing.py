from __future__ import annotations

import pytest

from betsheet.utils.parsing import (
    digits_only,
    name_key,
    normalize_name,
    to_int_in_range,
    to_non_negative_int,
    zero_pad2,
)


def test_digits_only_strips_everything_else() -> None:
    assert digits_only("1,500 baht") == "1500"
    assert digits_only("abc") == ""
    assert digits_only("") == ""


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (42, 42),
        (-7, 0),
        (3.9, 3),
        (-3.9, 0),
        (float("nan"), 0),
        (float("inf"), 0),
        ("120", 120),
        ("1,200", 1200),
        ("-5", 5),
        ("", 0),
        ("abc", 0),
        (None, 0),
        (True, 0),
        ({"a": 1}, 0),
    ],
)
def test_to_non_negative_int(value, expected) -> None:
    assert to_non_negative_int(value) == expected


def test_to_int_in_range_bounds_are_inclusive() -> None:
    assert to_int_in_range("00", 0, 49) == 0
    assert to_int_in_range("49", 0, 49) == 49
    assert to_int_in_range("50", 0, 49) is None
    assert to_int_in_range(49, 50, 99) is None
    assert to_int_in_range("", 1, 9) is None


def test_zero_pad2() -> None:
    assert zero_pad2(7) == "07"
    assert zero_pad2(0) == "00"
    assert zero_pad2(50) == "50"


def test_normalize_name_collapses_whitespace() -> None:
    assert normalize_name("  Somchai   Jaidee \n") == "Somchai Jaidee"
    assert normalize_name(None) == ""
    assert normalize_name("   ") == ""


def test_name_key_is_case_insensitive() -> None:
    assert name_key("Somchai") == name_key(" somchai ")


def test_oversized_digit_runs_do_not_raise() -> None:
    huge = "9" * 5000

    assert to_non_negative_int(huge) == 0
    assert to_int_in_range(huge, 0, 99) is None
    assert to_int_in_range("0" * 5000 + "7", 0, 99) == 7
