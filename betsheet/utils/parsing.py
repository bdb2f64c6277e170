"""Lenient coercion helpers shared by input validation and data migration.

None of these raise: malformed input collapses to 0, "" or None and the caller
decides whether that is a validation error or a silent drop.
"""

from __future__ import annotations

import math
import re
from typing import Any

_NON_DIGITS = re.compile(r"[^0-9]")
_WHITESPACE = re.compile(r"\s+")

# Longest digit run (leading zeros aside) treated as a number; longer runs are garbage.
MAX_DIGITS = 15


def digits_only(text: str) -> str:
    """Strip every non-digit character."""

    return _NON_DIGITS.sub("", str(text))


def to_non_negative_int(value: Any) -> int:
    """Coerce a number or string to an int >= 0.

    Numbers are truncated toward zero and floored at 0. Strings keep their
    digits only, so "1,500" -> 1500 and "-5" -> 5. A digit run longer than
    MAX_DIGITS and anything else is 0.
    """

    if isinstance(value, bool):
        return 0

    if isinstance(value, int):
        return max(0, value)

    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return max(0, math.trunc(value))

    if isinstance(value, str):
        parsed = _parse_digits(value)
        return parsed if parsed is not None else 0

    return 0


def _parse_digits(text: str) -> int | None:
    """Digits of ``text`` as an int, 0 when there are none, None when there are too many."""

    cleaned = digits_only(text).lstrip("0")
    if len(cleaned) > MAX_DIGITS:
        return None
    return int(cleaned) if cleaned else 0


def to_int_in_range(value: Any, min_value: int, max_value: int) -> int | None:
    """Return the coerced value if it lies in [min_value, max_value], else None.

    An oversized digit string is None rather than 0, so it never lands in range.
    """

    if isinstance(value, str) and _parse_digits(value) is None:
        return None

    parsed = to_non_negative_int(value)
    if parsed < min_value or parsed > max_value:
        return None
    return parsed


def zero_pad2(n: int) -> str:
    return f"{int(n):02d}"


def normalize_name(value: Any) -> str:
    """Collapse whitespace runs and trim. None becomes ""."""

    if value is None:
        return ""
    return _WHITESPACE.sub(" ", str(value)).strip()


def name_key(name: str) -> str:
    # Identity of a customer for distinct-people counts.
    return name.lower().strip()
