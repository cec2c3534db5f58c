"""
Utility Functions

Contains helpers for parsing human-formatted numbers and rounding.
"""

import math
import re
from typing import Any

_NON_DIGITS = re.compile(r"\D")


def parse_view_count(value: Any) -> int:
    """
    Parse a human-formatted view count such as "1,234 views".

    Every non-digit character is dropped before parsing, so "1,234 views"
    becomes 1234. Missing or digit-free values yield 0.

    Args:
        value: Raw view count from the search provider (string, int or None)

    Returns:
        Parsed non-negative view count
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        return max(int(value), 0) if math.isfinite(value) else 0

    digits = _NON_DIGITS.sub("", str(value))
    return int(digits) if digits else 0


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with halves rounded away from zero.

    Python's built-in round() uses banker's rounding, which would turn
    100000.5 into 100000 instead of 100001.
    """
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))
