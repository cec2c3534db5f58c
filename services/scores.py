"""
Score Normalizer

Puts the model's SEO scores onto the canonical integer 0-100 scale.
"""

import copy
import math
from typing import Any

from utils import round_half_up

SCORE_SECTION = "seo_score_breakdown"


def normalize_score(value: float) -> int:
    """
    Normalize a single score.

    Values <= 1 are read as fractions and scaled by 100; the result is
    clamped into [0, 100] and rounded half-up.

    Examples:
        0.85 -> 85, 42 -> 42, 150 -> 100, -5 -> 0
    """
    if math.isnan(value):
        return 0
    if value <= 1:
        value = value * 100
    return round_half_up(min(100.0, max(0.0, float(value))))


def _as_number(text: str) -> float | None:
    try:
        value = float(text.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _normalize_leaves(node: Any) -> Any:
    if isinstance(node, bool):
        return node
    if isinstance(node, (int, float)):
        return normalize_score(node)
    # Numeric strings such as "0.85" or "150" are scores too
    if isinstance(node, str):
        number = _as_number(node)
        return normalize_score(number) if number is not None else node
    if isinstance(node, dict):
        return {key: _normalize_leaves(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_normalize_leaves(item) for item in node]
    return node


def normalize_scores(parsed: Any) -> Any:
    """
    Return a copy of the parsed completion with every numeric leaf under
    `seo_score_breakdown` normalized. Other sections are left untouched and
    non-dict input is returned unchanged.
    """
    if not isinstance(parsed, dict) or SCORE_SECTION not in parsed:
        return parsed

    result = copy.copy(parsed)
    result[SCORE_SECTION] = _normalize_leaves(parsed[SCORE_SECTION])
    return result
