"""
Completion Extractor

Recovers a JSON value from free-form completion text.
"""

import json
import re
from typing import Any

from errors import UnparsableCompletion

_LEADING_FENCE = re.compile(r"\A\s*```[\w+-]*[ \t]*")
_TRAILING_FENCE = re.compile(r"```\s*\Z")


def strip_code_fences(raw: str) -> str:
    """
    Remove a leading/trailing triple-backtick fence and surrounding whitespace.

    Args:
        raw: Raw completion text, e.g. "```json\\n{...}\\n```"

    Returns:
        Cleaned text
    """
    cleaned = _LEADING_FENCE.sub("", raw, count=1)
    cleaned = _TRAILING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return None


def extract_json(raw: str) -> Any:
    """
    Parse the completion text, falling back to the outermost brace span.

    Strategy, stopping at the first non-empty result:
      1. strict parse of the fence-stripped text
      2. strict parse of the span between the first "{" and the last "}"

    Args:
        raw: Raw completion text

    Returns:
        Parsed JSON value

    Raises:
        UnparsableCompletion: If neither attempt yields a non-empty value.
            The payload is the cleaned text, not the raw input.
    """
    cleaned = strip_code_fences(raw)

    parsed = _loads(cleaned)
    if parsed:
        return parsed

    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start != -1 and end > start:
        parsed = _loads(cleaned[start:end + 1])
        if parsed:
            return parsed

    raise UnparsableCompletion("JSON parse failed", raw=cleaned)
