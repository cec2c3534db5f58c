"""
Services Module

Contains service layer implementations for external integrations
and business logic.
"""

from services.search import (
    CompetitorAggregator,
    competition_level,
    summarize_competitors
)
from services.llm import (
    CompletionClient,
    get_completion_model
)
from services.extractor import (
    extract_json,
    strip_code_fences
)
from services.scores import (
    normalize_score,
    normalize_scores
)

__all__ = [
    # Search
    "CompetitorAggregator",
    "competition_level",
    "summarize_competitors",
    # LLM
    "CompletionClient",
    "get_completion_model",
    # Parsing
    "extract_json",
    "strip_code_fences",
    "normalize_score",
    "normalize_scores",
]
