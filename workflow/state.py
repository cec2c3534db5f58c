"""
Workflow State

Shared state passed between the SEO analysis graph nodes.
"""

from typing import Any, TypedDict, Union

from errors import AnalysisError
from models import (
    AnalysisRequest,
    AnalysisErrorResponse,
    AnalysisSuccessResponse,
    CompetitorSummary,
)


class AnalysisState(TypedDict, total=False):
    request: AnalysisRequest
    summary: CompetitorSummary
    prompt: str
    completion: str
    cleaned_completion: str
    parsed: Any
    # Set by the first failing node; every later stage is skipped
    error: AnalysisError
    response: Union[AnalysisSuccessResponse, AnalysisErrorResponse]
