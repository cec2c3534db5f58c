"""
Result Assembler Node

Merges the competitor summary with the normalized report, or turns the
first pipeline failure into a single error envelope.
"""

import logging
from typing import Any, Optional, Union

from pydantic import ValidationError

from errors import AnalysisError, UnparsableCompletion
from models import (
    AnalysisErrorResponse,
    AnalysisSuccessResponse,
    CompetitorSummary,
    SeoReport,
)
from workflow.state import AnalysisState

logger = logging.getLogger(__name__)


def error_response(error: AnalysisError) -> AnalysisErrorResponse:
    return AnalysisErrorResponse(
        error_type=error.error_type,
        message=error.message,
        raw=error.raw,
    )


def assemble_result(
    summary: Optional[CompetitorSummary],
    parsed: Any,
    error: Optional[AnalysisError] = None,
    cleaned_completion: Optional[str] = None,
) -> Union[AnalysisSuccessResponse, AnalysisErrorResponse]:
    """
    Build the final response envelope.

    Args:
        summary: Competitor summary (None if the search stage failed)
        parsed: Normalized completion JSON (None if an earlier stage failed)
        error: First error raised by any stage, if any
        cleaned_completion: Fence-stripped completion text, reported on schema failure

    Returns:
        Success envelope with report and competitor data, or one error envelope
    """
    if error is not None:
        logger.warning(f"Analysis failed ({error.error_type}): {error.message}")
        return error_response(error)

    try:
        report = SeoReport.model_validate(parsed)
    except ValidationError as e:
        logger.warning(f"Completion did not match the report schema: {e.error_count()} error(s)")
        return error_response(UnparsableCompletion(
            "Completion did not match the report schema",
            raw=cleaned_completion,
        ))

    return AnalysisSuccessResponse(
        data=report,
        competitors=summary.competitors,
        average_views=summary.average_views,
        competition_level=summary.competition_level,
    )


def assemble_result_node(state: AnalysisState) -> dict:
    return {
        "response": assemble_result(
            summary=state.get("summary"),
            parsed=state.get("parsed"),
            error=state.get("error"),
            cleaned_completion=state.get("cleaned_completion"),
        )
    }
