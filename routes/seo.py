"""
SEO Analysis Route

Exposes the SEO analyzer over HTTP.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from errors import (
    AnalysisError,
    CompletionTimeout,
    CompletionUpstreamError,
    UnparsableCompletion,
    UpstreamUnavailable,
)
from models import AnalysisErrorResponse, AnalysisRequest, AnalysisSuccessResponse
from services.seo_processor import SeoAnalyzer, get_seo_analyzer

router = APIRouter(tags=["seo"])

_ERROR_STATUS = {
    error.error_type: error.status_code
    for error in (UpstreamUnavailable, CompletionUpstreamError, CompletionTimeout, UnparsableCompletion)
}


@router.post(
    "/seo/analyze",
    response_model=AnalysisSuccessResponse,
    responses={
        502: {"model": AnalysisErrorResponse},
        504: {"model": AnalysisErrorResponse},
    },
)
async def analyze_seo(
    request: AnalysisRequest,
    analyzer: SeoAnalyzer = Depends(get_seo_analyzer),
):
    """
    Generate an SEO report for a video title using live competitor data.

    Args:
        request: Title plus optional description, audience and geo

    Returns:
        Success envelope, or the error envelope with the error's HTTP status
    """
    result = await analyzer.analyze(request)

    if isinstance(result, AnalysisErrorResponse):
        status_code = _ERROR_STATUS.get(result.error_type, AnalysisError.status_code)
        return JSONResponse(status_code=status_code, content=result.model_dump(mode="json"))

    return result
