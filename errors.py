"""
Analysis Errors

Classified failures raised by the upstream clients and the completion parser.
Each carries a user-displayable message and an optional raw diagnostic payload.
"""

from typing import Any


class AnalysisError(Exception):
    """Base class for every classified analysis failure."""

    error_type = "analysis_error"
    status_code = 500

    def __init__(self, message: str, raw: Any = None):
        super().__init__(message)
        self.message = message
        self.raw = raw


class UpstreamUnavailable(AnalysisError):
    """Search provider unreachable or returned a malformed response."""

    error_type = "upstream_unavailable"
    status_code = 502


class CompletionUpstreamError(AnalysisError):
    """Completion provider returned a non-success status or malformed body."""

    error_type = "completion_upstream_error"
    status_code = 502

    def __init__(self, message: str, raw: Any = None, status: int | None = None):
        super().__init__(message, raw)
        self.status = status


class CompletionTimeout(AnalysisError):
    error_type = "completion_timeout"
    status_code = 504


class UnparsableCompletion(AnalysisError):
    """No valid JSON report could be recovered from the completion text."""

    error_type = "unparsable_completion"
    status_code = 502
