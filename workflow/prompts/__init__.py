"""
Prompts Module

Contains prompt templates for the SEO report.
"""

from workflow.prompts.seo import (
    REPORT_SCHEMA,
    build_seo_analysis_prompt
)

__all__ = [
    "REPORT_SCHEMA",
    "build_seo_analysis_prompt",
]
