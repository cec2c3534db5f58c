"""
Prompt Node

Renders the completion prompt from the request and competitor summary.
"""

from workflow.prompts.seo import build_seo_analysis_prompt
from workflow.state import AnalysisState


def build_prompt_node(state: AnalysisState) -> dict:
    return {"prompt": build_seo_analysis_prompt(state["request"], state["summary"])}
