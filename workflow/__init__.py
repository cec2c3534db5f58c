"""
Workflow Module

Contains the LangGraph analysis workflow, its nodes, and prompts.
"""

from workflow.graph import create_analysis_graph
from workflow.nodes.assembler import assemble_result
from workflow.prompts.seo import build_seo_analysis_prompt

__all__ = [
    "create_analysis_graph",
    "assemble_result",
    "build_seo_analysis_prompt",
]
