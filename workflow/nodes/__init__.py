"""
Workflow Nodes Module

Contains LangGraph node implementations for each analysis stage.
"""

from workflow.nodes.competitors import fetch_competitors_node
from workflow.nodes.prompt import build_prompt_node
from workflow.nodes.completion import request_completion_node
from workflow.nodes.parser import parse_completion_node, normalize_scores_node
from workflow.nodes.assembler import assemble_result, assemble_result_node

__all__ = [
    "fetch_competitors_node",
    "build_prompt_node",
    "request_completion_node",
    "parse_completion_node",
    "normalize_scores_node",
    "assemble_result",
    "assemble_result_node",
]
