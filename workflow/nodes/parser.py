"""
Parser Nodes

Turn raw completion text into a normalized JSON value.
"""

from errors import UnparsableCompletion
from services.extractor import extract_json, strip_code_fences
from services.scores import normalize_scores
from workflow.state import AnalysisState


def parse_completion_node(state: AnalysisState) -> dict:
    """
    Node for JSON extraction from the completion text.

    The cleaned text is kept in state so a later schema failure can report it.
    """
    completion = state["completion"]
    cleaned = strip_code_fences(completion)
    try:
        parsed = extract_json(completion)
    except UnparsableCompletion as e:
        return {"error": e, "cleaned_completion": cleaned}
    return {"parsed": parsed, "cleaned_completion": cleaned}


def normalize_scores_node(state: AnalysisState) -> dict:
    return {"parsed": normalize_scores(state["parsed"])}
