"""
Completion Node

Requests the SEO report completion from the LLM provider.
"""

from errors import AnalysisError
from services.llm import CompletionClient
from workflow.state import AnalysisState


async def request_completion_node(state: AnalysisState, client: CompletionClient) -> dict:
    """
    Node for the completion call.

    Args:
        state: Graph state holding the assembled prompt
        client: Completion provider client

    Returns:
        State update with the raw `completion`, or `error` on failure
    """
    try:
        completion = await client.complete(state["prompt"])
    except AnalysisError as e:
        return {"error": e}
    return {"completion": completion}
