"""
Competitor Node

Fetches and aggregates competitor videos for the requested title.
"""

from errors import AnalysisError
from services.search import CompetitorAggregator
from workflow.state import AnalysisState


async def fetch_competitors_node(state: AnalysisState, aggregator: CompetitorAggregator) -> dict:
    """
    Node for competitor aggregation.

    Args:
        state: Graph state holding the analysis request
        aggregator: SerpAPI-backed competitor aggregator

    Returns:
        State update with `summary`, or `error` on failure
    """
    try:
        summary = await aggregator.fetch_summary(state["request"].title)
    except AnalysisError as e:
        return {"error": e}
    return {"summary": summary}
