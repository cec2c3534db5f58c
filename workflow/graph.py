"""
LangGraph Definition

Defines the SEO analysis graph with nodes and edges.
"""

from langgraph.graph import StateGraph, START, END

from services.llm import CompletionClient
from services.search import CompetitorAggregator
from workflow.nodes.assembler import assemble_result_node
from workflow.nodes.competitors import fetch_competitors_node
from workflow.nodes.completion import request_completion_node
from workflow.nodes.parser import normalize_scores_node, parse_completion_node
from workflow.nodes.prompt import build_prompt_node
from workflow.state import AnalysisState


def _route_on_error(next_node: str):
    def route(state: AnalysisState) -> str:
        return "assemble" if state.get("error") is not None else next_node
    return route


def create_analysis_graph(aggregator: CompetitorAggregator, completion_client: CompletionClient):
    """
    Create the SEO analysis graph.

    Stages run strictly in sequence:
    competitors -> prompt -> completion -> parse -> normalize -> assemble.
    A stage that records an error skips straight to assemble.

    Args:
        aggregator: Competitor aggregator used by the competitors node
        completion_client: Completion client used by the completion node

    Returns:
        Compiled LangGraph graph
    """
    async def competitors(state: AnalysisState) -> dict:
        return await fetch_competitors_node(state, aggregator)

    async def completion(state: AnalysisState) -> dict:
        return await request_completion_node(state, completion_client)

    # Build the graph
    graph_builder = StateGraph(AnalysisState)
    graph_builder.add_node("competitors", competitors)
    graph_builder.add_node("prompt", build_prompt_node)
    graph_builder.add_node("completion", completion)
    graph_builder.add_node("parse", parse_completion_node)
    graph_builder.add_node("normalize", normalize_scores_node)
    graph_builder.add_node("assemble", assemble_result_node)

    graph_builder.add_edge(START, "competitors")
    graph_builder.add_conditional_edges(
        "competitors", _route_on_error("prompt"), ["prompt", "assemble"]
    )
    graph_builder.add_edge("prompt", "completion")
    graph_builder.add_conditional_edges(
        "completion", _route_on_error("parse"), ["parse", "assemble"]
    )
    graph_builder.add_conditional_edges(
        "parse", _route_on_error("normalize"), ["normalize", "assemble"]
    )
    graph_builder.add_edge("normalize", "assemble")
    graph_builder.add_edge("assemble", END)

    return graph_builder.compile()
