"""
SEO Processor Service

Runs one SEO analysis end to end: competitor search, completion, parsing,
score normalization and result assembly.
"""

import logging
from functools import lru_cache
from typing import Optional, Union

from config import Settings, load_settings
from models import AnalysisErrorResponse, AnalysisRequest, AnalysisSuccessResponse
from services.llm import CompletionClient
from services.search import CompetitorAggregator
from workflow.graph import create_analysis_graph

# Set up logger
logger = logging.getLogger(__name__)


class SeoAnalyzer:
    """
    Processes SEO analysis requests through the LangGraph workflow.

    Holds no per-request state, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        settings: Settings,
        aggregator: Optional[CompetitorAggregator] = None,
        completion_client: Optional[CompletionClient] = None,
    ):
        """
        Initialize the analyzer.

        Args:
            settings: Provider settings
            aggregator: Optional pre-built competitor aggregator
            completion_client: Optional pre-built completion client
        """
        self.aggregator = aggregator or CompetitorAggregator(settings)
        self.completion_client = completion_client or CompletionClient(settings)
        self.graph = create_analysis_graph(self.aggregator, self.completion_client)

    async def analyze(
        self,
        request: AnalysisRequest
    ) -> Union[AnalysisSuccessResponse, AnalysisErrorResponse]:
        """
        Analyze a video title against live competitor data.

        Args:
            request: Analysis request

        Returns:
            Success envelope, or a single classified error envelope
        """
        logger.info(f"Starting SEO analysis for title: {request.title!r}")
        final_state = await self.graph.ainvoke({"request": request})
        response = final_state["response"]
        logger.info(f"SEO analysis finished with status {response.status}")
        return response


@lru_cache(maxsize=1)
def get_seo_analyzer() -> SeoAnalyzer:
    """
    Get the process-wide SeoAnalyzer built from environment settings.

    Returns:
        SeoAnalyzer instance
    """
    return SeoAnalyzer(load_settings())
