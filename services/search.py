"""
Search Service

Fetches competing YouTube videos from SerpAPI and aggregates them into a
competitor summary.
"""

import logging
from typing import List, Optional

import httpx

from config import (
    Settings,
    MAX_COMPETITORS,
    MEDIUM_COMPETITION_MIN_VIEWS,
    HIGH_COMPETITION_MIN_VIEWS,
)
from errors import UpstreamUnavailable
from models import CompetitionLevel, CompetitorSummary, CompetitorVideo
from utils import parse_view_count, round_half_up

logger = logging.getLogger(__name__)


def competition_level(average_views: int) -> CompetitionLevel:
    """
    Classify how hard a query is to rank for from its average competitor views.

    Args:
        average_views: Rounded mean view count of the competitors

    Returns:
        "Low" below 100k, "Medium" below 500k, otherwise "High"
    """
    if average_views < MEDIUM_COMPETITION_MIN_VIEWS:
        return "Low"
    if average_views < HIGH_COMPETITION_MIN_VIEWS:
        return "Medium"
    return "High"


def _text_or_unknown(value) -> str:
    if value is None or value == "":
        return "Unknown"
    return value if isinstance(value, str) else str(value)


def summarize_competitors(video_results: List[dict]) -> CompetitorSummary:
    """
    Normalize raw SerpAPI video results into a competitor summary.

    Entries without a positive view count are dropped, then the first
    MAX_COMPETITORS survivors are kept in provider order.

    Args:
        video_results: The provider's `video_results` list

    Returns:
        CompetitorSummary with competitors, average views and competition level
    """
    competitors: List[CompetitorVideo] = []
    for entry in video_results:
        if not isinstance(entry, dict):
            continue

        views = parse_view_count(entry.get("views"))
        if views == 0:
            continue

        channel = entry.get("channel")
        channel_name = channel.get("name") if isinstance(channel, dict) else None

        competitors.append(CompetitorVideo(
            title=_text_or_unknown(entry.get("title")),
            channel=_text_or_unknown(channel_name),
            views=views,
        ))
        if len(competitors) == MAX_COMPETITORS:
            break

    average_views = (
        round_half_up(sum(c.views for c in competitors) / len(competitors))
        if competitors else 0
    )

    return CompetitorSummary(
        competitors=competitors,
        average_views=average_views,
        competition_level=competition_level(average_views),
    )


class CompetitorAggregator:
    """
    Queries the SerpAPI YouTube engine and builds a CompetitorSummary.
    """

    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        """
        Initialize the aggregator.

        Args:
            settings: Provider settings (SerpAPI key, URL and timeout)
            http_client: Optional shared AsyncClient, mainly for tests

        Raises:
            ValueError: If no SerpAPI key is configured
        """
        if not settings.serpapi_key:
            raise ValueError("SERPAPI_KEY environment variable is not set")
        self.settings = settings
        self.http_client = http_client

    async def _get(self, params: dict) -> httpx.Response:
        if self.http_client is not None:
            return await self.http_client.get(
                self.settings.serpapi_url, params=params, timeout=self.settings.search_timeout
            )
        async with httpx.AsyncClient(timeout=self.settings.search_timeout) as client:
            return await client.get(self.settings.serpapi_url, params=params)

    async def fetch_summary(self, query: str) -> CompetitorSummary:
        """
        Search YouTube for the query and aggregate the results.

        Args:
            query: Free-text search query (the video title)

        Returns:
            CompetitorSummary for the query

        Raises:
            UpstreamUnavailable: If the request fails or the response has no results list
        """
        params = {
            "engine": "youtube",
            "search_query": query,
            "api_key": self.settings.serpapi_key,
        }

        try:
            response = await self._get(params)
        except httpx.HTTPError as e:
            # The request URL carries the API key, so only the error class is reported
            logger.error(f"SerpAPI request failed: {type(e).__name__}")
            raise UpstreamUnavailable(f"SerpAPI request failed: {type(e).__name__}") from e

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not response.is_success or not isinstance(payload, dict) \
                or not isinstance(payload.get("video_results"), list):
            logger.error(f"SerpAPI invalid response (status {response.status_code})")
            raw = payload if payload is not None else response.text
            raise UpstreamUnavailable("SerpAPI invalid response", raw=raw)

        summary = summarize_competitors(payload["video_results"])
        logger.info(
            f"SerpAPI returned {len(payload['video_results'])} results, "
            f"{len(summary.competitors)} competitors kept "
            f"(avg {summary.average_views}, {summary.competition_level})"
        )
        return summary
