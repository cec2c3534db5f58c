import copy
import json

import httpx
import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from config import Settings
from services.llm import CompletionClient
from services.search import CompetitorAggregator

SERPAPI_URL = "https://serpapi.test/search.json"
COMPLETIONS_URL = "https://llm.test/v1/chat/completions"

SAMPLE_REPORT = {
    "optimized_metadata": {
        "optimized_title": "5-Minute Pasta Hack Nobody Told You",
        "optimized_description": "The fastest weeknight pasta you will ever make.",
        "tags": ["pasta", "quick dinner", "recipe"],
        "hashtags": ["#pasta", "#shorts", "#ytshorts", "#recipe", "#viral"],
        "suggested_upload_time": "Friday 6 PM",
    },
    "keyword_research": {
        "primary_keywords": ["pasta recipe"],
        "secondary_keywords": ["quick dinner", "easy pasta"],
        "search_intent": "Informational",
        "competition_level": "Medium",
        "volume_score": 72,
    },
    "competitor_analysis": {
        "top_competitors": [
            {"title": "Pasta in 10", "channel": "Chef A", "views": 50000},
        ],
        "average_views": 100000,
        "competition_level": "Medium",
        "common_keywords": ["pasta", "easy"],
    },
    "thumbnail_optimizer": {
        "recommended_text": "5 MIN PASTA",
        "color_theme": "Warm red and yellow",
        "font_style": "Bold sans-serif",
        "emotion": "Surprise",
        "ctr_boost_tips": ["Show the finished dish", "Use a close-up face"],
    },
    "seo_score_breakdown": {
        "title_score": 0.85,
        "description_score": 64,
        "keyword_density_score": 150,
        "clickability_score": -5,
        "overall_score": 71.6,
        "feedback": ["Add a number to the title"],
    },
    "trends_and_topics": {
        "trending_topics": ["one-pot meals"],
        "emerging_trends": ["protein pasta"],
        "recommended_upload_time": "Weekday evenings",
    },
    "title_variants": {
        "variants": [
            {"title": "This Pasta Takes 5 Minutes", "ctr_score": 78},
        ],
    },
}


@pytest.fixture
def settings():
    return Settings(
        serpapi_key="serp-test-key",
        serpapi_url=SERPAPI_URL,
        groq_api_key="groq-test-key",
        groq_base_url="https://llm.test/v1",
    )


@pytest.fixture
def sample_report():
    return copy.deepcopy(SAMPLE_REPORT)


def video(title, channel, views):
    entry = {"title": title, "channel": {"name": channel}}
    if views is not None:
        entry["views"] = views
    return entry


def serpapi_transport(status_code=200, payload=None, handler=None):
    """MockTransport answering every request with the given SerpAPI payload."""
    def respond(request):
        if handler is not None:
            return handler(request)
        return httpx.Response(status_code, json=payload)
    return httpx.MockTransport(respond)


def make_aggregator(settings, **transport_kwargs):
    client = httpx.AsyncClient(transport=serpapi_transport(**transport_kwargs))
    return CompetitorAggregator(settings, http_client=client)


def make_completion_client(settings, *responses):
    return CompletionClient(settings, model=FakeListChatModel(responses=list(responses)))


def fenced(value):
    return "```json\n" + json.dumps(value) + "\n```"


class RaisingChatModel:
    """Chat model stand-in whose ainvoke raises the given exception."""

    def __init__(self, exc):
        self.exc = exc
        self.calls = 0

    async def ainvoke(self, messages):
        self.calls += 1
        raise self.exc


class RecordingChatModel:
    """Chat model stand-in that records prompts and returns a fixed message."""

    def __init__(self, message):
        self.message = message
        self.calls = []

    async def ainvoke(self, messages):
        self.calls.append(messages)
        return self.message
