"""
Configuration Module

Contains all application configuration constants and settings.
"""

import os
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# Load environment variables
load_dotenv()

# SerpAPI (YouTube search engine)
SERPAPI_KEY = os.environ.get("SERPAPI_KEY")
SERPAPI_URL = os.environ.get("SERPAPI_URL", "https://serpapi.com/search.json")
SEARCH_TIMEOUT_SECONDS = float(os.environ.get("SEARCH_TIMEOUT_SECONDS", "30"))

# LLM Configuration (OpenAI-compatible Groq endpoint)
GROQ_API_KEY = os.environ.get("GROQ_API_KEY")
GROQ_BASE_URL = os.environ.get("GROQ_BASE_URL", "https://api.groq.com/openai/v1")
GROQ_MODEL = os.environ.get("GROQ_MODEL", "llama-3.1-8b-instant")
COMPLETION_TIMEOUT_SECONDS = float(os.environ.get("COMPLETION_TIMEOUT_SECONDS", "30"))
COMPLETION_MAX_TOKENS = int(os.environ.get("COMPLETION_MAX_TOKENS", "1500"))
COMPLETION_TEMPERATURE = float(os.environ.get("COMPLETION_TEMPERATURE", "0.3"))

# Competitor aggregation
MAX_COMPETITORS = 10
MEDIUM_COMPETITION_MIN_VIEWS = 100_000
HIGH_COMPETITION_MIN_VIEWS = 500_000

# Server Configuration
DEFAULT_PORT = 8010
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class Settings(BaseModel):
    """Read-only provider settings injected into the upstream clients."""

    model_config = ConfigDict(frozen=True)

    serpapi_key: str | None = None
    serpapi_url: str = SERPAPI_URL
    search_timeout: float = SEARCH_TIMEOUT_SECONDS

    groq_api_key: str | None = None
    groq_base_url: str = GROQ_BASE_URL
    groq_model: str = GROQ_MODEL
    completion_timeout: float = COMPLETION_TIMEOUT_SECONDS
    completion_max_tokens: int = COMPLETION_MAX_TOKENS
    completion_temperature: float = COMPLETION_TEMPERATURE


def load_settings() -> Settings:
    """
    Build settings from the process environment.

    Returns:
        Frozen Settings instance
    """
    return Settings(
        serpapi_key=SERPAPI_KEY,
        groq_api_key=GROQ_API_KEY,
    )
