"""
LLM Service

Handles completion model initialization and classifies provider failures.
"""

import logging
from typing import Optional

import httpx
import openai
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from config import Settings
from errors import CompletionTimeout, CompletionUpstreamError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "Return ONLY valid JSON. No markdown. No explanations."


def get_completion_model(
    settings: Settings,
    http_client: Optional[httpx.AsyncClient] = None
) -> ChatOpenAI:
    """
    Get the completion model configured for JSON report generation.

    Retries are disabled; retry policy belongs to the caller.

    Args:
        settings: Provider settings
        http_client: Optional AsyncClient for the provider calls, mainly for tests

    Returns:
        ChatOpenAI instance pointed at the OpenAI-compatible endpoint

    Raises:
        ValueError: If GROQ_API_KEY is not set
    """
    if not settings.groq_api_key:
        raise ValueError("GROQ_API_KEY environment variable is not set")

    return ChatOpenAI(
        model=settings.groq_model,
        api_key=settings.groq_api_key,
        base_url=settings.groq_base_url,
        temperature=settings.completion_temperature,
        max_tokens=settings.completion_max_tokens,
        timeout=settings.completion_timeout,
        max_retries=0,
        streaming=False,
        http_async_client=http_client,
    )


class CompletionClient:
    """
    Sends the assembled prompt to the completion provider, one attempt per call.
    """

    def __init__(self, settings: Settings, model: Optional[BaseChatModel] = None):
        """
        Initialize the client.

        Args:
            settings: Provider settings
            model: Optional pre-built chat model, mainly for tests
        """
        self.model = model if model is not None else get_completion_model(settings)

    async def complete(self, prompt: str) -> str:
        """
        Request a completion for the prompt.

        Args:
            prompt: Fully assembled user prompt

        Returns:
            Raw completion text

        Raises:
            CompletionTimeout: If the provider did not answer within the timeout
            CompletionUpstreamError: On a non-success status or malformed response
        """
        messages = [
            SystemMessage(content=SYSTEM_PROMPT),
            HumanMessage(content=prompt),
        ]

        try:
            response = await self.model.ainvoke(messages)
        # APITimeoutError subclasses APIConnectionError, so it must come first
        except openai.APITimeoutError as e:
            logger.error("Completion provider timed out")
            raise CompletionTimeout("Completion provider timed out") from e
        except openai.APIStatusError as e:
            logger.error(f"Completion provider HTTP error (status {e.status_code})")
            raise CompletionUpstreamError(
                "Completion provider HTTP error",
                raw=e.body,
                status=e.status_code,
            ) from e
        except openai.APIConnectionError as e:
            logger.error(f"Completion provider unreachable: {type(e).__name__}")
            raise CompletionUpstreamError("Completion provider unreachable") from e
        except openai.APIError as e:
            logger.error(f"Completion provider malformed response: {type(e).__name__}")
            raise CompletionUpstreamError(
                "Completion provider malformed response", raw=e.body
            ) from e
        except (KeyError, IndexError, TypeError, ValueError) as e:
            # Raised by the client library when the body lacks `choices`
            logger.error(f"Completion provider malformed response: {e}")
            raise CompletionUpstreamError(
                "Completion provider malformed response", raw=str(e)
            ) from e

        content = response.content
        if not isinstance(content, str) or not content.strip():
            logger.error("Completion provider returned no completion text")
            raise CompletionUpstreamError(
                "Completion provider malformed response",
                raw=getattr(response, "response_metadata", None) or None,
            )

        logger.debug(f"Completion received ({len(content)} chars)")
        return content
