import httpx
import openai
import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from conftest import COMPLETIONS_URL, RaisingChatModel, RecordingChatModel, make_completion_client
from errors import CompletionTimeout, CompletionUpstreamError
from services.llm import SYSTEM_PROMPT, CompletionClient, get_completion_model


def _request():
    return httpx.Request("POST", COMPLETIONS_URL)


async def test_returns_completion_text(settings):
    client = make_completion_client(settings, '{"a": 1}')
    assert await client.complete("prompt") == '{"a": 1}'


async def test_sends_system_and_user_messages(settings):
    model = RecordingChatModel(AIMessage(content="{}"))
    client = CompletionClient(settings, model=model)

    await client.complete("Analyze this title")

    messages = model.calls[0]
    assert isinstance(messages[0], SystemMessage)
    assert messages[0].content == SYSTEM_PROMPT
    assert isinstance(messages[1], HumanMessage)
    assert messages[1].content == "Analyze this title"


async def test_http_500_is_upstream_error_with_status_and_body(settings):
    body = {"error": {"message": "Internal error"}}
    exc = openai.InternalServerError(
        "Error code: 500",
        response=httpx.Response(500, request=_request(), json=body),
        body=body,
    )
    model = RaisingChatModel(exc)

    with pytest.raises(CompletionUpstreamError) as exc_info:
        await CompletionClient(settings, model=model).complete("prompt")

    assert exc_info.value.status == 500
    assert exc_info.value.raw == body
    assert model.calls == 1


async def test_timeout_is_classified(settings):
    model = RaisingChatModel(openai.APITimeoutError(request=_request()))

    with pytest.raises(CompletionTimeout):
        await CompletionClient(settings, model=model).complete("prompt")


async def test_connection_error_is_upstream_error(settings):
    model = RaisingChatModel(openai.APIConnectionError(request=_request()))

    with pytest.raises(CompletionUpstreamError) as exc_info:
        await CompletionClient(settings, model=model).complete("prompt")

    assert exc_info.value.status is None


async def test_null_choices_reply_is_malformed_response(settings):
    def handler(request):
        return httpx.Response(200, json={
            "id": "chatcmpl-1",
            "object": "chat.completion",
            "created": 0,
            "model": "llama-3.1-8b-instant",
            "choices": None,
        })

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    model = get_completion_model(settings, http_client=http_client)

    with pytest.raises(CompletionUpstreamError) as exc_info:
        await CompletionClient(settings, model=model).complete("prompt")

    assert exc_info.value.message == "Completion provider malformed response"
    assert exc_info.value.status is None


async def test_real_model_returns_reply_content(settings):
    def handler(request):
        return httpx.Response(200, json={
            "id": "chatcmpl-2",
            "object": "chat.completion",
            "created": 0,
            "model": "llama-3.1-8b-instant",
            "choices": [{
                "index": 0,
                "message": {"role": "assistant", "content": '{"a": 1}'},
                "finish_reason": "stop",
            }],
        })

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    model = get_completion_model(settings, http_client=http_client)

    assert await CompletionClient(settings, model=model).complete("prompt") == '{"a": 1}'


@pytest.mark.parametrize("content", ["", "   ", [{"type": "text", "text": "{}"}]])
async def test_missing_completion_text_is_upstream_error(settings, content):
    model = RecordingChatModel(AIMessage(content=content))

    with pytest.raises(CompletionUpstreamError):
        await CompletionClient(settings, model=model).complete("prompt")


def test_model_is_configured_for_single_low_temperature_attempt(settings):
    model = get_completion_model(settings)

    assert model.model_name == "llama-3.1-8b-instant"
    assert model.temperature == 0.3
    assert model.max_tokens == 1500
    assert model.max_retries == 0
    assert model.request_timeout == 30


def test_missing_api_key_is_rejected(settings):
    with pytest.raises(ValueError):
        get_completion_model(settings.model_copy(update={"groq_api_key": None}))
