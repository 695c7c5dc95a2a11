# tests/integration/test_http_providers.py
import json
import httpx
import pytest
from smartdiff.errors import (
    AuthenticationError,
    ConnectivityError,
    ModelNotFoundError,
    QuotaError,
    RateLimitError,
    UnexpectedBackendError,
)
from smartdiff.models.config import FocusArea, Severity
from smartdiff.providers.ollama import OllamaProvider
from smartdiff.providers.openrouter import OpenRouterProvider


OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"
OLLAMA_URL = "http://localhost:11434"

REVIEW_TEXT = """## Summary
Adds caching.

## Issues
- Severity: low
  Category: performance
  Location: cache.py:12
  Description: Cache never expires
  Suggestion: Add a TTL

## Suggestions
- Add metrics
"""


@pytest.mark.integration
@pytest.mark.asyncio
async def test_openrouter_provider_builds_request(httpx_mock):
    httpx_mock.add_response(
        url=OPENROUTER_URL,
        method="POST",
        json={"choices": [{"message": {"content": REVIEW_TEXT}}]},
    )

    provider = OpenRouterProvider(api_key="test-key")
    result = await provider.review("+cache = {}", [FocusArea.PERFORMANCE], "anthropic/claude-3.5-sonnet")

    assert result.summary == "Adds caching."
    assert result.issues[0].severity == Severity.LOW
    assert result.issues[0].suggestion == "Add a TTL"
    assert result.suggestions == ["Add metrics"]

    request = httpx_mock.get_request()
    assert request.headers["Authorization"] == "Bearer test-key"
    assert request.headers["X-Title"] == "SmartDiff Code Review"
    body = json.loads(request.content)
    assert body["model"] == "anthropic/claude-3.5-sonnet"
    assert body["temperature"] == 0.3
    assert body["max_tokens"] == 2000
    assert [m["role"] for m in body["messages"]] == ["system", "user"]
    assert "+cache = {}" in body["messages"][1]["content"]


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status, expected",
    [
        (401, AuthenticationError),
        (402, QuotaError),
        (429, RateLimitError),
        (404, ModelNotFoundError),
        (500, UnexpectedBackendError),
    ],
)
async def test_openrouter_status_errors(httpx_mock, status, expected):
    httpx_mock.add_response(url=OPENROUTER_URL, method="POST", status_code=status, json={"error": {}})

    provider = OpenRouterProvider(api_key="test-key")

    with pytest.raises(expected):
        await provider.review("+x", [FocusArea.BUGS], "some/model")


@pytest.mark.integration
@pytest.mark.asyncio
async def test_openrouter_error_payload(httpx_mock):
    httpx_mock.add_response(
        url=OPENROUTER_URL,
        method="POST",
        json={"error": {"message": "Provider returned error", "code": 502}},
    )

    provider = OpenRouterProvider(api_key="test-key")

    with pytest.raises(UnexpectedBackendError, match="Provider returned error"):
        await provider.review("+x", [FocusArea.BUGS], "some/model")


@pytest.mark.integration
@pytest.mark.asyncio
async def test_openrouter_unreachable(httpx_mock):
    httpx_mock.add_exception(httpx.ConnectError("connection refused"), url=OPENROUTER_URL)

    provider = OpenRouterProvider(api_key="test-key")

    with pytest.raises(ConnectivityError):
        await provider.review("+x", [FocusArea.BUGS], "some/model")


@pytest.mark.integration
@pytest.mark.asyncio
async def test_ollama_provider_checks_server_then_generates(httpx_mock):
    httpx_mock.add_response(url=f"{OLLAMA_URL}/api/tags", method="GET", json={"models": []})
    httpx_mock.add_response(url=f"{OLLAMA_URL}/api/generate", method="POST", json={"response": REVIEW_TEXT})

    provider = OllamaProvider()
    result = await provider.review("+cache = {}", [FocusArea.PERFORMANCE], "codellama")

    assert result.summary == "Adds caching."
    assert result.issues[0].file == "cache.py"

    request = httpx_mock.get_request(url=f"{OLLAMA_URL}/api/generate")
    body = json.loads(request.content)
    assert body["model"] == "codellama"
    assert body["stream"] is False
    assert body["options"] == {"temperature": 0.3, "num_predict": 2000}
    assert "Authorization" not in request.headers
    assert request.extensions["timeout"]["read"] == 120.0


@pytest.mark.integration
@pytest.mark.asyncio
async def test_ollama_custom_base_url(httpx_mock):
    httpx_mock.add_response(url="http://gpu-box:11434/api/tags", method="GET", json={"models": []})
    httpx_mock.add_response(url="http://gpu-box:11434/api/generate", method="POST", json={"response": ""})

    provider = OllamaProvider(base_url="http://gpu-box:11434/")
    result = await provider.review("+x", [FocusArea.BUGS], "llama2")

    assert result.summary == "No summary provided"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_ollama_not_running(httpx_mock):
    httpx_mock.add_exception(httpx.ConnectError("connection refused"), url=f"{OLLAMA_URL}/api/tags")

    provider = OllamaProvider()

    with pytest.raises(ConnectivityError, match="ollama serve"):
        await provider.review("+x", [FocusArea.BUGS], "llama2")


@pytest.mark.integration
@pytest.mark.asyncio
async def test_ollama_model_not_found(httpx_mock):
    httpx_mock.add_response(url=f"{OLLAMA_URL}/api/tags", method="GET", json={"models": []})
    httpx_mock.add_response(url=f"{OLLAMA_URL}/api/generate", method="POST", status_code=404)

    provider = OllamaProvider()

    with pytest.raises(ModelNotFoundError, match="ollama pull codellama"):
        await provider.review("+x", [FocusArea.BUGS], "codellama")
