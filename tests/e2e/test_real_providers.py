# tests/e2e/test_real_providers.py
"""
End-to-end tests for review backends with real API calls.

These tests require valid credentials set in environment variables:
- OPENAI_API_KEY: OpenAI API key
- ANTHROPIC_API_KEY: Anthropic API key
- OPENROUTER_API_KEY: OpenRouter API key
- OLLAMA_BASE_URL: URL of a running Ollama server (optional, with OLLAMA_MODEL)

Run with: pytest tests/e2e/ -m e2e -v
"""
import os
import pytest
from smartdiff.errors import ConnectivityError
from smartdiff.models.config import DEFAULT_MODELS, FocusArea, ProviderName
from smartdiff.providers.anthropic_provider import AnthropicProvider
from smartdiff.providers.ollama import OllamaProvider
from smartdiff.providers.openai_provider import OpenAIProvider
from smartdiff.providers.openrouter import OpenRouterProvider
from smartdiff.review.engine import run_review


SIMPLE_DIFF = """diff --git a/math.py b/math.py
--- a/math.py
+++ b/math.py
@@ -1,2 +1,2 @@
 def divide(a, b):
-    return a / b if b else None
+    return a / b
"""

FOCUS = [FocusArea.BUGS, FocusArea.SECURITY]


async def _check(provider, model):
    result = await run_review(SIMPLE_DIFF, FOCUS, provider, model)

    assert result is not None
    assert result.summary
    assert isinstance(result.issues, list)
    print(f"\n{provider.name} summary: {result.summary}")
    print(f"{provider.name} issues: {len(result.issues)}")


@pytest.mark.e2e
@pytest.mark.asyncio
async def test_openai_real_review():
    api_key = os.environ.get("OPENAI_API_KEY")
    if not api_key:
        pytest.skip("OPENAI_API_KEY not set")

    await _check(OpenAIProvider(api_key=api_key), DEFAULT_MODELS[ProviderName.OPENAI])


@pytest.mark.e2e
@pytest.mark.asyncio
async def test_anthropic_real_review():
    api_key = os.environ.get("ANTHROPIC_API_KEY")
    if not api_key:
        pytest.skip("ANTHROPIC_API_KEY not set")

    await _check(AnthropicProvider(api_key=api_key), DEFAULT_MODELS[ProviderName.ANTHROPIC])


@pytest.mark.e2e
@pytest.mark.asyncio
async def test_openrouter_real_review():
    api_key = os.environ.get("OPENROUTER_API_KEY")
    if not api_key:
        pytest.skip("OPENROUTER_API_KEY not set")

    await _check(OpenRouterProvider(api_key=api_key), DEFAULT_MODELS[ProviderName.OPENROUTER])


@pytest.mark.e2e
@pytest.mark.asyncio
async def test_ollama_real_review():
    base_url = os.environ.get("OLLAMA_BASE_URL")
    if not base_url:
        pytest.skip("OLLAMA_BASE_URL not set")

    model = os.environ.get("OLLAMA_MODEL", DEFAULT_MODELS[ProviderName.OLLAMA])
    try:
        await _check(OllamaProvider(base_url=base_url), model)
    except ConnectivityError as e:
        pytest.skip(f"Ollama not reachable: {e}")
