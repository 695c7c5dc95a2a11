# src/smartdiff/providers/openrouter.py
import httpx
from .base import LLMProvider, MAX_TOKENS, TEMPERATURE
from smartdiff.errors import (
    AuthenticationError,
    ConnectivityError,
    ModelNotFoundError,
    QuotaError,
    RateLimitError,
    UnexpectedBackendError,
)
from smartdiff.review.prompts import SYSTEM_PROMPT


class OpenRouterProvider(LLMProvider):
    name = "openrouter"
    API_URL = "https://openrouter.ai/api/v1/chat/completions"

    def __init__(self, api_key: str):
        self.api_key = api_key

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "HTTP-Referer": "https://github.com/smartdiff/smartdiff",
            "X-Title": "SmartDiff Code Review",
        }

    async def complete(self, prompt: str, model: str) -> str:
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.API_URL,
                    headers=self._headers(),
                    json={
                        "model": model,
                        "messages": [
                            {"role": "system", "content": SYSTEM_PROMPT},
                            {"role": "user", "content": prompt},
                        ],
                        "temperature": TEMPERATURE,
                        "max_tokens": MAX_TOKENS,
                    },
                    timeout=60.0,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 401:
                raise AuthenticationError("Invalid OpenRouter API key. Please check your configuration.") from e
            if status == 402:
                raise QuotaError("OpenRouter credits exhausted. Please add credits to your account.") from e
            if status == 429:
                raise RateLimitError("OpenRouter rate limit exceeded. Please try again later.") from e
            if status == 404:
                raise ModelNotFoundError(
                    f'Model "{model}" not found on OpenRouter. Use a full model id, e.g. "anthropic/claude-3.5-sonnet".'
                ) from e
            raise UnexpectedBackendError(f"OpenRouter API error: {status} {e.response.text}") from e
        except httpx.ConnectError as e:
            raise ConnectivityError(
                f"Cannot reach OpenRouter at {self.API_URL}: {e}. Check your network connection."
            ) from e
        except httpx.HTTPError as e:
            raise UnexpectedBackendError(f"OpenRouter API error: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise UnexpectedBackendError(f"OpenRouter returned invalid JSON: {response.text[:200]}") from e

        if "error" in data:
            error = data["error"]
            message = error.get("message", error) if isinstance(error, dict) else error
            raise UnexpectedBackendError(f"OpenRouter API error: {message}")

        choices = data.get("choices") or [{}]
        return (choices[0].get("message") or {}).get("content") or ""
