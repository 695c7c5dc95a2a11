# src/smartdiff/providers/openai_provider.py
import openai
from openai import AsyncOpenAI
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


class OpenAIProvider(LLMProvider):
    name = "openai"

    def __init__(self, api_key: str, base_url: str | None = None):
        self.api_key = api_key
        self.client = AsyncOpenAI(api_key=api_key, base_url=base_url, max_retries=0)

    async def complete(self, prompt: str, model: str) -> str:
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=TEMPERATURE,
                max_tokens=MAX_TOKENS,
            )
        except openai.AuthenticationError as e:
            raise AuthenticationError("Invalid OpenAI API key. Please check your configuration.") from e
        except openai.RateLimitError as e:
            if e.code == "insufficient_quota":
                raise QuotaError("OpenAI API quota exceeded. Please check your billing.") from e
            raise RateLimitError("OpenAI rate limit exceeded. Please try again later.") from e
        except openai.NotFoundError as e:
            raise ModelNotFoundError(
                f'Model "{model}" not found on OpenAI. Check the model name, e.g. "gpt-4".'
            ) from e
        except openai.APIConnectionError as e:
            raise ConnectivityError(
                f"Cannot reach the OpenAI API: {e}. Check your network connection."
            ) from e
        except openai.OpenAIError as e:
            raise UnexpectedBackendError(f"OpenAI API error: {e}") from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
