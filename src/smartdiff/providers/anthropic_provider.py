# src/smartdiff/providers/anthropic_provider.py
import anthropic
from anthropic import AsyncAnthropic
from .base import LLMProvider, MAX_TOKENS, TEMPERATURE
from smartdiff.errors import (
    AuthenticationError,
    ConnectivityError,
    ModelNotFoundError,
    RateLimitError,
    UnexpectedBackendError,
)


class AnthropicProvider(LLMProvider):
    name = "anthropic"

    def __init__(self, api_key: str):
        self.api_key = api_key
        self.client = AsyncAnthropic(api_key=api_key, max_retries=0)

    async def complete(self, prompt: str, model: str) -> str:
        try:
            response = await self.client.messages.create(
                model=model,
                max_tokens=MAX_TOKENS,
                temperature=TEMPERATURE,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.AuthenticationError as e:
            raise AuthenticationError("Invalid Anthropic API key. Please check your configuration.") from e
        except anthropic.RateLimitError as e:
            raise RateLimitError("Anthropic rate limit exceeded. Please try again later.") from e
        except anthropic.NotFoundError as e:
            raise ModelNotFoundError(
                f'Model "{model}" not found on Anthropic. Check the model name, e.g. "claude-3-5-sonnet-20241022".'
            ) from e
        except anthropic.APIConnectionError as e:
            raise ConnectivityError(
                f"Cannot reach the Anthropic API: {e}. Check your network connection."
            ) from e
        except anthropic.AnthropicError as e:
            raise UnexpectedBackendError(f"Anthropic API error: {e}") from e

        return "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
