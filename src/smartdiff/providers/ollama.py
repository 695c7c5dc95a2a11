# src/smartdiff/providers/ollama.py
import httpx
from .base import LLMProvider, MAX_TOKENS, TEMPERATURE
from smartdiff.errors import ConnectivityError, ModelNotFoundError, UnexpectedBackendError
from smartdiff.models.config import DEFAULT_OLLAMA_URL
from smartdiff.review.prompts import SYSTEM_PROMPT


# Upper bound for local generation.
OLLAMA_TIMEOUT = 120.0


class OllamaProvider(LLMProvider):
    name = "ollama"

    def __init__(self, base_url: str | None = None):
        self.base_url = (base_url or DEFAULT_OLLAMA_URL).rstrip("/")

    def _not_running(self) -> str:
        return (
            f"Cannot connect to Ollama at {self.base_url}. Make sure Ollama is running:\n"
            "  1. Install Ollama: https://ollama.ai\n"
            "  2. Run: ollama serve\n"
            "  3. Pull a model: ollama pull llama2"
        )

    async def complete(self, prompt: str, model: str) -> str:
        async with httpx.AsyncClient(timeout=OLLAMA_TIMEOUT) as client:
            try:
                await client.get(f"{self.base_url}/api/tags")
            except httpx.HTTPError as e:
                raise ConnectivityError(self._not_running()) from e

            try:
                response = await client.post(
                    f"{self.base_url}/api/generate",
                    json={
                        "model": model,
                        "prompt": f"{SYSTEM_PROMPT}\n\n{prompt}",
                        "stream": False,
                        "options": {
                            "temperature": TEMPERATURE,
                            "num_predict": MAX_TOKENS,
                        },
                    },
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                if e.response.status_code == 404:
                    raise ModelNotFoundError(
                        f'Model "{model}" not found in Ollama. Pull it with: ollama pull {model}'
                    ) from e
                raise UnexpectedBackendError(f"Ollama error: {e.response.status_code} {e.response.text}") from e
            except httpx.ConnectError as e:
                raise ConnectivityError(self._not_running()) from e
            except httpx.HTTPError as e:
                raise UnexpectedBackendError(f"Ollama error: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise UnexpectedBackendError(f"Ollama returned invalid JSON: {response.text[:200]}") from e
        return data.get("response") or ""
