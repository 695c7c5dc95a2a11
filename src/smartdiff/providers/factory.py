# src/smartdiff/providers/factory.py
from .base import LLMProvider
from .anthropic_provider import AnthropicProvider
from .ollama import OllamaProvider
from .openai_provider import OpenAIProvider
from .openrouter import OpenRouterProvider
from smartdiff.errors import ConfigurationError
from smartdiff.models.config import ProviderName, ReviewConfig


def get_provider(config: ReviewConfig) -> LLMProvider:
    """Get the review backend selected by the configuration."""
    credentials = config.credentials
    provider = ProviderName(config.provider)

    if provider == ProviderName.OLLAMA:
        return OllamaProvider(base_url=credentials.ollama_base_url)

    api_key = credentials.api_key_for(provider)
    if not api_key:
        raise ConfigurationError(
            f'API key not found for provider "{provider.value}". '
            f"Set {provider.value.upper()}_API_KEY or add it to your configuration."
        )

    if provider == ProviderName.OPENAI:
        return OpenAIProvider(api_key=api_key)
    elif provider == ProviderName.ANTHROPIC:
        return AnthropicProvider(api_key=api_key)
    elif provider == ProviderName.OPENROUTER:
        return OpenRouterProvider(api_key=api_key)
    raise ConfigurationError(f"Unknown provider: {config.provider}")
