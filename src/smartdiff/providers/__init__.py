# src/smartdiff/providers/__init__.py
from .base import LLMProvider
from .anthropic_provider import AnthropicProvider
from .factory import get_provider
from .ollama import OllamaProvider
from .openai_provider import OpenAIProvider
from .openrouter import OpenRouterProvider

__all__ = [
    "LLMProvider",
    "AnthropicProvider",
    "OllamaProvider",
    "OpenAIProvider",
    "OpenRouterProvider",
    "get_provider",
]
