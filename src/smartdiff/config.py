# src/smartdiff/config.py
import logging
from typing import Any
import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from smartdiff.errors import ConfigurationError
from smartdiff.models.config import (
    DEFAULT_MODELS,
    DEFAULT_OLLAMA_URL,
    FocusArea,
    ProviderCredentials,
    ProviderName,
    ReviewConfig,
)


logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # LLM Providers
    openai_api_key: str | None = None
    anthropic_api_key: str | None = None
    openrouter_api_key: str | None = None
    ollama_base_url: str = DEFAULT_OLLAMA_URL

    # Defaults
    default_provider: str = "openai"
    default_model: str | None = None
    default_focus: list[FocusArea] = [FocusArea.BUGS, FocusArea.SECURITY]
    ignore: list[str] = []
    max_chunk_bytes: int = 15000
    large_diff_bytes: int = 50000
    log_level: str = "INFO"


def parse_focus_areas(value: str | list[str] | tuple[str, ...] | None) -> list[FocusArea] | None:
    """Parse focus areas from a comma-separated string or a list of names."""
    if value is None:
        return None

    names = value.split(",") if isinstance(value, str) else list(value)
    valid = {area.value: area for area in FocusArea}
    parsed = [valid[n] for n in (str(n).strip().lower() for n in names) if n in valid]

    if not parsed:
        raise ConfigurationError(
            f"Invalid focus areas: {value}. Valid options: {', '.join(valid)}"
        )
    return parsed


def load_project_config(content: str | None) -> dict[str, Any]:
    """Load .smartdiff.yaml content, returns {} if missing or invalid."""
    if not content:
        return {}

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        logger.warning(f"Invalid .smartdiff.yaml: {e}")
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Invalid .smartdiff.yaml: expected a mapping, got {type(data).__name__}")
        return {}
    return data


def _provider_name(value: str) -> ProviderName:
    try:
        return ProviderName(str(value).strip().lower())
    except ValueError:
        options = ", ".join(p.value for p in ProviderName)
        raise ConfigurationError(f"Unknown provider: {value}. Valid options: {options}") from None


def resolve_config(
    settings: Settings,
    project_config: str | None = None,
    *,
    provider: str | None = None,
    model: str | None = None,
    focus: str | list[str] | None = None,
) -> ReviewConfig:
    """Merge overrides > project config > settings into one ReviewConfig.

    Raises ConfigurationError if the result can't drive a review.
    """
    project = load_project_config(project_config)

    provider_name = _provider_name(provider or project.get("provider") or settings.default_provider)

    # default_model only applies to default_provider.
    chosen_model = model or project.get("model")
    if not chosen_model and not provider and not project.get("provider"):
        chosen_model = settings.default_model
    chosen_model = chosen_model or DEFAULT_MODELS[provider_name]

    focus_areas = (
        parse_focus_areas(focus or None)
        or parse_focus_areas(project.get("focus") or None)
        or settings.default_focus
    )
    if not focus_areas:
        raise ConfigurationError("At least one focus area is required")

    project_providers = project.get("providers")
    if not isinstance(project_providers, dict):
        project_providers = {}
    ollama_section = project_providers.get("ollama")
    if not isinstance(ollama_section, dict):
        ollama_section = {}

    credentials = ProviderCredentials(
        openai_api_key=settings.openai_api_key,
        anthropic_api_key=settings.anthropic_api_key,
        openrouter_api_key=settings.openrouter_api_key,
        ollama_base_url=ollama_section.get("base_url") or settings.ollama_base_url,
    )

    if provider_name != ProviderName.OLLAMA and not credentials.api_key_for(provider_name):
        raise ConfigurationError(
            f'API key not found for provider "{provider_name.value}". '
            f"Set {provider_name.value.upper()}_API_KEY in the environment or .env file."
        )

    ignore = project.get("ignore", settings.ignore) or []
    if isinstance(ignore, str):
        ignore = [ignore]

    try:
        return ReviewConfig(
            provider=provider_name,
            model=str(chosen_model),
            focus=tuple(focus_areas),
            ignore=tuple(ignore),
            max_chunk_bytes=project.get("max_chunk_bytes", settings.max_chunk_bytes),
            large_diff_bytes=settings.large_diff_bytes,
            credentials=credentials,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
