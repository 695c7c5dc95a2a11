from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


DEFAULT_OLLAMA_URL = "http://localhost:11434"


class FocusArea(str, Enum):
    BUGS = "bugs"
    SECURITY = "security"
    PERFORMANCE = "performance"
    STYLE = "style"
    SUGGESTIONS = "suggestions"
    EXPLANATIONS = "explanations"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ProviderName(str, Enum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    OPENROUTER = "openrouter"
    OLLAMA = "ollama"


DEFAULT_MODELS = {
    ProviderName.OPENAI: "gpt-4",
    ProviderName.ANTHROPIC: "claude-3-5-sonnet-20241022",
    ProviderName.OPENROUTER: "anthropic/claude-3.5-sonnet",
    ProviderName.OLLAMA: "llama2",
}


class ProviderCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    openai_api_key: str | None = Field(default=None, repr=False)
    anthropic_api_key: str | None = Field(default=None, repr=False)
    openrouter_api_key: str | None = Field(default=None, repr=False)
    ollama_base_url: str = DEFAULT_OLLAMA_URL

    def api_key_for(self, provider: ProviderName) -> str | None:
        return {
            ProviderName.OPENAI: self.openai_api_key,
            ProviderName.ANTHROPIC: self.anthropic_api_key,
            ProviderName.OPENROUTER: self.openrouter_api_key,
        }.get(provider)


class ReviewConfig(BaseModel):
    """Resolved, read-only configuration for one review run."""
    model_config = ConfigDict(frozen=True)

    provider: ProviderName = ProviderName.OPENAI
    model: str = Field(default=DEFAULT_MODELS[ProviderName.OPENAI], min_length=1)
    focus: tuple[FocusArea, ...] = Field(
        default=(FocusArea.BUGS, FocusArea.SECURITY),
        min_length=1,
    )
    ignore: tuple[str, ...] = ()
    max_chunk_bytes: int = Field(default=15000, gt=0)
    large_diff_bytes: int = Field(default=50000, gt=0)
    credentials: ProviderCredentials = Field(default_factory=ProviderCredentials)
