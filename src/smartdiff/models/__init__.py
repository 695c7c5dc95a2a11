from .config import (
    DEFAULT_MODELS,
    FocusArea,
    ProviderCredentials,
    ProviderName,
    ReviewConfig,
    Severity,
)
from .review import Issue, ReviewResult

__all__ = [
    "DEFAULT_MODELS",
    "FocusArea",
    "ProviderCredentials",
    "ProviderName",
    "ReviewConfig",
    "Severity",
    "Issue",
    "ReviewResult",
]
