# tests/conftest.py
import pytest


SETTINGS_ENV = (
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
    "OPENROUTER_API_KEY",
    "OLLAMA_BASE_URL",
    "DEFAULT_PROVIDER",
    "DEFAULT_MODEL",
    "DEFAULT_FOCUS",
    "IGNORE",
    "MAX_CHUNK_BYTES",
    "LARGE_DIFF_BYTES",
)


@pytest.fixture(autouse=True)
def clean_settings_env(request, monkeypatch):
    """Keep real credentials in the environment out of unit and integration tests."""
    if request.node.get_closest_marker("e2e"):
        return
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
