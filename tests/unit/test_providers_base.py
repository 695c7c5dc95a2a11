# tests/unit/test_providers_base.py
import pytest
from smartdiff.models.config import FocusArea, Severity
from smartdiff.providers.base import LLMProvider


class CannedProvider(LLMProvider):
    name = "canned"

    def __init__(self, answer: str):
        self.answer = answer
        self.prompts: list[tuple[str, str]] = []

    async def complete(self, prompt: str, model: str) -> str:
        self.prompts.append((prompt, model))
        return self.answer


@pytest.mark.unit
def test_provider_is_abstract():
    with pytest.raises(TypeError):
        LLMProvider()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_review_builds_prompt_and_parses_answer():
    provider = CannedProvider(
        "## Summary\nRisky change\n## Issues\n- Severity: high\n  Description: SQL injection\n"
    )

    result = await provider.review("+query = f'SELECT {x}'", [FocusArea.SECURITY], "some-model")

    prompt, model = provider.prompts[0]
    assert model == "some-model"
    assert "+query = f'SELECT {x}'" in prompt
    assert "security vulnerabilities" in prompt
    assert result.summary == "Risky change"
    assert result.issues[0].severity == Severity.HIGH
