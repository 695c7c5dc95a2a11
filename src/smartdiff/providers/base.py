# src/smartdiff/providers/base.py
import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from smartdiff.models.config import FocusArea
from smartdiff.models.review import ReviewResult
from smartdiff.review.parser import parse_review_response
from smartdiff.review.prompts import build_review_prompt


logger = logging.getLogger(__name__)

TEMPERATURE = 0.3
MAX_TOKENS = 2000


class LLMProvider(ABC):
    name: str = "llm"

    async def review(self, diff: str, focus_areas: Sequence[FocusArea], model: str) -> ReviewResult:
        """Review one diff chunk: build the prompt, call the model, parse the answer."""
        prompt = build_review_prompt(diff, focus_areas)
        text = await self.complete(prompt, model)
        logger.info(f"{self.name} response length: {len(text)} chars")
        return parse_review_response(text)

    @abstractmethod
    async def complete(self, prompt: str, model: str) -> str:
        """Send prompt to the model and return its raw text answer."""
        pass
