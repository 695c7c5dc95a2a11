# src/smartdiff/review/engine.py
import logging
from collections.abc import Iterable, Sequence
from smartdiff.errors import ConfigurationError
from smartdiff.models.config import FocusArea, ReviewConfig, Severity
from smartdiff.models.review import Issue, ReviewResult
from smartdiff.providers.base import LLMProvider
from .diff import DEFAULT_MAX_CHUNK_BYTES, chunk_diff, filter_diff, summarize_diff


logger = logging.getLogger(__name__)


def merge_results(results: Sequence[ReviewResult]) -> ReviewResult:
    """Merge per-chunk results, keeping chunk order and every issue."""
    return ReviewResult(
        summary="\n".join(result.summary for result in results),
        issues=[issue for result in results for issue in result.issues],
        suggestions=[suggestion for result in results for suggestion in result.suggestions],
    )


async def run_review(
    diff: str,
    focus_areas: Sequence[FocusArea],
    provider: LLMProvider,
    model: str,
    max_chunk_bytes: int = DEFAULT_MAX_CHUNK_BYTES,
) -> ReviewResult:
    """Review a diff chunk by chunk and merge the results.

    Chunks are sent one at a time. The first backend failure aborts the run;
    results of chunks that already succeeded are discarded.
    """
    if not focus_areas:
        raise ConfigurationError("At least one focus area is required")

    chunks = chunk_diff(diff, max_chunk_bytes)
    if len(chunks) > 1:
        logger.info(f"Diff split into {len(chunks)} chunks of at most {max_chunk_bytes} bytes")

    results: list[ReviewResult] = []
    for chunk in chunks:
        logger.info(f"Reviewing chunk {chunk.index + 1}/{len(chunks)} with {provider.name} ({model}), {chunk.size} bytes")
        results.append(await provider.review(chunk.text, focus_areas, model))

    return merge_results(results)


def failing_issues(result: ReviewResult, severities: Iterable[Severity]) -> list[Issue]:
    """Issues whose severity is one of ``severities``."""
    wanted = set(severities)
    return [issue for issue in result.issues if issue.severity in wanted]


class ReviewEngine:
    def __init__(self, config: ReviewConfig, provider: LLMProvider):
        self.config = config
        self.provider = provider

    async def review(self, diff: str) -> ReviewResult:
        """Run an AI review of a diff with the configured backend."""
        if self.config.ignore:
            diff = filter_diff(diff, self.config.ignore)

        files = summarize_diff(diff)
        if files:
            added = sum(f.added for f in files)
            removed = sum(f.removed for f in files)
            logger.info(f"Reviewing {len(files)} file(s), +{added}/-{removed} lines")

        size = len(diff.encode("utf-8"))
        if size > self.config.large_diff_bytes:
            logger.warning(f"Large diff detected ({size} bytes). This may take longer and cost more tokens.")

        return await run_review(
            diff,
            self.config.focus,
            self.provider,
            self.config.model,
            self.config.max_chunk_bytes,
        )
