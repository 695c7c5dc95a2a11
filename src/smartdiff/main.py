# src/smartdiff/main.py
import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from fastapi import FastAPI
from pydantic import BaseModel

from smartdiff.config import Settings, resolve_config
from smartdiff.errors import ReviewError
from smartdiff.models.config import Severity
from smartdiff.models.review import ReviewResult
from smartdiff.providers.factory import get_provider
from smartdiff.review.engine import ReviewEngine, failing_issues


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    return Settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.getLogger().setLevel(get_settings().log_level.upper())
    logger.info("SmartDiff starting...")
    yield
    logger.info("SmartDiff shutting down...")


app = FastAPI(title="SmartDiff", lifespan=lifespan)


class ReviewRequest(BaseModel):
    diff: str
    focus: str | list[str] | None = None
    provider: str | None = None
    model: str | None = None
    project_config: str | None = None
    fail_on: list[Severity] = []


class ReviewResponse(BaseModel):
    status: str
    provider: str | None = None
    model: str | None = None
    result: ReviewResult | None = None
    failing_issues: int = 0
    error: str | None = None
    error_kind: str | None = None


@app.get("/health")
async def health():
    return {"status": "ok", "version": "0.1.0"}


@app.post("/api/review", response_model=ReviewResponse)
async def trigger_review(request: ReviewRequest):
    """Review a unified diff with the configured AI backend."""
    if not request.diff.strip():
        return ReviewResponse(
            status="error",
            error="No changes to review. Provide a non-empty diff.",
            error_kind="no_changes",
        )

    settings = get_settings()

    try:
        config = resolve_config(
            settings,
            request.project_config,
            provider=request.provider,
            model=request.model,
            focus=request.focus,
        )
        provider = get_provider(config)

        engine = ReviewEngine(config=config, provider=provider)
        result = await engine.review(request.diff)

    except ReviewError as e:
        logger.error(f"Review failed ({e.kind}): {e}")
        return ReviewResponse(status="error", error=str(e), error_kind=e.kind)
    except Exception as e:
        logger.exception(f"Review failed: {e}")
        return ReviewResponse(status="error", error=str(e), error_kind="unexpected")

    failing = failing_issues(result, request.fail_on)
    if failing:
        logger.info(f"Found {len(failing)} issue(s) with severity: {', '.join(s.value for s in request.fail_on)}")

    return ReviewResponse(
        status="completed",
        provider=config.provider.value,
        model=config.model,
        result=result,
        failing_issues=len(failing),
    )
