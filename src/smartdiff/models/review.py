from pydantic import BaseModel, Field, PositiveInt
from .config import FocusArea, Severity


class Issue(BaseModel):
    severity: Severity = Severity.MEDIUM
    category: FocusArea = FocusArea.BUGS
    file: str = "unknown"
    line: PositiveInt | None = None
    description: str
    suggestion: str | None = None


class ReviewResult(BaseModel):
    summary: str
    issues: list[Issue] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
