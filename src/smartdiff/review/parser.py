# src/smartdiff/review/parser.py
"""Best-effort extraction of a ReviewResult from a model's free-text answer.

The model is asked to follow the format in ``prompts.REVIEW_PROMPT`` but
nothing guarantees it does, so every step here falls back to a default
instead of raising.
"""
import logging
import re

from smartdiff.models.config import FocusArea, Severity
from smartdiff.models.review import Issue, ReviewResult
from .prompts import (
    ISSUE_FIELDS,
    ISSUES_HEADER,
    NO_ISSUES_MARKER,
    SUGGESTIONS_HEADER,
    SUMMARY_HEADER,
)


logger = logging.getLogger(__name__)

NO_SUMMARY = "No summary provided"
UNKNOWN_FILE = "unknown"

_NEXT_HEADER = re.compile(r"^[ \t]*##(?!#)", re.MULTILINE)
_BULLET = re.compile(r"^[ \t]*[-*•][ \t]+")
_EMPHASIS = re.compile(r"\*\*|__")
_FIELD_NAMES = tuple(name.lower() for name in ISSUE_FIELDS)
_LABEL = re.compile(r"\b(" + "|".join(_FIELD_NAMES) + r")\b[ \t]*:", re.IGNORECASE)

_WORD_VALUE = r"[:\s]+[\[(`'\"]*(\w+)"
_LINE_VALUE = r"[:\s]+([^\n]+)"


def _section_pattern(header: str) -> re.Pattern:
    return re.compile(
        rf"^[ \t]*##(?!#)[ \t]*\**[ \t]*{re.escape(header)}\b[^\n:]*(?::(?P<rest>[^\n]*))?$",
        re.IGNORECASE | re.MULTILINE,
    )


_SECTIONS = {
    header: _section_pattern(header)
    for header in (SUMMARY_HEADER, ISSUES_HEADER, SUGGESTIONS_HEADER)
}


def _field_patterns(name: str, value: str) -> tuple[re.Pattern, re.Pattern]:
    # Labels at the start of a line win over the same word inside prose.
    anchored = re.compile(rf"^[ \t]*(?:[-*•][ \t]+)?{name}\b{value}", re.IGNORECASE | re.MULTILINE)
    anywhere = re.compile(rf"\b{name}\b{value}", re.IGNORECASE)
    return anchored, anywhere


_FIELDS = {
    "severity": _field_patterns("severity", _WORD_VALUE),
    "category": _field_patterns("category", _WORD_VALUE),
    "location": _field_patterns("location", _LINE_VALUE),
    "description": _field_patterns("description", _LINE_VALUE),
    "suggestion": _field_patterns("suggestion", _LINE_VALUE),
}

_SEVERITIES = {s.value: s for s in Severity}
_CATEGORIES = {c.value: c for c in FocusArea}


def parse_review_response(text: str) -> ReviewResult:
    """Parse a model response into summary, issues and suggestions."""
    text = text or ""

    summary = (_find_section(text, SUMMARY_HEADER) or "").strip() or NO_SUMMARY

    issues: list[Issue] = []
    issues_body = _find_section(text, ISSUES_HEADER)
    if issues_body is not None and NO_ISSUES_MARKER.lower() not in issues_body.lower():
        for block in _split_issue_blocks(issues_body):
            issue = _parse_issue(block)
            if issue is not None:
                issues.append(issue)

    suggestions = []
    suggestions_body = _find_section(text, SUGGESTIONS_HEADER)
    if suggestions_body:
        for line in suggestions_body.splitlines():
            stripped = _BULLET.sub("", line).strip()
            if stripped:
                suggestions.append(stripped)

    logger.debug(f"Parsed response: {len(issues)} issues, {len(suggestions)} suggestions")
    return ReviewResult(summary=summary, issues=issues, suggestions=suggestions)


def _find_section(text: str, header: str) -> str | None:
    """Return the body under a ``## header`` line, or None if it is missing."""
    match = _SECTIONS[header].search(text)
    if not match:
        return None

    next_header = _NEXT_HEADER.search(text, match.end())
    end = next_header.start() if next_header else len(text)
    body = text[match.end():end]
    rest = match.group("rest")
    if rest and rest.strip():
        body = rest + body
    return body


def _split_issue_blocks(body: str) -> list[str]:
    """Split the issues body into one text block per bulleted issue.

    A bullet whose field labels are all missing from the current block
    continues that block, so one-bullet-per-field answers stay together.
    """
    blocks: list[tuple[list[str], set[str]]] = []

    for line in body.splitlines():
        line_labels = {m.lower() for m in _LABEL.findall(_EMPHASIS.sub("", line))}

        continues = bool(blocks and line_labels and not line_labels & blocks[-1][1])
        if (_BULLET.match(line) and not continues) or not blocks:
            blocks.append(([], set()))

        lines, labels = blocks[-1]
        lines.append(line)
        labels.update(line_labels)

    return [text for text in ("\n".join(lines) for lines, _ in blocks) if text.strip()]


def _extract(block: str, field: str) -> str | None:
    for pattern in _FIELDS[field]:
        match = pattern.search(block)
        if match:
            value = match.group(1).strip()
            if value:
                return value
    return None


def _parse_location(location: str | None) -> tuple[str, int | None]:
    if not location:
        return UNKNOWN_FILE, None

    location = location.strip().strip("`'\"[]()").strip()
    if ":" not in location:
        spelled = re.match(r"(?P<file>\S+?)[,\s]+line\s+(?P<line>\d+)", location, re.IGNORECASE)
        if spelled:
            file = spelled.group("file").strip("`'\"") or UNKNOWN_FILE
            return file, int(spelled.group("line")) or None
        return location or UNKNOWN_FILE, None

    file, _, rest = location.partition(":")
    file = file.strip().strip("`'\"") or UNKNOWN_FILE
    digits = re.match(r"\s*(\d+)", rest)
    line = int(digits.group(1)) if digits else None
    return file, line or None


def _parse_issue(block: str) -> Issue | None:
    block = _EMPHASIS.sub("", block)

    description = _extract(block, "description")
    if description is None:
        return None

    severity = (_extract(block, "severity") or "").lower()
    category = (_extract(block, "category") or "").lower()
    file, line = _parse_location(_extract(block, "location"))

    return Issue(
        severity=_SEVERITIES.get(severity, Severity.MEDIUM),
        category=_CATEGORIES.get(category, FocusArea.BUGS),
        file=file,
        line=line,
        description=description,
        suggestion=_extract(block, "suggestion"),
    )
