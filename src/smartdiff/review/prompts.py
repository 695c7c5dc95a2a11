from collections.abc import Iterable
from smartdiff.models.config import FocusArea


SYSTEM_PROMPT = "You are an expert code reviewer. Provide detailed, actionable feedback."

# Shared with the response parser; both sides must change together.
SUMMARY_HEADER = "Summary"
ISSUES_HEADER = "Issues"
SUGGESTIONS_HEADER = "Suggestions"
ISSUE_FIELDS = ("Severity", "Category", "Location", "Description", "Suggestion")
NO_ISSUES_MARKER = "No issues found"


FOCUS_DESCRIPTIONS = {
    FocusArea.BUGS: "potential bugs, logic errors, edge cases, null/undefined handling, and correctness issues",
    FocusArea.SECURITY: "security vulnerabilities, injection risks, authentication/authorization issues, data exposure, and unsafe operations",
    FocusArea.PERFORMANCE: "performance issues, inefficient algorithms, unnecessary computations, memory leaks, and optimization opportunities",
    FocusArea.STYLE: "code style, formatting, naming conventions, readability, and best practices",
    FocusArea.SUGGESTIONS: "better approaches, design patterns, refactoring opportunities, and code improvements",
    FocusArea.EXPLANATIONS: "what changed and why, the impact of changes, and context for reviewers",
}


REVIEW_PROMPT = """You are an expert code reviewer. Review the following git diff and provide a detailed analysis.

Focus on:
{focus_points}

Git Diff:
```diff
{diff}
```

Provide your review in the following structured format:

## {summary_header}
[Brief overview of the changes and overall assessment]

## {issues_header}
[List any issues found, if any. For each issue, specify:]
- **Severity**: critical/high/medium/low
- **Category**: bugs/security/performance/style/suggestions
- **Location**: file:line
- **Description**: What's wrong
- **Suggestion**: How to fix it (if applicable)

## {suggestions_header}
[List any general suggestions for improvement]

If no issues are found, say "{no_issues}" under the {issues_header} section.

Be specific, actionable, and constructive. Focus on the most important issues first."""


def build_review_prompt(diff: str, focus_areas: Iterable[FocusArea]) -> str:
    """Build the review prompt for a diff and the selected focus areas."""
    focus_points = "\n".join(
        f"- {FOCUS_DESCRIPTIONS[FocusArea(area)]}" for area in focus_areas
    )

    return REVIEW_PROMPT.format(
        focus_points=focus_points,
        diff=diff,
        summary_header=SUMMARY_HEADER,
        issues_header=ISSUES_HEADER,
        suggestions_header=SUGGESTIONS_HEADER,
        no_issues=NO_ISSUES_MARKER,
    )
