from .diff import DiffChunk, chunk_diff, filter_diff, summarize_diff
from .parser import parse_review_response
from .prompts import build_review_prompt

__all__ = [
    "DiffChunk",
    "chunk_diff",
    "filter_diff",
    "summarize_diff",
    "parse_review_response",
    "build_review_prompt",
]
