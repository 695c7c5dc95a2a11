# src/smartdiff/review/diff.py
import fnmatch
import logging
import posixpath
import re
from dataclasses import dataclass
from unidiff import PatchSet
from unidiff.errors import UnidiffParseError


logger = logging.getLogger(__name__)

LINE_SEPARATOR = "\n"
DEFAULT_MAX_CHUNK_BYTES = 15000

DEFAULT_IGNORE_PATTERNS = (
    "node_modules/**",
    "dist/**",
    "build/**",
    "*.min.js",
    "*.min.css",
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    ".git/**",
    "coverage/**",
    "*.log",
    ".DS_Store",
)

_FILE_HEADER = re.compile(r"^diff --git a/(.*?) b/")


@dataclass(frozen=True)
class DiffChunk:
    index: int
    text: str

    @property
    def size(self) -> int:
        return _byte_len(self.text)


@dataclass
class DiffFileStats:
    path: str
    added: int
    removed: int
    is_new: bool = False
    is_deleted: bool = False


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def chunk_diff(diff: str, max_chunk_bytes: int = DEFAULT_MAX_CHUNK_BYTES) -> list[DiffChunk]:
    """Split a diff into line-aligned chunks of at most ``max_chunk_bytes``.

    Joining the chunk texts with ``LINE_SEPARATOR`` gives back the input.
    A single line longer than the limit gets a chunk of its own.
    """
    if max_chunk_bytes <= 0:
        raise ValueError(f"max_chunk_bytes must be positive, got {max_chunk_bytes}")

    if _byte_len(diff) <= max_chunk_bytes:
        return [DiffChunk(index=0, text=diff)]

    texts: list[str] = []
    current: list[str] = []
    current_size = 0

    for line in diff.split(LINE_SEPARATOR):
        line_size = _byte_len(line) + len(LINE_SEPARATOR)

        if current and current_size + line_size > max_chunk_bytes:
            texts.append(LINE_SEPARATOR.join(current))
            current = []
            current_size = 0

        current.append(line)
        current_size += line_size

    if current:
        texts.append(LINE_SEPARATOR.join(current))

    return [DiffChunk(index=i, text=text) for i, text in enumerate(texts)]


def is_ignored(path: str, patterns: tuple[str, ...] | list[str]) -> bool:
    """Check if a path matches any ignore pattern.

    Patterns without a slash match the file name at any depth, as in .gitignore.
    """
    normalized = re.sub(r"^\.?/", "", path)
    name = posixpath.basename(normalized)
    return any(
        fnmatch.fnmatch(normalized, pattern) or ("/" not in pattern and fnmatch.fnmatch(name, pattern))
        for pattern in patterns
    )


def filter_diff(diff: str, patterns: tuple[str, ...] | list[str]) -> str:
    """Drop file sections whose path matches the default or given ignore patterns."""
    if not patterns:
        return diff

    all_patterns = (*DEFAULT_IGNORE_PATTERNS, *patterns)
    kept: list[str] = []
    include = True
    skipped: list[str] = []

    for line in diff.split(LINE_SEPARATOR):
        header = _FILE_HEADER.match(line)
        if header:
            include = not is_ignored(header.group(1), all_patterns)
            if not include:
                skipped.append(header.group(1))
        if include:
            kept.append(line)

    if skipped:
        logger.info(f"Ignoring {len(skipped)} file(s): {', '.join(skipped)}")
    return LINE_SEPARATOR.join(kept)


def summarize_diff(diff: str) -> list[DiffFileStats]:
    """Per-file added/removed line counts, or an empty list if the diff can't be parsed."""
    try:
        patch = PatchSet(diff)
    except UnidiffParseError as e:
        logger.warning(f"Could not parse diff for stats: {e}")
        return []

    return [
        DiffFileStats(
            path=patched_file.path,
            added=patched_file.added,
            removed=patched_file.removed,
            is_new=patched_file.is_added_file,
            is_deleted=patched_file.is_removed_file,
        )
        for patched_file in patch
    ]
