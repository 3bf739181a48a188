"""Ignore-pattern matching for hook invocation file lists.

Three pattern forms, checked in order:

- ``dist/``      directory pattern, matches anything under a ``dist`` segment
- ``*.log``      wildcard pattern, ``*`` stays within one path segment and
                 ``**`` crosses separators
- ``README.md``  exact or trailing-segment match
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache


@lru_cache(maxsize=256)
def _compile_wildcard(pattern: str) -> re.Pattern:
    translated = (
        pattern.replace(".", r"\.")
        .replace("**", "\0")
        .replace("*", "[^/]*")
        .replace("\0", ".*")
    )
    return re.compile(translated)


def _matches_directory(file_path: str, pattern: str) -> bool:
    stem = pattern[:-1]
    return (
        file_path.startswith(pattern)
        or f"/{stem}/" in file_path
        or file_path.endswith(f"/{stem}")
    )


def _matches_wildcard(file_path: str, pattern: str) -> bool:
    regex = _compile_wildcard(pattern)
    if regex.fullmatch(file_path):
        return True
    # Slash-free patterns also apply to the last path segment.
    if "/" not in pattern and "/" in file_path:
        return regex.fullmatch(file_path.rsplit("/", 1)[1]) is not None
    return False


def _matches_exact(file_path: str, pattern: str) -> bool:
    return (
        file_path == pattern
        or file_path.endswith(f"/{pattern}")
        or f"/{pattern}/" in file_path
    )


def matches(file_path: str, pattern: str) -> bool:
    """Return True if *file_path* is excluded by *pattern*."""
    if pattern.endswith("/"):
        return _matches_directory(file_path, pattern)
    if "*" in pattern:
        return _matches_wildcard(file_path, pattern)
    return _matches_exact(file_path, pattern)


def should_ignore(files: Iterable[str], patterns: Iterable[str]) -> bool:
    """True if any file matches any pattern. No patterns means nothing is ignored."""
    patterns = list(patterns)
    if not patterns:
        return False
    return any(matches(f, p) for f in files for p in patterns)
