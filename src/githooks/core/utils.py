"""Path helpers: git directory lookup, hook file naming, text truncation."""

from __future__ import annotations

import sys
from pathlib import Path

from githooks.hooks.invoker import is_windows

MAX_GIT_DIR_DEPTH = 10


def find_git_dir(start: Path | None = None, max_depth: int = MAX_GIT_DIR_DEPTH) -> Path | None:
    """Walk up from *start* (default: ``Path.cwd()``) looking for a ``.git`` directory."""
    current = (start or Path.cwd()).resolve()
    for _ in range(max_depth):
        git_dir = current / ".git"
        if git_dir.is_dir():
            return git_dir
        if current.parent == current:
            break
        current = current.parent
    return None


def hook_file_name(name: str, platform: str | None = None) -> str:
    """Windows hook shims are batch files; elsewhere the hook name is the file name."""
    return f"{name}.cmd" if is_windows(platform or sys.platform) else name


def hook_name_from_file(file_name: str, platform: str | None = None) -> str | None:
    """Inverse of :func:`hook_file_name`; None for files that are not hook shims."""
    if file_name.endswith(".sample"):
        return None
    if is_windows(platform or sys.platform):
        return file_name[: -len(".cmd")] if file_name.endswith(".cmd") else None
    return None if "." in file_name else file_name


def truncate(text: str, limit: int = 50) -> str:
    text = text.strip()
    return text if len(text) <= limit else text[:limit] + "..."
