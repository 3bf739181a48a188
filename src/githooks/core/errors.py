"""Exception types raised outside the hook engine."""

from __future__ import annotations

from pathlib import Path


class GitHooksError(Exception):
    """Base class for user-facing git-hooks errors."""


class ConfigError(GitHooksError):
    """Hook configuration is missing, unreadable or has the wrong shape."""

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class NotAGitRepositoryError(GitHooksError):
    def __init__(self, start: Path):
        self.start = start
        super().__init__(f"Not in a git repository (.git directory not found from {start})")
