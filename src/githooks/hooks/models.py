"""Hook data models: HookDef, GIT_HOOKS."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

GIT_HOOKS = (
    "applypatch-msg",
    "commit-msg",
    "fsmonitor-watchman",
    "post-applypatch",
    "post-checkout",
    "post-commit",
    "post-merge",
    "post-receive",
    "post-rewrite",
    "post-update",
    "pre-applypatch",
    "pre-auto-gc",
    "pre-checkout",
    "pre-commit",
    "pre-merge-commit",
    "pre-push",
    "pre-rebase",
    "pre-receive",
    "prepare-commit-msg",
    "push-to-checkout",
    "reference-transaction",
    "sendemail-validate",
    "shallow-clone",
    "update",
    "worktree-guid",
)

# Separator used to split a hook command into sub-commands.
AND_SEPARATOR = "&&"


@dataclass
class HookDef:
    """A named command group bound to a git lifecycle event."""

    name: str
    command: str
    args: list[str] = field(default_factory=list)
    condition: Callable[[list[str]], bool] | None = None
    parallel: bool | None = None  # None = use the runner default
    timeout: float | None = None  # seconds; None = wait forever

    def sub_commands(self) -> list[str]:
        """Split ``command`` on ``&&``. Textual split, not quote-aware."""
        return [part.strip() for part in self.command.split(AND_SEPARATOR)]

    def should_run(self, files: list[str]) -> bool:
        if self.condition is None:
            return True
        return bool(self.condition(files))


def get_supported_hooks() -> tuple[str, ...]:
    return GIT_HOOKS
