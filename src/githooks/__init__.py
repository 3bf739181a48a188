"""githooks: run git hook commands with ignore patterns and parallel execution."""

from .hooks import (
    GIT_HOOKS,
    HookDef,
    HookRunner,
    create_hook_runner,
    get_supported_hooks,
    invoke_command,
    matches,
    needs_shell_wrapper,
    should_ignore,
)

__version__ = "0.1.0"


def define_config(config: dict) -> dict:
    """Identity helper for writing hook configuration in Python."""
    return config


__all__ = [
    "GIT_HOOKS",
    "HookDef",
    "HookRunner",
    "__version__",
    "create_hook_runner",
    "define_config",
    "get_supported_hooks",
    "invoke_command",
    "matches",
    "needs_shell_wrapper",
    "should_ignore",
]
