"""Hooks: registry, ignore matching, command invocation and execution."""

from .invoker import build_spawn_command, invoke_command, needs_shell_wrapper
from .models import GIT_HOOKS, HookDef, get_supported_hooks
from .parser import parse_hook_def, parse_hooks_config
from .patterns import matches, should_ignore
from .runner import HookRunner, create_hook_runner

__all__ = [
    "GIT_HOOKS",
    "HookDef",
    "HookRunner",
    "build_spawn_command",
    "create_hook_runner",
    "get_supported_hooks",
    "invoke_command",
    "matches",
    "needs_shell_wrapper",
    "parse_hook_def",
    "parse_hooks_config",
    "should_ignore",
]
