"""Hook config parsing: command specs to HookDef."""

from __future__ import annotations

from collections.abc import Callable

from ..core.errors import ConfigError
from .models import AND_SEPARATOR, HookDef
from .patterns import should_ignore


def _join_commands(value: object, name: str) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, list) and all(isinstance(c, str) for c in value):
        return f" {AND_SEPARATOR} ".join(value)
    raise ConfigError(f"hook {name!r}: command must be a string or a list of strings")


def _string_list(value: object, key: str, name: str) -> list[str]:
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return list(value)
    raise ConfigError(f"hook {name!r}: {key!r} must be a list of strings")


def _ignore_condition(patterns: list[str]) -> Callable[[list[str]], bool]:
    def condition(files: list[str]) -> bool:
        return not should_ignore(files, patterns)

    return condition


def parse_hook_def(name: str, raw: object) -> HookDef:
    """Normalize one command spec.

    Accepted shapes::

        "npm test"
        ["ruff", "pytest"]
        {"run": [...], "parallel": true, "ignore": ["docs/"], "args": [...], "timeout": 60}
    """
    if not isinstance(raw, dict):
        return HookDef(name=name, command=_join_commands(raw, name))

    if "run" not in raw:
        raise ConfigError(f"hook {name!r}: missing 'run'")
    hook = HookDef(name=name, command=_join_commands(raw["run"], name))

    if "parallel" in raw:
        if not isinstance(raw["parallel"], bool):
            raise ConfigError(f"hook {name!r}: 'parallel' must be true or false")
        hook.parallel = raw["parallel"]
    if "args" in raw:
        hook.args = _string_list(raw["args"], "args", name)
    if "timeout" in raw:
        timeout = raw["timeout"]
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigError(f"hook {name!r}: 'timeout' must be a positive number")
        hook.timeout = float(timeout)
    if raw.get("ignore"):
        hook.condition = _ignore_condition(_string_list(raw["ignore"], "ignore", name))
    return hook


def parse_hooks_config(data: object) -> dict[str, HookDef]:
    """Parse a ``{hook-name: command-spec}`` mapping."""
    if not isinstance(data, dict):
        raise ConfigError("hook configuration must be a mapping of hook name to command")
    return {str(name): parse_hook_def(str(name), raw) for name, raw in data.items()}
