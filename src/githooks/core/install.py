"""Hook script lifecycle: generate, install, uninstall, status."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from githooks.hooks.invoker import is_windows

from .utils import hook_file_name, hook_name_from_file

logger = logging.getLogger(__name__)

CLI_NAME = "git-hooks"
GENERATED_MARKER = "git-hooks generated hook"

_POSIX_TEMPLATE = """\
#!/bin/sh
# {marker}: {name}
# DO NOT EDIT MANUALLY

exec {cli} run "{name}" "$@"
"""

_WINDOWS_TEMPLATE = """\
@echo off
REM {marker}: {name}
REM DO NOT EDIT MANUALLY

{cli} run "{name}" %*
if %errorlevel% neq 0 exit /b %errorlevel%
"""


@dataclass
class InstallReport:
    installed: list[Path] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)  # requested but not configured


@dataclass
class HookStatus:
    installed: list[str] = field(default_factory=list)
    configured_not_installed: list[str] = field(default_factory=list)
    installed_not_configured: list[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.installed or self.configured_not_installed)


def hooks_dir(git_dir: Path) -> Path:
    return git_dir / "hooks"


def hook_path(git_dir: Path, name: str, platform: str | None = None) -> Path:
    return hooks_dir(git_dir) / hook_file_name(name, platform)


def generate_hook_script(name: str, platform: str | None = None) -> str:
    template = _WINDOWS_TEMPLATE if is_windows(platform or sys.platform) else _POSIX_TEMPLATE
    return template.format(marker=GENERATED_MARKER, name=name, cli=CLI_NAME)


def is_installed(git_dir: Path, name: str, platform: str | None = None) -> bool:
    return hook_path(git_dir, name, platform).exists()


def install_hooks(
    git_dir: Path,
    configured: Iterable[str],
    names: Iterable[str] | None = None,
    platform: str | None = None,
) -> InstallReport:
    """Write a shim for each name in *names* (default: every configured hook)."""
    configured = list(configured)
    report = InstallReport()
    target = hooks_dir(git_dir)
    target.mkdir(parents=True, exist_ok=True)

    for name in list(names) if names is not None else configured:
        if name not in configured:
            logger.warning(f"Hook {name!r} not found in configuration")
            report.missing.append(name)
            continue
        path = hook_path(git_dir, name, platform)
        path.write_text(generate_hook_script(name, platform), encoding="utf-8")
        if not is_windows(platform or sys.platform):
            path.chmod(0o755)
        logger.debug(f"Installed {path}")
        report.installed.append(path)
    return report


def uninstall_hooks(git_dir: Path, names: Iterable[str], platform: str | None = None) -> list[Path]:
    """Remove installed shims for *names*. Returns the removed paths."""
    removed: list[Path] = []
    for name in names:
        path = hook_path(git_dir, name, platform)
        if path.exists():
            path.unlink()
            logger.debug(f"Removed {path}")
            removed.append(path)
    return removed


def installed_hook_names(git_dir: Path, platform: str | None = None) -> list[str]:
    target = hooks_dir(git_dir)
    if not target.is_dir():
        return []
    names = (hook_name_from_file(p.name, platform) for p in sorted(target.iterdir()) if p.is_file())
    return [n for n in names if n]


def hook_status(git_dir: Path, configured: Iterable[str], platform: str | None = None) -> HookStatus:
    configured = list(configured)
    installed = installed_hook_names(git_dir, platform)
    return HookStatus(
        installed=installed,
        configured_not_installed=[n for n in configured if n not in installed],
        installed_not_configured=[n for n in installed if n not in configured],
    )
