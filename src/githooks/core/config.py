"""Configuration: hook definitions from pyproject.toml / package.json / .git-hooksrc, env flags."""

from __future__ import annotations

import json
import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from githooks.hooks import HookDef, parse_hooks_config

from .errors import ConfigError

logger = logging.getLogger(__name__)

PYPROJECT = "pyproject.toml"
PACKAGE_JSON = "package.json"
RC_FILE = ".git-hooksrc"
CONFIG_KEY = "git-hooks"

# Any of these set to a non-empty value makes install/errors quiet.
SILENT_ENV_VARS = ("CI", "GIT_HOOKS_SILENT")


@dataclass
class Config:
    cwd: Path = field(default_factory=Path.cwd)
    hooks: dict[str, HookDef] = field(default_factory=dict)
    source: Path | None = None  # file the hooks were read from
    silent: bool = False
    verbose: bool = False

    @property
    def hook_names(self) -> list[str]:
        return list(self.hooks)


def _read_pyproject(path: Path) -> object | None:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, OSError) as e:
        raise ConfigError(f"cannot parse TOML: {e}", path) from e
    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        raise ConfigError("'tool' must be a table", path)
    return tool.get(CONFIG_KEY)


def _read_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        raise ConfigError(f"cannot parse JSON: {e}", path) from e


def _read_package_json(path: Path) -> object | None:
    data = _read_json(path)
    return data.get(CONFIG_KEY) if isinstance(data, dict) else None


_SOURCES = (
    (PYPROJECT, _read_pyproject),
    (PACKAGE_JSON, _read_package_json),
    (RC_FILE, _read_json),
)


def find_hooks_config(cwd: Path) -> tuple[Path | None, object | None]:
    """Return ``(path, raw)`` for the first config source that defines hooks."""
    for file_name, reader in _SOURCES:
        path = cwd / file_name
        if not path.is_file():
            continue
        raw = reader(path)
        if raw is not None:
            logger.debug(f"Loaded hook configuration from {path}")
            return path, raw
    return None, None


def is_silent() -> bool:
    return any(os.getenv(var) for var in SILENT_ENV_VARS)


def load_config(cwd: Path | None = None, verbose: bool = False) -> Config:
    """Load config with priority: pyproject.toml > package.json > .git-hooksrc."""
    config = Config(cwd=cwd or Path.cwd(), verbose=verbose)
    load_dotenv(config.cwd / ".env")
    config.silent = is_silent()

    source, raw = find_hooks_config(config.cwd)
    if source is not None:
        try:
            config.hooks = parse_hooks_config(raw)
        except ConfigError as e:
            raise ConfigError(str(e), source) from e
        config.source = source
    return config
