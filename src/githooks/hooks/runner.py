"""HookRunner: in-memory hook registry and execution orchestrator."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from . import invoker
from .models import HookDef
from .patterns import should_ignore

logger = logging.getLogger(__name__)


class HookRunner:
    """Registers hooks by name and runs them against an invocation file list.

    Configuration calls return the runner so they can be chained::

        runner = HookRunner().parallel_exec().ignore(["dist/"])
        runner.register(HookDef(name="pre-commit", command="lint && test"))
        ok = await runner.run("pre-commit", ["src/app.py"])
    """

    def __init__(self, cwd: str | Path | None = None):
        self.cwd = cwd
        self.parallel_default = False
        self.ignore_patterns: list[str] = []
        self.color_enabled = False
        self._hooks: dict[str, HookDef] = {}

    # ── Settings ─────────────────────────────────────────────────────

    def parallel_exec(self, enabled: bool = True) -> HookRunner:
        self.parallel_default = enabled
        return self

    def ignore(self, patterns: Iterable[str]) -> HookRunner:
        self.ignore_patterns = list(patterns)
        return self

    def use_colors(self, enabled: bool = True) -> HookRunner:
        self.color_enabled = enabled
        return self

    # ── Registry ─────────────────────────────────────────────────────

    def register(self, hook: HookDef) -> HookRunner:
        """Add *hook*, replacing any hook already registered under its name."""
        self._hooks[hook.name] = hook
        return self

    def unregister(self, name: str) -> HookRunner:
        self._hooks.pop(name, None)
        return self

    def get(self, name: str) -> HookDef | None:
        return self._hooks.get(name)

    def list(self) -> list[HookDef]:
        return [*self._hooks.values()]

    def count(self) -> int:
        return len(self._hooks)

    def clear(self) -> HookRunner:
        self._hooks.clear()
        return self

    def __len__(self) -> int:
        return len(self._hooks)

    def __contains__(self, name: object) -> bool:
        return name in self._hooks

    def __iter__(self) -> Iterator[HookDef]:
        return iter(self.list())

    # ── Execution ────────────────────────────────────────────────────

    def _child_env(self) -> dict[str, str]:
        return {"FORCE_COLOR": "1"} if self.color_enabled else {}

    async def _invoke(self, hook: HookDef, command: str) -> bool:
        return await invoker.invoke_command(
            command,
            hook.args,
            cwd=self.cwd,
            env=self._child_env(),
            timeout=hook.timeout,
        )

    async def run(self, name: str, files: Iterable[str] | None = None) -> bool:
        """Run one hook. Skipped hooks succeed; unknown hooks fail."""
        hook = self._hooks.get(name)
        if hook is None:
            logger.warning(f"Hook not registered: {name}")
            return False

        files = [*(files or [])]
        if should_ignore(files, self.ignore_patterns):
            logger.info(f"Skipping hook {name}: files match ignore patterns")
            return True
        if not hook.should_run(files):
            logger.info(f"Skipping hook {name}: condition not met")
            return True

        commands = hook.sub_commands()
        parallel = hook.parallel if hook.parallel is not None else self.parallel_default

        if parallel and len(commands) > 1:
            logger.debug(f"Running {len(commands)} commands for {name} in parallel")
            results = await asyncio.gather(*(self._invoke(hook, cmd) for cmd in commands))
            return all(results)

        for cmd in commands:
            if not await self._invoke(hook, cmd):
                logger.info(f"Hook {name} failed at: {cmd}")
                return False
        return True

    async def run_all(self, files: Iterable[str] | None = None) -> bool:
        """Run every registered hook in order; a failure does not stop the rest."""
        files = [*(files or [])]
        all_success = True
        for hook in self.list():
            if not await self.run(hook.name, files):
                all_success = False
        return all_success


def create_hook_runner(cwd: str | Path | None = None) -> HookRunner:
    return HookRunner(cwd=cwd)
