"""Standard git hook listing and its plain / styled views."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from githooks.core.utils import truncate
from githooks.hooks import GIT_HOOKS


@dataclass
class HookInfo:
    name: str
    installed: bool
    command: str = "-"

    @property
    def status(self) -> str:
        return "✓" if self.installed else "✗"


def _first_command_line(path: Path) -> str:
    lines = path.read_text(encoding="utf-8", errors="replace").split("\n")
    line = lines[0]
    if line.startswith("#!"):
        line = lines[1] if len(lines) > 1 else ""
    return truncate(line)


def list_hooks(hooks_dir: Path) -> list[HookInfo]:
    """One entry per standard git hook, with a preview of its first command."""
    hooks: list[HookInfo] = []
    for name in GIT_HOOKS:
        hook_path = hooks_dir / name
        sample_path = hooks_dir / f"{name}.sample"
        if hook_path.exists():
            try:
                command = _first_command_line(hook_path)
            except OSError:
                command = "(error reading)"
            hooks.append(HookInfo(name, True, command))
        elif sample_path.exists():
            hooks.append(HookInfo(name, True, "(sample hook)"))
        else:
            hooks.append(HookInfo(name, False))
    return hooks


def create_simple_view(hooks: list[HookInfo]) -> str:
    if not hooks:
        return "No git hooks found."
    lines = [f"  {h.status}  {h.name}" for h in hooks]
    return "\n".join(["Git hooks:", *lines])


def create_styled_view(hooks: list[HookInfo]) -> Table:
    table = Table(header_style="bold cyan")
    table.add_column("Hook")
    table.add_column("Status", justify="center")
    table.add_column("Command", style="dim")
    for h in hooks:
        status = f"[green]{h.status}[/green]" if h.installed else f"[red]{h.status}[/red]"
        table.add_row(h.name, status, escape(h.command))
    return table


def supports_styled_output(console: Console) -> bool:
    return console.is_terminal and console.color_system is not None


def render_hooks(hooks: list[HookInfo], console: Console, styled: bool = False) -> None:
    """Print *hooks*, falling back to the plain view when the console cannot style."""
    if styled and hooks and supports_styled_output(console):
        console.print(create_styled_view(hooks))
    else:
        console.print(create_simple_view(hooks), markup=False, highlight=False)
