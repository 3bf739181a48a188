"""CLI entry point: install, uninstall, list, status and run git hooks."""

from __future__ import annotations

import asyncio
import functools
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .commands import list_hooks, render_hooks, supports_styled_output
from .core.config import Config, is_silent, load_config
from .core.errors import GitHooksError, NotAGitRepositoryError
from .core.install import hook_status, install_hooks, is_installed, uninstall_hooks
from .core.utils import find_git_dir
from .hooks import HookRunner

console = Console(soft_wrap=True)
err_console = Console(stderr=True)

CONFIG_HINT = "Add hooks to pyproject.toml [tool.git-hooks], package.json or .git-hooksrc"

ALIASES = {
    "add": "install",
    "enable": "install",
    "remove": "uninstall",
    "disable": "uninstall",
    "ls": "list",
}


class _AliasedGroup(click.Group):
    def get_command(self, ctx, cmd_name):
        return super().get_command(ctx, ALIASES.get(cmd_name, cmd_name))

    def resolve_command(self, ctx, args):
        _, cmd, rest = super().resolve_command(ctx, args)
        return cmd.name if cmd else None, cmd, rest


def _setup_logging(verbose: bool) -> None:
    pkg_logger = logging.getLogger("githooks")
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in pkg_logger.handlers):
        pkg_logger.addHandler(RichHandler(console=err_console, show_time=False, show_path=False))


def _handle_errors(allow_silent: bool = False):
    """Print GitHooksError and exit 1. With *allow_silent*, CI / silent mode exits 0."""

    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except GitHooksError as e:
                err_console.print(f"error: {e}", style="bold", markup=False)
                sys.exit(0 if allow_silent and is_silent() else 1)

        return wrapper

    return decorator


def _config(ctx: click.Context) -> Config:
    return load_config(verbose=ctx.obj.get("verbose", False))


def _require_git_dir(config: Config) -> Path:
    git_dir = find_git_dir(config.cwd)
    if git_dir is None:
        raise NotAGitRepositoryError(config.cwd)
    return git_dir


# ── Commands ────────────────────────────────────────────────────────


@click.group(cls=_AliasedGroup)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.version_option(__version__, prog_name="git-hooks")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """git-hooks: modern git hooks manager."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    _setup_logging(verbose)


@cli.command()
@click.argument("name", required=False)
@click.pass_context
@_handle_errors(allow_silent=True)
def install(ctx: click.Context, name: str | None):
    """Install git hooks (all configured, or NAME). Aliases: add, enable."""
    config = _config(ctx)
    git_dir = find_git_dir(config.cwd)
    if git_dir is None:
        if config.silent:
            return
        raise NotAGitRepositoryError(config.cwd)

    if name is None and not config.hooks:
        console.print("no hooks configured", style="dim")
        console.print(CONFIG_HINT, style="dim", markup=False)
        return

    report = install_hooks(git_dir, config.hook_names, [name] if name else None)
    for missing in report.missing:
        console.print(f"warning: hook [bold]{missing}[/bold] not found in configuration")
    for path in report.installed:
        console.print(f"installed {path}")
    if report.installed:
        console.print("\nhooks installed successfully!", style="green")


@cli.command()
@click.argument("name", required=False)
@click.pass_context
@_handle_errors()
def uninstall(ctx: click.Context, name: str | None):
    """Remove git hooks (all configured, or NAME). Aliases: remove, disable."""
    config = _config(ctx)
    git_dir = _require_git_dir(config)
    if not (git_dir / "hooks").is_dir():
        console.print("no hooks directory found", style="dim")
        return

    if name:
        removed = uninstall_hooks(git_dir, [name])
        if removed:
            console.print(f"uninstalled {removed[0]}")
        else:
            console.print(f"hook [bold]{name}[/bold] not found", style="dim")
        return

    removed = uninstall_hooks(git_dir, config.hook_names)
    console.print(f"uninstalled {len(removed)} hook(s)")


@cli.command(name="list")
@click.option("--styled", "-s", is_flag=True, help="Render a table when the terminal supports it")
@click.option("--all", "show_all", is_flag=True, help="List every standard git hook in .git/hooks")
@click.pass_context
@_handle_errors()
def list_command(ctx: click.Context, styled: bool, show_all: bool):
    """List configured hooks. Alias: ls."""
    config = _config(ctx)
    git_dir = find_git_dir(config.cwd)

    if show_all:
        hooks_dir = git_dir / "hooks" if git_dir else config.cwd / ".git" / "hooks"
        render_hooks(list_hooks(hooks_dir), console, styled=styled)
        return

    if not config.hooks:
        console.print("Configured hooks:\n")
        console.print("  no hooks configured", style="dim")
        console.print(CONFIG_HINT, style="dim", markup=False)
        return

    if styled and supports_styled_output(console):
        table = Table(header_style="bold cyan")
        table.add_column("Hook")
        table.add_column("Command", style="dim")
        table.add_column("Installed", justify="center")
        for name, hook in config.hooks.items():
            mark = "-" if git_dir is None else ("✓" if is_installed(git_dir, name) else "✗")
            table.add_row(name, escape(hook.command), mark)
        console.print(table)
        return

    console.print("Configured hooks:\n")
    for name, hook in config.hooks.items():
        status = ""
        if git_dir is not None:
            status = " [installed]" if is_installed(git_dir, name) else " [not installed]"
        console.print(f"  {name}: {hook.command}{status}", markup=False, highlight=False)


@cli.command()
@click.pass_context
@_handle_errors()
def status(ctx: click.Context):
    """Check installed hooks status."""
    config = _config(ctx)
    console.print("Hook status:\n")
    git_dir = find_git_dir(config.cwd)
    if git_dir is None:
        console.print("  not in a git repository", style="dim")
        return
    if not (git_dir / "hooks").is_dir():
        console.print("  .git/hooks directory does not exist", style="dim")
        return

    report = hook_status(git_dir, config.hook_names)
    if report.is_empty():
        console.print("  no hooks installed or configured", style="dim")
        return

    console.print("Installed hooks:")
    for name in report.installed:
        console.print(f"  [x] {name}", markup=False)
    if report.configured_not_installed:
        console.print("\nConfigured but not installed:")
        for name in report.configured_not_installed:
            console.print(f"  [ ] {name}", markup=False)
    if report.installed_not_configured:
        console.print("\nInstalled but not configured (may be from other sources):")
        for name in report.installed_not_configured:
            console.print(f"  [?] {name}", markup=False)


@cli.command()
@click.argument("name", required=False)
@click.argument("files", nargs=-1)
@click.option("--all", "run_all", is_flag=True, help="Run every configured hook")
@click.option("--parallel", is_flag=True, help="Run each hook's commands in parallel")
@click.option("--color/--no-color", default=False, help="Set FORCE_COLOR for hook commands")
@click.option("--ignore", "ignore_patterns", multiple=True, help="Skip when a file matches (repeatable)")
@click.pass_context
@_handle_errors()
def run(
    ctx: click.Context,
    name: str | None,
    files: tuple[str, ...],
    run_all: bool,
    parallel: bool,
    color: bool,
    ignore_patterns: tuple[str, ...],
):
    """Run hook NAME (or --all) against FILES."""
    config = _config(ctx)
    runner = HookRunner(cwd=config.cwd).parallel_exec(parallel).use_colors(color)
    runner.ignore(ignore_patterns)
    for hook in config.hooks.values():
        runner.register(hook)

    if run_all:
        args = [name, *files] if name else list(files)
        ok = asyncio.run(runner.run_all(args))
    else:
        if not name:
            raise click.UsageError("hook name required (or pass --all)")
        if name not in runner:
            raise GitHooksError(f'Hook "{name}" not found in configuration')
        console.print(f"running hook: [bold]{name}[/bold]", style="dim")
        ok = asyncio.run(runner.run(name, files))

    if not ok:
        err_console.print("hook failed", style="bold red")
    sys.exit(0 if ok else 1)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
