"""Tests for standard hook listing and its views."""

import io

import pytest
from rich.console import Console
from rich.table import Table

from githooks.commands import (
    HookInfo,
    create_simple_view,
    create_styled_view,
    list_hooks,
    render_hooks,
    supports_styled_output,
)
from githooks.hooks import GIT_HOOKS


@pytest.fixture
def hooks_dir(tmp_path):
    d = tmp_path / ".git" / "hooks"
    d.mkdir(parents=True)
    return d


def _by_name(hooks):
    return {h.name: h for h in hooks}


class TestListHooks:
    def test_one_entry_per_standard_hook(self, hooks_dir):
        hooks = list_hooks(hooks_dir)
        assert [h.name for h in hooks] == list(GIT_HOOKS)
        assert all(not h.installed and h.command == "-" for h in hooks)

    def test_skips_shebang(self, hooks_dir):
        (hooks_dir / "pre-commit").write_text("#!/bin/sh\nexec git-hooks run pre-commit\n")
        info = _by_name(list_hooks(hooks_dir))["pre-commit"]
        assert info.installed is True
        assert info.status == "✓"
        assert info.command == "exec git-hooks run pre-commit"

    def test_first_line_without_shebang(self, hooks_dir):
        (hooks_dir / "pre-push").write_text("npm test\nmore\n")
        assert _by_name(list_hooks(hooks_dir))["pre-push"].command == "npm test"

    def test_truncates_long_command(self, hooks_dir):
        (hooks_dir / "commit-msg").write_text("#!/bin/sh\n" + "x" * 80 + "\n")
        command = _by_name(list_hooks(hooks_dir))["commit-msg"].command
        assert command == "x" * 50 + "..."

    def test_sample_hook(self, hooks_dir):
        (hooks_dir / "pre-rebase.sample").write_text("#!/bin/sh\n")
        info = _by_name(list_hooks(hooks_dir))["pre-rebase"]
        assert info.installed is True
        assert info.command == "(sample hook)"

    def test_missing_directory(self, tmp_path):
        hooks = list_hooks(tmp_path / "nope")
        assert len(hooks) == len(GIT_HOOKS)
        assert all(h.status == "✗" for h in hooks)


class TestViews:
    def test_simple_view(self):
        view = create_simple_view([HookInfo("pre-commit", True, "x"), HookInfo("pre-push", False)])
        assert view.splitlines() == ["Git hooks:", "  ✓  pre-commit", "  ✗  pre-push"]

    def test_simple_view_empty(self):
        assert create_simple_view([]) == "No git hooks found."

    def test_styled_view_is_table(self):
        table = create_styled_view([HookInfo("pre-commit", True, "x")])
        assert isinstance(table, Table)
        assert table.row_count == 1
        assert [c.header for c in table.columns] == ["Hook", "Status", "Command"]


class TestRenderHooks:
    def test_falls_back_when_not_a_terminal(self):
        buf = io.StringIO()
        console = Console(file=buf, force_terminal=False)
        assert supports_styled_output(console) is False
        render_hooks([HookInfo("pre-commit", True, "x")], console, styled=True)
        assert "Git hooks:" in buf.getvalue()

    def test_styled_on_terminal(self):
        buf = io.StringIO()
        console = Console(file=buf, force_terminal=True, color_system="standard", width=100)
        assert supports_styled_output(console) is True
        render_hooks([HookInfo("pre-commit", True, "exec thing")], console, styled=True)
        out = buf.getvalue()
        assert "Git hooks:" not in out
        assert "pre-commit" in out
        assert "Command" in out

    def test_plain_unless_requested(self):
        buf = io.StringIO()
        console = Console(file=buf, force_terminal=True, color_system="standard")
        render_hooks([HookInfo("pre-commit", False)], console)
        assert "Git hooks:" in buf.getvalue()
