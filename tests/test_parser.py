"""Tests for hook config parsing: command spec shapes, options, errors."""

import pytest

from githooks.core.errors import ConfigError
from githooks.hooks import HookDef, parse_hook_def, parse_hooks_config


class TestParseHookDef:
    def test_string(self):
        h = parse_hook_def("pre-commit", "pytest")
        assert h == HookDef(name="pre-commit", command="pytest")

    def test_list_joined_with_and(self):
        h = parse_hook_def("pre-commit", ["ruff", "pytest"])
        assert h.command == "ruff && pytest"
        assert h.sub_commands() == ["ruff", "pytest"]

    def test_object_with_run_string(self):
        h = parse_hook_def("pre-push", {"run": "pytest"})
        assert h.command == "pytest"
        assert h.parallel is None

    def test_object_options(self):
        h = parse_hook_def(
            "pre-commit",
            {"run": ["lint", "test"], "parallel": True, "args": ["-q"], "timeout": 30},
        )
        assert h.command == "lint && test"
        assert h.parallel is True
        assert h.args == ["-q"]
        assert h.timeout == 30.0

    def test_object_ignore_becomes_condition(self):
        h = parse_hook_def("pre-commit", {"run": "lint", "ignore": ["docs/", "*.md"]})
        assert h.should_run(["src/app.py"]) is True
        assert h.should_run(["docs/index.rst"]) is False
        assert h.should_run(["README.md"]) is False

    def test_empty_ignore_has_no_condition(self):
        h = parse_hook_def("pre-commit", {"run": "lint", "ignore": []})
        assert h.condition is None

    def test_missing_run(self):
        with pytest.raises(ConfigError, match="missing 'run'"):
            parse_hook_def("pre-commit", {"parallel": True})

    @pytest.mark.parametrize("raw", [42, None, ["ok", 1], True])
    def test_bad_command_shape(self, raw):
        with pytest.raises(ConfigError):
            parse_hook_def("pre-commit", raw)

    def test_bad_parallel(self):
        with pytest.raises(ConfigError, match="parallel"):
            parse_hook_def("pre-commit", {"run": "x", "parallel": "yes"})

    @pytest.mark.parametrize("timeout", [0, -1, "10", True])
    def test_bad_timeout(self, timeout):
        with pytest.raises(ConfigError, match="timeout"):
            parse_hook_def("pre-commit", {"run": "x", "timeout": timeout})

    def test_bad_args(self):
        with pytest.raises(ConfigError, match="args"):
            parse_hook_def("pre-commit", {"run": "x", "args": "-q"})


class TestParseHooksConfig:
    def test_mixed_shapes(self):
        hooks = parse_hooks_config(
            {
                "pre-commit": "lint",
                "pre-push": ["build", "test"],
                "commit-msg": {"run": "check-msg", "parallel": False},
            }
        )
        assert list(hooks) == ["pre-commit", "pre-push", "commit-msg"]
        assert hooks["pre-push"].command == "build && test"
        assert hooks["commit-msg"].parallel is False

    def test_empty(self):
        assert parse_hooks_config({}) == {}

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError):
            parse_hooks_config(["pre-commit"])
