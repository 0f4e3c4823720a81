# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the oxlint-disable command line."""

from __future__ import annotations

import importlib
from pathlib import Path

import pytest
from typer.testing import CliRunner

from oxlint_disable import __version__, workflow
from oxlint_disable.cli.app import app
from oxlint_disable.git import DirtyWorktreeError, WorktreeStatus
from oxlint_disable.oxlint import LintInvocationError

cli_app = importlib.import_module("oxlint_disable.cli.app")

DIRECTIVE = "// oxlint-disable-next-line eslint/no-unused-vars"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    (tmp_path / "test.js").write_text("const unusedVar = 1;\n", encoding="utf-8")
    monkeypatch.delenv("SKIP_GIT_CHECK", raising=False)
    return tmp_path


def _stub_oxlint(monkeypatch: pytest.MonkeyPatch, outcome, calls: list | None = None) -> None:
    def fake_run_oxlint(rule, *, config, root, extra_args=(), dry_run=False):
        if calls is not None:
            calls.append((str(rule), list(extra_args)))
        return outcome

    monkeypatch.setattr(workflow, "run_oxlint", fake_run_oxlint)


def test_missing_rule_is_usage_error(runner: CliRunner, project: Path) -> None:
    result = runner.invoke(app, ["--root", str(project), "--no-emoji"])

    assert result.exit_code == 2
    assert "A rule identifier is required" in result.output
    assert "Usage: oxlint-disable --rule" in result.output


@pytest.mark.parametrize("raw", ["no-unused-vars", "a/b/c", "/rule"])
def test_malformed_rule_is_usage_error(runner: CliRunner, project: Path, raw: str) -> None:
    result = runner.invoke(app, ["--rule", raw, "--root", str(project)])

    assert result.exit_code == 2
    assert "Invalid rule format" in result.output


def test_patches_files(runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch, make_diagnostic, make_outcome) -> None:
    calls: list = []
    _stub_oxlint(monkeypatch, make_outcome(make_diagnostic(1)), calls)

    result = runner.invoke(
        app,
        ["--rule", "eslint/no-unused-vars", "--root", str(project), "--allow-dirty", "--", "src/", "--quiet"],
    )

    assert result.exit_code == 0, result.output
    assert (project / "test.js").read_text(encoding="utf-8") == f"{DIRECTIVE}\nconst unusedVar = 1;\n"
    assert "Total modifications: 1" in result.output
    assert calls == [("eslint/no-unused-vars", ["src/", "--quiet"])]


def test_dry_run_does_not_write(runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch, make_diagnostic, make_outcome) -> None:
    _stub_oxlint(monkeypatch, make_outcome(make_diagnostic(1)))

    def unexpected(root):
        raise AssertionError("dry runs must not inspect the worktree")

    monkeypatch.setattr(cli_app, "ensure_clean_worktree", unexpected)

    result = runner.invoke(app, ["-r", "eslint/no-unused-vars", "-d", "--root", str(project), "--no-color"])

    assert result.exit_code == 0, result.output
    assert (project / "test.js").read_text(encoding="utf-8") == "const unusedVar = 1;\n"
    assert DIRECTIVE in result.output
    assert "(dry run - no files were modified)" in result.output


def test_dirty_worktree_exits(runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch, make_diagnostic, make_outcome) -> None:
    _stub_oxlint(monkeypatch, make_outcome(make_diagnostic(1)))

    def dirty(root):
        raise DirtyWorktreeError((" M test.js",))

    monkeypatch.setattr(cli_app, "ensure_clean_worktree", dirty)

    result = runner.invoke(app, ["--rule", "eslint/no-unused-vars", "--root", str(project)])

    assert result.exit_code == 4
    assert "Working tree has uncommitted changes" in result.output
    assert (project / "test.js").read_text(encoding="utf-8") == "const unusedVar = 1;\n"


def test_skip_git_check_env(runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch, make_outcome) -> None:
    _stub_oxlint(monkeypatch, make_outcome())
    monkeypatch.setenv("SKIP_GIT_CHECK", "1")

    def dirty(root):
        raise DirtyWorktreeError((" M test.js",))

    monkeypatch.setattr(cli_app, "ensure_clean_worktree", dirty)

    result = runner.invoke(app, ["--rule", "eslint/no-unused-vars", "--root", str(project)])

    assert result.exit_code == 0, result.output
    assert "No diagnostics found" in result.output


def test_outside_repository_warns(runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch, make_outcome) -> None:
    _stub_oxlint(monkeypatch, make_outcome())
    monkeypatch.setattr(cli_app, "ensure_clean_worktree", lambda root: WorktreeStatus(is_repository=False))

    result = runner.invoke(app, ["--rule", "eslint/no-unused-vars", "--root", str(project)])

    assert result.exit_code == 0, result.output
    assert "is not inside a git work tree" in result.output


def test_lint_failure_exits(runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(rule, *, config, root, extra_args=(), dry_run=False):
        raise LintInvocationError("oxlint produced no output (exit status 1)")

    monkeypatch.setattr(workflow, "run_oxlint", broken)

    result = runner.invoke(app, ["--rule", "eslint/no-unused-vars", "--root", str(project), "--allow-dirty"])

    assert result.exit_code == 5
    assert "oxlint produced no output" in result.output


def test_invalid_config_exits(runner: CliRunner, project: Path) -> None:
    (project / ".oxlint-disable.toml").write_text("unknown = 1\n", encoding="utf-8")

    result = runner.invoke(app, ["--rule", "eslint/no-unused-vars", "--root", str(project), "--allow-dirty"])

    assert result.exit_code == 3
    assert "Invalid configuration" in result.output


def test_missing_root_is_usage_error(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(app, ["--rule", "eslint/no-unused-vars", "--root", str(tmp_path / "missing")])

    assert result.exit_code == 2
    assert "is not a directory" in result.output


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_nothing_to_patch_names_already_suppressed_lines(
    runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch, make_diagnostic, make_outcome
) -> None:
    (project / "test.js").write_text(f"{DIRECTIVE}\nconst unusedVar = 1;\n", encoding="utf-8")
    _stub_oxlint(monkeypatch, make_outcome(make_diagnostic(2)))

    result = runner.invoke(app, ["--rule", "eslint/no-unused-vars", "--root", str(project), "--allow-dirty"])

    assert result.exit_code == 0, result.output
    assert "Nothing to patch: 1 line(s) already carry the directive" in result.output


def test_nothing_to_patch_names_banned_paths(
    runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch, make_diagnostic, make_outcome
) -> None:
    _stub_oxlint(monkeypatch, make_outcome(make_diagnostic(1, filename="node_modules/lib/index.js")))

    result = runner.invoke(app, ["--rule", "eslint/no-unused-vars", "--root", str(project), "--allow-dirty"])

    assert result.exit_code == 0, result.output
    assert "Nothing to patch: 1 file(s) under banned paths" in result.output
    assert "already carry" not in result.output
