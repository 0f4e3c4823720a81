# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point for oxlint-disable."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .. import __version__
from ..config import ConfigError, load_config
from ..git import DirtyWorktreeError, ensure_clean_worktree, skip_requested
from ..oxlint import LintInvocationError, build_command
from ..process_utils import SubprocessExecutionError
from ..rules import RuleFormatError, RuleIdentifier
from ..workflow import RunStatus, RunSummary, suppress_rule
from .options import (
    ALLOW_DIRTY_OPTION,
    DEBUG_OPTION,
    DIFF_OPTION,
    DRY_RUN_OPTION,
    NO_COLOR_OPTION,
    NO_EMOJI_OPTION,
    OXLINT_ARGS_ARGUMENT,
    RAW_OUTPUT_OPTION,
    ROOT_OPTION,
    RULE_OPTION,
    SuppressCLIOptions,
    build_suppress_options,
)
from .shared import CLIError, CLILogger, ExitCode, build_cli_logger

USAGE_LINES = (
    "Usage: oxlint-disable --rule <plugin/rule-name> [-- <oxlint args>]",
    "Example: oxlint-disable --rule eslint/no-unused-vars -- src/",
)

app = typer.Typer(
    name="oxlint-disable",
    help="Insert oxlint-disable-next-line directives for every diagnostic of a rule.",
    add_completion=False,
    no_args_is_help=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"oxlint-disable {__version__}")
        raise typer.Exit(code=int(ExitCode.OK))


VERSION_OPTION = Annotated[
    bool,
    typer.Option(
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
]


def _parse_rule(raw: str | None, *, logger: CLILogger) -> RuleIdentifier:
    try:
        return RuleIdentifier.parse(raw)
    except RuleFormatError as exc:
        logger.fail(str(exc))
        for line in USAGE_LINES:
            logger.echo(line, err=True)
        raise CLIError(str(exc), exit_code=ExitCode.USAGE) from exc


def _check_worktree(options: SuppressCLIOptions, *, require_clean: bool, logger: CLILogger) -> None:
    if options.dry_run or options.allow_dirty or not require_clean:
        return
    if skip_requested():
        logger.debug("worktree_check=skipped reason=SKIP_GIT_CHECK")
        return
    try:
        status = ensure_clean_worktree(options.root)
    except DirtyWorktreeError as exc:
        logger.fail(str(exc))
        for change in exc.changes:
            logger.echo(f"  {change}", err=True)
        raise CLIError(str(exc), exit_code=ExitCode.DIRTY_WORKTREE) from exc
    except SubprocessExecutionError as exc:
        logger.fail(f"Unable to inspect the working tree: {exc}")
        raise CLIError(str(exc), exit_code=ExitCode.DIRTY_WORKTREE) from exc
    if not status.is_repository:
        logger.warn(f"{options.root} is not inside a git work tree; skipping uncommitted-changes check")


def _nothing_to_patch_reason(summary: RunSummary) -> str:
    reasons: list[str] = []
    if summary.already_suppressed:
        reasons.append(f"{summary.already_suppressed} line(s) already carry the directive")
    if summary.skipped_paths:
        reasons.append(f"{len(summary.skipped_paths)} file(s) under banned paths")
    if summary.unreadable_files:
        reasons.append(f"{len(summary.unreadable_files)} file(s) could not be read")
    if summary.skipped_diagnostics:
        reasons.append(f"{summary.skipped_diagnostics} diagnostic(s) could not be placed")
    return "; ".join(reasons) or "no directive was needed"


def report_summary(summary: RunSummary, *, logger: CLILogger) -> None:
    """Print the closing totals for ``summary``."""

    if summary.status is RunStatus.NO_DIAGNOSTICS:
        return
    if summary.status is RunStatus.NOTHING_TO_PATCH:
        logger.ok(f"Nothing to patch: {_nothing_to_patch_reason(summary)}")
    logger.echo(f"\nTotal modifications: {summary.total_modifications}")
    if summary.dry_run:
        logger.echo("(dry run - no files were modified)")


def run_suppress(options: SuppressCLIOptions) -> RunSummary:
    """Execute a suppression run described by ``options``.

    Raises:
        CLIError: On any fatal condition, carrying its distinct exit code.
    """

    logger = build_cli_logger(emoji=options.emoji, debug=options.debug, no_color=not options.color)
    rule = _parse_rule(options.rule, logger=logger)
    if not options.root.is_dir():
        logger.fail(f"Project root {options.root} is not a directory")
        raise CLIError(f"invalid root {options.root}", exit_code=ExitCode.USAGE)

    try:
        config = load_config(options.root, overrides=options.config_overrides())
    except ConfigError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc), exit_code=ExitCode.CONFIG) from exc

    _check_worktree(options, require_clean=config.require_clean_worktree, logger=logger)
    command = build_command(rule, config=config, root=options.root, extra_args=options.oxlint_args)
    logger.debug(f"root={options.root} rule_code={rule.code} command=\"{' '.join(command)}\"")

    try:
        summary = suppress_rule(
            rule,
            root=options.root,
            config=config,
            extra_args=options.oxlint_args,
            dry_run=options.dry_run,
        )
    except LintInvocationError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc), exit_code=ExitCode.LINT_FAILURE) from exc

    report_summary(summary, logger=logger)
    return summary


@app.command()
def suppress(
    rule: RULE_OPTION = None,
    dry_run: DRY_RUN_OPTION = False,
    diff: DIFF_OPTION = False,
    root: ROOT_OPTION = Path(),
    allow_dirty: ALLOW_DIRTY_OPTION = False,
    raw_output: RAW_OUTPUT_OPTION = None,
    no_emoji: NO_EMOJI_OPTION = False,
    no_color: NO_COLOR_OPTION = False,
    debug: DEBUG_OPTION = False,
    oxlint_args: OXLINT_ARGS_ARGUMENT = None,
    version: VERSION_OPTION = False,
) -> None:
    """Insert ``// oxlint-disable-next-line`` directives for every diagnostic of RULE.

    Raises:
        typer.Exit: Always raised with the run's exit status.
    """

    _ = version
    options = build_suppress_options(
        rule=rule,
        root=root,
        dry_run=dry_run,
        diff=diff,
        allow_dirty=allow_dirty,
        raw_output=raw_output,
        no_emoji=no_emoji,
        no_color=no_color,
        debug=debug,
        oxlint_args=oxlint_args,
    )
    try:
        run_suppress(options)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=int(ExitCode.OK))


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "main", "report_summary", "run_suppress"]
