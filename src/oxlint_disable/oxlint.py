# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run oxlint for a single rule and decode its JSON report."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from .config import SuppressionConfig
from .models import LintOutcome, LintReport
from .process_utils import TIMEOUT_RETURNCODE, run_command
from .rules import RuleIdentifier


class LintInvocationError(RuntimeError):
    """Raised when oxlint could not produce a usable diagnostic payload."""

    def __init__(self, message: str, *, stderr: str = "", returncode: int | None = None) -> None:
        super().__init__(message)
        self.stderr = stderr
        self.returncode = returncode


def build_command(
    rule: RuleIdentifier,
    *,
    config: SuppressionConfig,
    root: Path,
    extra_args: Sequence[str] = (),
) -> list[str]:
    """Return the oxlint command that reports only ``rule``.

    Every other rule is switched off with ``-A all`` so the payload stays
    small; the configuration file is passed only when it exists under ``root``.
    """

    command = [config.oxlint_bin, "--format=json"]
    if config.oxlint_config:
        config_path = Path(config.oxlint_config)
        if (config_path if config_path.is_absolute() else root / config_path).exists():
            command.extend(["-c", str(config_path)])
    command.extend(["-A", "all", "-D", str(rule)])
    command.extend(config.oxlint_args)
    command.extend(extra_args)
    return command


def decode_report(stdout: str) -> LintReport:
    """Decode oxlint's ``--format=json`` output.

    Raises:
        LintInvocationError: If ``stdout`` is empty or not a valid report.
    """

    if not stdout.strip():
        raise LintInvocationError("oxlint produced no output")
    try:
        payload = json.loads(stdout)
    except json.JSONDecodeError as exc:
        raise LintInvocationError(f"Failed to parse oxlint JSON output: {exc}") from exc
    try:
        return LintReport.model_validate(payload)
    except ValidationError as exc:
        raise LintInvocationError(f"Unexpected oxlint report structure: {exc}") from exc


def run_oxlint(
    rule: RuleIdentifier,
    *,
    config: SuppressionConfig,
    root: Path,
    extra_args: Sequence[str] = (),
    dry_run: bool = False,
) -> LintOutcome:
    """Run oxlint and return its outcome regardless of exit status.

    oxlint exits non-zero when it finds violations; that is still a successful
    run as long as stdout carries a JSON report. The raw report is saved to
    ``config.raw_output`` only outside ``dry_run``.

    Raises:
        LintInvocationError: If oxlint cannot be executed, times out, or its
            output cannot be decoded.
    """

    command = build_command(rule, config=config, root=root, extra_args=extra_args)
    try:
        completed = run_command(
            command,
            cwd=root,
            check=False,
            capture_output=True,
            timeout=config.timeout,
        )
    except OSError as exc:
        raise LintInvocationError(f"Failed to run oxlint: {exc}") from exc

    stdout = completed.stdout or ""
    stderr = completed.stderr or ""
    if completed.returncode == TIMEOUT_RETURNCODE and config.timeout is not None:
        raise LintInvocationError(stderr.strip() or "oxlint timed out", stderr=stderr, returncode=completed.returncode)
    try:
        report = decode_report(stdout)
    except LintInvocationError as exc:
        detail = stderr.strip()
        message = f"{exc} (exit status {completed.returncode})"
        if detail:
            message = f"{message}: {detail}"
        raise LintInvocationError(message, stderr=stderr, returncode=completed.returncode) from exc

    if config.raw_output is not None and not dry_run:
        raw_path = config.raw_output if config.raw_output.is_absolute() else root / config.raw_output
        raw_path.write_text(stdout, encoding="utf-8")

    return LintOutcome(
        command=tuple(command),
        returncode=completed.returncode,
        stdout=stdout,
        stderr=stderr,
        report=report,
    )


__all__ = ["LintInvocationError", "build_command", "decode_report", "run_oxlint"]
