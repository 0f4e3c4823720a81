# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from oxlint_disable.models import Diagnostic, DiagnosticLabel, DiagnosticSpan, LintOutcome, LintReport
from oxlint_disable.rules import RuleIdentifier

DiagnosticFactory = Callable[..., Diagnostic]


def build_diagnostic(
    line: int | None,
    *,
    filename: str = "test.js",
    code: str = "eslint(no-unused-vars)",
    column: int = 7,
) -> Diagnostic:
    """Return a diagnostic shaped like oxlint's JSON output."""

    labels: tuple[DiagnosticLabel, ...] = ()
    if line is not None:
        labels = (
            DiagnosticLabel(
                label="is declared here",
                span=DiagnosticSpan(offset=0, length=1, line=line, column=column),
            ),
        )
    return Diagnostic(
        message="Variable is declared but never used.",
        code=code,
        severity="warning",
        filename=filename,
        labels=labels,
    )


def build_outcome(*diagnostics: Diagnostic, returncode: int = 1) -> LintOutcome:
    """Return an oxlint outcome carrying ``diagnostics``."""

    return LintOutcome(
        command=("oxlint", "--format=json"),
        returncode=returncode if diagnostics else 0,
        stdout="{}",
        report=LintReport(diagnostics=diagnostics),
    )


@pytest.fixture
def rule() -> RuleIdentifier:
    return RuleIdentifier.parse("eslint/no-unused-vars")


@pytest.fixture
def make_diagnostic() -> DiagnosticFactory:
    return build_diagnostic


@pytest.fixture
def make_outcome() -> Callable[..., LintOutcome]:
    return build_outcome
