# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models describing oxlint diagnostics and invocation outcomes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DiagnosticSpan(BaseModel):
    """Location of a labelled span; line and column are 1-based."""

    model_config = ConfigDict(frozen=True)

    offset: int = 0
    length: int = 0
    line: int
    column: int = 1


class DiagnosticLabel(BaseModel):
    """Labelled source span attached to a diagnostic."""

    model_config = ConfigDict(frozen=True)

    label: str | None = None
    span: DiagnosticSpan


class Diagnostic(BaseModel):
    """Single rule violation reported by oxlint."""

    model_config = ConfigDict(frozen=True)

    message: str = ""
    code: str
    severity: str = "warning"
    filename: str
    labels: tuple[DiagnosticLabel, ...] = Field(default_factory=tuple)
    url: str | None = None
    help: str | None = None
    causes: tuple[object, ...] = Field(default_factory=tuple)

    @field_validator("code", mode="before")
    @classmethod
    def _coerce_code(cls, value: object) -> object:
        # oxlint emits ``null`` for diagnostics that are not tied to a rule
        return "" if value is None else value

    @property
    def primary_label(self) -> DiagnosticLabel | None:
        """Return the first location label, or ``None`` when there is none."""

        return self.labels[0] if self.labels else None

    @property
    def line(self) -> int | None:
        """Return the 1-based line of the primary label."""

        label = self.primary_label
        return label.span.line if label is not None else None

    @property
    def column(self) -> int | None:
        """Return the 1-based column of the primary label."""

        label = self.primary_label
        return label.span.column if label is not None else None


class LintReport(BaseModel):
    """Decoded ``--format=json`` payload produced by oxlint."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    diagnostics: tuple[Diagnostic, ...] = Field(default_factory=tuple)


class LintOutcome(BaseModel):
    """Result of one oxlint run, whether or not findings made it exit non-zero."""

    model_config = ConfigDict(frozen=True)

    command: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""
    report: LintReport = Field(default_factory=LintReport)

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Expose the decoded diagnostics directly."""

        return self.report.diagnostics

    @property
    def has_findings(self) -> bool:
        """Return ``True`` when oxlint reported at least one diagnostic."""

        return bool(self.report.diagnostics)


__all__ = [
    "Diagnostic",
    "DiagnosticLabel",
    "DiagnosticSpan",
    "LintOutcome",
    "LintReport",
]
