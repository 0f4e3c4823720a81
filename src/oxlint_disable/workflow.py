# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Drive a full run: lint once, then plan, splice and write each file."""

from __future__ import annotations

import difflib
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .config import SuppressionConfig
from .edits import LineIndex, apply_edits
from .logging import echo_text, info, ok, section, warn
from .models import Diagnostic, LintOutcome
from .oxlint import run_oxlint
from .planner import FileEditPlan, plan_file_edits
from .rules import RuleIdentifier
from .selection import BannedPathPolicy, DiagnosticSelection, select_diagnostics


class RunStatus(str, Enum):
    """Overall result of a run; every member is a successful completion."""

    NO_DIAGNOSTICS = "no-diagnostics"
    NOTHING_TO_PATCH = "nothing-to-patch"
    PATCHED = "patched"


@dataclass(frozen=True, slots=True)
class FileResult:
    """Outcome of patching one file.

    Attributes:
        filename: Path as reported by oxlint.
        plan: Edits computed for the file.
        content: New file contents (equal to the original when the plan is empty).
        written: ``True`` when ``content`` was written back to disk.
        preview: Rendered dry-run preview, empty outside dry-run mode.
        error: Why the file could not be read or written; ``None`` on success.
    """

    filename: str
    plan: FileEditPlan
    content: str
    written: bool = False
    preview: str = ""
    error: str | None = None

    @property
    def modifications(self) -> int:
        return self.plan.modifications


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Aggregate report for one rule."""

    rule: RuleIdentifier
    status: RunStatus
    reported: int = 0
    matched: int = 0
    files: tuple[FileResult, ...] = ()
    skipped_paths: tuple[str, ...] = ()
    dry_run: bool = False

    @property
    def total_modifications(self) -> int:
        return sum(result.modifications for result in self.files)

    @property
    def already_suppressed(self) -> int:
        return sum(result.plan.already_suppressed for result in self.files)

    @property
    def skipped_diagnostics(self) -> int:
        return sum(len(result.plan.skipped) for result in self.files)

    @property
    def unreadable_files(self) -> tuple[str, ...]:
        return tuple(result.filename for result in self.files if result.error is not None)


@dataclass(slots=True)
class _Reporter:
    use_emoji: bool
    use_color: bool

    def info(self, message: str) -> None:
        info(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        ok(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        warn(message, use_emoji=self.use_emoji, use_color=self.use_color)


def read_source(path: Path) -> str:
    """Read ``path`` as UTF-8 without translating line endings."""

    with path.open(encoding="utf-8", newline="") as handle:
        return handle.read()


def write_source(path: Path, content: str) -> None:
    """Write ``content`` to ``path`` as UTF-8 without translating line endings."""

    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(content)


def render_preview(filename: str, original: str, updated: str, *, mode: str) -> str:
    """Return the dry-run preview for one file.

    ``mode`` is ``"source"`` for the full new contents or ``"diff"`` for a
    unified diff against the original.
    """

    if mode == "diff":
        return "".join(
            difflib.unified_diff(
                original.splitlines(keepends=True),
                updated.splitlines(keepends=True),
                fromfile=f"a/{filename}",
                tofile=f"b/{filename}",
            ),
        )
    return updated


def _unchanged_reason(plan: FileEditPlan) -> str:
    if plan.already_suppressed:
        return "already suppressed"
    return "no diagnostic could be placed"


def patch_file(
    path: Path,
    diagnostics: Sequence[Diagnostic],
    rule: RuleIdentifier,
    *,
    filename: str | None = None,
    dry_run: bool = False,
    preview: str = "source",
) -> FileResult:
    """Plan and apply the directives for one file.

    The file is read once and written at most once, only when at least one
    edit was planned and ``dry_run`` is false.
    """

    label = filename if filename is not None else str(path)
    original = read_source(path)
    index = LineIndex.build(original)
    plan = plan_file_edits(label, original, diagnostics, rule, index=index)
    updated = apply_edits(original, plan.edits)
    if dry_run:
        return FileResult(
            filename=label,
            plan=plan,
            content=updated,
            preview=render_preview(label, original, updated, mode=preview),
        )
    if plan.is_empty:
        return FileResult(filename=label, plan=plan, content=updated)
    write_source(path, updated)
    return FileResult(filename=label, plan=plan, content=updated, written=True)


def patch_selection(
    selection: DiagnosticSelection,
    rule: RuleIdentifier,
    *,
    root: Path,
    dry_run: bool = False,
    preview: str = "source",
) -> list[FileResult]:
    """Patch every file in ``selection``; files are processed independently.

    A file that cannot be read, decoded or written yields a result carrying
    ``error`` and no edits; the remaining files are still processed.
    """

    results: list[FileResult] = []
    for filename, diagnostics in selection.by_file.items():
        path = Path(filename)
        if not path.is_absolute():
            path = root / path
        try:
            result = patch_file(
                path,
                diagnostics,
                rule,
                filename=filename,
                dry_run=dry_run,
                preview=preview,
            )
        except (OSError, UnicodeError) as exc:
            result = FileResult(
                filename=filename,
                plan=FileEditPlan(filename=filename),
                content="",
                error=str(exc),
            )
        results.append(result)
    return results


def summarize(
    rule: RuleIdentifier,
    selection: DiagnosticSelection,
    results: Iterable[FileResult],
    *,
    dry_run: bool,
) -> RunSummary:
    """Fold per-file results into a :class:`RunSummary`."""

    files = tuple(results)
    if selection.is_empty:
        status = RunStatus.NO_DIAGNOSTICS
    elif any(result.modifications for result in files):
        status = RunStatus.PATCHED
    else:
        status = RunStatus.NOTHING_TO_PATCH
    return RunSummary(
        rule=rule,
        status=status,
        reported=selection.reported,
        matched=selection.matched,
        files=files,
        skipped_paths=selection.skipped,
        dry_run=dry_run,
    )


def suppress_rule(
    rule: RuleIdentifier,
    *,
    root: Path,
    config: SuppressionConfig,
    extra_args: Sequence[str] = (),
    dry_run: bool = False,
    outcome: LintOutcome | None = None,
) -> RunSummary:
    """Insert directives for every diagnostic of ``rule`` under ``root``.

    Args:
        rule: Rule to suppress.
        root: Project root; oxlint runs here and relative filenames resolve here.
        config: Effective configuration.
        extra_args: Additional oxlint arguments, typically paths.
        dry_run: Plan and preview without writing.
        outcome: Pre-computed oxlint outcome; oxlint is run when omitted.

    Returns:
        RunSummary: Per-file results and totals.

    Raises:
        LintInvocationError: If oxlint produced no usable report.
    """

    report = _Reporter(use_emoji=config.emoji, use_color=config.color)
    if outcome is None:
        report.info(f"Running oxlint for {rule}")
        outcome = run_oxlint(rule, config=config, root=root, extra_args=extra_args, dry_run=dry_run)
        if dry_run and config.raw_output is not None:
            report.info(f"Dry run: raw oxlint output not written to {config.raw_output}")

    selection = select_diagnostics(
        outcome.diagnostics,
        rule,
        policy=BannedPathPolicy.from_names(config.banned_paths),
    )
    if not outcome.has_findings:
        report.ok(f"No diagnostics found for rule: {rule}")
        return summarize(rule, selection, (), dry_run=dry_run)
    report.info(f"Found {selection.reported} diagnostic(s) for rule: {rule}")
    if selection.is_empty:
        report.ok(f"No diagnostics match the target rule code: {rule.code}")
        return summarize(rule, selection, (), dry_run=dry_run)

    for filename in selection.skipped:
        report.warn(f"Skipping banned path: {filename}")

    results = patch_selection(
        selection,
        rule,
        root=root,
        dry_run=dry_run,
        preview=config.preview,
    )
    for result in results:
        if result.error is not None:
            report.warn(f"Skipping unreadable file: {result.filename} ({result.error})")
            continue
        for skipped in result.plan.skipped:
            report.warn(f"Ignoring diagnostic in {result.filename}: {skipped.reason}")
        if dry_run:
            section(f"{result.filename} (dry run)", use_color=config.color)
            echo_text(result.preview)
        elif result.written:
            report.ok(f"Updated: {result.filename} ({result.modifications} directive(s))")
        else:
            report.info(f"Unchanged: {result.filename} ({_unchanged_reason(result.plan)})")
    return summarize(rule, selection, results, dry_run=dry_run)


__all__ = [
    "FileResult",
    "RunStatus",
    "RunSummary",
    "patch_file",
    "patch_selection",
    "read_source",
    "render_preview",
    "summarize",
    "suppress_rule",
    "write_source",
]
