# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Plan directive insertions and extensions for one source file."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .directives import leading_whitespace, render_directive, split_directive
from .edits import Edit, InsertBefore, LineIndex, ReplaceLine
from .models import Diagnostic
from .rules import RuleIdentifier


@dataclass(frozen=True, slots=True)
class SkippedDiagnostic:
    """A diagnostic that could not be mapped onto the file's lines."""

    diagnostic: Diagnostic
    reason: str


@dataclass(frozen=True, slots=True)
class FileEditPlan:
    """Edits planned against the original text of ``filename``.

    Attributes:
        filename: Path as reported by oxlint.
        edits: One edit per annotated line, in planning (line-descending) order.
        skipped: Diagnostics dropped because they carried no usable location.
        already_suppressed: Diagnosed lines whose directive already lists the rule.
    """

    filename: str
    edits: tuple[Edit, ...] = ()
    skipped: tuple[SkippedDiagnostic, ...] = field(default_factory=tuple)
    already_suppressed: int = 0

    @property
    def modifications(self) -> int:
        """Return the number of directives inserted or extended."""

        return len(self.edits)

    @property
    def is_empty(self) -> bool:
        return not self.edits


def _line_sort_key(diagnostic: Diagnostic) -> int:
    line = diagnostic.line
    return line if line is not None else 0


def plan_file_edits(
    filename: str,
    source: str,
    diagnostics: Iterable[Diagnostic],
    rule: RuleIdentifier,
    *,
    index: LineIndex | None = None,
) -> FileEditPlan:
    """Return the edits that suppress ``rule`` on every diagnosed line of ``source``.

    Offsets come from a line index computed once from the untouched
    ``source``; nothing is recomputed after an edit is planned. Diagnostics are
    visited from the bottom of the file upwards and each physical line yields
    at most one edit:

    * when the preceding line is a directive that lacks ``rule``, that line is
      rewritten with ``rule`` appended and any ``-- description`` kept;
    * when the preceding line is a directive that already lists ``rule``,
      nothing is planned;
    * otherwise a new directive is inserted before the diagnosed line.

    New and rewritten directives take the indentation of the diagnosed line.

    Args:
        filename: Name used to label the plan.
        source: Original file contents.
        diagnostics: Diagnostics for ``rule`` in this file, in any order.
        rule: Rule to suppress.
        index: Precomputed line index for ``source``; built when omitted.

    Returns:
        FileEditPlan: Planned edits plus the diagnostics that were skipped.
    """

    line_index = index if index is not None else LineIndex.build(source)
    target = str(rule)
    edits: list[Edit] = []
    skipped: list[SkippedDiagnostic] = []
    processed: set[int] = set()
    already_suppressed = 0

    for diagnostic in sorted(diagnostics, key=_line_sort_key, reverse=True):
        line = diagnostic.line
        if line is None:
            skipped.append(SkippedDiagnostic(diagnostic, "no location label"))
            continue
        if not line_index.contains(line):
            skipped.append(SkippedDiagnostic(diagnostic, f"line {line} outside 1..{len(line_index)}"))
            continue
        if line in processed:
            continue
        processed.add(line)

        indent = leading_whitespace(line_index.text_of(line))
        existing, description = split_directive(line_index.text_of(line - 1)) if line > 1 else ((), "")
        if existing:
            if target in existing:
                already_suppressed += 1
                continue
            edits.append(
                ReplaceLine(
                    start=line_index.start_of(line - 1),
                    end=line_index.end_of(line - 1),
                    text=render_directive(indent, (*existing, target), description),
                ),
            )
            continue
        edits.append(
            InsertBefore(
                offset=line_index.start_of(line),
                text=render_directive(indent, (target,)) + line_index.newline,
            ),
        )

    return FileEditPlan(
        filename=filename,
        edits=tuple(edits),
        skipped=tuple(skipped),
        already_suppressed=already_suppressed,
    )


__all__ = ["FileEditPlan", "SkippedDiagnostic", "plan_file_edits"]
