# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filter a diagnostic batch down to one rule and group it by file."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import PurePosixPath

from .constants import DEFAULT_BANNED_PATHS
from .models import Diagnostic
from .rules import RuleIdentifier


@dataclass(frozen=True, slots=True)
class BannedPathPolicy:
    """Directories whose files are never patched (dependencies, VCS metadata)."""

    directories: frozenset[str] = field(default_factory=lambda: frozenset(DEFAULT_BANNED_PATHS))

    @classmethod
    def from_names(cls, names: Iterable[str]) -> BannedPathPolicy:
        return cls(directories=frozenset(name.strip("/\\") for name in names if name.strip("/\\")))

    def is_banned(self, filename: str) -> bool:
        """Return ``True`` when a directory component of ``filename`` is banned.

        Only directory components are compared; a file that happens to be
        named like a banned directory is still eligible.
        """

        parents = PurePosixPath(filename.replace("\\", "/")).parts[:-1]
        return any(part in self.directories for part in parents)


@dataclass(frozen=True, slots=True)
class DiagnosticSelection:
    """Diagnostics for one rule grouped by file.

    Attributes:
        by_file: Matching diagnostics keyed by filename, in first-seen order.
        skipped: Filenames dropped by the banned-path policy.
        reported: Size of the batch before filtering.
        matched: Diagnostics whose code matched the rule, banned paths included.
    """

    by_file: Mapping[str, tuple[Diagnostic, ...]]
    skipped: tuple[str, ...] = ()
    reported: int = 0
    matched: int = 0

    @property
    def is_empty(self) -> bool:
        return self.matched == 0


def group_by_filename(diagnostics: Iterable[Diagnostic]) -> dict[str, list[Diagnostic]]:
    """Group ``diagnostics`` by filename, preserving their relative order."""

    grouped: dict[str, list[Diagnostic]] = {}
    for diagnostic in diagnostics:
        grouped.setdefault(diagnostic.filename, []).append(diagnostic)
    return grouped


def select_diagnostics(
    diagnostics: Iterable[Diagnostic],
    rule: RuleIdentifier,
    *,
    policy: BannedPathPolicy,
) -> DiagnosticSelection:
    """Return the diagnostics reported for ``rule``, grouped by file.

    Args:
        diagnostics: Full batch produced by oxlint.
        rule: Rule whose code (``namespace(rule-name)``) must match exactly.
        policy: Banned-path predicate; matching files are reported as skipped.

    Returns:
        DiagnosticSelection: Possibly empty selection; an empty result is a
        normal outcome, not an error.
    """

    batch = list(diagnostics)
    code = rule.code
    matching = [diagnostic for diagnostic in batch if diagnostic.code == code]
    by_file: dict[str, tuple[Diagnostic, ...]] = {}
    skipped: list[str] = []
    for filename, items in group_by_filename(matching).items():
        if policy.is_banned(filename):
            skipped.append(filename)
            continue
        by_file[filename] = tuple(items)
    return DiagnosticSelection(
        by_file=by_file,
        skipped=tuple(skipped),
        reported=len(batch),
        matched=len(matching),
    )


__all__ = [
    "BannedPathPolicy",
    "DiagnosticSelection",
    "group_by_filename",
    "select_diagnostics",
]
