# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Working-tree guard run before any file is rewritten."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .constants import SKIP_GIT_CHECK_ENV
from .process_utils import run_command

GIT_EXECUTABLE: Final[str] = "git"


class DirtyWorktreeError(RuntimeError):
    """Raised when the working tree has uncommitted changes."""

    def __init__(self, changes: tuple[str, ...]) -> None:
        super().__init__("Working tree has uncommitted changes. Commit or stash them before running.")
        self.changes = changes


@dataclass(frozen=True, slots=True)
class WorktreeStatus:
    """Porcelain status of the repository containing ``root``.

    Attributes:
        is_repository: ``False`` when ``root`` is not inside a git work tree
            or git is unavailable.
        changes: ``git status --porcelain`` entries, one per changed path.
    """

    is_repository: bool
    changes: tuple[str, ...] = ()

    @property
    def is_clean(self) -> bool:
        return not self.changes


def read_worktree_status(root: Path) -> WorktreeStatus:
    """Return the porcelain status of the repository at ``root``."""

    try:
        probe = run_command(
            [GIT_EXECUTABLE, "rev-parse", "--is-inside-work-tree"],
            cwd=root,
            check=False,
            capture_output=True,
        )
    except OSError:
        return WorktreeStatus(is_repository=False)
    if probe.returncode != 0 or probe.stdout.strip() != "true":
        return WorktreeStatus(is_repository=False)

    status = run_command(
        [GIT_EXECUTABLE, "status", "--porcelain"],
        cwd=root,
        check=True,
        capture_output=True,
    )
    changes = tuple(line for line in status.stdout.splitlines() if line.strip())
    return WorktreeStatus(is_repository=True, changes=changes)


def skip_requested(env: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when ``SKIP_GIT_CHECK`` is set to a non-empty value."""

    source = os.environ if env is None else env
    return bool(source.get(SKIP_GIT_CHECK_ENV, "").strip())


def ensure_clean_worktree(root: Path) -> WorktreeStatus:
    """Raise when ``root`` belongs to a git work tree with uncommitted changes.

    Returns:
        WorktreeStatus: Status observed; ``is_repository`` is ``False`` when
        there was nothing to check.

    Raises:
        DirtyWorktreeError: If uncommitted or untracked changes exist.
    """

    status = read_worktree_status(root)
    if status.is_repository and not status.is_clean:
        raise DirtyWorktreeError(status.changes)
    return status


__all__ = [
    "DirtyWorktreeError",
    "WorktreeStatus",
    "ensure_clean_worktree",
    "read_worktree_status",
    "skip_requested",
]
