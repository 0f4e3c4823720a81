# SPDX-License-Identifier: MIT
"""Data structures for the oxlint-disable CLI command."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated, Any

import typer

RULE_OPTION = Annotated[
    str | None,
    typer.Option("--rule", "-r", help="Rule to suppress, as plugin/rule-name (e.g. eslint/no-unused-vars)."),
]
DRY_RUN_OPTION = Annotated[
    bool,
    typer.Option("--dry-run", "-d", help="Preview the patched files without writing them."),
]
DIFF_OPTION = Annotated[
    bool,
    typer.Option("--diff", help="Render dry-run previews as unified diffs."),
]
ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", help="Project root where oxlint runs and configuration is read."),
]
ALLOW_DIRTY_OPTION = Annotated[
    bool,
    typer.Option("--allow-dirty", help="Skip the uncommitted-changes check."),
]
RAW_OUTPUT_OPTION = Annotated[
    Path | None,
    typer.Option("--raw-output", help="Write oxlint's raw JSON report to this path."),
]
NO_EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--no-emoji", help="Disable emoji prefixes in output."),
]
NO_COLOR_OPTION = Annotated[
    bool,
    typer.Option("--no-color", help="Disable coloured output."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Print debug information such as the oxlint command."),
]
OXLINT_ARGS_ARGUMENT = Annotated[
    list[str] | None,
    typer.Argument(metavar="[-- OXLINT_ARGS...]", help="Extra arguments passed to oxlint, usually paths."),
]


@dataclass(slots=True)
class SuppressCLIOptions:
    """Normalised CLI inputs for the suppression command."""

    rule: str | None
    root: Path
    dry_run: bool = False
    diff: bool = False
    allow_dirty: bool = False
    raw_output: Path | None = None
    emoji: bool = True
    color: bool = True
    debug: bool = False
    oxlint_args: list[str] = field(default_factory=list)

    def config_overrides(self) -> dict[str, Any]:
        """Return the configuration values pinned by command-line flags.

        Flags left at their defaults yield ``None`` so file configuration wins.
        """

        return {
            "raw_output": self.raw_output,
            "preview": "diff" if self.diff else None,
            "emoji": False if not self.emoji else None,
            "color": False if not self.color else None,
        }


def build_suppress_options(
    *,
    rule: str | None,
    root: Path,
    dry_run: bool,
    diff: bool,
    allow_dirty: bool,
    raw_output: Path | None,
    no_emoji: bool,
    no_color: bool,
    debug: bool,
    oxlint_args: list[str] | None,
) -> SuppressCLIOptions:
    """Construct ``SuppressCLIOptions`` from Typer parameters."""

    return SuppressCLIOptions(
        rule=rule,
        root=root.expanduser().resolve(),
        dry_run=dry_run,
        diff=diff,
        allow_dirty=allow_dirty,
        raw_output=raw_output,
        emoji=not no_emoji,
        color=not no_color,
        debug=debug,
        oxlint_args=list(oxlint_args or ()),
    )


__all__ = [
    "ALLOW_DIRTY_OPTION",
    "DEBUG_OPTION",
    "DIFF_OPTION",
    "DRY_RUN_OPTION",
    "NO_COLOR_OPTION",
    "NO_EMOJI_OPTION",
    "OXLINT_ARGS_ARGUMENT",
    "RAW_OUTPUT_OPTION",
    "ROOT_OPTION",
    "RULE_OPTION",
    "SuppressCLIOptions",
    "build_suppress_options",
]
