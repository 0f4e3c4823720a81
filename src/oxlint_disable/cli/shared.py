# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for the CLI (logging, errors, exit codes)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

import typer
from rich.console import Console
from rich.text import Text

from ..logging import fail as core_fail
from ..logging import info as core_info
from ..logging import ok as core_ok
from ..logging import warn as core_warn


class ExitCode(IntEnum):
    """Process exit statuses; every fatal condition has its own code."""

    OK = 0
    USAGE = 2
    CONFIG = 3
    DIRTY_WORKTREE = 4
    LINT_FAILURE = 5


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = ExitCode.USAGE) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = int(exit_code)


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji and colour settings."""

    console: Console
    use_emoji: bool
    use_color: bool = True
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = re.compile(r"([\w-]+)=(\".*?\"|\S+)")

    def fail(self, message: str) -> None:
        """Log a failure message to standard error."""

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        """Log a warning message."""

        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        """Log a success message."""

        core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def info(self, message: str) -> None:
        """Log an informational message."""

        core_info(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def echo(self, message: str, *, err: bool = False) -> None:
        """Write ``message`` using Typer's echo helper."""

        typer.echo(message, err=err)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        ``key=value`` pairs are highlighted; ``command``/``cmd`` values stand out.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            key, raw_value = match.group(1), match.group(2)
            text.append(key, style="bold magenta")
            text.append("=", style="dim")
            value_style = "bold blue" if key in {"command", "cmd"} else "bold green"
            text.append(raw_value, style=value_style)
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text)


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided preferences.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger instance bound to a dedicated Rich console.
    """

    console = Console(no_color=no_color, highlight=False, soft_wrap=True, stderr=True)
    return CLILogger(console=console, use_emoji=emoji, use_color=not no_color, debug_enabled=debug)


__all__ = ["CLIError", "CLILogger", "ExitCode", "build_cli_logger"]
