# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import shutil

# Bandit: commands are built from argument lists and never run through a shell.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Final

TIMEOUT_RETURNCODE: Final[int] = 124


class SubprocessExecutionError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        super().__init__(
            f"Command '{command[0]}' exited with status {returncode}. stderr: {stderr or '<none>'}",
        )
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def resolve_executable(head: str, *, cwd: Path | None = None) -> str:
    """Return an absolute path for the executable ``head``.

    Relative paths that contain a directory separator are resolved against
    ``cwd``; bare names are looked up on ``PATH``.

    Raises:
        FileNotFoundError: If the executable cannot be located.
    """

    head_path = Path(head)
    if head_path.is_absolute():
        return str(head_path)
    if len(head_path.parts) > 1:
        candidate = (cwd or Path.cwd()) / head_path
        if not candidate.exists():
            raise FileNotFoundError(f"Executable '{head}' was not found at {candidate}")
        return str(candidate)
    resolved = shutil.which(head)
    if resolved is None:
        raise FileNotFoundError(f"Executable '{head}' was not found on PATH")
    return resolved


def _normalize_args(args: Sequence[str], *, cwd: Path | None) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)
    head, *rest = args
    return [resolve_executable(head, cwd=cwd), *rest]


def _ensure_text(value: str | bytes | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return value.decode(errors="ignore")


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    check: bool = True,
    capture_output: bool = False,
    timeout: float | None = None,
) -> subprocess.CompletedProcess[str]:
    """Execute *args* after normalising the executable path.

    A timeout is reported as a completed process with return code 124 and a
    note appended to stderr instead of an exception.
    """

    normalized = _normalize_args(args, cwd=cwd)
    try:
        completed: subprocess.CompletedProcess[str] = subprocess.run(  # nosec B603
            normalized,
            cwd=str(cwd) if cwd is not None else None,
            env=dict(env) if env is not None else None,
            check=False,
            capture_output=capture_output,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as exc:
        stderr = _ensure_text(exc.stderr)
        timeout_msg = f"Command timed out after {timeout:.1f}s" if timeout is not None else "Command timed out"
        completed = subprocess.CompletedProcess(
            args=list(normalized),
            returncode=TIMEOUT_RETURNCODE,
            stdout=_ensure_text(exc.stdout) or "",
            stderr=f"{stderr}\n{timeout_msg}" if stderr else timeout_msg,
        )

    if check and completed.returncode != 0:
        raise SubprocessExecutionError(
            normalized,
            completed.returncode,
            completed.stdout if isinstance(completed.stdout, str) else None,
            completed.stderr if isinstance(completed.stderr, str) else None,
        )
    return completed


__all__ = ["SubprocessExecutionError", "TIMEOUT_RETURNCODE", "resolve_executable", "run_command"]
