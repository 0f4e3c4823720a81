# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Offset-addressed text edits and the single-pass splicer that applies them.

Every edit is expressed in the coordinate system of the original, unmodified
buffer. :func:`apply_edits` walks that buffer once in increasing offset order,
copying untouched spans verbatim, so no edit ever observes another edit's
effect and the result does not depend on the order edits were supplied in.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Final, TypeAlias

_LF: Final[str] = "\n"
_CRLF: Final[str] = "\r\n"
_BOM: Final[str] = "\ufeff"


class EditConflictError(ValueError):
    """Raised when edits overlap or fall outside the buffer they target."""


@dataclass(frozen=True, slots=True)
class InsertBefore:
    """Insert ``text`` immediately before ``offset``."""

    offset: int
    text: str

    @property
    def start(self) -> int:
        return self.offset

    @property
    def end(self) -> int:
        return self.offset


@dataclass(frozen=True, slots=True)
class ReplaceLine:
    """Overwrite the span ``[start, end)`` with ``text``."""

    start: int
    end: int
    text: str


Edit: TypeAlias = InsertBefore | ReplaceLine


@dataclass(frozen=True, slots=True)
class LineIndex:
    """Immutable table of line start offsets for one source buffer.

    Lines are split on ``\\n``. A trailing ``\\r`` belongs to the separator, not
    to the line text, so CRLF files keep their line endings when a line is
    replaced. Like ``str.split``, a buffer ending in a newline has an empty
    final line. A leading byte order mark precedes line 1 rather than belonging
    to it, so directives inserted on the first line land after it.
    """

    source: str
    starts: tuple[int, ...]
    newline: str

    @classmethod
    def build(cls, source: str) -> LineIndex:
        """Compute the start offset of every line in ``source``."""

        starts = [len(_BOM) if source.startswith(_BOM) else 0]
        total = 0
        for raw_line in source.split(_LF)[:-1]:
            total += len(raw_line) + len(_LF)
            starts.append(total)
        first_break = source.find(_LF)
        newline = _CRLF if first_break > 0 and source[first_break - 1] == "\r" else _LF
        return cls(source=source, starts=tuple(starts), newline=newline)

    def __len__(self) -> int:
        return len(self.starts)

    def contains(self, line: int) -> bool:
        """Return ``True`` when the 1-based ``line`` exists in the buffer."""

        return 1 <= line <= len(self.starts)

    def start_of(self, line: int) -> int:
        """Return the offset of the first character of the 1-based ``line``."""

        self._require(line)
        return self.starts[line - 1]

    def end_of(self, line: int) -> int:
        """Return the offset just past the text of ``line``, excluding its separator."""

        self._require(line)
        if line == len(self.starts):
            end = len(self.source)
        else:
            end = self.starts[line] - len(_LF)
        if end > self.starts[line - 1] and self.source[end - 1] == "\r":
            end -= 1
        return end

    def text_of(self, line: int) -> str:
        """Return the text of the 1-based ``line`` without its separator."""

        return self.source[self.start_of(line) : self.end_of(line)]

    def line_at(self, offset: int) -> int:
        """Return the 1-based line containing ``offset``."""

        if not 0 <= offset <= len(self.source):
            raise IndexError(f"offset {offset} outside buffer of length {len(self.source)}")
        return max(1, bisect_right(self.starts, offset))

    def _require(self, line: int) -> None:
        if not self.contains(line):
            raise IndexError(f"line {line} outside 1..{len(self.starts)}")


def _sort_key(indexed: tuple[int, Edit]) -> tuple[int, int, int]:
    position, edit = indexed
    # insertions at an offset land before a replacement that starts there
    kind = 0 if isinstance(edit, InsertBefore) else 1
    return edit.start, kind, position


def order_edits(edits: Iterable[Edit]) -> list[Edit]:
    """Return ``edits`` in application order (by start offset, stable on ties)."""

    return [edit for _, edit in sorted(enumerate(edits), key=_sort_key)]


def apply_edits(source: str, edits: Sequence[Edit] | Iterable[Edit]) -> str:
    """Splice ``edits`` into ``source`` in one composition pass.

    Args:
        source: Original buffer; every edit offset refers to this text.
        edits: Insertions and replacements in any order.

    Returns:
        str: The edited buffer. Text outside edited spans is copied unchanged.

    Raises:
        EditConflictError: If an edit lies outside ``source`` or two
            replacements overlap.
    """

    ordered = order_edits(edits)
    if not ordered:
        return source

    pieces: list[str] = []
    cursor = 0
    for edit in ordered:
        if edit.start < 0 or edit.end > len(source) or edit.start > edit.end:
            raise EditConflictError(f"edit span [{edit.start}, {edit.end}) outside buffer of length {len(source)}")
        if edit.start < cursor:
            raise EditConflictError(f"edit at offset {edit.start} overlaps a replacement ending at {cursor}")
        pieces.append(source[cursor : edit.start])
        pieces.append(edit.text)
        cursor = edit.end
    pieces.append(source[cursor:])
    return "".join(pieces)


__all__ = [
    "Edit",
    "EditConflictError",
    "InsertBefore",
    "LineIndex",
    "ReplaceLine",
    "apply_edits",
    "order_edits",
]
