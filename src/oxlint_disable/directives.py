# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Recognise and render ``oxlint-disable-next-line`` suppression directives."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Final

from .constants import DIRECTIVE_KEYWORD, DIRECTIVE_RULE_JOINER, LINE_COMMENT_MARKER

_DIRECTIVE_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"^[ \t]*{re.escape(LINE_COMMENT_MARKER)}[ \t]*{re.escape(DIRECTIVE_KEYWORD)}[ \t]+(?P<rules>\S.*?)[ \t\r]*$",
)
_DESCRIPTION_SPLIT: Final[re.Pattern[str]] = re.compile(r"(?:^|[ \t]+)--(?:[ \t]|$)")
_RULE_SPLIT: Final[re.Pattern[str]] = re.compile(r"[,\s]+")
_INDENT_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[ \t]*")

DirectiveSet = tuple[str, ...]


def split_directive(line: str) -> tuple[DirectiveSet, str]:
    """Return the rules listed by the directive on ``line`` and its description.

    Only a dedicated ``//`` comment line whose keyword is exactly
    ``oxlint-disable-next-line`` is recognised. The rule list may be separated
    by commas, whitespace or both; duplicates keep their first position. Text
    after a `` -- `` separator is a free-form description, returned verbatim
    with its separator so it can be written back unchanged.

    Args:
        line: A single line of source text without its newline.

    Returns:
        tuple[DirectiveSet, str]: Rules in the order written and the
        description suffix; ``((), "")`` when ``line`` is not a directive.
    """

    match = _DIRECTIVE_PATTERN.match(line)
    if match is None:
        return (), ""
    body = match.group("rules")
    description = ""
    separator = _DESCRIPTION_SPLIT.search(body)
    if separator is not None:
        body, description = body[: separator.start()], body[separator.start() :]
    rules = tuple(dict.fromkeys(item for item in _RULE_SPLIT.split(body) if item))
    if not rules:
        return (), ""
    return rules, description


def parse_directive(line: str) -> DirectiveSet:
    """Return the rules listed by the directive on ``line``, or an empty tuple."""

    return split_directive(line)[0]


def is_directive(line: str) -> bool:
    """Return ``True`` when ``line`` is a recognised suppression directive."""

    return bool(parse_directive(line))


def leading_whitespace(line: str) -> str:
    """Return the spaces and tabs that indent ``line``."""

    match = _INDENT_PATTERN.match(line)
    return match.group(0) if match else ""


def render_directive(indent: str, rules: Iterable[str], description: str = "") -> str:
    """Return a directive line (without newline) suppressing ``rules``.

    ``description`` is appended as-is and must carry its own `` -- `` separator.

    Raises:
        ValueError: If ``rules`` is empty.
    """

    ordered = tuple(dict.fromkeys(rules))
    if not ordered:
        raise ValueError("a directive requires at least one rule")
    return f"{indent}{LINE_COMMENT_MARKER} {DIRECTIVE_KEYWORD} {DIRECTIVE_RULE_JOINER.join(ordered)}{description}"


__all__ = [
    "DirectiveSet",
    "is_directive",
    "leading_whitespace",
    "parse_directive",
    "render_directive",
    "split_directive",
]
