# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for suppression directive parsing and rendering."""

from __future__ import annotations

import pytest

from oxlint_disable.directives import (
    is_directive,
    leading_whitespace,
    parse_directive,
    render_directive,
    split_directive,
)


def test_parse_comma_separated_rules() -> None:
    line = "// oxlint-disable-next-line eslint/no-unused-vars, eslint/no-console"
    assert parse_directive(line) == ("eslint/no-unused-vars", "eslint/no-console")


def test_parse_whitespace_separated_and_indented() -> None:
    line = "\t    //oxlint-disable-next-line eslint/a   eslint/b,eslint/c"
    assert parse_directive(line) == ("eslint/a", "eslint/b", "eslint/c")


def test_parse_collapses_duplicates_keeping_first_position() -> None:
    line = "// oxlint-disable-next-line eslint/b, eslint/a, eslint/b"
    assert parse_directive(line) == ("eslint/b", "eslint/a")


def test_parse_ignores_trailing_whitespace_and_carriage_return() -> None:
    assert parse_directive("// oxlint-disable-next-line eslint/a  \r") == ("eslint/a",)


@pytest.mark.parametrize(
    "line",
    [
        "",
        "const x = 1;",
        "// oxlint-disable-next-line",
        "// oxlint-disable-next-line   ",
        "// eslint-disable-next-line eslint/no-unused-vars",
        "// oxlint-disable eslint/no-unused-vars",
        "// oxlint-disable-next-line-extra eslint/no-unused-vars",
        "/* oxlint-disable-next-line eslint/no-unused-vars */",
        "const s = '// oxlint-disable-next-line eslint/no-unused-vars';",
        "// note: oxlint-disable-next-line eslint/no-unused-vars",
    ],
)
def test_non_directive_lines_parse_empty(line: str) -> None:
    assert parse_directive(line) == ()
    assert not is_directive(line)


def test_render_directive_joins_with_comma_and_space() -> None:
    rendered = render_directive("    ", ["eslint/a", "eslint/b"])
    assert rendered == "    // oxlint-disable-next-line eslint/a, eslint/b"
    assert parse_directive(rendered) == ("eslint/a", "eslint/b")


def test_render_directive_requires_rules() -> None:
    with pytest.raises(ValueError):
        render_directive("", [])


@pytest.mark.parametrize(
    ("line", "expected"),
    [("const a = 1;", ""), ("    return;", "    "), ("\t\t  x", "\t\t  "), ("   ", "   ")],
)
def test_leading_whitespace(line: str, expected: str) -> None:
    assert leading_whitespace(line) == expected


def test_description_is_split_from_rules() -> None:
    rules, description = split_directive("// oxlint-disable-next-line eslint/a, eslint/b -- legacy API")

    assert rules == ("eslint/a", "eslint/b")
    assert description == " -- legacy API"


def test_description_only_is_not_a_directive() -> None:
    assert split_directive("// oxlint-disable-next-line -- no rules here") == ((), "")


def test_render_appends_description() -> None:
    assert render_directive("", ("eslint/a",), " -- why") == "// oxlint-disable-next-line eslint/a -- why"
