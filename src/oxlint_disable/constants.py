# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across oxlint_disable modules."""

from __future__ import annotations

from typing import Final

DIRECTIVE_KEYWORD: Final[str] = "oxlint-disable-next-line"
LINE_COMMENT_MARKER: Final[str] = "//"
RULE_SEPARATOR: Final[str] = "/"
DIRECTIVE_RULE_JOINER: Final[str] = ", "

DEFAULT_BANNED_PATHS: Final[tuple[str, ...]] = ("node_modules", ".git")

DEFAULT_OXLINT_BIN: Final[str] = "./node_modules/.bin/oxlint"
DEFAULT_OXLINT_CONFIG: Final[str] = "oxlintrc.json"

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION: Final[str] = "oxlint-disable"
CONFIG_FILENAME: Final[str] = ".oxlint-disable.toml"

SKIP_GIT_CHECK_ENV: Final[str] = "SKIP_GIT_CHECK"
