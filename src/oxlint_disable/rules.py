# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rule identifier parsing and translation to oxlint rule codes."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from .constants import RULE_SEPARATOR

_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s")


class RuleFormatError(ValueError):
    """Raised when a rule identifier is not of the ``plugin/rule-name`` form."""


@dataclass(frozen=True, slots=True)
class RuleIdentifier:
    """A lint rule named as ``namespace/rule-name``.

    Attributes:
        namespace: Plugin namespace such as ``eslint`` or ``typescript``.
        name: Rule name within the namespace.
    """

    namespace: str
    name: str

    @classmethod
    def parse(cls, raw: str | None) -> RuleIdentifier:
        """Return the identifier described by ``raw``.

        Args:
            raw: User supplied identifier, for example ``eslint/no-unused-vars``.

        Returns:
            RuleIdentifier: Parsed identifier.

        Raises:
            RuleFormatError: If ``raw`` is empty or not exactly ``namespace/rule-name``.
        """

        if raw is None or not raw.strip():
            raise RuleFormatError("A rule identifier is required. Expected format: plugin/rule-name")
        candidate = raw.strip()
        if _WHITESPACE.search(candidate) or candidate.count(RULE_SEPARATOR) != 1:
            raise RuleFormatError(f'Invalid rule format: "{raw}". Expected format: plugin/rule-name')
        namespace, name = candidate.split(RULE_SEPARATOR)
        if not namespace or not name:
            raise RuleFormatError(f'Invalid rule format: "{raw}". Expected format: plugin/rule-name')
        return cls(namespace=namespace, name=name)

    @property
    def code(self) -> str:
        """Return the oxlint diagnostic code, e.g. ``eslint(no-unused-vars)``."""

        return f"{self.namespace}({self.name})"

    def __str__(self) -> str:
        return f"{self.namespace}{RULE_SEPARATOR}{self.name}"


__all__ = ["RuleFormatError", "RuleIdentifier"]
