# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and layered TOML loading for oxlint_disable."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import (
    CONFIG_FILENAME,
    DEFAULT_BANNED_PATHS,
    DEFAULT_OXLINT_BIN,
    DEFAULT_OXLINT_CONFIG,
    PYPROJECT_FILENAME,
    PYPROJECT_SECTION,
)


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class SuppressionConfig(BaseModel):
    """Settings controlling how oxlint is invoked and how files are patched."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    oxlint_bin: str = DEFAULT_OXLINT_BIN
    oxlint_config: str | None = DEFAULT_OXLINT_CONFIG
    oxlint_args: list[str] = Field(default_factory=list)
    timeout: float | None = Field(default=None, gt=0)
    banned_paths: list[str] = Field(default_factory=lambda: list(DEFAULT_BANNED_PATHS))
    require_clean_worktree: bool = True
    raw_output: Path | None = None
    preview: Literal["source", "diff"] = "source"
    emoji: bool = True
    color: bool = True


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc


def _normalise_keys(fragment: Mapping[str, Any]) -> dict[str, Any]:
    return {str(key).replace("-", "_"): value for key, value in fragment.items()}


def load_pyproject_section(path: Path) -> dict[str, Any]:
    """Return ``[tool.oxlint-disable]`` from ``path`` or an empty mapping."""

    if not path.is_file():
        return {}
    tool_section = _read_toml(path).get("tool")
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.{PYPROJECT_SECTION}] in {path} must be a table")
    return _normalise_keys(section)


def load_toml_file(path: Path) -> dict[str, Any]:
    """Return the top-level table of a dedicated configuration file."""

    if not path.is_file():
        return {}
    return _normalise_keys(_read_toml(path))


def _apply_fragment(config: SuppressionConfig, fragment: Mapping[str, Any], *, source: str) -> SuppressionConfig:
    if not fragment:
        return config
    payload = config.model_dump()
    payload.update(fragment)
    try:
        return SuppressionConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {source}: {exc}") from exc


def load_config(
    root: Path,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> SuppressionConfig:
    """Return configuration for ``root`` with layered precedence.

    Sources, lowest precedence first: built-in defaults,
    ``[tool.oxlint-disable]`` in ``pyproject.toml``, ``.oxlint-disable.toml``,
    then ``overrides`` (typically CLI flags; ``None`` values are ignored).

    Raises:
        ConfigError: If a source cannot be parsed or holds invalid values.
    """

    config = SuppressionConfig()
    pyproject = root / PYPROJECT_FILENAME
    config = _apply_fragment(config, load_pyproject_section(pyproject), source=str(pyproject))
    dedicated = root / CONFIG_FILENAME
    config = _apply_fragment(config, load_toml_file(dedicated), source=str(dedicated))
    if overrides:
        explicit = {key: value for key, value in overrides.items() if value is not None}
        config = _apply_fragment(config, explicit, source="command line")
    return config


__all__ = [
    "ConfigError",
    "SuppressionConfig",
    "load_config",
    "load_pyproject_section",
    "load_toml_file",
]
