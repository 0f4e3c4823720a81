# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for layered configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from oxlint_disable.config import ConfigError, SuppressionConfig, load_config


def test_defaults_without_files(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == SuppressionConfig()
    assert config.oxlint_bin == "./node_modules/.bin/oxlint"
    assert config.banned_paths == ["node_modules", ".git"]
    assert config.require_clean_worktree is True


def test_pyproject_section_is_read(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.oxlint-disable]\noxlint-bin = "oxlint"\nbanned-paths = ["node_modules", ".git", "dist"]\n',
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.oxlint_bin == "oxlint"
    assert config.banned_paths == ["node_modules", ".git", "dist"]


def test_dedicated_file_overrides_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.oxlint-disable]\noxlint-bin = "a"\ntimeout = 5\n', encoding="utf-8")
    (tmp_path / ".oxlint-disable.toml").write_text('oxlint-bin = "b"\n', encoding="utf-8")

    config = load_config(tmp_path)

    assert config.oxlint_bin == "b"
    assert config.timeout == 5


def test_overrides_win_and_none_is_ignored(tmp_path: Path) -> None:
    (tmp_path / ".oxlint-disable.toml").write_text('preview = "diff"\nemoji = false\n', encoding="utf-8")

    config = load_config(tmp_path, overrides={"preview": None, "emoji": None, "color": False})

    assert config.preview == "diff"
    assert config.emoji is False
    assert config.color is False


def test_invalid_toml_raises(tmp_path: Path) -> None:
    (tmp_path / ".oxlint-disable.toml").write_text("oxlint-bin = \n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path)


def test_unknown_key_raises(tmp_path: Path) -> None:
    (tmp_path / ".oxlint-disable.toml").write_text("colour = true\n", encoding="utf-8")

    with pytest.raises(ConfigError, match=".oxlint-disable.toml"):
        load_config(tmp_path)


def test_invalid_value_raises(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.oxlint-disable]\ntimeout = -1\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_non_table_section_raises(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool]\noxlint-disable = "yes"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="must be a table"):
        load_config(tmp_path)
