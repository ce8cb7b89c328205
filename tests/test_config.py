# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for configuration models and loaders."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from codemark.config import CodemarkConfig, HighlightConfig, ThemeConfig, load_config, load_config_file
from codemark.errors import ConfigError
from codemark.highlight import DEFAULT_KEYWORDS, TokenKind


def test_defaults_use_builtin_keywords() -> None:
    cfg = CodemarkConfig()
    assert cfg.highlight.effective_keywords() == DEFAULT_KEYWORDS
    assert cfg.default_format == "text"


def test_extra_keywords_extend_base_set() -> None:
    cfg = HighlightConfig(keywords=["fn"], extra_keywords=["match"])
    assert cfg.effective_keywords() == frozenset({"fn", "match"})


def test_theme_style_lookup_and_validation() -> None:
    theme = ThemeConfig(comment="italic green")
    assert theme.style_for(TokenKind.COMMENT) == "italic green"
    with pytest.raises(ValidationError):
        ThemeConfig(rtf_string=(0, 0, 300))
    cfg = CodemarkConfig()
    with pytest.raises(ValidationError):
        cfg.default_format = "pdf"  # type: ignore[assignment]


def test_load_config_without_pyproject_returns_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path) == CodemarkConfig()


def test_load_config_reads_tool_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.codemark]\ndefault_format = "rtf"\n\n[tool.codemark.highlight]\nextra_keywords = ["match"]\n',
        encoding="utf-8",
    )
    cfg = load_config(tmp_path)
    assert cfg.default_format == "rtf"
    assert "match" in cfg.highlight.effective_keywords()
    assert "let" in cfg.highlight.effective_keywords()


def test_load_config_ignores_pyproject_without_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n', encoding="utf-8")
    assert load_config(tmp_path) == CodemarkConfig()


def test_load_config_rejects_invalid_values(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.codemark]\ndefault_format = "pdf"\n', encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid codemark configuration"):
        load_config(tmp_path)


def test_load_config_rejects_malformed_toml(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.codemark\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path)


def test_load_config_file(tmp_path: Path) -> None:
    path = tmp_path / "codemark.toml"
    path.write_text('[theme]\nkeyword = "magenta"\n', encoding="utf-8")
    assert load_config_file(path).theme.keyword == "magenta"
    with pytest.raises(ConfigError):
        load_config_file(tmp_path / "missing.toml")
