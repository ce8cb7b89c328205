# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders for codemark."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .highlight.keywords import DEFAULT_KEYWORDS
from .highlight.tokens import TokenKind

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "codemark"

RgbTriple = tuple[int, int, int]
ExportFormatName = Literal["text", "rtf", "html", "ansi"]


class ThemeConfig(BaseModel):
    """Colours used by the ANSI and RTF renderers."""

    model_config = ConfigDict(validate_assignment=True)

    plain: str = "default"
    keyword: str = "bold rgb(63,72,204)"
    comment: str = "rgb(34,177,76)"
    string: str = "rgb(163,21,21)"
    line_number: str = "dim"
    rtf_string: RgbTriple = (163, 21, 21)
    rtf_comment: RgbTriple = (34, 177, 76)
    rtf_keyword: RgbTriple = (63, 72, 204)

    @field_validator("rtf_string", "rtf_comment", "rtf_keyword")
    @classmethod
    def _check_channels(cls, value: RgbTriple) -> RgbTriple:
        if any(not 0 <= channel <= 255 for channel in value):
            raise ValueError(f"colour channels must lie within 0..255, got {value}")
        return value

    def style_for(self, kind: TokenKind) -> str:
        """Return the Rich style string configured for ``kind``."""

        return str(getattr(self, kind.value))


class HighlightConfig(BaseModel):
    """Keyword configuration for the line highlighter."""

    model_config = ConfigDict(validate_assignment=True)

    keywords: list[str] = Field(default_factory=lambda: sorted(DEFAULT_KEYWORDS))
    extra_keywords: list[str] = Field(default_factory=list)

    def effective_keywords(self) -> frozenset[str]:
        """Return the union of the base and extra keyword lists."""

        return frozenset(self.keywords) | frozenset(self.extra_keywords)


class CodemarkConfig(BaseModel):
    """Top-level configuration container."""

    model_config = ConfigDict(validate_assignment=True)

    highlight: HighlightConfig = Field(default_factory=HighlightConfig)
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    default_format: ExportFormatName = "text"


def _build(payload: Mapping[str, Any], *, source: str) -> CodemarkConfig:
    try:
        return CodemarkConfig.model_validate(dict(payload))
    except ValidationError as exc:
        raise ConfigError(f"Invalid codemark configuration in {source}: {exc}") from exc


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc


def load_config(root: Path) -> CodemarkConfig:
    """Load ``[tool.codemark]`` from ``root/pyproject.toml``.

    Args:
        root: Project directory searched for ``pyproject.toml``.

    Returns:
        CodemarkConfig: Parsed configuration, or defaults when the file or
        section is absent.

    Raises:
        ConfigError: If the file cannot be parsed or fails validation.
    """

    path = root / PYPROJECT_FILENAME
    if not path.is_file():
        return CodemarkConfig()
    data = _read_toml(path)
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return CodemarkConfig()
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return CodemarkConfig()
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.codemark] in {path} must be a table")
    return _build(section, source=str(path))


def load_config_file(path: Path) -> CodemarkConfig:
    """Load a standalone TOML file whose top level is the codemark section.

    Raises:
        ConfigError: If the file is missing, malformed or invalid.
    """

    if not path.is_file():
        raise ConfigError(f"Configuration file {path} does not exist")
    return _build(_read_toml(path), source=str(path))


__all__ = [
    "CodemarkConfig",
    "ExportFormatName",
    "HighlightConfig",
    "ThemeConfig",
    "load_config",
    "load_config_file",
]
