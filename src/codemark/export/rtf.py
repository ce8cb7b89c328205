# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich Text Format serializer for highlighted lines."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Final

from ..config import RgbTriple, ThemeConfig
from ..highlight.tokens import HighlightedLine, Token, TokenKind
from .text import line_prefix

GENERATOR: Final[str] = "codemark 1.0"

# Index into the colour table; cf0 is the document default colour.
COLOR_INDEX: Final[Mapping[TokenKind, int]] = {
    TokenKind.PLAIN: 0,
    TokenKind.STRING: 1,
    TokenKind.COMMENT: 2,
    TokenKind.KEYWORD: 3,
}

_ESCAPES: Final[Mapping[str, str]] = {"\\": "\\\\", "{": "\\{", "}": "\\}"}


def escape_rtf(text: str) -> str:
    """Escape RTF control characters and encode non-ASCII characters.

    Args:
        text: Literal text to embed in an RTF document.

    Returns:
        str: Text safe to place inside an RTF group.
    """

    parts: list[str] = []
    for char in text:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif ord(char) > 0x7F:
            # RTF \u takes a signed 16-bit value; astral characters need a surrogate pair.
            for unit in _utf16_units(char):
                signed = unit - 0x10000 if unit > 0x7FFF else unit
                parts.append(f"\\u{signed}?")
        else:
            parts.append(char)
    return "".join(parts)


def _utf16_units(char: str) -> list[int]:
    encoded = char.encode("utf-16-le")
    return [int.from_bytes(encoded[offset : offset + 2], "little") for offset in range(0, len(encoded), 2)]


def _color_entry(rgb: RgbTriple) -> str:
    red, green, blue = rgb
    return f"\\red{red}\\green{green}\\blue{blue};"


def rtf_header(theme: ThemeConfig) -> str:
    """Return the document preamble with font and colour tables."""

    colors = "".join(_color_entry(rgb) for rgb in (theme.rtf_string, theme.rtf_comment, theme.rtf_keyword))
    return (
        "{\\rtf1\\ansi\\ansicpg1252\\deff0\\nouicompat\\deflang1033"
        "{\\fonttbl{\\f0\\fnil\\fcharset0 Courier New;}}\n"
        f"{{\\colortbl ;{colors}}}\n"
        f"{{\\*\\generator {GENERATOR}}}\\viewkind4\\uc1 \n"
        "\\pard\\sa200\\sl276\\slmult1\\f0\\fs22\\lang9 "
    )


def _render_token(token: Token) -> str:
    if token.is_space:
        return " "
    return f"\\cf{COLOR_INDEX[token.kind]} {escape_rtf(token.text)} "


def render_rtf(lines: Iterable[HighlightedLine], theme: ThemeConfig | None = None) -> str:
    """Serialise highlighted lines into a numbered RTF document.

    Args:
        lines: Highlighter output.
        theme: Colour table source; defaults to :class:`ThemeConfig`.

    Returns:
        str: Complete RTF document.
    """

    parts = [rtf_header(theme or ThemeConfig())]
    for line in lines:
        parts.append(line_prefix(line.number))
        parts.extend(_render_token(token) for token in line.tokens)
        parts.append("\\line\n")
    parts.append("\\par}\n")
    return "".join(parts)


__all__ = ["COLOR_INDEX", "GENERATOR", "escape_rtf", "render_rtf", "rtf_header"]
