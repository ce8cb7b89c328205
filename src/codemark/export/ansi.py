# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Terminal rendering of highlighted lines through Rich."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.text import Text

from ..config import ThemeConfig
from ..highlight.tokens import HighlightedLine
from .text import line_prefix


def render_ansi(lines: Iterable[HighlightedLine], theme: ThemeConfig | None = None) -> list[Text]:
    """Return one styled Rich :class:`Text` per highlighted line.

    Args:
        lines: Highlighter output.
        theme: Style source; defaults to :class:`ThemeConfig`.

    Returns:
        list[Text]: Styled lines including the line-number gutter.
    """

    palette = theme or ThemeConfig()
    rendered: list[Text] = []
    for line in lines:
        text = Text(line_prefix(line.number), style=palette.line_number)
        for position, token in enumerate(line.tokens):
            if position:
                text.append(" ")
            text.append(token.text, style=palette.style_for(token.kind))
        rendered.append(text)
    return rendered


def render_ansi_string(
    lines: Iterable[HighlightedLine],
    theme: ThemeConfig | None = None,
    *,
    color_system: str = "truecolor",
) -> str:
    """Return highlighted lines as a string carrying ANSI escape sequences."""

    console = Console(color_system=color_system, force_terminal=True, soft_wrap=True, width=10_000)
    with console.capture() as capture:
        for text in render_ansi(lines, theme):
            console.print(text)
    return capture.get()


__all__ = ["render_ansi", "render_ansi_string"]
