# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Plain-text and HTML serializers."""

from __future__ import annotations

import html
from collections.abc import Iterable, Sequence
from typing import Final

from ..highlight.tokens import HighlightedLine, TokenKind

HTML_CLASS_PREFIX: Final[str] = "cm-"


def line_prefix(number: int) -> str:
    """Return the right-aligned ``"   N:    "`` gutter for a one-based line number."""

    return f"{number:4d}:    "


def render_text(lines: Sequence[str], *, first_line: int = 0) -> str:
    """Return ``lines`` as numbered plain text, one line per row.

    Args:
        lines: Raw line texts without line breaks.
        first_line: Zero-based index of the first line.

    Returns:
        str: Numbered text terminated by a newline per line.
    """

    return "".join(f"{line_prefix(first_line + offset + 1)}{line}\n" for offset, line in enumerate(lines))


def render_html(lines: Iterable[HighlightedLine]) -> str:
    """Return highlighted lines as a ``<pre>`` block with classed spans."""

    rows: list[str] = []
    for line in lines:
        cells: list[str] = []
        for token in line.tokens:
            text = html.escape(token.text)
            if token.kind is TokenKind.PLAIN:
                cells.append(text)
            else:
                cells.append(f'<span class="{HTML_CLASS_PREFIX}{token.kind.value}">{text}</span>')
        gutter = f'<span class="{HTML_CLASS_PREFIX}line">{line_prefix(line.number)}</span>'
        rows.append(gutter + " ".join(cells))
    body = "\n".join(rows)
    return f'<pre class="codemark">{body}</pre>\n'


__all__ = ["HTML_CLASS_PREFIX", "line_prefix", "render_html", "render_text"]
