# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Dispatch from export format names to serializers."""

from __future__ import annotations

from collections.abc import Collection, Sequence
from enum import Enum

from ..config import ThemeConfig
from ..highlight.scanner import highlight
from .ansi import render_ansi_string
from .rtf import render_rtf
from .text import render_html, render_text


class ExportFormat(str, Enum):
    """Output formats understood by :func:`render`."""

    TEXT = "text"
    RTF = "rtf"
    HTML = "html"
    ANSI = "ansi"


def render(
    export_format: ExportFormat,
    lines: Sequence[str],
    keywords: Collection[str] | None,
    *,
    first_line: int = 0,
    theme: ThemeConfig | None = None,
) -> str:
    """Render ``lines`` in ``export_format``.

    Args:
        export_format: Target format.
        lines: Raw line texts without line breaks.
        keywords: Keyword set passed to the highlighter.
        first_line: Zero-based index of the first line, used for numbering.
        theme: Colour configuration for RTF and ANSI output.

    Returns:
        str: Serialised document.
    """

    highlighted = highlight(lines, keywords, first_line=first_line)
    if export_format is ExportFormat.TEXT:
        return render_text(lines, first_line=first_line)
    if export_format is ExportFormat.RTF:
        return render_rtf(highlighted, theme)
    if export_format is ExportFormat.HTML:
        return render_html(highlighted)
    return render_ansi_string(highlighted, theme)


__all__ = ["ExportFormat", "render"]
