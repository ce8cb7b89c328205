# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Host-independent core of the "copy with line numbers" command.

The host resolves its active view, calls :func:`copy_with_line_numbers` and
places both payloads on the clipboard; this module never touches the OS.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass

from ..config import ThemeConfig
from ..errors import NoActiveViewError
from ..highlight.keywords import DEFAULT_KEYWORDS
from ..highlight.scanner import highlight
from ..interfaces import EditorViewLike, TextBufferLike
from ..spans import Span
from .rtf import render_rtf
from .text import render_text


@dataclass(frozen=True, slots=True)
class ClipboardPayload:
    """Plain-text and RTF renditions of the copied lines."""

    text: str
    rtf: str
    first_line: int
    last_line: int


@dataclass(slots=True)
class EditorView:
    """Minimal editor view pairing a buffer with an optional selection."""

    buffer: TextBufferLike
    selection: Span | None = None


def copy_with_line_numbers(
    view: EditorViewLike | None,
    *,
    keywords: Collection[str] = DEFAULT_KEYWORDS,
    theme: ThemeConfig | None = None,
) -> ClipboardPayload | None:
    """Render every line touched by the view's selection.

    Args:
        view: Active editor view, or ``None`` when the host found none.
        keywords: Keyword set passed to the highlighter.
        theme: Colour configuration for the RTF payload.

    Returns:
        ClipboardPayload | None: Both renditions, or ``None`` when nothing is selected.

    Raises:
        NoActiveViewError: If ``view`` is ``None``.
    """

    if view is None:
        raise NoActiveViewError()
    selection = view.selection
    if selection is None:
        return None
    snapshot = view.buffer.current
    first = snapshot.line_number_from_position(selection.start)
    last = snapshot.line_number_from_position(selection.end)
    lines = [snapshot.line_text(number) for number in range(first, last + 1)]
    return ClipboardPayload(
        text=render_text(lines, first_line=first),
        rtf=render_rtf(highlight(lines, keywords, first_line=first), theme),
        first_line=first,
        last_line=last,
    )


__all__ = ["ClipboardPayload", "EditorView", "copy_with_line_numbers"]
