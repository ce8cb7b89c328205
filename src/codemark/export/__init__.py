# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Serializers turning highlighter output into text, RTF, HTML and ANSI."""

from __future__ import annotations

from .ansi import render_ansi, render_ansi_string
from .clipboard import ClipboardPayload, EditorView, copy_with_line_numbers
from .formats import ExportFormat, render
from .rtf import COLOR_INDEX, escape_rtf, render_rtf, rtf_header
from .text import line_prefix, render_html, render_text

__all__ = [
    "COLOR_INDEX",
    "ClipboardPayload",
    "EditorView",
    "ExportFormat",
    "copy_with_line_numbers",
    "escape_rtf",
    "line_prefix",
    "render",
    "render_ansi",
    "render_ansi_string",
    "render_html",
    "render_rtf",
    "render_text",
    "rtf_header",
]
