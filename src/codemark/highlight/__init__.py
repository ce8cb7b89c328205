# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lightweight per-line keyword, comment and string highlighter."""

from __future__ import annotations

from .keywords import DEFAULT_KEYWORDS
from .scanner import ScanState, highlight, highlight_line, scan_transition
from .tokens import SPACE, HighlightedLine, Token, TokenKind

__all__ = [
    "DEFAULT_KEYWORDS",
    "SPACE",
    "HighlightedLine",
    "ScanState",
    "Token",
    "TokenKind",
    "highlight",
    "highlight_line",
    "scan_transition",
]
