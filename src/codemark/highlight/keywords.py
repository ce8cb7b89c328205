# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in keyword set for F#-style sources."""

from __future__ import annotations

from typing import Final

DEFAULT_KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        "let",
        "for",
        "do",
        "if",
        "then",
        "elif",
        "else",
        "open",
        "module",
        "namespace",
        "<-",
        ":",
    },
)

__all__ = ["DEFAULT_KEYWORDS"]
