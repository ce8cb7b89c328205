# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Token types produced by the line highlighter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

SPACE: Final[str] = " "


class TokenKind(str, Enum):
    """Classification assigned to each segment of a line."""

    PLAIN = "plain"
    KEYWORD = "keyword"
    COMMENT = "comment"
    STRING = "string"


@dataclass(frozen=True, slots=True)
class Token:
    """Literal segment of a line together with its classification."""

    text: str
    kind: TokenKind

    @property
    def is_space(self) -> bool:
        """Return ``True`` for the literal space emitted for separator runs."""

        return self.text == SPACE and self.kind is TokenKind.PLAIN


@dataclass(frozen=True, slots=True)
class HighlightedLine:
    """Tokens of one input line, tagged with the line's index."""

    index: int
    tokens: tuple[Token, ...]

    @property
    def number(self) -> int:
        """Return the one-based line number used by renderers."""

        return self.index + 1

    def joined(self) -> str:
        """Return the token texts joined by single spaces."""

        return SPACE.join(token.text for token in self.tokens)


__all__ = ["SPACE", "HighlightedLine", "Token", "TokenKind"]
