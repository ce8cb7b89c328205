# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Line-oriented segment classifier.

Each line is split on spaces and tabs and walked by a three-state machine
(:class:`ScanState`) that restarts in ``NORMAL`` on every line.  This is not a
lexer: escape sequences, block comments and strings or comments spanning
several lines are not recognised, and a string only closes on a segment that
ends with a double quote (so ``"a"b`` keeps the scanner inside the string).
"""

from __future__ import annotations

import re
from collections.abc import Collection, Iterable
from enum import Enum
from typing import Final

from ..errors import InvalidArgumentError
from .tokens import SPACE, HighlightedLine, Token, TokenKind

COMMENT_PREFIX: Final[str] = "//"
QUOTE: Final[str] = '"'
_SEPARATORS: Final[re.Pattern[str]] = re.compile(r"[ \t]")


class ScanState(str, Enum):
    """Scanner state carried between the segments of one line."""

    NORMAL = "normal"
    COMMENT = "comment"
    IN_STRING = "in_string"


def _closes_string(segment: str) -> bool:
    return segment.endswith(QUOTE)


def scan_transition(
    state: ScanState,
    segment: str,
    keywords: Collection[str],
) -> tuple[TokenKind, ScanState]:
    """Classify a non-empty ``segment`` and return the state for the next one.

    Args:
        state: State reached after the previous segment of the line.
        segment: Non-empty text between separators.
        keywords: Exact-match keyword set.

    Returns:
        tuple[TokenKind, ScanState]: Token classification and follow-up state.
    """

    if state is ScanState.COMMENT:
        return TokenKind.COMMENT, ScanState.COMMENT
    if state is ScanState.IN_STRING:
        return TokenKind.STRING, ScanState.NORMAL if _closes_string(segment) else ScanState.IN_STRING
    if segment.startswith(COMMENT_PREFIX):
        return TokenKind.COMMENT, ScanState.COMMENT
    if segment.startswith(QUOTE):
        self_terminating = len(segment) > 1 and _closes_string(segment)
        return TokenKind.STRING, ScanState.NORMAL if self_terminating else ScanState.IN_STRING
    if segment in keywords:
        return TokenKind.KEYWORD, ScanState.NORMAL
    return TokenKind.PLAIN, ScanState.NORMAL


def highlight_line(line: str, keywords: Collection[str]) -> tuple[Token, ...]:
    """Return the tokens of a single line.

    A run of consecutive separators yields one plain space token, so a line
    holding only separators (or nothing at all) produces a single space.

    Args:
        line: Line text without its line break.
        keywords: Exact-match keyword set.

    Returns:
        tuple[Token, ...]: Tokens in left-to-right order.
    """

    tokens: list[Token] = []
    state = ScanState.NORMAL
    previous_empty = False
    for segment in _SEPARATORS.split(line):
        if not segment:
            if not previous_empty:
                tokens.append(Token(SPACE, TokenKind.PLAIN))
            previous_empty = True
            continue
        previous_empty = False
        kind, state = scan_transition(state, segment, keywords)
        tokens.append(Token(segment, kind))
    return tuple(tokens)


def highlight(
    lines: Iterable[str],
    keywords: Collection[str] | None,
    *,
    first_line: int = 0,
) -> list[HighlightedLine]:
    """Classify every segment of ``lines``.

    Args:
        lines: Ordered line texts without line breaks.
        keywords: Exact-match keyword set; required.  A bare string is
            treated as a single keyword.
        first_line: Index assigned to the first line.

    Returns:
        list[HighlightedLine]: One entry per input line, in order.

    Raises:
        InvalidArgumentError: If ``keywords`` is ``None``.
    """

    if keywords is None:
        raise InvalidArgumentError("keywords", "a keyword set is required")
    if isinstance(keywords, str):
        lookup: Collection[str] = frozenset((keywords,))
    elif isinstance(keywords, (set, frozenset)):
        lookup = keywords
    else:
        lookup = frozenset(keywords)
    return [
        HighlightedLine(index=first_line + offset, tokens=highlight_line(line, lookup))
        for offset, line in enumerate(lines)
    ]


__all__ = [
    "COMMENT_PREFIX",
    "QUOTE",
    "ScanState",
    "highlight",
    "highlight_line",
    "scan_transition",
]
