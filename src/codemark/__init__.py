# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Span-tracked annotations and lightweight line highlighting for editor hosts."""

from __future__ import annotations

from .annotations import (
    Annotation,
    AnnotationAdded,
    AnnotationRegistry,
    AnnotationRemoved,
    RegistrySessions,
)
from .buffer import TextBuffer, TextEdit, TextSnapshot
from .errors import (
    CodemarkError,
    ConfigError,
    InvalidArgumentError,
    NoActiveViewError,
    PreconditionError,
    ReentrantMutationError,
)
from .highlight import DEFAULT_KEYWORDS, HighlightedLine, ScanState, Token, TokenKind, highlight
from .spans import Span, TextChange, TrackingSpan

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_KEYWORDS",
    "Annotation",
    "AnnotationAdded",
    "AnnotationRegistry",
    "AnnotationRemoved",
    "CodemarkError",
    "ConfigError",
    "HighlightedLine",
    "InvalidArgumentError",
    "NoActiveViewError",
    "PreconditionError",
    "ReentrantMutationError",
    "RegistrySessions",
    "ScanState",
    "Span",
    "TextBuffer",
    "TextChange",
    "TextEdit",
    "TextSnapshot",
    "Token",
    "TokenKind",
    "TrackingSpan",
    "__version__",
    "highlight",
]
