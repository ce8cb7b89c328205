# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Host-facing protocols the codemark core relies upon."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .spans import Span, TextChange, TrackingSpan

if TYPE_CHECKING:
    from .buffer import TextEdit


@runtime_checkable
class SnapshotLike(Protocol):
    """Immutable view over one version of a text buffer."""

    @property
    def version(self) -> int:
        """Return the monotonically increasing version number."""

        raise NotImplementedError

    @property
    def line_count(self) -> int:
        """Return the number of lines in the snapshot."""

        raise NotImplementedError

    def line_text(self, line_number: int) -> str:
        """Return the text of ``line_number`` without its line break."""

        raise NotImplementedError

    def line_number_from_position(self, position: int) -> int:
        """Return the zero-based line containing ``position``."""

        raise NotImplementedError


EditObserver = Callable[["TextEdit"], None]


@runtime_checkable
class TextBufferLike(Protocol):
    """Mutable text buffer supplying edit notifications and span tracking."""

    @property
    def current(self) -> SnapshotLike:
        """Return the latest snapshot."""

        raise NotImplementedError

    def subscribe(self, observer: EditObserver) -> None:
        """Register ``observer`` for synchronous edit notifications."""

        raise NotImplementedError

    def unsubscribe(self, observer: EditObserver) -> None:
        """Remove ``observer``; unknown observers are ignored."""

        raise NotImplementedError

    def track_span(self, span: Span) -> TrackingSpan:
        """Return a tracking span recorded against the current snapshot."""

        raise NotImplementedError


@runtime_checkable
class EditLike(Protocol):
    """Description of a completed buffer edit."""

    @property
    def after(self) -> SnapshotLike:
        """Return the snapshot produced by the edit."""

        raise NotImplementedError

    @property
    def changes(self) -> Sequence[TextChange]:
        """Return the replacements applied by the edit."""

        raise NotImplementedError


@runtime_checkable
class EditorViewLike(Protocol):
    """Editor view exposing its buffer and optional selection."""

    @property
    def buffer(self) -> TextBufferLike:
        """Return the buffer displayed by the view."""

        raise NotImplementedError

    @property
    def selection(self) -> Span | None:
        """Return the selected range, or ``None`` when nothing is selected."""

        raise NotImplementedError


__all__ = [
    "EditLike",
    "EditObserver",
    "EditorViewLike",
    "SnapshotLike",
    "TextBufferLike",
]
