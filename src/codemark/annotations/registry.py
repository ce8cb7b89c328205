# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Span-overlap annotation registry bound to a single text buffer.

The registry keeps annotations in insertion order and answers overlap queries
with a linear scan, which suits the handful of annotations an editor session
typically carries.  Spans are tracked through buffer edits; an annotation
whose text has been deleted entirely is dropped on the next edit without an
event, because the host has already discarded its visual element.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TypeAlias

from ..errors import InvalidArgumentError, ReentrantMutationError
from ..interfaces import EditLike, TextBufferLike
from ..spans import Span, TrackingSpan

LOGGER = logging.getLogger(__name__)


@dataclass(eq=False, slots=True)
class Annotation:
    """Author comment attached to a tracked range of text."""

    span: TrackingSpan
    author: str
    body: str
    _dropped: bool = field(default=False, repr=False)

    @property
    def is_live(self) -> bool:
        """Return ``True`` while the annotation belongs to a registry."""

        return not self._dropped


@dataclass(frozen=True, slots=True)
class AnnotationAdded:
    """Event raised after an annotation has been appended."""

    annotation: Annotation


@dataclass(frozen=True, slots=True)
class AnnotationRemoved:
    """Event raised after an annotation has been explicitly removed."""

    annotation: Annotation


AnnotationEvent: TypeAlias = AnnotationAdded | AnnotationRemoved
AnnotationListener: TypeAlias = Callable[[AnnotationEvent], None]


class AnnotationRegistry:
    """Insertion-ordered collection of live annotations over one buffer."""

    def __init__(self, buffer: TextBufferLike) -> None:
        """Bind the registry to ``buffer`` and subscribe to its edits.

        Prefer :meth:`attach`, which also validates the argument.

        Args:
            buffer: Buffer whose edits the registry follows.
        """

        self._buffer = buffer
        self._annotations: list[Annotation] = []
        self._listeners: list[AnnotationListener] = []
        self._busy = False
        self._pending_version: int | None = None
        buffer.subscribe(self.on_edit)
        self._attached = True

    @classmethod
    def attach(cls, buffer: TextBufferLike | None) -> AnnotationRegistry:
        """Return a registry bound to ``buffer``.

        Args:
            buffer: Buffer providing edit notifications and span tracking.

        Returns:
            AnnotationRegistry: Registry subscribed to the buffer's edits.

        Raises:
            InvalidArgumentError: If ``buffer`` is ``None``.
        """

        if buffer is None:
            raise InvalidArgumentError("buffer", "a text buffer is required")
        return cls(buffer)

    @property
    def is_attached(self) -> bool:
        """Return ``True`` until :meth:`detach` has been called."""

        return self._attached

    @property
    def annotations(self) -> tuple[Annotation, ...]:
        """Return the live annotations in insertion order."""

        return tuple(self._annotations)

    def __len__(self) -> int:
        return len(self._annotations)

    def __iter__(self) -> Iterator[Annotation]:
        return iter(tuple(self._annotations))

    def subscribe(self, listener: AnnotationListener) -> None:
        """Register ``listener`` for :class:`AnnotationAdded` / :class:`AnnotationRemoved` events."""

        self._listeners.append(listener)

    def unsubscribe(self, listener: AnnotationListener) -> None:
        """Remove ``listener``; unknown listeners are ignored."""

        if listener in self._listeners:
            self._listeners.remove(listener)

    def current_span(self, annotation: Annotation) -> Span:
        """Return ``annotation``'s span in the buffer's current coordinates."""

        return annotation.span.get_span(self._buffer.current.version)

    def add(self, span: Span, author: str | None, body: str | None) -> Annotation:
        """Append an annotation over ``span`` and notify listeners.

        Args:
            span: Non-empty range in current buffer coordinates.
            author: Author label; may be empty but not ``None``.
            body: Annotation text; may be empty but not ``None``.

        Returns:
            Annotation: The newly registered annotation.

        Raises:
            InvalidArgumentError: If ``span`` is empty or ``author``/``body`` is ``None``.
            ReentrantMutationError: If called from a listener callback.
        """

        if span is None or span.is_empty:
            raise InvalidArgumentError("span", "annotation span must cover at least one character")
        if author is None:
            raise InvalidArgumentError("author", "annotation author is required")
        if body is None:
            raise InvalidArgumentError("body", "annotation body is required")
        with self._mutating():
            annotation = Annotation(span=self._buffer.track_span(span), author=author, body=body)
            self._annotations.append(annotation)
            LOGGER.debug("added annotation by %s at %s", author, span)
            self._emit(AnnotationAdded(annotation))
        return annotation

    def remove_overlapping(self, span: Span) -> list[Annotation]:
        """Remove every annotation whose current span overlaps ``span``.

        Touching endpoints do not count as overlap.  One
        :class:`AnnotationRemoved` event is raised per removed annotation,
        in registry order.

        Args:
            span: Range in current buffer coordinates.

        Returns:
            list[Annotation]: Annotations that were removed.

        Raises:
            ReentrantMutationError: If called from a listener callback.
        """

        with self._mutating():
            version = self._buffer.current.version
            kept: list[Annotation] = []
            removed: list[Annotation] = []
            for annotation in self._annotations:
                if annotation.span.get_span(version).overlaps_with(span):
                    removed.append(annotation)
                else:
                    kept.append(annotation)
            self._annotations = kept
            for annotation in removed:
                annotation._dropped = True  # pylint: disable=protected-access
                LOGGER.debug("removed annotation by %s overlapping %s", annotation.author, span)
                self._emit(AnnotationRemoved(annotation))
        return removed

    def query(self, span: Span) -> tuple[Annotation, ...]:
        """Return annotations whose current span overlaps ``span``, in insertion order."""

        version = self._buffer.current.version
        return tuple(
            annotation for annotation in self._annotations if annotation.span.get_span(version).overlaps_with(span)
        )

    def on_edit(self, edit: EditLike) -> None:
        """Re-map every annotation after ``edit`` and drop collapsed ones silently.

        Args:
            edit: Completed edit reported by the buffer.

        An edit made by a listener while the registry is dispatching is
        deferred until the dispatching call returns.
        """

        if not self._attached:
            LOGGER.debug("ignoring edit to version %s on detached registry", edit.after.version)
            return
        if self._busy:
            LOGGER.debug("deferring edit to version %s until dispatch completes", edit.after.version)
            self._pending_version = edit.after.version
            return
        with self._mutating():
            self._drop_collapsed(edit.after.version)

    def _drop_collapsed(self, version: int) -> None:
        kept: list[Annotation] = []
        for annotation in self._annotations:
            if annotation.span.get_span(version).length:
                kept.append(annotation)
            else:
                annotation._dropped = True  # pylint: disable=protected-access
                LOGGER.debug("dropped annotation by %s whose text was deleted", annotation.author)
        self._annotations = kept

    def detach(self) -> None:
        """Stop following buffer edits; safe to call repeatedly."""

        if not self._attached:
            return
        self._buffer.unsubscribe(self.on_edit)
        self._attached = False

    @contextmanager
    def _mutating(self) -> Iterator[None]:
        if self._busy:
            raise ReentrantMutationError("annotation registry modified while dispatching an event")
        self._busy = True
        try:
            yield
        finally:
            pending, self._pending_version = self._pending_version, None
            try:
                if pending is not None:
                    self._drop_collapsed(pending)
            finally:
                self._busy = False

    def _emit(self, event: AnnotationEvent) -> None:
        for listener in tuple(self._listeners):
            listener(event)


__all__ = [
    "Annotation",
    "AnnotationAdded",
    "AnnotationEvent",
    "AnnotationListener",
    "AnnotationRegistry",
    "AnnotationRemoved",
]
