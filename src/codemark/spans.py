# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Span primitives and edge-exclusive tracking across buffer versions.

Spans are half-open ``[start, end)`` ranges over the text of one snapshot.  A
:class:`TrackingSpan` remembers the version it was recorded against and maps
itself forward through the edits a buffer has applied since, so callers can
always ask "where is this text now?".
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .errors import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open character range ``[start, end)``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise InvalidArgumentError("start", f"span start must be >= 0, got {self.start}")
        if self.end < self.start:
            raise InvalidArgumentError("end", f"span end {self.end} precedes start {self.start}")

    @classmethod
    def from_length(cls, start: int, length: int) -> Span:
        """Return a span beginning at ``start`` covering ``length`` characters.

        Args:
            start: Offset of the first character.
            length: Number of characters covered.

        Returns:
            Span: Span covering ``[start, start + length)``.
        """

        return cls(start, start + length)

    @property
    def length(self) -> int:
        """Return the number of characters covered by the span."""

        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when the span covers no characters."""

        return self.start == self.end

    def contains(self, position: int) -> bool:
        """Return ``True`` when ``position`` falls inside the span."""

        return self.start <= position < self.end

    def overlaps_with(self, other: Span) -> bool:
        """Return ``True`` when the spans share at least one character.

        Adjacent spans (one ending where the other begins) do not overlap, and
        an empty span never overlaps anything.

        Args:
            other: Span compared against this one.

        Returns:
            bool: ``True`` when the intersection is non-empty.
        """

        return max(self.start, other.start) < min(self.end, other.end)

    def intersects_with(self, other: Span) -> bool:
        """Return ``True`` when the spans overlap or touch at an endpoint."""

        return other.start <= self.end and other.end >= self.start

    def __str__(self) -> str:
        return f"[{self.start}..{self.end})"


@dataclass(frozen=True, slots=True)
class TextChange:
    """Replacement of ``old_length`` characters at ``position`` by ``new_text``."""

    position: int
    old_length: int
    new_text: str = ""

    def __post_init__(self) -> None:
        if self.position < 0 or self.old_length < 0:
            raise InvalidArgumentError("change", f"invalid change at {self.position} (length {self.old_length})")

    @property
    def new_length(self) -> int:
        """Return the length of the inserted text."""

        return len(self.new_text)

    @property
    def delta(self) -> int:
        """Return the change in buffer length caused by this replacement."""

        return self.new_length - self.old_length

    @property
    def old_span(self) -> Span:
        """Return the replaced range in pre-edit coordinates."""

        return Span.from_length(self.position, self.old_length)

    @property
    def new_span(self) -> Span:
        """Return the inserted range in post-edit coordinates."""

        return Span.from_length(self.position, self.new_length)


def map_position(position: int, change: TextChange, *, positive: bool) -> int:
    """Map ``position`` across a single change.

    Args:
        position: Offset in pre-edit coordinates.
        change: Replacement applied to the text.
        positive: ``True`` to move with text inserted at ``position`` (the
            point lands after the replacement), ``False`` to stay before it.

    Returns:
        int: Offset in post-edit coordinates.
    """

    if position < change.position:
        return position
    if position > change.position + change.old_length:
        return position + change.delta
    if positive:
        return change.position + change.new_length
    return change.position


def map_span(span: Span, changes: Sequence[TextChange]) -> Span:
    """Map ``span`` through one edit made of non-overlapping ``changes``.

    The start tracks positively and the end negatively, so text inserted at
    either edge stays outside the span.  When the mapped end would precede
    the mapped start the span collapses to zero length.

    Args:
        span: Span in pre-edit coordinates.
        changes: Changes of a single edit, expressed in pre-edit coordinates.

    Returns:
        Span: Span in post-edit coordinates.
    """

    start, end = span.start, span.end
    for change in sorted(changes, key=lambda item: item.position, reverse=True):
        start = map_position(start, change, positive=True)
        end = map_position(end, change, positive=False)
    return Span(start, max(start, end))


@runtime_checkable
class ChangeLog(Protocol):
    """Source of the edit history a :class:`TrackingSpan` replays."""

    def changes_between(self, start_version: int, end_version: int) -> Iterable[Sequence[TextChange]]:
        """Yield the changes of each edit taking ``start_version`` to ``end_version``."""

        raise NotImplementedError


class TrackingSpan:
    """Span recorded against one buffer version and mapped forward on demand."""

    __slots__ = ("_history", "_span", "_version")

    def __init__(self, history: ChangeLog, version: int, span: Span) -> None:
        self._history = history
        self._version = version
        self._span = span

    @property
    def version(self) -> int:
        """Return the version the cached span is expressed against."""

        return self._version

    def get_span(self, version: int) -> Span:
        """Return the tracked span expressed in ``version`` coordinates.

        Args:
            version: Target buffer version; must not precede the recorded one.

        Returns:
            Span: Span mapped through every intervening edit.

        Raises:
            InvalidArgumentError: If ``version`` is older than the tracked version.
        """

        if version < self._version:
            raise InvalidArgumentError(
                "version",
                f"cannot map span recorded at version {self._version} back to {version}",
            )
        if version == self._version:
            return self._span
        span = self._span
        for changes in self._history.changes_between(self._version, version):
            span = map_span(span, changes)
        self._version = version
        self._span = span
        return span

    def __repr__(self) -> str:
        return f"TrackingSpan(version={self._version}, span={self._span})"


__all__ = [
    "ChangeLog",
    "Span",
    "TextChange",
    "TrackingSpan",
    "map_position",
    "map_span",
]
