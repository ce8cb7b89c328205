# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""In-memory versioned text buffer implementing :class:`TextBufferLike`.

Hosts with their own editor buffer adapt it to the protocols in
:mod:`codemark.interfaces`; this implementation backs the CLI and the tests.
"""

from __future__ import annotations

import bisect
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Final

from .errors import InvalidArgumentError
from .interfaces import EditObserver
from .spans import Span, TextChange, TrackingSpan

_LINE_BREAK: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


def _line_starts(text: str) -> tuple[int, ...]:
    starts = [0]
    starts.extend(match.end() for match in _LINE_BREAK.finditer(text))
    return tuple(starts)


@dataclass(frozen=True, slots=True)
class TextSnapshot:
    """Immutable text of one buffer version with line-oriented accessors."""

    version: int
    text: str
    _starts: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_starts", _line_starts(self.text))

    @property
    def length(self) -> int:
        """Return the number of characters in the snapshot."""

        return len(self.text)

    @property
    def line_count(self) -> int:
        """Return the number of lines; an empty snapshot has one empty line."""

        return len(self._starts)

    def line_span(self, line_number: int) -> Span:
        """Return the span of ``line_number`` excluding its line break.

        Args:
            line_number: Zero-based line index.

        Returns:
            Span: Range of the line's visible text.

        Raises:
            InvalidArgumentError: If ``line_number`` is out of range.
        """

        if not 0 <= line_number < self.line_count:
            raise InvalidArgumentError("line_number", f"line {line_number} outside 0..{self.line_count - 1}")
        start = self._starts[line_number]
        if line_number + 1 < self.line_count:
            end = self._starts[line_number + 1]
            end -= 2 if end - 2 >= start and self.text[end - 2 : end] == "\r\n" else 1
        else:
            end = len(self.text)
        return Span(start, end)

    def line_text(self, line_number: int) -> str:
        """Return the text of ``line_number`` without its line break."""

        return self.get_text(self.line_span(line_number))

    def line_number_from_position(self, position: int) -> int:
        """Return the zero-based line containing ``position``.

        Args:
            position: Character offset; the end of the snapshot is allowed.

        Returns:
            int: Line index owning the offset.

        Raises:
            InvalidArgumentError: If ``position`` lies outside the snapshot.
        """

        if not 0 <= position <= len(self.text):
            raise InvalidArgumentError("position", f"position {position} outside 0..{len(self.text)}")
        return bisect.bisect_right(self._starts, position) - 1

    def lines(self, first: int = 0, last: int | None = None) -> list[str]:
        """Return the text of lines ``first`` through ``last`` inclusive."""

        final = self.line_count - 1 if last is None else last
        return [self.line_text(number) for number in range(first, final + 1)]

    def get_text(self, span: Span | None = None) -> str:
        """Return the text covered by ``span`` (the whole snapshot when omitted)."""

        if span is None:
            return self.text
        if span.end > len(self.text):
            raise InvalidArgumentError("span", f"span {span} exceeds snapshot length {len(self.text)}")
        return self.text[span.start : span.end]


@dataclass(frozen=True, slots=True)
class TextEdit:
    """Notification describing a completed edit."""

    before: TextSnapshot
    after: TextSnapshot
    changes: tuple[TextChange, ...]


class TextBuffer:
    """Mutable buffer producing a new :class:`TextSnapshot` for every edit.

    The buffer keeps the changes of every edit for its whole lifetime so that a
    :class:`TrackingSpan` recorded at any version can be replayed forward.
    Memory therefore grows with the number of edits; hosts with long-lived
    sessions should recreate the buffer (and its registries) periodically.
    """

    def __init__(self, text: str = "") -> None:
        self._current = TextSnapshot(0, text)
        self._history: list[tuple[TextChange, ...]] = []
        self._observers: list[EditObserver] = []

    @property
    def current(self) -> TextSnapshot:
        """Return the latest snapshot."""

        return self._current

    @property
    def observer_count(self) -> int:
        """Return the number of registered edit observers."""

        return len(self._observers)

    def subscribe(self, observer: EditObserver) -> None:
        """Register ``observer`` for synchronous edit notifications."""

        self._observers.append(observer)

    def unsubscribe(self, observer: EditObserver) -> None:
        """Remove ``observer``; unknown observers are ignored."""

        if observer in self._observers:
            self._observers.remove(observer)

    def track_span(self, span: Span) -> TrackingSpan:
        """Return a tracking span recorded against the current snapshot."""

        if span.end > self._current.length:
            raise InvalidArgumentError("span", f"span {span} exceeds buffer length {self._current.length}")
        return TrackingSpan(self, self._current.version, span)

    def changes_between(self, start_version: int, end_version: int) -> Iterator[Sequence[TextChange]]:
        """Yield the changes of every edit between two versions."""

        yield from self._history[start_version:end_version]

    def insert(self, position: int, text: str) -> TextSnapshot:
        """Insert ``text`` at ``position`` and return the new snapshot."""

        return self.apply([TextChange(position, 0, text)])

    def delete(self, span: Span) -> TextSnapshot:
        """Delete the characters covered by ``span``."""

        return self.apply([TextChange(span.start, span.length)])

    def replace(self, span: Span, text: str) -> TextSnapshot:
        """Replace the characters covered by ``span`` with ``text``."""

        return self.apply([TextChange(span.start, span.length, text)])

    def apply(self, changes: Iterable[TextChange]) -> TextSnapshot:
        """Apply non-overlapping ``changes`` as one edit and notify observers.

        Args:
            changes: Replacements expressed in current-snapshot coordinates.

        Returns:
            TextSnapshot: Snapshot produced by the edit.

        Raises:
            InvalidArgumentError: If a change falls outside the snapshot or two
                changes overlap.
        """

        ordered = tuple(sorted(changes, key=lambda change: change.position))
        self._validate(ordered)
        before = self._current
        text = before.text
        for change in reversed(ordered):
            text = text[: change.position] + change.new_text + text[change.position + change.old_length :]
        after = TextSnapshot(before.version + 1, text)
        self._history.append(ordered)
        self._current = after
        edit = TextEdit(before=before, after=after, changes=ordered)
        for observer in tuple(self._observers):
            observer(edit)
        return after

    def _validate(self, changes: Sequence[TextChange]) -> None:
        limit = self._current.length
        previous_end = -1
        for change in changes:
            if change.position + change.old_length > limit:
                raise InvalidArgumentError("changes", f"change at {change.position} exceeds buffer length {limit}")
            if change.position < previous_end:
                raise InvalidArgumentError("changes", "changes within one edit must not overlap")
            previous_end = change.position + change.old_length


__all__ = ["TextBuffer", "TextEdit", "TextSnapshot"]
