# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for span primitives and edge-exclusive tracking."""

from __future__ import annotations

import pytest

from codemark.buffer import TextBuffer
from codemark.errors import InvalidArgumentError
from codemark.spans import Span, TextChange, map_span


def test_span_rejects_inverted_and_negative_ranges() -> None:
    with pytest.raises(InvalidArgumentError):
        Span(5, 2)
    with pytest.raises(InvalidArgumentError):
        Span(-1, 2)


def test_adjacent_spans_do_not_overlap_but_intersect() -> None:
    left = Span(0, 4)
    right = Span(4, 8)
    assert not left.overlaps_with(right)
    assert not right.overlaps_with(left)
    assert left.intersects_with(right)


def test_overlap_requires_shared_character() -> None:
    assert Span(0, 5).overlaps_with(Span(4, 9))
    assert Span(2, 3).overlaps_with(Span(0, 10))
    assert not Span(3, 3).overlaps_with(Span(0, 10))


def test_from_length_and_contains() -> None:
    span = Span.from_length(3, 4)
    assert span == Span(3, 7)
    assert span.length == 4
    assert span.contains(3)
    assert not span.contains(7)


def test_insert_at_edges_is_not_absorbed() -> None:
    span = Span(4, 8)
    assert map_span(span, [TextChange(4, 0, "ab")]) == Span(6, 10)
    assert map_span(span, [TextChange(8, 0, "ab")]) == Span(4, 8)
    assert map_span(span, [TextChange(6, 0, "ab")]) == Span(4, 10)


def test_delete_covering_span_collapses_it() -> None:
    assert map_span(Span(4, 8), [TextChange(2, 8)]).length == 0
    assert map_span(Span(4, 8), [TextChange(4, 4)]).length == 0


def test_replacement_of_whole_span_collapses_it() -> None:
    assert map_span(Span(4, 8), [TextChange(4, 4, "wxyz")]).length == 0


def test_partial_delete_shrinks_span() -> None:
    assert map_span(Span(4, 8), [TextChange(6, 4)]) == Span(4, 6)
    assert map_span(Span(4, 8), [TextChange(2, 4)]) == Span(2, 4)


def test_multiple_changes_in_one_edit() -> None:
    changes = [TextChange(0, 0, "__"), TextChange(10, 2)]
    assert map_span(Span(4, 8), changes) == Span(6, 10)


def test_tracking_span_follows_buffer_history() -> None:
    buffer = TextBuffer("hello world")
    tracked = buffer.track_span(Span(6, 11))
    buffer.insert(0, ">> ")
    buffer.delete(Span(0, 1))
    assert tracked.get_span(buffer.current.version) == Span(8, 13)
    assert buffer.current.get_text(tracked.get_span(buffer.current.version)) == "world"


def test_tracking_span_cannot_map_backwards() -> None:
    buffer = TextBuffer("abc")
    buffer.insert(0, "x")
    tracked = buffer.track_span(Span(1, 2))
    with pytest.raises(InvalidArgumentError):
        tracked.get_span(0)


def test_tracking_span_replays_full_history() -> None:
    buffer = TextBuffer("target")
    tracked = buffer.track_span(Span(0, 6))
    for _ in range(50):
        buffer.insert(0, "+")
    assert buffer.current.get_text(tracked.get_span(buffer.current.version)) == "target"
    assert len(list(buffer.changes_between(0, buffer.current.version))) == 50
