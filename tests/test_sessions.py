# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the per-session registry mapping."""

from __future__ import annotations

import pytest

from codemark.annotations import RegistrySessions
from codemark.buffer import TextBuffer
from codemark.errors import InvalidArgumentError


def test_get_or_create_returns_same_registry_per_key() -> None:
    sessions = RegistrySessions()
    buffer = TextBuffer("abc")
    first = sessions.get_or_create("view-1", buffer)
    again = sessions.get_or_create("view-1", buffer)
    other = sessions.get_or_create("view-2", TextBuffer("xyz"))
    assert first is again
    assert other is not first
    assert len(sessions) == 2
    assert "view-1" in sessions
    assert sessions.get("missing") is None


def test_close_detaches_and_forgets() -> None:
    sessions = RegistrySessions()
    buffer = TextBuffer("abc")
    registry = sessions.get_or_create("view", buffer)
    sessions.close("view")
    sessions.close("view")
    assert not registry.is_attached
    assert buffer.observer_count == 0
    assert "view" not in sessions


def test_close_all_detaches_every_registry() -> None:
    sessions = RegistrySessions()
    registries = [sessions.get_or_create(index, TextBuffer("abc")) for index in range(3)]
    sessions.close_all()
    assert len(sessions) == 0
    assert all(not registry.is_attached for registry in registries)


def test_missing_buffer_is_rejected() -> None:
    sessions = RegistrySessions()
    with pytest.raises(InvalidArgumentError):
        sessions.get_or_create("view", None)
    assert len(sessions) == 0
