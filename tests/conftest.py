# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from codemark.annotations import AnnotationEvent, AnnotationRegistry
from codemark.buffer import TextBuffer

SAMPLE_TEXT = "let x = 1\nlet y = 2\n// done\n"


@pytest.fixture
def buffer() -> TextBuffer:
    """Return a buffer holding three short lines."""
    return TextBuffer(SAMPLE_TEXT)


@pytest.fixture
def registry(buffer: TextBuffer) -> Iterator[AnnotationRegistry]:
    """Return a registry attached to ``buffer`` and detach it afterwards."""
    registry = AnnotationRegistry.attach(buffer)
    yield registry
    registry.detach()


@pytest.fixture
def events(registry: AnnotationRegistry) -> list[AnnotationEvent]:
    """Record every event raised by ``registry``."""
    recorded: list[AnnotationEvent] = []
    registry.subscribe(recorded.append)
    return recorded
