# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Annotation registry and session bookkeeping."""

from __future__ import annotations

from .registry import (
    Annotation,
    AnnotationAdded,
    AnnotationEvent,
    AnnotationListener,
    AnnotationRegistry,
    AnnotationRemoved,
)
from .sessions import RegistrySessions

__all__ = [
    "Annotation",
    "AnnotationAdded",
    "AnnotationEvent",
    "AnnotationListener",
    "AnnotationRegistry",
    "AnnotationRemoved",
    "RegistrySessions",
]
