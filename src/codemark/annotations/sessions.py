# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Host-owned mapping from editor sessions to annotation registries."""

from __future__ import annotations

import logging
from collections.abc import Hashable

from ..interfaces import TextBufferLike
from .registry import AnnotationRegistry

LOGGER = logging.getLogger(__name__)


class RegistrySessions:
    """Keep exactly one :class:`AnnotationRegistry` per view or session key."""

    def __init__(self) -> None:
        self._registries: dict[Hashable, AnnotationRegistry] = {}

    def get_or_create(self, key: Hashable, buffer: TextBufferLike | None) -> AnnotationRegistry:
        """Return the registry for ``key``, attaching a new one to ``buffer`` on first use.

        Args:
            key: Identity of the view or session owning the registry.
            buffer: Buffer the registry should follow when it is created.

        Returns:
            AnnotationRegistry: Existing or newly attached registry.
        """

        registry = self._registries.get(key)
        if registry is None:
            registry = AnnotationRegistry.attach(buffer)
            self._registries[key] = registry
            LOGGER.debug("created annotation registry for session %r", key)
        return registry

    def get(self, key: Hashable) -> AnnotationRegistry | None:
        """Return the registry for ``key`` when one exists."""

        return self._registries.get(key)

    def close(self, key: Hashable) -> None:
        """Detach and forget the registry for ``key``; unknown keys are ignored."""

        registry = self._registries.pop(key, None)
        if registry is not None:
            registry.detach()
            LOGGER.debug("closed annotation registry for session %r", key)

    def close_all(self) -> None:
        """Detach and forget every registry."""

        for key in list(self._registries):
            self.close(key)

    def __contains__(self, key: object) -> bool:
        return key in self._registries

    def __len__(self) -> int:
        return len(self._registries)


__all__ = ["RegistrySessions"]
