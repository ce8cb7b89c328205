# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the codemark components."""

from __future__ import annotations


class CodemarkError(Exception):
    """Base class for every error raised by codemark."""


class InvalidArgumentError(CodemarkError, ValueError):
    """Raised when a caller passes a missing reference or an unusable span."""

    def __init__(self, argument: str, message: str | None = None) -> None:
        """Initialise the error with the offending argument name.

        Args:
            argument: Name of the parameter that failed validation.
            message: Optional human-readable explanation.
        """

        super().__init__(message or f"invalid argument: {argument}")
        self.argument = argument


class ReentrantMutationError(CodemarkError, RuntimeError):
    """Raised when a listener mutates a registry while it is dispatching."""


class PreconditionError(CodemarkError):
    """Raised at the host boundary when a required collaborator is unavailable."""


class NoActiveViewError(PreconditionError):
    """Raised when no editor view is open to act upon."""

    def __init__(self) -> None:
        super().__init__("No text view is currently open")


class ConfigError(CodemarkError):
    """Raised when configuration input is invalid."""


__all__ = [
    "CodemarkError",
    "ConfigError",
    "InvalidArgumentError",
    "NoActiveViewError",
    "PreconditionError",
    "ReentrantMutationError",
]
