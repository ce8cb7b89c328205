# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, argument parsing)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from ..config import CodemarkConfig, load_config, load_config_file
from ..errors import CodemarkError
from ..logging import fail as core_fail
from ..logging import ok as core_ok


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    use_emoji: bool

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences."""

        core_fail(message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        """Log a success message honouring emoji preferences."""

        core_ok(message, use_emoji=self.use_emoji)

    def echo(self, message: str, *, nl: bool = True) -> None:
        """Write ``message`` to stdout using Typer's echo helper."""

        typer.echo(message, nl=nl)


def build_cli_logger(*, emoji: bool) -> CLILogger:
    """Return a :class:`CLILogger` honouring the emoji preference."""

    return CLILogger(use_emoji=emoji)


def parse_line_range(raw: str | None, line_count: int) -> tuple[int, int]:
    """Convert a one-based inclusive ``A:B`` range into zero-based bounds.

    Either side may be omitted (``:5``, ``3:``); ``None`` selects every line.

    Args:
        raw: Range expression supplied on the command line.
        line_count: Number of lines in the source document.

    Returns:
        tuple[int, int]: Zero-based first and last line, inclusive.

    Raises:
        typer.BadParameter: If the expression is malformed or out of range.
    """

    if raw is None:
        return 0, line_count - 1
    head, sep, tail = raw.partition(":")
    try:
        first = int(head) if head.strip() else 1
        last = int(tail) if sep and tail.strip() else (line_count if sep else first)
    except ValueError as exc:
        raise typer.BadParameter(f"expected A:B line range, got {raw!r}", param_hint="--lines") from exc
    if first < 1 or last < first or last > line_count:
        raise typer.BadParameter(
            f"line range {raw!r} must satisfy 1 <= A <= B <= {line_count}",
            param_hint="--lines",
        )
    return first - 1, last - 1


def resolve_config(config_path: Path | None, root: Path) -> CodemarkConfig:
    """Load configuration from ``config_path`` or ``root/pyproject.toml``.

    Raises:
        CLIError: If the configuration cannot be loaded.
    """

    try:
        if config_path is not None:
            return load_config_file(config_path)
        return load_config(root)
    except CodemarkError as exc:
        raise CLIError(str(exc)) from exc


__all__ = [
    "CLIError",
    "CLILogger",
    "build_cli_logger",
    "parse_line_range",
    "resolve_config",
]
