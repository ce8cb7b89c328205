# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point for exporting highlighted source excerpts."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from ..buffer import TextBuffer, TextSnapshot
from ..console import get_console_manager
from ..errors import CodemarkError
from ..export.formats import ExportFormat, render
from ..highlight.scanner import highlight
from .shared import CLIError, build_cli_logger, parse_line_range, resolve_config

app = typer.Typer(
    name="codemark",
    help="Highlight and export numbered source excerpts.",
    no_args_is_help=True,
    add_completion=False,
)

PathArgument = Annotated[
    Path,
    typer.Argument(exists=True, dir_okay=False, readable=True, help="Source file to read."),
]
LinesOption = Annotated[
    str | None,
    typer.Option("--lines", "-l", help="One-based inclusive line range, e.g. 3:10."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="TOML file overriding [tool.codemark] from pyproject.toml."),
]
EmojiOption = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji in status messages.")]


def _load_snapshot(path: Path) -> TextSnapshot:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CLIError(f"Failed to read {path}: {exc}") from exc
    return TextBuffer(text).current


@app.command("export")
def export_command(
    path: PathArgument,
    lines: LinesOption = None,
    export_format: Annotated[
        ExportFormat | None,
        typer.Option("--format", "-f", case_sensitive=False, help="Output format."),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", dir_okay=False, help="Write to this file instead of stdout."),
    ] = None,
    keyword: Annotated[
        list[str] | None,
        typer.Option("--keyword", "-k", help="Additional keyword to highlight (repeatable)."),
    ] = None,
    config: ConfigOption = None,
    emoji: EmojiOption = True,
) -> None:
    """Render a range of lines from PATH with line numbers."""

    logger = build_cli_logger(emoji=emoji)
    try:
        cfg = resolve_config(config, Path.cwd())
        snapshot = _load_snapshot(path)
        first, last = parse_line_range(lines, snapshot.line_count)
        keywords = cfg.highlight.effective_keywords() | frozenset(keyword or ())
        chosen = export_format or ExportFormat(cfg.default_format)
        document = render(
            chosen,
            snapshot.lines(first, last),
            keywords,
            first_line=first,
            theme=cfg.theme,
        )
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    except CodemarkError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc

    if output is None:
        logger.echo(document, nl=False)
        return
    try:
        output.write_text(document, encoding="utf-8")
    except OSError as exc:
        logger.fail(f"Failed to write {output}: {exc}")
        raise typer.Exit(code=1) from exc
    logger.ok(f"Wrote lines {first + 1}-{last + 1} of {path} as {chosen.value} to {output}")


@app.command("tokens")
def tokens_command(
    path: PathArgument,
    lines: LinesOption = None,
    config: ConfigOption = None,
    color: Annotated[bool, typer.Option("--color/--no-color", help="Toggle coloured output.")] = True,
    emoji: EmojiOption = True,
) -> None:
    """Print the token classification of each line in PATH."""

    logger = build_cli_logger(emoji=emoji)
    try:
        cfg = resolve_config(config, Path.cwd())
        snapshot = _load_snapshot(path)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    first, last = parse_line_range(lines, snapshot.line_count)

    table = Table(title=str(path))
    table.add_column("Line", justify="right")
    table.add_column("Token")
    table.add_column("Kind")
    for row in highlight(snapshot.lines(first, last), cfg.highlight.effective_keywords(), first_line=first):
        for token in row.tokens:
            table.add_row(str(row.number), repr(token.text), token.kind.value, style=cfg.theme.style_for(token.kind))
    get_console_manager().get(color=color, emoji=emoji).print(table)


__all__ = ["app"]
