# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the text, RTF, HTML and ANSI serializers."""

from __future__ import annotations

import pytest

from codemark.buffer import TextBuffer
from codemark.config import ThemeConfig
from codemark.errors import InvalidArgumentError, NoActiveViewError, PreconditionError
from codemark.export import (
    EditorView,
    ExportFormat,
    copy_with_line_numbers,
    escape_rtf,
    line_prefix,
    render,
    render_ansi,
    render_html,
    render_rtf,
    render_text,
    rtf_header,
)
from codemark.highlight import DEFAULT_KEYWORDS, highlight
from codemark.spans import Span


def test_line_prefix_right_aligns_numbers() -> None:
    assert line_prefix(7) == "   7:    "
    assert line_prefix(12345) == "12345:    "


def test_render_text_numbers_lines_from_first_line() -> None:
    assert render_text(["let x = 1", ""], first_line=9) == "  10:    let x = 1\n  11:    \n"


def test_rtf_header_carries_colour_table() -> None:
    header = rtf_header(ThemeConfig())
    assert header.startswith("{\\rtf1\\ansi\\ansicpg1252")
    assert "Courier New" in header
    assert "{\\colortbl ;\\red163\\green21\\blue21;\\red34\\green177\\blue76;\\red63\\green72\\blue204;}" in header


def test_render_rtf_maps_token_kinds_to_colour_indices() -> None:
    lines = highlight(['let s = "a b" // done'], DEFAULT_KEYWORDS)
    document = render_rtf(lines)
    body = document[len(rtf_header(ThemeConfig())) :]
    assert body == (
        '   1:    \\cf3 let \\cf0 s \\cf0 = \\cf1 "a \\cf1 b" \\cf2 // \\cf2 done \\line\n\\par}\n'
    )


def test_render_rtf_writes_space_tokens_bare() -> None:
    document = render_rtf(highlight(["a  b"], set()))
    assert "\\cf0 a  \\cf0 b \\line\n" in document


def test_render_rtf_uses_theme_colours() -> None:
    theme = ThemeConfig(rtf_keyword=(1, 2, 3))
    assert "\\red1\\green2\\blue3;" in render_rtf([], theme)


def test_escape_rtf_handles_control_and_unicode_characters() -> None:
    assert escape_rtf("{a\\b}") == "\\{a\\\\b\\}"
    assert escape_rtf("é") == "\\u233?"
    assert escape_rtf("\u4e2d") == "\\u20013?"
    assert escape_rtf("😀") == "\\u-10179?\\u-8704?"


def test_render_html_escapes_and_classes_tokens() -> None:
    document = render_html(highlight(['if a < b then "x"'], DEFAULT_KEYWORDS))
    assert document.startswith('<pre class="codemark">')
    assert '<span class="cm-keyword">if</span>' in document
    assert "a &lt; b" in document
    assert '<span class="cm-string">&quot;x&quot;</span>' in document


def test_render_ansi_styles_tokens_from_theme() -> None:
    theme = ThemeConfig(keyword="bold red")
    (text,) = render_ansi(highlight(["let x"], {"let"}), theme)
    assert text.plain == "   1:    let x"
    styles = {str(span.style) for span in text.spans}
    assert "bold red" in styles


def test_render_dispatches_by_format() -> None:
    lines = ["let x = 1"]
    assert render(ExportFormat.TEXT, lines, DEFAULT_KEYWORDS) == "   1:    let x = 1\n"
    assert render(ExportFormat.RTF, lines, DEFAULT_KEYWORDS).endswith("\\par}\n")
    assert render(ExportFormat.HTML, lines, DEFAULT_KEYWORDS).startswith("<pre")
    ansi = render(ExportFormat.ANSI, lines, DEFAULT_KEYWORDS)
    assert "\x1b[" in ansi
    assert "let" in ansi


def test_render_requires_keywords() -> None:
    with pytest.raises(InvalidArgumentError):
        render(ExportFormat.TEXT, ["x"], None)


def test_copy_with_line_numbers_covers_selected_lines() -> None:
    buffer = TextBuffer("module M\nlet x = 1\nlet y = 2\n")
    view = EditorView(buffer=buffer, selection=Span(12, 14))
    payload = copy_with_line_numbers(view)
    assert payload is not None
    assert payload.text == "   2:    let x = 1\n"
    assert (payload.first_line, payload.last_line) == (1, 1)
    assert "\\cf3 let" in payload.rtf


def test_copy_with_line_numbers_spans_multiple_lines() -> None:
    buffer = TextBuffer("module M\nlet x = 1\nlet y = 2\n")
    payload = copy_with_line_numbers(EditorView(buffer=buffer, selection=Span(0, 12)))
    assert payload is not None
    assert payload.text.splitlines() == ["   1:    module M", "   2:    let x = 1"]
    assert payload.rtf.count("\\line\n") == 2


def test_copy_without_selection_returns_none() -> None:
    assert copy_with_line_numbers(EditorView(buffer=TextBuffer("x"))) is None


def test_copy_without_view_reports_precondition_failure() -> None:
    with pytest.raises(NoActiveViewError) as excinfo:
        copy_with_line_numbers(None)
    assert isinstance(excinfo.value, PreconditionError)
    assert "No text view" in str(excinfo.value)
