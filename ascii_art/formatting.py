#!/usr/bin/env python3
# ascii_art/formatting.py
"""
Presentation helpers for render output.

The engine stops at text or (glyph, r, g, b) cells. This module turns those
into prompt_toolkit style runs, raw ANSI truecolor, or a standalone HTML page,
and writes exports to disk.
"""

from __future__ import annotations

import html
import os
from typing import List, Sequence, Tuple

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText

from ascii_art.rendering.ramp_mode import ColorRow

StyleRun = Tuple[str, str]                # (style, text)
LineFrag = List[StyleRun]                 # one row as runs
FrameFrag = List[LineFrag]                # all rows

__all__ = [
    "StyleRun",
    "LineFrag",
    "FrameFrag",
    "rgb_to_style",
    "to_style_runs",
    "to_formatted_text",
    "to_ansi",
    "to_plain",
    "to_html_spans",
    "to_html_document",
    "print_color",
    "export_text",
    "export_html",
]

HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{title}</title>
    <style>
        body {{
            background: #000;
            color: #0f0;
            font-family: 'Courier New', monospace;
            font-size: 12px;
            line-height: 1;
            white-space: pre;
            padding: 20px;
        }}
    </style>
</head>
<body>{body}</body>
</html>
"""


def rgb_to_style(r: int, g: int, b: int) -> str:
    # prompt_toolkit accepts "fg:#RRGGBB"
    return f"fg:#{r:02x}{g:02x}{b:02x}"


def to_style_runs(rows: Sequence[ColorRow]) -> FrameFrag:
    """Merge neighbouring cells that share a colour into single runs."""
    frame: FrameFrag = []
    for row in rows:
        line: LineFrag = []
        run_style = None
        run_text: List[str] = []
        for cell in row:
            style = rgb_to_style(cell.r, cell.g, cell.b)
            if style != run_style and run_text:
                line.append((run_style, "".join(run_text)))
                run_text = []
            run_style = style
            run_text.append(cell.glyph)
        if run_text:
            line.append((run_style, "".join(run_text)))
        frame.append(line if line else [("", "")])
    return frame


def to_formatted_text(rows: Sequence[ColorRow]) -> FormattedText:
    fragments: List[StyleRun] = []
    for line in to_style_runs(rows):
        fragments.extend(line)
        fragments.append(("", "\n"))
    return FormattedText(fragments)


def to_ansi(rows: Sequence[ColorRow]) -> str:
    """24-bit ANSI escapes, emitted only when the colour changes."""
    lines = []
    for row in rows:
        parts = []
        last = None
        for cell in row:
            color = (cell.r, cell.g, cell.b)
            if color != last:
                parts.append(f"\033[38;2;{cell.r};{cell.g};{cell.b}m")
                last = color
            parts.append(cell.glyph)
        parts.append("\033[0m\n")
        lines.append("".join(parts))
    return "".join(lines)


def to_plain(rows: Sequence[ColorRow]) -> str:
    return "".join("".join(cell.glyph for cell in row) + "\n" for row in rows)


def to_html_spans(rows: Sequence[ColorRow]) -> str:
    """One span per cell, rows separated by newlines."""
    out = []
    for row in rows:
        for cell in row:
            out.append(f'<span style="color:rgb({cell.r},{cell.g},{cell.b})">{html.escape(cell.glyph, quote=False)}</span>')
        out.append("\n")
    return "".join(out)


def to_html_document(body: str, title: str = "ASCII Art") -> str:
    return HTML_TEMPLATE.format(title=html.escape(title), body=body)


def print_color(rows: Sequence[ColorRow]) -> None:
    print_formatted_text(to_formatted_text(rows), end="")


def export_text(text: str, path: str) -> str:
    path = os.path.expanduser(path)
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    return path


def export_html(rows: Sequence[ColorRow], path: str, title: str = "ASCII Art") -> str:
    return export_text(to_html_document(to_html_spans(rows), title), path)
