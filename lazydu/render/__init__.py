"""Rendering for the browser screen.

Builds a full ANSI frame from the current rows and writes it in one call.
Frame building never mutates state; the caller owns scrolling.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from ..ansi import clip_ansi_line, display_width
from ..size_format import SizeFormat, format_commas
from ..tree_model import DuNode, SortKey, format_tree_row, size_column_width
from ..ui_theme import DEFAULT_THEME, UITheme
from .help import THRESHOLD_PROMPT, footer_help_line

FOOTER_ROWS = 2


@dataclass
class RenderContext:
    rows: list[DuNode]
    root: DuNode
    top: int
    cursor: int
    width: int
    height: int
    sort_key: SortKey | None
    sort_descending: bool
    threshold: int
    size_format: SizeFormat
    threshold_editing: bool = False
    threshold_input: str = ""
    theme: UITheme = DEFAULT_THEME


def content_rows(height: int) -> int:
    """Return how many tree rows fit above the footer."""
    return max(1, height - FOOTER_ROWS)


def selected_with_ansi(text: str) -> str:
    """Apply selection styling without discarding existing ANSI colors."""
    if not text:
        return text

    # Keep reverse video active even when the text contains internal resets.
    return "\033[7m" + text.replace("\033[0m", "\033[0;7m") + "\033[0m"


def build_status_line(left_text: str, width: int, right_text: str = "") -> str:
    usable = max(1, width - 1)
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1)
    left = left_text[:left_limit]
    gap = " " * (usable - len(left) - len(right_text))
    return f"{left}{gap}{right_text}"


def describe_sort(sort_key: SortKey | None, descending: bool) -> str:
    if sort_key is None:
        return "none"
    arrow = "↓" if descending else "↑"
    return f"{sort_key.value} {arrow}"


def status_text(context: RenderContext) -> str:
    """Return the plain-text left part of the status row."""
    if context.threshold_editing:
        return f"{THRESHOLD_PROMPT}{context.threshold_input}_"
    return (
        f"Sort: {describe_sort(context.sort_key, context.sort_descending)}"
        f"   Threshold: {format_commas(context.threshold)}"
        f"   Sizes: {context.size_format.value}"
    )


def build_frame(context: RenderContext) -> str:
    """Compose one complete screen frame as a string of ANSI output."""
    theme = context.theme
    width = max(1, context.width)
    visible_rows = content_rows(context.height)
    size_width = size_column_width(context.root, context.size_format)

    out: list[str] = ["\033[H\033[J"]
    for screen_row in range(visible_rows):
        idx = context.top + screen_row
        if idx < len(context.rows):
            text = clip_ansi_line(
                format_tree_row(context.rows[idx], size_width, context.size_format, theme),
                width - 1,
            )
            if idx == context.cursor:
                padding = " " * max(0, width - 1 - display_width(text))
                text = selected_with_ansi(text + padding)
            out.append(text)
            if "\033" in text:
                out.append("\033[0m")
        out.append("\r\n")

    out.append(clip_ansi_line(footer_help_line(theme), width - 1))
    out.append("\033[0m")
    out.append("\r\n")

    position = f"{context.cursor + 1}/{len(context.rows)}" if context.rows else "0/0"
    status = build_status_line(status_text(context), width, position)
    if context.threshold_editing:
        out.append(f"{theme.prompt}{status}\033[0m")
    else:
        out.append(f"{theme.reverse}{status}\033[0m")
    return "".join(out)


def render_browser(context: RenderContext) -> None:
    """Write a full frame for ``context`` to stdout."""
    os.write(sys.stdout.fileno(), build_frame(context).encode("utf-8", errors="replace"))


def render_plain_tree(rows: list[DuNode], root: DuNode, size_format: SizeFormat, theme: UITheme) -> str:
    """Return ``rows`` as newline-terminated text for non-interactive output."""
    size_width = size_column_width(root, size_format)
    out: list[str] = []
    for node in rows:
        out.append(format_tree_row(node, size_width, size_format, theme))
        out.append("\n")
    return "".join(out)
