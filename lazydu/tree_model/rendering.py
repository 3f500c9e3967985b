"""Formatting helpers for tree rows."""

from __future__ import annotations

from ..size_format import SizeFormat, format_size
from ..ui_theme import DEFAULT_THEME, UITheme
from .types import DuNode

MARKER_OPEN = "▾ "
MARKER_CLOSED = "▸ "
MARKER_LEAF = "  "
SIZE_GAP = "  "


def display_name(node: DuNode) -> str:
    """Return the row label: no leading separator, trailing ``/`` on directories."""
    name = node.name[1:] if node.name.startswith("/") else node.name
    if not name:
        name = "/"
    if node.has_children and not name.endswith("/"):
        name += "/"
    return name


def node_marker(node: DuNode) -> str:
    if not node.has_children:
        return MARKER_LEAF
    return MARKER_OPEN if node.open else MARKER_CLOSED


def size_column_width(root: DuNode, size_format: SizeFormat) -> int:
    """Width of the size column, taken from the root's formatted size."""
    return len(format_size(root.size, size_format))


def format_tree_row(
    node: DuNode,
    size_width: int,
    size_format: SizeFormat = SizeFormat.COMMAS,
    theme: UITheme | None = None,
) -> str:
    """Render one row as ANSI-styled display text."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    size_text = format_size(node.size, size_format).rjust(size_width)
    indent = "  " * node.depth
    name_color = active_theme.tree_dir if node.has_children else active_theme.tree_file
    return (
        f"{active_theme.tree_size}{size_text}{reset}{SIZE_GAP}{indent}"
        f"{active_theme.tree_marker}{node_marker(node)}{reset}"
        f"{name_color}{display_name(node)}{reset}"
    )
