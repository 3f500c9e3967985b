"""Tree-model creation, row projection, and row formatting.

Defines ``DuNode`` and builds it from reversed ``du`` output.
``flatten`` turns open/threshold/sort state into visible rows.
"""

from __future__ import annotations

from .build import (
    DEFAULT_ABSOLUTE_THRESHOLD,
    DEFAULT_RELATIVE_THRESHOLD,
    build_tree,
    child_segment,
    effective_threshold,
    parse_entry,
    resolve_parent,
)
from .flatten import flatten, open_all, row_index, sort_children
from .rendering import display_name, format_tree_row, node_marker, size_column_width
from .types import DuNode, DuTree, SortKey

__all__ = [
    "DuNode",
    "DuTree",
    "SortKey",
    "DEFAULT_ABSOLUTE_THRESHOLD",
    "DEFAULT_RELATIVE_THRESHOLD",
    "build_tree",
    "child_segment",
    "effective_threshold",
    "parse_entry",
    "resolve_parent",
    "flatten",
    "open_all",
    "row_index",
    "sort_children",
    "display_name",
    "format_tree_row",
    "node_marker",
    "size_column_width",
]
