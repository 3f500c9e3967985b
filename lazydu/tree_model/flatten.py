"""Projection of the node tree into the list of rows currently visible."""

from __future__ import annotations

from .types import DuNode, SortKey


def sort_children(node: DuNode, sort_key: SortKey, descending: bool = False) -> None:
    """Reorder ``node.children`` in place by size or name."""
    if sort_key is SortKey.SIZE:
        node.children.sort(key=lambda child: child.size, reverse=descending)
    else:
        node.children.sort(key=lambda child: child.name, reverse=descending)


def flatten(
    root: DuNode,
    sort_key: SortKey | None = None,
    descending: bool = False,
    threshold: int = 0,
) -> list[DuNode]:
    """Return visible nodes in pre-order, root first.

    Children of open nodes are listed unless smaller than ``threshold``, in
    which case their whole subtree is hidden. When ``sort_key`` is set, the
    children of every visited node are re-sorted in place first.
    """
    rows: list[DuNode] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if sort_key is not None:
            sort_children(node, sort_key, descending)
        rows.append(node)
        if not node.open:
            continue
        visible = [child for child in node.children if child.size >= threshold]
        stack.extend(reversed(visible))
    return rows


def open_all(root: DuNode) -> None:
    """Mark every node that has children as open."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.children:
            node.open = True
            stack.extend(node.children)


def row_index(rows: list[DuNode], node: DuNode) -> int | None:
    """Return the row index of ``node`` (by identity), or ``None`` if hidden."""
    for idx, row in enumerate(rows):
        if row is node:
            return idx
    return None
