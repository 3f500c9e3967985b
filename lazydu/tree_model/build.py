"""Tree construction from reversed ``du`` output.

``du`` prints a directory after everything below it, so reading its output
backwards meets every parent before any of its children. Each kept line is
attached under the nearest ancestor of the previously created node whose path
it extends by exactly one segment.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from ..errors import FormatError
from .types import DuNode, DuTree

logger = logging.getLogger(__name__)

DEFAULT_RELATIVE_THRESHOLD = 0.0002
DEFAULT_ABSOLUTE_THRESHOLD = 0
PROGRESS_EVERY = 50_000
PATH_SEPARATOR = "/"

_ENTRY_RE = re.compile(r"^(\d+)\s+(.*?)/?$")
_LEADING_SIZE_RE = re.compile(r"^\s*(\d+)")


def parse_entry(line: str) -> tuple[int, str] | None:
    """Split ``<size><whitespace><path>[/]`` into ``(size, path)``.

    Returns ``None`` when the line does not follow that grammar.
    """
    match = _ENTRY_RE.match(line.rstrip("\r\n"))
    if match is None:
        return None
    return int(match.group(1)), match.group(2).strip()


def leading_size(line: str) -> int:
    """Return the integer a line starts with, or 0 when it has none."""
    match = _LEADING_SIZE_RE.match(line)
    return int(match.group(1)) if match else 0


def effective_threshold(root_size: int, relative_threshold: float, absolute_threshold: int) -> int:
    """Combine relative and absolute cutoffs into one minimum size."""
    return max(int(relative_threshold * root_size), absolute_threshold)


def child_segment(parent_path: str, path: str) -> str | None:
    """Return the one path segment ``path`` adds below ``parent_path``.

    ``None`` means ``path`` is not a direct child of ``parent_path``.
    """
    if not path.startswith(parent_path):
        return None
    rest = path[len(parent_path):]
    if len(rest) < 2 or rest[0] != PATH_SEPARATOR:
        return None
    segment = rest[1:]
    if PATH_SEPARATOR in segment:
        return None
    return segment


def resolve_parent(current: DuNode, path: str) -> tuple[DuNode, str] | None:
    """Walk up from ``current`` to the node ``path`` is a direct child of.

    Returns the matched ancestor (``current`` included) and the new segment,
    or ``None`` once the walk has gone past the root without a match.
    """
    node: DuNode | None = current
    while node is not None:
        segment = child_segment(node.full_name, path)
        if segment is not None:
            return node, segment
        node = node.parent
    return None


def _restore_newest_first(root: DuNode) -> None:
    """Reverse every child list; the pass appends, the model wants newest first."""
    stack = [root]
    while stack:
        node = stack.pop()
        node.children.reverse()
        stack.extend(node.children)


def build_tree(
    lines: Iterable[str],
    relative_threshold: float = DEFAULT_RELATIVE_THRESHOLD,
    absolute_threshold: int = DEFAULT_ABSOLUTE_THRESHOLD,
    progress_every: int = PROGRESS_EVERY,
) -> DuTree:
    """Build the node tree from lines in reversed ``du`` order.

    The first line is the root and fixes the effective threshold. Later
    lines smaller than that threshold are dropped before any path matching.
    Raises ``FormatError`` on the first unparsable kept line or on a path
    that no ancestor of the current node can own; no partial tree is
    returned.
    """
    root: DuNode | None = None
    current: DuNode | None = None
    threshold = 0
    node_count = 0
    line_number = 0

    for line in lines:
        line_number += 1
        if progress_every > 0 and line_number % progress_every == 0:
            logger.info("%d lines read, %d nodes created", line_number, node_count)

        if root is None:
            entry = parse_entry(line)
            if entry is None:
                raise FormatError(line_number, line, "expected '<size> <path>'")
            size, path = entry
            root = current = DuNode(path, size)
            node_count = 1
            threshold = effective_threshold(size, relative_threshold, absolute_threshold)
            logger.debug("root %r size=%d threshold=%d", path, size, threshold)
            continue

        if leading_size(line) < threshold:
            continue

        entry = parse_entry(line)
        if entry is None:
            raise FormatError(line_number, line, "expected '<size> <path>'")
        size, path = entry

        resolved = resolve_parent(current, path)
        if resolved is None:
            raise FormatError(line_number, line, "path has no parent entry")
        parent, segment = resolved

        current = DuNode(PATH_SEPARATOR + segment, size, parent)
        parent.children.append(current)
        node_count += 1

    if root is None:
        raise FormatError(0, "", "input is empty")

    _restore_newest_first(root)
    root.open = True
    logger.info("%d lines read, %d nodes created (threshold %d)", line_number, node_count, threshold)
    return DuTree(root=root, threshold=threshold, node_count=node_count)
