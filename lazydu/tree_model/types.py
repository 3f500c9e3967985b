"""Tree node and tree container types shared by builder, view model and renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SortKey(str, Enum):
    """Child ordering applied by ``flatten``."""

    SIZE = "size"
    NAME = "name"


@dataclass(eq=False)
class DuNode:
    """One ``du`` entry: a file or directory with its reported size.

    ``parent`` is a plain back reference used for path reconstruction and
    upward navigation; ownership runs top-down through ``children``. Nodes
    compare by identity.
    """

    name: str
    size: int
    parent: DuNode | None = field(default=None, repr=False)
    open: bool = False
    children: list[DuNode] = field(default_factory=list, repr=False)
    depth: int = field(init=False)
    full_name: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.parent is None:
            self.depth = 0
            self.full_name = self.name
        else:
            self.depth = self.parent.depth + 1
            self.full_name = self.parent.full_name + self.name

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    def add_child(self, child: DuNode) -> DuNode:
        """Attach ``child`` as the first (newest) entry of ``children``."""
        self.children.insert(0, child)
        return child

    def ancestors(self):
        """Yield parent, grandparent, ... up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent


@dataclass
class DuTree:
    """Result of a build: root node plus the threshold that shaped it."""

    root: DuNode
    threshold: int
    node_count: int
