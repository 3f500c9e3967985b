from __future__ import annotations

from dataclasses import dataclass, field

from .size_format import SizeFormat
from .tree_model import DuNode, SortKey


@dataclass
class AppState:
    root: DuNode
    build_threshold: int
    threshold: int
    rows: list[DuNode] = field(default_factory=list)
    cursor: int = 0
    top: int = 0
    page_rows: int = 20
    sort_key: SortKey | None = None
    sort_descending: bool = False
    size_format: SizeFormat = SizeFormat.COMMAS
    threshold_editing: bool = False
    threshold_input: str = ""
    dirty: bool = True

    @property
    def selected(self) -> DuNode:
        return self.rows[self.cursor]
