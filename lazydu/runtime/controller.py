"""State transitions for the interactive browser.

Every operation mutates ``AppState`` and, when visibility may have changed,
re-flattens the whole tree instead of patching ``state.rows``.
"""

from __future__ import annotations

import logging

from ..size_format import SizeFormat
from ..state import AppState
from ..tree_model import DuNode, SortKey, flatten, row_index

logger = logging.getLogger(__name__)

DEFAULT_SORT_DESCENDING: dict[SortKey, bool] = {
    SortKey.SIZE: True,
    SortKey.NAME: False,
}


class BrowserController:
    """Maps browser actions onto cursor, sort, threshold and open-flag changes."""

    def __init__(self, state: AppState) -> None:
        self.state = state

    def refresh(self, keep: DuNode | None = None) -> None:
        """Re-flatten rows; optionally keep ``keep`` (or its nearest visible ancestor) selected."""
        state = self.state
        state.rows = flatten(state.root, state.sort_key, state.sort_descending, state.threshold)
        if keep is not None:
            for candidate in (keep, *keep.ancestors()):
                idx = row_index(state.rows, candidate)
                if idx is not None:
                    state.cursor = idx
                    break
        self._clamp_cursor()
        state.dirty = True

    def _clamp_cursor(self) -> None:
        state = self.state
        state.cursor = max(0, min(state.cursor, len(state.rows) - 1))

    def move(self, delta: int) -> bool:
        state = self.state
        previous = state.cursor
        state.cursor += delta
        self._clamp_cursor()
        if state.cursor == previous:
            return False
        state.dirty = True
        return True

    def page(self, direction: int) -> bool:
        return self.move(direction * max(1, self.state.page_rows))

    def move_to_top(self) -> bool:
        return self.move(-self.state.cursor)

    def move_to_bottom(self) -> bool:
        return self.move(len(self.state.rows) - 1 - self.state.cursor)

    def expand(self) -> bool:
        node = self.state.selected
        if not node.has_children or node.open:
            return False
        node.open = True
        self.refresh()
        return True

    def collapse_or_ascend(self) -> bool:
        state = self.state
        node = state.selected
        if node.open:
            node.open = False
            self.refresh()
            return True
        if node.parent is None:
            return False
        idx = row_index(state.rows, node.parent)
        if idx is None:
            return False
        state.cursor = idx
        state.dirty = True
        return True

    def cycle_sort(self, sort_key: SortKey) -> None:
        """Select ``sort_key``; choosing the active key again flips direction."""
        state = self.state
        if state.sort_key is sort_key:
            state.sort_descending = not state.sort_descending
        else:
            state.sort_key = sort_key
            state.sort_descending = DEFAULT_SORT_DESCENDING[sort_key]
        logger.debug("sort=%s descending=%s", sort_key.value, state.sort_descending)
        self.refresh(keep=state.selected)

    def set_threshold(self, value: int) -> None:
        state = self.state
        state.threshold = max(0, int(value))
        logger.debug("view threshold=%d", state.threshold)
        self.refresh(keep=state.selected)

    def toggle_size_format(self) -> None:
        state = self.state
        state.size_format = state.size_format.toggled()
        state.dirty = True

    def begin_threshold_edit(self) -> None:
        state = self.state
        state.threshold_editing = True
        state.threshold_input = ""
        state.dirty = True

    def edit_threshold_input(self, text: str) -> None:
        state = self.state
        state.threshold_input = "".join(ch for ch in text if ch.isdigit())
        state.dirty = True

    def commit_threshold_edit(self) -> None:
        state = self.state
        text = state.threshold_input
        state.threshold_editing = False
        state.threshold_input = ""
        self.set_threshold(int(text) if text else 0)

    def cancel_threshold_edit(self) -> None:
        state = self.state
        state.threshold_editing = False
        state.threshold_input = ""
        state.dirty = True

    def scroll_into_view(self) -> None:
        """Move ``state.top`` so the cursor row sits inside the page."""
        state = self.state
        rows = max(1, state.page_rows)
        previous = state.top
        if state.cursor < state.top:
            state.top = state.cursor
        elif state.cursor >= state.top + rows:
            state.top = state.cursor - rows + 1
        state.top = max(0, min(state.top, max(0, len(state.rows) - rows)))
        if state.top != previous:
            state.dirty = True


def initial_state(
    root: DuNode,
    build_threshold: int,
    threshold: int = 1,
    sort_key: SortKey | None = None,
    size_format: SizeFormat = SizeFormat.COMMAS,
) -> AppState:
    """Create browser state for ``root`` with rows already flattened."""
    state = AppState(
        root=root,
        build_threshold=build_threshold,
        threshold=max(0, threshold),
        sort_key=sort_key,
        sort_descending=DEFAULT_SORT_DESCENDING[sort_key] if sort_key is not None else False,
        size_format=size_format,
    )
    BrowserController(state).refresh()
    return state
