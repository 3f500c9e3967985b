"""Main interactive event loop for the browser.

Each iteration fits the page to the terminal, redraws when something
changed, then reads and fully applies one key before reading the next.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable

from ..input import KeyReader, NormalKeyHandler, handle_threshold_key
from ..render import RenderContext, content_rows, render_browser
from ..state import AppState
from ..ui_theme import DEFAULT_THEME, UITheme
from .controller import BrowserController
from .terminal import TerminalController

POLL_TIMEOUT_MS = 250


def render_context_for(state: AppState, width: int, height: int, theme: UITheme) -> RenderContext:
    """Snapshot the parts of ``state`` the renderer needs."""
    return RenderContext(
        rows=state.rows,
        root=state.root,
        top=state.top,
        cursor=state.cursor,
        width=width,
        height=height,
        sort_key=state.sort_key,
        sort_descending=state.sort_descending,
        threshold=state.threshold,
        size_format=state.size_format,
        threshold_editing=state.threshold_editing,
        threshold_input=state.threshold_input,
        theme=theme,
    )


def run_main_loop(
    state: AppState,
    terminal: TerminalController,
    key_reader: KeyReader,
    theme: UITheme = DEFAULT_THEME,
    render: Callable[[RenderContext], None] = render_browser,
    poll_timeout_ms: int = POLL_TIMEOUT_MS,
) -> None:
    """Run the browser until a quit key is pressed.

    A terminal resize only changes the page size and triggers a redraw; it
    never touches cursor, sort, threshold or open flags.
    """
    controller = BrowserController(state)
    normal_keys = NormalKeyHandler(controller)
    last_size: tuple[int, int] | None = None

    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                state.dirty = True
            state.page_rows = content_rows(term.lines)
            controller.scroll_into_view()

            if state.dirty:
                render(render_context_for(state, term.columns, term.lines, theme))
                state.dirty = False

            key = key_reader.read_key(timeout_ms=poll_timeout_ms)
            if not key:
                continue
            if state.threshold_editing:
                handle_threshold_key(key, controller)
                continue
            if normal_keys.handle(key):
                return
