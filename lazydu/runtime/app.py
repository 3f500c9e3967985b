"""Browser session bootstrap.

Turns a built tree plus display options into ``AppState`` and hands it to
the event loop with the terminal owned for exactly the loop's lifetime.
"""

from __future__ import annotations

import sys

from ..input import KeyReader
from ..size_format import SizeFormat
from ..tree_model import DuTree, SortKey
from ..ui_theme import UITheme, resolve_theme
from .controller import initial_state
from .loop import run_main_loop
from .terminal import TerminalController

DEFAULT_VIEW_THRESHOLD = 1


def run_browser(
    tree: DuTree,
    size_format: SizeFormat = SizeFormat.COMMAS,
    sort_key: SortKey | None = None,
    theme: UITheme | None = None,
    view_threshold: int = DEFAULT_VIEW_THRESHOLD,
) -> None:
    """Browse ``tree`` interactively until the user quits."""
    state = initial_state(
        tree.root,
        tree.threshold,
        threshold=view_threshold,
        sort_key=sort_key,
        size_format=size_format,
    )
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    run_main_loop(state, terminal, KeyReader(stdin_fd), theme=theme or resolve_theme(None))
