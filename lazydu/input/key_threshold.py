"""Keyboard handling while the threshold prompt is open."""

from __future__ import annotations

from ..runtime.controller import BrowserController

COMMIT_KEYS = frozenset({"ENTER_CR", "ENTER_LF"})
CANCEL_KEYS = frozenset({"ESC", "CTRL_C"})


def handle_threshold_key(key: str, controller: BrowserController) -> None:
    """Edit, commit or cancel the pending threshold value.

    Only digits are accepted, so a committed value is always a
    non-negative integer (an empty prompt commits ``0``).
    """
    state = controller.state
    if key in COMMIT_KEYS:
        controller.commit_threshold_edit()
    elif key in CANCEL_KEYS:
        controller.cancel_threshold_edit()
    elif key == "BACKSPACE":
        controller.edit_threshold_input(state.threshold_input[:-1])
    elif key == "CTRL_U":
        controller.edit_threshold_input("")
    elif len(key) == 1 and key.isdigit():
        controller.edit_threshold_input(state.threshold_input + key)
