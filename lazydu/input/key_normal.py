"""Browse-mode keyboard handling."""

from __future__ import annotations

from collections.abc import Callable

from ..runtime.controller import BrowserController
from ..tree_model import SortKey
from .key_registry import KeyComboBinding, KeyComboRegistry

QUIT_KEYS = ("q", "Q", "CTRL_C")


def _action(operation: Callable[[], object]) -> Callable[[], bool]:
    """Wrap a controller operation as a non-quitting key handler."""

    def handler() -> bool:
        operation()
        return False

    return handler


def build_normal_key_registry(controller: BrowserController) -> KeyComboRegistry:
    """Bind browse-mode keys to controller operations."""
    return KeyComboRegistry().register_bindings(
        KeyComboBinding(QUIT_KEYS, lambda: True),
        KeyComboBinding(("UP", "k"), _action(lambda: controller.move(-1))),
        KeyComboBinding(("DOWN", "j"), _action(lambda: controller.move(1))),
        KeyComboBinding(("PAGE_UP",), _action(lambda: controller.page(-1))),
        KeyComboBinding(("PAGE_DOWN", "SPACE"), _action(lambda: controller.page(1))),
        KeyComboBinding(("HOME", "g"), _action(controller.move_to_top)),
        KeyComboBinding(("END", "G"), _action(controller.move_to_bottom)),
        KeyComboBinding(("RIGHT", "ENTER_CR", "ENTER_LF"), _action(controller.expand)),
        KeyComboBinding(("LEFT",), _action(controller.collapse_or_ascend)),
        KeyComboBinding(("s", "S"), _action(lambda: controller.cycle_sort(SortKey.SIZE))),
        KeyComboBinding(("n", "N"), _action(lambda: controller.cycle_sort(SortKey.NAME))),
        KeyComboBinding(("t", "T"), _action(controller.begin_threshold_edit)),
        KeyComboBinding(("h", "H"), _action(controller.toggle_size_format)),
    )


class NormalKeyHandler:
    """Reusable browse-mode handler bound to one controller."""

    def __init__(self, controller: BrowserController) -> None:
        self.controller = controller
        self.registry = build_normal_key_registry(controller)

    def handle(self, key: str) -> bool:
        """Handle one key and return ``True`` when the app should quit."""
        return bool(self.registry.dispatch(key))


def handle_normal_key(key: str, controller: BrowserController) -> bool:
    """Handle one browse-mode key and return ``True`` when the app should quit."""
    return NormalKeyHandler(controller).handle(key)
