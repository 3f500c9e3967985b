"""Input-layer public API for key decoding and interaction handlers.

``KeyReader`` turns raw terminal bytes into key tokens; the handlers map
tokens onto ``BrowserController`` operations.
"""

from .key_normal import NormalKeyHandler, build_normal_key_registry, handle_normal_key
from .key_registry import KeyComboBinding, KeyComboRegistry
from .key_threshold import handle_threshold_key
from .reader import ESC_SEQUENCE_TIMEOUT_MS, KeyReader

__all__ = [
    "KeyReader",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "NormalKeyHandler",
    "build_normal_key_registry",
    "handle_normal_key",
    "handle_threshold_key",
]
