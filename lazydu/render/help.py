"""Footer key-help content.

Presentation-only; the footer is always visible under the tree rows.
"""

from __future__ import annotations

from ..ui_theme import DEFAULT_THEME, UITheme

FOOTER_KEYS: tuple[tuple[str, str], ...] = (
    ("q", "quit"),
    ("→", "expand"),
    ("←", "collapse/up"),
    ("↑↓ PgUp PgDn", "scroll"),
    ("s", "sort size"),
    ("n", "sort name"),
    ("t", "threshold"),
    ("h", "human-readable"),
)

THRESHOLD_PROMPT = "Hide nodes with size less than: "


def footer_help_line(theme: UITheme | None = None) -> str:
    """Return the key-help footer row as ANSI-styled text."""
    active_theme = theme or DEFAULT_THEME
    parts = [
        f"{active_theme.footer_key}{key}{active_theme.reset} {active_theme.footer_dim}{label}{active_theme.reset}"
        for key, label in FOOTER_KEYS
    ]
    return "  ".join(parts)
