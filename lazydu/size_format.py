"""Size-column formatting strategies.

``du -k`` reports kibibytes, so the human-readable strategy starts at KiB.
"""

from __future__ import annotations

from enum import Enum

HUMAN_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB")
HUMAN_LAST_UNIT = "YiB"


class SizeFormat(str, Enum):
    """How the renderer prints node sizes."""

    COMMAS = "commas"
    HUMAN = "human"

    def toggled(self) -> SizeFormat:
        return SizeFormat.HUMAN if self is SizeFormat.COMMAS else SizeFormat.COMMAS


def format_commas(value: int) -> str:
    """Return ``value`` with thousands separators, e.g. ``1,234,567``."""
    return f"{value:,}"


def format_human(value: int) -> str:
    """Return ``value`` KiB scaled to the largest unit below 1024, one decimal."""
    scaled = float(value)
    for unit in HUMAN_UNITS:
        if scaled < 1024.0:
            return f"{scaled:.1f} {unit}"
        scaled /= 1024.0
    return f"{scaled:.1f} {HUMAN_LAST_UNIT}"


def format_size(value: int, size_format: SizeFormat) -> str:
    if size_format is SizeFormat.HUMAN:
        return format_human(value)
    return format_commas(value)
