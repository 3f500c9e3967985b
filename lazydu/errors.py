"""Error types raised by the CLI and the tree builder."""

from __future__ import annotations


class LazyDuError(Exception):
    """Base class for errors that end a run with a message."""


class UsageError(LazyDuError):
    """Command line did not name exactly one input file."""


class FormatError(LazyDuError):
    """A consumed input line broke the ``du`` grammar or hierarchy.

    ``line_number`` counts consumed lines starting at 1, in consumption
    order, which is from the end of the file toward its start.
    """

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        if line_number < 1:
            super().__init__(reason)
        else:
            super().__init__(f"line {line_number} from the end: {reason}: {line!r}")
