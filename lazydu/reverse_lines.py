"""Read text lines from the end of a seekable byte stream toward its start.

Equivalent to ``reversed(stream.read().split(b"\\n"))`` (minus the empty
piece a trailing newline leaves behind) while only ever holding one chunk and
one partial line in memory.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import BinaryIO

DEFAULT_CHUNK_SIZE = 1 << 20
LINE_SEPARATOR = b"\n"


def iter_reversed_lines(
    stream: BinaryIO,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> Iterator[str]:
    """Yield decoded lines of ``stream`` last-to-first, without separators.

    Lines are decoded only once they are complete, so a multi-byte character
    split across two chunks is never mangled. Undecodable bytes follow
    ``errors`` (replacement characters by default).
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")

    end = stream.seek(0, os.SEEK_END)
    if end == 0:
        return

    cursor = end
    # First fragment of the previously read (later) chunk; it may be the end of
    # a line whose beginning lives in an earlier chunk.
    tail = b""
    at_end_of_stream = True
    while cursor > 0:
        start = max(0, cursor - chunk_size)
        stream.seek(start)
        chunk = stream.read(cursor - start)
        cursor = start

        pieces = chunk.split(LINE_SEPARATOR)
        pieces[-1] += tail
        if at_end_of_stream:
            at_end_of_stream = False
            # A newline at EOF terminates the last line, it does not start an empty one.
            if not pieces[-1] and len(pieces) > 1:
                pieces.pop()

        for piece in reversed(pieces[1:]):
            yield piece.decode(encoding, errors)
        tail = pieces[0]

    yield tail.decode(encoding, errors)
