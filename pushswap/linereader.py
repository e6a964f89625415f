"""Line-by-line reading of a text stream in fixed-size chunks."""

from __future__ import annotations

from typing import Iterator, TextIO

DEFAULT_CHUNK_SIZE = 1


def read_lines(stream: TextIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[str]:
    """Yield the lines of ``stream``, each with its trailing newline.

    The stream is read ``chunk_size`` characters at a time, and only as far
    as the line being yielded needs.  A final line without a newline is
    yielded as it is; an empty stream yields nothing.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    return _lines(stream, chunk_size)


def _lines(stream: TextIO, chunk_size: int) -> Iterator[str]:
    pending = ""
    while True:
        newline = pending.find("\n")
        if newline >= 0:
            yield pending[: newline + 1]
            pending = pending[newline + 1 :]
            continue
        chunk = stream.read(chunk_size)
        if not chunk:
            if pending:
                yield pending
            return
        pending += chunk