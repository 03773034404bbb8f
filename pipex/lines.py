"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Iterator

DEFAULT_BUFFER_SIZE = 1


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _generate(fd: int, buffer_size: int) -> Iterator[str]:
    pending = b""
    while True:
        newline = pending.find(b"\n")
        if newline >= 0:
            yield _decode(pending[: newline + 1])
            pending = pending[newline + 1 :]
            continue
        chunk = os.read(fd, buffer_size)
        if not chunk:
            if pending:
                yield _decode(pending)
            return
        pending += chunk


def read_lines(fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[str]:
    """Yield the lines read from ``fd``, each with its newline.

    The descriptor is read ``buffer_size`` bytes at a time.  A final line
    without a newline is yielded as it is; an empty input yields nothing.
    """
    if fd < 0:
        raise ValueError(f"invalid file descriptor {fd}")
    if buffer_size < 1:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")
    return _generate(fd, buffer_size)