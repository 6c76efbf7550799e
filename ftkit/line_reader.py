"""Read a file descriptor one line at a time.

Lines are returned as ``bytes`` and keep their trailing newline; the last
line of a stream may lack one. Bytes read past a newline are kept per file
descriptor and served first on the next call for that descriptor.
"""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

BUFFER_SIZE = 42
FD_LIMIT = 4096


class LineReader:
    """Line reader holding leftover input for each file descriptor."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self.buffer_size = buffer_size
        self._pending: Dict[int, bytes] = {}

    def _keep(self, fd: int, rest: bytes) -> None:
        if rest:
            self._pending[fd] = rest

    def read_line(self, fd: int) -> Optional[bytes]:
        """Next line from ``fd``, or ``None`` at end of input.

        An out-of-range descriptor gives ``None``. A read error ends the
        line early: whatever was gathered is returned, or ``None``.
        """
        if fd < 0 or fd >= FD_LIMIT:
            return None
        pending = self._pending.pop(fd, b"")
        newline = pending.find(b"\n")
        if newline >= 0:
            self._keep(fd, pending[newline + 1 :])
            return pending[: newline + 1]
        line = bytearray(pending)
        while True:
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                break
            if not chunk:
                break
            newline = chunk.find(b"\n")
            if newline >= 0:
                line += chunk[: newline + 1]
                self._keep(fd, chunk[newline + 1 :])
                break
            line += chunk
        return bytes(line) if line else None

    def lines(self, fd: int) -> Iterator[bytes]:
        """Yield lines from ``fd`` until end of input."""
        while (line := self.read_line(fd)) is not None:
            yield line


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[bytes]:
    """Next line from ``fd`` using a shared reader."""
    return _default_reader.read_line(fd)