"""Line-by-line reading from raw file descriptors."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 1024
MAX_BUFFER_SIZE = 1_000_000
OPEN_MAX = 256


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Each line keeps its trailing newline. A last line without one is still
    returned. Once the input is exhausted, ``read_line`` returns None.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self.fd = fd
        self.buffer_size = min(buffer_size, MAX_BUFFER_SIZE)
        self._pending = bytearray()

    @staticmethod
    def _decode(raw: bytes) -> str:
        return raw.decode("utf-8", errors="surrogateescape")

    def read_line(self) -> str | None:
        """Return the next line, or None when nothing is left."""
        while True:
            newline = self._pending.find(b"\n")
            if newline != -1:
                raw = bytes(self._pending[: newline + 1])
                del self._pending[: newline + 1]
                return self._decode(raw)
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                if not self._pending:
                    return None
                raw = bytes(self._pending)
                self._pending.clear()
                return self._decode(raw)
            self._pending += chunk

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> str | None:
    """Return the next line of ``fd``, keeping per-descriptor state between calls.

    None is returned at the end of input, on a read error, and for a
    descriptor outside ``0..OPEN_MAX``.
    """
    if fd < 0 or fd > OPEN_MAX:
        return None
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        return None
    if line is None:
        _readers.pop(fd, None)
    return line