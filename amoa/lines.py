"""Reading a file descriptor one line at a time.

Lines are returned as bytes and keep their trailing newline; the last line
of the input may lack one. Bytes read past a newline are kept for the next
call, so a descriptor can be read line by line without losing data.
"""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

BUFFER_SIZE = 1
MAX_FD = 128

_NEWLINE = b"\n"


class LineReader:
    """Read lines from a file descriptor, ``buffer_size`` bytes per read call."""

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(fd, bool) or not isinstance(fd, int):
            raise TypeError(f"fd must be an int, got {type(fd).__name__}")
        if fd < 0:
            raise ValueError("fd must not be negative")
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError(f"buffer_size must be an int, got {type(buffer_size).__name__}")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._fd = fd
        self._buffer_size = buffer_size
        self._pending = b""

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or None once the input is exhausted."""
        while _NEWLINE not in self._pending:
            chunk = os.read(self._fd, self._buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        end = self._pending.find(_NEWLINE)
        if end < 0:
            line, self._pending = self._pending, b""
        else:
            line, self._pending = self._pending[:end + 1], self._pending[end + 1:]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line of ``fd``, or None at the end of its input.

    Unread data is remembered per descriptor between calls. Descriptors
    outside the range 0 to ``MAX_FD - 1`` raise :class:`ValueError`.
    """
    if isinstance(fd, bool) or not isinstance(fd, int):
        raise TypeError(f"fd must be an int, got {type(fd).__name__}")
    if not 0 <= fd < MAX_FD:
        raise ValueError(f"fd must lie between 0 and {MAX_FD - 1}")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    line = reader.read_line()
    if line is None:
        del _readers[fd]
    return line