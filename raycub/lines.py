"""Line-at-a-time reading from a text stream through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

__all__ = ["BUFFER_SIZE", "LineReader", "remove_nl", "read_lines"]

BUFFER_SIZE = 10


class LineReader:
    """Reads lines from ``stream``, asking it for ``buffer_size`` characters at a time.

    Text read past the end of a line is kept for the next call, so each
    reader has its own buffer and several streams may be read side by side.
    """

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""

    def next_line(self) -> str | None:
        """Return the next line with its newline, or ``None`` at end of input."""
        while "\n" not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending += chunk
        end = self._pending.find("\n")
        if end >= 0:
            line, self._pending = self._pending[:end + 1], self._pending[end + 1:]
            return line
        if not self._pending:
            return None
        line, self._pending = self._pending, ""
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line


def remove_nl(text: str) -> str:
    """Drop one trailing newline, if there is one."""
    return text[:-1] if text.endswith("\n") else text


def read_lines(stream: TextIO, buffer_size: int = BUFFER_SIZE) -> Iterator[str]:
    """Yield the lines of ``stream`` without their newlines."""
    for line in LineReader(stream, buffer_size):
        yield remove_nl(line)