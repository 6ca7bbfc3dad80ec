"""Read a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 64


class LineReader(Generic[AnyStr]):
    """Yield the lines of a text or binary stream, without their newlines.

    The stream is read in chunks of *buffer_size*.  Whatever follows the last
    newline is always returned as the final line, even when it is empty, so
    the lines of a stream holding ``data`` are those of ``data.split("\\n")``.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr = stream.read(0)
        self._newline = b"\n" if isinstance(self._pending, bytes) else "\n"
        self._finished = False

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        if self._finished:
            return None
        while self._newline not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._finished = True
                line, self._pending = self._pending, self._pending[:0]
                return line
            self._pending += chunk
        line, _, self._pending = self._pending.partition(self._newline)
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr]) -> list[AnyStr]:
    """Return every line of *stream* as read by :class:`LineReader`."""
    return list(LineReader(stream))