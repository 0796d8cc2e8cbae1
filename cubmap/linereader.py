"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator, Optional

DEFAULT_BUFFER_SIZE = 42


class LineReader:
    """Hand out the lines of a text or binary stream one at a time.

    Each line keeps its terminating newline; the last line may lack one.
    Data is pulled from the stream in chunks of ``buffer_size``, and
    whatever follows a newline is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _take(self, end: int) -> AnyStr:
        line = self._pending[:end]
        self._pending = self._pending[end:]
        return line

    def next_line(self) -> Optional[AnyStr]:
        """The next line of the stream, or None once it is exhausted."""
        while True:
            if self._pending:
                newline = b"\n" if isinstance(self._pending, (bytes, bytearray)) else "\n"
                index = self._pending.find(newline)
                if index != -1:
                    return self._take(index + 1)
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                if self._pending:
                    return self._take(len(self._pending))
                return None
            self._pending = chunk if self._pending is None else self._pending + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line