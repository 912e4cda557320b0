"""Read a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Returns successive lines of a text or binary stream, newline kept."""

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._separator: Optional[AnyStr] = None

    def _read_chunk(self) -> bool:
        """Append one buffer's worth of the stream; False once it is exhausted."""
        chunk = self._stream.read(self._buffer_size)
        if not chunk:
            return False
        if self._separator is None:
            self._separator = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"  # type: ignore[assignment]
        self._pending = chunk if self._pending is None else self._pending + chunk
        return True

    def read_line(self) -> Optional[AnyStr]:
        """The next line including its newline, or None once the stream is exhausted."""
        while self._pending is None or self._separator not in self._pending:
            if not self._read_chunk():
                break
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        end = pending.find(self._separator)
        if end < 0:
            self._pending = None
            return pending
        self._pending = pending[end + 1:]
        return pending[:end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line