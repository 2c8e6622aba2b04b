"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import AnyStr, IO

BUFFER_SIZE = 50


class LineReader:
    """Read lines from a text or binary stream in chunks of buffer_size.

    Each line keeps its trailing newline; the final line may lack one.
    Data read past a newline is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        parts: list = []
        while True:
            if not self._pending:
                chunk = self._stream.read(self._buffer_size)
                if not chunk:
                    break
                self._pending = chunk
            pending = self._pending
            newline = "\n" if isinstance(pending, str) else b"\n"
            index = pending.find(newline)
            if index >= 0:
                parts.append(pending[: index + 1])
                self._pending = pending[index + 1 :]
                break
            parts.append(pending)
            self._pending = pending[:0]
        if not parts:
            return None
        return parts[0][:0].join(parts)

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line