"""Line-at-a-time reading from a stream with a fixed read size."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Read a text or binary stream one line at a time.

    Each line keeps its trailing newline; the last line may lack one.
    The stream is read in chunks of ``buffer_size``.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    @staticmethod
    def _newline(data: AnyStr) -> AnyStr:
        return "\n" if isinstance(data, str) else b"\n"  # type: ignore[return-value]

    def next_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        pending = self._pending
        while pending is None or self._newline(pending) not in pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        index = pending.find(self._newline(pending))
        if index < 0:
            self._pending = None
            return pending
        self._pending = pending[index + 1:]
        return pending[: index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield the lines of ``stream`` using the default read size."""
    yield from LineReader(stream)