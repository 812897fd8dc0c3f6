"""Writer that splits a Base64 stream into lines of fixed length."""

from __future__ import annotations

from typing import BinaryIO, Protocol

MAX_BODY_LENGTH = 76
SINGLE_NEWLINE = b"\r\n"


class _Writable(Protocol):
    def write(self, data: bytes, /) -> object: ...


class NoOutWriterError(Exception):
    """The line breaker has no output to write to."""

    def __init__(self) -> None:
        super().__init__("no io.Writer set for Base64LineBreaker")


class Base64LineBreaker:
    """Buffers written data and emits it in lines of MAX_BODY_LENGTH bytes."""

    def __init__(self, out: _Writable | BinaryIO | None = None) -> None:
        self.out = out
        self._line = bytearray()

    def write(self, data: bytes) -> int:
        """Write data, inserting a line break whenever a line is full."""
        if self.out is None:
            raise NoOutWriterError()
        data = bytes(data)
        total = len(data)
        while len(self._line) + len(data) >= MAX_BODY_LENGTH:
            self.out.write(bytes(self._line))
            excess = MAX_BODY_LENGTH - len(self._line)
            self._line.clear()
            self.out.write(data[:excess])
            self.out.write(SINGLE_NEWLINE)
            data = data[excess:]
        self._line.extend(data)
        return total

    def close(self) -> None:
        """Flush any buffered data followed by a final line break."""
        if self._line:
            self.out.write(bytes(self._line))
            self.out.write(SINGLE_NEWLINE)
            self._line.clear()

    def __enter__(self) -> Base64LineBreaker:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()