"""Read-only cursor over an immutable byte buffer."""

from __future__ import annotations

import struct

from .errors import TruncatedChunkError

_U32 = struct.Struct(">I")


class ByteCursor:
    """Sequential reader that tracks a position into *buffer*.

    Every read is bounds-checked and raises :class:`TruncatedChunkError`
    instead of returning a short slice.
    """

    def __init__(self, buffer: bytes, offset: int = 0) -> None:
        if offset < 0 or offset > len(buffer):
            raise ValueError("offset must lie within the buffer")
        self._buffer = memoryview(bytes(buffer))
        self._offset = offset

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return len(self._buffer) - self._offset

    def at_end(self) -> bool:
        return self._offset >= len(self._buffer)

    def take(self, size: int, *, field: str = "data") -> bytes:
        """Return the next *size* bytes and advance past them."""

        if size < 0:
            raise ValueError("size must be non-negative")
        if size > self.remaining:
            raise TruncatedChunkError(
                f"truncated chunk: {field} needs {size} bytes at offset {self._offset},"
                f" only {self.remaining} left"
            )
        start = self._offset
        self._offset += size
        return self._buffer[start : self._offset].tobytes()

    def read_u32(self, *, field: str = "u32") -> int:
        """Read a big-endian unsigned 32-bit integer."""

        return _U32.unpack(self.take(4, field=field))[0]


def pack_u32(value: int) -> bytes:
    return _U32.pack(value)
