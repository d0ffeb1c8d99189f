"""Exception types for the framing subsystem."""

from __future__ import annotations

from ..exceptions import PngmeError


class FramingError(PngmeError):
    """Base class for byte-level format errors."""


class ChunkTypeError(FramingError):
    """Raised when a textual chunk type tag is malformed."""


class SignatureError(FramingError):
    """Raised when a buffer does not start with the PNG signature."""


class TruncatedChunkError(FramingError):
    """Raised when a chunk field extends past the end of the buffer."""


class ChunkIntegrityError(FramingError):
    """Raised when the stored CRC of a chunk does not match its contents."""

    def __init__(self, chunk_type: str, stored: int, computed: int) -> None:
        super().__init__(
            f"CRC mismatch in {chunk_type!r} chunk: stored 0x{stored:08X}, computed 0x{computed:08X}"
        )
        self.chunk_type = chunk_type
        self.stored = stored
        self.computed = computed
