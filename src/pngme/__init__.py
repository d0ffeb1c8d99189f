"""Hide and recover messages in custom PNG chunks."""

from .exceptions import ChunkNotFoundError, PngmeError
from .framing import (
    Chunk,
    ChunkIntegrityError,
    ChunkType,
    ChunkTypeError,
    FramingError,
    Png,
    SignatureError,
    TruncatedChunkError,
    build_chunk,
)

__all__ = [
    "Chunk",
    "ChunkIntegrityError",
    "ChunkNotFoundError",
    "ChunkType",
    "ChunkTypeError",
    "FramingError",
    "Png",
    "PngmeError",
    "SignatureError",
    "TruncatedChunkError",
    "build_chunk",
]
