"""Byte-level framing of PNG chunk streams."""

from .errors import (
    ChunkIntegrityError,
    ChunkTypeError,
    FramingError,
    SignatureError,
    TruncatedChunkError,
)
from .chunk_type import ChunkType
from .chunk import CHUNK_OVERHEAD, Chunk, build_chunk, parse_chunk, read_chunk
from .crc import chunk_crc, crc32, verify_chunk_crc
from .cursor import ByteCursor
from .png import PNG_SIGNATURE, Png, parse_png

__all__ = [
    "ChunkIntegrityError",
    "ChunkTypeError",
    "FramingError",
    "SignatureError",
    "TruncatedChunkError",
    "ChunkType",
    "CHUNK_OVERHEAD",
    "Chunk",
    "build_chunk",
    "parse_chunk",
    "read_chunk",
    "chunk_crc",
    "crc32",
    "verify_chunk_crc",
    "ByteCursor",
    "PNG_SIGNATURE",
    "Png",
    "parse_png",
]
