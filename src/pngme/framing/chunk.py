"""Chunk building and parsing utilities."""

from __future__ import annotations

from dataclasses import dataclass

from .chunk_type import TYPE_SIZE, ChunkType
from .crc import chunk_crc, verify_chunk_crc
from .cursor import ByteCursor, pack_u32
from .errors import ChunkIntegrityError, FramingError

#: Bytes of framing around the data of every chunk: length, type and CRC.
CHUNK_OVERHEAD = 4 + TYPE_SIZE + 4

MAX_CHUNK_LENGTH = 0xFFFFFFFF


@dataclass(frozen=True)
class Chunk:
    """One ``length | type | data | crc`` unit of a PNG stream."""

    length: int
    chunk_type: ChunkType
    data: bytes
    crc: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))
        if self.length != len(self.data):
            raise FramingError(f"chunk length {self.length} does not match data size {len(self.data)}")
        ok, computed = verify_chunk_crc(self.chunk_type.raw, self.data, self.crc)
        if not ok:
            raise ChunkIntegrityError(str(self.chunk_type), self.crc, computed)

    def __len__(self) -> int:
        return CHUNK_OVERHEAD + self.length

    def encode(self) -> bytes:
        """Serialise the chunk to its exact on-disk framing."""

        return b"".join(
            (pack_u32(self.length), self.chunk_type.raw, self.data, pack_u32(self.crc))
        )

    def data_as_text(self) -> str:
        return self.data.decode("utf-8", errors="replace")

    def __str__(self) -> str:
        return f"{self.chunk_type}{self.data_as_text()}"


def build_chunk(chunk_type: ChunkType, data: bytes) -> Chunk:
    """Create a chunk for *data*, computing its length and CRC."""

    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise FramingError("chunk data must be bytes")
    data = bytes(data)
    if len(data) > MAX_CHUNK_LENGTH:
        raise FramingError("chunk data does not fit a 32-bit length field")
    return Chunk(
        length=len(data),
        chunk_type=chunk_type,
        data=data,
        crc=chunk_crc(chunk_type.raw, data),
    )


def read_chunk(cursor: ByteCursor) -> Chunk:
    """Decode the chunk at the cursor position and advance past it.

    Raises :class:`~pngme.framing.errors.TruncatedChunkError` when the buffer
    ends inside the chunk and :class:`ChunkIntegrityError` when the stored CRC
    does not match the type and data.
    """

    length = cursor.read_u32(field="chunk length")
    chunk_type = ChunkType.from_bytes(cursor.take(TYPE_SIZE, field="chunk type"))
    data = cursor.take(length, field=f"{chunk_type} data")
    stored = cursor.read_u32(field=f"{chunk_type} crc")
    return Chunk(length=length, chunk_type=chunk_type, data=data, crc=stored)


def parse_chunk(blob: bytes) -> Chunk:
    """Parse the chunk at the start of *blob*; trailing bytes are ignored."""

    if not isinstance(blob, (bytes, bytearray, memoryview)):
        raise FramingError("chunk blob must be bytes")
    return read_chunk(ByteCursor(blob))
