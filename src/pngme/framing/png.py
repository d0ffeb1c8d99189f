"""PNG container: the signature followed by an ordered list of chunks."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from ..exceptions import ChunkNotFoundError
from .chunk import Chunk, read_chunk
from .cursor import ByteCursor
from .errors import FramingError, SignatureError

LOGGER = logging.getLogger(__name__)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _require_chunk(chunk: object) -> Chunk:
    if not isinstance(chunk, Chunk):
        raise FramingError("a PNG container can only hold Chunk instances")
    return chunk


class Png:
    """An in-memory PNG chunk stream.

    Chunk order is preserved exactly, and duplicate chunk types are allowed.
    Lookups and removals match the first chunk whose type equals the given
    tag, case-sensitively.
    """

    def __init__(self, chunks: Optional[Iterable[Chunk]] = None) -> None:
        self._chunks: List[Chunk] = [_require_chunk(chunk) for chunk in chunks or ()]

    @classmethod
    def from_chunks(cls, chunks: Iterable[Chunk]) -> "Png":
        return cls(chunks)

    @classmethod
    def decode(cls, data: bytes) -> "Png":
        """Parse a complete PNG byte stream.

        Decoding is all-or-nothing: a bad signature, a truncated chunk or a
        CRC mismatch anywhere in the stream raises and no container is built.
        """

        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise FramingError("PNG data must be bytes")
        data = bytes(data)
        if data[: len(PNG_SIGNATURE)] != PNG_SIGNATURE:
            raise SignatureError("not a PNG file: signature mismatch")

        cursor = ByteCursor(data, len(PNG_SIGNATURE))
        chunks: List[Chunk] = []
        while not cursor.at_end():
            chunks.append(read_chunk(cursor))
        LOGGER.debug("decoded %d chunks from %d bytes", len(chunks), len(data))
        return cls(chunks)

    @property
    def header(self) -> bytes:
        return PNG_SIGNATURE

    @property
    def chunks(self) -> Tuple[Chunk, ...]:
        return tuple(self._chunks)

    def append_chunk(self, chunk: Chunk) -> None:
        self._chunks.append(_require_chunk(chunk))
        LOGGER.debug("appended %s chunk (%d bytes)", chunk.chunk_type, chunk.length)

    def chunk_by_type(self, chunk_type: str) -> Optional[Chunk]:
        for chunk in self._chunks:
            if chunk.chunk_type.matches(chunk_type):
                return chunk
        return None

    def remove_chunk(self, chunk_type: str) -> Chunk:
        """Remove and return the first chunk of *chunk_type*."""

        for index, chunk in enumerate(self._chunks):
            if chunk.chunk_type.matches(chunk_type):
                del self._chunks[index]
                LOGGER.debug("removed %s chunk at position %d", chunk.chunk_type, index)
                return chunk
        raise ChunkNotFoundError(chunk_type)

    def encode(self) -> bytes:
        return PNG_SIGNATURE + b"".join(chunk.encode() for chunk in self._chunks)

    def __len__(self) -> int:
        return len(self._chunks)

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.chunks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Png):
            return NotImplemented
        return self._chunks == other._chunks

    def __repr__(self) -> str:
        types = ", ".join(str(chunk.chunk_type) for chunk in self._chunks)
        return f"Png([{types}])"

    def __str__(self) -> str:
        return "".join(str(chunk) for chunk in self._chunks)


def parse_png(data: bytes) -> Png:
    """Parse *data* into a :class:`Png`; see :meth:`Png.decode`."""

    return Png.decode(data)
