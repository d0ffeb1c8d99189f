"""High level helpers for hiding messages in PNG byte streams."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from .framing import Chunk, ChunkType, FramingError, Png, build_chunk

LOGGER = logging.getLogger(__name__)

Message = Union[str, bytes, bytearray]


@dataclass(frozen=True)
class ChunkSummary:
    """One line of a PNG chunk listing."""

    index: int
    chunk_type: str
    length: int
    crc: int
    critical: bool
    public: bool
    reserved_bit_valid: bool
    safe_to_copy: bool

    @property
    def flags(self) -> str:
        return " ".join(
            (
                "critical" if self.critical else "ancillary",
                "public" if self.public else "private",
                "reserved-ok" if self.reserved_bit_valid else "reserved-set",
                "safe-to-copy" if self.safe_to_copy else "unsafe-to-copy",
            )
        )

    def __str__(self) -> str:
        return f"{self.index:>3}  {self.chunk_type}  {self.length:>10}  0x{self.crc:08X}  {self.flags}"


def _message_bytes(message: Message) -> bytes:
    if isinstance(message, str):
        try:
            return message.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise FramingError("message is not valid UTF-8 text") from exc
    if isinstance(message, (bytes, bytearray)):
        return bytes(message)
    raise FramingError("message must be str or bytes")


def hide_message(png_bytes: bytes, chunk_type: str, message: Message) -> bytes:
    """Append a ``chunk_type`` chunk holding *message* and return the new PNG bytes."""

    tag = ChunkType.from_text(chunk_type)
    image = Png.decode(png_bytes)
    chunk = build_chunk(tag, _message_bytes(message))
    image.append_chunk(chunk)
    LOGGER.info("hid %d bytes in a %s chunk", chunk.length, tag)
    return image.encode()


def reveal_message(png_bytes: bytes, chunk_type: str) -> Optional[Chunk]:
    """Return the first ``chunk_type`` chunk, or ``None`` when there is none."""

    ChunkType.from_text(chunk_type)
    return Png.decode(png_bytes).chunk_by_type(chunk_type)


def strip_message(png_bytes: bytes, chunk_type: str) -> bytes:
    """Remove the first ``chunk_type`` chunk and return the new PNG bytes.

    Raises :class:`~pngme.exceptions.ChunkNotFoundError` when the image has no
    such chunk.
    """

    ChunkType.from_text(chunk_type)
    image = Png.decode(png_bytes)
    removed = image.remove_chunk(chunk_type)
    LOGGER.info("removed a %s chunk of %d bytes", removed.chunk_type, removed.length)
    return image.encode()


def describe_png(png_bytes: bytes) -> str:
    return str(Png.decode(png_bytes))


def summarize_png(png_bytes: bytes) -> List[ChunkSummary]:
    summaries: List[ChunkSummary] = []
    for index, chunk in enumerate(Png.decode(png_bytes)):
        tag = chunk.chunk_type
        summaries.append(
            ChunkSummary(
                index=index,
                chunk_type=str(tag),
                length=chunk.length,
                crc=chunk.crc,
                critical=tag.is_critical,
                public=tag.is_public,
                reserved_bit_valid=tag.is_reserved_bit_valid,
                safe_to_copy=tag.is_safe_to_copy,
            )
        )
    return summaries


__all__ = [
    "ChunkSummary",
    "describe_png",
    "hide_message",
    "reveal_message",
    "strip_message",
    "summarize_png",
]
