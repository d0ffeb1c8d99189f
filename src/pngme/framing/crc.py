"""CRC helper functions."""

from __future__ import annotations

import zlib

CRC32_INITIAL = 0


def crc32(data: bytes, value: int = CRC32_INITIAL) -> int:
    """Compute the CRC32 checksum of *data*.

    The checksum uses the same polynomial as :func:`zlib.crc32` (CRC-32/ISO-HDLC,
    the variant mandated for PNG chunks) and returns an unsigned 32-bit integer.
    Pass a previous result as *value* to continue a running checksum.
    """

    return zlib.crc32(data, value) & 0xFFFFFFFF


def chunk_crc(type_bytes: bytes, data: bytes) -> int:
    """Return the CRC of a chunk, computed over ``type_bytes ++ data``."""

    return crc32(data, crc32(type_bytes))


def verify_chunk_crc(type_bytes: bytes, data: bytes, stored: int) -> tuple[bool, int]:
    """Check *stored* against the CRC of ``type_bytes ++ data``.

    Returns a tuple ``(ok, computed)`` so callers can report both values.
    """

    computed = chunk_crc(type_bytes, data)
    return computed == stored, computed
