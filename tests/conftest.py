"""Shared PNG fixtures, built with struct/zlib independently of pngme."""

from __future__ import annotations

import struct
import zlib
from pathlib import Path
from typing import Callable

import pytest

SIGNATURE = b"\x89PNG\r\n\x1a\n"

# 1x1 RGB, 8 bits per sample, no interlacing.
IHDR_DATA = struct.pack(">IIBBBBB", 1, 1, 8, 2, 0, 0, 0)
IDAT_DATA = zlib.compress(b"\x00\xff\x00\x00")


def _raw_chunk(tag: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(tag + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + tag + data + struct.pack(">I", crc)


def _make_png(*extra: bytes) -> bytes:
    """Return a minimal valid PNG with *extra* raw chunks placed before IEND."""

    return b"".join(
        [
            SIGNATURE,
            _raw_chunk(b"IHDR", IHDR_DATA),
            _raw_chunk(b"IDAT", IDAT_DATA),
            *extra,
            _raw_chunk(b"IEND", b""),
        ]
    )


@pytest.fixture
def raw_chunk() -> Callable[[bytes, bytes], bytes]:
    return _raw_chunk


@pytest.fixture
def make_png() -> Callable[..., bytes]:
    return _make_png


@pytest.fixture
def sample_png() -> bytes:
    return _make_png()


@pytest.fixture
def sample_png_path(tmp_path: Path, sample_png: bytes) -> Path:
    path = tmp_path / "image.png"
    path.write_bytes(sample_png)
    return path
