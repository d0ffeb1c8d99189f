"""Custom exception hierarchy for the pngme toolkit."""
from __future__ import annotations

from dataclasses import dataclass


class PngmeError(Exception):
    """Base class for all pngme errors."""


@dataclass
class ChunkNotFoundError(PngmeError, LookupError):
    chunk_type: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"no chunk of type {self.chunk_type!r} found"


__all__ = [
    "ChunkNotFoundError",
    "PngmeError",
]
