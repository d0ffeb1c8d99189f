"""Four-byte PNG chunk type tags."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ChunkTypeError

TYPE_SIZE = 4


def _is_upper(byte: int) -> bool:
    return 0x41 <= byte <= 0x5A


def _is_lower(byte: int) -> bool:
    return 0x61 <= byte <= 0x7A


@dataclass(frozen=True)
class ChunkType:
    """A chunk type tag such as ``IHDR`` or ``ruSt``.

    Build instances with :meth:`from_text` for user-supplied tags, which are
    validated, or :meth:`from_bytes` for tags read out of a chunk stream, whose
    integrity is already covered by the chunk CRC.

    The letter case of each byte carries one property bit:

    ========  ==========================  =====================
    position  uppercase means             lowercase means
    ========  ==========================  =====================
    0         critical                    ancillary
    1         public                      private
    2         reserved bit valid          reserved bit set
    3         unsafe to copy              safe to copy
    ========  ==========================  =====================
    """

    raw: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.raw, (bytes, bytearray, memoryview)):
            raise ChunkTypeError("chunk type must be built from bytes")
        raw = bytes(self.raw)
        if len(raw) != TYPE_SIZE:
            raise ChunkTypeError(f"chunk type must be exactly {TYPE_SIZE} bytes, got {len(raw)}")
        object.__setattr__(self, "raw", raw)

    @classmethod
    def from_text(cls, text: str) -> "ChunkType":
        """Parse a textual tag; rejects anything but four ASCII non-digit characters."""

        if not isinstance(text, str):
            raise ChunkTypeError("chunk type must be a string")
        if len(text) != TYPE_SIZE or not text.isascii():
            raise ChunkTypeError(f"chunk type must be {TYPE_SIZE} ASCII characters: {text!r}")
        if any(ch.isdigit() for ch in text):
            raise ChunkTypeError(f"chunk type must not contain digits: {text!r}")
        return cls(text.encode("ascii"))

    @classmethod
    def from_bytes(cls, raw: bytes) -> "ChunkType":
        """Wrap four raw bytes without inspecting their content."""

        return cls(raw)

    @property
    def is_critical(self) -> bool:
        return _is_upper(self.raw[0])

    @property
    def is_public(self) -> bool:
        return _is_upper(self.raw[1])

    @property
    def is_reserved_bit_valid(self) -> bool:
        return _is_upper(self.raw[2])

    @property
    def is_safe_to_copy(self) -> bool:
        return _is_lower(self.raw[3])

    def is_valid(self) -> bool:
        return self.raw.isascii() and self.is_reserved_bit_valid

    def to_text(self) -> str:
        """Return the tag as text; raises ``UnicodeDecodeError`` for non-ASCII tags."""

        return self.raw.decode("ascii")

    def matches(self, text: str) -> bool:
        """Exact, case-sensitive comparison with a textual tag."""

        try:
            return self.raw == text.encode("ascii")
        except UnicodeEncodeError:
            return False

    def __str__(self) -> str:
        return self.raw.decode("ascii", errors="replace")
