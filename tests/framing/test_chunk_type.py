import pytest

from pngme.framing import ChunkType, ChunkTypeError


def test_chunk_type_from_bytes():
    expected = bytes([82, 117, 83, 116])
    actual = ChunkType.from_bytes(bytes([82, 117, 83, 116]))
    assert actual.raw == expected


def test_chunk_type_from_text():
    expected = ChunkType.from_bytes(bytes([82, 117, 83, 116]))
    actual = ChunkType.from_text("RuSt")
    assert actual == expected
    assert hash(actual) == hash(expected)


@pytest.mark.parametrize(
    ("tag", "critical", "public", "reserved_ok", "safe_to_copy"),
    [
        ("RuSt", True, False, True, True),
        ("ruSt", False, False, True, True),
        ("RUSt", True, True, True, True),
        ("Rust", True, False, False, True),
        ("RuST", True, False, True, False),
        ("IHDR", True, True, True, False),
        ("tEXt", False, True, True, True),
    ],
)
def test_chunk_type_property_bits(tag, critical, public, reserved_ok, safe_to_copy):
    chunk_type = ChunkType.from_text(tag)
    assert chunk_type.is_critical is critical
    assert chunk_type.is_public is public
    assert chunk_type.is_reserved_bit_valid is reserved_ok
    assert chunk_type.is_safe_to_copy is safe_to_copy


def test_valid_chunk_is_valid():
    assert ChunkType.from_text("RuSt").is_valid()


def test_invalid_chunk_is_not_valid():
    assert not ChunkType.from_text("Rust").is_valid()

    with pytest.raises(ChunkTypeError):
        ChunkType.from_text("Ru1t")


@pytest.mark.parametrize("tag", ["Rus", "RuStt", "", "Ruś!", "R S", "12ab"])
def test_from_text_rejects_malformed_tags(tag):
    with pytest.raises(ChunkTypeError):
        ChunkType.from_text(tag)


def test_from_text_rejects_non_string():
    with pytest.raises(ChunkTypeError):
        ChunkType.from_text(b"RuSt")  # type: ignore[arg-type]


def test_from_bytes_is_permissive_about_content():
    chunk_type = ChunkType.from_bytes(b"ab1\xff")
    assert not chunk_type.is_valid()
    assert chunk_type.raw == b"ab1\xff"

    with pytest.raises(ChunkTypeError):
        ChunkType.from_bytes(b"abc")


def test_chunk_type_text():
    chunk_type = ChunkType.from_text("RuSt")
    assert chunk_type.to_text() == "RuSt"
    assert str(chunk_type) == "RuSt"
    assert f"{chunk_type}" == "RuSt"


def test_non_ascii_tag_renders_lossily():
    chunk_type = ChunkType.from_bytes(b"Ru\xffT")
    assert str(chunk_type) == "Ru�T"
    with pytest.raises(UnicodeDecodeError):
        chunk_type.to_text()


def test_matches_is_exact():
    chunk_type = ChunkType.from_text("ruSt")
    assert chunk_type.matches("ruSt")
    assert not chunk_type.matches("RUST")
    assert not chunk_type.matches("ruS")
    assert not chunk_type.matches("ruStx")
    assert not chunk_type.matches("ruŚt")
