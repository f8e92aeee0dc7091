import struct

import pytest

from ciebii.format import (
    MAGIC_BYTES,
    ByteConversionFailure,
    ChecksumMismatch,
    Header,
    IllegalHeader,
    InvalidLength,
    unpack_uint,
)

HEADER_20X20 = bytes(
    [
        67, 73, 69, 66, 73, 73, 70, 73, 76, 69,
        0, 0, 0, 0, 0, 0, 0, 20,
        0, 0, 0, 0, 0, 0, 0, 20,
        0, 0, 11, 80,
    ]
)


def test_magic_bytes_spell_format_name():
    assert MAGIC_BYTES == b"CIEBIIFILE"


def test_create_header():
    header = Header(20, 20)
    assert header.width == 20
    assert header.height == 20
    assert header.dimensions() == (20, 20)
    assert header.checksum == 2896


def test_encode():
    assert Header(20, 20).encode() == HEADER_20X20
    assert Header(2, 2).checksum == 2720
    assert Header(2, 2).encode()[-4:] == bytes([0, 0, 10, 160])


def test_rejects_dimensions_outside_u64():
    with pytest.raises(ValueError):
        Header(-1, 1)
    with pytest.raises(ValueError):
        Header(1, 1 << 64)


def test_largest_dimensions_round_trip():
    header = Header((1 << 64) - 1, 7)
    assert Header.decode(header.encode()) == header


@pytest.mark.parametrize("length", [0, 3, 29, 31])
def test_decode_invalid_length(length):
    with pytest.raises(InvalidLength):
        Header.decode(bytes(length))


def test_decode_invalid_magic_bytes():
    data = bytearray(HEADER_20X20)
    data[3] = 0
    with pytest.raises(IllegalHeader):
        Header.decode(bytes(data))


def test_decode_checksum_fail():
    data = bytearray(HEADER_20X20)
    data[17] = 255
    with pytest.raises(ChecksumMismatch):
        Header.decode(bytes(data))


@pytest.mark.parametrize("position", [10, 17, 25])
def test_decode_detects_flipped_dimension_byte(position):
    data = bytearray(HEADER_20X20)
    data[position] ^= 0x01
    with pytest.raises(ChecksumMismatch):
        Header.decode(bytes(data))


def test_decode_successfully():
    header = Header.decode(HEADER_20X20)
    assert header.checksum == 2896
    assert header.dimensions() == (20, 20)
    assert header == Header(20, 20)


def test_short_integer_span_is_a_conversion_failure():
    with pytest.raises(ByteConversionFailure) as info:
        unpack_uint(bytes(7), 8)
    assert isinstance(info.value.detail, struct.error)
    assert info.value.__cause__ is info.value.detail
