from __future__ import annotations

from typing import Tuple

from .checksum import checksum
from .encoding import pack_uint, unpack_uint
from .errors import ChecksumMismatch, IllegalHeader, InvalidLength

# "CIEBIIFILE"
MAGIC_BYTES = bytes([0x43, 0x49, 0x45, 0x42, 0x49, 0x49, 0x46, 0x49, 0x4C, 0x45])

DIMENSION_SIZE = 8
HEADER_CHECKSUM_SIZE = 4
HEADER_SIZE = len(MAGIC_BYTES) + 2 * DIMENSION_SIZE + HEADER_CHECKSUM_SIZE

_WIDTH_OFFSET = len(MAGIC_BYTES)
_HEIGHT_OFFSET = _WIDTH_OFFSET + DIMENSION_SIZE
_CHECKSUM_OFFSET = _HEIGHT_OFFSET + DIMENSION_SIZE
_MAX_DIMENSION = (1 << (8 * DIMENSION_SIZE)) - 1


def _dimension_bytes(width: int, height: int) -> bytes:
    return pack_uint(width, DIMENSION_SIZE) + pack_uint(height, DIMENSION_SIZE)


class Header:
    """Whole-file preamble: magic, dimensions and a checksum over the dimensions.

    Layout (30 bytes, big-endian)::

        [ MAGIC (10) | WIDTH (8) | HEIGHT (8) | CHECKSUM (4) ]
    """

    __slots__ = ("_width", "_height", "_checksum")

    def __init__(self, width: int, height: int) -> None:
        for name, value in (("width", width), ("height", height)):
            if not 0 <= value <= _MAX_DIMENSION:
                raise ValueError(f"Header {name} {value} does not fit in {DIMENSION_SIZE} bytes")
        self._width = width
        self._height = height
        self._checksum = checksum(_dimension_bytes(width, height))

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def checksum(self) -> int:
        return self._checksum

    def dimensions(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def encode(self) -> bytes:
        return (
            MAGIC_BYTES
            + _dimension_bytes(self._width, self._height)
            + pack_uint(self._checksum, HEADER_CHECKSUM_SIZE)
        )

    @classmethod
    def decode(cls, data: bytes) -> "Header":
        """Parse and verify a 30-byte header."""
        if len(data) != HEADER_SIZE:
            raise InvalidLength()
        if bytes(data[:_WIDTH_OFFSET]) != MAGIC_BYTES:
            raise IllegalHeader()
        width_bytes = bytes(data[_WIDTH_OFFSET:_HEIGHT_OFFSET])
        height_bytes = bytes(data[_HEIGHT_OFFSET:_CHECKSUM_OFFSET])
        width = unpack_uint(width_bytes, DIMENSION_SIZE)
        height = unpack_uint(height_bytes, DIMENSION_SIZE)
        stored = unpack_uint(data[_CHECKSUM_OFFSET:HEADER_SIZE], HEADER_CHECKSUM_SIZE)
        if checksum(width_bytes + height_bytes) != stored:
            raise ChecksumMismatch()
        return cls(width, height)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Header):
            return NotImplemented
        return self.dimensions() == other.dimensions() and self._checksum == other._checksum

    def __hash__(self) -> int:
        return hash((self._width, self._height, self._checksum))

    def __repr__(self) -> str:
        return f"Header(width={self._width}, height={self._height}, checksum={self._checksum})"
