from __future__ import annotations

from .checksum import checksum
from .encoding import pack_uint, unpack_uint
from .errors import ChecksumMismatch, InvalidLength
from .types import RGB

CHUNK_SIZE = 5
COLOR_SIZE = 3
CHUNK_CHECKSUM_SIZE = CHUNK_SIZE - COLOR_SIZE


class Chunk:
    """One pixel as stored on disk: an RGB triple plus its checksum."""

    __slots__ = ("_rgb", "_checksum")

    def __init__(self, r: int, g: int, b: int) -> None:
        self._rgb = RGB(r, g, b)
        self._checksum = checksum(self._rgb.encode())

    @classmethod
    def from_rgb(cls, rgb: RGB) -> "Chunk":
        return cls(rgb.r, rgb.g, rgb.b)

    @property
    def rgb(self) -> RGB:
        return self._rgb

    @property
    def checksum(self) -> int:
        return self._checksum

    def encode(self) -> bytes:
        """Return the chunk as ``[r, g, b, checksum_hi, checksum_lo]``."""
        return self._rgb.encode() + pack_uint(self._checksum, CHUNK_CHECKSUM_SIZE)

    @classmethod
    def decode(cls, data: bytes) -> "Chunk":
        """Parse a 5-byte chunk record, verifying its checksum."""
        if len(data) != CHUNK_SIZE:
            raise InvalidLength()
        color = bytes(data[:COLOR_SIZE])
        stored = unpack_uint(data[COLOR_SIZE:], CHUNK_CHECKSUM_SIZE)
        if checksum(color) != stored:
            raise ChecksumMismatch()
        return cls(color[0], color[1], color[2])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chunk):
            return NotImplemented
        return self._rgb == other._rgb and self._checksum == other._checksum

    def __hash__(self) -> int:
        return hash((self._rgb, self._checksum))

    def __repr__(self) -> str:
        r, g, b = self._rgb.color()
        return f"Chunk({r:#04x}, {g:#04x}, {b:#04x}, checksum={self._checksum})"
