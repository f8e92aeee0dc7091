from __future__ import annotations

import struct

from .errors import ByteConversionFailure

_FORMATS = {1: ">B", 2: ">H", 4: ">I", 8: ">Q"}


def pack_uint(value: int, size: int) -> bytes:
    """Pack an unsigned integer as ``size`` big-endian bytes."""
    return struct.pack(_FORMATS[size], value)


def unpack_uint(data: bytes, size: int) -> int:
    """Read a ``size``-byte big-endian unsigned integer, failing on a short span."""
    try:
        (value,) = struct.unpack(_FORMATS[size], bytes(data))
    except struct.error as exc:
        raise ByteConversionFailure(exc) from exc
    return value
