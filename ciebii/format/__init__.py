from .checksum import CHECKSUM_SEED, checksum
from .chunk import CHUNK_SIZE, Chunk
from .encoding import pack_uint, unpack_uint
from .errors import (
    ByteConversionFailure,
    ChecksumMismatch,
    CiebiiError,
    DimensionMismatch,
    IllegalHeader,
    InvalidLength,
    NonExistentChunk,
)
from .file import CiebiiFile
from .header import HEADER_SIZE, MAGIC_BYTES, Header
from .types import RGB

__all__ = [
    "ByteConversionFailure",
    "CHECKSUM_SEED",
    "CHUNK_SIZE",
    "ChecksumMismatch",
    "checksum",
    "Chunk",
    "CiebiiError",
    "CiebiiFile",
    "DimensionMismatch",
    "HEADER_SIZE",
    "Header",
    "IllegalHeader",
    "InvalidLength",
    "MAGIC_BYTES",
    "NonExistentChunk",
    "pack_uint",
    "RGB",
    "unpack_uint",
]
