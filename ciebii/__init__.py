from .format import (
    RGB,
    ByteConversionFailure,
    ChecksumMismatch,
    Chunk,
    CiebiiError,
    CiebiiFile,
    DimensionMismatch,
    Header,
    IllegalHeader,
    InvalidLength,
    NonExistentChunk,
    checksum,
)
from .io import read_file, write_file

__version__ = "0.1.0"

__all__ = [
    "ByteConversionFailure",
    "ChecksumMismatch",
    "checksum",
    "Chunk",
    "CiebiiError",
    "CiebiiFile",
    "DimensionMismatch",
    "Header",
    "IllegalHeader",
    "InvalidLength",
    "NonExistentChunk",
    "read_file",
    "RGB",
    "write_file",
]
