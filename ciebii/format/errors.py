from __future__ import annotations

from typing import Optional


class CiebiiError(ValueError):
    """Base class for every malformed-data error raised by the codec."""

    message = "Invalid ciebii data."

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class InvalidLength(CiebiiError):
    message = "A sequence of bytes of an invalid length was found."


class ChecksumMismatch(CiebiiError):
    message = "A checksum check has failed. This may mean that the data has been modified or corrupted."


class IllegalHeader(CiebiiError):
    message = "An illegal header was found in the file."


class NonExistentChunk(CiebiiError):
    message = "An access to a non-existent chunk was attempted."


class DimensionMismatch(CiebiiError):
    message = "The dimensions do not correspond to the amount of chunks in the file."


class ByteConversionFailure(CiebiiError):
    message = "Failed to parse bytes."

    def __init__(self, detail: Exception) -> None:
        super().__init__(f"{self.message} ({detail})")
        self.detail = detail
