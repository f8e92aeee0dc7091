from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .chunk import CHUNK_SIZE, Chunk
from .errors import DimensionMismatch, InvalidLength, NonExistentChunk
from .header import HEADER_SIZE, Header

log = logging.getLogger(__name__)


class CiebiiFile:
    """An in-memory ciebii image: header, row-major chunks and their encoded bytes.

    The encoded chunk payload is cached and kept in step with the chunk list by
    every mutation, so ``encode()`` only has to prepend the header.
    """

    def __init__(self, header: Header, chunks: Iterable[Chunk] = ()) -> None:
        self._header = header
        self._chunks: List[Chunk] = list(chunks)
        self._payload = self._encode_chunks(self._chunks)

    @classmethod
    def _from_parts(cls, header: Header, chunks: List[Chunk], payload: bytes) -> "CiebiiFile":
        # payload must already equal the concatenated chunk encodings
        ciebii_file = cls.__new__(cls)
        ciebii_file._header = header
        ciebii_file._chunks = chunks
        ciebii_file._payload = bytearray(payload)
        return ciebii_file

    @classmethod
    def new(cls, width: int, height: int) -> "CiebiiFile":
        """Create an empty file to append chunks to."""
        return cls(Header(width, height))

    @classmethod
    def from_chunks(cls, width: int, height: int, chunks: Sequence[Chunk]) -> "CiebiiFile":
        """Create a file from exactly ``width * height`` chunks."""
        if len(chunks) != width * height:
            raise DimensionMismatch()
        return cls(Header(width, height), chunks)

    @classmethod
    def from_pixels(cls, width: int, height: int, pixels: Iterable[Tuple[int, int, int]]) -> "CiebiiFile":
        chunks = [Chunk(r, g, b) for r, g, b in pixels]
        return cls.from_chunks(width, height, chunks)

    @property
    def header(self) -> Header:
        return self._header

    @property
    def chunks(self) -> Tuple[Chunk, ...]:
        return tuple(self._chunks)

    def dimensions(self) -> Tuple[int, int]:
        return self._header.dimensions()

    def is_complete(self) -> bool:
        width, height = self.dimensions()
        return len(self._chunks) == width * height

    def pixels(self) -> List[Tuple[int, int, int]]:
        return [chunk.rgb.color() for chunk in self._chunks]

    def append(self, chunk: Chunk) -> None:
        self._chunks.append(chunk)
        self._payload += chunk.encode()

    def get_at(self, index: int) -> Optional[Chunk]:
        if not self._has_index(index):
            return None
        return self._chunks[index]

    def remove_at(self, index: int) -> Chunk:
        """Remove and return the chunk at ``index``."""
        if not self._has_index(index):
            raise NonExistentChunk()
        removed = self._chunks.pop(index)
        self._payload = self._encode_chunks(self._chunks)
        return removed

    def replace_at(self, index: int, chunk: Chunk) -> None:
        if not self._has_index(index):
            raise NonExistentChunk()
        self._chunks[index] = chunk
        self._payload = self._encode_chunks(self._chunks)

    def encode(self) -> bytes:
        """Return the header followed by every chunk record."""
        return self._header.encode() + bytes(self._payload)

    @classmethod
    def decode(cls, data: bytes) -> "CiebiiFile":
        """Parse a complete file; the first failing check is raised unchanged."""
        if len(data) < HEADER_SIZE:
            raise InvalidLength()
        header = Header.decode(data[:HEADER_SIZE])
        chunks = [
            Chunk.decode(data[offset : offset + CHUNK_SIZE])
            for offset in range(HEADER_SIZE, len(data), CHUNK_SIZE)
        ]
        width, height = header.dimensions()
        if len(chunks) != width * height:
            raise DimensionMismatch()
        log.debug("Decoded %dx%d file (%d bytes)", width, height, len(data))
        return cls._from_parts(header, chunks, data[HEADER_SIZE:])

    def copy(self) -> "CiebiiFile":
        """Return an independent copy that can be mutated without affecting this file."""
        return self._from_parts(self._header, list(self._chunks), self._payload)

    def __copy__(self) -> "CiebiiFile":
        return self.copy()

    def _has_index(self, index: int) -> bool:
        return 0 <= index < len(self._chunks)

    @staticmethod
    def _encode_chunks(chunks: Iterable[Chunk]) -> bytearray:
        payload = bytearray()
        for chunk in chunks:
            payload += chunk.encode()
        return payload

    def __len__(self) -> int:
        return len(self._chunks)

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self._chunks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CiebiiFile):
            return NotImplemented
        return self._header == other._header and self._chunks == other._chunks

    def __repr__(self) -> str:
        width, height = self.dimensions()
        return f"CiebiiFile(width={width}, height={height}, chunks={len(self._chunks)})"
