from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class RGB:
    """One 8-bit RGB pixel."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"Color component {name}={value} is outside 0-255")

    def color(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def encode(self) -> bytes:
        """Return the three component bytes in r, g, b order."""
        return bytes((self.r, self.g, self.b))

    def __str__(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
