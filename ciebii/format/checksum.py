from __future__ import annotations

CHECKSUM_SEED = 0xAB


def checksum(data: bytes) -> int:
    """Return the 16-bit rolling checksum of ``data``."""
    total = 0
    carried = CHECKSUM_SEED
    for value in data:
        new_byte = value ^ carried
        total = (total + new_byte) & 0xFFFF
        # low byte of (total << 8) is always zero, so the carry is new_byte
        carried = (new_byte - ((total << 8) & 0xFF)) & 0xFF
    return total
