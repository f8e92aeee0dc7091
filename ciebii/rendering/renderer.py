from __future__ import annotations

from PIL import Image

from ..format import CiebiiFile, DimensionMismatch


def file_to_image(ciebii_file: CiebiiFile, scale: int = 1) -> Image.Image:
    """Paint the chunks of a complete file into an RGB image."""
    if not ciebii_file.is_complete():
        raise DimensionMismatch()
    if scale < 1:
        raise ValueError("Scale must be at least 1")
    width, height = ciebii_file.dimensions()
    colors = b"".join(chunk.rgb.encode() for chunk in ciebii_file)
    img = Image.frombytes("RGB", (width, height), colors)
    if scale > 1:
        img = img.resize((width * scale, height * scale), Image.NEAREST)
    return img


def show(ciebii_file: CiebiiFile, scale: int = 1) -> None:
    file_to_image(ciebii_file, scale).show(title="ciebii file viewer")
