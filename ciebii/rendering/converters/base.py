from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from PIL import Image, ImageOps

Pixel = Tuple[int, int, int]


@dataclass(frozen=True)
class PixelSource:
    """Row-major RGB pixels with known dimensions."""

    width: int
    height: int
    pixels: List[Pixel]

    def validate(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Dimensions must not be negative")
        if len(self.pixels) != self.width * self.height:
            raise ValueError("Pixel count must equal width * height")


class SourceConverter:
    def load(self, path: str, max_width: Optional[int] = None) -> PixelSource:
        raise NotImplementedError


class RasterConverter(SourceConverter):
    @staticmethod
    def _load_image(path: str) -> Image.Image:
        with Image.open(path) as img:
            img = ImageOps.exif_transpose(img)
            return img.copy()

    @staticmethod
    def _normalize_image(img: Image.Image) -> Image.Image:
        if img.mode != "RGB":
            return img.convert("RGB")
        return img

    @staticmethod
    def _limit_width(img: Image.Image, max_width: Optional[int]) -> Image.Image:
        if max_width is not None and max_width < 1:
            raise ValueError("Maximum width must be at least 1")
        if max_width is None or img.width <= max_width:
            return img
        ratio = max_width / float(img.width)
        height = max(1, int(img.height * ratio))
        return img.resize((max_width, height), Image.LANCZOS)

    @staticmethod
    def _to_source(img: Image.Image) -> PixelSource:
        raw = img.tobytes()
        pixels = list(zip(raw[0::3], raw[1::3], raw[2::3]))
        return PixelSource(img.width, img.height, pixels)
