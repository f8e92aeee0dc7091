from __future__ import annotations

from typing import Optional

from .base import PixelSource, RasterConverter


class ImageConverter(RasterConverter):
    def load(self, path: str, max_width: Optional[int] = None) -> PixelSource:
        img = self._load_image(path)
        img = self._limit_width(self._normalize_image(img), max_width)
        return self._to_source(img)
