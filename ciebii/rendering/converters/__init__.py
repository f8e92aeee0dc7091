from __future__ import annotations

import os
from typing import Dict, Optional, Set

from .base import Pixel, PixelSource, SourceConverter
from .image import ImageConverter

SUPPORTED_EXTENSIONS: Set[str] = {".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp", ".tif", ".tiff"}


class SourceLoader:
    def __init__(self, converters: Optional[Dict[str, SourceConverter]] = None) -> None:
        if converters is None:
            image_converter = ImageConverter()
            converters = {ext: image_converter for ext in SUPPORTED_EXTENSIONS}
        self._converters = converters

    @property
    def supported_extensions(self) -> Set[str]:
        return set(self._converters.keys())

    def load(self, path: str, max_width: Optional[int] = None) -> PixelSource:
        ext = os.path.splitext(path)[1].lower()
        converter = self._converters.get(ext)
        if not converter:
            raise ValueError(f"Unsupported file extension: {ext}")
        return converter.load(path, max_width)


def load_source(path: str, max_width: Optional[int] = None) -> PixelSource:
    return SourceLoader().load(path, max_width)


__all__ = ["Pixel", "PixelSource", "SourceLoader", "SUPPORTED_EXTENSIONS", "load_source"]
