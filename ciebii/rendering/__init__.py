from .converters import PixelSource, SUPPORTED_EXTENSIONS, load_source
from .renderer import file_to_image, show

__all__ = ["PixelSource", "SUPPORTED_EXTENSIONS", "file_to_image", "load_source", "show"]
