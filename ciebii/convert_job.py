from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .format import Chunk, CiebiiFile
from .rendering.converters import SUPPORTED_EXTENSIONS, load_source

log = logging.getLogger(__name__)

DEFAULT_OUTPUT_SUFFIX = ".cib"


@dataclass
class ConvertSettings:
    max_width: Optional[int] = None
    output_suffix: str = DEFAULT_OUTPUT_SUFFIX


class CiebiiFileBuilder:
    def __init__(self, settings: Optional[ConvertSettings] = None) -> None:
        self.settings = settings or ConvertSettings()

    def build_from_file(self, path: str) -> CiebiiFile:
        self._validate_input_path(path)
        source = load_source(path, self.settings.max_width)
        source.validate()
        log.info("Converting colors...")
        chunks = [Chunk(r, g, b) for r, g, b in source.pixels]
        log.info("Constructing file...")
        return CiebiiFile.from_chunks(source.width, source.height, chunks)

    def output_path_for(self, path: str, directory: Optional[str] = None) -> str:
        stem = os.path.splitext(os.path.basename(path))[0]
        return os.path.join(directory or os.curdir, stem + self.settings.output_suffix)

    @staticmethod
    def _validate_input_path(path: str) -> None:
        ext = os.path.splitext(path)[1].lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")
