from __future__ import annotations

import logging
import os
import tempfile
from typing import Union

from .format import CiebiiFile

log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def read_all(path: PathLike) -> bytes:
    with open(path, "rb") as handle:
        return handle.read()


def write_all(path: PathLike, data: bytes) -> None:
    """Write ``data`` to ``path`` so that readers see either nothing or all of it."""
    directory = os.path.dirname(os.path.abspath(path))
    fd, temp_path = tempfile.mkstemp(prefix=".ciebii-", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_path, path)
    except BaseException:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise
    log.debug("Wrote %d bytes to %s", len(data), path)


def read_file(path: PathLike) -> CiebiiFile:
    data = read_all(path)
    log.debug("Read %d bytes from %s", len(data), path)
    return CiebiiFile.decode(data)


def write_file(path: PathLike, ciebii_file: CiebiiFile) -> None:
    write_all(path, ciebii_file.encode())
