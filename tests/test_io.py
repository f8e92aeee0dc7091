import os

import pytest

from ciebii.format import ChecksumMismatch, CiebiiFile
from ciebii.io import read_all, read_file, write_all, write_file


@pytest.fixture
def square_file():
    return CiebiiFile.from_pixels(2, 2, [(0xAB, 0xCD, 0xEF), (0x12, 0x34, 0x56), (0x69, 0x42, 0x00), (0xDE, 0xAD, 0xA5)])


def test_write_then_read(tmp_path, square_file):
    path = tmp_path / "testfile.cib"
    write_file(path, square_file)
    assert read_all(path) == square_file.encode()
    assert len(read_all(path)) == 50
    assert read_file(path) == square_file


def test_write_replaces_existing_file(tmp_path, square_file):
    path = tmp_path / "testfile.cib"
    path.write_bytes(b"old contents that are longer than the new ones" * 4)
    write_file(path, square_file)
    assert read_all(path) == square_file.encode()
    assert os.listdir(tmp_path) == ["testfile.cib"]


def test_failed_write_leaves_nothing_behind(tmp_path, monkeypatch):
    def fail_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", fail_replace)
    with pytest.raises(OSError):
        write_all(tmp_path / "out.cib", b"data")
    assert os.listdir(tmp_path) == []


def test_write_into_missing_directory(tmp_path):
    with pytest.raises(OSError):
        write_all(tmp_path / "missing" / "out.cib", b"data")


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "nope.cib")


def test_read_corrupted_file(tmp_path, square_file):
    data = bytearray(square_file.encode())
    data[31] ^= 0x10
    path = tmp_path / "corrupt.cib"
    path.write_bytes(bytes(data))
    with pytest.raises(ChecksumMismatch):
        read_file(path)
