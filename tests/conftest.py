import pytest
from PIL import Image

PIXELS = [(255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 255), (0, 0, 0), (18, 52, 86)]


@pytest.fixture
def pixels():
    return list(PIXELS)


@pytest.fixture
def png_path(tmp_path, pixels):
    path = tmp_path / "sample.png"
    img = Image.new("RGB", (3, 2))
    img.putdata(pixels)
    img.save(path)
    return path
