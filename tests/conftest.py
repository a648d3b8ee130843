import pytest
from PIL import Image

from pixgrid.buffer import PixelBuffer
from pixgrid.color import pack


@pytest.fixture
def grid_2x3():
    """The 2x3 buffer [[1, 2, 3], [4, 5, 6]] of raw packed words."""
    return PixelBuffer.from_rows([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def patterned_buffer():
    """Deterministic 6x4 buffer where every cell has a distinct color."""
    rows = []
    for y in range(6):
        rows.append([pack((x * 37 + y * 17) % 256, (x * 13 + y * 53) % 256, (x * 97 + y * 19) % 256) for x in range(4)])
    return PixelBuffer.from_rows(rows)


@pytest.fixture
def patterned_png(tmp_path):
    """
    Creates a deterministic 5x7 (W x H) RGB PNG with a spatial pattern.
    Returns the path and the expected (r, g, b) at each (row, col).
    """
    w, h = 5, 7
    img = Image.new("RGB", (w, h))
    px = img.load()
    expected = {}
    for y in range(h):
        for x in range(w):
            rgb = ((x * 37 + y * 17) % 256, (x * 13 + y * 53) % 256, (x * 97 + y * 19) % 256)
            px[x, y] = rgb
            expected[(y, x)] = rgb

    path = tmp_path / "pattern.png"
    img.save(path)
    return path, expected
