import pytest

from yegfinder.lcd_image import LcdImage, rgb565_to_rgb

NCOLS = 4
NROWS = 3


def _pixel(row, col):
    return row * 100 + col + 0x1200


@pytest.fixture
def image(tmp_path):
    path = tmp_path / "test.lcd"
    data = b"".join(
        _pixel(r, c).to_bytes(2, "big") for r in range(NROWS) for c in range(NCOLS)
    )
    path.write_bytes(data)
    return LcdImage(path, NCOLS, NROWS)


def test_read_full_image(image):
    patch = image.read_patch(0, 0, NCOLS, NROWS)
    assert patch == [[_pixel(r, c) for c in range(NCOLS)] for r in range(NROWS)]


def test_read_inner_patch(image):
    patch = image.read_patch(1, 1, 2, 2)
    assert patch == [[_pixel(1, 1), _pixel(1, 2)], [_pixel(2, 1), _pixel(2, 2)]]


def test_patch_shape(image):
    patch = image.read_patch(2, 0, 2, 3)
    assert len(patch) == 3
    assert all(len(row) == 2 for row in patch)


def test_read_past_end_raises(image):
    with pytest.raises(OSError):
        image.read_patch(0, 2, NCOLS, 2)


def test_missing_file(tmp_path):
    img = LcdImage(tmp_path / "absent.lcd", 2, 2)
    with pytest.raises(FileNotFoundError):
        img.read_patch(0, 0, 1, 1)


def test_rgb565_extremes():
    assert rgb565_to_rgb(0x0000) == (0, 0, 0)
    assert rgb565_to_rgb(0xFFFF) == (255, 255, 255)


def test_rgb565_primaries():
    assert rgb565_to_rgb(0xF800) == (255, 0, 0)
    assert rgb565_to_rgb(0x07E0) == (0, 255, 0)
    assert rgb565_to_rgb(0x001F) == (0, 0, 255)