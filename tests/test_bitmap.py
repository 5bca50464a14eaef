import pytest

from rpgkit.bitmap import Bitmap, Pixel


def test_new_bitmap_is_blank():
    bitmap = Bitmap(3, 2)
    assert bitmap.pixels == [Pixel()] * 6


def test_dimensions_are_kept():
    bitmap = Bitmap(5, 7)
    assert (bitmap.width, bitmap.height) == (5, 7)
    assert len(bitmap.pixels) == 35


def test_channels_is_rgba():
    assert Bitmap(1, 1).channels == 4


def test_set_and_get_round_trip():
    bitmap = Bitmap(4, 4)
    pixel = Pixel(10, 20, 30, 40)
    bitmap.set_pixel(2, 3, pixel)
    assert bitmap.get_pixel(2, 3) == pixel
    assert bitmap.get_pixel(3, 2) == Pixel()


def test_pixels_are_row_major():
    bitmap = Bitmap(3, 2)
    pixel = Pixel(1, 2, 3, 4)
    bitmap.set_pixel(1, 1, pixel)
    assert bitmap.pixels.index(pixel) == 1 * bitmap.width + 1


def test_raw_pixels_interleave_channels():
    bitmap = Bitmap(2, 1)
    bitmap.set_pixel(0, 0, Pixel(1, 2, 3, 4))
    bitmap.set_pixel(1, 0, Pixel(5, 6, 7, 8))
    assert bitmap.raw_pixels == bytes([1, 2, 3, 4, 5, 6, 7, 8])


def test_raw_pixels_length():
    bitmap = Bitmap(6, 3)
    assert len(bitmap.raw_pixels) == 6 * 3 * bitmap.channels


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_out_of_bounds_access(x, y):
    bitmap = Bitmap(4, 3)
    with pytest.raises(IndexError):
        bitmap.get_pixel(x, y)
    with pytest.raises(IndexError):
        bitmap.set_pixel(x, y, Pixel())


def test_pixel_channel_range():
    with pytest.raises(ValueError):
        Pixel(256, 0, 0, 0)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Bitmap(-1, 2)