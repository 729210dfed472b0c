import pytest

from pixel_motion.logic.colors import Color, TRANSPARENT
from pixel_motion.logic.errors import OutOfRange
from pixel_motion.logic.pixel_buffer import PixelBuffer

RED = Color(255, 0, 0, 255)


def test_new_buffer_is_transparent_and_sized():
    buf = PixelBuffer()
    assert (buf.width, buf.height) == (32, 32)
    assert len(buf.data) == 32 * 32 * 4
    assert not any(buf.data)
    assert not buf.has_content()


@pytest.mark.parametrize("x,y", [(0, 0), (31, 0), (0, 31), (31, 31), (7, 19)])
def test_set_then_get_returns_color(x, y):
    buf = PixelBuffer()
    color = Color(12, 34, 56, 78)
    buf.set(x, y, color)
    assert buf.get(x, y) == color


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (32, 0), (0, 32), (100, -100)])
def test_set_out_of_range_leaves_buffer_untouched(x, y):
    buf = PixelBuffer()
    buf.set(3, 3, RED)
    before = bytes(buf.data)
    buf.set(x, y, RED)
    assert bytes(buf.data) == before


@pytest.mark.parametrize("x,y", [(-1, 0), (32, 5), (5, 32)])
def test_get_out_of_range_raises(x, y):
    with pytest.raises(OutOfRange):
        PixelBuffer().get(x, y)


def test_out_of_range_is_an_index_error():
    with pytest.raises(IndexError):
        PixelBuffer(4, 4).get(4, 0)


def test_clone_is_independent():
    buf = PixelBuffer(4, 4)
    buf.set(1, 1, RED)
    copy = buf.clone()
    assert copy == buf

    copy.set(2, 2, RED)
    assert buf.get(2, 2) == TRANSPARENT
    assert copy != buf


def test_non_square_indexing():
    buf = PixelBuffer(5, 3)
    buf.set(4, 2, RED)
    assert buf.data[-4:] == bytearray(RED)


def test_wrong_data_length_rejected():
    with pytest.raises(ValueError):
        PixelBuffer(2, 2, bytes(15))


def test_fill_and_has_content():
    buf = PixelBuffer(3, 3)
    buf.fill(RED)
    assert buf.has_content()
    assert all(buf.get(x, y) == RED for x in range(3) for y in range(3))
    buf.clear()
    assert not buf.has_content()


def test_fully_transparent_colored_pixel_is_not_content():
    buf = PixelBuffer(2, 2)
    buf.set(0, 0, Color(255, 255, 255, 0))
    assert not buf.has_content()


@pytest.mark.parametrize("color", [(255, 0, 0), (1, 2, 3, 4, 5), ()])
def test_set_rejects_wrong_channel_count(color):
    buf = PixelBuffer(4, 4)
    with pytest.raises(ValueError):
        buf.set(0, 0, color)
    assert len(buf.data) == 4 * 4 * 4
    assert not buf.has_content()


def test_set_rejects_bad_color_even_off_grid():
    buf = PixelBuffer(4, 4)
    with pytest.raises(ValueError):
        buf.set(-1, -1, (255, 0, 0))


def test_fill_rejects_wrong_channel_count():
    buf = PixelBuffer(4, 4)
    with pytest.raises(ValueError):
        buf.fill((255, 0, 0))
    assert len(buf.data) == 4 * 4 * 4
