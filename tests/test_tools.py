from pixel_motion.logic.colors import Color, TRANSPARENT
from pixel_motion.logic.pixel_buffer import PixelBuffer
from pixel_motion.logic.tools import bresenham_line, flood_fill

RED = Color(255, 0, 0, 255)
BLACK = Color(0, 0, 0, 255)


def test_horizontal_line():
    assert list(bresenham_line(0, 0, 4, 0)) == [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)]


def test_diagonal_is_symmetric():
    forward = list(bresenham_line(0, 0, 3, 3))
    backward = list(bresenham_line(3, 3, 0, 0))
    assert forward == [(0, 0), (1, 1), (2, 2), (3, 3)]
    assert set(forward) == set(backward)


def test_shallow_line_same_cells_both_ways():
    forward = set(bresenham_line(0, 0, 7, 3))
    backward = set(bresenham_line(7, 3, 0, 0))
    assert forward == backward
    assert (0, 0) in forward and (7, 3) in forward


def test_steep_line_has_one_cell_per_row():
    cells = list(bresenham_line(2, 0, 4, 9))
    assert sorted(y for _, y in cells) == list(range(10))


def test_single_point_line():
    assert list(bresenham_line(5, 5, 5, 5)) == [(5, 5)]


def test_line_is_gap_free():
    cells = list(bresenham_line(-3, 10, 20, -4))
    for (ax, ay), (bx, by) in zip(cells, cells[1:]):
        assert max(abs(ax - bx), abs(ay - by)) == 1


def test_fill_whole_empty_grid():
    buf = PixelBuffer()
    assert flood_fill(buf, 16, 16, RED)
    assert all(buf.get(x, y) == RED for x in range(32) for y in range(32))


def test_fill_same_color_is_noop():
    buf = PixelBuffer()
    flood_fill(buf, 16, 16, RED)
    before = bytes(buf.data)
    assert not flood_fill(buf, 16, 16, RED)
    assert bytes(buf.data) == before


def test_fill_stops_at_boundary():
    buf = PixelBuffer(8, 8)
    for y in range(8):
        buf.set(4, y, BLACK)

    flood_fill(buf, 0, 0, RED)

    assert all(buf.get(x, y) == RED for x in range(4) for y in range(8))
    assert all(buf.get(4, y) == BLACK for y in range(8))
    assert all(buf.get(x, y) == TRANSPARENT for x in range(5, 8) for y in range(8))


def test_fill_is_four_connected():
    # Diagonal neighbours don't leak through a diagonal wall
    buf = PixelBuffer(3, 3)
    buf.set(1, 0, BLACK)
    buf.set(0, 1, BLACK)
    flood_fill(buf, 0, 0, RED)
    assert buf.get(0, 0) == RED
    assert buf.get(1, 1) == TRANSPARENT


def test_fill_off_grid_seed_is_noop():
    buf = PixelBuffer(4, 4)
    assert not flood_fill(buf, -1, 2, RED)
    assert not buf.has_content()
