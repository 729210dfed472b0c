def bresenham_line(x0: int, y0: int, x1: int, y1: int):
    """
    Yield every grid cell on the line from (x0, y0) to (x1, y1), both
    endpoints included. Integer-only.

    The walk always runs in one canonical direction (left to right, then
    top to bottom) so swapping the endpoints yields the same cells.
    """
    if (x1, y1) < (x0, y0):
        x0, y0, x1, y1 = x1, y1, x0, y0

    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy

    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy
