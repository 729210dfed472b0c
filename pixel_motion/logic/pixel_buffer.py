"""
PixelBuffer for Pixel Motion

A fixed-size RGBA raster - one of these sits in every frame slot of
every layer. Pixels are stored row by row in a flat bytearray:

    index = (y * width + x) * 4  ->  r, g, b, a

32 x 32 x 4 bytes = 4 KB per frame, so cloning is cheap.

"""

from .colors import Color, TRANSPARENT
from .errors import OutOfRange


def _pixel_bytes(color) -> bytes:
    """Exactly four channel bytes, or ValueError (a short color would shrink the buffer)"""
    if len(color) != 4:
        raise ValueError(f"Expected an RGBA color with 4 channels, got {color!r}")
    return bytes(color)


class PixelBuffer:
    """A width x height grid of RGBA pixels"""

    def __init__(self, width: int = 32, height: int = 32, data=None):
        """
        Create a buffer, fully transparent unless data is given

        Args:
            width: Grid width in pixels
            height: Grid height in pixels
            data: Optional raw RGBA bytes, must be exactly width*height*4 long
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Buffer size must be positive, got {width}x{height}")

        self.width = width
        self.height = height

        size = width * height * 4
        if data is None:
            self.data = bytearray(size)
        else:
            if len(data) != size:
                raise ValueError(f"Expected {size} bytes for {width}x{height}, got {len(data)}")
            self.data = bytearray(data)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _offset(self, x: int, y: int) -> int:
        return (y * self.width + x) * 4

    def get(self, x: int, y: int) -> Color:
        """Read one pixel. Raises OutOfRange off the grid."""
        if not self.in_bounds(x, y):
            raise OutOfRange(f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        i = self._offset(x, y)
        return Color(*self.data[i:i + 4])

    def set(self, x: int, y: int, color) -> None:
        """
        Write one pixel.

        Off-grid writes are dropped on purpose: fast drags routinely
        produce pointer positions outside the canvas.
        """
        pixel = _pixel_bytes(color)
        if not self.in_bounds(x, y):
            return
        i = self._offset(x, y)
        self.data[i:i + 4] = pixel

    def fill(self, color) -> None:
        self.data[:] = _pixel_bytes(color) * (self.width * self.height)

    def clear(self) -> None:
        self.fill(TRANSPARENT)

    def clone(self) -> "PixelBuffer":
        """Deep copy - the new buffer shares nothing with this one"""
        return PixelBuffer(self.width, self.height, self.data)

    def has_content(self) -> bool:
        """True if any pixel is at least partly opaque"""
        return any(self.data[3::4])

    def __eq__(self, other):
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and self.data == other.data

    def __repr__(self):
        return f"PixelBuffer({self.width}x{self.height})"
