"""
Error Types for Pixel Motion

- OutOfRange: coordinate or index outside the grid / timeline / layer stack
- InvalidCursor: document accessed with no layers (invariant violation)
- ConfigError: configuration values that cannot be used

"""


class PixelMotionError(Exception):
    """Base class for every error raised by the editor core"""


class OutOfRange(PixelMotionError, IndexError):
    """A coordinate or index fell outside its valid bounds"""


class InvalidCursor(PixelMotionError, RuntimeError):
    """The document has no layer to point the cursor at"""


class ConfigError(PixelMotionError, ValueError):
    """A configuration value is out of its allowed range"""
