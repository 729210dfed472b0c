"""
Logic Package for Pixel Motion

Contains the drawing core, free of any widget code:
- PixelBuffer: RGBA raster for one frame slot
- Layer / Document: layer stack, timeline and cursor
- composite / downscale_preview: flattening and thumbnails
- ToolManager: pointer gestures -> pixel edits
- Editor: the above wired together with the change signals

"""

from .colors import Color, TRANSPARENT, hex_to_rgba, rgba_to_hex
from .compositor import composite, downscale_preview
from .document import Document
from .editor import Editor
from .enums import ToolType
from .errors import ConfigError, InvalidCursor, OutOfRange, PixelMotionError
from .layer import Layer
from .pixel_buffer import PixelBuffer
from .signals import EditorSignals
from .tool_manager import ToolManager, grid_position

__all__ = [
    'Color', 'TRANSPARENT', 'hex_to_rgba', 'rgba_to_hex',
    'composite', 'downscale_preview',
    'Document', 'Editor', 'EditorSignals', 'Layer', 'PixelBuffer',
    'ToolManager', 'ToolType', 'grid_position',
    'ConfigError', 'InvalidCursor', 'OutOfRange', 'PixelMotionError',
]
