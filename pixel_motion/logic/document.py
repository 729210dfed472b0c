"""
Document for Pixel Motion

Owns the layer stack (list order = z-order, last layer drawn on top)
and the cursor: which layer and which timeline slot the tools paint into.

"""

import logging

from .errors import InvalidCursor, OutOfRange
from .layer import Layer
from .pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


class Document:
    """Layers x frames of pixel data plus the current (layer, frame) cursor"""

    def __init__(self, width: int = 32, height: int = 32, frame_count: int = 24):
        if frame_count <= 0:
            raise ValueError(f"frame_count must be positive, got {frame_count}")
        self.width = width
        self.height = height
        self.frame_count = frame_count

        self.layers = []
        self.current_layer_index = 0
        self.current_frame_index = 0
        self._next_layer_id = 1

    @property
    def layer_count(self) -> int:
        return len(self.layers)

    # === Layers === #
    def add_layer(self, name: str = None) -> Layer:
        """Append a blank, visible layer on top and make it current"""
        if name is None:
            name = f"Layer {len(self.layers) + 1}"

        layer = Layer(self._next_layer_id, name, self.width, self.height, self.frame_count)
        self._next_layer_id += 1

        self.layers.append(layer)
        self.current_layer_index = len(self.layers) - 1
        logger.info("➕ Added %r", layer)
        return layer

    def layer(self, index: int) -> Layer:
        if not 0 <= index < len(self.layers):
            raise OutOfRange(f"Layer {index} outside 0..{len(self.layers) - 1}")
        return self.layers[index]

    def current_layer(self) -> Layer:
        if not self.layers:
            raise InvalidCursor("Document has no layers")
        return self.layers[self.current_layer_index]

    # === Frame Buffers === #
    def current_buffer(self) -> PixelBuffer:
        return self.current_layer().frames[self.current_frame_index]

    def replace_current_buffer(self, buffer: PixelBuffer):
        self.current_layer().replace_frame(self.current_frame_index, buffer)

    # === Cursor === #
    def set_cursor(self, layer_index: int = None, frame_index: int = None):
        """
        Move the cursor. Both indices are checked before either is applied,
        so a bad request leaves the cursor where it was.
        """
        if layer_index is not None and not 0 <= layer_index < len(self.layers):
            raise OutOfRange(f"Layer {layer_index} outside 0..{len(self.layers) - 1}")
        if frame_index is not None and not 0 <= frame_index < self.frame_count:
            raise OutOfRange(f"Frame {frame_index} outside 0..{self.frame_count - 1}")

        if layer_index is not None:
            self.current_layer_index = layer_index
        if frame_index is not None:
            self.current_frame_index = frame_index

    def next_frame_index(self) -> int:
        """Slot after the current one, wrapping back to 0 (playback order)"""
        return (self.current_frame_index + 1) % self.frame_count

    def __repr__(self):
        return (f"Document({self.width}x{self.height}, layers={len(self.layers)}, "
                f"frames={self.frame_count}, cursor=({self.current_layer_index}, {self.current_frame_index}))")
