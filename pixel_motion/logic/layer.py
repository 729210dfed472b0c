"""
Layer Class for Pixel Motion

Represents a single animation layer with:
- A fixed-length timeline of frame buffers (one PixelBuffer per slot)
- Visibility and name

"""

from .errors import OutOfRange
from .pixel_buffer import PixelBuffer


class Layer:
    """A named, independently visible stack of frames"""

    def __init__(self, layer_id: int, name: str, width: int, height: int, frame_count: int):
        """
        Initialize a new layer

        Args:
            layer_id: Unique id, fixed for the life of the layer
            name: Layer name (e.g., "Layer 1", "Outline")
            width: Grid width in pixels
            height: Grid height in pixels
            frame_count: Number of timeline slots
        """
        self._id = layer_id
        self.name = name
        self.visible = True

        # Every slot starts out fully transparent
        self.frames = [PixelBuffer(width, height) for _ in range(frame_count)]

    @property
    def id(self) -> int:
        return self._id

    @property
    def frame_count(self) -> int:
        return len(self.frames)

    def frame(self, index: int) -> PixelBuffer:
        if not 0 <= index < len(self.frames):
            raise OutOfRange(f"Frame {index} outside 0..{len(self.frames) - 1}")
        return self.frames[index]

    def replace_frame(self, index: int, buffer: PixelBuffer):
        """Store buffer in the slot; the previous buffer is dropped"""
        current = self.frame(index)
        if (buffer.width, buffer.height) != (current.width, current.height):
            raise ValueError(
                f"Buffer is {buffer.width}x{buffer.height}, "
                f"layer expects {current.width}x{current.height}"
            )
        self.frames[index] = buffer

    def filled_frames(self) -> list:
        """Indices of the slots that hold any visible pixel"""
        return [i for i, frame in enumerate(self.frames) if frame.has_content()]

    def __repr__(self):
        """String representation for debugging"""
        return f"Layer({self._id}, '{self.name}', visible={self.visible}, frames={len(self.frames)})"
