"""
Tool Manager for Pixel Motion

Turns pointer gestures (already converted to grid coordinates) into
pixel edits on the document's current frame:

    Idle --down--> Drawing --move--> Drawing --up--> Idle

The bucket is single-shot: it fills on press and goes straight back
to Idle. Gesture state is thrown away at the end of every gesture.

"""

import logging
import math

from .colors import hex_to_rgba
from .enums import ToolType
from .tools import BucketTool, PencilTool

logger = logging.getLogger(__name__)


def grid_position(px: float, py: float, zoom: float):
    """Map widget pixel coordinates to the grid cell under them"""
    return math.floor(px / zoom), math.floor(py / zoom)


class ToolManager:
    """Gesture state machine plus the active tool and colors"""

    def __init__(self, document, signals):
        """
        Args:
            document: The Document whose current buffer gets painted
            signals: EditorSignals used to announce every commit
        """
        self.document = document
        self.signals = signals

        # === Gesture State === #
        self.is_drawing = False
        self.last_position = None

        # === Colors (hex strings, as the picker hands them over) === #
        self.primary_color = '#000000'
        self.secondary_color = '#ffffff'

        self.tools = {
            ToolType.PENCIL: PencilTool(self),
            ToolType.ERASER: PencilTool(self, is_eraser=True),
            ToolType.BUCKET: BucketTool(self),
        }
        self.current_tool = ToolType.PENCIL

    @property
    def active_tool(self):
        return self.tools[self.current_tool]

    # === Settings === #
    def set_tool(self, tool):
        """Switch tools; accepts a ToolType or its name ('pencil', ...)"""
        try:
            tool = ToolType(tool)
        except ValueError:
            raise ValueError(f"Unknown tool: {tool!r}") from None

        self._reset()
        self.current_tool = tool
        logger.debug("🖌️ Tool: %s", tool.value)

    def set_primary_color(self, color: str):
        self.primary_color = color

    def swap_colors(self):
        self.primary_color, self.secondary_color = self.secondary_color, self.primary_color

    @property
    def primary_rgba(self):
        return hex_to_rgba(self.primary_color)

    # === Pointer Gesture === #
    def pointer_down(self, x: int, y: int):
        tool = self.active_tool
        tool.pointer_down(x, y)

        if tool.single_shot:
            self._reset()
            return

        self.is_drawing = True
        self.last_position = (x, y)

    def pointer_move(self, x: int, y: int):
        if not self.is_drawing:
            return
        self.active_tool.pointer_move(self.last_position, (x, y))
        self.last_position = (x, y)

    def pointer_up(self):
        if self.is_drawing:
            self.active_tool.pointer_up()
        self._reset()

    def _reset(self):
        self.is_drawing = False
        self.last_position = None

    # === Pixel Writes (used by the tools) === #
    def plot(self, x: int, y: int, color):
        """Write one pixel into the current frame and commit it"""
        buffer = self.document.current_buffer()
        buffer.set(x, y, color)
        self.commit(buffer)

    def commit(self, buffer):
        self.document.replace_current_buffer(buffer)
        self.signals.render_requested.emit()
