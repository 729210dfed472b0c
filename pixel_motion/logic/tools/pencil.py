from ..colors import TRANSPARENT, hex_to_rgba
from .base import BaseTool
from .line import bresenham_line


class PencilTool(BaseTool):
    def __init__(self, manager, is_eraser=False):
        super().__init__(manager)
        self.is_eraser = is_eraser

    def paint_color(self):
        if self.is_eraser:
            return TRANSPARENT
        return hex_to_rgba(self.manager.primary_color)

    def pointer_down(self, x, y):
        self.manager.plot(x, y, self.paint_color())

    def pointer_move(self, start, end):
        # === Fill the gap between sparse pointer samples === #
        # The start cell gets re-plotted; writes are idempotent
        buffer = self.manager.document.current_buffer()
        color = self.paint_color()
        for px, py in bresenham_line(start[0], start[1], end[0], end[1]):
            buffer.set(px, py, color)
        # One commit (and one render) per pointer event
        self.manager.commit(buffer)
