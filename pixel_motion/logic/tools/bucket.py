import logging

from ..colors import hex_to_rgba
from .base import BaseTool

logger = logging.getLogger(__name__)


def flood_fill(buffer, x, y, fill_color) -> bool:
    """
    4-connected region fill with an explicit stack (no recursion).

    Returns False without touching the buffer if the seed is off the grid
    or already has the fill color.
    """
    if not buffer.in_bounds(x, y):
        return False

    fill_color = tuple(fill_color)
    target = tuple(buffer.get(x, y))

    # === Nothing to do: every cell would re-match forever === #
    if target == fill_color:
        return False

    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()

        if not buffer.in_bounds(cx, cy):
            continue
        if tuple(buffer.get(cx, cy)) != target:
            continue

        buffer.set(cx, cy, fill_color)
        stack.append((cx + 1, cy))
        stack.append((cx - 1, cy))
        stack.append((cx, cy + 1))
        stack.append((cx, cy - 1))

    return True


class BucketTool(BaseTool):
    single_shot = True

    def pointer_down(self, x, y):
        buffer = self.manager.document.current_buffer()
        color = hex_to_rgba(self.manager.primary_color)

        logger.debug("🪣 Flood fill at (%d, %d) with %s", x, y, self.manager.primary_color)
        if flood_fill(buffer, x, y, color):
            # One commit for the whole region
            self.manager.commit(buffer)
