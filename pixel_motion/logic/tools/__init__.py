from .base import BaseTool
from .bucket import BucketTool, flood_fill
from .line import bresenham_line
from .pencil import PencilTool

__all__ = ['BaseTool', 'BucketTool', 'PencilTool', 'bresenham_line', 'flood_fill']
