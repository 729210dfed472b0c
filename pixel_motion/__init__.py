"""Pixel Motion - a frame-based pixel-art sprite editor."""

from .logic import Document, Editor, EditorSignals, Layer, PixelBuffer, ToolManager, ToolType
from .config import EditorConfig

__all__ = ['Document', 'Editor', 'EditorConfig', 'EditorSignals', 'Layer', 'PixelBuffer',
           'ToolManager', 'ToolType']
