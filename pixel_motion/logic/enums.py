from enum import Enum


class ToolType(Enum):
    # --- CREATION ---
    PENCIL = "pencil"   # (B) Single pixels + continuous strokes
    ERASER = "eraser"   # (E) Same as pencil, paints transparent
    BUCKET = "bucket"   # (G) Flood fill, one shot per click
