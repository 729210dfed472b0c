"""
Configuration and Constants for Pixel Motion

"""

from dataclasses import dataclass

from .logic.errors import ConfigError

# ==========================================
# 📐 DEFAULT VALUES
# ==========================================
DEFAULT_GRID_SIZE = 32
DEFAULT_MAX_FRAMES = 24
DEFAULT_ONION_SKIN_OPACITY = 0.3
DEFAULT_ZOOM = 15
PREVIEW_SIZE = 128
PLAYBACK_FPS = 12
MAX_PLAYBACK_FPS = 1000  # the playback timer ticks in whole milliseconds


# ==========================================
# ⚙️ EDITOR SETTINGS
# ==========================================
@dataclass
class EditorConfig:
    """Settings fixed for the lifetime of one Editor"""
    width: int = DEFAULT_GRID_SIZE
    height: int = DEFAULT_GRID_SIZE
    max_frames: int = DEFAULT_MAX_FRAMES
    onion_skin_opacity: float = DEFAULT_ONION_SKIN_OPACITY
    zoom: int = DEFAULT_ZOOM
    preview_size: int = PREVIEW_SIZE
    playback_fps: int = PLAYBACK_FPS

    def __post_init__(self):
        for field_name in ('width', 'height', 'max_frames', 'zoom', 'preview_size', 'playback_fps'):
            value = getattr(self, field_name)
            if not isinstance(value, int) or value <= 0:
                raise ConfigError(f"{field_name} must be a positive integer, got {value!r}")

        if not 0.0 <= self.onion_skin_opacity <= 1.0:
            raise ConfigError(f"onion_skin_opacity must be within 0..1, got {self.onion_skin_opacity!r}")

        if self.playback_fps > MAX_PLAYBACK_FPS:
            raise ConfigError(f"playback_fps must be at most {MAX_PLAYBACK_FPS}, got {self.playback_fps!r}")
