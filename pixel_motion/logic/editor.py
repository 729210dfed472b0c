"""
Editor Context for Pixel Motion

Everything one open sprite needs, owned in one place and passed
around explicitly: the document, the tool manager, the onion-skin
switch and the change signals. Widgets hold a reference to an Editor
instead of reaching for global state, so several editors (or tests)
can live side by side.

"""

import logging

from ..config import EditorConfig
from .compositor import composite, downscale_preview
from .document import Document
from .signals import EditorSignals
from .tool_manager import ToolManager

logger = logging.getLogger(__name__)


class Editor:
    def __init__(self, config: EditorConfig = None):
        self.config = config or EditorConfig()
        self.signals = EditorSignals()

        self.document = Document(self.config.width, self.config.height, self.config.max_frames)
        self.document.add_layer("Layer 1")

        self.tools = ToolManager(self.document, self.signals)
        self.onion_skin_enabled = False

    # === Layers === #
    def add_layer(self, name: str = None):
        layer = self.document.add_layer(name)
        self.signals.data_changed.emit()
        self.signals.render_requested.emit()
        return layer

    def select_layer(self, index: int):
        self.document.set_cursor(layer_index=index)
        self.signals.data_changed.emit()

    def set_layer_visible(self, index: int, visible: bool):
        layer = self.document.layer(index)
        if layer.visible == visible:
            return
        layer.visible = visible
        self.signals.data_changed.emit()
        self.signals.render_requested.emit()

    def toggle_layer_visibility(self, index: int):
        self.set_layer_visible(index, not self.document.layer(index).visible)

    def rename_layer(self, index: int, name: str):
        self.document.layer(index).name = name
        self.signals.data_changed.emit()

    # === Timeline === #
    def select_frame(self, index: int):
        self.document.set_cursor(frame_index=index)
        self.signals.frame_changed.emit(index)
        self.signals.render_requested.emit()

    def advance_frame(self):
        """One playback tick: move to the next slot, wrapping at the end"""
        self.select_frame(self.document.next_frame_index())

    def set_onion_skin(self, enabled: bool):
        self.onion_skin_enabled = bool(enabled)
        logger.debug("🧅 Onion skin %s", "on" if self.onion_skin_enabled else "off")
        self.signals.render_requested.emit()

    def toggle_onion_skin(self):
        self.set_onion_skin(not self.onion_skin_enabled)

    # === Rendering === #
    def render(self):
        """Composite of the current slot, onion skin included if enabled"""
        return composite(
            self.document,
            self.document.current_frame_index,
            self.onion_skin_enabled,
            self.config.onion_skin_opacity,
        )

    def render_preview(self, size: int = None):
        return downscale_preview(self.render(), size or self.config.preview_size)
