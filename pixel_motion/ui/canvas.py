from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, QRect
from PyQt6.QtGui import QPainter, QColor

from ..logic.tool_manager import grid_position
from ..utils import buffer_to_qimage

MIN_ZOOM = 1
MAX_ZOOM = 64
ZOOM_STEP = 2


class PixelCanvas(QWidget):
    """Shows the composite blown up by the zoom factor and feeds mouse input to the tools"""

    def __init__(self, editor, parent=None):
        super().__init__(parent)
        self.editor = editor
        self.zoom = editor.config.zoom
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        self._image = None
        self._apply_zoom()

        editor.signals.render_requested.connect(self.refresh)
        self.refresh()

    # === View === #
    def refresh(self):
        self._image = buffer_to_qimage(self.editor.render())
        self.update()

    def set_zoom(self, zoom):
        self.zoom = max(MIN_ZOOM, min(zoom, MAX_ZOOM))
        self._apply_zoom()
        self.update()

    def _apply_zoom(self):
        doc = self.editor.document
        self.setFixedSize(doc.width * self.zoom, doc.height * self.zoom)

    def paintEvent(self, event):
        painter = QPainter(self)
        doc = self.editor.document

        # === Transparency Checkerboard === #
        light, dark = QColor("#3a3a3a"), QColor("#2e2e2e")
        for gy in range(doc.height):
            for gx in range(doc.width):
                color = light if (gx + gy) % 2 == 0 else dark
                painter.fillRect(gx * self.zoom, gy * self.zoom, self.zoom, self.zoom, color)

        # No SmoothPixmapTransform hint -> nearest-neighbor scaling, hard pixel edges
        if self._image is not None:
            painter.drawImage(QRect(0, 0, doc.width * self.zoom, doc.height * self.zoom), self._image)
        painter.end()

    # === Input === #
    def map_to_grid(self, pos):
        return grid_position(pos.x(), pos.y(), self.zoom)

    def mousePressEvent(self, event):
        self.setFocus()
        if event.button() != Qt.MouseButton.LeftButton:
            return
        x, y = self.map_to_grid(event.position())
        self.editor.tools.pointer_down(x, y)

    def mouseMoveEvent(self, event):
        if event.buttons() & Qt.MouseButton.LeftButton:
            x, y = self.map_to_grid(event.position())
            self.editor.tools.pointer_move(x, y)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.editor.tools.pointer_up()

    def wheelEvent(self, event):
        if event.modifiers() & Qt.KeyboardModifier.ControlModifier:
            zoom_in = event.angleDelta().y() > 0
            self.set_zoom(self.zoom + (ZOOM_STEP if zoom_in else -ZOOM_STEP))
            return
        super().wheelEvent(event)

    def keyPressEvent(self, event):
        self.handle_shortcuts(event.key())
        super().keyPressEvent(event)

    def handle_shortcuts(self, key):
        if not hasattr(self.window(), 'station'): return
        station = self.window().station
        if key == Qt.Key.Key_B: station.set_tool("pencil")
        elif key == Qt.Key.Key_E: station.set_tool("eraser")
        elif key == Qt.Key.Key_G: station.set_tool("bucket")
        elif key == Qt.Key.Key_X: station.swap_colors()
        elif key == Qt.Key.Key_O: self.editor.toggle_onion_skin()
