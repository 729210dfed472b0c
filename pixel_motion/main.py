import sys
import logging

from PyQt6.QtWidgets import QApplication, QMainWindow, QToolBar, QDockWidget, QScrollArea
from PyQt6.QtCore import Qt, QSize
from PyQt6.QtGui import QAction, QKeySequence

# Custom Imports
from .config import EditorConfig
from .config_manager import load_config, editor_config_from
from .logging_setup import configure_logging
from .logic.editor import Editor
from .ui.canvas import PixelCanvas
from .ui.layer_panel import LayerPanel
from .ui.startup_dialog import StartupDialog
from .ui.timeline_panel import TimelinePanel
from .ui.tool_station import ToolStation
from . import styles

logger = logging.getLogger(__name__)


class PixelMotion(QMainWindow):
    def __init__(self, config, editor_config: EditorConfig):
        super().__init__()

        # 1. Config & Window Setup
        self.config = config
        app_settings = self.config['app_settings']

        self.setWindowTitle(app_settings['title'])
        self.resize(app_settings['initial_width'], app_settings['initial_height'])
        self.setStyleSheet(styles.get_stylesheet(self.config['theme']))

        # 2. The Editor + Canvas
        self.editor = Editor(editor_config)
        self.canvas = PixelCanvas(self.editor)
        scroll = QScrollArea()
        scroll.setWidget(self.canvas)
        scroll.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setCentralWidget(scroll)

        # 3. The Docks
        self.station = ToolStation(self.editor, parent=self)
        self.addDockWidget(Qt.DockWidgetArea.LeftDockWidgetArea, self.station)

        self.layer_panel = LayerPanel(self.editor, self)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, self.layer_panel)

        self.timeline = TimelinePanel(self.editor, self)
        self.addDockWidget(Qt.DockWidgetArea.BottomDockWidgetArea, self.timeline)

        # 4. Menus & Actions
        self.setup_actions()
        self.setup_menubar()
        self.setup_toolbar()

        # Start Unlocked
        self.toggle_ui_lock(False)
        self.canvas.setFocus()

    def setup_actions(self):
        """Define logic for menus and buttons"""
        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

        self.act_add_layer = QAction("Add Layer", self)
        self.act_add_layer.setShortcut(QKeySequence("Ctrl+Shift+N"))
        self.act_add_layer.triggered.connect(lambda: self.editor.add_layer())

        self.act_zoom_in = QAction("Zoom In", self)
        self.act_zoom_in.setShortcut(QKeySequence("Ctrl+="))
        self.act_zoom_in.triggered.connect(lambda: self.canvas.set_zoom(self.canvas.zoom + 2))

        self.act_zoom_out = QAction("Zoom Out", self)
        self.act_zoom_out.setShortcut(QKeySequence("Ctrl+-"))
        self.act_zoom_out.triggered.connect(lambda: self.canvas.set_zoom(self.canvas.zoom - 2))

        self.act_lock = QAction("Lock Workspace", self)
        self.act_lock.setCheckable(True)
        self.act_lock.toggled.connect(self.toggle_ui_lock)

    def setup_menubar(self):
        """Create the top text menu"""
        menu = self.menuBar()

        file_menu = menu.addMenu("&File")
        file_menu.addAction(self.act_exit)

        layer_menu = menu.addMenu("&Layer")
        layer_menu.addAction(self.act_add_layer)

        view_menu = menu.addMenu("&View")
        view_menu.addAction(self.act_zoom_in)
        view_menu.addAction(self.act_zoom_out)
        view_menu.addAction(self.act_lock)

        # Window menu lets users bring back closed panels
        win_menu = menu.addMenu("&Window")
        win_menu.addAction(self.station.toggleViewAction())
        win_menu.addAction(self.layer_panel.toggleViewAction())
        win_menu.addAction(self.timeline.toggleViewAction())

    def setup_toolbar(self):
        """Create the icon bar"""
        toolbar = QToolBar("Main Toolbar")
        toolbar.setIconSize(QSize(16, 16))
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        toolbar.addAction(self.act_add_layer)
        toolbar.addAction(self.act_zoom_in)
        toolbar.addAction(self.act_zoom_out)
        toolbar.addAction(self.act_lock)

    def toggle_ui_lock(self, locked):
        """Freezes or Unfreezes the panels"""
        docks = [self.station, self.layer_panel, self.timeline]
        for dock in docks:
            if locked:
                dock.setFeatures(QDockWidget.DockWidgetFeature.NoDockWidgetFeatures)
            else:
                dock.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetMovable |
                                QDockWidget.DockWidgetFeature.DockWidgetFloatable |
                                QDockWidget.DockWidgetFeature.DockWidgetClosable)


def main():
    configure_logging()

    config = load_config()
    if config is None:
        sys.exit(1)
    editor_config = editor_config_from(config)

    app = QApplication(sys.argv)

    # === STARTUP === #
    dialog = StartupDialog(editor_config)
    if not dialog.exec():
        sys.exit()

    size, frames = dialog.get_settings()
    editor_config.width = editor_config.height = size
    editor_config.max_frames = frames
    logger.info("🚀 New %dx%d sprite, %d frames", size, size, frames)

    window = PixelMotion(config, editor_config)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
