from PyQt6.QtWidgets import (QDockWidget, QFrame, QVBoxLayout, QPushButton, QLabel,
                             QGridLayout, QButtonGroup, QColorDialog)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QPixmap

from ..logic.colors import DEFAULT_PALETTE, rgba_to_hex
from ..utils import buffer_to_qimage

TOOLS = [("pencil", "B"), ("eraser", "E"), ("bucket", "G")]


class ToolStation(QDockWidget):
    def __init__(self, editor, parent=None):
        super().__init__("Tools", parent)
        self.editor = editor

        # 1. Dock Config
        self.setAllowedAreas(Qt.DockWidgetArea.LeftDockWidgetArea | Qt.DockWidgetArea.RightDockWidgetArea)
        self.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetMovable | QDockWidget.DockWidgetFeature.DockWidgetFloatable)

        # 2. Container
        self.container = QFrame()
        self.container.setObjectName("PanelContent")
        self.setWidget(self.container)

        # 3. Layout
        self.layout = QVBoxLayout(self.container)
        self.layout.setContentsMargins(10, 10, 10, 10)
        self.layout.setSpacing(10)
        self.layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        # 4. Content
        title = QLabel("TOOLS")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-weight: bold; opacity: 0.5; font-size: 10px;")
        self.layout.addWidget(title)

        # === Tool Buttons === #
        self.tool_group = QButtonGroup(self)
        self.tool_group.setExclusive(True)
        self.tool_buttons = {}
        for name, shortcut in TOOLS:
            btn = QPushButton(f"{name.title()} ({shortcut})")
            btn.setCheckable(True)
            btn.clicked.connect(lambda _, n=name: self.set_tool(n))
            self.tool_group.addButton(btn)
            self.tool_buttons[name] = btn
            self.layout.addWidget(btn)
        self.tool_buttons[self.editor.tools.current_tool.value].setChecked(True)

        # === Colors === #
        self.btn_primary = QPushButton()
        self.btn_primary.setFixedHeight(32)
        self.btn_primary.setToolTip("Primary color (X swaps)")
        self.btn_primary.clicked.connect(self.pick_color)
        self.layout.addWidget(self.btn_primary)

        palette = QGridLayout()
        palette.setSpacing(4)
        for i, hex_color in enumerate(DEFAULT_PALETTE):
            swatch = QPushButton()
            swatch.setFixedSize(22, 22)
            swatch.setStyleSheet(f"background-color: {hex_color}; border-radius: 4px; padding: 0px;")
            swatch.clicked.connect(lambda _, c=hex_color: self.set_color(c))
            palette.addWidget(swatch, i // 4, i % 4)
        self.layout.addLayout(palette)

        # === Preview === #
        self.preview = QLabel()
        self.preview.setFixedSize(self.editor.config.preview_size, self.editor.config.preview_size)
        self.preview.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(self.preview)

        self.layout.addStretch()

        self.editor.signals.render_requested.connect(self.refresh_preview)
        self.refresh_color()
        self.refresh_preview()

    def set_tool(self, name):
        self.editor.tools.set_tool(name)
        self.tool_buttons[name].setChecked(True)

    def set_color(self, hex_color):
        self.editor.tools.set_primary_color(hex_color)
        self.refresh_color()

    def swap_colors(self):
        self.editor.tools.swap_colors()
        self.refresh_color()

    def pick_color(self):
        color = QColorDialog.getColor(QColor(self.editor.tools.primary_color), self, "Primary Color")
        if color.isValid():
            self.set_color(color.name())

    def refresh_color(self):
        # Show what the pencil will actually paint (malformed input shows as black)
        self.btn_primary.setStyleSheet(f"background-color: {rgba_to_hex(self.editor.tools.primary_rgba)};")

    def refresh_preview(self):
        self.preview.setPixmap(QPixmap.fromImage(buffer_to_qimage(self.editor.render_preview())))
