from PyQt6.QtWidgets import (QDockWidget, QFrame, QVBoxLayout, QHBoxLayout, QPushButton,
                             QLabel, QGridLayout)
from PyQt6.QtCore import Qt, QTimer


class TimelinePanel(QDockWidget):
    """One row of frame cells per layer, plus playback and onion-skin controls"""

    def __init__(self, editor, parent=None):
        super().__init__("Timeline", parent)
        self.editor = editor

        # 1. Dock Config
        self.setAllowedAreas(Qt.DockWidgetArea.BottomDockWidgetArea | Qt.DockWidgetArea.TopDockWidgetArea)
        self.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetMovable | QDockWidget.DockWidgetFeature.DockWidgetFloatable)

        # 2. Container
        self.container = QFrame()
        self.container.setObjectName("PanelContent")
        self.setWidget(self.container)
        self.layout = QVBoxLayout(self.container)
        self.layout.setContentsMargins(10, 10, 10, 10)

        # 3. Transport
        transport = QHBoxLayout()
        self.btn_play = QPushButton("▶")
        self.btn_play.setCheckable(True)
        self.btn_play.toggled.connect(self.set_playing)
        self.btn_onion = QPushButton("Onion Skin")
        self.btn_onion.setCheckable(True)
        self.btn_onion.toggled.connect(self.editor.set_onion_skin)
        self.lbl_frame = QLabel()
        transport.addWidget(self.btn_play)
        transport.addWidget(self.btn_onion)
        transport.addStretch()
        transport.addWidget(self.lbl_frame)
        self.layout.addLayout(transport)

        # 4. Track Grid
        self.grid = QGridLayout()
        self.grid.setSpacing(2)
        self.layout.addLayout(self.grid)
        self.cells = []

        # 5. Playback clock
        self.timer = QTimer(self)
        self.timer.setInterval(max(1, 1000 // self.editor.config.playback_fps))
        self.timer.timeout.connect(self.editor.advance_frame)

        signals = self.editor.signals
        signals.data_changed.connect(self.rebuild)
        signals.frame_changed.connect(lambda _: self.refresh_cells())
        signals.render_requested.connect(self.refresh_cells)
        self.rebuild()

    def set_playing(self, playing):
        if playing:
            self.timer.start()
            self.btn_play.setText("⏸")
        else:
            self.timer.stop()
            self.btn_play.setText("▶")

    def rebuild(self):
        while self.grid.count():
            widget = self.grid.takeAt(0).widget()
            if widget is not None:
                widget.deleteLater()

        doc = self.editor.document
        self.cells = []
        for row, layer in enumerate(doc.layers):
            self.grid.addWidget(QLabel(layer.name), row, 0)
            row_cells = []
            for frame in range(doc.frame_count):
                cell = QPushButton()
                cell.setObjectName("FrameCell")
                cell.setFixedSize(18, 18)
                cell.clicked.connect(lambda _, f=frame: self.editor.select_frame(f))
                self.grid.addWidget(cell, row, frame + 1)
                row_cells.append(cell)
            self.cells.append(row_cells)
        self.refresh_cells()

    def refresh_cells(self):
        doc = self.editor.document
        for layer, row_cells in zip(doc.layers, self.cells):
            filled = set(layer.filled_frames())
            for frame, cell in enumerate(row_cells):
                cell.setProperty("filled", frame in filled)
                cell.setProperty("active", frame == doc.current_frame_index)
                # Re-polish so the property selectors in the stylesheet apply
                cell.style().unpolish(cell)
                cell.style().polish(cell)
        self.lbl_frame.setText(f"{doc.current_frame_index + 1} / {doc.frame_count}")
