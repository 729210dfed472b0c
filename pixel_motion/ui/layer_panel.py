from PyQt6.QtWidgets import (QDockWidget, QFrame, QVBoxLayout, QPushButton, QListWidget,
                             QListWidgetItem, QHBoxLayout)
from PyQt6.QtCore import Qt


class LayerPanel(QDockWidget):
    def __init__(self, editor, parent=None):
        super().__init__("Layers", parent)
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

        # 4. Content
        self.layer_list = QListWidget()
        self.layer_list.currentRowChanged.connect(self._on_row_changed)
        self.layer_list.itemChanged.connect(self._on_item_changed)
        self.layout.addWidget(self.layer_list)

        # Button Row
        btn_layout = QHBoxLayout()
        self.btn_add = QPushButton("+")
        self.btn_add.setToolTip("Add Layer")
        self.btn_add.clicked.connect(lambda: self.editor.add_layer())
        btn_layout.addWidget(self.btn_add)
        self.layout.addLayout(btn_layout)

        editor.signals.data_changed.connect(self.rebuild)
        self.rebuild()

    # Top-most layer is listed first, so rows run opposite to document order
    def _row_to_index(self, row):
        return self.editor.document.layer_count - 1 - row

    def rebuild(self):
        doc = self.editor.document
        self.layer_list.blockSignals(True)

        # Items are updated in place when the count is unchanged; this runs
        # from inside itemChanged, where deleting the item is not safe.
        while self.layer_list.count() < doc.layer_count:
            item = QListWidgetItem()
            item.setFlags(item.flags() | Qt.ItemFlag.ItemIsUserCheckable)
            self.layer_list.addItem(item)

        for row, layer in enumerate(reversed(doc.layers)):
            item = self.layer_list.item(row)
            item.setText(layer.name)
            item.setCheckState(Qt.CheckState.Checked if layer.visible else Qt.CheckState.Unchecked)

        self.layer_list.setCurrentRow(self._row_to_index(doc.current_layer_index))
        self.layer_list.blockSignals(False)

    def _on_row_changed(self, row):
        if row < 0: return
        index = self._row_to_index(row)
        if index != self.editor.document.current_layer_index:
            self.editor.select_layer(index)

    def _on_item_changed(self, item):
        index = self._row_to_index(self.layer_list.row(item))
        self.editor.set_layer_visible(index, item.checkState() == Qt.CheckState.Checked)
