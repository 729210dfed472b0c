from PyQt6.QtWidgets import (QDialog, QVBoxLayout, QLabel, QSpinBox,
                            QPushButton, QHBoxLayout, QFormLayout)
from PyQt6.QtCore import Qt


class StartupDialog(QDialog):
    def __init__(self, config):
        super().__init__()
        self.setWindowTitle("New Sprite")
        self.setFixedSize(300, 200)

        layout = QVBoxLayout(self)

        # Title
        title = QLabel("Pixel Motion")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-size: 18px; font-weight: bold; margin-bottom: 10px;")
        layout.addWidget(title)

        # Form
        form_layout = QFormLayout()

        self.spin_size = QSpinBox()
        self.spin_size.setRange(8, 128)
        self.spin_size.setValue(config.width)
        self.spin_size.setSuffix(" px")

        self.spin_frames = QSpinBox()
        self.spin_frames.setRange(1, 120)
        self.spin_frames.setValue(config.max_frames)

        form_layout.addRow("Grid Size:", self.spin_size)
        form_layout.addRow("Frames:", self.spin_frames)
        layout.addLayout(form_layout)

        # Buttons
        btn_layout = QHBoxLayout()
        self.btn_create = QPushButton("Create Sprite")
        self.btn_create.clicked.connect(self.accept) # 'accept' closes dialog with Success code
        self.btn_create.setStyleSheet("background-color: #d4af37; color: black; font-weight: bold;")

        self.btn_cancel = QPushButton("Cancel")
        self.btn_cancel.clicked.connect(self.reject) # 'reject' closes with Failure code

        btn_layout.addWidget(self.btn_cancel)
        btn_layout.addWidget(self.btn_create)
        layout.addLayout(btn_layout)

    def get_settings(self):
        return self.spin_size.value(), self.spin_frames.value()
