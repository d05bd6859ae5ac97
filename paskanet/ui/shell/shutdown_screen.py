from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget


class ShutdownScreen(QWidget):
    """Shown while the shutdown timer runs; nothing on it is interactive."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("shutdownScreen")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        label = QLabel("Shutting down...")
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root = QVBoxLayout(self)
        root.addWidget(label)
