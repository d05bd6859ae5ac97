from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QPushButton, QVBoxLayout, QWidget


class StartMenu(QFrame):
    """Floating panel above the start button. Visibility follows ChromeControls."""

    def __init__(self, on_shutdown: Callable[[], object], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("startMenu")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.shutdown_button = QPushButton("Shutdown")
        self.shutdown_button.clicked.connect(lambda: on_shutdown())
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 4, 0, 4)
        layout.addWidget(self.shutdown_button)
        self.setFixedWidth(220)
        self.adjustSize()
        self.hide()
