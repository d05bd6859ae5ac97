from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import QLabel, QStyle, QVBoxLayout, QWidget


class DesktopIcon(QWidget):
    """Icon with a label; a double-click opens its tool."""

    def __init__(
        self, label: str, on_open: Callable[[], object], parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self._on_open = on_open
        self.setObjectName("desktopIcon")
        self.setFixedSize(88, 84)
        image = QLabel()
        image.setPixmap(self.style().standardIcon(QStyle.StandardPixmap.SP_ComputerIcon).pixmap(40, 40))
        image.setAlignment(Qt.AlignmentFlag.AlignCenter)
        text = QLabel(label)
        text.setAlignment(Qt.AlignmentFlag.AlignCenter)
        text.setWordWrap(True)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(2, 2, 2, 2)
        layout.addWidget(image)
        layout.addWidget(text)

    def mouseDoubleClickEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self._on_open()
            event.accept()
            return
        super().mouseDoubleClickEvent(event)
