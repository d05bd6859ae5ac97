"""
Window frame: title bar (drag handle, disabled minimize/maximize, close) around
one tool panel. Geometry and stacking come from the window store; the frame
only forwards pointer gestures.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from PySide6.QtCore import QPoint, Qt
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

if TYPE_CHECKING:
    from paskanet.application.container import Container
    from paskanet.wm.store import WindowEntity


class TitleBar(QFrame):
    def __init__(
        self,
        window_id: int,
        title: str,
        container: Container,
        to_desktop: Callable[[QPoint], QPoint],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._window_id = window_id
        self._container = container
        self._to_desktop = to_desktop
        self.setObjectName("titleBar")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)

        row = QHBoxLayout(self)
        row.setContentsMargins(8, 0, 0, 0)
        row.setSpacing(0)
        text = QLabel(title)
        text.setObjectName("titleBarText")
        row.addWidget(text, 1)
        for label, tip in (("_", "Minimize"), ("□", "Maximize")):
            btn = QPushButton(label)
            btn.setObjectName("titleBarButton")
            btn.setToolTip(tip)
            btn.setEnabled(False)
            row.addWidget(btn)
        self.close_button = QPushButton("✕")
        self.close_button.setObjectName("titleBarButton")
        self.close_button.setProperty("role", "close")
        self.close_button.setToolTip("Close")
        self.close_button.setAccessibleName("closeButton")
        row.addWidget(self.close_button)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            p = self._to_desktop(event.globalPosition().toPoint())
            self._container.drag.begin(self._window_id, p.x(), p.y())
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if self._container.drag.is_dragging:
            p = self._to_desktop(event.globalPosition().toPoint())
            self._container.drag.move(p.x(), p.y())
            event.accept()
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self._container.drag.end()
        super().mouseReleaseEvent(event)


class WindowFrame(QFrame):
    def __init__(
        self,
        entity: WindowEntity,
        body: QWidget,
        container: Container,
        to_desktop: Callable[[QPoint], QPoint],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._window_id = entity.id
        self._container = container
        self._body = body
        self.setObjectName("windowFrame")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)

        self.title_bar = TitleBar(entity.id, entity.title, container, to_desktop, self)
        self.title_bar.close_button.clicked.connect(self._on_close)

        root = QVBoxLayout(self)
        root.setContentsMargins(1, 1, 1, 1)
        root.setSpacing(0)
        root.addWidget(self.title_bar)
        root.addWidget(body, 1)
        self.apply(entity)

    @property
    def window_id(self) -> int:
        return self._window_id

    @property
    def body(self) -> QWidget:
        return self._body

    def apply(self, entity: WindowEntity) -> None:
        self.setGeometry(entity.position.x, entity.position.y, entity.size.width, entity.size.height)

    def teardown(self) -> None:
        """Stop the panel's feeds and timers before the frame is deleted."""
        teardown = getattr(self._body, "teardown", None)
        if callable(teardown):
            teardown()

    def _on_close(self) -> None:
        self._container.close_window(self._window_id)
