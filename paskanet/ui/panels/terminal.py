"""Command Prompt panel: transcript, prompt line, Up/Down history."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from PySide6.QtCore import QEvent, QObject, Qt
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import QHBoxLayout, QLabel, QLineEdit, QPlainTextEdit, QVBoxLayout, QWidget

from paskanet.config import PROMPT
from paskanet.ui.panels.base import PanelBody

if TYPE_CHECKING:
    from paskanet.application.container import Container


class ConsoleInput(QLineEdit):
    def __init__(
        self,
        on_up: Callable[[], str | None],
        on_down: Callable[[], str],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._on_up = on_up
        self._on_down = on_down
        self.setObjectName("consoleInput")

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() == Qt.Key.Key_Up:
            entry = self._on_up()
            if entry is not None:
                self.setText(entry)
            event.accept()
            return
        if event.key() == Qt.Key.Key_Down:
            self.setText(self._on_down())
            event.accept()
            return
        super().keyPressEvent(event)


class TerminalPanel(PanelBody):
    def __init__(self, container: Container, window_id: int, parent: QWidget | None = None) -> None:
        super().__init__(container, window_id, parent)
        self._session = container.terminal_session(on_exit=lambda: container.close_window(window_id))

        self._body = QPlainTextEdit()
        self._body.setObjectName("consoleBody")
        self._body.setReadOnly(True)
        self._body.viewport().installEventFilter(self)

        self._input = ConsoleInput(self._session.history_up, self._session.history_down)
        self._input.returnPressed.connect(self._on_enter)
        prompt = QLabel(PROMPT)
        prompt.setObjectName("consolePrompt")

        input_row = QHBoxLayout()
        input_row.setContentsMargins(4, 0, 4, 4)
        input_row.addWidget(prompt)
        input_row.addWidget(self._input, 1)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)
        root.addWidget(self._body, 1)
        root.addLayout(input_row)
        self.setStyleSheet("background-color: #0c0c0c;")
        self._render()
        self._input.setFocus()

    def transcript(self) -> list[str]:
        return self._session.lines

    def run(self, line: str) -> None:
        result = self._session.submit(line)
        if result.close_requested:
            return
        self._render()

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if obj is self._body.viewport() and event.type() == QEvent.Type.MouseButtonRelease:
            self._input.setFocus()
        return super().eventFilter(obj, event)

    def _on_enter(self) -> None:
        line = self._input.text()
        self._input.clear()
        self.run(line)

    def _render(self) -> None:
        self._body.setPlainText("\n".join(self._session.lines))
        bar = self._body.verticalScrollBar()
        bar.setValue(bar.maximum())
