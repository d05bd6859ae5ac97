"""
Screen controller: one QStackedWidget page per session mode.

Pages are rebuilt on every switch so leaving the desktop tears down its
window frames, panels and timers. A page that fails to build is replaced by
an ErrorWidget with the traceback.
"""

from __future__ import annotations

import logging
import traceback
from collections.abc import Callable

from PySide6.QtCore import QUrl
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import (
    QApplication,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from paskanet.core.paths import get_logs_dir
from paskanet.wm.session import SessionMode

log = logging.getLogger(__name__)


class ErrorWidget(QWidget):
    def __init__(self, screen_id: str, exc: BaseException, tb_text: str) -> None:
        super().__init__()
        self._traceback = tb_text
        root = QVBoxLayout(self)

        title = QLabel("Failed to load screen")
        title.setStyleSheet("font-size: 16px; font-weight: bold; color: #dc2626;")
        root.addWidget(title)

        summary = QLabel(f"{screen_id}: {type(exc).__name__}: {exc}")
        summary.setWordWrap(True)
        root.addWidget(summary)

        tb = QPlainTextEdit()
        tb.setReadOnly(True)
        tb.setPlainText(tb_text)
        tb.setMinimumHeight(180)
        root.addWidget(tb)

        copy_btn = QPushButton("Copy traceback")
        copy_btn.clicked.connect(self._copy_traceback)
        root.addWidget(copy_btn)

        logs_btn = QPushButton("Open logs folder")
        logs_btn.clicked.connect(self._open_logs_folder)
        root.addWidget(logs_btn)
        root.addStretch(1)

    def _copy_traceback(self) -> None:
        QApplication.clipboard().setText(self._traceback)

    def _open_logs_folder(self) -> None:
        QDesktopServices.openUrl(QUrl.fromLocalFile(str(get_logs_dir())))


class ScreenController:
    """Owns the current page of the stack and swaps it when the session mode changes."""

    def __init__(
        self,
        stack: QStackedWidget,
        factories: dict[SessionMode, Callable[[], QWidget]],
    ) -> None:
        self._stack = stack
        self._factories = dict(factories)
        self._mode: SessionMode | None = None
        self._current: QWidget | None = None

    @property
    def mode(self) -> SessionMode | None:
        return self._mode

    @property
    def current(self) -> QWidget | None:
        return self._current

    def show(self, mode: SessionMode) -> None:
        if mode is self._mode and self._current is not None:
            return
        widget = self._build(mode)
        self._stack.addWidget(widget)
        self._stack.setCurrentWidget(widget)
        old, self._current, self._mode = self._current, widget, mode
        if old is not None:
            self._dispose(old)

    def dispose(self) -> None:
        if self._current is not None:
            self._dispose(self._current)
            self._current = None
            self._mode = None

    def _build(self, mode: SessionMode) -> QWidget:
        factory = self._factories.get(mode)
        try:
            if factory is None:
                raise KeyError(f"No screen for {mode.value}")
            return factory()
        except Exception as exc:
            tb_text = traceback.format_exc()
            log.exception("Failed to create screen '%s'", mode.value, extra={"mode": mode.value})
            return ErrorWidget(screen_id=mode.value, exc=exc, tb_text=tb_text)

    def _dispose(self, widget: QWidget) -> None:
        teardown = getattr(widget, "teardown", None)
        if callable(teardown):
            teardown()
        self._stack.removeWidget(widget)
        widget.deleteLater()
