"""Scheduler port on top of the Qt event loop."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, QTimer


class QtScheduler:
    """call_later via QTimer.singleShot; callbacks run on the UI thread.

    With a context object the pending callback is dropped when that object dies.
    """

    def __init__(self, context: QObject | None = None) -> None:
        self._context = context

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        if self._context is not None:
            QTimer.singleShot(max(0, int(delay_ms)), self._context, callback)
        else:
            QTimer.singleShot(max(0, int(delay_ms)), callback)
