"""Taskbar: start button on the left, HH:MM clock on the right."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QTime, QTimer, Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QWidget

from paskanet.config import CLOCK_REFRESH_MS


def clock_text(now: QTime) -> str:
    return now.toString("HH:mm")


class Taskbar(QFrame):
    def __init__(
        self,
        on_start: Callable[[], object],
        parent: QWidget | None = None,
        *,
        refresh_ms: int = CLOCK_REFRESH_MS,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("taskbar")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)

        self.start_button = QPushButton("P")
        self.start_button.setObjectName("startButton")
        self.start_button.setToolTip("Start")
        self.start_button.clicked.connect(lambda: on_start())

        self._clock = QLabel()
        self._clock.setObjectName("taskbarClock")

        row = QHBoxLayout(self)
        row.setContentsMargins(0, 0, 0, 0)
        row.addWidget(self.start_button)
        row.addStretch(1)
        row.addWidget(self._clock)

        self._timer = QTimer(self)
        self._timer.setInterval(refresh_ms)
        self._timer.timeout.connect(self.refresh_clock)
        self._timer.start()
        self.refresh_clock()

    def clock_label(self) -> str:
        return self._clock.text()

    def refresh_clock(self) -> None:
        self._clock.setText(clock_text(QTime.currentTime()))

    def teardown(self) -> None:
        self._timer.stop()
