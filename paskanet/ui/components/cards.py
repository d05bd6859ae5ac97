"""
Card frames for the Server Manager dashboard.
"""
from __future__ import annotations

from PySide6.QtWidgets import QFrame, QLabel, QProgressBar, QVBoxLayout, QWidget

from paskanet.ui.theme.tokens import Tokens


class Card(QFrame):
    """Bordered surface. Styling from the app stylesheet (#card)."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        t = Tokens
        self.setObjectName("card")
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(t.space_lg, t.space_md, t.space_lg, t.space_md)
        self._layout.setSpacing(t.space_sm)

    def layout(self) -> QVBoxLayout:
        return self._layout


class MetricCard(Card):
    """Title, big value, optional caption and a percentage bar."""

    def __init__(self, title: str, *, show_bar: bool = True, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._title = QLabel(title)
        self._value = QLabel("-")
        self._value.setObjectName("metricValue")
        self._caption = QLabel("")
        self._caption.setStyleSheet(f"color: {Tokens.text_secondary};")
        self._bar: QProgressBar | None = None
        self.layout().addWidget(self._title)
        self.layout().addWidget(self._value)
        self.layout().addWidget(self._caption)
        if show_bar:
            self._bar = QProgressBar()
            self._bar.setRange(0, 100)
            self._bar.setTextVisible(False)
            self._bar.setMaximumHeight(8)
            self.layout().addWidget(self._bar)

    def set_value(self, text: str, *, percent: int | None = None, caption: str = "") -> None:
        self._value.setText(text)
        self._caption.setText(caption)
        if self._bar is not None and percent is not None:
            self._bar.setValue(max(0, min(100, int(percent))))

    def value_text(self) -> str:
        return self._value.text()
