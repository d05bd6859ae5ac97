"""
Log view: QListView with a level filter; follows new lines while scrolled to the bottom.
"""
from __future__ import annotations

from PySide6.QtCore import QSortFilterProxyModel
from PySide6.QtWidgets import QComboBox, QHBoxLayout, QLabel, QListView, QVBoxLayout, QWidget

from paskanet.ui.components.log_model import (
    LOG_LEVEL_ERROR,
    LOG_LEVEL_INFO,
    LOG_LEVEL_WARNING,
    LogListModel,
)
from paskanet.ui.theme.tokens import Tokens

FILTER_ALL = "All"
FILTER_INFO = "Info"
FILTER_WARNING = "Warning"
FILTER_ERROR = "Error"

_LEVEL_BY_FILTER = {
    FILTER_ALL: None,
    FILTER_INFO: LOG_LEVEL_INFO,
    FILTER_WARNING: LOG_LEVEL_WARNING,
    FILTER_ERROR: LOG_LEVEL_ERROR,
}


class LogFilterProxy(QSortFilterProxyModel):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._filter_level: str | None = None  # None = all

    def set_filter_level(self, level: str | None) -> None:
        self._filter_level = level
        self.invalidateFilter()

    def filterAcceptsRow(self, source_row: int, source_parent: object) -> bool:
        if self._filter_level is None:
            return True
        src = self.sourceModel()
        if not isinstance(src, LogListModel):
            return True
        return src.level_at(source_row) == self._filter_level


class LogView(QWidget):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._model = LogListModel(self)
        self._proxy = LogFilterProxy(self)
        self._proxy.setSourceModel(self._model)
        self._list = QListView()
        self._list.setModel(self._proxy)
        self._list.setUniformItemSizes(True)
        self._list.setEditTriggers(QListView.EditTrigger.NoEditTriggers)
        self._at_bottom = True
        self._list.verticalScrollBar().valueChanged.connect(self._on_scroll)
        self._list.verticalScrollBar().rangeChanged.connect(self._on_range_changed)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        filter_row = QHBoxLayout()
        filter_row.addWidget(QLabel("Level:"))
        self._filter_combo = QComboBox()
        self._filter_combo.addItems(list(_LEVEL_BY_FILTER))
        self._filter_combo.currentTextChanged.connect(self._on_filter_changed)
        filter_row.addWidget(self._filter_combo)
        filter_row.addStretch()
        layout.addLayout(filter_row)
        layout.addWidget(self._list)
        self.refresh_theme()

    @property
    def model(self) -> LogListModel:
        return self._model

    def visible_count(self) -> int:
        return self._proxy.rowCount()

    def set_filter(self, text: str) -> None:
        self._filter_combo.setCurrentText(text)

    def _on_filter_changed(self, text: str) -> None:
        self._proxy.set_filter_level(_LEVEL_BY_FILTER.get(text))

    def _on_scroll(self, value: int) -> None:
        self._at_bottom = value >= self._list.verticalScrollBar().maximum()

    def _on_range_changed(self, _min: int, _max: int) -> None:
        if self._at_bottom:
            self._list.scrollToBottom()

    def set_lines(self, lines: list[str]) -> None:
        self._model.set_lines(lines)

    def append_line(self, line: str) -> None:
        self._model.append_line(line)
        if self._at_bottom:
            self._list.scrollToBottom()

    def refresh_theme(self) -> None:
        t = Tokens
        self._list.setStyleSheet(
            f"QListView {{ font-family: Consolas, monospace; font-size: 12px; "
            f"background: {t.surface_alt}; color: {t.text_primary}; border: 1px solid {t.border}; }}"
        )
