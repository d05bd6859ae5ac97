"""
Log list model: QAbstractListModel of (level, text) with a bounded buffer.
Error lines carry a foreground color so the view highlights them.
"""

from __future__ import annotations

from collections import deque
from typing import Any

from PySide6.QtCore import QAbstractListModel, QModelIndex, Qt
from PySide6.QtGui import QColor

from paskanet.services.dashboard import is_error_line
from paskanet.ui.theme.tokens import Tokens

LOG_LEVEL_INFO = "info"
LOG_LEVEL_WARNING = "warning"
LOG_LEVEL_ERROR = "error"

LEVELS = (LOG_LEVEL_INFO, LOG_LEVEL_WARNING, LOG_LEVEL_ERROR)

MAX_LOG_LINES = 1000


def infer_level(line: str) -> str:
    if is_error_line(line):
        return LOG_LEVEL_ERROR
    if "Warning" in line:
        return LOG_LEVEL_WARNING
    return LOG_LEVEL_INFO


class LogListModel(QAbstractListModel):
    """Oldest lines drop out once MAX_LOG_LINES is reached."""

    def __init__(self, parent: Any = None, *, max_lines: int = MAX_LOG_LINES) -> None:
        super().__init__(parent)
        self._entries: deque[tuple[str, str]] = deque(maxlen=max_lines)

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._entries)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid() or index.row() < 0 or index.row() >= len(self._entries):
            return None
        level, text = self._entries[index.row()]
        if role == Qt.ItemDataRole.DisplayRole:
            return text
        if role == Qt.ItemDataRole.UserRole:
            return level
        if role == Qt.ItemDataRole.ForegroundRole and level == LOG_LEVEL_ERROR:
            return QColor(Tokens.error)
        return None

    def set_lines(self, lines: list[str]) -> None:
        """Replace the whole buffer (one reset, no per-row notifications)."""
        self.beginResetModel()
        self._entries.clear()
        self._entries.extend((infer_level(line), line) for line in lines)
        self.endResetModel()

    def append_line(self, line: str, level: str | None = None) -> None:
        if level is None:
            level = infer_level(line)
        was_full = len(self._entries) == self._entries.maxlen
        if was_full:
            self.beginRemoveRows(QModelIndex(), 0, 0)
            self._entries.popleft()
            self.endRemoveRows()
        row = len(self._entries)
        self.beginInsertRows(QModelIndex(), row, row)
        self._entries.append((level, line))
        self.endInsertRows()

    def level_at(self, row: int) -> str:
        if 0 <= row < len(self._entries):
            return self._entries[row][0]
        return LOG_LEVEL_INFO
