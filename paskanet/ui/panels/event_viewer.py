from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QLabel, QStyle, QTableWidgetItem, QVBoxLayout, QWidget

from paskanet.ui.panels.base import PanelBody, fill_row, make_table

if TYPE_CHECKING:
    from paskanet.application.container import Container

HEADERS = ["Level", "Source", "Event ID", "Message"]

_LEVEL_ICONS = {
    "Error": QStyle.StandardPixmap.SP_MessageBoxCritical,
    "Warning": QStyle.StandardPixmap.SP_MessageBoxWarning,
}


class EventViewerPanel(PanelBody):
    """Static System log."""

    def __init__(self, container: Container, window_id: int, parent: QWidget | None = None) -> None:
        super().__init__(container, window_id, parent)
        events = container.mock_data.events
        self.table = make_table(HEADERS)
        self.table.setRowCount(len(events))
        for i, e in enumerate(events):
            fill_row(self.table, i, [e.level, e.source, e.id, e.message])
            pixmap = _LEVEL_ICONS.get(e.level, QStyle.StandardPixmap.SP_MessageBoxInformation)
            level_item: QTableWidgetItem = self.table.item(i, 0)
            level_item.setIcon(self.style().standardIcon(pixmap))
        header = QLabel("Windows Logs > System")
        header.setStyleSheet("font-weight: 600;")
        root = QVBoxLayout(self)
        root.addWidget(header)
        root.addWidget(self.table, 1)
