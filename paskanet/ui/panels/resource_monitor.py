from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QVBoxLayout, QWidget

from paskanet.config import PROCESS_FEED_INTERVAL_MS
from paskanet.services.metrics import by_cpu_desc
from paskanet.services.mock_data import ProcessRow
from paskanet.ui.panels.base import PanelBody, fill_row, make_table

if TYPE_CHECKING:
    from paskanet.application.container import Container

HEADERS = ["Process", "PID", "CPU (%)", "Memory (MB)"]


class ResourceMonitorPanel(PanelBody):
    """Process table, busiest first, refreshed from the process feed."""

    def __init__(self, container: Container, window_id: int, parent: QWidget | None = None) -> None:
        super().__init__(container, window_id, parent)
        self.table = make_table(HEADERS)
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.addWidget(self.table)
        feed = container.process_feed()
        self._render(feed.snapshot)
        self.track(feed.subscribe(PROCESS_FEED_INTERVAL_MS, self._render))

    def _render(self, rows: tuple[ProcessRow, ...]) -> None:
        ordered = by_cpu_desc(rows)
        self.table.setRowCount(len(ordered))
        for i, p in enumerate(ordered):
            fill_row(self.table, i, [p.name, p.pid, p.cpu, f"{p.memory:.1f}"])
