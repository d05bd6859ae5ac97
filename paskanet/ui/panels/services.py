from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtGui import QColor
from PySide6.QtWidgets import QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from paskanet.ui.panels.base import PanelBody, fill_row, make_table
from paskanet.ui.theme.tokens import Tokens

if TYPE_CHECKING:
    from paskanet.application.container import Container

HEADERS = ["Name", "Description", "Status"]


class ServicesPanel(PanelBody):
    """Service list; Start/Stop/Restart act on the selected row."""

    def __init__(self, container: Container, window_id: int, parent: QWidget | None = None) -> None:
        super().__init__(container, window_id, parent)
        self.control = self.own(container.service_control())
        self.control.on_change = self._render

        self.start_button = QPushButton("Start")
        self.stop_button = QPushButton("Stop")
        self.restart_button = QPushButton("Restart")
        self.start_button.clicked.connect(self.control.start)
        self.stop_button.clicked.connect(self.control.stop)
        self.restart_button.clicked.connect(self.control.restart)
        toolbar = QHBoxLayout()
        for btn in (self.start_button, self.stop_button, self.restart_button):
            toolbar.addWidget(btn)
        toolbar.addStretch(1)

        self.table = make_table(HEADERS, selectable=True)
        self.table.itemSelectionChanged.connect(self._on_selection)

        root = QVBoxLayout(self)
        root.addLayout(toolbar)
        root.addWidget(self.table, 1)
        self._render()

    def select_row(self, row: int) -> None:
        self.table.selectRow(row)

    def _on_selection(self) -> None:
        rows = self.table.selectionModel().selectedRows()
        if rows:
            self.control.select(self.control.services[rows[0].row()].name)

    def _render(self) -> None:
        services = self.control.services
        self.table.setRowCount(len(services))
        for i, s in enumerate(services):
            fill_row(self.table, i, [s.name, s.description, f"● {s.status}"])
            self.table.item(i, 2).setForeground(QColor(Tokens.status_color(s.status)))
        self.start_button.setEnabled(self.control.can_start())
        self.stop_button.setEnabled(self.control.can_stop())
        self.restart_button.setEnabled(self.control.can_restart())
