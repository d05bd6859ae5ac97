from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QHBoxLayout, QVBoxLayout, QWidget

from paskanet.ui.components.buttons import PrimaryButton
from paskanet.ui.panels.base import PanelBody, fill_row, make_table

if TYPE_CHECKING:
    from paskanet.application.container import Container

HEADERS = ["Drive", "Media type", "Current status"]


class OptimizeDrivesPanel(PanelBody):
    def __init__(self, container: Container, window_id: int, parent: QWidget | None = None) -> None:
        super().__init__(container, window_id, parent)
        self.optimizer = self.own(container.drive_optimizer())
        self.optimizer.on_change = self._render

        self.table = make_table(HEADERS)
        self.optimize_button = PrimaryButton("Optimize")
        self.optimize_button.clicked.connect(self.optimizer.optimize)
        buttons = QHBoxLayout()
        buttons.addStretch(1)
        buttons.addWidget(self.optimize_button)

        root = QVBoxLayout(self)
        root.addWidget(self.table, 1)
        root.addLayout(buttons)
        self._render()

    def _render(self) -> None:
        drives = self.optimizer.drives
        self.table.setRowCount(len(drives))
        for i, d in enumerate(drives):
            fill_row(self.table, i, [d.name, d.media, self.optimizer.status_text(d)])
        self.optimize_button.setText("Optimizing..." if self.optimizer.optimizing else "Optimize")
        self.optimize_button.setEnabled(self.optimizer.can_optimize())
