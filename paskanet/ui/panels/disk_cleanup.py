from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QCheckBox, QLabel, QProgressBar, QVBoxLayout, QWidget

from paskanet.services.tools import CleanupStep
from paskanet.ui.components.buttons import PrimaryButton
from paskanet.ui.panels.base import PanelBody

if TYPE_CHECKING:
    from paskanet.application.container import Container

_MESSAGES = {
    CleanupStep.INITIAL: "Disk Cleanup can free up space on your hard disk.",
    CleanupStep.SCANNING: "Scanning files...",
    CleanupStep.RESULTS: "Files to delete:",
    CleanupStep.CLEANING: "Cleaning up files...",
    CleanupStep.COMPLETE: "Disk cleanup complete.",
}


class DiskCleanupPanel(PanelBody):
    def __init__(self, container: Container, window_id: int, parent: QWidget | None = None) -> None:
        super().__init__(container, window_id, parent)
        self.cleanup = self.own(container.disk_cleanup())
        self.cleanup.on_change = self._render

        self.message = QLabel()
        self.progress = QProgressBar()
        self.progress.setRange(0, 100)
        self.scan_button = PrimaryButton("Scan Disk")
        self.scan_button.clicked.connect(self.cleanup.scan)
        self.clean_button = PrimaryButton("Clean up system files")
        self.clean_button.clicked.connect(self.cleanup.clean)
        self._candidates = [
            QCheckBox(f"{c.label} ({c.size_mb:.1f} MB)") for c in container.mock_data.cleanup_candidates
        ]

        root = QVBoxLayout(self)
        root.addWidget(self.message)
        root.addWidget(self.progress)
        for box in self._candidates:
            box.setChecked(True)
            root.addWidget(box)
        root.addWidget(self.scan_button)
        root.addWidget(self.clean_button)
        root.addStretch(1)
        self._render()

    def _render(self) -> None:
        step = self.cleanup.step
        self.message.setText(_MESSAGES[step])
        self.progress.setVisible(self.cleanup.busy)
        self.progress.setValue(min(100, self.cleanup.progress))
        for box in self._candidates:
            box.setVisible(step is CleanupStep.RESULTS)
        self.scan_button.setVisible(step is CleanupStep.INITIAL)
        self.clean_button.setVisible(step is CleanupStep.RESULTS)
