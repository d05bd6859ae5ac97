"""
Performance Monitor: PyQtGraph line chart of the last 60 CPU samples.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import pyqtgraph as pg
from PySide6.QtWidgets import QLabel, QSizePolicy, QVBoxLayout, QWidget

from paskanet.config import CPU_FEED_INTERVAL_MS
from paskanet.ui.panels.base import PanelBody
from paskanet.ui.theme.tokens import Tokens

if TYPE_CHECKING:
    from paskanet.application.container import Container


class CpuChart(QWidget):
    """Line chart of CPU samples on a fixed 0..100 % axis."""

    def __init__(self, samples: Sequence[float], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._samples = tuple(samples)
        t = Tokens
        self.plot = pg.PlotWidget(background=t.surface_alt)
        self.plot.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.plot.setMinimumHeight(160)
        self.plot.showGrid(x=False, y=True, alpha=0.3)
        self.plot.setYRange(0, 100, padding=0)
        self.plot.setMouseEnabled(x=False, y=False)
        self.plot.hideButtons()
        self.plot.setMenuEnabled(False)
        self._curve = pg.PlotDataItem(pen=pg.mkPen(t.accent, width=1.5))
        self.plot.addItem(self._curve)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.plot)
        self._redraw()

    @property
    def samples(self) -> tuple[float, ...]:
        return self._samples

    def set_samples(self, samples: Sequence[float]) -> None:
        self._samples = tuple(samples)
        self._redraw()

    def refresh_theme(self) -> None:
        t = Tokens
        self.plot.setBackground(t.surface_alt)
        self._curve.setPen(pg.mkPen(t.accent, width=1.5))

    def _redraw(self) -> None:
        self._curve.setData(list(range(len(self._samples))), list(self._samples))


class PerformanceMonitorPanel(PanelBody):
    def __init__(self, container: Container, window_id: int, parent: QWidget | None = None) -> None:
        super().__init__(container, window_id, parent)
        feed = container.cpu_feed()
        self.chart = CpuChart(feed.snapshot)
        title = QLabel("CPU Usage (%)")
        title.setStyleSheet("font-weight: 600;")
        root = QVBoxLayout(self)
        root.addWidget(title)
        root.addWidget(self.chart, 1)
        self.track(feed.subscribe(CPU_FEED_INTERVAL_MS, self.chart.set_samples))
        if container.theme_manager is not None:
            container.theme_manager.theme_changed.connect(self._on_theme_changed)

    def _on_theme_changed(self, _name: str) -> None:
        self.chart.refresh_theme()
