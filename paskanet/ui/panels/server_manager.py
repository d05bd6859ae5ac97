"""
Server Manager panel: clustered server list, live dashboard of the selected
server and the system log.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QTabBar,
    QTreeWidget,
    QTreeWidgetItem,
    QVBoxLayout,
    QWidget,
)

from paskanet.config import SERVER_FEED_INTERVAL_MS
from paskanet.services.dashboard import cluster_servers, find_server, memory_usage_text
from paskanet.services.mock_data import ServerRow
from paskanet.ui.components.cards import MetricCard
from paskanet.ui.components.log_view import LogView
from paskanet.ui.panels.base import PanelBody
from paskanet.ui.theme.tokens import Tokens

if TYPE_CHECKING:
    from paskanet.application.container import Container

DATACENTER = "Paskanet II Datacenter"
LOG_TABS = ("System", "Application")


class ServerManagerPanel(PanelBody):
    def __init__(self, container: Container, window_id: int, parent: QWidget | None = None) -> None:
        super().__init__(container, window_id, parent)
        feed = container.server_feed()
        self._servers: tuple[ServerRow, ...] = feed.snapshot
        self._selected = self._servers[0].name if self._servers else None
        self._system_log = list(container.mock_data.server_logs)

        self.server_tree = QTreeWidget()
        self.server_tree.setHeaderHidden(True)
        self.server_tree.setFixedWidth(220)
        self.server_tree.itemClicked.connect(self._on_item_clicked)
        self._items: dict[str, QTreeWidgetItem] = {}
        for cluster, members in cluster_servers(self._servers).items():
            head = QTreeWidgetItem([cluster])
            head.setFlags(Qt.ItemFlag.ItemIsEnabled)
            self.server_tree.addTopLevelItem(head)
            for s in members:
                item = QTreeWidgetItem([f"● {s.name}\n   {s.ip}"])
                item.setData(0, Qt.ItemDataRole.UserRole, s.name)
                head.addChild(item)
                self._items[s.name] = item
            head.setExpanded(True)

        self.title = QLabel()
        self.title.setStyleSheet("font-size: 18px; font-weight: 600;")
        self.subtitle = QLabel()
        self.cpu_card = MetricCard("CPU Utilization", show_bar=False)
        self.mem_card = MetricCard("Memory", show_bar=False)
        self.disk_card = MetricCard("Disk (C:)")
        self.net_card = MetricCard("Network I/O", show_bar=False)
        grid = QGridLayout()
        grid.addWidget(self.cpu_card, 0, 0)
        grid.addWidget(self.mem_card, 0, 1)
        grid.addWidget(self.disk_card, 1, 0)
        grid.addWidget(self.net_card, 1, 1)

        self.log_tabs = QTabBar()
        for tab in LOG_TABS:
            self.log_tabs.addTab(tab)
        self.log_tabs.currentChanged.connect(self._on_log_tab)
        self.log_view = LogView()
        self.log_view.set_lines(self._system_log)

        main = QVBoxLayout()
        main.addWidget(self.title)
        main.addWidget(self.subtitle)
        main.addLayout(grid)
        main.addWidget(self.log_tabs)
        main.addWidget(self.log_view, 1)

        root = QHBoxLayout(self)
        root.addWidget(self.server_tree)
        root.addLayout(main, 1)

        self._render()
        self.track(feed.subscribe(SERVER_FEED_INTERVAL_MS, self._on_servers))
        if container.theme_manager is not None:
            container.theme_manager.theme_changed.connect(self._on_theme_changed)

    @property
    def selected(self) -> str | None:
        return self._selected

    def select(self, name: str) -> None:
        if find_server(self._servers, name) is not None:
            self._selected = name
            self._render()

    def _on_item_clicked(self, item: QTreeWidgetItem, _column: int) -> None:
        name = item.data(0, Qt.ItemDataRole.UserRole)
        if name:
            self.select(name)

    def _on_servers(self, servers: tuple[ServerRow, ...]) -> None:
        self._servers = servers
        self._render()

    def _on_theme_changed(self, _name: str) -> None:
        self.log_view.refresh_theme()
        self._render()

    def _on_log_tab(self, index: int) -> None:
        # Only the System log has entries.
        self.log_view.set_lines(self._system_log if index == 0 else [])

    def _render(self) -> None:
        for s in self._servers:
            item = self._items.get(s.name)
            if item is not None:
                item.setForeground(0, QColor(Tokens.status_color(s.status)))
                item.setSelected(s.name == self._selected)
        server = find_server(self._servers, self._selected) if self._selected else None
        if server is None:
            return
        self.title.setText(server.name)
        self.subtitle.setText(f"{server.ip} • {DATACENTER}")
        self.cpu_card.set_value(f"{server.cpu}%")
        self.mem_card.set_value(f"{server.mem}%", caption=memory_usage_text(server.mem))
        self.disk_card.set_value(f"{server.disk}%", percent=server.disk)
        self.net_card.set_value(
            f"↑ {server.net_up:.1f} Mbps Sent",
            caption=f"↓ {server.net_down:.1f} Mbps Received",
        )
