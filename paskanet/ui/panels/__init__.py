"""Tool panels: one widget per registered tool, built by PANEL_FACTORIES."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from paskanet.ui.panels.base import PanelBody
from paskanet.ui.panels.disk_cleanup import DiskCleanupPanel
from paskanet.ui.panels.event_viewer import EventViewerPanel
from paskanet.ui.panels.optimize_drives import OptimizeDrivesPanel
from paskanet.ui.panels.performance_monitor import PerformanceMonitorPanel
from paskanet.ui.panels.resource_monitor import ResourceMonitorPanel
from paskanet.ui.panels.server_manager import ServerManagerPanel
from paskanet.ui.panels.services import ServicesPanel
from paskanet.ui.panels.terminal import TerminalPanel
from paskanet.wm.registry import ToolKind

if TYPE_CHECKING:
    from paskanet.application.container import Container

PANEL_FACTORIES: dict[ToolKind, Callable[[Container, int], PanelBody]] = {
    ToolKind.COMMAND_PROMPT: TerminalPanel,
    ToolKind.SERVER_MANAGER: ServerManagerPanel,
    ToolKind.PERFORMANCE_MONITOR: PerformanceMonitorPanel,
    ToolKind.RESOURCE_MONITOR: ResourceMonitorPanel,
    ToolKind.SERVICES: ServicesPanel,
    ToolKind.EVENT_VIEWER: EventViewerPanel,
    ToolKind.DISK_CLEANUP: DiskCleanupPanel,
    ToolKind.OPTIMIZE_DRIVES: OptimizeDrivesPanel,
}

__all__ = ["PANEL_FACTORIES", "PanelBody"]
