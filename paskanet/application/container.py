"""Composition root / DI container.

One Container per running shell: the window store, session and chrome are
context objects owned here, never process globals. The UI receives the
container and goes through its narrow operations.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

import numpy as np

from paskanet.application.ports.metrics import MetricFeedPort
from paskanet.application.ports.scheduler import ManualScheduler, Scheduler
from paskanet.config import SHELL_PASSWORD
from paskanet.core.events import EventBus, ToolUnavailable
from paskanet.services.feeds import ScheduledFeed
from paskanet.services.mock_data import MockData, ProcessRow, ServerRow, load_mock_data
from paskanet.services.metrics import (
    MetricStream,
    empty_cpu_history,
    jitter_processes,
    jitter_servers,
    next_cpu_history,
)
from paskanet.services.tools import DiskCleanup, DriveOptimizer, ServiceControl
from paskanet.terminal import CommandInterpreter, TerminalSession
from paskanet.wm import (
    ChromeControls,
    DragController,
    PanelRegistry,
    ShellSession,
    ToolNotFound,
    WindowEntity,
    WindowStore,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from paskanet.ui.infrastructure.notifications import NotificationCenter
    from paskanet.ui.theme.manager import ThemeManager

log = logging.getLogger(__name__)


class Container:
    """Resolves shell collaborators lazily. Single place to swap implementations."""

    def __init__(
        self,
        scheduler: Scheduler | None = None,
        *,
        password: str = SHELL_PASSWORD,
        mock_data: MockData | None = None,
        seed: int | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._password = password
        self._mock_data = mock_data
        self._seed = seed
        self._event_bus: EventBus | None = None
        self._registry: PanelRegistry | None = None
        self._windows: WindowStore | None = None
        self._drag: DragController | None = None
        self._chrome: ChromeControls | None = None
        self._session: ShellSession | None = None
        self.theme_manager: ThemeManager | None = None
        self.notifications: NotificationCenter | None = None

    @property
    def scheduler(self) -> Scheduler:
        if self._scheduler is None:
            self._scheduler = ManualScheduler()
        return self._scheduler

    @property
    def event_bus(self) -> EventBus:
        if self._event_bus is None:
            self._event_bus = EventBus()
        return self._event_bus

    @property
    def registry(self) -> PanelRegistry:
        if self._registry is None:
            self._registry = PanelRegistry()
        return self._registry

    @property
    def windows(self) -> WindowStore:
        if self._windows is None:
            self._windows = WindowStore(self.registry, self.event_bus)
        return self._windows

    @property
    def drag(self) -> DragController:
        if self._drag is None:
            self._drag = DragController(self.windows)
        return self._drag

    @property
    def chrome(self) -> ChromeControls:
        if self._chrome is None:
            self._chrome = ChromeControls(
                self.open_tool,
                lambda: self.session.request_shutdown(),
                event_bus=self.event_bus,
            )
        return self._chrome

    @property
    def session(self) -> ShellSession:
        if self._session is None:
            self._session = ShellSession(
                self.windows,
                self.chrome,
                self.scheduler,
                password=self._password,
                event_bus=self.event_bus,
            )
        return self._session

    @property
    def mock_data(self) -> MockData:
        if self._mock_data is None:
            self._mock_data = load_mock_data()
        return self._mock_data

    # --- Use cases ---
    def open_tool(self, tool_name: str) -> WindowEntity | None:
        """Open a tool panel; unknown names publish ToolUnavailable instead."""
        result = self.windows.open(tool_name)
        if isinstance(result, ToolNotFound):
            self.event_bus.publish(ToolUnavailable(tool=result.tool_name))
            return None
        return result

    def close_window(self, window_id: int) -> None:
        """Close a window, ending a drag that was holding it."""
        if self._drag is not None and self._drag.active and self._drag.active.window_id == window_id:
            log.debug("Ending drag of closing window %d", window_id)
            self._drag.end()
        self.windows.close(window_id)

    # --- Per-panel factories ---
    def _rng(self) -> np.random.Generator:
        return np.random.default_rng(self._seed)

    def cpu_feed(self) -> MetricFeedPort[tuple[float, ...]]:
        return ScheduledFeed(
            MetricStream(empty_cpu_history(), next_cpu_history, self._rng()), self.scheduler
        )

    def process_feed(self) -> MetricFeedPort[tuple[ProcessRow, ...]]:
        return ScheduledFeed(
            MetricStream(self.mock_data.processes, jitter_processes, self._rng()), self.scheduler
        )

    def server_feed(self) -> MetricFeedPort[tuple[ServerRow, ...]]:
        return ScheduledFeed(
            MetricStream(self.mock_data.servers, jitter_servers, self._rng()), self.scheduler
        )

    def terminal_session(self, on_exit: Callable[[], None] | None = None) -> TerminalSession:
        rng = random.Random(self._seed) if self._seed is not None else None
        return TerminalSession(CommandInterpreter(rng=rng), on_exit=on_exit)

    def service_control(self) -> ServiceControl:
        return ServiceControl(self.mock_data.services, self.scheduler)

    def disk_cleanup(self) -> DiskCleanup:
        return DiskCleanup(self.scheduler)

    def drive_optimizer(self) -> DriveOptimizer:
        return DriveOptimizer(self.mock_data.drives, self.scheduler)
