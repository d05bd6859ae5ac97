"""
Small state machines behind the Services, Disk Cleanup and Optimize Drives panels.

They run on the shell scheduler. dispose() is called when the panel closes;
callbacks already queued after that do nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from enum import IntEnum

from paskanet.application.ports.scheduler import Scheduler
from paskanet.services.mock_data import DriveRow, ServiceRow

log = logging.getLogger(__name__)

RUNNING = "Running"
STOPPED = "Stopped"
DRIVE_OK = "OK"

RESTART_DELAY_MS = 500
CLEANUP_TICK_MS = 100
CLEANUP_STEP_PERCENT = 5
OPTIMIZE_DURATION_MS = 3000


class _Disposable:
    def __init__(self, scheduler: Scheduler) -> None:
        self._scheduler = scheduler
        self._disposed = False
        self.on_change: Callable[[], None] | None = None

    def dispose(self) -> None:
        self._disposed = True
        self.on_change = None

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()


class ServiceControl(_Disposable):
    """Service list with start/stop/restart of the selected entry."""

    def __init__(self, services: tuple[ServiceRow, ...], scheduler: Scheduler) -> None:
        super().__init__(scheduler)
        self._services = list(services)
        self._selected: str | None = None

    @property
    def services(self) -> list[ServiceRow]:
        return list(self._services)

    @property
    def selected(self) -> ServiceRow | None:
        return self._find(self._selected)

    def select(self, name: str) -> None:
        if self._find(name) is not None:
            self._selected = name
            self._changed()

    def can_start(self) -> bool:
        s = self.selected
        return s is not None and s.status != RUNNING

    def can_stop(self) -> bool:
        s = self.selected
        return s is not None and s.status != STOPPED

    def can_restart(self) -> bool:
        return self.selected is not None

    def start(self) -> None:
        if self.can_start():
            self._set_status(self._selected, RUNNING)

    def stop(self) -> None:
        if self.can_stop():
            self._set_status(self._selected, STOPPED)

    def restart(self) -> None:
        if not self.can_restart():
            return
        name = self._selected
        self._set_status(name, STOPPED)

        def _bring_back() -> None:
            if not self._disposed:
                self._set_status(name, RUNNING)

        self._scheduler.call_later(RESTART_DELAY_MS, _bring_back)

    def _find(self, name: str | None) -> ServiceRow | None:
        return next((s for s in self._services if s.name == name), None)

    def _set_status(self, name: str | None, status: str) -> None:
        self._services = [replace(s, status=status) if s.name == name else s for s in self._services]
        log.debug("Service %r -> %s", name, status)
        self._changed()


class CleanupStep(IntEnum):
    INITIAL = 0
    SCANNING = 1
    RESULTS = 2
    CLEANING = 3
    COMPLETE = 4


class DiskCleanup(_Disposable):
    """initial -> scanning -> results -> cleaning -> complete, progress +5 % per tick."""

    def __init__(self, scheduler: Scheduler) -> None:
        super().__init__(scheduler)
        self._step = CleanupStep.INITIAL
        self._progress = 0

    @property
    def step(self) -> CleanupStep:
        return self._step

    @property
    def progress(self) -> int:
        return self._progress

    @property
    def busy(self) -> bool:
        return self._step in (CleanupStep.SCANNING, CleanupStep.CLEANING)

    def scan(self) -> None:
        if self._step is CleanupStep.INITIAL:
            self._run(CleanupStep.SCANNING)

    def clean(self) -> None:
        if self._step is CleanupStep.RESULTS:
            self._run(CleanupStep.CLEANING)

    def _run(self, step: CleanupStep) -> None:
        self._step = step
        self._progress = 0
        self._changed()
        self._scheduler.call_later(CLEANUP_TICK_MS, self._tick)

    def _tick(self) -> None:
        if self._disposed or not self.busy:
            return
        if self._progress >= 100:
            self._step = CleanupStep(self._step + 1)
            self._changed()
            return
        self._progress += CLEANUP_STEP_PERCENT
        self._changed()
        self._scheduler.call_later(CLEANUP_TICK_MS, self._tick)


class DriveOptimizer(_Disposable):
    def __init__(self, drives: tuple[DriveRow, ...], scheduler: Scheduler) -> None:
        super().__init__(scheduler)
        self._drives = list(drives)
        self._optimizing = False

    @property
    def drives(self) -> list[DriveRow]:
        return list(self._drives)

    @property
    def optimizing(self) -> bool:
        return self._optimizing

    def can_optimize(self) -> bool:
        return not self._optimizing and any(d.status != DRIVE_OK for d in self._drives)

    def status_text(self, drive: DriveRow) -> str:
        if self._optimizing and drive.status != DRIVE_OK:
            return "Optimizing..."
        return drive.status

    def optimize(self) -> None:
        if not self.can_optimize():
            return
        self._optimizing = True
        self._changed()
        self._scheduler.call_later(OPTIMIZE_DURATION_MS, self._finish)

    def _finish(self) -> None:
        if self._disposed:
            return
        self._drives = [replace(d, status=DRIVE_OK) for d in self._drives]
        self._optimizing = False
        self._changed()
