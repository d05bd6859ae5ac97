"""Infrastructure: application bootstrap, Qt scheduler, notifications, settings.

Keep this package import lightweight: do not import Qt GUI modules at import time.
Headless CI can have PySide6 installed without the runtime GUI libs
(e.g. ``libGL.so.1``); the lazy exports below keep ``import`` cheap.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "create_application",
    "run_application",
    "NotificationCenter",
    "install_error_boundary",
    "AppSettings",
    "QtScheduler",
]

_EXPORTS = {
    "create_application": "paskanet.ui.infrastructure.application",
    "run_application": "paskanet.ui.infrastructure.application",
    "NotificationCenter": "paskanet.ui.infrastructure.notifications",
    "install_error_boundary": "paskanet.ui.infrastructure.error_boundary",
    "AppSettings": "paskanet.ui.infrastructure.settings",
    "QtScheduler": "paskanet.ui.infrastructure.scheduler",
}


def __getattr__(name: str) -> Any:
    module = _EXPORTS.get(name)
    if module is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return getattr(import_module(module), name)
