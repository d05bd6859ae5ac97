"""
Entry point for the Paskanet II shell.

Run: python main.py  (or the installed `paskanet-shell` script)
Requires: pip install -e .
"""
from __future__ import annotations

import sys

from paskanet.application.container import Container
from paskanet.core.observability.logging_config import setup_logging
from paskanet.ui.infrastructure import (
    AppSettings,
    NotificationCenter,
    QtScheduler,
    create_application,
    install_error_boundary,
    run_application,
)
from paskanet.ui.shell import MainWindow
from paskanet.ui.theme.manager import ThemeManager


def main() -> None:
    setup_logging()
    app = create_application()
    settings = AppSettings()
    theme_manager = ThemeManager(settings)
    theme_manager.set_theme(settings.get_theme())

    container = Container(QtScheduler(app))
    container.theme_manager = theme_manager

    window = MainWindow(container, settings)
    window.show()

    notifications = NotificationCenter(window)
    container.notifications = notifications
    install_error_boundary(notifications)

    run_application(app)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
