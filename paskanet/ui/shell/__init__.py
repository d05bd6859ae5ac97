"""Shell UI: host window, session screens, desktop, window frames, chrome."""

from paskanet.ui.shell.main_window import MainWindow

__all__ = ["MainWindow"]
