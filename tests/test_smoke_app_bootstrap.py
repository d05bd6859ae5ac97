from __future__ import annotations

import ctypes.util
import json
import logging
from pathlib import Path


def test_logging_setup_imports(tmp_path: Path) -> None:
    # Import should be side-effect free and not require GUI.
    from paskanet.core.observability.logging_config import setup_logging

    setup_logging(level="INFO", state_dir=tmp_path)
    logging.getLogger(__name__).info("smoke")

    assert (tmp_path / "logs" / "shell.log").exists()


def test_state_dir_follows_the_environment_override(tmp_path: Path, monkeypatch) -> None:
    from paskanet.core.paths import STATE_DIR_ENV, get_app_state_dir, get_logs_dir

    monkeypatch.setenv(STATE_DIR_ENV, str(tmp_path))

    assert get_app_state_dir() == tmp_path.resolve()
    assert get_logs_dir() == tmp_path.resolve() / "logs"


def test_state_dir_defaults_to_a_per_user_location(monkeypatch) -> None:
    from paskanet.core.paths import APP_DIR_NAME, STATE_DIR_ENV, get_app_state_dir

    monkeypatch.delenv(STATE_DIR_ENV, raising=False)

    assert get_app_state_dir().name == APP_DIR_NAME


def test_json_formatter_includes_shell_extras() -> None:
    from paskanet.core.observability.logging_config import _JsonFormatter

    record = logging.LogRecord("paskanet.wm", logging.DEBUG, __file__, 1, "Opened", None, None)
    record.window_id = 3
    record.tool = "Services"

    payload = json.loads(_JsonFormatter().format(record))

    assert payload["window_id"] == 3
    assert payload["tool"] == "Services"
    assert payload["msg"] == "Opened"


def test_core_imports_without_qt() -> None:
    import paskanet.application.container  # noqa: F401
    import paskanet.wm  # noqa: F401
    from paskanet.core.version import get_version_string, os_banner

    assert os_banner() == "Paskanet II [Version 2.1.0]"
    assert get_version_string().startswith("v")


def test_main_window_can_be_constructed_headless() -> None:
    import pytest

    pytest.importorskip("PySide6")
    if ctypes.util.find_library("GL") is None:
        pytest.skip("PySide6 runtime is not fully available in this environment: libGL is missing")

    import os

    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PySide6.QtWidgets import QApplication

    from paskanet.application.container import Container
    from paskanet.ui.shell import MainWindow

    _app = QApplication.instance() or QApplication([])
    window = MainWindow(Container())

    assert window.screens.current is not None
    window.close()
