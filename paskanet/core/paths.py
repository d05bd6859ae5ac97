"""Per-user locations for the shell's own files (only logs today)."""

from __future__ import annotations

import os
import sys
from pathlib import Path

APP_DIR_NAME = "paskanet-shell"
STATE_DIR_ENV = "PASKANET_STATE_DIR"


def get_app_state_dir() -> Path:
    """PASKANET_STATE_DIR when set, else the platform's user data dir."""
    override = os.environ.get(STATE_DIR_ENV)
    if override:
        return Path(override).expanduser().resolve()
    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming")
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share")
    return (base / APP_DIR_NAME).resolve()


def get_logs_dir(state_dir: Path | None = None) -> Path:
    return (state_dir or get_app_state_dir()) / "logs"
