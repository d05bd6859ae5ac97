"""Shell configuration and constants.

Paths, the shared login secret, timing of the session transitions, window
sizing and staggering, and the tool list advertised in the menu bar.
"""

import os
from pathlib import Path

# Base paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent
MOCK_DATA_PATH = Path(__file__).resolve().parent / "resources" / "mock_data.yaml"

# Session
SHELL_PASSWORD = os.getenv("PASKANET_PASSWORD", "0000")
LOGIN_ERROR_MESSAGE = "Incorrect password."
SHUTDOWN_DELAY_MS = 1500
CLOCK_REFRESH_MS = 30_000

# Windows
DEFAULT_WINDOW_SIZE = (640, 480)
SERVER_MANAGER_ORIGIN = (50, 40)
SERVER_MANAGER_MARGINS = (100, 150)  # subtracted from viewport width/height
STAGGER_ORIGIN = 50
STAGGER_STEP = 20
STAGGER_CYCLE = 10
DEFAULT_VIEWPORT = (1280, 800)

# Terminal
OS_NAME = "Paskanet II"
OS_VERSION = "2.1.0"
PROMPT = "P:\\>"
MAX_COMMAND_HISTORY = 100

# Tools advertised in the "Tools" menu. Only some of them have a panel.
TOOLS_LIST = (
    "Command Prompt",
    "Component Services",
    "Computer Management",
    "Defragment and Optimize Drives",
    "Disk Cleanup",
    "DNS",
    "Event Viewer",
    "File Explorer",
    "Group Policy Management",
    "iSCSI Initiator",
    "Local Security Policy",
    "Performance Monitor",
    "Print Management",
    "Resource Monitor",
    "Services",
    "System Configuration",
    "System Information",
    "Task Scheduler",
    "Windows Memory Diagnostic",
)

# (label, tool name) pairs shown on the desktop
DESKTOP_ICONS = (("Server Manager", "Server Manager"),)

# Metric feed intervals
CPU_FEED_INTERVAL_MS = 1000
PROCESS_FEED_INTERVAL_MS = 1500
SERVER_FEED_INTERVAL_MS = 1500
CPU_HISTORY_LENGTH = 60
