"""Build/version metadata.

The shell reports the fictional OS version in the terminal (`ver`) and the
host window title carries the build of this package. Packaged builds get their
metadata from environment variables injected at build time.
"""

from __future__ import annotations

import os

from paskanet.config import OS_NAME, OS_VERSION


def get_build_info() -> dict[str, str]:
    """Return build metadata.

    Environment variables (set by CI/build scripts):
    - PASKANET_VERSION: package version (e.g. "1.0.0" or "0.0.0-dev")
    - PASKANET_GIT_SHA: short git sha
    - PASKANET_BUILD_DATE: ISO date (YYYY-MM-DD)
    """

    version = os.getenv("PASKANET_VERSION", "0.0.0-dev")
    sha = os.getenv("PASKANET_GIT_SHA", "dev")
    build_date = os.getenv("PASKANET_BUILD_DATE", "")
    return {"version": version, "git_sha": sha, "build_date": build_date}


def get_version_string() -> str:
    info = get_build_info()
    ver = info["version"].strip() or "0.0.0-dev"
    sha = info["git_sha"].strip() or "dev"
    date = info["build_date"].strip()
    if date:
        return f"v{ver} ({sha}, {date})"
    return f"v{ver} ({sha})"


def os_banner() -> str:
    """`Paskanet II [Version 2.1.0]`, shown by the terminal."""
    return f"{OS_NAME} [Version {OS_VERSION}]"
