from __future__ import annotations

import logging
import sys
import threading
import traceback
from types import TracebackType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from paskanet.ui.infrastructure.notifications import NotificationCenter

ERROR_HINT = "An unexpected error occurred. Details were written to the shell log."


def install_error_boundary(notifications: NotificationCenter | None) -> None:
    """Install global exception hooks.

    Unhandled exceptions in Qt slots or background threads are logged and the
    user gets a short hint instead of a silent crash.
    """

    log = logging.getLogger(__name__)

    def _handle(
        exc_type: type[BaseException],
        exc: BaseException,
        tb: TracebackType | None,
    ) -> None:
        try:
            msg = "".join(traceback.format_exception(exc_type, exc, tb))
            log.error("Unhandled exception\n%s", msg)
            if notifications is not None:
                notifications.error(ERROR_HINT)
        finally:
            sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _handle

    def _thread_hook(args: threading.ExceptHookArgs) -> None:
        if args.exc_value is not None:
            _handle(args.exc_type, args.exc_value, args.exc_traceback)

    threading.excepthook = _thread_hook
