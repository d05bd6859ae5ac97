"""
Shell session: LoggedOut -> Desktop -> ShuttingDown -> LoggedOut.

Gates the window store (mutable only on the desktop) and clears it, together
with the chrome toggles, when the timed shutdown completes.
"""

from __future__ import annotations

import hmac
import logging
from enum import Enum
from typing import TYPE_CHECKING

from paskanet.config import LOGIN_ERROR_MESSAGE, SHELL_PASSWORD, SHUTDOWN_DELAY_MS
from paskanet.core.errors import CredentialRejected, InvalidTransition
from paskanet.core.events import EventBus, LoginRejected, SessionModeChanged

if TYPE_CHECKING:
    from paskanet.application.ports.scheduler import Scheduler
    from paskanet.wm.chrome import ChromeControls
    from paskanet.wm.store import WindowStore

log = logging.getLogger(__name__)


class SessionMode(str, Enum):
    LOGGED_OUT = "logged_out"
    DESKTOP = "desktop"
    SHUTTING_DOWN = "shutting_down"


_EDGES = {
    (SessionMode.LOGGED_OUT, SessionMode.DESKTOP),
    (SessionMode.DESKTOP, SessionMode.SHUTTING_DOWN),
    (SessionMode.SHUTTING_DOWN, SessionMode.LOGGED_OUT),
}


class ShellSession:
    def __init__(
        self,
        store: WindowStore,
        chrome: ChromeControls,
        scheduler: Scheduler,
        *,
        password: str = SHELL_PASSWORD,
        shutdown_delay_ms: int = SHUTDOWN_DELAY_MS,
        event_bus: EventBus | None = None,
    ) -> None:
        self._store = store
        self._chrome = chrome
        self._scheduler = scheduler
        self._password = password
        self._shutdown_delay_ms = shutdown_delay_ms
        self._bus = event_bus
        self._mode = SessionMode.LOGGED_OUT
        self._store.set_locked(True)

    @property
    def mode(self) -> SessionMode:
        return self._mode

    @property
    def on_desktop(self) -> bool:
        return self._mode is SessionMode.DESKTOP

    def login(self, password: str) -> SessionMode:
        """Check the shared secret and enter the desktop.

        Raises CredentialRejected on a wrong password; the mode stays LoggedOut.
        Outside of LoggedOut this is a no-op.
        """
        if self._mode is not SessionMode.LOGGED_OUT:
            return self._mode
        if not hmac.compare_digest(str(password).encode(), self._password.encode()):
            log.warning("Login rejected")
            self._publish(LoginRejected(message=LOGIN_ERROR_MESSAGE))
            raise CredentialRejected(LOGIN_ERROR_MESSAGE)
        self._transition(SessionMode.DESKTOP)
        return self._mode

    def request_shutdown(self) -> None:
        if self._mode is not SessionMode.DESKTOP:
            return
        self._transition(SessionMode.SHUTTING_DOWN)
        self._scheduler.call_later(self._shutdown_delay_ms, self.complete_shutdown)

    def complete_shutdown(self) -> None:
        if self._mode is not SessionMode.SHUTTING_DOWN:
            return
        self._store.clear()
        self._chrome.reset()
        self._transition(SessionMode.LOGGED_OUT)

    def _transition(self, new: SessionMode) -> None:
        old = self._mode
        if (old, new) not in _EDGES:
            raise InvalidTransition(f"Session cannot go from {old.value} to {new.value}")
        self._mode = new
        self._store.set_locked(new is not SessionMode.DESKTOP)
        log.info("Session %s -> %s", old.value, new.value, extra={"mode": new.value})
        self._publish(SessionModeChanged(old=old.value, new=new.value))

    def _publish(self, event: object) -> None:
        if self._bus is not None:
            self._bus.publish(event)
