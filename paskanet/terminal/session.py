"""
Terminal session: the transcript and history of one Command Prompt panel.

The transcript only grows, except for `cls` which empties it.
"""

from __future__ import annotations

from collections.abc import Callable

from paskanet.core.version import os_banner
from paskanet.terminal.history import CommandHistory
from paskanet.terminal.interpreter import CommandInterpreter, CommandResult

COPYRIGHT_LINE = "(c) Paskanet Corporation. All rights reserved."


def banner_lines() -> list[str]:
    return [os_banner(), COPYRIGHT_LINE, ""]


class TerminalSession:
    def __init__(
        self,
        interpreter: CommandInterpreter | None = None,
        *,
        on_exit: Callable[[], None] | None = None,
        history: CommandHistory | None = None,
    ) -> None:
        self._interpreter = interpreter or CommandInterpreter()
        self._on_exit = on_exit
        self._history = history or CommandHistory()
        self._lines: list[str] = banner_lines()

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def history(self) -> CommandHistory:
        return self._history

    def submit(self, line: str) -> CommandResult:
        """Enter pressed: record history, run the line, update the transcript."""
        self._history.push(line)
        result = self._interpreter.execute(line)
        if result.close_requested:
            if self._on_exit is not None:
                self._on_exit()
            return result
        if result.clear_screen:
            self._lines.clear()
            return result
        self._lines.extend(result.lines)
        return result

    def history_up(self) -> str | None:
        return self._history.older()

    def history_down(self) -> str:
        return self._history.newer()
