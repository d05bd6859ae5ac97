"""Command history with an Up/Down cursor. Newest entry first."""

from __future__ import annotations

from collections import deque

from paskanet.config import MAX_COMMAND_HISTORY


class CommandHistory:
    def __init__(self, max_entries: int = MAX_COMMAND_HISTORY) -> None:
        self._entries: deque[str] = deque(maxlen=max_entries)
        self._cursor = -1  # -1 means "editing a fresh line"

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._entries)

    def entries(self) -> list[str]:
        return list(self._entries)

    def push(self, line: str) -> None:
        if line:
            self._entries.appendleft(line)
        self._cursor = -1

    def older(self) -> str | None:
        """Up arrow. Clamps at the oldest entry; None when the history is empty."""
        if not self._entries:
            return None
        self._cursor = min(self._cursor + 1, len(self._entries) - 1)
        return self._entries[self._cursor]

    def newer(self) -> str:
        """Down arrow. Past the newest entry the input line is emptied."""
        if self._cursor > 0:
            self._cursor -= 1
            return self._entries[self._cursor]
        self._cursor = -1
        return ""
