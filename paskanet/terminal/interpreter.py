"""
Command interpreter: one input line -> display lines.

Every verb is a plain formatter; the only side effects a line can request are
clearing the screen (`cls`) and closing the panel (`exit`). `shutdown` prints
guidance only, it never touches the session.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from paskanet.config import OS_NAME, PROMPT
from paskanet.core.version import os_banner

PING_COUNT = 4
PING_MIN_MS = 20
PING_MAX_MS = 150

HELP_LINES = (
    "For more information on a specific command, type HELP command-name",
    "CLS              Clears the screen.",
    "CMD              Starts a new instance of the Paskanet II command interpreter.",
    "COLOR            Sets the default console foreground and background colors.",
    "DATE             Displays or sets the date.",
    "DIR              Displays a list of files and subdirectories in a directory.",
    "ECHO             Displays messages, or turns command echoing on or off.",
    "EXIT             Quits the CMD.EXE program (command interpreter).",
    "HOSTNAME         Prints the name of the current host.",
    "IPCONFIG         Displays all current TCP/IP network configuration values.",
    "NETSTAT          Displays protocol statistics and current TCP/IP network connections.",
    "PING             Verifies connectivity to a remote computer.",
    "SHUTDOWN         Allows proper local or remote shutdown of the machine.",
    "SYSINFO          Displays machine specific properties and configuration.",
    "TASKLIST         Displays all currently running tasks including services.",
    "TIME             Displays or sets the system time.",
    "TYPE             Displays the contents of a text file or files.",
    "VER              Displays the Paskanet II version.",
    "WHOAMI           Displays the current user name.",
)

DIR_LINES = (
    " Volume in drive P is PaskanetOS",
    " Directory of P:\\",
    "",
    "07/04/2024  02:10 PM    <DIR>          Users",
    "07/04/2024  01:05 PM    <DIR>          Windows",
    "07/04/2024  03:15 PM    <DIR>          Program Files",
    "07/05/2024  09:00 AM             1,024 config.sys",
    "               1 File(s)          1,024 bytes",
    "               3 Dir(s)   17,179,869,184 bytes free",
)

TASKLIST_LINES = (
    "Image Name                     PID Session Name        Session#    Mem Usage",
    "========================= ======== ================ =========== ============",
    "System                           4 Services                   0      128 MB",
    "svchost.exe                   1120 Services                   0       64 MB",
    "explorer.exe                  4132 Console                    1      256 MB",
    "P2Manager.exe                 6012 Services                   0      180 MB",
    "cmd.exe                       7123 Console                    1       24 MB",
)

SYSINFO_LINES = (
    "Host Name:                 PASKANET-SVR-01",
    f"OS Name:                   {OS_NAME} Server",
    "OS Version:                2.1.0 Build 2100",
    "Processor(s):              1 Processor(s) Installed.",
    "Total Physical Memory:     32,768 MB",
    "Available Physical Memory: 14,336 MB",
)

SHUTDOWN_LINES = (
    "Broadcasting shutdown message...",
    "Use the Start Menu or Manage menu to shut down.",
)


@dataclass(frozen=True, slots=True)
class CommandResult:
    lines: tuple[str, ...] = ()
    clear_screen: bool = False
    close_requested: bool = False


def unrecognized(command: str) -> tuple[str, str]:
    return (
        f"'{command}' is not recognized as an internal or external command,",
        "operable program or batch file.",
    )


def format_date(now: datetime) -> str:
    return f"{now.month}/{now.day}/{now.year}"


def format_time(now: datetime) -> str:
    hour = now.hour % 12 or 12
    suffix = "AM" if now.hour < 12 else "PM"
    return f"{hour}:{now.minute:02d}:{now.second:02d} {suffix}"


Verb = Callable[["CommandInterpreter", list[str]], list[str]]


class CommandInterpreter:
    """Closed verb table. Verbs are case-insensitive; arguments are split on single spaces."""

    def __init__(
        self,
        *,
        clock: Callable[[], datetime] = datetime.now,
        rng: random.Random | None = None,
    ) -> None:
        self._clock = clock
        self._rng = rng or random.Random()

    def execute(self, line: str) -> CommandResult:
        command, *args = line.strip().split(" ")
        verb = command.lower()
        if verb == "cls":
            return CommandResult(clear_screen=True)
        if verb == "exit":
            return CommandResult(close_requested=True)

        output = [f"{PROMPT} {line}"]
        handler = _VERBS.get(verb)
        if handler is not None:
            output.extend(handler(self, args))
        elif verb:
            output.extend(unrecognized(command))
        output.append("")
        return CommandResult(lines=tuple(output))

    # --- Verbs ---
    def _help(self, _args: list[str]) -> list[str]:
        return list(HELP_LINES)

    def _echo(self, args: list[str]) -> list[str]:
        return [" ".join(args)]

    def _ver(self, _args: list[str]) -> list[str]:
        return [os_banner()]

    def _date(self, _args: list[str]) -> list[str]:
        return [f"The current date is: {format_date(self._clock())}"]

    def _time(self, _args: list[str]) -> list[str]:
        return [f"The current time is: {format_time(self._clock())}"]

    def _dir(self, _args: list[str]) -> list[str]:
        return list(DIR_LINES)

    def _ping(self, args: list[str]) -> list[str]:
        if not args:
            return ["Usage: ping <hostname>"]
        host = args[0]
        lines = [f"Pinging {host} with 32 bytes of data:"]
        for _ in range(PING_COUNT):
            delay = self._rng.randint(PING_MIN_MS, PING_MAX_MS)
            lines.append(f"Reply from {host}: bytes=32 time={delay}ms TTL=58")
        return lines

    def _tasklist(self, _args: list[str]) -> list[str]:
        return list(TASKLIST_LINES)

    def _sysinfo(self, _args: list[str]) -> list[str]:
        return list(SYSINFO_LINES)

    def _shutdown(self, _args: list[str]) -> list[str]:
        return list(SHUTDOWN_LINES)


_VERBS: dict[str, Verb] = {
    "help": CommandInterpreter._help,
    "echo": CommandInterpreter._echo,
    "ver": CommandInterpreter._ver,
    "date": CommandInterpreter._date,
    "time": CommandInterpreter._time,
    "dir": CommandInterpreter._dir,
    "ping": CommandInterpreter._ping,
    "tasklist": CommandInterpreter._tasklist,
    "sysinfo": CommandInterpreter._sysinfo,
    "shutdown": CommandInterpreter._shutdown,
}
