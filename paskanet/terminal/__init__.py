"""Command-line interpreter behind the Command Prompt panel."""

from paskanet.terminal.history import CommandHistory
from paskanet.terminal.interpreter import CommandInterpreter, CommandResult, unrecognized
from paskanet.terminal.session import TerminalSession

__all__ = [
    "CommandHistory",
    "CommandInterpreter",
    "CommandResult",
    "TerminalSession",
    "unrecognized",
]
