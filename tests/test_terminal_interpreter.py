from __future__ import annotations

import random
import re
from datetime import datetime

from paskanet.terminal import CommandInterpreter


def _interp(now: datetime | None = None) -> CommandInterpreter:
    fixed = now or datetime(2024, 7, 4, 14, 5, 9)
    return CommandInterpreter(clock=lambda: fixed, rng=random.Random(7))


def test_echo_adds_prompt_echo_output_and_blank_line() -> None:
    result = _interp().execute("echo hello world")

    assert result.lines == ("P:\\> echo hello world", "hello world", "")


def test_ping_prints_four_replies_in_range() -> None:
    lines = _interp().execute("ping example.com").lines

    assert lines[1] == "Pinging example.com with 32 bytes of data:"
    replies = lines[2:6]
    assert len(replies) == 4
    for line in replies:
        m = re.fullmatch(r"Reply from example\.com: bytes=32 time=(\d+)ms TTL=58", line)
        assert m is not None
        assert 20 <= int(m.group(1)) <= 150
    assert lines[-1] == ""


def test_ping_without_host_prints_usage() -> None:
    assert _interp().execute("ping").lines[1] == "Usage: ping <hostname>"


def test_unknown_command_echoes_the_token_as_typed() -> None:
    lines = _interp().execute("FooBar --x").lines

    assert lines == (
        "P:\\> FooBar --x",
        "'FooBar' is not recognized as an internal or external command,",
        "operable program or batch file.",
        "",
    )


def test_verbs_are_case_insensitive() -> None:
    assert _interp().execute("VER").lines[1] == "Paskanet II [Version 2.1.0]"


def test_cls_and_exit_add_no_lines() -> None:
    cls = _interp().execute("cls")
    assert cls.clear_screen is True
    assert cls.lines == ()

    ex = _interp().execute("exit")
    assert ex.close_requested is True
    assert ex.lines == ()


def test_empty_line_only_echoes_the_prompt() -> None:
    assert _interp().execute("").lines == ("P:\\> ", "")


def test_date_and_time_format() -> None:
    interp = _interp(datetime(2024, 7, 4, 14, 5, 9))

    assert interp.execute("date").lines[1] == "The current date is: 7/4/2024"
    assert interp.execute("time").lines[1] == "The current time is: 2:05:09 PM"


def test_midnight_is_twelve_am() -> None:
    interp = _interp(datetime(2024, 1, 1, 0, 0, 0))

    assert interp.execute("time").lines[1] == "The current time is: 12:00:00 AM"


def test_shutdown_verb_prints_guidance_only() -> None:
    lines = _interp().execute("shutdown").lines

    assert lines[1:3] == (
        "Broadcasting shutdown message...",
        "Use the Start Menu or Manage menu to shut down.",
    )


def test_help_lists_commands() -> None:
    lines = _interp().execute("help").lines

    assert lines[1].startswith("For more information")
    assert any(line.startswith("PING") for line in lines)
