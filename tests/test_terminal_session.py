from __future__ import annotations

import random

from paskanet.terminal import CommandHistory, CommandInterpreter, TerminalSession


def test_transcript_starts_with_the_banner() -> None:
    session = TerminalSession()

    assert session.lines == [
        "Paskanet II [Version 2.1.0]",
        "(c) Paskanet Corporation. All rights reserved.",
        "",
    ]


def test_cls_empties_the_transcript() -> None:
    session = TerminalSession()
    session.submit("echo a")

    session.submit("cls")

    assert session.lines == []


def test_exit_requests_close_and_leaves_transcript() -> None:
    closed: list[bool] = []
    session = TerminalSession(
        CommandInterpreter(rng=random.Random(1)), on_exit=lambda: closed.append(True)
    )
    before = session.lines

    session.submit("exit")

    assert closed == [True]
    assert session.lines == before


def test_submitted_commands_go_into_history() -> None:
    session = TerminalSession()
    session.submit("dir")
    session.submit("")
    session.submit("ver")

    assert session.history.entries() == ["ver", "dir"]
    assert session.history_up() == "ver"
    assert session.history_up() == "dir"
    assert session.history_down() == "ver"


def test_history_up_clamps_at_the_oldest_entry() -> None:
    history = CommandHistory()
    history.push("a")
    history.push("b")

    assert [history.older() for _ in range(4)] == ["b", "a", "a", "a"]


def test_history_down_past_newest_returns_empty_input() -> None:
    history = CommandHistory()
    history.push("a")
    history.push("b")
    history.older()
    history.older()

    assert history.newer() == "b"
    assert history.newer() == ""
    assert history.newer() == ""
    assert history.cursor == -1


def test_history_up_on_empty_history_returns_none() -> None:
    assert CommandHistory().older() is None


def test_history_is_bounded() -> None:
    history = CommandHistory(max_entries=3)
    for cmd in ("a", "b", "c", "d"):
        history.push(cmd)

    assert history.entries() == ["d", "c", "b"]
