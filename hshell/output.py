"""Prompt and error-message output."""

from __future__ import annotations

from typing import TextIO

PROMPT = "$ "
NOT_FOUND_STATUS = 127


def write_prompt(stream: TextIO, interactive: bool) -> None:
    """Write the prompt to ``stream`` when the session is interactive."""
    if interactive:
        stream.write(PROMPT)
        stream.flush()


def not_found_message(command: str, counter: int, interactive: bool) -> str:
    """Build the message reported for a command that cannot be found."""
    program = "hsh" if interactive else "./hsh"
    return f"{program}: {counter}: {command}: not found\n"


def write_not_found(stream: TextIO, command: str, counter: int, interactive: bool) -> int:
    """Report a missing command on ``stream`` and return its exit status."""
    stream.write(not_found_message(command, counter, interactive))
    stream.flush()
    return NOT_FOUND_STATUS