"""Commands handled by the shell itself."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TextIO

BUILTINS = ("exit", "env")


class ExitRequested(Exception):
    """Raised when the ``exit`` builtin asks the shell to stop."""

    def __init__(self, status: int) -> None:
        super().__init__(f"exit requested with status {status}")
        self.status = status


def is_builtin(name: str) -> bool:
    """Return True if ``name`` is a builtin command."""
    return name in BUILTINS


def run_builtin(
    arguments: Sequence[str],
    exit_status: int,
    environ: Mapping[str, str] | None,
    stdout: TextIO,
) -> bool:
    """Run a builtin if ``arguments`` names one; return whether it did.

    ``exit`` raises ExitRequested with ``exit_status``; ``env`` writes the
    environment to ``stdout``.
    """
    if not arguments or not is_builtin(arguments[0]):
        return False
    if arguments[0] == "exit":
        raise ExitRequested(exit_status)
    if environ is not None:
        stdout.writelines(f"{key}={value}\n" for key, value in environ.items())
        stdout.flush()
    return True