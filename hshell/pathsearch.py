"""Locating commands in the directories named by PATH."""

from __future__ import annotations

import os
from collections.abc import Mapping

from hshell.environment import get_env


def join_command(directory: str, command: str) -> str:
    """Join ``directory`` and ``command`` with a single separating slash."""
    if directory.endswith("/"):
        return directory + command
    return f"{directory}/{command}"


def is_readable_file(pathname: str) -> bool:
    """Return True if ``pathname`` can be opened for reading."""
    try:
        fd = os.open(pathname, os.O_RDONLY)
    except (OSError, ValueError):
        return False
    os.close(fd)
    return True


def find_command(command: str, environ: Mapping[str, str] | None) -> str | None:
    """Return the first PATH entry joined with ``command`` that can be opened."""
    search_path = get_env("PATH", environ)
    if search_path is None:
        return None
    for directory in filter(None, search_path.split(":")):
        candidate = join_command(directory, command)
        if is_readable_file(candidate):
            return candidate
    return None