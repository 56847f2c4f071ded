"""Splitting an input line into command arguments."""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[\n\t\r ]+")


def split_arguments(line: str) -> list[str]:
    """Split ``line`` on newlines, tabs, carriage returns and spaces."""
    return [part for part in _SEPARATORS.split(line) if part]