"""Lookup of variables in a process environment."""

from __future__ import annotations

from collections.abc import Mapping


def get_env(name: str | None, environ: Mapping[str, str] | None) -> str | None:
    """Return the value of ``name`` in ``environ``, or None.

    The value is cut at the first ``=`` that follows any leading ``=``
    characters, and an empty value counts as absent.
    """
    if name is None or environ is None:
        return None
    value = environ.get(name)
    if value is None:
        return None
    first = value.lstrip("=").split("=", 1)[0]
    return first or None