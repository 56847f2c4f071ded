"""Running external programs."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Mapping, Sequence

EXEC_FAILED_STATUS = 126


def execute(arguments: Sequence[str], environ: Mapping[str, str] | None) -> int:
    """Run the program at ``arguments[0]`` and return its exit status.

    A program that cannot be started yields 126 after a message on stderr;
    a program killed by a signal yields 0.
    """
    env = dict(environ) if environ is not None else None
    try:
        completed = subprocess.run(list(arguments), env=env, check=False)
    except (OSError, ValueError) as error:
        reason = getattr(error, "strerror", None) or str(error)
        sys.stderr.write(f"hsh: {reason}\n")
        sys.stderr.flush()
        return EXEC_FAILED_STATUS
    return max(completed.returncode, 0)