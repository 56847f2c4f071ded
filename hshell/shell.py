"""The interactive command loop."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from typing import TextIO

from hshell.builtins import ExitRequested, run_builtin
from hshell.executor import execute
from hshell.output import write_not_found, write_prompt
from hshell.parsing import split_arguments
from hshell.pathsearch import find_command, is_readable_file


class Shell:
    """A minimal command shell reading one command per line."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        environ: Mapping[str, str] | None = None,
        interactive: bool | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.environ = environ if environ is not None else os.environ
        if interactive is None:
            try:
                interactive = self.stdin.isatty()
            except (AttributeError, ValueError):
                interactive = False
        self.interactive = interactive
        self.counter = 1
        self.exit_status = 0

    def run_line(self, line: str) -> int:
        """Run one input line and return the current exit status.

        Raises ExitRequested when the line is the ``exit`` builtin.
        """
        arguments = split_arguments(line) if not line.startswith("\n") else []
        if arguments:
            self._dispatch(arguments)
        self.counter += 1
        return self.exit_status

    def _dispatch(self, arguments: list[str]) -> None:
        command = arguments[0]
        if is_readable_file(command):
            self.stdout.flush()
            self.exit_status = execute(arguments, self.environ)
            return
        found = find_command(command, self.environ)
        if found is not None:
            self.stdout.flush()
            self.exit_status = execute([found, *arguments[1:]], self.environ)
            return
        if not run_builtin(arguments, self.exit_status, self.environ, self.stdout):
            self.exit_status = write_not_found(
                self.stderr, command, self.counter, self.interactive
            )

    def run(self) -> int:
        """Read and run lines until end of input or ``exit``; return the status."""
        try:
            while True:
                write_prompt(self.stdout, self.interactive)
                line = self.stdin.readline()
                if not line:
                    break
                self.run_line(line)
        except ExitRequested as request:
            return request.status
        if self.interactive:
            self.stdout.write("\n")
            self.stdout.flush()
        return self.exit_status


def main(argv: list[str] | None = None) -> int:
    """Run the shell on the process's standard streams."""
    return Shell().run()


if __name__ == "__main__":
    raise SystemExit(main())