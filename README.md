# hshell

A small command-line shell. It reads one command per line, looks the command
up as a path or in the directories of `PATH`, runs it, and waits for it to
finish.

## Installing

```
pip install .
```

## Running

```
hsh
```

The same loop can be started with `python -m hshell.shell`.

When standard input is a terminal, `hsh` shows a `$ ` prompt and prints a
newline when input ends. When input comes from a pipe or a file, it runs the
commands without a prompt:

```
echo "ls -l /tmp" | hsh
```

## Behaviour

- A line is split on spaces, tabs, carriage returns and newlines. Empty
  lines, and lines made only of separators, are skipped.
- If the first word names a file that can be opened for reading, that file is
  run. Otherwise each non-empty directory in `PATH` is tried in order, and the
  first `directory/command` that can be opened is run.
- Built-in commands, checked only when no file of that name is found:
  - `exit` ends the shell with the status of the last command. Any
    arguments are ignored.
  - `env` prints the environment, one `NAME=value` per line.
- An unknown command prints an error such as
  `./hsh: 3: foo: not found` on standard error and sets the status to 127.
  The number is the count of lines read so far, blank lines included. The
  name is `hsh` when the shell runs interactively and `./hsh` when it does
  not.
- A program that cannot be started prints `hsh: <reason>` on standard error
  and gives status 126. A program ended by a signal gives status 0.
- At end of input the shell exits with the status of the last command.

## What it does not do

There is no quoting, escaping, variable expansion, globbing, pipes,
redirection, command separators or comments: every word is passed to the
program as written. There are no built-ins besides `exit` and `env`; in
particular there is no `cd`, `setenv` or `alias`, and `exit` does not take a
status argument. There is no history or line editing.

## Using it from Python

```python
import io
from hshell.shell import Shell

out, err = io.StringIO(), io.StringIO()
shell = Shell(io.StringIO("echo hello\n"), out, err, {"PATH": "/bin:/usr/bin"}, False)
status = shell.run()
```

`Shell.run_line(line)` runs a single line and returns the current status; it
raises `hshell.builtins.ExitRequested` (with a `status` attribute) when the
line is `exit`. `Shell.run()` catches that and returns the status.

Helper modules:

- `hshell.parsing.split_arguments`: splits a line into words.
- `hshell.pathsearch.find_command`: finds a command in `PATH`;
  `join_command` and `is_readable_file` are the steps it uses.
- `hshell.environment.get_env`: looks up an environment variable.
- `hshell.builtins.is_builtin` and `run_builtin`: the `exit` and `env`
  commands.
- `hshell.output.write_prompt`, `not_found_message` and `write_not_found`:
  the prompt and the not-found message.
- `hshell.executor.execute`: runs a program and returns its exit status.