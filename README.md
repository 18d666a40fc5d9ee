# sksh

`sksh` is the core of a small shell. It is a library that contains these modules:

- `sksh.builtins` holds the commands the shell runs itself: `echo`, `cd`, `pwd`,
  `env`, `export`, `unset` and `exit`.
- `sksh.environment` holds `Environment`, an ordered store of `NAME=value`
  entries with identifier checks.
- `sksh.ast` evaluates command lines. It handles commands joined by `&&` and
  `||` and grouped in parentheses.
- `sksh.banner` prints a start-up banner from a text file.
- `sksh.errors` holds error reporting with the `sksh: ` prefix.
- `sksh.text` holds string helpers with C-library semantics, such as `atoi`,
  `strcmp`, `strncmp`, `split`, `substr` and `read_lines`.

## Builtins

Each builtin takes an argument vector whose first item is the command name. It
returns an exit status. Output goes to the `out` stream and error messages go
to the `err` stream. Both default to standard output and standard error.

```python
import sys
from sksh.builtins import echo, is_builtin, run_builtin
from sksh.environment import Environment

echo(["echo", "-n", "hello", "world"], sys.stdout)   # "hello world", no newline
is_builtin("cd")      # True
is_builtin("ls")      # False

env = Environment(["HOME=/tmp"])
run_builtin(["export", "GREETING=hi"], env)          # 0
run_builtin(["env"], env)                            # prints HOME=/tmp and GREETING=hi
```

How the builtins behave:

- `echo` joins its arguments with spaces. Leading flags of the form `-n`,
  `-nn` and so on suppress the final newline.
- `cd` changes the working directory. With no argument, or an argument that
  starts with `~`, it uses `$HOME` from the given environment. It reports
  "too many arguments", "No such file or directory" or "Not a directory", and
  then returns 1.
- `pwd` prints the current working directory.
- `export` sets each `NAME=value`. A bare `NAME` becomes `NAME=`. It returns 1
  if any name is not a valid identifier.
- `unset` removes the named variables. It ignores names that are not set.
- `env_builtin` prints the environment without the `?=` exit-status slot. Given
  `NAME=value` arguments followed by a command, it runs the command in a
  changed copy of the environment through the `runner` callback,
  `runner(argv, env) -> int`. With no runner, it can run only builtins. Any
  other command gives "command not found" and status 127.
- `exit_builtin` prints `exit` and raises `ShellExit`, a subclass of
  `SystemExit` that carries `.status`. A numeric argument sets the status
  (modulo 256). A non-numeric argument gives status 2. If there is more than
  one argument and the first is numeric, it reports "too many arguments" and
  returns 1 instead.

`run_builtin` dispatches on `argv[0]`. For names that are not builtins it
returns 0.

## Environment

```python
from sksh.environment import Environment, is_valid_identifier

env = Environment(["HOME=/home/user", "PATH=/usr/bin"])
env.set_var("EDITOR=vi", False)
env.get("EDITOR")                    # "vi"
env.unset("EDITOR")                  # True
is_valid_identifier("1ABC", False)   # False
env.visible_lines()                  # entries without the "?=" slot
```

`set_var` raises `sksh.errors.ShellError` for a name that does not match
`[A-Za-z_][A-Za-z0-9_]*`. With `allow_status=True`, the name may also start
with `?`, for the exit-status slot. `copy()` returns an independent
environment.

## Command lines

`run_line` reads a line and builds a tree from it. It splits the line into
commands at `&&`, `||`, `(` and `)`, outside single or double quotes. A single
`|` stays part of its command.

Each command is passed as a string to the `execute` callback. The callback
returns that command's exit status. Commands that are blank are not run.

```python
import sys
from sksh.ast import run_line

def execute(command):
    print("running:", command.strip())
    return 0

run_line("true && (echo a || echo b)", execute, sys.stderr)   # 0
```

`&&` runs its right side only after a status of 0, and `||` only after a
non-zero status. A status of 130 (interrupted) stops the chain.

The line is evaluated while it is read. On a syntax error, `run_line` writes
the error to the error stream with the `sksh:` prefix and returns `None`.
Syntax errors include:

- a `)` with no group open;
- an operator at the start of a line;
- two operators in a row;
- text directly after `)`.

Commands that came before the error may already have run. `CommandLine` offers
the same through `CommandLine(execute, err).run(line)` and
`CommandLine.evaluate(node)`.

## Banner

`sksh.banner.print_banner(path="banner.txt", out=None)` copies the file to the
output, followed by a newline. It returns `False` without printing anything if
the file cannot be opened.

## Errors

`sksh.errors.format_error` adds the `sksh: ` prefix to a message.
`sksh.errors.report` writes the prefixed message to a stream. `ShellError`
carries a message and an exit status.

## What this package does not do

`sksh` has no interactive prompt and no command to start it. It does not:

- start external programs;
- set up pipes or redirections;
- expand `$VARIABLES`;
- split a command into words.

All of that belongs to the `execute` callback that is given to `run_line`, and
to the `runner` given to `env_builtin`.