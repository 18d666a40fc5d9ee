"""Commands the shell runs itself: echo, cd, pwd, env, export, unset, exit."""

from __future__ import annotations

import contextlib
import os
import sys
from itertools import dropwhile
from typing import Callable, Sequence, TextIO

from sksh.environment import Environment
from sksh.errors import ShellError, report
from sksh.text import atoi, isdigit

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_NUMERIC_REQUIRED = 2
EXIT_NOT_FOUND = 127

BUILTIN_NAMES = frozenset({"echo", "env", "pwd", "export", "unset", "cd", "exit"})

Runner = Callable[[list, Environment], int]


class ShellExit(SystemExit):
    """Raised by `exit`: the shell should stop with *status*."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def _out(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _is_n_flag(arg: str) -> bool:
    return arg.startswith("-") and all(ch == "n" for ch in arg[1:])


def echo(argv: Sequence[str], out: TextIO | None = None) -> int:
    """Print the arguments separated by spaces; leading -n flags drop the newline."""
    target = _out(out)
    args = list(argv[1:])
    words = list(dropwhile(_is_n_flag, args))
    newline = len(words) == len(args)
    target.write(" ".join(words) + ("\n" if newline else ""))
    target.flush()
    return EXIT_SUCCESS


def _directory_problem(path: str) -> str | None:
    if path:
        try:
            with os.scandir(path):
                return None
        except OSError:
            pass
    reason = "Not a directory" if path and os.path.exists(path) else "No such file or directory"
    return f"cd: {path}: {reason}\n"


def cd(argv: Sequence[str], env: Environment, err: TextIO | None = None) -> int:
    """Change the working directory; no argument or a leading '~' means $HOME."""
    if len(argv) > 2:
        report("cd: too many arguments\n", err)
        return EXIT_FAILURE
    target = argv[1] if len(argv) > 1 else None
    if target is not None and not target.startswith("~"):
        path = target
    else:
        home = env.get("HOME")
        if home is None:
            report("cd: Wrong directory\n", err)
            return EXIT_FAILURE
        path = home if target is None else home + target[1:]
    problem = _directory_problem(path)
    if problem is not None:
        report(problem, err)
        return EXIT_FAILURE
    with contextlib.suppress(OSError):
        os.chdir(path)
    return EXIT_SUCCESS


def pwd(out: TextIO | None = None) -> int:
    """Print the current working directory."""
    target = _out(out)
    target.write(os.getcwd() + "\n")
    target.flush()
    return EXIT_SUCCESS


def export(argv: Sequence[str], env: Environment, err: TextIO | None = None) -> int:
    """Set each NAME=value (a bare NAME becomes NAME=); fails if any name is invalid."""
    status = EXIT_SUCCESS
    for arg in argv[1:]:
        assignment = arg if "=" in arg else arg + "="
        try:
            env.set_var(assignment)
        except ShellError as exc:
            report(exc.message, err)
            status = EXIT_FAILURE
    return status


def unset(argv: Sequence[str], env: Environment) -> int:
    """Remove each named variable; unknown names are ignored."""
    for name in argv[1:]:
        env.unset(name)
    return EXIT_SUCCESS


def _print_env(env: Environment, out: TextIO | None) -> None:
    target = _out(out)
    for line in env.visible_lines():
        target.write(line + "\n")
    target.flush()


def env_builtin(
    argv: Sequence[str],
    env: Environment,
    out: TextIO | None = None,
    err: TextIO | None = None,
    runner: Runner | None = None,
) -> int:
    """Print the environment, or run a command in a copy changed by NAME=value args.

    *runner* is called with the remaining arguments and the modified copy; by
    default only builtins can be run this way.
    """
    scope = env.copy()
    for position, arg in enumerate(argv[1:], start=1):
        if "=" in arg:
            try:
                scope.set_var(arg)
            except ShellError as exc:
                report(exc.message, err)
                return EXIT_FAILURE
            continue
        if runner is None:
            return _run_builtin_only(list(argv[position:]), scope, out, err)
        return runner(list(argv[position:]), scope)
    _print_env(scope, out)
    return EXIT_SUCCESS


def _run_builtin_only(
    argv: list, env: Environment, out: TextIO | None, err: TextIO | None
) -> int:
    if is_builtin(argv[0]):
        return run_builtin(argv, env, out, err)
    report(f"{argv[0]}: command not found\n", err)
    return EXIT_NOT_FOUND


def _is_number(text: str) -> bool:
    digits = text[1:] if text[:1] in ("+", "-") else text
    return all(isdigit(ch) for ch in digits)


def exit_builtin(
    argv: Sequence[str], out: TextIO | None = None, err: TextIO | None = None
) -> int:
    """Leave the shell by raising ShellExit; returns 1 only on too many arguments."""
    count = len(argv)
    numeric = _is_number(argv[1]) if count > 1 else False
    if count > 2 and numeric:
        report("exit: too many arguments\n", err)
        return EXIT_FAILURE
    target = _out(out)
    target.write("exit\n")
    target.flush()
    if count == 1:
        raise ShellExit(EXIT_SUCCESS)
    if count == 2 and numeric:
        raise ShellExit(atoi(argv[1]) & 0xFF)
    report(f"exit: {argv[1]}: numeric argument required\n", err)
    raise ShellExit(EXIT_NUMERIC_REQUIRED)


def is_builtin(name: str | None) -> bool:
    """True for the names the shell handles itself (and for a missing name)."""
    return name is None or name in BUILTIN_NAMES


def run_builtin(
    argv: Sequence[str],
    env: Environment,
    out: TextIO | None = None,
    err: TextIO | None = None,
    runner: Runner | None = None,
) -> int:
    """Run the builtin named by argv[0] and return its status; 0 for other names."""
    if not argv:
        return EXIT_FAILURE
    match argv[0]:
        case "echo":
            return echo(argv, out)
        case "pwd":
            return pwd(out)
        case "env":
            return env_builtin(argv, env, out, err, runner)
        case "cd":
            return cd(argv, env, err)
        case "export":
            return export(argv, env, err)
        case "unset":
            return unset(argv, env)
        case "exit":
            return exit_builtin(argv, out, err)
        case _:
            return EXIT_SUCCESS