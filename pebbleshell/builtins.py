"""The commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TextIO

from .environment import Environment
from .text import is_valid_identifier

_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class Builtin(IntEnum):
    """Which builtin a command names; NONE is false in a boolean context."""

    NONE = 0
    ECHO = 1
    CD = 2
    PWD = 3
    EXPORT = 4
    UNSET = 5
    ENV = 6
    EXIT = 7


_NAMES = {
    "echo": Builtin.ECHO,
    "cd": Builtin.CD,
    "pwd": Builtin.PWD,
    "export": Builtin.EXPORT,
    "unset": Builtin.UNSET,
    "env": Builtin.ENV,
    "exit": Builtin.EXIT,
}


class ShellExit(Exception):
    """Raised by ``exit``: the shell should stop with *code*."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


@dataclass
class ShellState:
    """What builtins read and change: variables, last status and streams."""

    environment: Environment
    exit_code: int = 0
    out: TextIO = field(default_factory=lambda: sys.stdout)
    err: TextIO = field(default_factory=lambda: sys.stderr)


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def builtin_kind(args: Sequence[str]) -> Builtin:
    """The builtin named by ``args[0]``, or Builtin.NONE."""
    return _NAMES.get(args[0], Builtin.NONE) if args else Builtin.NONE


def run_echo(
    args: Sequence[str],
    literal_flags: Sequence[bool] | None = None,
    out: TextIO | None = None,
) -> None:
    """Print the arguments separated by spaces; ``-n`` options drop the newline.

    A word that still starts with ``$`` (an unset variable) is left out unless
    its flag in *literal_flags* says it came from single quotes.
    """
    out = sys.stdout if out is None else out
    flags = literal_flags or ()
    newline = True
    start = 1
    while start < len(args) and args[start].startswith("-"):
        body = args[start][1:]
        if not body or set(body) != {"n"}:
            break
        newline = False
        start += 1
    parts = []
    for index, word in enumerate(args[start:], start=start):
        literal = flags[index] if index < len(flags) else False
        hidden = word.startswith("$") and len(word) > 1 and not literal
        parts.append("" if hidden else word)
    out.write(" ".join(parts))
    if newline:
        out.write("\n")


def _record_dir(state: ShellState, name: str) -> None:
    entry = f"{name}={os.getcwd()}"
    env = state.environment
    if env.is_exported(name):
        env.set(entry)
        env.declare(entry)


def _quiet_chdir(path: str) -> None:
    try:
        os.chdir(path)
    except OSError:
        pass


def run_cd(state: ShellState, args: Sequence[str]) -> None:
    """Change directory, keeping PWD and OLDPWD up to date."""
    env = state.environment
    target = args[1] if len(args) > 1 else None
    if target == "-":
        previous = env.value("OLDPWD")
        if previous is None:
            state.out.write("cd: OLDPWD is not set\n")
            return
        _record_dir(state, "OLDPWD")
        _quiet_chdir(previous)
        return
    _record_dir(state, "OLDPWD")
    if target is None or target == "~":
        home = env.value("HOME")
        if home is None:
            state.out.write("cd: HOME is not set\n")
            return
        _quiet_chdir(home)
        _record_dir(state, "PWD")
        return
    try:
        os.chdir(target)
    except OSError as exc:
        state.err.write(f"{exc.strerror}: {target}\n")
        state.exit_code = 1
        return
    _record_dir(state, "PWD")


def run_pwd(out: TextIO | None = None) -> None:
    """Print the current working directory."""
    out = sys.stdout if out is None else out
    out.write(os.getcwd() + "\n")


def run_env(state: ShellState, args: Sequence[str]) -> None:
    """Print every variable; arguments are refused."""
    if len(args) > 1:
        state.err.write("Too many arguments.\n\n")
        return
    for entry in state.environment.variables:
        state.out.write(entry + "\n")


def run_export(state: ShellState, args: Sequence[str]) -> None:
    """List the exports, or set and export each NAME[=value] argument."""
    env = state.environment
    if len(args) <= 1:
        for line in env.sorted_exports():
            state.out.write(line + "\n")
        return
    for arg in args[1:]:
        if not is_valid_identifier(arg):
            state.err.write(f"export: {arg}: not a valid identifier\n")
            state.exit_code = 1
            return
        if "=" in arg:
            env.set(arg)
        env.declare(arg)


def run_unset(state: ShellState, args: Sequence[str]) -> None:
    """Remove each named variable and its export line."""
    for name in args[1:]:
        state.environment.unset(name)


def run_exit(state: ShellState, args: Sequence[str]) -> None:
    """Leave the shell by raising ShellExit with the requested status."""
    state.exit_code = 0
    if len(args) > 1:
        number = _atoi(args[1])
        if not args[1] or number == 0:
            state.err.write("exit\n")
            state.err.write("minishell: exit: numeric argument required\n")
            state.exit_code = 255
            raise ShellExit(255)
        if len(args) > 2:
            state.err.write("exit\n")
            state.err.write("minishell: exit: too many arguments\n")
        state.exit_code = number % 256
    state.err.write("exit\n")
    raise ShellExit(state.exit_code)


def execute_builtin(
    state: ShellState,
    args: Sequence[str],
    kind: Builtin,
    literal_flags: Sequence[bool] | None = None,
) -> int:
    """Run builtin *kind* with *args*; return the shell's exit code after it."""
    if kind is Builtin.EXIT:
        run_exit(state, args)
    elif kind is Builtin.CD:
        run_cd(state, args)
    elif kind is Builtin.PWD:
        run_pwd(state.out)
    elif kind is Builtin.ECHO:
        run_echo(args, literal_flags, state.out)
    elif kind is Builtin.ENV:
        run_env(state, args)
    elif kind is Builtin.UNSET:
        run_unset(state, args)
    elif kind is Builtin.EXPORT:
        run_export(state, args)
    return state.exit_code