"""Finding and running external programs."""

from __future__ import annotations

import errno
import os
import signal
import subprocess
import sys
from collections.abc import Sequence
from typing import TextIO

from .environment import Environment

_PATH_PREFIXES = ("./", "/", "../")


class CommandError(Exception):
    """A program could not be started; *code* is the status the shell reports."""

    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


def _is_direct(name: str) -> bool:
    return name.startswith(_PATH_PREFIXES) or os.path.exists(name)


def _plan(name: str, path_value: str | None) -> tuple[list[str], str]:
    """Candidates to try and the path named in the error if all of them fail."""
    if _is_direct(name) or path_value is None:
        return [name], name
    if ":" in path_value:
        dirs = [part for part in path_value.split(":") if part]
        return [f"{directory}/{name}" for directory in dirs], name
    return [path_value], path_value


def candidate_paths(name: str, path_value: str | None) -> list[str]:
    """The paths tried, in order, when running command *name*.

    A name that looks like a path, or that exists, is used as it is; so is
    any name when PATH is unset. A PATH holding ``:`` is split into
    directories (empty entries dropped); a PATH without one is used whole.
    """
    return _plan(name, path_value)[0]


def command_error(command: str, path: str, err: OSError) -> CommandError:
    """Describe why *command* (tried as *path*) could not be started."""
    if command == ".":
        return CommandError(
            ".: filename argument required\n.: usage: . filename [arguments]\n",
            2,
        )
    number = err.errno or 0
    if path == command and not command.startswith(_PATH_PREFIXES):
        message = f"{command}: command not found\n"
    else:
        message = f"{command}: {os.strerror(number)}\n"
    code = 126 if number in (errno.EACCES, errno.EISDIR) else 127
    return CommandError(message, code)


def exit_status(returncode: int) -> int:
    """The shell status for a child's return code.

    Death by SIGTERM gives 128 plus the signal; any other signal gives 0.
    """
    if returncode == -signal.SIGTERM:
        return 128 + signal.SIGTERM
    if returncode < 0:
        return 0
    return returncode & 0xFF


def _environ(environment: Environment) -> dict[str, str]:
    result: dict[str, str] = {}
    for entry in environment.variables:
        name, sep, value = entry.partition("=")
        if sep:
            result[name] = value
    return result


def run_command(
    args: Sequence[str], environment: Environment, err: TextIO | None = None
) -> int:
    """Run an external program and return its status for the shell."""
    err = sys.stderr if err is None else err
    if not args:
        return 0
    name = args[0]
    candidates, reported = _plan(name, environment.value("PATH"))
    env = _environ(environment)
    failure: OSError | None = None
    for path in candidates:
        try:
            process = subprocess.Popen(list(args), executable=path, env=env)
        except OSError as exc:
            failure = exc
            continue
        returncode = process.wait()
        if returncode == -signal.SIGTERM:
            err.write(f"Terminated: {int(signal.SIGTERM)}\n")
        return exit_status(returncode)
    if failure is None:
        return 0
    error = command_error(name, reported, failure)
    err.write(error.message)
    return error.code