"""Input and output redirection, including here-documents."""

from __future__ import annotations

import os
from collections.abc import Iterable
from enum import Enum, auto
from typing import BinaryIO

from .environment import Environment
from .expansion import expand_variable


class RedirectKind(Enum):
    """The four redirection operators."""

    LESS = auto()
    GREAT = auto()
    DGREAT = auto()
    DLESS = auto()


class RedirectError(Exception):
    """A redirection could not be set up."""


def is_ambiguous(filename: str, literal: bool, environment: Environment) -> bool:
    """Whether a redirect target is ambiguous.

    That is an unexpanded ``$NAME`` not taken from single quotes, or a name
    with a space that appears inside some variable's entry.
    """
    if filename.startswith("$") and len(filename) > 1 and not literal:
        return True
    return " " in filename and any(
        filename in entry for entry in environment.variables
    )


_FLAGS = {
    RedirectKind.LESS: (os.O_RDONLY, "rb"),
    RedirectKind.GREAT: (os.O_WRONLY | os.O_CREAT | os.O_TRUNC, "wb"),
    RedirectKind.DGREAT: (os.O_WRONLY | os.O_CREAT | os.O_APPEND, "ab"),
}


def open_redirect(kind: RedirectKind, filename: str) -> BinaryIO:
    """Open *filename* as a redirection of *kind* and return the file."""
    if kind is RedirectKind.DLESS:
        raise ValueError("here-document input is read with read_heredoc")
    flags, mode = _FLAGS[kind]
    try:
        fd = os.open(filename, flags, 0o644)
    except OSError as exc:
        raise RedirectError("redirect failed") from exc
    return os.fdopen(fd, mode)


def read_heredoc(
    lines: Iterable[str],
    delimiter: str,
    environment: Environment,
    exit_code: int = 0,
) -> str:
    """Collect here-document lines up to *delimiter*, each ending in a newline.

    A line holding ``$`` is replaced by the expansion of the variable read
    from its second character on. Running out of lines before the delimiter
    raises RedirectError.
    """
    collected: list[str] = []
    for line in lines:
        if "$" in line:
            line = expand_variable(line, 0, environment, exit_code)[0]
        if line == delimiter:
            return "".join(collected)
        collected.append(line + "\n")
    raise RedirectError("heredoc failed")