"""Expanding words: variables, single quotes and wildcards."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from .environment import Environment
from .text import remove_char, sort_strings

_NAME = re.compile(r"[A-Za-z0-9]*")
_PLAIN = re.compile(r"[^$']*")


@dataclass(frozen=True)
class ExpandedWord:
    """The result of expanding one word.

    ``literal`` is True when a single-quoted part was taken as it stood.
    """

    text: str
    literal: bool = False


def match_pattern(pattern: str, name: str) -> bool:
    """Match *name* against a pattern where ``*`` stands for any run.

    Any remainder of the name that starts with a dot never matches.
    """
    if name.startswith("."):
        return False
    if not pattern and not name:
        return True
    if pattern == "*":
        return True
    if pattern.startswith("*"):
        rest = pattern[1:]
        return any(match_pattern(rest, name[k:]) for k in range(len(name)))
    if pattern and name and pattern[0] == name[0]:
        return match_pattern(pattern[1:], name[1:])
    return False


def search_with_wildcards(pattern: str, directory: str = ".") -> list[str]:
    """Sorted names in *directory* that match *pattern*."""
    try:
        names = os.listdir(directory)
    except OSError:
        return []
    return sort_strings(name for name in names if match_pattern(pattern, name))


def handle_wildcards(pattern: str, directory: str = ".") -> str | None:
    """The matching names joined by spaces, or None when nothing matches."""
    matches = search_with_wildcards(pattern, directory)
    if not matches:
        return None
    return remove_char(" ".join(matches), "*")


def add_quotes(text: str) -> str:
    """Wrap *text* in single quotes."""
    return f"'{text}'"


def count_single_quotes(text: str) -> int:
    """Number of single quotes in *text*."""
    return text.count("'")


def expand_variable(
    text: str, pos: int, environment: Environment, exit_code: int = 0
) -> tuple[str, int]:
    """Expand the variable whose ``$`` is at *pos*; return it and the next position.

    The character at *pos* is skipped unconditionally. Names are made of
    letters and digits only; ``?`` after them gives the last exit code. An
    unset name is left as written.
    """
    start = pos + 1
    end = _NAME.match(text, start).end()
    if text[end : end + 1] == "?":
        return str(exit_code), end + 1
    value = environment.value(text[start:end])
    if value is None:
        return text[pos:end], end
    return value, end


def _prepare(value: str) -> tuple[str, bool]:
    if (
        count_single_quotes(value) == 4
        and value.startswith("''$")
        and value.endswith("''")
    ):
        return remove_char(value, "'"), True
    return value, False


def _single_quoted(text: str, pos: int, quote_count: int) -> tuple[str, int]:
    length = len(text)
    if quote_count % 2 == 0:
        pos += 1
    start = pos
    if quote_count % 2 or quote_count == 4:
        pos += 1
    while pos < length and text[pos] != "'":
        pos += 1
    if quote_count == 4:
        pos += 1
    part = text[start:pos]
    if pos < length:
        pos += 1
    return part, min(pos, length)


def _unquote_variable(text: str) -> str:
    if text.startswith('"$') and text.endswith("'\""):
        return remove_char(text, "'")
    return text


def transform_arg(
    value: str,
    environment: Environment,
    exit_code: int = 0,
    directory: str = ".",
) -> ExpandedWord:
    """Expand a token value into the word a command receives."""
    text, wrap = _prepare(value)
    quote_count = count_single_quotes(text)
    parts: list[str] = []
    literal = False
    length = len(text)
    pos = 0
    while pos < length:
        if text[pos] == "'":
            part, pos = _single_quoted(text, pos, quote_count)
            parts.append(part)
            literal = True
        if text.startswith("*", pos):
            matches = handle_wildcards(text, directory)
            if matches is not None:
                parts.append(matches)
                break
        if text.startswith("$", pos):
            part, pos = expand_variable(text, pos, environment, exit_code)
            parts.append(part)
        end = _PLAIN.match(text, pos).end()
        parts.append(text[pos:end])
        pos = end
    result = _unquote_variable("".join(parts))
    if wrap:
        result = add_quotes(result)
    return ExpandedWord(result, literal)