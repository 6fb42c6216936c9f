"""Splitting a command line into shell tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

from .text import is_space

_QUOTE_BEFORE_TEXT = re.compile(r'"(?=[^$])')


class ShellSyntaxError(ValueError):
    """The command line cannot be split into tokens."""


class TokenType(Enum):
    """Kinds of token the tokenizer produces."""

    IDENTIFIER = auto()
    PIPE = auto()
    GREAT = auto()
    LESS = auto()
    DGREAT = auto()
    DLESS = auto()
    AND = auto()
    OR = auto()
    OPAR = auto()
    CPAR = auto()


@dataclass(frozen=True)
class Token:
    """One token; operators carry no value."""

    type: TokenType
    value: str | None = None


# Two-character operators are tried before their one-character prefixes.
_OPERATORS = (
    (">>", TokenType.DGREAT),
    ("<<", TokenType.DLESS),
    ("||", TokenType.OR),
    ("&&", TokenType.AND),
    ("|", TokenType.PIPE),
    (">", TokenType.GREAT),
    ("<", TokenType.LESS),
    ("(", TokenType.OPAR),
    (")", TokenType.CPAR),
)

_WORD_STOPS = frozenset("&|><")


def _check_redirection_run(text: str, pos: int) -> None:
    char = text[pos]
    after = text[pos + 1 : pos + 2]
    further = text[pos + 2 : pos + 3]
    if (
        (char in "<>" and further != "" and further in "<>")
        or (char == ">" and after == "<")
        or (char == "<" and after == ">")
    ):
        raise ShellSyntaxError(f"syntax error near unexpected token {char}")


def compare_quotes(quotes: tuple[int, int], value: str) -> bool:
    """Check the first quoted section of *value* for quotes of the other kind.

    *quotes* holds the counts of single and double quotes. Returns False when
    both counts are even or when the first section opened by the odd-counted
    quote holds another quote; True otherwise.
    """
    singles, doubles = quotes
    if singles % 2 == 0 and doubles % 2 == 0:
        return False
    delimiter = "'" if singles % 2 == 0 else '"'
    opened = 0
    length = len(value)
    i = 0
    while i < length:
        char = value[i]
        i += 1
        if char == delimiter:
            opened += 1
            while i < length and value[i] != delimiter:
                if value[i] in "'\"" and opened == 1:
                    return False
                i += 1
            if i >= length:
                return True
            opened += 1
        i += 1
    return True


def _mark_quoted_expansion(value: str) -> str:
    """Put '' before the first double quote that follows a '$'."""
    dollar = value.find("$")
    if dollar < 0:
        return value
    match = _QUOTE_BEFORE_TEXT.search(value, dollar)
    if match is None:
        return value
    k = match.start()
    return value[:k] + "''" + value[k:]


def _wrap_mixed_quotes(value: str) -> str:
    if value.startswith("\"'"):
        close = value.find("'", 2)
        if close != -1 and value[close + 1 : close + 2] == '"':
            return f"'{value}'"
    return value


def _double_inside_single(value: str) -> bool:
    if value.startswith("'\""):
        close = value.find('"', 2)
        return close != -1 and value[close + 1 : close + 2] == "'"
    return False


def _check_quotes(value: str, quotes: tuple[int, int]) -> str:
    singles, doubles = quotes
    remove = not (singles % 2 == 0 and doubles % 2 == 1)
    matched = compare_quotes(quotes, value)
    assigns_double = '="' in value and doubles % 2 == 0
    assigns_single = "='" in value and singles % 2 == 0
    if assigns_double or assigns_single:
        if assigns_single:
            remove = False
    elif (singles % 2 or doubles % 2) and matched:
        raise ShellSyntaxError("unexpected EOF while looking for matching quote")
    if _double_inside_single(value):
        remove = False
    value = _wrap_mixed_quotes(value)
    if remove and not matched:
        return value.replace('"', "")
    return value.strip('"')


def process_value(text: str, start: int) -> tuple[str, int]:
    """Read the word starting at *start*; return its value and where it ends."""
    singles = doubles = 0
    end = start
    length = len(text)
    while end < length and text[end] != ")":
        char = text[end]
        in_quotes = singles % 2 or doubles % 2
        if not in_quotes and (is_space(char) or char in _WORD_STOPS):
            break
        if char == "'":
            singles += 1
        elif char == '"':
            doubles += 1
        end += 1
    value = _mark_quoted_expansion(text[start:end])
    return _check_quotes(value, (singles, doubles)), end


def tokenize(text: str) -> list[Token]:
    """Split *text* into tokens, raising ShellSyntaxError on bad input."""
    tokens: list[Token] = []
    length = len(text)
    pos = 0
    while True:
        while pos < length and is_space(text[pos]):
            pos += 1
        if pos >= length:
            return tokens
        _check_redirection_run(text, pos)
        for symbol, kind in _OPERATORS:
            if text.startswith(symbol, pos):
                tokens.append(Token(kind))
                pos += len(symbol)
                break
        else:
            value, end = process_value(text, pos)
            if end == pos:
                raise ShellSyntaxError(
                    f"syntax error near unexpected token {text[pos]}"
                )
            tokens.append(Token(TokenType.IDENTIFIER, value))
            pos = end