"""Small string helpers shared by the shell: whitespace, identifiers, ordering."""

from __future__ import annotations

from collections.abc import Iterable

_SPACES = frozenset(" \f\n\r\t\v")


def is_space(char: str) -> bool:
    """Return True if *char* is one of the shell's whitespace characters."""
    return len(char) == 1 and char in _SPACES


def remove_char(text: str, char: str) -> str:
    """Return *text* with every occurrence of *char* removed."""
    return text.replace(char, "")


def cut_after(text: str, char: str) -> str:
    """Return what follows the first *char* in *text*, or "" if it is absent."""
    _, sep, rest = text.partition(char)
    return rest if sep else ""


def _head(text: str, char: str) -> str:
    return text.partition(char)[0]


def _cmp(first: str, second: str) -> int:
    return (first > second) - (first < second)


def compare_till(first: str, second: str, char: str) -> int:
    """Compare the parts of both strings before *char*, strcmp style."""
    return _cmp(_head(first, char), _head(second, char))


def compare_till_first(first: str, second: str, char: str) -> int:
    """Compare the part of *first* before *char* with the whole of *second*."""
    return _cmp(_head(first, char), second)


def _is_alpha(char: str) -> bool:
    return ("A" <= char <= "Z") or ("a" <= char <= "z")


def _is_valid_char(char: str) -> bool:
    return _is_alpha(char) or ("0" <= char <= "9") or char == "_"


def is_valid_identifier(text: str) -> bool:
    """Check a NAME or NAME=value argument as given to ``export``.

    The name must start with a letter and hold only letters, digits and
    underscores; anything after the first ``=`` is not checked.
    """
    if not text or not _is_alpha(text[0]):
        return False
    return all(_is_valid_char(c) for c in _head(text, "="))


def sort_strings(items: Iterable[str]) -> list[str]:
    """Return the strings in ascending character order, as a new list."""
    return sorted(items)