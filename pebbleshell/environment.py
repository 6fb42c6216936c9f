"""The shell's variable table and its exported (declared) counterpart."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from .text import compare_till, compare_till_first, cut_after, sort_strings

_DECLARE = "declare -x "
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def export_line(env_line: str) -> str:
    """Render a NAME or NAME=value entry the way ``export`` lists it."""
    name, sep, value = env_line.partition("=")
    if sep:
        return f'{_DECLARE}{name}="{value}"'
    return _DECLARE + env_line


def _index(entries: list[str], key: str) -> int | None:
    for index, entry in enumerate(entries):
        if compare_till(entry, key, "=") == 0:
            return index
    return None


def _put(entries: list[str], entry: str) -> None:
    index = _index(entries, entry)
    if index is None:
        entries.append(entry)
    else:
        entries[index] = entry


@dataclass
class Environment:
    """Variables as NAME=value strings plus their ``declare -x`` lines."""

    variables: list[str] = field(default_factory=list)
    exports: list[str] = field(default_factory=list)

    @classmethod
    def from_environ(
        cls, input_env: Iterable[str] | Mapping[str, str], cwd: str
    ) -> Environment:
        """Build the startup environment, ensuring PWD and bumping SHLVL."""
        if isinstance(input_env, Mapping):
            variables = [f"{k}={v}" for k, v in input_env.items()]
        else:
            variables = list(input_env)
        env = cls(variables=variables)
        if env.find("PWD") is None:
            env.variables.append("PWD=" + cwd)
        if env.find("SHLVL") is None:
            env.variables.append("SHLVL=1")
        else:
            env.increment_shlvl()
        env.exports = [export_line(v) for v in env.variables]
        return env

    def find(self, name: str) -> int | None:
        """Index of the variable called *name*, or None."""
        return _index(self.variables, name)

    def value(self, name: str) -> str | None:
        """The value of variable *name*, or None if it is not set."""
        index = self.find(name)
        if index is None:
            return None
        return cut_after(self.variables[index], "=")

    def is_exported(self, name: str) -> bool:
        """Whether *name* has a ``declare -x`` line."""
        return _index(self.exports, _DECLARE + name) is not None

    def set(self, entry: str) -> None:
        """Add or replace a NAME=value variable."""
        _put(self.variables, entry)

    def declare(self, entry: str) -> None:
        """Add or replace the export line for a NAME or NAME=value entry."""
        _put(self.exports, export_line(entry))

    def unset(self, name: str) -> None:
        """Remove *name* from both the variables and the exports."""
        self.variables = [
            v for v in self.variables if compare_till_first(v, name, "=") != 0
        ]
        declared = _DECLARE + name
        self.exports = [
            e for e in self.exports if compare_till_first(e, declared, "=") != 0
        ]

    def sorted_exports(self) -> list[str]:
        """The export lines in sorted order."""
        return sort_strings(self.exports)

    def increment_shlvl(self) -> None:
        """Raise SHLVL by one, resetting it to 1 when out of range."""
        index = self.find("SHLVL")
        if index is None:
            self.variables.append("SHLVL=1")
            return
        level = _atoi(cut_after(self.variables[index], "="))
        level = 1 if level > 1000 or level <= 0 else level + 1
        self.variables[index] = f"SHLVL={level}"