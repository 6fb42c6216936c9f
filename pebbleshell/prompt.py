"""Building the interactive prompt from the working directory."""

from __future__ import annotations

import os

_BOLD_WHITE = "\033[1;97m"
_DEFAULT = "\033[0;39m"
_CYAN = "\033[2;96m"


def trim_dir_path(path: str) -> str:
    """Keep the last path component together with its leading slash."""
    index = path.rfind("/")
    return path[index:] if index >= 0 else path


def get_prompt(cwd: str | None = None, fancy: bool = False) -> str:
    """Return the prompt text for *cwd* (the current directory by default)."""
    directory = trim_dir_path(os.getcwd() if cwd is None else cwd)
    if fancy:
        return (
            f"{_BOLD_WHITE}minishell{_DEFAULT} {_CYAN}{directory}"
            f"{_DEFAULT}{_BOLD_WHITE} > {_DEFAULT}"
        )
    return f"minishell {directory} > "