"""A tiny shell that tracks the working directory under ``cd`` and ``pwd``."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_SEPARATOR = "/"
_PARENT = ".."


def change_directory(directories: Sequence[str], path: str) -> list[str]:
    """Return the directory stack after ``cd path``.

    An absolute path starts again from the root; ``..`` goes up a level and
    does nothing at the root.
    """
    result = [] if path.startswith(_SEPARATOR) else list(directories)
    for part in path.split(_SEPARATOR):
        if part == _PARENT:
            if result:
                result.pop()
        elif part:
            result.append(part)
    return result


def working_directory(directories: Sequence[str]) -> str:
    """Render the directory stack as an absolute path ending in ``/``."""
    if not directories:
        return _SEPARATOR
    return _SEPARATOR + _SEPARATOR.join(directories) + _SEPARATOR


def run_commands(commands: Iterable[str]) -> list[str]:
    """Run ``cd <path>`` and ``pwd`` lines from the root; return what ``pwd`` prints.

    Blank lines and unknown commands are ignored.
    """
    directories: list[str] = []
    output: list[str] = []
    for line in commands:
        parts = line.split()
        if not parts:
            continue
        command = parts[0]
        if command == "pwd":
            output.append(working_directory(directories))
        elif command == "cd":
            if len(parts) < 2:
                raise ValueError("cd needs a path")
            directories = change_directory(directories, parts[1])
    return output