"""Locating the two commands of a pipeline and splitting their arguments."""

import os
from typing import List, Mapping, Optional, Sequence, Tuple

from pipex.transform import split


class PipexError(Exception):
    """Raised when the pipeline cannot be set up."""


def command_name(command: str) -> str:
    """Return the program part of a command line: everything before the first space."""
    name, _, _ = command.partition(" ")
    return name


def path_entries(env: Optional[Mapping[str, str]]) -> List[str]:
    """Return the non-empty directories listed in the PATH of env.

    Raises PipexError when there is no environment or it has no PATH.
    """
    if env is None:
        raise PipexError("no environment given")
    path = env.get("PATH")
    if path is None:
        raise PipexError("PATH not set in environment")
    return split(path, ":")


def find_executable(command: str, directories: Sequence[str]) -> str:
    """Return the first directory/command that is executable.

    When no directory holds an executable of that name, the name itself
    is returned unchanged.
    """
    for directory in directories:
        candidate = f"{directory}/{command}"
        if os.access(candidate, os.X_OK):
            return candidate
    return command


def resolve_commands(
    cmd1: str, cmd2: str, env: Optional[Mapping[str, str]]
) -> Tuple[str, str]:
    """Return the executable paths for the programs of two command lines."""
    directories = path_entries(env)
    return (
        find_executable(command_name(cmd1), directories),
        find_executable(command_name(cmd2), directories),
    )


def parse_args(cmd1: str, cmd2: str) -> Tuple[List[str], List[str]]:
    """Split two command lines into argument lists on spaces."""
    return split(cmd1, " "), split(cmd2, " ")