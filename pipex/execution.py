"""Resolving and starting the commands of a pipeline."""

from __future__ import annotations

import os
import subprocess
from typing import IO, Iterable, List, Mapping, Optional, Union

from pipex.paths import find_path_in_env
from pipex.transform import split

Environment = Union[Mapping[str, str], Iterable[str]]
Stream = Union[int, IO, None]

COMMAND_NOT_FOUND_STATUS = 127


class CommandNotFoundError(LookupError):
    """Raised when a command is neither a path nor found in ``PATH``."""

    exit_status = COMMAND_NOT_FOUND_STATUS

    def __init__(self, command: str) -> None:
        super().__init__(f"Command not found: {command}")
        self.command = command


def split_command(cmd: str) -> List[str]:
    """Split a command line on spaces into its words, dropping empty ones."""
    words = split(cmd, " ")
    return [] if words is None else words


def resolve_executable(args: List[str], env: Optional[Environment] = None) -> str:
    """Path of the program that ``args`` names.

    A name containing ``/`` is used as it is; any other name is looked up
    in the ``PATH`` of ``env``.  Raises :class:`CommandNotFoundError` when
    there is no name or the lookup finds nothing.
    """
    if not args:
        raise CommandNotFoundError("")
    name = args[0]
    if "/" in name:
        return name
    path = find_path_in_env(name, env)
    if path is None:
        raise CommandNotFoundError(name)
    return path


def _environment_mapping(env: Optional[Environment]) -> Optional[dict]:
    if env is None:
        return None
    if isinstance(env, Mapping):
        return dict(env)
    mapping = {}
    for entry in env:
        name, _, value = entry.partition("=")
        mapping.setdefault(name, value)
    return mapping


def start_command(
    cmd: str,
    env: Optional[Environment] = None,
    stdin: Stream = None,
    stdout: Stream = None,
) -> subprocess.Popen:
    """Start ``cmd`` with the given standard input and output and return the process.

    Raises :class:`CommandNotFoundError` when the program cannot be
    located and :class:`OSError` when it cannot be executed.
    """
    args = split_command(cmd)
    path = resolve_executable(args, env)
    return subprocess.Popen(
        args,
        executable=path,
        stdin=stdin,
        stdout=stdout,
        env=_environment_mapping(env),
    )