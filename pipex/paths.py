"""Locating executables through the ``PATH`` environment variable."""

from __future__ import annotations

import os
from typing import Iterable, Mapping, Optional, Union

from pipex.transform import split

Environment = Union[Mapping[str, str], Iterable[str]]

_PATH_PREFIX = "PATH="


def get_path_env(env: Environment) -> Optional[str]:
    """The value of ``PATH`` in ``env``, or ``None`` when it is absent.

    ``env`` is a mapping of names to values or a sequence of
    ``NAME=value`` strings; in the latter the first ``PATH=`` entry wins.
    """
    if isinstance(env, Mapping):
        return env.get("PATH")
    for entry in env:
        if entry.startswith(_PATH_PREFIX):
            return entry[len(_PATH_PREFIX):]
    return None


def find_path_in_env(cmd: str, env: Optional[Environment] = None) -> Optional[str]:
    """Full path of the first executable ``cmd`` found in the ``PATH`` of ``env``.

    Directories are tried in order and empty entries are skipped.  With no
    ``env`` the process environment is used.  Returns ``None`` when ``PATH``
    is unset or no directory holds an executable ``cmd``.
    """
    path_env = get_path_env(os.environ if env is None else env)
    if path_env is None:
        return None
    for directory in split(path_env, ":"):
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None