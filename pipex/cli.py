"""Run ``infile | cmd1 | cmd2 > outfile`` from the command line."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import List, Optional, Union

from pipex.execution import CommandNotFoundError, Environment, start_command

PROGRAM_NAME = "pipex"
EXIT_FAILURE = 1
_OUTFILE_MODE = 0o644


class UsageError(Exception):
    """Raised when the command line does not hold exactly four arguments."""


def _check_args(args: List[str]) -> None:
    if len(args) != 4:
        raise UsageError(f"Usage: {PROGRAM_NAME} file1 cmd1 cmd2 file2")


def _launch(
    cmd: str, env: Optional[Environment], stdin: int, stdout: int
) -> Union[subprocess.Popen, int]:
    """Start one stage, or report why it could not start and return its status."""
    try:
        return start_command(cmd, env, stdin, stdout)
    except CommandNotFoundError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_status
    except OSError as exc:
        print(f"execve failed: {exc.strerror or exc}", file=sys.stderr)
        return EXIT_FAILURE


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Optional[Environment] = None,
) -> int:
    """Feed ``infile`` through ``cmd1`` and ``cmd2`` into ``outfile``.

    ``outfile`` is created or truncated with mode 0644.  Returns the exit
    status of the second command, 0 if it was ended by a signal.  Raises
    :class:`OSError` when a file cannot be opened or the pipe cannot be made.
    """
    fd_in = os.open(infile, os.O_RDONLY)
    opened = [fd_in]
    try:
        opened.append(
            os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _OUTFILE_MODE)
        )
        opened.extend(os.pipe())
    except OSError:
        for fd in opened:
            os.close(fd)
        raise
    _, fd_out, read_end, write_end = opened
    try:
        first = _launch(cmd1, env, fd_in, write_end)
        second = _launch(cmd2, env, read_end, fd_out)
    finally:
        for fd in opened:
            os.close(fd)
    if isinstance(first, subprocess.Popen):
        first.wait()
    if not isinstance(second, subprocess.Popen):
        return second
    status = second.wait()
    return status if status >= 0 else 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point: ``pipex file1 cmd1 cmd2 file2``; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        _check_args(args)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return EXIT_FAILURE
    infile, cmd1, cmd2, outfile = args
    try:
        return run_pipeline(infile, cmd1, cmd2, outfile, os.environ)
    except OSError as exc:
        if exc.filename is None:
            label = "pipe failed"
        elif exc.filename == infile:
            label = "open infile failed"
        else:
            label = "open outfile failed"
        print(f"{label}: {exc.strerror or exc}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())