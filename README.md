# pipex

`pipex` does the same job as this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

It opens `infile` and feeds it to `cmd1`. A pipe carries the output of `cmd1`
to `cmd2`, and the output of `cmd2` is written to `outfile`. If `outfile` does
not exist, it is created with mode `0644`. If it exists, it is truncated.

## Installation

```sh
pip install .
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

For example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

Each command string is split on spaces into words, and empty words are dropped.
There is no quoting, no globbing, no variable expansion and no other shell
syntax.

- If a command name contains `/`, it is run from that path as given.
- Any other command name is looked up in the directories listed in `PATH`.
  Directories are tried in order, empty entries are skipped, and the first
  executable match is used.
- If a command cannot be found, `Command not found: <name>` is printed on
  standard error. That stage then counts as having exited with status 127.
- If a command is found but cannot be executed, `execve failed: <reason>` is
  printed on standard error. That stage then counts as having exited with
  status 1.

### Exit status

`pipex` exits with the exit status of the second command. If the second
command was ended by a signal, the exit status is 0.

`pipex` prints a message on standard error and exits with status 1 in any of
these cases:

- it is not given exactly four arguments. The message is
  `Usage: pipex file1 cmd1 cmd2 file2`.
- the input file cannot be opened. The message is `open infile failed: ...`.
- the output file cannot be opened. The message is `open outfile failed: ...`.
- the pipe cannot be created. The message is `pipe failed: ...`.

`pipex` always joins exactly two commands. It does not take longer pipelines,
append mode or here-documents.

## Using it from Python

```python
from pipex.cli import run_pipeline

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt", env=None)
```

`run_pipeline` returns the exit status of the second command. It raises
`OSError` if a file cannot be opened or the pipe cannot be created. The `env`
argument controls the environment:

- `None` uses the current process environment.
- A mapping of names to values supplies your own environment.
- A sequence of `NAME=value` strings also works.

`pipex.cli.main(argv)` is the command-line entry point. It returns the exit
status instead of exiting, and raises no errors for the cases listed above.

The commands are located and started by these modules:

- `pipex.paths`
  - `get_path_env(env)` returns the value of `PATH` from `env`.
  - `find_path_in_env(cmd, env)` returns the full path of the first executable
    `cmd` found in that `PATH`, or `None`.
- `pipex.execution`
  - `split_command(cmd)` splits a command string into words.
  - `resolve_executable(args, env)` returns the program path. It raises
    `CommandNotFoundError` if there is none. The error has `command` and
    `exit_status` (127) attributes.
  - `start_command(cmd, env, stdin, stdout)` starts the command and returns a
    `subprocess.Popen`.

## Utility modules

The package also contains small helpers for text, bytes and lists:

| Module | Contents |
| --- | --- |
| `pipex.chars` | `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and `to_lower` for ASCII characters, given as strings or integer codes |
| `pipex.numbers` | `atoi` parses a leading decimal integer. `itoa` formats an integer. |
| `pipex.strings` | `find_char`, `rfind_char`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`, `substr`, `strjoin` |
| `pipex.transform` | `split` splits on a separator and drops empty words. Also `strtrim`, `strmapi` and `striteri`. |
| `pipex.memory` | `memset`, `bzero`, `calloc`, `memcpy`, `memmove`, `memchr` and `memcmp` on `bytearray` buffers |
| `pipex.lists` | `Node` and `LinkedList`, with `push_front`, `push_back`, `last`, `for_each`, `map`, `remove` and `clear` |
| `pipex.lines` | `read_lines(fd, buffer_size)` yields the lines of a file descriptor, each with its newline |

The search functions return an index, or `None` when nothing is found. The
bounded copies `strlcpy` and `strlcat` return the resulting text together with
the full length the result would have had.

## Running the tests

```sh
pip install ".[test]"
pytest
```