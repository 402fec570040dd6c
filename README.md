# pipex

`pipex` prepares the two commands of a pipeline of this shape:

```sh
< infile cmd1 | cmd2 > outfile
```

It finds each command's program on `PATH` and splits each command line
into an argument list. It also provides a set of string, character, memory
and linked-list helpers.

## Installation

```sh
pip install .
```

## Preparing the commands

All of these live in `pipex.commands`:

- `command_name(command)` returns the part of a command line before its
  first space: `command_name("wc -w")` gives `"wc"`.
- `path_entries(env)` returns the non-empty directories of the `PATH` entry
  in the mapping `env`. It raises `PipexError` when `env` is `None` or has
  no `PATH`.
- `find_executable(command, directories)` returns the first
  `directory/command` that is executable. If none is, it returns `command`
  unchanged.
- `resolve_commands(cmd1, cmd2, env)` returns the pair of executable paths
  for the programs of the two command lines.
- `parse_args(cmd1, cmd2)` splits both command lines on spaces into
  argument lists, dropping empty pieces. Quotes are not interpreted.

```python
import os
from pipex.commands import parse_args, resolve_commands

resolve_commands("cat", "wc -w", os.environ)  # e.g. ("/bin/cat", "/usr/bin/wc")
parse_args("cat", "wc  -w")                   # (["cat"], ["wc", "-w"])
```

## Helpers

- `pipex.text`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `atoi`, `itoa`, `strlcpy`, `strlcat`. Searches return an index or `None`;
  `atoi` parses a leading integer C style and wraps to 32 bits; `strlcpy`
  and `strlcat` return the resulting text together with the length they
  tried to create.
- `pipex.transform`: `strdup`, `substr`, `strjoin`, `strtrim`, `split`,
  `strmapi`, `striteri`.
- `pipex.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower`. Each accepts an integer code or a
  one-character string.
- `pipex.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy`, `memmove`, working on `bytearray` and other bytes-like objects.
- `pipex.linked`: `Node` and `LinkedList`, with `add_front`, `add_back`,
  `last`, `clear`, `iterate`, `map`, `len()` and iteration.

```python
from pipex.transform import split

split("ls  -l -a", " ")   # ["ls", "-l", "-a"]
```

## What this package does not do

There is no `pipex` command, and nothing here opens the input and output
files or starts the two programs and connects them with a pipe. The package
stops at finding the programs and building their argument lists; running
them, for example with `subprocess`, is left to the caller.

## Running the tests

```sh
pip install ".[test]"
pytest
```