# pipexpy

`pipexpy` runs two commands joined by a pipe, much as a shell runs

```sh
< file1 cmd1 | cmd2 > file2
```

The first command reads from `file1`. Its output is fed to the second command,
and the second command's output is written to `file2`, which is created or
truncated. No shell is involved.

## Installation

```sh
pip install .
```

## Command-line use

```sh
pipexpy file1 "cat -n" "wc -w" file2
```

Exactly four arguments are required: the input file, the first command, the
second command and the output file. Commands are split on spaces. Runs of
spaces count as one separator, and quoting is not understood.

Each program is looked up in this order:

1. the directory named by the `PWD` environment variable, if it is set;
2. `/bin`, `/usr/bin`, `/usr/local/bin`, `/sbin` and `/usr/sbin`.

The first path that can be started is used.

### Errors and exit status

Some failures in the first stage are reported on standard error, but the
pipeline does not stop. The second command then runs on empty input. These
failures are:

- `file1` is a directory;
- `file1` cannot be opened;
- the first command cannot be found.

The following failures stop the program. It prints a message of the form
`subject: reason` and exits with the matching `errno` value:

- the wrong number of arguments (`EINVAL`);
- `file2` is a directory (`EISDIR`);
- `file2` cannot be opened for writing (`ENOENT`);
- the second command cannot be found (`ENOENT`).

In all other cases the exit status is that of the second command. If that
command was killed by signal *n*, the status is `128 + n`.

## Library use

```python
from pipexpy.cli import PipexError, candidate_paths, run_pipeline, split_command

status = run_pipeline("in.txt", "grep foo", "wc -l", "out.txt", env=None)
split_command("ls  -l   -a")                    # ['ls', '-l', '-a']
candidate_paths("ls", {"PWD": "/tmp"})          # ['/tmp/ls', '/bin/ls', ...]
```

- `run_pipeline` returns the second command's exit status.
- When `env` is `None`, it uses the current environment.
- Failures of the second stage raise `PipexError`. The exception's `code`
  holds the `errno` value and `subject` says what failed.
- `main(argv=None)` in `pipexpy.cli` is the command's entry point. It returns
  the exit status rather than exiting.

The package also includes the helpers the tool is built on.

`pipexpy.strutil`:

| Function | What it does |
| --- | --- |
| `split(text, sep)` | Splits on one character and drops empty pieces. |
| `trim(text, charset)` | Strips characters in the set from both ends. |
| `substr(text, start, length)` | Returns a slice; a start past the end gives `""`. |
| `atoi(text)` | C-style leading-integer parse with 32-bit wrapping. |
| `find(haystack, needle, limit)` | Searches within the first `limit` characters; returns `-1` if not found. |

`pipexpy.linereader`:

- `LineReader(stream, buffer_size=64)` reads a text or binary stream in
  fixed-size chunks. It yields lines without their newlines.
- `read_lines(stream)` returns all lines as a list.

`pipexpy.formatspec`:

- `parse_spec(text, args)` parses one `%` directive into a `FormatSpec`.
  The directive's conversion is a member of `Conversion`.
- `leading_int(text)` parses a leading integer.

`pipexpy.render`:

- `render_char`, `render_string`, `render_integer`, `render_pointer` and
  `render_percent` turn a `FormatSpec` and its argument into text.
- `to_hex(value, upper=False)` returns the hexadecimal digits of a
  non-negative value.

`pipexpy.dprintf`:

- `format_text(fmt, *args)` returns the formatted text.
- `dprintf(fd, fmt, *args)` writes the formatted text, UTF-8 encoded, to a file
  descriptor and returns the number of bytes written.
- Supported conversions: `%c %s %p %d %i %u %x %X %%`.
- Supported modifiers: the `-` and `0` flags, a width, a precision, and `*`
  for either. Length modifiers (`l`, `ll`, `h`, `hh`) are accepted and
  ignored.
- An unknown conversion prints a `%`.
- `FormatError` is raised when arguments run out or when the format ends inside
  a directive.

```python
from pipexpy.dprintf import format_text

format_text("[%5d|%-4s|%x]", 42, "ab", 255)   # '[   42|ab  |ff]'
```

## Running the tests

```sh
pip install .[test]
pytest
```