"""Run ``< file1 cmd1 | cmd2 > file2`` without a shell."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
from typing import BinaryIO, Mapping, Optional, Sequence

from .strutil import split

USAGE = "Please provide file1 cmd1 cmd2 file2"
SEARCH_PREFIXES = ("/bin/", "/usr/bin/", "/usr/local/bin/", "/sbin/", "/usr/sbin/")


class PipexError(Exception):
    """A failure that ends the pipeline, carrying the errno it exits with."""

    def __init__(self, code: int, subject: str) -> None:
        self.code = code
        self.subject = subject
        reason = os.strerror(code)
        super().__init__(f"{subject}: {reason}" if subject else reason)


def split_command(command: str) -> list[str]:
    """Split a command line on spaces; no quoting is understood."""
    return split(command, " ")


def candidate_paths(program: str, env: Mapping[str, str]) -> list[str]:
    """Return the paths tried, in order, when starting *program*.

    The working directory named by ``PWD`` comes first when it is set.
    """
    prefixes: list[str] = []
    if "PWD" in env:
        prefixes.append(env["PWD"] + "/")
    prefixes.extend(SEARCH_PREFIXES)
    return [prefix + program for prefix in prefixes]


def _spawn(
    command: str,
    env: Mapping[str, str],
    stdin: object,
    stdout: object,
) -> subprocess.Popen:
    words = split_command(command)
    program = words[0] if words else ""
    for path in candidate_paths(program, env):
        try:
            return subprocess.Popen(
                [path, *words[1:]], stdin=stdin, stdout=stdout, env=dict(env)
            )
        except OSError:
            continue
    raise PipexError(errno.ENOENT, program)


def _open_input(path: str) -> BinaryIO:
    if os.path.isdir(path):
        raise PipexError(errno.EISDIR, "file1")
    try:
        return open(path, "rb")
    except OSError:
        raise PipexError(errno.ENOENT, "file1") from None


def _first_stage(infile: str, command: str, env: Mapping[str, str]) -> bytes:
    try:
        with _open_input(infile) as source:
            process = _spawn(command, env, source, subprocess.PIPE)
            output, _ = process.communicate()
            return output
    except PipexError as exc:
        print(exc, file=sys.stderr)
        return b""


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Feed *infile* through *cmd1* and *cmd2* into *outfile*.

    A failure of the first stage is reported on stderr and the second stage
    runs on empty input.  Failures of the second stage raise
    :class:`PipexError`.  Returns the exit status of *cmd2*.
    """
    environment = dict(os.environ) if env is None else dict(env)
    data = _first_stage(infile, cmd1, environment)
    if os.path.isdir(outfile):
        raise PipexError(errno.EISDIR, "file2")
    try:
        sink = open(outfile, "wb")
    except OSError:
        raise PipexError(errno.ENOENT, "file2") from None
    with sink:
        process = _spawn(cmd2, environment, subprocess.PIPE, sink)
        process.communicate(data)
    return process.returncode


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        print(PipexError(errno.EINVAL, USAGE), file=sys.stderr)
        return errno.EINVAL
    try:
        status = run_pipeline(*args)
    except PipexError as exc:
        print(exc, file=sys.stderr)
        return exc.code
    return status if status >= 0 else 128 - status


if __name__ == "__main__":
    sys.exit(main())