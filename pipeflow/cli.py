"""Run a chain of commands between an input file and an output file."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import BinaryIO, TextIO

from .command import CommandNotFound, PipexError, TooFewArguments, resolve_command
from .files import OutputMode, check_commands, open_output, read_input

HERE_DOC = "here_doc"


def _status(returncode: int) -> int:
    """Turn a subprocess return code into a shell style exit status."""
    return 128 - returncode if returncode < 0 else returncode


def _run_stage(command: str, data: bytes, env: Mapping[str, str]) -> bytes:
    """Run one intermediate command and return what it wrote to stdout.

    A command that cannot be found or started is reported on stderr and
    produces no output, so the pipeline goes on with empty data.
    """
    try:
        path, words = resolve_command(command, env)
    except PipexError as error:
        print(error, file=sys.stderr)
        return b""
    try:
        result = subprocess.run(
            words,
            executable=path,
            input=data,
            stdout=subprocess.PIPE,
            env=dict(env),
            check=False,
        )
    except OSError as error:
        print(error.strerror, file=sys.stderr)
        return b""
    return result.stdout


def run_pipeline(
    data: bytes,
    commands: Sequence[str],
    output: BinaryIO,
    env: Mapping[str, str],
) -> int:
    """Feed ``data`` through ``commands`` in turn, the last writing to ``output``.

    Returns the exit status of the last command.  Raises CommandNotFound
    when the last command cannot be found, and PipexError when it cannot
    be started.
    """
    if not commands:
        raise TooFewArguments()
    *stages, last = commands
    for command in stages:
        data = _run_stage(command, data, env)
    path, words = resolve_command(last, env)
    output.flush()
    try:
        result = subprocess.run(
            words,
            executable=path,
            input=data,
            stdout=output,
            env=dict(env),
            check=False,
        )
    except OSError as error:
        raise PipexError(error.strerror) from error
    return _status(result.returncode)


def pipex(argv: Sequence[str], env: Mapping[str, str]) -> int:
    """Run ``infile cmd1 ... cmdN outfile`` and return the exit status.

    The output file is truncated first.  A missing input file is reported
    and replaced by a single NUL byte; an input file that cannot be read
    for another reason ends the run with status 0.
    """
    if len(argv) < 4:
        raise TooFewArguments()
    infile, *commands, outfile = argv
    with open_output(outfile, OutputMode.TRUNCATE) as output:
        try:
            data = read_input(infile)
        except OSError:
            return 0
        check_commands(argv[1:])
        return run_pipeline(data, commands, output, env)


def read_here_doc(limiter: str, stream: TextIO) -> str:
    """Read lines from ``stream`` until one equal to ``limiter``.

    The limiter line is not included.  Reaching the end of the stream
    before the limiter raises PipexError.
    """
    lines = []
    for line in stream:
        if line.rstrip("\n") == limiter:
            return "".join(lines)
        lines.append(line)
    raise PipexError("Error occurred while providing input")


def here_doc(
    argv: Sequence[str],
    env: Mapping[str, str],
    stream: TextIO | None = None,
) -> int:
    """Run ``here_doc LIMITER cmd1 ... cmdN outfile`` and return the exit status.

    Input is read from ``stream`` (stdin by default) up to the limiter and
    the output file is appended to rather than truncated.
    """
    if len(argv) < 5:
        raise TooFewArguments()
    _, limiter, *commands, outfile = argv
    with open_output(outfile, OutputMode.APPEND) as output:
        check_commands(argv[1:])
        text = read_here_doc(limiter, sys.stdin if stream is None else stream)
        return run_pipeline(text.encode(), commands, output, env)


def main(argv: Sequence[str] | None = None) -> int:
    """Command line entry point; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    env = os.environ
    try:
        if len(args) < 4:
            raise TooFewArguments()
        if args[0] == HERE_DOC:
            return here_doc(args, env)
        return pipex(args, env)
    except PipexError as error:
        print(error, file=sys.stderr)
        return error.exit_code
    except OSError:
        return 1


if __name__ == "__main__":
    raise SystemExit(main())