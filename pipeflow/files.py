"""Opening the pipeline's input and output files and checking arguments."""

from __future__ import annotations

import sys
from enum import Enum
from typing import BinaryIO, Iterable

from .command import PipexError

_BLANK = " \t\f\v\n\r"


class OutputMode(Enum):
    """How the output file is opened."""

    TRUNCATE = "wb"
    APPEND = "ab"


class InvalidArgument(PipexError):
    """A command argument is empty or made only of whitespace."""

    message = "Error: wrong argument"


def _report(path: str, error: OSError) -> None:
    print(f"{path} : {error.strerror}", file=sys.stderr)


def is_blank(arg: str) -> bool:
    """Tell whether ``arg`` is empty or holds only whitespace."""
    return not arg.strip(_BLANK)


def check_commands(commands: Iterable[str]) -> None:
    """Raise InvalidArgument if any of ``commands`` is blank."""
    if any(is_blank(command) for command in commands):
        raise InvalidArgument()


def open_input(path: str) -> BinaryIO | None:
    """Open ``path`` for reading.

    A missing file is reported on stderr and gives None; any other failure
    is reported and raised.
    """
    try:
        return open(path, "rb")
    except FileNotFoundError as error:
        _report(path, error)
        return None
    except OSError as error:
        _report(path, error)
        raise


def open_output(path: str, mode: OutputMode) -> BinaryIO:
    """Open or create ``path`` for writing; failures are reported and raised."""
    try:
        return open(path, mode.value)
    except OSError as error:
        _report(path, error)
        raise


def read_input(path: str) -> bytes:
    """Return the contents of ``path``, or a single NUL byte if it is missing."""
    stream = open_input(path)
    if stream is None:
        return b"\0"
    with stream:
        return stream.read()