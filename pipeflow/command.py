"""Locating executables on PATH and the errors raised while doing so."""

from __future__ import annotations

import os
from collections.abc import Mapping

from .textutil import split_words


class PipexError(Exception):
    """Base class for errors that end a pipeline run with exit status 1."""

    message = "Error"
    exit_code = 1

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class TooFewArguments(PipexError):
    """The command line does not name enough files and commands."""

    message = "Too few arguments"


class CommandNotFound(PipexError):
    """A command cannot be found or is empty."""

    message = "Command not found"


class MissingEnvironment(CommandNotFound):
    """PATH is absent from the environment; reported as a missing command."""


def get_env(env: Mapping[str, str], name: str) -> str | None:
    """Return the value of the first entry whose key is a prefix of ``name``.

    Entries are scanned in order; None is returned when nothing matches.
    """
    for key, value in env.items():
        if name.startswith(key):
            return value
    return None


def find_executable(command: str, program: str, path_env: str) -> str | None:
    """Find the file to run for ``command``.

    ``command`` itself is used when it names an executable file; otherwise
    each directory of the colon separated ``path_env`` is searched for
    ``program``.  Returns None when no executable is found.
    """
    if os.access(command, os.F_OK | os.X_OK):
        return command
    for directory in split_words(path_env, ":"):
        candidate = f"{directory}/{program}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return None


def resolve_command(command: str, env: Mapping[str, str]) -> tuple[str, list[str]]:
    """Return the executable path and argument list for a command string.

    The command is split on spaces; its first word is looked up on PATH.
    """
    path_env = get_env(env, "PATH")
    if path_env is None:
        raise MissingEnvironment()
    words = split_words(command, " ")
    if not words:
        raise CommandNotFound()
    path = find_executable(command, words[0], path_env)
    if path is None:
        raise CommandNotFound()
    return path, words