import os
import stat

import pytest

from pipeflow.command import (
    CommandNotFound,
    MissingEnvironment,
    PipexError,
    TooFewArguments,
    find_executable,
    get_env,
    resolve_command,
)


def _make_executable(directory, name):
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def test_get_env_finds_value():
    env = {"HOME": "/home/user", "PATH": "/bin:/usr/bin"}
    assert get_env(env, "PATH") == "/bin:/usr/bin"


def test_get_env_missing_returns_none():
    assert get_env({"HOME": "/home/user"}, "PATH") is None


def test_get_env_matches_key_that_is_prefix_of_name():
    env = {"PA": "short", "PATH": "long"}
    assert get_env(env, "PATH") == "short"


def test_get_env_does_not_match_longer_key():
    assert get_env({"PATHS": "x"}, "PATH") is None


def test_find_executable_searches_path(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    _make_executable(second, "tool")
    path_env = f"{first}:{second}"
    assert find_executable("tool", "tool", path_env) == f"{second}/tool"


def test_find_executable_prefers_first_directory(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    _make_executable(first, "tool")
    _make_executable(second, "tool")
    assert find_executable("tool", "tool", f"{first}:{second}") == f"{first}/tool"


def test_find_executable_accepts_direct_path(tmp_path):
    tool = _make_executable(tmp_path, "tool")
    assert find_executable(str(tool), "ignored", "") == str(tool)


def test_find_executable_ignores_non_executable(tmp_path):
    plain = tmp_path / "tool"
    plain.write_text("data")
    plain.chmod(0o644)
    if os.access(plain, os.X_OK):
        pytest.fail("file unexpectedly executable")
    assert find_executable("tool", "tool", str(tmp_path)) is None


def test_resolve_command_returns_path_and_words(tmp_path):
    _make_executable(tmp_path, "tool")
    path, words = resolve_command("tool -a  -b", {"PATH": str(tmp_path)})
    assert path == f"{tmp_path}/tool"
    assert words == ["tool", "-a", "-b"]


def test_resolve_command_without_path_env():
    with pytest.raises(MissingEnvironment) as info:
        resolve_command("ls", {"HOME": "/"})
    assert str(info.value) == "Command not found"
    assert isinstance(info.value, CommandNotFound)


def test_resolve_command_unknown(tmp_path):
    with pytest.raises(CommandNotFound):
        resolve_command("no-such-tool", {"PATH": str(tmp_path)})


def test_resolve_command_blank(tmp_path):
    with pytest.raises(CommandNotFound):
        resolve_command("   ", {"PATH": str(tmp_path)})


def test_error_messages_and_exit_code():
    assert str(TooFewArguments()) == "Too few arguments"
    assert str(CommandNotFound()) == "Command not found"
    assert TooFewArguments().exit_code == 1
    assert issubclass(CommandNotFound, PipexError)


def test_error_custom_message():
    assert str(PipexError("boom")) == "boom"