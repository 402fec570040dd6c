import os
import stat

import pytest

from pipex.commands import (
    PipexError,
    command_name,
    find_executable,
    parse_args,
    path_entries,
    resolve_commands,
)


def _make_tool(directory, name, executable=True):
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    mode = stat.S_IRUSR | stat.S_IWUSR
    if executable:
        mode |= stat.S_IXUSR
    os.chmod(path, mode)
    return path


def test_command_name_takes_text_before_first_space():
    assert command_name("ls -l -a") == "ls"


def test_command_name_without_space_is_whole_command():
    assert command_name("wc") == "wc"


def test_command_name_with_leading_space_is_empty():
    assert command_name(" ls") == ""


def test_path_entries_drops_empty_pieces():
    assert path_entries({"PATH": "/a::/b:"}) == ["/a", "/b"]


def test_path_entries_empty_path_gives_no_directories():
    assert path_entries({"PATH": ""}) == []


def test_path_entries_without_path_raises():
    with pytest.raises(PipexError):
        path_entries({"HOME": "/home/someone"})


def test_path_entries_without_environment_raises():
    with pytest.raises(PipexError):
        path_entries(None)


def test_find_executable_returns_joined_path(tmp_path):
    _make_tool(tmp_path, "tool")
    assert find_executable("tool", [str(tmp_path)]) == f"{tmp_path}/tool"


def test_find_executable_prefers_first_directory(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    _make_tool(first, "tool")
    _make_tool(second, "tool")
    assert find_executable("tool", [str(first), str(second)]) == f"{first}/tool"


def test_find_executable_skips_non_executable(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    _make_tool(first, "tool", executable=False)
    _make_tool(second, "tool")
    assert find_executable("tool", [str(first), str(second)]) == f"{second}/tool"


def test_find_executable_falls_back_to_name(tmp_path):
    assert find_executable("missing", [str(tmp_path)]) == "missing"


def test_resolve_commands_uses_program_names(tmp_path):
    _make_tool(tmp_path, "alpha")
    env = {"PATH": str(tmp_path)}
    assert resolve_commands("alpha -x", "beta -y", env) == (
        f"{tmp_path}/alpha",
        "beta",
    )


def test_resolve_commands_without_path_raises():
    with pytest.raises(PipexError):
        resolve_commands("ls", "wc", {})


def test_parse_args_splits_on_spaces():
    assert parse_args("ls  -l", "wc -l") == (["ls", "-l"], ["wc", "-l"])


def test_parse_args_empty_command_gives_empty_list():
    assert parse_args("", "cat") == ([], ["cat"])