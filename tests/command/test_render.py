# topmark:header:start
#
#   project      : RoboCmd
#   file         : test_render.py
#   file_relpath : tests/command/test_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the full argument vector of a `RobocopyCommand`."""

from __future__ import annotations

from pathlib import Path

from robocmd.command.render import is_mirror, recursion_tokens
from robocmd.core.flagset import combine
from robocmd.options import (
    CopyMode,
    DirectoryProperties,
    FileAttributes,
    FileExclusionFilter,
    FileProperties,
    FilesystemOptions,
    Filter,
    LoggingSettings,
    Move,
    PerformanceChoice,
    PerformanceOptions,
    PostCopyActions,
    RetrySettings,
)
from tests.conftest import make_command, parametrize


def test_scenario_b_mirror_collapses_to_two_tokens() -> None:
    command = make_command(empty_dir_copy=True, purge=True, mirror_security=True)
    assert is_mirror(command)
    assert command.to_args() == ["src", "dst", "/mir", "/e"]
    assert "/purge" not in command.to_args()


@parametrize(
    ("flags", "expected"),
    [
        ({}, ["/s"]),
        ({"empty_dir_copy": True}, ["/e"]),
        ({"purge": True}, ["/s", "/purge"]),
        ({"empty_dir_copy": True, "purge": True}, ["/e", "/purge"]),
        ({"empty_dir_copy": True, "mirror_security": True}, ["/e"]),
        ({"purge": True, "mirror_security": True}, ["/s", "/purge"]),
    ],
)
def test_recursion_without_mirror(flags: dict[str, bool], expected: list[str]) -> None:
    command = make_command(**flags)
    assert not is_mirror(command)
    assert recursion_tokens(command) == expected


def test_positional_arguments_come_first() -> None:
    command = make_command(files=["*.txt", "*.md"])
    assert command.to_args()[:4] == ["src", "dst", "*.txt", "*.md"]


def test_full_vector_order() -> None:
    command = make_command(
        files=["*.doc"],
        copy_mode=CopyMode.RESTARTABLE,
        unbuffered=True,
        empty_dir_copy=True,
        levels=2,
        create_only=True,
        file_properties=combine(FileProperties.DATA, FileProperties.ATTRIBUTES),
        dir_properties=DirectoryProperties.TIME_STAMPS,
        filter=Filter(file_exclusion=FileExclusionFilter.OLDER, max_size=100),
        filesystem=FilesystemOptions.FAT_FILE_NAMES,
        performance=PerformanceOptions.with_choice(PerformanceChoice.threads(4)),
        retry=RetrySettings(retries=1, wait=2),
        logging=LoggingSettings(Path("run.log"), append=True),
        move=Move.FILES,
        post_copy=PostCopyActions.add_attributes(FileAttributes.ARCHIVE),
    )
    assert command.to_args() == [
        "src",
        "dst",
        "*.doc",
        "/z",
        "/j",
        "/e",
        "/lev:2",
        "/create",
        "/copy:DA",
        "/dcopy:T",
        "/xo",
        "/max:100",
        "/fat",
        "/MT:4",
        "/r:1",
        "/w:2",
        "/log+:run.log",
        "/mov",
        "/a+:A",
    ]


def test_rendering_is_deterministic() -> None:
    command = make_command(file_properties=FileProperties.all(), purge=True)
    assert command.to_args() == command.to_args()


def test_to_argv_prefixes_the_executable() -> None:
    command = make_command()
    assert command.to_argv("robocopy.exe") == ["robocopy.exe", "src", "dst", "/s"]
