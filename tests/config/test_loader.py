# topmark:header:start
#
#   project      : RoboCmd
#   file         : test_loader.py
#   file_relpath : tests/config/test_loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for loading commands from TOML (`robocmd.toml` and `pyproject.toml`)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from robocmd.config.loader import (
    command_from_toml_dict,
    find_config_file,
    load_command,
    load_toml_dict,
)
from robocmd.core.errors import ConfigError
from robocmd.options import (
    CopyMode,
    FileAttributes,
    FileExclusionFilter,
    FileProperties,
    Move,
    PerformanceChoice,
    PerformanceTag,
)
from tests.conftest import parametrize

if TYPE_CHECKING:
    from robocmd.command.model import RobocopyCommand

FULL_CONFIG = """\
source = "C:/data"
destination = "D:/backup"
files = ["*.docx", "*.xlsx"]
copy_mode = "restartable-backup-fallback"
empty_dir_copy = true
purge = true
mirror_security = true
file_properties = ["data", "attributes", "time stamps"]
dir_properties = "all"
filesystem = ["disable_long_paths"]
move = "files"

[filter]
include_only_attributes = ["archive"]
exclusion_exceptions = ["same"]
max_age = 30
min_size = 1

[filter.file_exclusion]
attributes = ["hidden", "system"]
path_or_name = ["thumbs.db"]
flags = ["older"]

[filter.directory_exclusion]
path_or_name = [".git"]
junction_points = true

[performance]
threads = 16
flags = ["dont-offload"]

[retry]
retries = 2
wait = 5

[logging]
path = "C:/logs/backup.log"
unicode = true
append = true

[post_copy]
remove_attributes = ["archive"]
"""


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_load_full_configuration(tmp_path: Path) -> None:
    command: RobocopyCommand = load_command(_write(tmp_path / "robocmd.toml", FULL_CONFIG))

    assert command.source == Path("C:/data")
    assert command.files == ("*.docx", "*.xlsx")
    assert command.copy_mode is CopyMode.RESTARTABLE_WITH_BACKUP_FALLBACK
    assert command.move is Move.FILES
    assert command.file_properties is not None
    assert command.file_properties.codes == "DAT"
    assert command.performance is not None
    assert command.performance.choice == PerformanceChoice.threads(16)
    assert command.performance.has(PerformanceTag.DONT_OFFLOAD)
    assert command.to_args() == [
        "C:/data",
        "D:/backup",
        "*.docx",
        "*.xlsx",
        "/zb",
        "/mir",
        "/e",
        "/copy:DAT",
        "/dcopy:DAT",
        "/ia:A",
        "/xa:SH",
        "/xf",
        "thumbs.db",
        "/xo",
        "/xd",
        ".git",
        "/xjd",
        "/is",
        "/min:1",
        "/maxage:30",
        "/256",
        "/MT:16",
        "/nooffload",
        "/r:2",
        "/w:5",
        "/unilog+:C:/logs/backup.log",
        "/mov",
        "/a-:A",
    ]


def test_pyproject_tool_table(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "pyproject.toml",
        '[project]\nname = "x"\n\n[tool.robocmd]\nsource = "a"\ndestination = "b"\n',
    )
    command = load_command(path)
    assert command.to_args() == ["a", "b", "/s"]


def test_pyproject_without_tool_table_is_an_error(tmp_path: Path) -> None:
    path = _write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')
    with pytest.raises(ConfigError):
        load_command(path)


@parametrize(
    ("table", "key"),
    [
        ({"file_properties": ["data", "colour"]}, "file_properties"),
        ({"purge": "yes"}, "purge"),
        ({"levels": True}, "levels"),
        ({"copy_mode": "fast"}, "copy_mode"),
        ({"filter": {"file_exclusion": {"flags": ["attributes"]}}}, "filter.file_exclusion.flags"),
        ({"performance": {"threads": 4, "inter_packet_gap": 10}}, "performance"),
        ({"performance": {"threads": 500}}, "performance"),
        ({"retry": {"retries": -1}}, "retry"),
        ({"logging": {"append": True}}, "logging.path"),
        ({"filter": "nope"}, "filter"),
    ],
)
def test_invalid_values_name_the_key(table: dict[str, object], key: str) -> None:
    with pytest.raises(ConfigError) as excinfo:
        command_from_toml_dict(table)
    assert excinfo.value.key == key


def test_invalid_levels_raise_config_error() -> None:
    with pytest.raises(ConfigError):
        command_from_toml_dict({"levels": 0})


def test_unknown_keys_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="robocmd.config.loader"):
        command_from_toml_dict({"source": "a", "destination": "b", "colour": "red"})
    assert "colour" in caplog.text


def test_empty_lists_and_all() -> None:
    command = command_from_toml_dict(
        {
            "file_properties": [],
            "filter": {"file_exclusion": {}, "include_only_attributes": "all"},
        }
    )
    assert command.file_properties == FileProperties.none()
    assert command.filter is not None
    assert command.filter.file_exclusion == FileExclusionFilter.none()
    assert command.filter.include_only_attributes == FileAttributes.all()


def test_invalid_toml_is_reported(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_toml_dict(_write(tmp_path / "robocmd.toml", "source = \n"))
    with pytest.raises(ConfigError):
        load_toml_dict(tmp_path / "missing.toml")


def test_find_config_file_walks_up(tmp_path: Path) -> None:
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_config_file(nested) is None

    pyproject = _write(tmp_path / "pyproject.toml", '[tool.robocmd]\nsource = "x"\n')
    assert find_config_file(nested) == pyproject.resolve()

    robocmd_toml = _write(tmp_path / "a" / "robocmd.toml", 'source = "y"\n')
    assert find_config_file(nested) == robocmd_toml.resolve()


def test_pyproject_without_tool_table_is_skipped_by_discovery(tmp_path: Path) -> None:
    _write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')
    assert find_config_file(tmp_path) is None
