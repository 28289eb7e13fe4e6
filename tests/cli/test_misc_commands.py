# topmark:header:start
#
#   project      : RoboCmd
#   file         : test_misc_commands.py
#   file_relpath : tests/cli/test_misc_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI `exit-code`, `dump-config`, `version` and group-level options."""

from __future__ import annotations

from typing import TYPE_CHECKING

import tomlkit

from robocmd.cli.exit_codes import ExitCode
from robocmd.config.loader import command_from_toml_dict, load_command
from robocmd.constants import ROBOCMD_VERSION
from tests.cli.conftest import run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_exit_code_explains_a_code() -> None:
    result = run_cli(["exit-code", "5"])
    assert result.exit_code == ExitCode.SUCCESS
    assert result.output == "5 SOME_COPIES_MISMATCHES (success): some copies, mismatches\n"


@mark_cli
def test_exit_code_verbose_lists_conditions() -> None:
    result = run_cli(["-v", "exit-code", "13"])
    assert result.exit_code == ExitCode.SUCCESS
    assert "severity: failure" in result.output
    assert "failed: yes" in result.output
    assert "extra_found: no" in result.output


@mark_cli
def test_exit_code_rejects_unclassifiable_codes() -> None:
    assert run_cli(["exit-code", "--", "-1"]).exit_code == ExitCode.USAGE_ERROR
    result = run_cli(["exit-code", "17"])
    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "Invalid exit code: 17" in result.output


@mark_cli
def test_dump_config_round_trips(isolation: Path) -> None:
    config = isolation / "robocmd.toml"
    config.write_text(
        'source = "a"\ndestination = "b"\n'
        "[performance]\nthreads = 8\n"
        '[filter.file_exclusion]\npath_or_name = ["*.bak"]\nflags = ["newer"]\n',
        encoding="utf-8",
    )
    result = run_cli(["dump-config"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    dumped = command_from_toml_dict(tomlkit.parse(result.output).unwrap())
    assert dumped == load_command(config)


@mark_cli
def test_dump_config_for_pyproject(isolation: Path) -> None:
    result = run_cli(["dump-config", "--pyproject", "x", "y"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "[tool.robocmd]" in result.output


@mark_cli
def test_version() -> None:
    result = run_cli(["version"])
    assert result.exit_code == ExitCode.SUCCESS
    assert result.output.strip() == ROBOCMD_VERSION


@mark_cli
def test_no_command_prints_help() -> None:
    result = run_cli([])
    assert result.exit_code == ExitCode.SUCCESS
    assert "render" in result.output
    assert "dump-config" in result.output


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    result = run_cli(["-v", "-q", "version"])
    assert result.exit_code == ExitCode.USAGE_ERROR
