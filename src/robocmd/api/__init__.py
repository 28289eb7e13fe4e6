# topmark:header:start
#
#   project      : RoboCmd
#   file         : __init__.py
#   file_relpath : src/robocmd/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public RoboCmd API (stable surface).

This module re-exports the types and functions intended for programmatic use. Internal
module paths may change between minor versions; names listed in ``__all__`` follow
semver.

Example:
```python
from pathlib import Path

from robocmd import api

builder = api.MutableRobocopyCommand(source=Path("C:/data"), destination=Path("D:/backup"))
builder.include(api.FileProperties.DATA).include(api.FileProperties.TIME_STAMPS)
builder.empty_dir_copy = True
builder.include(api.PerformanceOptions.of(choice=api.PerformanceChoice.threads(8)))
command = builder.freeze()

command.to_args()
# ['C:/data', 'D:/backup', '/e', '/copy:DT', '/MT:8']

outcome = command.execute()  # raises RobocopyFailedError for 8..16
```
"""

from __future__ import annotations

from robocmd.command.model import MutableRobocopyCommand, RobocopyCommand
from robocmd.command.render import render_command
from robocmd.config.loader import (
    command_from_toml_dict,
    command_to_toml_dict,
    find_config_file,
    load_command,
    to_toml,
)
from robocmd.core.errors import (
    CommandValidationError,
    ConfigError,
    PerformanceChoiceMismatchError,
    RobocmdError,
    RobocopyFailedError,
    RobocopyLaunchError,
    RobocopyTerminatedError,
    UnrecognizedExitCodeError,
)
from robocmd.core.exit_codes import (
    ErrExitCode,
    OkExitCode,
    check_exit_code,
    classify_exit_code,
)
from robocmd.core.flagset import FlagSet, FlagTag, combine, combine_all, decompose, render
from robocmd.execution.runner import RobocopyResult, resolve_executable, run_robocopy
from robocmd.options import (
    CopyMode,
    DirectoryExclusionFilter,
    DirectoryProperties,
    FileAndDirectoryExclusionFilter,
    FileAttributes,
    FileExclusionFilter,
    FileExclusionFilterException,
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
from robocmd.rendering.outcomes import OutcomeSeverity, describe_outcome, severity_of

__all__: list[str] = [
    # Command
    "RobocopyCommand",
    "MutableRobocopyCommand",
    "render_command",
    # Flag-set algebra
    "FlagSet",
    "FlagTag",
    "combine",
    "combine_all",
    "decompose",
    "render",
    # Option families
    "CopyMode",
    "DirectoryExclusionFilter",
    "DirectoryProperties",
    "FileAndDirectoryExclusionFilter",
    "FileAttributes",
    "FileExclusionFilter",
    "FileExclusionFilterException",
    "FileProperties",
    "FilesystemOptions",
    "Filter",
    "LoggingSettings",
    "Move",
    "PerformanceChoice",
    "PerformanceOptions",
    "PostCopyActions",
    "RetrySettings",
    # Exit codes and execution
    "OkExitCode",
    "ErrExitCode",
    "classify_exit_code",
    "check_exit_code",
    "OutcomeSeverity",
    "describe_outcome",
    "severity_of",
    "RobocopyResult",
    "resolve_executable",
    "run_robocopy",
    # Configuration
    "command_from_toml_dict",
    "command_to_toml_dict",
    "find_config_file",
    "load_command",
    "to_toml",
    # Errors
    "RobocmdError",
    "CommandValidationError",
    "ConfigError",
    "PerformanceChoiceMismatchError",
    "RobocopyFailedError",
    "RobocopyLaunchError",
    "RobocopyTerminatedError",
    "UnrecognizedExitCodeError",
]
