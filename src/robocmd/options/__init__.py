# topmark:header:start
#
#   project      : RoboCmd
#   file         : __init__.py
#   file_relpath : src/robocmd/options/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Option families of the external copy tool.

Each family renders to a fixed token syntax; see the individual modules for details.
"""

from __future__ import annotations

from robocmd.options.actions import CopyMode, Move, PostCopyActions, PostCopyActionTag
from robocmd.options.filesystem import FilesystemOptions, FilesystemOptionTag
from robocmd.options.filters import (
    DirectoryExclusionFilter,
    DirectoryExclusionTag,
    FileAndDirectoryExclusionFilter,
    FileAndDirectoryExclusionTag,
    FileExclusionExceptionTag,
    FileExclusionFilter,
    FileExclusionFilterException,
    FileExclusionTag,
    Filter,
)
from robocmd.options.log_output import LoggingSettings
from robocmd.options.performance import (
    ChoiceKind,
    PerformanceChoice,
    PerformanceOptions,
    PerformanceTag,
    RetrySettings,
)
from robocmd.options.properties import (
    DirectoryProperties,
    DirectoryPropertyTag,
    FileAttributes,
    FileAttributeTag,
    FileProperties,
    FilePropertyTag,
)

__all__ = [
    "ChoiceKind",
    "CopyMode",
    "DirectoryExclusionFilter",
    "DirectoryExclusionTag",
    "DirectoryProperties",
    "DirectoryPropertyTag",
    "FileAndDirectoryExclusionFilter",
    "FileAndDirectoryExclusionTag",
    "FileAttributeTag",
    "FileAttributes",
    "FileExclusionExceptionTag",
    "FileExclusionFilter",
    "FileExclusionFilterException",
    "FileExclusionTag",
    "FilePropertyTag",
    "FileProperties",
    "FilesystemOptionTag",
    "FilesystemOptions",
    "Filter",
    "LoggingSettings",
    "Move",
    "PerformanceChoice",
    "PerformanceOptions",
    "PerformanceTag",
    "PostCopyActionTag",
    "PostCopyActions",
    "RetrySettings",
]
