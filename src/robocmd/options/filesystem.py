# topmark:header:start
#
#   project      : RoboCmd
#   file         : filesystem.py
#   file_relpath : src/robocmd/options/filesystem.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Filesystem compatibility options (``/fat``, ``/fft``, ``/256``)."""

from __future__ import annotations

from typing import ClassVar

from robocmd.core.flagset import FlagTag, TagSet, bind_single_flags


class FilesystemOptionTag(FlagTag):
    """Filesystem compatibility switches."""

    FAT_FILE_NAMES = ("fat_file_names", "Create destination files with 8.3 FAT names", "/fat")
    ASSUME_FAT_FILE_TIMES = (
        "assume_fat_file_times",
        "Assume FAT file times (two-second precision)",
        "/fft",
    )
    DISABLE_LONG_PATHS = ("disable_long_paths", "Turn off support for very long paths", "/256")


@bind_single_flags
class FilesystemOptions(TagSet[FilesystemOptionTag]):
    """Set of filesystem compatibility switches."""

    vocabulary = FilesystemOptionTag

    FAT_FILE_NAMES: ClassVar[FilesystemOptions]
    ASSUME_FAT_FILE_TIMES: ClassVar[FilesystemOptions]
    DISABLE_LONG_PATHS: ClassVar[FilesystemOptions]
