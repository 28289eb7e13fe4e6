# topmark:header:start
#
#   project      : RoboCmd
#   file         : keys.py
#   file_relpath : src/robocmd/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for RoboCmd command files.

These constants are the external configuration schema as it appears in
``robocmd.toml`` and in ``[tool.robocmd]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.

Flag lists hold the `key` of the family's tags (see `robocmd.options`); matching is
case-insensitive and treats ``-`` and spaces like ``_``.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys of a RoboCmd command description."""

    # Top level: positional arguments
    KEY_SOURCE: Final[str] = "source"
    KEY_DESTINATION: Final[str] = "destination"
    KEY_FILES: Final[str] = "files"

    # Top level: copy behavior
    KEY_COPY_MODE: Final[str] = "copy_mode"
    KEY_UNBUFFERED: Final[str] = "unbuffered"
    KEY_EMPTY_DIR_COPY: Final[str] = "empty_dir_copy"
    KEY_PURGE: Final[str] = "purge"
    KEY_MIRROR_SECURITY: Final[str] = "mirror_security"
    KEY_LEVELS: Final[str] = "levels"
    KEY_CREATE_ONLY: Final[str] = "create_only"
    KEY_FILE_PROPERTIES: Final[str] = "file_properties"
    KEY_DIR_PROPERTIES: Final[str] = "dir_properties"
    KEY_FILESYSTEM: Final[str] = "filesystem"
    KEY_MOVE: Final[str] = "move"

    # Value accepted instead of a list by letter-code families
    VALUE_ALL: Final[str] = "all"

    # [filter]
    SECTION_FILTER: Final[str] = "filter"

    KEY_ARCHIVE_AND_RESET: Final[str] = "archive_and_reset"
    KEY_INCLUDE_ONLY_ATTRIBUTES: Final[str] = "include_only_attributes"
    KEY_FILE_AND_DIRECTORY_EXCLUSION: Final[str] = "file_and_directory_exclusion"
    KEY_EXCLUSION_EXCEPTIONS: Final[str] = "exclusion_exceptions"
    KEY_MAX_SIZE: Final[str] = "max_size"
    KEY_MIN_SIZE: Final[str] = "min_size"
    KEY_MAX_AGE: Final[str] = "max_age"
    KEY_MIN_AGE: Final[str] = "min_age"
    KEY_MAX_LAST_ACCESS_DATE: Final[str] = "max_last_access_date"
    KEY_MIN_LAST_ACCESS_DATE: Final[str] = "min_last_access_date"

    # [filter.file_exclusion]
    SECTION_FILE_EXCLUSION: Final[str] = "file_exclusion"

    KEY_ATTRIBUTES: Final[str] = "attributes"
    KEY_PATH_OR_NAME: Final[str] = "path_or_name"
    KEY_FLAGS: Final[str] = "flags"

    # [filter.directory_exclusion]
    SECTION_DIRECTORY_EXCLUSION: Final[str] = "directory_exclusion"

    KEY_JUNCTION_POINTS: Final[str] = "junction_points"

    # [performance]
    SECTION_PERFORMANCE: Final[str] = "performance"

    KEY_THREADS: Final[str] = "threads"
    KEY_INTER_PACKET_GAP: Final[str] = "inter_packet_gap"

    # [retry]
    SECTION_RETRY: Final[str] = "retry"

    KEY_RETRIES: Final[str] = "retries"
    KEY_WAIT: Final[str] = "wait"
    KEY_SAVE_AS_DEFAULT: Final[str] = "save_as_default"
    KEY_AWAIT_SHARE_NAMES: Final[str] = "await_share_names"

    # [logging] (the external tool's log file)
    SECTION_LOGGING: Final[str] = "logging"

    KEY_PATH: Final[str] = "path"
    KEY_UNICODE: Final[str] = "unicode"
    KEY_APPEND: Final[str] = "append"

    # [post_copy]
    SECTION_POST_COPY: Final[str] = "post_copy"

    KEY_ADD_ATTRIBUTES: Final[str] = "add_attributes"
    KEY_REMOVE_ATTRIBUTES: Final[str] = "remove_attributes"

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
