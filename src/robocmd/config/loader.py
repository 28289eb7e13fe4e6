# topmark:header:start
#
#   project      : RoboCmd
#   file         : loader.py
#   file_relpath : src/robocmd/config/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load a command description from TOML, and dump a command back to TOML.

Sources:
    - ``robocmd.toml`` (the whole document describes the command), or
    - ``pyproject.toml`` (the ``[tool.robocmd]`` table describes the command).

Parsing is done with `tomlkit` and turned into plain `dict` structures first.
Flag lists are folded with `combine_all`, so a configuration goes through the same
option algebra as API callers do: for instance, a ``[performance]`` table that sets both
``threads`` and ``inter_packet_gap`` fails with the performance-choice conflict.

Error policy:
    - Unknown tag names, wrong value types and invalid values raise `ConfigError`
      naming the dotted key.
    - Unknown keys are logged as warnings and otherwise ignored.

`command_to_toml_dict` is the inverse of `command_from_toml_dict`: loading a dumped
document yields an equal command.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from robocmd.command.model import MutableRobocopyCommand, RobocopyCommand
from robocmd.config.keys import Toml
from robocmd.config.logging import get_logger
from robocmd.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_SECTION
from robocmd.core.errors import (
    CommandValidationError,
    ConfigError,
    PerformanceChoiceMismatchError,
)
from robocmd.core.flagset import FlagTag, TagSet, combine_all
from robocmd.options.actions import CopyMode, Move, PostCopyActions
from robocmd.options.filesystem import FilesystemOptions
from robocmd.options.filters import (
    DirectoryExclusionFilter,
    FileAndDirectoryExclusionFilter,
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
from robocmd.options.properties import DirectoryProperties, FileAttributes, FileProperties

if TYPE_CHECKING:
    from robocmd.config.logging import RobocmdLogger

logger: RobocmdLogger = get_logger(__name__)

TomlTable = dict[str, Any]

_TS = TypeVar("_TS", bound="TagSet[Any]")
_TAG = TypeVar("_TAG", bound=FlagTag)

# Keys known per table; anything else is reported as unknown.
_TOP_LEVEL_KEYS: frozenset[str] = frozenset(
    {
        Toml.KEY_SOURCE,
        Toml.KEY_DESTINATION,
        Toml.KEY_FILES,
        Toml.KEY_COPY_MODE,
        Toml.KEY_UNBUFFERED,
        Toml.KEY_EMPTY_DIR_COPY,
        Toml.KEY_PURGE,
        Toml.KEY_MIRROR_SECURITY,
        Toml.KEY_LEVELS,
        Toml.KEY_CREATE_ONLY,
        Toml.KEY_FILE_PROPERTIES,
        Toml.KEY_DIR_PROPERTIES,
        Toml.KEY_FILESYSTEM,
        Toml.KEY_MOVE,
        Toml.SECTION_FILTER,
        Toml.SECTION_PERFORMANCE,
        Toml.SECTION_RETRY,
        Toml.SECTION_LOGGING,
        Toml.SECTION_POST_COPY,
    }
)
_FILTER_KEYS: frozenset[str] = frozenset(
    {
        Toml.KEY_ARCHIVE_AND_RESET,
        Toml.KEY_INCLUDE_ONLY_ATTRIBUTES,
        Toml.SECTION_FILE_EXCLUSION,
        Toml.SECTION_DIRECTORY_EXCLUSION,
        Toml.KEY_FILE_AND_DIRECTORY_EXCLUSION,
        Toml.KEY_EXCLUSION_EXCEPTIONS,
        Toml.KEY_MAX_SIZE,
        Toml.KEY_MIN_SIZE,
        Toml.KEY_MAX_AGE,
        Toml.KEY_MIN_AGE,
        Toml.KEY_MAX_LAST_ACCESS_DATE,
        Toml.KEY_MIN_LAST_ACCESS_DATE,
    }
)
_FILE_EXCLUSION_KEYS: frozenset[str] = frozenset(
    {Toml.KEY_ATTRIBUTES, Toml.KEY_PATH_OR_NAME, Toml.KEY_FLAGS}
)
_DIRECTORY_EXCLUSION_KEYS: frozenset[str] = frozenset(
    {Toml.KEY_PATH_OR_NAME, Toml.KEY_JUNCTION_POINTS}
)
_PERFORMANCE_KEYS: frozenset[str] = frozenset(
    {Toml.KEY_THREADS, Toml.KEY_INTER_PACKET_GAP, Toml.KEY_FLAGS}
)
_RETRY_KEYS: frozenset[str] = frozenset(
    {Toml.KEY_RETRIES, Toml.KEY_WAIT, Toml.KEY_SAVE_AS_DEFAULT, Toml.KEY_AWAIT_SHARE_NAMES}
)
_LOGGING_KEYS: frozenset[str] = frozenset({Toml.KEY_PATH, Toml.KEY_UNICODE, Toml.KEY_APPEND})
_POST_COPY_KEYS: frozenset[str] = frozenset(
    {Toml.KEY_ADD_ATTRIBUTES, Toml.KEY_REMOVE_ATTRIBUTES}
)


# --- Typed getters ---


def _dotted(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


def _warn_unknown_keys(table: TomlTable, known: frozenset[str], prefix: str) -> None:
    for key in table:
        if key not in known:
            logger.warning("Ignoring unknown configuration key: %s", _dotted(prefix, key))


def _get_table(table: TomlTable, key: str, prefix: str) -> TomlTable | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise ConfigError("expected a table", key=_dotted(prefix, key))
    return dict(cast("Mapping[str, Any]", value))


def _get_bool(table: TomlTable, key: str, prefix: str) -> bool:
    value: Any = table.get(key, False)
    if not isinstance(value, bool):
        raise ConfigError(f"expected a boolean, got {value!r}", key=_dotted(prefix, key))
    return value


def _get_int(table: TomlTable, key: str, prefix: str) -> int | None:
    value: Any = table.get(key)
    if value is None:
        return None
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"expected an integer, got {value!r}", key=_dotted(prefix, key))
    return int(value)


def _get_str(table: TomlTable, key: str, prefix: str) -> str | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"expected a string, got {value!r}", key=_dotted(prefix, key))
    return value


def _get_str_or_int(table: TomlTable, key: str, prefix: str) -> str | None:
    """Return a day count or date as text; integers are accepted for day counts."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ConfigError(
            f"expected a day count or a YYYYMMDD date, got {value!r}",
            key=_dotted(prefix, key),
        )
    return str(value)


def _get_str_list(table: TomlTable, key: str, prefix: str) -> list[str] | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(
            f"expected a string or a list of strings, got {value!r}",
            key=_dotted(prefix, key),
        )
    return list(cast("list[str]", value))


def _parse_tag(tag_type: type[_TAG], raw: str, dotted_key: str) -> _TAG:
    tag: _TAG | None = tag_type.parse(raw)
    if tag is None:
        valid: str = ", ".join(t.key for t in tag_type)
        raise ConfigError(f"unknown value {raw!r} (expected one of: {valid})", key=dotted_key)
    return tag


def _get_tag_set(
    table: TomlTable,
    key: str,
    prefix: str,
    family: type[_TS],
) -> _TS | None:
    """Parse a flag list (or ``"all"``) into a value of a bitmask family."""
    dotted_key: str = _dotted(prefix, key)
    if table.get(key) == Toml.VALUE_ALL:
        return family.all()
    names: list[str] | None = _get_str_list(table, key, prefix)
    if names is None:
        return None
    if not names:
        return family.none()
    return combine_all(family.of(_parse_tag(family.vocabulary, name, dotted_key)) for name in names)


def _get_choice(table: TomlTable, key: str, prefix: str, tag_type: type[_TAG]) -> _TAG | None:
    raw: str | None = _get_str(table, key, prefix)
    if raw is None:
        return None
    return _parse_tag(tag_type, raw, _dotted(prefix, key))


# --- Section parsers ---


def _parse_file_exclusion(table: TomlTable, prefix: str) -> FileExclusionFilter:
    _warn_unknown_keys(table, _FILE_EXCLUSION_KEYS, prefix)
    parts: list[FileExclusionFilter] = []

    attributes: FileAttributes | None = _get_tag_set(
        table, Toml.KEY_ATTRIBUTES, prefix, FileAttributes
    )
    if attributes is not None:
        parts.append(FileExclusionFilter.by_attributes(attributes))

    names: list[str] | None = _get_str_list(table, Toml.KEY_PATH_OR_NAME, prefix)
    if names is not None:
        parts.append(FileExclusionFilter.by_path_or_name(*names))

    flag_key: str = _dotted(prefix, Toml.KEY_FLAGS)
    for raw in _get_str_list(table, Toml.KEY_FLAGS, prefix) or []:
        tag: FileExclusionTag = _parse_tag(FileExclusionTag, raw, flag_key)
        if tag in (FileExclusionTag.ATTRIBUTES, FileExclusionTag.PATH_OR_NAME):
            raise ConfigError(f"{tag.key} takes a payload; use its own key", key=flag_key)
        parts.append(FileExclusionFilter.of(tag))

    return combine_all(parts) if parts else FileExclusionFilter.none()


def _parse_directory_exclusion(table: TomlTable, prefix: str) -> DirectoryExclusionFilter:
    _warn_unknown_keys(table, _DIRECTORY_EXCLUSION_KEYS, prefix)
    parts: list[DirectoryExclusionFilter] = []
    names: list[str] | None = _get_str_list(table, Toml.KEY_PATH_OR_NAME, prefix)
    if names is not None:
        parts.append(DirectoryExclusionFilter.by_path_or_name(*names))
    if _get_bool(table, Toml.KEY_JUNCTION_POINTS, prefix):
        parts.append(DirectoryExclusionFilter.JUNCTION_POINTS)
    return combine_all(parts) if parts else DirectoryExclusionFilter.none()


def _parse_filter(table: TomlTable) -> Filter:
    prefix: str = Toml.SECTION_FILTER
    _warn_unknown_keys(table, _FILTER_KEYS, prefix)

    file_table: TomlTable | None = _get_table(table, Toml.SECTION_FILE_EXCLUSION, prefix)
    dir_table: TomlTable | None = _get_table(table, Toml.SECTION_DIRECTORY_EXCLUSION, prefix)

    return Filter(
        archive_and_reset=_get_bool(table, Toml.KEY_ARCHIVE_AND_RESET, prefix),
        include_only_attributes=_get_tag_set(
            table, Toml.KEY_INCLUDE_ONLY_ATTRIBUTES, prefix, FileAttributes
        ),
        file_exclusion=(
            _parse_file_exclusion(file_table, _dotted(prefix, Toml.SECTION_FILE_EXCLUSION))
            if file_table is not None
            else None
        ),
        directory_exclusion=(
            _parse_directory_exclusion(
                dir_table, _dotted(prefix, Toml.SECTION_DIRECTORY_EXCLUSION)
            )
            if dir_table is not None
            else None
        ),
        file_and_directory_exclusion=_get_tag_set(
            table, Toml.KEY_FILE_AND_DIRECTORY_EXCLUSION, prefix, FileAndDirectoryExclusionFilter
        ),
        exclusion_exceptions=_get_tag_set(
            table, Toml.KEY_EXCLUSION_EXCEPTIONS, prefix, FileExclusionFilterException
        ),
        max_size=_get_int(table, Toml.KEY_MAX_SIZE, prefix),
        min_size=_get_int(table, Toml.KEY_MIN_SIZE, prefix),
        max_age=_get_str_or_int(table, Toml.KEY_MAX_AGE, prefix),
        min_age=_get_str_or_int(table, Toml.KEY_MIN_AGE, prefix),
        max_last_access_date=_get_str_or_int(table, Toml.KEY_MAX_LAST_ACCESS_DATE, prefix),
        min_last_access_date=_get_str_or_int(table, Toml.KEY_MIN_LAST_ACCESS_DATE, prefix),
    )


def _parse_performance(table: TomlTable) -> PerformanceOptions:
    prefix: str = Toml.SECTION_PERFORMANCE
    _warn_unknown_keys(table, _PERFORMANCE_KEYS, prefix)
    parts: list[PerformanceOptions] = [PerformanceOptions.none()]

    threads: int | None = _get_int(table, Toml.KEY_THREADS, prefix)
    gap: int | None = _get_int(table, Toml.KEY_INTER_PACKET_GAP, prefix)
    try:
        if threads is not None:
            parts.append(PerformanceOptions.with_choice(PerformanceChoice.threads(threads)))
        if gap is not None:
            parts.append(PerformanceOptions.with_choice(PerformanceChoice.inter_packet_gap(gap)))
    except ValueError as exc:
        raise ConfigError(str(exc), key=prefix) from exc

    flag_key: str = _dotted(prefix, Toml.KEY_FLAGS)
    for raw in _get_str_list(table, Toml.KEY_FLAGS, prefix) or []:
        tag: PerformanceTag = _parse_tag(PerformanceTag, raw, flag_key)
        if tag is PerformanceTag.CHOICE:
            raise ConfigError("use the threads or inter_packet_gap key", key=flag_key)
        parts.append(PerformanceOptions.of(tag))

    try:
        return combine_all(parts)
    except PerformanceChoiceMismatchError as exc:
        raise ConfigError(str(exc), key=prefix) from exc


def _parse_retry(table: TomlTable) -> RetrySettings:
    prefix: str = Toml.SECTION_RETRY
    _warn_unknown_keys(table, _RETRY_KEYS, prefix)
    try:
        return RetrySettings(
            retries=_get_int(table, Toml.KEY_RETRIES, prefix),
            wait=_get_int(table, Toml.KEY_WAIT, prefix),
            save_as_default=_get_bool(table, Toml.KEY_SAVE_AS_DEFAULT, prefix),
            await_share_names=_get_bool(table, Toml.KEY_AWAIT_SHARE_NAMES, prefix),
        )
    except ValueError as exc:
        raise ConfigError(str(exc), key=prefix) from exc


def _parse_logging(table: TomlTable) -> LoggingSettings:
    prefix: str = Toml.SECTION_LOGGING
    _warn_unknown_keys(table, _LOGGING_KEYS, prefix)
    path: str | None = _get_str(table, Toml.KEY_PATH, prefix)
    if not path:
        raise ConfigError("a log file path is required", key=_dotted(prefix, Toml.KEY_PATH))
    return LoggingSettings(
        path=Path(path),
        unicode=_get_bool(table, Toml.KEY_UNICODE, prefix),
        append=_get_bool(table, Toml.KEY_APPEND, prefix),
    )


def _parse_post_copy(table: TomlTable) -> PostCopyActions:
    prefix: str = Toml.SECTION_POST_COPY
    _warn_unknown_keys(table, _POST_COPY_KEYS, prefix)
    added: FileAttributes | None = _get_tag_set(
        table, Toml.KEY_ADD_ATTRIBUTES, prefix, FileAttributes
    )
    removed: FileAttributes | None = _get_tag_set(
        table, Toml.KEY_REMOVE_ATTRIBUTES, prefix, FileAttributes
    )
    return PostCopyActions(added=added, removed=removed)


def command_from_toml_dict(table: TomlTable) -> RobocopyCommand:
    """Build a command from a parsed command table.

    Args:
        table (TomlTable): The command table (the whole ``robocmd.toml`` document or the
            ``[tool.robocmd]`` table of ``pyproject.toml``).

    Returns:
        RobocopyCommand: The frozen command.

    Raises:
        ConfigError: On unknown tag names, wrong value types or invalid values.
    """
    _warn_unknown_keys(table, _TOP_LEVEL_KEYS, "")

    draft = MutableRobocopyCommand()
    source: str | None = _get_str(table, Toml.KEY_SOURCE, "")
    destination: str | None = _get_str(table, Toml.KEY_DESTINATION, "")
    if source is not None:
        draft.source = Path(source)
    if destination is not None:
        draft.destination = Path(destination)
    draft.files = _get_str_list(table, Toml.KEY_FILES, "") or []

    draft.copy_mode = _get_choice(table, Toml.KEY_COPY_MODE, "", CopyMode)
    draft.unbuffered = _get_bool(table, Toml.KEY_UNBUFFERED, "")
    draft.empty_dir_copy = _get_bool(table, Toml.KEY_EMPTY_DIR_COPY, "")
    draft.purge = _get_bool(table, Toml.KEY_PURGE, "")
    draft.mirror_security = _get_bool(table, Toml.KEY_MIRROR_SECURITY, "")
    draft.levels = _get_int(table, Toml.KEY_LEVELS, "")
    draft.create_only = _get_bool(table, Toml.KEY_CREATE_ONLY, "")

    draft.file_properties = _get_tag_set(table, Toml.KEY_FILE_PROPERTIES, "", FileProperties)
    draft.dir_properties = _get_tag_set(table, Toml.KEY_DIR_PROPERTIES, "", DirectoryProperties)
    draft.filesystem = _get_tag_set(table, Toml.KEY_FILESYSTEM, "", FilesystemOptions)
    draft.move = _get_choice(table, Toml.KEY_MOVE, "", Move)

    sections: dict[str, TomlTable | None] = {
        name: _get_table(table, name, "")
        for name in (
            Toml.SECTION_FILTER,
            Toml.SECTION_PERFORMANCE,
            Toml.SECTION_RETRY,
            Toml.SECTION_LOGGING,
            Toml.SECTION_POST_COPY,
        )
    }
    filter_table: TomlTable | None = sections[Toml.SECTION_FILTER]
    if filter_table is not None:
        draft.filter = _parse_filter(filter_table)
    performance_table: TomlTable | None = sections[Toml.SECTION_PERFORMANCE]
    if performance_table is not None:
        draft.performance = _parse_performance(performance_table)
    retry_table: TomlTable | None = sections[Toml.SECTION_RETRY]
    if retry_table is not None:
        draft.retry = _parse_retry(retry_table)
    logging_table: TomlTable | None = sections[Toml.SECTION_LOGGING]
    if logging_table is not None:
        draft.logging = _parse_logging(logging_table)
    post_copy_table: TomlTable | None = sections[Toml.SECTION_POST_COPY]
    if post_copy_table is not None:
        draft.post_copy = _parse_post_copy(post_copy_table)

    try:
        return draft.freeze()
    except CommandValidationError as exc:
        raise ConfigError(str(exc)) from exc


# --- File I/O ---


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        logger.error("Error loading TOML from %s: %s", path, exc)
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    except TomlkitParseError as exc:
        logger.error("Error decoding TOML from %s: %s", path, exc)
        raise ConfigError(f"invalid TOML in {path}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_command_table(path: Path, data: TomlTable) -> TomlTable:
    """Return the command table of a parsed file.

    For ``pyproject.toml`` this is ``[tool.robocmd]``; for any other file it is the
    whole document.

    Raises:
        ConfigError: If ``pyproject.toml`` has no ``[tool.robocmd]`` table.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    section: Any = tool.get(PYPROJECT_TOOL_SECTION) if isinstance(tool, Mapping) else None
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.{PYPROJECT_TOOL_SECTION}] section missing or malformed in {path}")
    return dict(cast("Mapping[str, Any]", section))


def load_command(path: Path) -> RobocopyCommand:
    """Load a command from ``robocmd.toml``, ``pyproject.toml`` or any TOML file.

    Raises:
        ConfigError: If the file cannot be loaded or describes an invalid command.
    """
    logger.debug("Loading command configuration from %s", path)
    return command_from_toml_dict(extract_command_table(path, load_toml_dict(path)))


def find_config_file(start: Path) -> Path | None:
    """Find the nearest command configuration at or above ``start``.

    In each directory, ``robocmd.toml`` wins over a ``pyproject.toml`` that has a
    ``[tool.robocmd]`` table.

    Args:
        start (Path): Directory to start from.

    Returns:
        Path | None: The configuration file, or ``None`` when none is found.
    """
    for directory in (start.resolve(), *start.resolve().parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            logger.debug("Found %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            data: TomlTable = load_toml_dict(pyproject)
            tool: Any = data.get(Toml.SECTION_TOOL, {})
            if isinstance(tool, Mapping) and PYPROJECT_TOOL_SECTION in tool:
                logger.debug("Found [tool.%s] in %s", PYPROJECT_TOOL_SECTION, pyproject)
                return pyproject
    return None


# --- Dumping ---


def _tag_keys(value: TagSet[Any] | None) -> list[str] | None:
    return None if value is None else [tag.key for tag in value.tags]


def _filter_to_toml_dict(flt: Filter) -> TomlTable:
    table: TomlTable = {
        Toml.KEY_ARCHIVE_AND_RESET: flt.archive_and_reset,
        Toml.KEY_INCLUDE_ONLY_ATTRIBUTES: _tag_keys(flt.include_only_attributes),
        Toml.KEY_FILE_AND_DIRECTORY_EXCLUSION: _tag_keys(flt.file_and_directory_exclusion),
        Toml.KEY_EXCLUSION_EXCEPTIONS: _tag_keys(flt.exclusion_exceptions),
        Toml.KEY_MAX_SIZE: flt.max_size,
        Toml.KEY_MIN_SIZE: flt.min_size,
        Toml.KEY_MAX_AGE: flt.max_age,
        Toml.KEY_MIN_AGE: flt.min_age,
        Toml.KEY_MAX_LAST_ACCESS_DATE: flt.max_last_access_date,
        Toml.KEY_MIN_LAST_ACCESS_DATE: flt.min_last_access_date,
    }
    # Sub-tables last: TOML keys after a table header belong to that table
    if flt.file_exclusion is not None:
        fx: FileExclusionFilter = flt.file_exclusion
        table[Toml.SECTION_FILE_EXCLUSION] = {
            Toml.KEY_ATTRIBUTES: _tag_keys(fx.attributes),
            Toml.KEY_PATH_OR_NAME: None if fx.path_or_name is None else list(fx.path_or_name),
            Toml.KEY_FLAGS: [
                tag.key
                for tag in fx.tags
                if tag not in (FileExclusionTag.ATTRIBUTES, FileExclusionTag.PATH_OR_NAME)
            ],
        }
    if flt.directory_exclusion is not None:
        dx: DirectoryExclusionFilter = flt.directory_exclusion
        table[Toml.SECTION_DIRECTORY_EXCLUSION] = {
            Toml.KEY_PATH_OR_NAME: None if dx.path_or_name is None else list(dx.path_or_name),
            Toml.KEY_JUNCTION_POINTS: dx.junction_points,
        }
    return table


def _performance_to_toml_dict(perf: PerformanceOptions) -> TomlTable:
    table: TomlTable = {}
    if perf.choice.kind is ChoiceKind.THREADS:
        table[Toml.KEY_THREADS] = perf.choice.value
    elif perf.choice.kind is ChoiceKind.INTER_PACKET_GAP:
        table[Toml.KEY_INTER_PACKET_GAP] = perf.choice.value
    table[Toml.KEY_FLAGS] = [tag.key for tag in perf.tags if tag is not PerformanceTag.CHOICE]
    return table


def command_to_toml_dict(command: RobocopyCommand) -> TomlTable:
    """Return the TOML table describing ``command``.

    ``None`` entries stand for absent values and are dropped by `to_toml`.
    """
    table: TomlTable = {
        Toml.KEY_SOURCE: str(command.source),
        Toml.KEY_DESTINATION: str(command.destination),
        Toml.KEY_FILES: list(command.files),
        Toml.KEY_COPY_MODE: None if command.copy_mode is None else command.copy_mode.key,
        Toml.KEY_UNBUFFERED: command.unbuffered,
        Toml.KEY_EMPTY_DIR_COPY: command.empty_dir_copy,
        Toml.KEY_PURGE: command.purge,
        Toml.KEY_MIRROR_SECURITY: command.mirror_security,
        Toml.KEY_LEVELS: command.levels,
        Toml.KEY_CREATE_ONLY: command.create_only,
        Toml.KEY_FILE_PROPERTIES: _tag_keys(command.file_properties),
        Toml.KEY_DIR_PROPERTIES: _tag_keys(command.dir_properties),
        Toml.KEY_FILESYSTEM: _tag_keys(command.filesystem),
        Toml.KEY_MOVE: None if command.move is None else command.move.key,
    }
    if command.filter is not None:
        table[Toml.SECTION_FILTER] = _filter_to_toml_dict(command.filter)
    if command.performance is not None:
        table[Toml.SECTION_PERFORMANCE] = _performance_to_toml_dict(command.performance)
    if command.retry is not None:
        table[Toml.SECTION_RETRY] = {
            Toml.KEY_RETRIES: command.retry.retries,
            Toml.KEY_WAIT: command.retry.wait,
            Toml.KEY_SAVE_AS_DEFAULT: command.retry.save_as_default,
            Toml.KEY_AWAIT_SHARE_NAMES: command.retry.await_share_names,
        }
    if command.logging is not None:
        table[Toml.SECTION_LOGGING] = {
            Toml.KEY_PATH: str(command.logging.path),
            Toml.KEY_UNICODE: command.logging.unicode,
            Toml.KEY_APPEND: command.logging.append,
        }
    if command.post_copy is not None:
        table[Toml.SECTION_POST_COPY] = {
            Toml.KEY_ADD_ATTRIBUTES: _tag_keys(command.post_copy.added),
            Toml.KEY_REMOVE_ATTRIBUTES: _tag_keys(command.post_copy.removed),
        }
    return table


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings and lists (TOML has no null)."""
    if isinstance(value, Mapping):
        mapping: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {
            str(k): _strip_none_for_toml(v) for k, v in mapping.items() if v is not None
        }
    if isinstance(value, list):
        items: list[object] = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in items if v is not None]
    return value


def to_toml(toml_dict: TomlTable, *, for_pyproject: bool = False) -> str:
    """Serialize a TOML mapping to a string, dropping ``None`` entries.

    Args:
        toml_dict (TomlTable): TOML mapping to render.
        for_pyproject (bool): Nest the output under ``[tool.robocmd]``.

    Returns:
        str: The rendered TOML document.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    if for_pyproject:
        cleaned = {Toml.SECTION_TOOL: {PYPROJECT_TOOL_SECTION: cleaned}}
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))
