# topmark:header:start
#
#   project      : RoboCmd
#   file         : model.py
#   file_relpath : src/robocmd/command/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command object for the external copy tool.

This module defines:

- `RobocopyCommand`: an immutable command. One optional value per option family plus a
  handful of scalar fields. Rendering and execution never mutate it.
- `MutableRobocopyCommand`: the builder. Collect values (lists are mutable, flag-set
  values can be accumulated with `include()`), then call `freeze()`.

Immutability:
    `RobocopyCommand` stores tuples and immutable option values and is ``frozen=True``.
    Use `RobocopyCommand.thaw()` to get a builder for edits.

Example:
    ```python
    builder = MutableRobocopyCommand(source=Path("src"), destination=Path("dst"))
    builder.include(FileProperties.DATA).include(FileProperties.TIME_STAMPS)
    builder.empty_dir_copy = True
    command = builder.freeze()
    command.to_args()  # ['src', 'dst', '/e', '/copy:DT']
    ```
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from robocmd.command.render import render_command
from robocmd.config.logging import get_logger
from robocmd.core.errors import CommandValidationError
from robocmd.core.exit_codes import check_exit_code
from robocmd.core.flagset import as_names
from robocmd.execution.runner import resolve_executable, run_robocopy
from robocmd.options.actions import PostCopyActions
from robocmd.options.filesystem import FilesystemOptions
from robocmd.options.filters import (
    DirectoryExclusionFilter,
    FileAndDirectoryExclusionFilter,
    FileExclusionFilter,
    FileExclusionFilterException,
    Filter,
)
from robocmd.options.performance import PerformanceOptions
from robocmd.options.properties import DirectoryProperties, FileProperties

if TYPE_CHECKING:
    from collections.abc import Callable

    from robocmd.config.logging import RobocmdLogger
    from robocmd.core.exit_codes import OkExitCode
    from robocmd.core.flagset import FlagSet
    from robocmd.options.actions import CopyMode, Move
    from robocmd.options.log_output import LoggingSettings
    from robocmd.options.performance import RetrySettings

logger: RobocmdLogger = get_logger(__name__)

# Flag-set families held directly by the command, by builder attribute
_COMMAND_FAMILIES: dict[type[Any], str] = {
    FileProperties: "file_properties",
    DirectoryProperties: "dir_properties",
    FilesystemOptions: "filesystem",
    PerformanceOptions: "performance",
    PostCopyActions: "post_copy",
}

# Flag-set families held by the command's `Filter`, by filter attribute
_FILTER_FAMILIES: dict[type[Any], str] = {
    FileExclusionFilter: "file_exclusion",
    DirectoryExclusionFilter: "directory_exclusion",
    FileAndDirectoryExclusionFilter: "file_and_directory_exclusion",
    FileExclusionFilterException: "exclusion_exceptions",
}


def _validate_filter(flt: Filter) -> None:
    for name in ("max_size", "min_size"):
        value: int | None = getattr(flt, name)
        if value is not None and value < 0:
            raise CommandValidationError(f"filter.{name} must be >= 0, got {value}")


@dataclass(frozen=True)
class RobocopyCommand:
    """Immutable description of one invocation of the external copy tool.

    Attributes:
        source (Path): Source directory.
        destination (Path): Destination directory.
        files (tuple[str, ...]): File names or wildcard patterns to copy (default: all).
        copy_mode (CopyMode | None): Restartable and/or backup mode.
        unbuffered (bool): Use unbuffered I/O (``/j``).
        empty_dir_copy (bool): Copy subdirectories including empty ones (``/e``);
            otherwise subdirectories are copied without empty ones (``/s``).
        purge (bool): Delete destination files and directories absent from the source.
        mirror_security (bool): Together with ``empty_dir_copy`` and ``purge``, mirror
            the tree, overwriting destination directory security settings (``/mir``).
        levels (int | None): Only copy the top ``n`` levels of the source tree.
        create_only (bool): Create the directory tree and zero-length files only.
        file_properties (FileProperties | None): File properties to copy.
        dir_properties (DirectoryProperties | None): Directory properties to copy.
        filter (Filter | None): File selection.
        filesystem (FilesystemOptions | None): Filesystem compatibility switches.
        performance (PerformanceOptions | None): Threads / gap and performance switches.
        retry (RetrySettings | None): Retry behavior.
        logging (LoggingSettings | None): The tool's own log file.
        move (Move | None): Delete sources after copying.
        post_copy (PostCopyActions | None): Attribute changes applied to copied files.
    """

    source: Path = Path(".")
    destination: Path = Path(".")
    files: tuple[str, ...] = ()

    copy_mode: CopyMode | None = None
    unbuffered: bool = False

    empty_dir_copy: bool = False
    purge: bool = False
    mirror_security: bool = False
    levels: int | None = None
    create_only: bool = False

    file_properties: FileProperties | None = None
    dir_properties: DirectoryProperties | None = None

    filter: Filter | None = None

    filesystem: FilesystemOptions | None = None
    performance: PerformanceOptions | None = None
    retry: RetrySettings | None = None

    logging: LoggingSettings | None = None

    move: Move | None = None
    post_copy: PostCopyActions | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.source, Path):
            object.__setattr__(self, "source", Path(self.source))
        if not isinstance(self.destination, Path):
            object.__setattr__(self, "destination", Path(self.destination))
        if not isinstance(self.files, tuple):
            object.__setattr__(self, "files", as_names(self.files))

        if self.levels is not None and self.levels < 1:
            raise CommandValidationError(f"levels must be >= 1, got {self.levels}")
        if self.filter is not None:
            _validate_filter(self.filter)

    def thaw(self) -> MutableRobocopyCommand:
        """Return a mutable copy of this command."""
        return MutableRobocopyCommand(
            source=self.source,
            destination=self.destination,
            files=list(self.files),
            copy_mode=self.copy_mode,
            unbuffered=self.unbuffered,
            empty_dir_copy=self.empty_dir_copy,
            purge=self.purge,
            mirror_security=self.mirror_security,
            levels=self.levels,
            create_only=self.create_only,
            file_properties=self.file_properties,
            dir_properties=self.dir_properties,
            filter=self.filter,
            filesystem=self.filesystem,
            performance=self.performance,
            retry=self.retry,
            logging=self.logging,
            move=self.move,
            post_copy=self.post_copy,
        )

    def to_args(self) -> list[str]:
        """Return the argument vector: source, destination, file patterns, options."""
        return render_command(self)

    def to_argv(self, executable: str | None = None) -> list[str]:
        """Return the argument vector prefixed with the executable name.

        Args:
            executable (str | None): Executable to use; resolved via `resolve_executable`.

        Returns:
            list[str]: The complete process argument vector.
        """
        return [resolve_executable(executable), *self.to_args()]

    def execute(
        self,
        *,
        executable: str | None = None,
        runner: Callable[..., subprocess.CompletedProcess[Any]] = subprocess.run,
    ) -> OkExitCode:
        """Run the external tool and return the success outcome.

        Args:
            executable (str | None): Executable to use; resolved via `resolve_executable`.
            runner (Callable[..., subprocess.CompletedProcess[Any]]): Process runner
                with the signature of `subprocess.run`.

        Returns:
            OkExitCode: The classified success outcome.

        Raises:
            RobocopyFailedError: If the tool reports a failure outcome.
            UnrecognizedExitCodeError: If the exit status cannot be classified.
            RobocopyLaunchError: If the tool cannot be started.
            RobocopyTerminatedError: If the tool is terminated by a signal.
        """
        result = run_robocopy(self, executable=executable, runner=runner)
        return check_exit_code(result.returncode)


@dataclass
class MutableRobocopyCommand:
    """Mutable builder for `RobocopyCommand`.

    Fields mirror `RobocopyCommand`; ``files`` is a list. Defaults omit every family.
    """

    source: Path = Path(".")
    destination: Path = Path(".")
    files: list[str] = field(default_factory=lambda: [])

    copy_mode: CopyMode | None = None
    unbuffered: bool = False

    empty_dir_copy: bool = False
    purge: bool = False
    mirror_security: bool = False
    levels: int | None = None
    create_only: bool = False

    file_properties: FileProperties | None = None
    dir_properties: DirectoryProperties | None = None

    filter: Filter | None = None

    filesystem: FilesystemOptions | None = None
    performance: PerformanceOptions | None = None
    retry: RetrySettings | None = None

    logging: LoggingSettings | None = None

    move: Move | None = None
    post_copy: PostCopyActions | None = None

    def include(self, value: FlagSet[Any]) -> MutableRobocopyCommand:
        """Combine a flag-set value into the slot of its family.

        Exclusion families go into ``filter`` (created when absent). A slot that is
        already set is combined with ``value``; an empty slot takes ``value`` as is.

        Args:
            value (FlagSet[Any]): A value of any command-level or filter-level family.

        Returns:
            MutableRobocopyCommand: ``self``, for chaining.

        Raises:
            TypeError: If ``value`` belongs to no family the command holds.
            PerformanceChoiceMismatchError: For conflicting performance choices.
        """
        family: type[Any] = type(value)
        if family in _COMMAND_FAMILIES:
            name: str = _COMMAND_FAMILIES[family]
            current = getattr(self, name)
            setattr(self, name, value if current is None else current.combine(value))
        elif family in _FILTER_FAMILIES:
            name = _FILTER_FAMILIES[family]
            flt: Filter = self.filter or Filter()
            current = getattr(flt, name)
            merged = value if current is None else current.combine(value)
            self.filter = replace(flt, **{name: merged})
        else:
            raise TypeError(f"{family.__name__} is not an option family of the command")
        logger.trace("include(%r)", value)
        return self

    def freeze(self) -> RobocopyCommand:
        """Freeze this builder into an immutable `RobocopyCommand`.

        Raises:
            CommandValidationError: If ``levels`` < 1 or a filter size is negative.
        """
        command = RobocopyCommand(
            source=Path(self.source),
            destination=Path(self.destination),
            files=as_names(self.files),
            copy_mode=self.copy_mode,
            unbuffered=self.unbuffered,
            empty_dir_copy=self.empty_dir_copy,
            purge=self.purge,
            mirror_security=self.mirror_security,
            levels=self.levels,
            create_only=self.create_only,
            file_properties=self.file_properties,
            dir_properties=self.dir_properties,
            filter=self.filter,
            filesystem=self.filesystem,
            performance=self.performance,
            retry=self.retry,
            logging=self.logging,
            move=self.move,
            post_copy=self.post_copy,
        )
        logger.debug("Frozen command: %s -> %s", command.source, command.destination)
        return command
