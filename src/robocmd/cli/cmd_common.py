# topmark:header:start
#
#   project      : RoboCmd
#   file         : cmd_common.py
#   file_relpath : src/robocmd/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the RoboCmd subcommands.

They resolve the effective `RobocopyCommand` from configuration files and positional
arguments, and translate library errors into CLI errors.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from robocmd.cli.errors import RobocmdConfigError, RobocmdUsageError
from robocmd.command.model import RobocopyCommand
from robocmd.config.loader import find_config_file, load_command
from robocmd.config.logging import get_logger
from robocmd.core.errors import CommandValidationError, ConfigError

if TYPE_CHECKING:
    from robocmd.cli.console import ConsoleLike
    from robocmd.command.model import MutableRobocopyCommand
    from robocmd.config.logging import RobocmdLogger

logger: RobocmdLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the root context by `init_common_state`."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (a logging level; WARNING when unset)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", logging.WARNING))


def is_verbose(ctx: click.Context) -> bool:
    """Return True when at least one ``-v`` was given."""
    return get_effective_verbosity(ctx) <= logging.INFO


def resolve_config_path(config_path: str | None, no_config: bool) -> Path | None:
    """Return the configuration file to load, or None.

    An explicit ``--config`` always wins; otherwise the project is searched upwards
    from the working directory unless ``--no-config`` was given.
    """
    if config_path is not None:
        return Path(config_path)
    if no_config:
        return None
    return find_config_file(Path.cwd())


def build_command(
    ctx: click.Context,
    *,
    config_path: str | None,
    no_config: bool,
    source: str | None,
    destination: str | None,
    files: tuple[str, ...],
) -> RobocopyCommand:
    """Build the effective command from configuration and positional arguments.

    Positional ``SOURCE DEST`` replace the configured directories; ``FILES`` replace the
    configured file patterns when given.

    Raises:
        RobocmdUsageError: If only one directory is given, or no directories are known.
        RobocmdConfigError: If the configuration cannot be loaded or is invalid.
    """
    if source is not None and destination is None:
        raise RobocmdUsageError("DEST is required when SOURCE is given.")

    try:
        path: Path | None = resolve_config_path(config_path, no_config)
        if path is None and source is None:
            raise RobocmdUsageError(
                "SOURCE and DEST are required unless a configuration file provides them."
            )
        base: RobocopyCommand = load_command(path) if path is not None else RobocopyCommand()
    except ConfigError as exc:
        raise RobocmdConfigError(str(exc)) from exc

    if path is not None:
        logger.debug("Loaded command from %s", path)
        if is_verbose(ctx):
            get_console(ctx).warn(f"Using configuration: {path}")

    if source is None or destination is None:
        return base

    builder: MutableRobocopyCommand = base.thaw()
    builder.source = Path(source)
    builder.destination = Path(destination)
    if files:
        builder.files = list(files)
    try:
        return builder.freeze()
    except CommandValidationError as exc:
        raise RobocmdConfigError(str(exc)) from exc
