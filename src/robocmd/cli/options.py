# topmark:header:start
#
#   project      : RoboCmd
#   file         : options.py
#   file_relpath : src/robocmd/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options and option resolution helpers for the RoboCmd CLI.

This module centralizes the decorators that several subcommands share (verbosity,
color, configuration, positional command arguments) and the pure functions that turn
their raw values into effective settings.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from robocmd.cli.errors import RobocmdUsageError
from robocmd.config.logging import TRACE_LEVEL, get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from robocmd.config.logging import RobocmdLogger

P = ParamSpec("P")
R = TypeVar("R")

# Custom verbosity levels, mapped to standard logging levels
LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

logger: RobocmdLogger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final verbosity level based on verbose and quiet counts.

    Args:
        verbose_count (int): Number of times the verbose flag (-v) is passed.
        quiet_count (int): Number of times the quiet flag (-q) is passed.

    Returns:
        int: The verbosity as a logging level.

    Raises:
        RobocmdUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags select TRACE, two select DEBUG and one selects INFO.
        One or more -q flags select ERROR. The default is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise RobocmdUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]

    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]

    return LOG_LEVELS["WARNING"]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from CLI options.
        stdout_isatty (bool | None): Whether stdout is a TTY; if None, auto-detected.

    Returns:
        bool: True if color output should be enabled.

    Behavior:
        Honors ``--color`` first, then the ``FORCE_COLOR`` and ``NO_COLOR``
        environment variables, and finally enables color when stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto, always, never) and ``--no-color`` to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply common configuration options to a Click command.

    Adds ``--config/-c`` and ``--no-config``. Without either, the command looks for
    ``robocmd.toml`` or a ``pyproject.toml`` with ``[tool.robocmd]`` from the current
    directory upwards.
    """
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore configuration files in the current project.",
    )(f)
    f = click.option(
        "--config",
        "-c",
        "config_path",
        metavar="FILE",
        type=click.Path(dir_okay=False),
        default=None,
        help="Configuration file describing the command (robocmd.toml or pyproject.toml).",
    )(f)
    return f


def command_arguments(f: Callable[P, R]) -> Callable[P, R]:
    """Add the optional ``SOURCE DEST [FILES...]`` positional arguments.

    Click applies decorators bottom-up, so arguments are registered in reverse.
    """
    f = click.argument("files", nargs=-1)(f)
    f = click.argument("destination", required=False)(f)
    f = click.argument("source", required=False)(f)
    return f
