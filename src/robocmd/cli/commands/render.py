# topmark:header:start
#
#   project      : RoboCmd
#   file         : render.py
#   file_relpath : src/robocmd/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RoboCmd `render` command.

Prints the argument vector of the effective command without running anything.
"""

from __future__ import annotations

import subprocess
from enum import Enum
from typing import TYPE_CHECKING

import click

from robocmd.cli.cmd_common import build_command, get_console
from robocmd.cli.options import command_arguments, common_config_options
from robocmd.config.logging import get_logger

if TYPE_CHECKING:
    from robocmd.cli.console import ConsoleLike
    from robocmd.command.model import RobocopyCommand
    from robocmd.config.logging import RobocmdLogger

logger: RobocmdLogger = get_logger(__name__)


class VectorFormat(str, Enum):
    """Output formats of the `render` command.

    Attributes:
        SHELL: One line, quoted with the Windows command-line rules.
        LINES: One token per line, unquoted.
    """

    SHELL = "shell"
    LINES = "lines"


def format_vector(argv: list[str], fmt: VectorFormat) -> str:
    """Return ``argv`` formatted for display."""
    if fmt == VectorFormat.LINES:
        return "\n".join(argv)
    return subprocess.list2cmdline(argv)


@click.command(
    name="render",
    help="Print the argument vector of the command (SOURCE DEST [FILES...]).",
)
@common_config_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in VectorFormat]),
    default=VectorFormat.SHELL.value,
    show_default=True,
    help="shell: one quoted line; lines: one token per line.",
)
@click.option(
    "--executable",
    "executable",
    default=None,
    metavar="NAME",
    help="Prefix the vector with this executable (see ROBOCMD_EXECUTABLE).",
)
@click.option(
    "--with-executable",
    "with_executable",
    is_flag=True,
    help="Prefix the vector with the resolved executable name.",
)
@command_arguments
def render_command(
    *,
    source: str | None,
    destination: str | None,
    files: tuple[str, ...],
    config_path: str | None,
    no_config: bool,
    output_format: str,
    executable: str | None,
    with_executable: bool,
) -> None:
    """Print the argument vector of the effective command.

    Args:
        source (str | None): Source directory (overrides the configuration).
        destination (str | None): Destination directory (overrides the configuration).
        files (tuple[str, ...]): File patterns (override the configuration when given).
        config_path (str | None): Explicit configuration file.
        no_config (bool): Skip configuration discovery.
        output_format (str): One of the `VectorFormat` values.
        executable (str | None): Executable name to prefix.
        with_executable (bool): Prefix the resolved executable name.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    command: RobocopyCommand = build_command(
        ctx,
        config_path=config_path,
        no_config=no_config,
        source=source,
        destination=destination,
        files=files,
    )
    argv: list[str] = (
        command.to_argv(executable)
        if with_executable or executable is not None
        else command.to_args()
    )
    logger.debug("render: %s", argv)
    console.print(format_vector(argv, VectorFormat(output_format)))
