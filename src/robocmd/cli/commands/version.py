# topmark:header:start
#
#   project      : RoboCmd
#   file         : version.py
#   file_relpath : src/robocmd/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RoboCmd `version` command.

Prints the current RoboCmd version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from robocmd.cli.cmd_common import get_console, is_verbose
from robocmd.constants import ROBOCMD_VERSION

if TYPE_CHECKING:
    from robocmd.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of RoboCmd.",
)
def version_command() -> None:
    """Show the current version of RoboCmd."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    if is_verbose(ctx):
        console.print(console.styled("RoboCmd version:", bold=True, underline=True))
        console.print(f"    {console.styled(ROBOCMD_VERSION, bold=True)}")
    else:
        console.print(console.styled(ROBOCMD_VERSION, bold=True))
