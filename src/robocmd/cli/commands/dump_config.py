# topmark:header:start
#
#   project      : RoboCmd
#   file         : dump_config.py
#   file_relpath : src/robocmd/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RoboCmd `dump-config` command.

Emits the effective command as TOML. The output can be saved as ``robocmd.toml``
(or pasted into ``pyproject.toml`` with ``--pyproject``) and loads back into an
equal command.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from robocmd.cli.cmd_common import build_command, get_console
from robocmd.cli.options import command_arguments, common_config_options
from robocmd.config.loader import command_to_toml_dict, to_toml
from robocmd.config.logging import get_logger

if TYPE_CHECKING:
    from robocmd.cli.console import ConsoleLike
    from robocmd.command.model import RobocopyCommand
    from robocmd.config.logging import RobocmdLogger

logger: RobocmdLogger = get_logger(__name__)


@click.command(
    name="dump-config",
    help="Dump the effective command as TOML.",
)
@common_config_options
@click.option(
    "--pyproject",
    "for_pyproject",
    is_flag=True,
    help="Nest the output under [tool.robocmd] for pyproject.toml.",
)
@command_arguments
def dump_config_command(
    *,
    source: str | None,
    destination: str | None,
    files: tuple[str, ...],
    config_path: str | None,
    no_config: bool,
    for_pyproject: bool,
) -> None:
    """Dump the effective command (configuration plus positional overrides) as TOML."""
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
    logger.trace("Command to dump: %s", command)
    console.print(to_toml(command_to_toml_dict(command), for_pyproject=for_pyproject), nl=False)
