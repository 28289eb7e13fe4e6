# topmark:header:start
#
#   project      : RoboCmd
#   file         : main.py
#   file_relpath : src/robocmd/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RoboCmd command-line entry point.

Group-level options are initialized once and placed into ``ctx.obj``; the
subcommands read the console and verbosity from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from robocmd.cli.commands.dump_config import dump_config_command
from robocmd.cli.commands.exit_code import exit_code_command
from robocmd.cli.commands.render import render_command
from robocmd.cli.commands.run import run_command
from robocmd.cli.commands.version import version_command
from robocmd.cli.console import ClickConsole
from robocmd.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from robocmd.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from robocmd.cli.console import ConsoleLike
    from robocmd.config.logging import RobocmdLogger

logger: RobocmdLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # ROBOCMD_LOG_LEVEL wins; otherwise -v/-vv/-vvv also raise the log level.
    level_env: int | None = resolve_env_log_level()
    log_level: int | None = level_env if level_env is not None else (level_cli if verbose else None)
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="RoboCmd: build, render and run robocopy commands.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the RoboCmd CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'robocmd render SOURCE DEST' to preview a command.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(render_command)

cli.add_command(run_command)

cli.add_command(exit_code_command)

cli.add_command(dump_config_command)

if __name__ == "__main__":
    cli()
