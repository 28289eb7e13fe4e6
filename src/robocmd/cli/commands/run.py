# topmark:header:start
#
#   project      : RoboCmd
#   file         : run.py
#   file_relpath : src/robocmd/cli/commands/run.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RoboCmd `run` command.

Runs the external copy tool and reports the classified outcome. The CLI exit status
is 0 for a success outcome and 1 for a failure outcome; launch problems and
unclassifiable statuses map to the sysexits codes of `ExitCode`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from robocmd.cli.cmd_common import build_command, get_console, is_verbose
from robocmd.cli.errors import RobocmdCliError, RobocmdSoftwareError, RobocmdUnavailableError
from robocmd.cli.options import command_arguments, common_config_options
from robocmd.config.logging import get_logger
from robocmd.core.errors import (
    RobocopyLaunchError,
    RobocopyTerminatedError,
    UnrecognizedExitCodeError,
)
from robocmd.execution.runner import run_robocopy
from robocmd.rendering.outcomes import render_outcome

if TYPE_CHECKING:
    from robocmd.cli.console import ConsoleLike
    from robocmd.command.model import RobocopyCommand
    from robocmd.config.logging import RobocmdLogger
    from robocmd.execution.runner import RobocopyResult

logger: RobocmdLogger = get_logger(__name__)


@click.command(
    name="run",
    help="Run the external copy tool (SOURCE DEST [FILES...]) and report the outcome.",
)
@common_config_options
@click.option(
    "--executable",
    "executable",
    default=None,
    metavar="NAME",
    help="Executable to run (default: ROBOCMD_EXECUTABLE, then 'robocopy').",
)
@command_arguments
def run_command(
    *,
    source: str | None,
    destination: str | None,
    files: tuple[str, ...],
    config_path: str | None,
    no_config: bool,
    executable: str | None,
) -> None:
    """Run the effective command and report its outcome.

    Raises:
        RobocmdCliError: For a failure outcome (exit 1).
        RobocmdUnavailableError: If the tool cannot be launched (exit 69).
        RobocmdSoftwareError: If the status cannot be classified or the tool was
            terminated by a signal (exit 70).
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
    if is_verbose(ctx):
        console.warn(" ".join(command.to_argv(executable)))

    try:
        result: RobocopyResult = run_robocopy(command, executable=executable)
    except RobocopyLaunchError as exc:
        raise RobocmdUnavailableError(str(exc)) from exc
    except (RobocopyTerminatedError, UnrecognizedExitCodeError) as exc:
        raise RobocmdSoftwareError(str(exc)) from exc

    logger.debug("run: %s -> %s", result.argv, result.outcome)
    console.print(render_outcome(result.outcome, color=console.enable_color))
    if not result.succeeded:
        raise RobocmdCliError(f"The copy tool reported a failure (exit code {result.returncode}).")
