# topmark:header:start
#
#   project      : RoboCmd
#   file         : exit_code.py
#   file_relpath : src/robocmd/cli/commands/exit_code.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RoboCmd `exit-code` command.

Explains a raw exit status of the external copy tool. Negative values must follow
``--`` so that Click does not read them as options (``robocmd exit-code -- -1``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from robocmd.cli.cmd_common import get_console, is_verbose
from robocmd.cli.errors import RobocmdUsageError
from robocmd.core.errors import UnrecognizedExitCodeError
from robocmd.core.exit_codes import classify_exit_code
from robocmd.rendering.outcomes import render_outcome, severity_of

if TYPE_CHECKING:
    from robocmd.cli.console import ConsoleLike
    from robocmd.core.exit_codes import ErrExitCode, OkExitCode

_CONDITIONS: tuple[str, ...] = ("some_copies", "extra_found", "mismatches", "failed", "is_fatal")


@click.command(
    name="exit-code",
    help="Explain a raw exit code of the external copy tool.",
)
@click.argument("code", type=int)
def exit_code_command(*, code: int) -> None:
    """Print the tier, name and condition bits of ``code``.

    Raises:
        RobocmdUsageError: If ``code`` is not a status the tool can report.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    try:
        outcome: OkExitCode | ErrExitCode = classify_exit_code(code)
    except UnrecognizedExitCodeError as exc:
        raise RobocmdUsageError(str(exc)) from exc

    console.print(render_outcome(outcome, color=console.enable_color))
    if is_verbose(ctx):
        console.print(f"  severity: {severity_of(outcome).value}")
        for name in _CONDITIONS:
            console.print(f"  {name}: {'yes' if getattr(outcome, name) else 'no'}")
