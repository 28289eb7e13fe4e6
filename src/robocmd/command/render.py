# topmark:header:start
#
#   project      : RoboCmd
#   file         : render.py
#   file_relpath : src/robocmd/command/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Assemble the full argument vector of a `RobocopyCommand`.

Order of the vector:

1. source, destination, explicit file patterns (the tool's calling convention);
2. copy mode, unbuffered I/O (``/j``);
3. recursion: ``/mir /e`` when empty-directory copy, purge and mirror security are all
   requested; otherwise ``/e`` (or ``/s``) followed by ``/purge`` when purging;
4. ``/lev:n``, ``/create``;
5. file properties, directory properties;
6. filter, filesystem options, performance options, retry settings;
7. tool log output, move mode, post-copy actions.

Absent families contribute no tokens. The result depends only on the command's values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from robocmd.config.logging import get_logger

if TYPE_CHECKING:
    from robocmd.command.model import RobocopyCommand
    from robocmd.config.logging import RobocmdLogger

logger: RobocmdLogger = get_logger(__name__)


def is_mirror(command: RobocopyCommand) -> bool:
    """Return True when the command collapses into mirror mode."""
    return command.empty_dir_copy and command.purge and command.mirror_security


def recursion_tokens(command: RobocopyCommand) -> list[str]:
    """Return the recursion and purge tokens.

    Args:
        command (RobocopyCommand): The command to render.

    Returns:
        list[str]: ``["/mir", "/e"]`` in mirror mode; otherwise ``["/e"]`` or ``["/s"]``,
        followed by ``"/purge"`` when purging.
    """
    if is_mirror(command):
        return ["/mir", "/e"]
    tokens: list[str] = ["/e" if command.empty_dir_copy else "/s"]
    if command.purge:
        tokens.append("/purge")
    return tokens


def render_options(command: RobocopyCommand) -> list[str]:
    """Return the option tokens of ``command`` (everything after the positional arguments)."""
    tokens: list[str] = []

    if command.copy_mode is not None:
        tokens.extend(command.copy_mode.render())
    if command.unbuffered:
        tokens.append("/j")

    tokens.extend(recursion_tokens(command))

    if command.levels is not None:
        tokens.append(f"/lev:{command.levels}")
    if command.create_only:
        tokens.append("/create")

    for family in (
        command.file_properties,
        command.dir_properties,
        command.filter,
        command.filesystem,
        command.performance,
        command.retry,
        command.logging,
        command.move,
        command.post_copy,
    ):
        if family is None:
            continue
        rendered: list[str] = family.render()
        logger.trace("%s -> %s", type(family).__name__, rendered)
        tokens.extend(rendered)
    return tokens


def render_command(command: RobocopyCommand) -> list[str]:
    """Return the full argument vector (without the executable name).

    Args:
        command (RobocopyCommand): The command to render.

    Returns:
        list[str]: Source, destination, file patterns, then the option tokens.
    """
    args: list[str] = [str(command.source), str(command.destination), *command.files]
    args.extend(render_options(command))
    logger.debug("Rendered %d argument(s): %s", len(args), args)
    return args
