# topmark:header:start
#
#   project      : RoboCmd
#   file         : runner.py
#   file_relpath : src/robocmd/execution/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the external copy tool for a `RobocopyCommand`.

The runner is injectable: any callable with the signature of `subprocess.run` works,
which lets tests exercise the full path without spawning the real tool.

Failures are propagated, never retried:

- the process cannot be started (`OSError`) -> `RobocopyLaunchError`;
- the process is terminated by a signal (negative return code) -> `RobocopyTerminatedError`;
- the exit status is outside 0..16 -> `UnrecognizedExitCodeError`.

The failure tier (8..16) is *not* raised here: `RobocopyResult.outcome` carries the
`ErrExitCode` so callers can branch on it. `RobocopyCommand.execute()` raises instead.
"""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from robocmd.config.logging import get_logger
from robocmd.constants import DEFAULT_EXECUTABLE, ENV_EXECUTABLE
from robocmd.core.errors import RobocopyLaunchError, RobocopyTerminatedError
from robocmd.core.exit_codes import ErrExitCode, OkExitCode, classify_exit_code

if TYPE_CHECKING:
    from collections.abc import Callable

    from robocmd.command.model import RobocopyCommand
    from robocmd.config.logging import RobocmdLogger

logger: RobocmdLogger = get_logger(__name__)


def resolve_executable(executable: str | None = None) -> str:
    """Return the executable to launch.

    Resolution order: the explicit argument, then the ``ROBOCMD_EXECUTABLE``
    environment variable, then ``robocopy``.
    """
    if executable:
        return executable
    return os.environ.get(ENV_EXECUTABLE) or DEFAULT_EXECUTABLE


@dataclass(frozen=True)
class RobocopyResult:
    """Result of one run of the external tool.

    Attributes:
        argv (tuple[str, ...]): The process argument vector that was launched.
        returncode (int): The raw exit status.
        outcome (OkExitCode | ErrExitCode): The classified exit status.
        stdout (str | None): Captured standard output (when capturing).
        stderr (str | None): Captured standard error (when capturing).
    """

    argv: tuple[str, ...]
    returncode: int
    outcome: OkExitCode | ErrExitCode
    stdout: str | None = None
    stderr: str | None = None

    @property
    def succeeded(self) -> bool:
        """True for success-tier outcomes (0..7)."""
        return isinstance(self.outcome, OkExitCode)


def run_robocopy(
    command: RobocopyCommand,
    *,
    executable: str | None = None,
    capture_output: bool = False,
    runner: Callable[..., subprocess.CompletedProcess[Any]] = subprocess.run,
) -> RobocopyResult:
    """Run the external tool for ``command`` and classify its exit status.

    Args:
        command (RobocopyCommand): The command to run.
        executable (str | None): Executable name or path; see `resolve_executable`.
        capture_output (bool): Capture stdout/stderr as text instead of inheriting them.
        runner (Callable[..., subprocess.CompletedProcess[Any]]): Process runner with the
            signature of `subprocess.run`.

    Returns:
        RobocopyResult: The argument vector, raw status and classified outcome.

    Raises:
        RobocopyLaunchError: If the process cannot be started.
        RobocopyTerminatedError: If the process is terminated by a signal.
        UnrecognizedExitCodeError: If the exit status is outside 0..16.
    """
    argv: list[str] = command.to_argv(executable)
    logger.debug("Launching: %s", subprocess.list2cmdline(argv))

    try:
        completed = runner(
            argv,
            capture_output=capture_output,
            text=True,
            check=False,
        )
    except OSError as exc:
        logger.error("Cannot launch %s: %s", argv[0], exc)
        raise RobocopyLaunchError(argv, str(exc)) from exc

    returncode: int = completed.returncode
    if returncode < 0:
        logger.error("%s terminated by signal %d", argv[0], -returncode)
        raise RobocopyTerminatedError(argv, -returncode)

    outcome: OkExitCode | ErrExitCode = classify_exit_code(returncode)
    logger.debug("%s exited with %d (%s)", argv[0], returncode, outcome.name)
    return RobocopyResult(
        argv=tuple(argv),
        returncode=returncode,
        outcome=outcome,
        stdout=completed.stdout if capture_output else None,
        stderr=completed.stderr if capture_output else None,
    )
