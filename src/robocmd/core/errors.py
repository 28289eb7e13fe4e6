# topmark:header:start
#
#   project      : RoboCmd
#   file         : errors.py
#   file_relpath : src/robocmd/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the RoboCmd library.

The option algebra is total except for one family: combining performance options whose
concrete choices differ raises `PerformanceChoiceMismatchError` at combination time.
Exit-code handling distinguishes the failure tier (`RobocopyFailedError`) from codes
that cannot be classified at all (`UnrecognizedExitCodeError`). Launch and signal
failures of the external process are propagated, never retried.

CLI-facing errors (with process exit codes) live in `robocmd.cli.errors`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from robocmd.core.exit_codes import ErrExitCode

PERFORMANCE_CHOICE_MISMATCH: str = "Performance choices do not match."
INVALID_EXIT_CODE: str = "Invalid exit code"


class RobocmdError(Exception):
    """Base class for all RoboCmd library errors."""


class PerformanceChoiceMismatchError(RobocmdError, ValueError):
    """Two performance options carry different concrete choices (threads vs. gap)."""

    def __init__(self, left: object, right: object) -> None:
        super().__init__(f"{PERFORMANCE_CHOICE_MISMATCH} ({left} vs. {right})")
        self.left = left
        self.right = right


class CommandValidationError(RobocmdError, ValueError):
    """A command builder holds values that cannot be frozen into a command."""


class ConfigError(RobocmdError):
    """A TOML configuration could not be turned into a command.

    Attributes:
        key (str | None): Dotted configuration key the problem relates to.
    """

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(f"{key}: {message}" if key else message)
        self.key = key


class UnrecognizedExitCodeError(RobocmdError):
    """The external tool returned a status outside the documented 0..16 range.

    Attributes:
        message (str): Fixed diagnostic text.
        code (int): The offending raw exit status.
    """

    def __init__(self, code: int, message: str = INVALID_EXIT_CODE) -> None:
        super().__init__(f"{message}: {code}")
        self.message = message
        self.code = code


class RobocopyFailedError(RobocmdError):
    """The external tool exited with a failure-tier status (8..16).

    Attributes:
        exit_code (ErrExitCode): The classified failure outcome.
    """

    def __init__(self, exit_code: ErrExitCode) -> None:
        super().__init__(f"robocopy failed: {exit_code.name} ({int(exit_code)})")
        self.exit_code = exit_code


class RobocopyLaunchError(RobocmdError):
    """The external tool could not be started (missing executable, permissions, ...)."""

    def __init__(self, argv: Sequence[str], reason: str) -> None:
        super().__init__(f"cannot launch {argv[0] if argv else '<empty argv>'}: {reason}")
        self.argv = tuple(argv)
        self.reason = reason


class RobocopyTerminatedError(RobocmdError):
    """The external tool was terminated by a signal before reporting a status."""

    def __init__(self, argv: Sequence[str], signal_number: int) -> None:
        super().__init__(f"{argv[0] if argv else 'robocopy'} terminated by signal {signal_number}")
        self.argv = tuple(argv)
        self.signal_number = signal_number
