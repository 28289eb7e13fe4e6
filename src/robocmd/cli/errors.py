# topmark:header:start
#
#   project      : RoboCmd
#   file         : errors.py
#   file_relpath : src/robocmd/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the RoboCmd CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors (`robocmd.core.errors`) are translated
    into these at the command boundary.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from robocmd.cli.exit_codes import ExitCode


class RobocmdCliError(click.ClickException):
    """Base class for all RoboCmd CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        console: Any = None
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
        if console is not None:
            console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
            return
        super().show(file)


class RobocmdUsageError(RobocmdCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class RobocmdConfigError(RobocmdCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class RobocmdUnavailableError(RobocmdCliError):
    """Error when the external tool cannot be launched."""

    exit_code = ExitCode.UNAVAILABLE


class RobocmdSoftwareError(RobocmdCliError):
    """Error for unclassifiable exit statuses and abnormal termination of the tool."""

    exit_code = ExitCode.SOFTWARE_ERROR
