# topmark:header:start
#
#   project      : RoboCmd
#   file         : logging.py
#   file_relpath : src/robocmd/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RoboCmd's own diagnostics: a TRACE level below DEBUG and colored stderr output.

The library is silent by default (CRITICAL). ``ROBOCMD_LOG_LEVEL`` or the CLI's
``-v`` flags lower the threshold; the flag-set algebra logs its combinations and
renderings at TRACE, loading and execution at DEBUG.

Note:
    This is *Python* logging for RoboCmd itself. The log file written by the external
    copy tool is configured through `robocmd.options.log_output.LoggingSettings`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from robocmd.constants import ENV_LOG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

logging.addLevelName(TRACE_LEVEL, "TRACE")


class RobocmdLogger(logging.Logger):
    """Logger with a `trace()` method for the TRACE level."""

    def trace(self, msg: object, *args: object) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, stacklevel=2)


logging.setLoggerClass(RobocmdLogger)

# Threshold messages show only the text; DEBUG and TRACE also show the call site
LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
SOURCE_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# Checked from the most severe level down; anything below DEBUG is TRACE
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[..., str]], ...]] = (
    (logging.ERROR, chalk.red_bright),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
)

_LEVEL_NAMES: Final[Mapping[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by its level."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.blue(message)


def parse_log_level(value: str) -> int | None:
    """Return the level for a name (``"trace"``, ``"DEBUG"``) or number, or None."""
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``ROBOCMD_LOG_LEVEL``, or None when unset or unknown."""
    val = os.environ.get(ENV_LOG_LEVEL)
    return parse_log_level(val) if val else None


def setup_logging(level: int | None = None) -> None:
    """Send RoboCmd diagnostics to stderr at ``level``.

    Args:
        level (int | None): Threshold; when None, ``ROBOCMD_LOG_LEVEL`` is consulted
            and CRITICAL is used when it is unset.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stdout carries rendered argument vectors and TOML dumps
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        ChalkFormatter(LOG_FORMAT if level >= logging.INFO else SOURCE_LOG_FORMAT)
    )
    root_logger.addHandler(handler)


def get_logger(name: str) -> RobocmdLogger:
    """Return the `RobocmdLogger` named ``name`` (usually the module's ``__name__``)."""
    return cast("RobocmdLogger", logging.getLogger(name))
