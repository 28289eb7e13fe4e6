# topmark:header:start
#
#   project      : RoboCmd
#   file         : outcomes.py
#   file_relpath : src/robocmd/rendering/outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-facing presentation of classified exit codes.

This module layers terminal presentation (severity buckets and ANSI coloring) on top of
the pure classification in `robocmd.core.exit_codes`. It is Click-free, so it can be
reused from tests and other frontends.
"""

from __future__ import annotations

from yachalk import chalk

from robocmd.core.exit_codes import ErrExitCode, OkExitCode
from robocmd.rendering.colored_enum import ColoredStrEnum


class OutcomeSeverity(ColoredStrEnum):
    """Display bucket of an exit outcome."""

    CLEAN = ("clean", chalk.green)
    EXTRAS = ("extras", chalk.yellow)
    MISMATCHES = ("mismatches", chalk.yellow_bright)
    FAILURE = ("failure", chalk.red_bright)


def severity_of(outcome: OkExitCode | ErrExitCode) -> OutcomeSeverity:
    """Return the display bucket for a classified outcome.

    Args:
        outcome (OkExitCode | ErrExitCode): The classified outcome.

    Returns:
        OutcomeSeverity: CLEAN for 0..1, EXTRAS for 2..3, MISMATCHES for 4..7,
        FAILURE for 8..16.
    """
    if isinstance(outcome, ErrExitCode):
        return OutcomeSeverity.FAILURE
    if outcome.mismatches:
        return OutcomeSeverity.MISMATCHES
    if outcome.extra_found:
        return OutcomeSeverity.EXTRAS
    return OutcomeSeverity.CLEAN


def describe_outcome(outcome: OkExitCode | ErrExitCode) -> str:
    """Return a one-line human description of ``outcome``.

    Example: ``"5 SOME_COPIES_MISMATCHES (success): some copies, mismatches"``.
    """
    conditions: list[str] = []
    if outcome.is_fatal:
        conditions.append("fatal error, no changes")
    if outcome.some_copies:
        conditions.append("some copies")
    if outcome.extra_found:
        conditions.append("extra found")
    if outcome.mismatches:
        conditions.append("mismatches")
    if outcome.failed and not outcome.is_fatal:
        conditions.append("failures")
    tier = "failure" if isinstance(outcome, ErrExitCode) else "success"
    detail = ", ".join(conditions) if conditions else "no change"
    return f"{int(outcome)} {outcome.name} ({tier}): {detail}"


def render_outcome(outcome: OkExitCode | ErrExitCode, *, color: bool = True) -> str:
    """Return `describe_outcome` text, colored by severity when ``color`` is True."""
    text = describe_outcome(outcome)
    if not color:
        return text
    return severity_of(outcome).color(text)
