# topmark:header:start
#
#   project      : RoboCmd
#   file         : test_outcomes.py
#   file_relpath : tests/rendering/test_outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the human-facing outcome presentation."""

from __future__ import annotations

from robocmd.core.exit_codes import classify_exit_code
from robocmd.rendering.outcomes import (
    OutcomeSeverity,
    describe_outcome,
    render_outcome,
    severity_of,
)
from tests.conftest import parametrize


@parametrize(
    ("code", "severity"),
    [
        (0, OutcomeSeverity.CLEAN),
        (1, OutcomeSeverity.CLEAN),
        (2, OutcomeSeverity.EXTRAS),
        (3, OutcomeSeverity.EXTRAS),
        (4, OutcomeSeverity.MISMATCHES),
        (7, OutcomeSeverity.MISMATCHES),
        (8, OutcomeSeverity.FAILURE),
        (16, OutcomeSeverity.FAILURE),
    ],
)
def test_severity_buckets(code: int, severity: OutcomeSeverity) -> None:
    assert severity_of(classify_exit_code(code)) is severity


def test_describe_outcome() -> None:
    assert describe_outcome(classify_exit_code(5)) == (
        "5 SOME_COPIES_MISMATCHES (success): some copies, mismatches"
    )
    assert describe_outcome(classify_exit_code(0)) == "0 NO_CHANGE (success): no change"
    assert describe_outcome(classify_exit_code(16)) == (
        "16 NO_CHANGE_FATAL_ERROR (failure): fatal error, no changes"
    )
    assert describe_outcome(classify_exit_code(10)).endswith("(failure): extra found, failures")


def test_render_outcome_without_color_is_plain() -> None:
    outcome = classify_exit_code(2)
    assert render_outcome(outcome, color=False) == describe_outcome(outcome)
    assert describe_outcome(outcome) in render_outcome(outcome, color=True)
