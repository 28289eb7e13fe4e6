# topmark:header:start
#
#   project      : RoboCmd
#   file         : test_exit_codes.py
#   file_relpath : tests/core/test_exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the exit-status classifier."""

from __future__ import annotations

import pytest

from robocmd.core.errors import RobocopyFailedError, UnrecognizedExitCodeError
from robocmd.core.exit_codes import ErrExitCode, OkExitCode, check_exit_code, classify_exit_code
from tests.conftest import parametrize


def test_classifier_is_total_and_injective_on_0_to_16() -> None:
    outcomes = [classify_exit_code(code) for code in range(17)]
    assert [int(o) for o in outcomes] == list(range(17))
    assert len({(type(o), o.name) for o in outcomes}) == 17
    assert all(isinstance(o, OkExitCode) for o in outcomes[:8])
    assert all(isinstance(o, ErrExitCode) for o in outcomes[8:])


@parametrize("code", [-1, 17, 127, -128, 255, 256 + 5])
def test_unclassifiable_codes_raise_with_the_code(code: int) -> None:
    with pytest.raises(UnrecognizedExitCodeError) as excinfo:
        classify_exit_code(code)
    assert excinfo.value.code == code
    assert excinfo.value.message == "Invalid exit code"


def test_scenario_d_success_and_failure_families() -> None:
    five = classify_exit_code(5)
    assert five is OkExitCode.SOME_COPIES_MISMATCHES
    assert five.some_copies and five.mismatches
    assert not five.extra_found and not five.failed

    thirteen = classify_exit_code(13)
    assert thirteen is ErrExitCode.SOME_COPIES_FAIL_MISMATCHES
    assert thirteen.some_copies and thirteen.mismatches and thirteen.failed
    assert not thirteen.extra_found and not thirteen.is_fatal


def test_fatal_error_has_no_condition_bits() -> None:
    fatal = classify_exit_code(16)
    assert fatal is ErrExitCode.NO_CHANGE_FATAL_ERROR
    assert fatal.is_fatal and fatal.failed
    assert not (fatal.some_copies or fatal.extra_found or fatal.mismatches)


def test_check_exit_code_returns_success_outcomes() -> None:
    assert check_exit_code(3) is OkExitCode.SOME_COPIES_EXTRA_FOUND


def test_check_exit_code_raises_for_failure_tier() -> None:
    with pytest.raises(RobocopyFailedError) as excinfo:
        check_exit_code(8)
    assert excinfo.value.exit_code is ErrExitCode.FAIL
