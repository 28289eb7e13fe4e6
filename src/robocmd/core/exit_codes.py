# topmark:header:start
#
#   project      : RoboCmd
#   file         : exit_codes.py
#   file_relpath : src/robocmd/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Classification of the external copy tool's exit status.

The tool reports its result as a small bit field:

| Bit | Value | Meaning                                   |
|-----|-------|-------------------------------------------|
| 0   | 1     | some files were copied                    |
| 1   | 2     | extra files or directories were found     |
| 2   | 4     | mismatched files or directories detected  |
| 3   | 8     | some copies failed                        |

Codes 0..7 are success outcomes (`OkExitCode`), 8..15 are the same conditions with the
failure bit set, and 16 means that no changes were made because of a fatal error.
The failure family is `ErrExitCode`. Any other status cannot be classified and raises
`UnrecognizedExitCodeError`; it is never coerced to a nearby outcome.

Usage:
    ```python
    try:
        outcome = check_exit_code(status)
    except RobocopyFailedError as exc:
        handle_failure(exc.exit_code)
    ```
"""

from __future__ import annotations

from enum import IntEnum

from robocmd.core.errors import RobocopyFailedError, UnrecognizedExitCodeError

SOME_COPIES_BIT: int = 0x01
EXTRA_FOUND_BIT: int = 0x02
MISMATCHES_BIT: int = 0x04
FAIL_BIT: int = 0x08
FATAL_ERROR_CODE: int = 16


class _ExitCodeBits:
    """Named accessors for the condition bits of an exit code (mixed into `IntEnum`s)."""

    @property
    def some_copies(self) -> bool:
        """Some files were copied successfully."""
        return bool(int(self) & SOME_COPIES_BIT) and int(self) != FATAL_ERROR_CODE

    @property
    def extra_found(self) -> bool:
        """Extra files or directories were detected in the destination."""
        return bool(int(self) & EXTRA_FOUND_BIT) and int(self) != FATAL_ERROR_CODE

    @property
    def mismatches(self) -> bool:
        """Mismatched files or directories were detected."""
        return bool(int(self) & MISMATCHES_BIT) and int(self) != FATAL_ERROR_CODE

    @property
    def failed(self) -> bool:
        """Some copies failed, or a fatal error occurred."""
        return bool(int(self) & FAIL_BIT) or int(self) == FATAL_ERROR_CODE

    @property
    def is_fatal(self) -> bool:
        """No changes were made because of a fatal error."""
        return int(self) == FATAL_ERROR_CODE


class OkExitCode(_ExitCodeBits, IntEnum):
    """Success outcomes (0..7)."""

    NO_CHANGE = 0
    SOME_COPIES = 1
    EXTRA_FOUND = 2
    SOME_COPIES_EXTRA_FOUND = 3
    MISMATCHES = 4
    SOME_COPIES_MISMATCHES = 5
    MISMATCHES_EXTRA_FOUND = 6
    SOME_COPIES_MISMATCHES_EXTRA_FOUND = 7


class ErrExitCode(_ExitCodeBits, IntEnum):
    """Failure outcomes (8..15 carry the failure bit; 16 is a fatal error)."""

    FAIL = 8
    SOME_COPIES_FAIL = 9
    FAIL_EXTRA_FOUND = 10
    SOME_COPIES_FAIL_EXTRA_FOUND = 11
    FAIL_MISMATCHES = 12
    SOME_COPIES_FAIL_MISMATCHES = 13
    FAIL_MISMATCHES_EXTRA_FOUND = 14
    SOME_COPIES_FAIL_MISMATCHES_EXTRA_FOUND = 15
    NO_CHANGE_FATAL_ERROR = 16


def classify_exit_code(code: int) -> OkExitCode | ErrExitCode:
    """Classify a raw exit status.

    Args:
        code (int): The raw status returned by the external tool.

    Returns:
        OkExitCode | ErrExitCode: `OkExitCode` for 0..7, `ErrExitCode` for 8..16.

    Raises:
        UnrecognizedExitCodeError: If ``code`` is outside 0..16.
    """
    if 0 <= code <= OkExitCode.SOME_COPIES_MISMATCHES_EXTRA_FOUND:
        return OkExitCode(code)
    if FAIL_BIT <= code <= FATAL_ERROR_CODE:
        return ErrExitCode(code)
    raise UnrecognizedExitCodeError(code)


def check_exit_code(code: int) -> OkExitCode:
    """Classify a raw exit status and raise for the failure tier.

    Args:
        code (int): The raw status returned by the external tool.

    Returns:
        OkExitCode: The success outcome.

    Raises:
        RobocopyFailedError: If ``code`` is a failure outcome (8..16).
        UnrecognizedExitCodeError: If ``code`` is outside 0..16.
    """
    outcome: OkExitCode | ErrExitCode = classify_exit_code(code)
    if isinstance(outcome, ErrExitCode):
        raise RobocopyFailedError(outcome)
    return outcome
