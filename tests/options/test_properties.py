# topmark:header:start
#
#   project      : RoboCmd
#   file         : test_properties.py
#   file_relpath : tests/options/test_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the letter-code families: file/directory properties and attributes."""

from __future__ import annotations

import functools

from robocmd.core.flagset import combine, combine_all, render
from robocmd.options import DirectoryProperties, FileAttributes, FileProperties
from tests.conftest import parametrize


def test_scenario_c_all_file_properties_in_fixed_order() -> None:
    """'all' renders DATSOU regardless of construction order."""
    direct = FileProperties.all()
    folded = functools.reduce(
        combine,
        [
            FileProperties.AUDITING_INFO,
            FileProperties.OWNER_INFO,
            FileProperties.NTFS_ACCESS_CONTROL_LIST,
            FileProperties.TIME_STAMPS,
            FileProperties.ATTRIBUTES,
            FileProperties.DATA,
        ],
    )
    assert direct == folded
    assert render(direct) == ["/copy:DATSOU"]
    assert render(folded) == ["/copy:DATSOU"]


@parametrize(
    ("value", "expected"),
    [
        (FileProperties.DATA, ["/copy:D"]),
        (combine(FileProperties.TIME_STAMPS, FileProperties.DATA), ["/copy:DT"]),
        (DirectoryProperties.all(), ["/dcopy:DAT"]),
        (combine(DirectoryProperties.TIME_STAMPS, DirectoryProperties.DATA), ["/dcopy:DT"]),
        (FileAttributes.all(), ["RASHCNET"]),
        (combine(FileAttributes.HIDDEN, FileAttributes.SYSTEM), ["SH"]),
    ],
)
def test_letter_code_rendering(value: object, expected: list[str]) -> None:
    assert render(value) == expected  # type: ignore[arg-type]


def test_empty_letter_code_set_renders_bare_prefix() -> None:
    assert render(FileProperties.none()) == ["/copy:"]
    assert FileAttributes.none().codes == ""


def test_decomposition_keeps_letters() -> None:
    value = combine_all(
        [FileAttributes.TEMPORARY, FileAttributes.ARCHIVE, FileAttributes.READ_ONLY]
    )
    assert [single.codes for single in value.single_variants()] == ["R", "A", "T"]
    assert value.codes == "RAT"
