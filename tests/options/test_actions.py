# topmark:header:start
#
#   project      : RoboCmd
#   file         : test_actions.py
#   file_relpath : tests/options/test_actions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for copy mode, move mode, post-copy actions, filesystem and tool log options."""

from __future__ import annotations

from pathlib import Path

from robocmd.core.flagset import combine, decompose, render
from robocmd.options import (
    CopyMode,
    FileAttributes,
    FilesystemOptions,
    LoggingSettings,
    Move,
    PostCopyActions,
)
from tests.conftest import parametrize


@parametrize(
    ("mode", "token"),
    [
        (CopyMode.RESTARTABLE, "/z"),
        (CopyMode.BACKUP, "/b"),
        (CopyMode.RESTARTABLE_WITH_BACKUP_FALLBACK, "/zb"),
        (Move.FILES, "/mov"),
        (Move.FILES_AND_DIRS, "/move"),
    ],
)
def test_one_of_choices(mode: CopyMode | Move, token: str) -> None:
    assert mode.render() == [token]


def test_post_copy_actions_keep_their_slots() -> None:
    add = PostCopyActions.add_attributes(FileAttributes.READ_ONLY)
    remove = PostCopyActions.remove_attributes(
        combine(FileAttributes.ARCHIVE, FileAttributes.HIDDEN)
    )
    assert render(combine(remove, add)) == ["/a+:R", "/a-:AH"]
    assert decompose(combine(add, remove)) == (add, remove)


def test_post_copy_attribute_payloads_merge_per_slot() -> None:
    merged = combine(
        PostCopyActions.add_attributes(FileAttributes.SYSTEM),
        PostCopyActions.add_attributes(FileAttributes.READ_ONLY),
    )
    assert merged.removed is None
    assert render(merged) == ["/a+:RS"]


def test_empty_post_copy_actions_render_nothing() -> None:
    assert render(PostCopyActions.none()) == []


def test_filesystem_options() -> None:
    assert render(FilesystemOptions.all()) == ["/fat", "/fft", "/256"]


@parametrize(
    ("unicode", "append", "token"),
    [
        (False, False, "/log:copy.log"),
        (False, True, "/log+:copy.log"),
        (True, False, "/unilog:copy.log"),
        (True, True, "/unilog+:copy.log"),
    ],
)
def test_logging_settings(unicode: bool, append: bool, token: str) -> None:
    assert LoggingSettings(Path("copy.log"), unicode=unicode, append=append).render() == [token]
