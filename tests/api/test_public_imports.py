# topmark:header:start
#
#   project      : RoboCmd
#   file         : test_public_imports.py
#   file_relpath : tests/api/test_public_imports.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The public facade exports exactly what it lists, and the core flow works through it."""

from __future__ import annotations

from pathlib import Path

from robocmd import api


def test_all_names_are_importable() -> None:
    missing = [name for name in api.__all__ if not hasattr(api, name)]
    assert missing == []
    assert len(set(api.__all__)) == len(api.__all__)


def test_build_render_and_classify_through_the_facade() -> None:
    builder = api.MutableRobocopyCommand(source=Path("in"), destination=Path("out"))
    builder.include(api.FileProperties.DATA).include(api.FileProperties.TIME_STAMPS)
    builder.include(api.PerformanceOptions.with_choice(api.PerformanceChoice.threads(8)))
    builder.empty_dir_copy = True
    command = builder.freeze()

    assert api.render_command(command) == ["in", "out", "/e", "/copy:DT", "/MT:8"]
    assert api.classify_exit_code(1) is api.OkExitCode.SOME_COPIES
    attributes = api.combine(api.FileAttributes.HIDDEN, api.FileAttributes.READ_ONLY)
    assert api.render(attributes) == ["RH"]
