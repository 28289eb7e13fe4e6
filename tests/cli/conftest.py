# topmark:header:start
#
#   project      : RoboCmd
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running RoboCmd with `click.testing.CliRunner`.

`run_cli()` invokes the Click group in-process. Commands that execute the external
tool are pointed at a `FakeRunner` through `patch_runner()`, so no process is spawned.
"""

from __future__ import annotations

import functools
from collections.abc import Iterator
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from robocmd.cli.main import cli
from robocmd.config import logging
from robocmd.execution.runner import run_robocopy

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tests.conftest import FakeRunner


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI with ``argv`` (color disabled) and return the result."""
    runner = CliRunner()
    return runner.invoke(cli, ["--no-color", *argv])


def patch_runner(monkeypatch: pytest.MonkeyPatch, fake: FakeRunner) -> None:
    """Make the `run` command launch ``fake`` instead of the real tool."""
    monkeypatch.setattr(
        "robocmd.cli.commands.run.run_robocopy",
        functools.partial(run_robocopy, runner=fake),
    )


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Re-attach logging to the test session after a command rebound it to CliRunner."""
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)
