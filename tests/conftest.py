# topmark:header:start
#
#   project      : RoboCmd
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the RoboCmd test suite.

This file sets up global fixtures and the logging configuration for test runs.

Notes:
    Tests should respect the immutable/mutable command split:

    - Build commands using `robocmd.command.model.MutableRobocopyCommand`, then
      `freeze()` into a `robocmd.command.model.RobocopyCommand`.
    - Do **not** mutate a frozen command. If you need to tweak one, call
      `RobocopyCommand.thaw()`, edit the builder, then `freeze()` again.
"""

from __future__ import annotations

import subprocess
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from robocmd.command.model import MutableRobocopyCommand, RobocopyCommand
from robocmd.config import logging
from robocmd.constants import ENV_EXECUTABLE, ENV_LOG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def clean_robocmd_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell cannot change log levels or the executable.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv(ENV_EXECUTABLE, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so debug paths run during tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an empty project directory (no configuration files above it).

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The working directory of the test.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_command(**overrides: Any) -> RobocopyCommand:
    """Return a frozen command for ``src`` -> ``dst`` with the given field overrides."""
    builder = MutableRobocopyCommand(**{"source": "src", "destination": "dst", **overrides})
    return builder.freeze()


class FakeRunner:
    """Stand-in for `subprocess.run` that records calls and returns a fixed status.

    Attributes:
        returncode (int): Status reported by every call.
        calls (list[tuple[list[str], dict[str, Any]]]): Recorded argv and keyword args.
        error (OSError | None): Raised instead of returning, when set.
    """

    def __init__(
        self,
        returncode: int = 0,
        *,
        stdout: str | None = None,
        error: OSError | None = None,
    ) -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.error = error
        self.calls: list[tuple[list[str], dict[str, Any]]] = []

    def __call__(self, argv: Sequence[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        self.calls.append((list(argv), kwargs))
        if self.error is not None:
            raise self.error
        return subprocess.CompletedProcess(
            args=list(argv),
            returncode=self.returncode,
            stdout=self.stdout,
            stderr=None,
        )
