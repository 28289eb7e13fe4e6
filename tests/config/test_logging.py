# topmark:header:start
#
#   project      : RoboCmd
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for RoboCmd's TRACE level, level parsing and colored formatter."""

from __future__ import annotations

import logging

import pytest

from robocmd.config.logging import (
    LOG_FORMAT,
    TRACE_LEVEL,
    ChalkFormatter,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
)
from robocmd.constants import ENV_LOG_LEVEL
from tests.conftest import parametrize


@parametrize(
    ("text", "expected"),
    [
        ("trace", TRACE_LEVEL),
        (" Debug ", logging.DEBUG),
        ("warn", logging.WARNING),
        ("40", logging.ERROR),
        ("loud", None),
    ],
)
def test_parse_log_level(text: str, expected: int | None) -> None:
    assert parse_log_level(text) == expected


def test_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_env_log_level() is None
    monkeypatch.setenv(ENV_LOG_LEVEL, "info")
    assert resolve_env_log_level() == logging.INFO


def test_trace_records_carry_the_trace_level(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(TRACE_LEVEL, logger="robocmd.tests"):
        get_logger("robocmd.tests").trace("combined %d values", 3)
    assert [(r.levelname, r.getMessage()) for r in caplog.records] == [
        ("TRACE", "combined 3 values")
    ]


def test_formatter_keeps_the_message_text() -> None:
    record = logging.LogRecord("robocmd", TRACE_LEVEL, __file__, 1, "vector %s", ("ok",), None)
    assert "[TRACE] vector ok" in ChalkFormatter(LOG_FORMAT).format(record)
