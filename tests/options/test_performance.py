# topmark:header:start
#
#   project      : RoboCmd
#   file         : test_performance.py
#   file_relpath : tests/options/test_performance.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for performance options, performance choices and retry settings."""

from __future__ import annotations

import pytest

from robocmd.core.errors import PerformanceChoiceMismatchError
from robocmd.core.flagset import combine, decompose, render
from robocmd.options import PerformanceChoice, PerformanceOptions, PerformanceTag, RetrySettings
from tests.conftest import parametrize


@parametrize("count", [0, 129, -1])
def test_thread_count_range(count: int) -> None:
    with pytest.raises(ValueError):
        PerformanceChoice.threads(count)


def test_inter_packet_gap_must_be_non_negative() -> None:
    assert PerformanceChoice.inter_packet_gap(0).token() == "/ipg:0"
    with pytest.raises(ValueError):
        PerformanceChoice.inter_packet_gap(-5)


def test_choice_tokens() -> None:
    assert PerformanceChoice.threads(1).token() == "/MT:1"
    assert PerformanceChoice.threads(128).token() == "/MT:128"
    assert PerformanceChoice.DEFAULT.token() is None


def test_default_yields_to_concrete_choice() -> None:
    threads = PerformanceOptions.with_choice(PerformanceChoice.threads(16))
    merged = combine(PerformanceOptions.DONT_OFFLOAD, threads)
    assert merged.choice == PerformanceChoice.threads(16)
    assert render(merged) == ["/MT:16", "/nooffload"]


def test_equal_concrete_choices_combine() -> None:
    a = PerformanceOptions.of(PerformanceTag.DONT_OFFLOAD, choice=PerformanceChoice.threads(8))
    b = PerformanceOptions.of(
        PerformanceTag.REQUEST_NETWORK_COMPRESSION, choice=PerformanceChoice.threads(8)
    )
    assert render(combine(a, b)) == ["/MT:8", "/nooffload", "/compress"]


def test_conflicting_choices_raise_at_combination_time() -> None:
    a = PerformanceOptions.with_choice(PerformanceChoice.threads(8))
    b = PerformanceOptions.with_choice(PerformanceChoice.inter_packet_gap(50))
    with pytest.raises(PerformanceChoiceMismatchError) as excinfo:
        combine(a, b)
    assert isinstance(excinfo.value, ValueError)
    with pytest.raises(PerformanceChoiceMismatchError):
        combine(a, PerformanceOptions.with_choice(PerformanceChoice.threads(4)))


def test_decomposition_renders_choice_once() -> None:
    value = PerformanceOptions.of(
        PerformanceTag.COPY_RATHER_THAN_FOLLOW_LINK,
        PerformanceTag.DONT_OFFLOAD,
        choice=PerformanceChoice.inter_packet_gap(20),
    )
    singles = decompose(value)
    assert [s.tags for s in singles] == [
        (PerformanceTag.CHOICE,),
        (PerformanceTag.DONT_OFFLOAD,),
        (PerformanceTag.COPY_RATHER_THAN_FOLLOW_LINK,),
    ]
    assert render(value) == ["/ipg:20", "/nooffload", "/sl"]


def test_choice_tag_is_not_a_switch() -> None:
    with pytest.raises(ValueError):
        PerformanceOptions.of(PerformanceTag.CHOICE)


def test_retry_settings_render_in_order() -> None:
    settings = RetrySettings(retries=3, wait=10, save_as_default=True, await_share_names=True)
    assert settings.render() == [
        "/r:3",
        "/w:10",
        "/reg",
        "/tbd",
    ]
    assert RetrySettings().render() == []
    assert RetrySettings(wait=0).render() == ["/w:0"]


def test_retry_settings_reject_negative_values() -> None:
    with pytest.raises(ValueError):
        RetrySettings(retries=-1)
