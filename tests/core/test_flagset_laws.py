# topmark:header:start
#
#   project      : RoboCmd
#   file         : test_flagset_laws.py
#   file_relpath : tests/core/test_flagset_laws.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the flag-set algebra.

Laws checked for every option family:
1) decomposing, rendering every single flag and concatenating reproduces the rendering
   of the combined value (letter-level for letter-code families);
2) combination is commutative in presence and payload content;
3) combination is associative;
4) the family's empty value is the identity of combination.
"""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from robocmd.core.errors import PerformanceChoiceMismatchError
from robocmd.core.flagset import CodeSet, FlagSet, combine, decompose, render
from robocmd.options import (
    DirectoryExclusionFilter,
    FileExclusionFilter,
    PerformanceChoice,
    PerformanceOptions,
)
from tests.strategies_robocmd import (
    TOTAL_FAMILIES,
    any_flag_set,
    compatible_performance_triples,
    concrete_choices,
    performance_options,
)

FAMILY_IDS: list[str] = sorted(TOTAL_FAMILIES)


def _content(value: FlagSet[Any]) -> Any:
    """Order-insensitive view of a value: path/name lists compare as multisets."""
    if isinstance(value, FileExclusionFilter):
        names = None if value.path_or_name is None else sorted(value.path_or_name)
        return (value.tags, value.attributes, names)
    if isinstance(value, DirectoryExclusionFilter):
        names = None if value.path_or_name is None else sorted(value.path_or_name)
        return (value.tags, names)
    return value


@given(value=any_flag_set())
def test_round_trip_law(value: FlagSet[Any]) -> None:
    """Rendering the decomposition reproduces the rendering of the whole value."""
    singles = decompose(value)
    assert all(single.is_single for single in singles)
    assert tuple(single.tags[0] for single in singles) == value.tags

    if isinstance(value, CodeSet):
        # Letter-code families render the whole set as one token.
        assert value.codes == "".join(single.codes for single in singles)
        assert render(value) == [f"{value.prefix}{value.codes}"]
    else:
        tokens: list[str] = []
        for single in singles:
            tokens.extend(render(single))
        assert render(value) == tokens


@given(value=any_flag_set())
def test_single_value_decomposes_to_itself(value: FlagSet[Any]) -> None:
    for single in decompose(value):
        assert decompose(single) == (single,)


@pytest.mark.parametrize("family", FAMILY_IDS)
@given(data=st.data())
def test_commutativity(family: str, data: st.DataObject) -> None:
    strategy = TOTAL_FAMILIES[family]
    a = data.draw(strategy)
    b = data.draw(strategy)
    assert _content(combine(a, b)) == _content(combine(b, a))


@pytest.mark.parametrize("family", FAMILY_IDS)
@given(data=st.data())
def test_associativity(family: str, data: st.DataObject) -> None:
    strategy = TOTAL_FAMILIES[family]
    a, b, c = data.draw(strategy), data.draw(strategy), data.draw(strategy)
    assert combine(combine(a, b), c) == combine(a, combine(b, c))


@pytest.mark.parametrize("family", FAMILY_IDS)
@given(data=st.data())
def test_identity(family: str, data: st.DataObject) -> None:
    value = data.draw(TOTAL_FAMILIES[family])
    empty = type(value).none()
    assert combine(value, empty) == value
    assert combine(empty, value) == value


@given(triple=compatible_performance_triples())
def test_performance_laws_for_compatible_choices(
    triple: tuple[PerformanceOptions, PerformanceOptions, PerformanceOptions],
) -> None:
    a, b, c = triple
    assert combine(a, b) == combine(b, a)
    assert combine(combine(a, b), c) == combine(a, combine(b, c))
    assert combine(a, PerformanceOptions.none()) == a


@given(
    left=performance_options(concrete_choices),
    right=performance_options(concrete_choices),
)
def test_performance_conflicting_choices_fail_both_ways(
    left: PerformanceOptions, right: PerformanceOptions
) -> None:
    if left.choice == right.choice:
        assert combine(left, right).choice == left.choice
        return
    with pytest.raises(PerformanceChoiceMismatchError):
        combine(left, right)
    with pytest.raises(PerformanceChoiceMismatchError):
        combine(right, left)


@given(value=performance_options(st.just(PerformanceChoice.DEFAULT)))
def test_default_choice_renders_no_choice_token(value: PerformanceOptions) -> None:
    assert not any(token.startswith(("/MT:", "/ipg:")) for token in render(value))
