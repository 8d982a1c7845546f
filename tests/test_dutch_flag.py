from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from episolve.dutch_flag import Color, dutch_flag


def test_color_names_after_partition():
    result = dutch_flag(0, [Color.BLUE, Color.RED, Color.GREEN])
    assert [str(c) for c in result] == ["red", "green", "blue"]


def test_example_with_green_pivot_sorts():
    colors = [Color.RED, Color.BLUE, Color.GREEN, Color.BLUE, Color.BLUE, Color.GREEN]
    original = list(colors)
    result = dutch_flag(2, colors)
    assert result is colors
    assert result == sorted(original)


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_invalid_pivot_raises(index):
    with pytest.raises(ValueError, match=f"invalid pivot index: {index}"):
        dutch_flag(index, [Color.RED, Color.GREEN, Color.BLUE])


def test_empty_sequence_has_no_valid_pivot():
    with pytest.raises(ValueError):
        dutch_flag(0, [])


@given(st.data())
def test_partition_invariant(data):
    colors = data.draw(st.lists(st.sampled_from(list(Color)), min_size=1, max_size=30))
    index = data.draw(st.integers(min_value=0, max_value=len(colors) - 1))
    pivot = colors[index]
    before = Counter(colors)
    result = dutch_flag(index, colors)
    assert Counter(result) == before
    groups = [0 if c < pivot else 1 if c == pivot else 2 for c in result]
    assert groups == sorted(groups)


@given(st.lists(st.integers(min_value=-5, max_value=5), min_size=1, max_size=30))
def test_works_for_plain_integers(values):
    pivot = values[0]
    result = dutch_flag(0, list(values))
    groups = [0 if v < pivot else 1 if v == pivot else 2 for v in result]
    assert groups == sorted(groups)
    assert sorted(result) == sorted(values)