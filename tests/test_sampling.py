import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from episolve.sampling import (
    nonuniform_random,
    online_random_sample,
    random_permutation,
    random_subset,
    sample_offline,
)


class _FixedRng:
    """Stands in for random.Random with a fixed draw."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@given(st.integers(min_value=0, max_value=50), st.integers())
def test_random_permutation_is_permutation(n, seed):
    perm = random_permutation(n, random.Random(seed))
    assert sorted(perm) == list(range(n))


def test_random_permutation_deterministic_with_seed():
    first = random_permutation(20, random.Random(7))
    second = random_permutation(20, random.Random(7))
    assert sorted(first) == list(range(20))
    assert first == second


def test_random_permutation_negative():
    with pytest.raises(ValueError):
        random_permutation(-1)


def test_random_permutation_covers_all_orders():
    rng = random.Random(1)
    seen = {tuple(random_permutation(3, rng)) for _ in range(300)}
    assert len(seen) == 6


def test_nonuniform_picks_interval():
    values = [3, 5, 7, 11]
    probs = [0.1, 0.3, 0.4, 0.2]
    assert nonuniform_random(values, probs, _FixedRng(0.0)) == 3
    assert nonuniform_random(values, probs, _FixedRng(0.35)) == 5
    assert nonuniform_random(values, probs, _FixedRng(0.99)) == 11


def test_nonuniform_certain_value():
    rng = random.Random(3)
    results = {nonuniform_random(["a", "b"], [0.0, 1.0], rng) for _ in range(50)}
    assert results == {"b"}


def test_nonuniform_result_in_values():
    rng = random.Random(5)
    values = [3, 5, 7, 11]
    for _ in range(100):
        assert nonuniform_random(values, [0.1, 0.3, 0.4, 0.2], rng) in values


def test_nonuniform_length_mismatch():
    with pytest.raises(ValueError):
        nonuniform_random([1, 2], [1.0])


def test_nonuniform_uncovered_draw():
    with pytest.raises(ValueError):
        nonuniform_random([1, 2], [0.1, 0.1], _FixedRng(0.9))


@given(st.integers(min_value=0, max_value=40), st.data())
def test_random_subset_distinct_in_range(n, data):
    k = data.draw(st.integers(min_value=0, max_value=n))
    seed = data.draw(st.integers())
    subset = random_subset(n, k, random.Random(seed))
    assert len(subset) == k
    assert len(set(subset)) == k
    assert all(0 <= v < n for v in subset)


def test_random_subset_full():
    assert sorted(random_subset(10, 10, random.Random(2))) == list(range(10))


def test_random_subset_bad_k():
    with pytest.raises(ValueError):
        random_subset(3, 4)


def test_sample_offline_returns_prefix_and_keeps_items():
    customers = ["Lina", "Ahmed", "Sara", "John", "Zayd", "Emi"]
    original = list(customers)
    picked = sample_offline(customers, 4, random.Random(9))
    assert picked == customers[:4]
    assert sorted(customers) == sorted(original)
    assert len(set(picked)) == 4


def test_sample_offline_bad_k():
    with pytest.raises(ValueError):
        sample_offline([1, 2], 3)


def test_online_sample_short_stream_keeps_all():
    assert online_random_sample(["1\n", "2\n", "x\n", "3"], 4) == [1, 2, 3]


def test_online_sample_skips_non_integers():
    assert online_random_sample(["a", " 5", "1.5", "-4", "+6"], 5) == [-4, 6]


@given(st.lists(st.integers(), min_size=0, max_size=60), st.integers())
def test_online_sample_subset_of_stream(stream, seed):
    sample = online_random_sample(stream, 4, random.Random(seed))
    assert len(sample) == min(4, len(stream))
    remaining = list(stream)
    for value in sample:
        remaining.remove(value)


def test_online_sample_negative_k():
    with pytest.raises(ValueError):
        online_random_sample([1], -1)