"""Random permutations, subsets and samples."""

from __future__ import annotations

import random
import re
from bisect import bisect_right
from collections.abc import Iterable, MutableSequence, Sequence
from itertools import accumulate
from typing import Any, TypeVar

T = TypeVar("T")

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _rng_or_default(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def random_permutation(n: int, rng: random.Random | None = None) -> list[int]:
    """Return a uniformly random permutation of ``0..n-1``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    rng = _rng_or_default(rng)
    perm = list(range(n))
    for i in range(n):
        r = rng.randrange(i, n)
        perm[i], perm[r] = perm[r], perm[i]
    return perm


def nonuniform_random(
    values: Sequence[T],
    probabilities: Sequence[float],
    rng: random.Random | None = None,
) -> T:
    """Pick one of ``values``, each with the matching probability."""
    if len(values) != len(probabilities):
        raise ValueError("values and probabilities must have the same length")
    if not values:
        raise ValueError("values must be non-empty")
    rng = _rng_or_default(rng)
    prefix_sums = [0.0, *accumulate(probabilities)]
    index = bisect_right(prefix_sums, rng.random()) - 1
    if not 0 <= index < len(values):
        raise ValueError("probabilities do not cover the drawn value")
    return values[index]


def random_subset(n: int, k: int, rng: random.Random | None = None) -> list[int]:
    """Return ``k`` distinct values drawn uniformly from ``0..n-1``.

    Uses only O(k) extra space by tracking the swapped positions in a dict.
    """
    if not 0 <= k <= n:
        raise ValueError("k must satisfy 0 <= k <= n")
    rng = _rng_or_default(rng)
    changed: dict[int, int] = {}
    for i in range(k):
        r = rng.randrange(i, n)
        value_i = changed.get(i, i)
        value_r = changed.get(r, r)
        changed[i] = value_r
        changed[r] = value_i
    return [changed.get(i, i) for i in range(k)]


def sample_offline(
    items: MutableSequence[T], k: int, rng: random.Random | None = None
) -> list[T]:
    """Shuffle ``items`` in place so its first ``k`` entries are a random subset.

    Returns those ``k`` entries.
    """
    n = len(items)
    if not 0 <= k <= n:
        raise ValueError("k must satisfy 0 <= k <= len(items)")
    rng = _rng_or_default(rng)
    for i in range(k):
        r = rng.randrange(i, n)
        items[i], items[r] = items[r], items[i]
    return list(items[:k])


def _as_int(entry: Any) -> int | None:
    if isinstance(entry, bool):
        return None
    if isinstance(entry, int):
        return entry
    if isinstance(entry, str):
        text = entry.rstrip("\n").rstrip("\r")
        if _INTEGER.fullmatch(text):
            return int(text)
    return None


def online_random_sample(
    stream: Iterable[Any], k: int, rng: random.Random | None = None
) -> list[int]:
    """Keep a uniformly random sample of ``k`` integers from ``stream``.

    Entries may be ints or lines of text; lines that are not integers are skipped.
    """
    if k < 0:
        raise ValueError("k must be non-negative")
    rng = _rng_or_default(rng)
    sample: list[int] = []
    seen = 0
    for entry in stream:
        value = _as_int(entry)
        if value is None:
            continue
        seen += 1
        if len(sample) < k:
            sample.append(value)
        else:
            idx = rng.randrange(seen)
            if idx < k:
                sample[idx] = value
    return sample