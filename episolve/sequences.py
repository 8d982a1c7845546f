"""Array problems over sequences of digits and values."""

from __future__ import annotations

from collections.abc import Hashable, MutableSequence, Sequence
from itertools import groupby
from typing import Any


def can_reach_end(steps: Sequence[int]) -> bool:
    """Return True if the last index can be reached, each entry being a maximum jump."""
    farthest = 0
    for index, length in enumerate(steps):
        if index > farthest:
            return False
        farthest = max(farthest, index + length)
    return True


def plus_one(digits: Sequence[int]) -> list[int]:
    """Return the decimal digits of the number ``digits`` represents plus one."""
    if not digits:
        raise ValueError("digits must be non-empty")
    result = list(digits)
    result[-1] += 1
    for i in range(len(result) - 1, 0, -1):
        if result[i] != 10:
            break
        result[i] = 0
        result[i - 1] += 1
    if result[0] == 10:
        result[0] = 1
        result.append(0)
    return result


def multiply(num1: Sequence[int], num2: Sequence[int]) -> list[int]:
    """Multiply two numbers given as decimal digits.

    A negative number carries its sign on its first digit, and so does the result.
    """
    if not num1 or not num2:
        raise ValueError("input slices must be non-empty")

    negative = (num1[0] < 0) != (num2[0] < 0)
    a = [abs(d) for d in num1]
    b = [abs(d) for d in num2]

    result = [0] * (len(a) + len(b))
    for i in reversed(range(len(a))):
        for j in reversed(range(len(b))):
            total = result[i + j + 1] + a[i] * b[j]
            result[i + j + 1] = total % 10
            result[i + j] += total // 10

    start = 0
    while start < len(result) - 1 and result[start] == 0:
        start += 1
    result = result[start:]

    if negative:
        result[0] = -result[0]
    return result


def next_permutation(nums: MutableSequence[Any]) -> bool:
    """Rearrange ``nums`` in place into the next permutation in lexicographic order.

    Returns False, leaving ``nums`` unchanged, when it is already the last one.
    """
    n = len(nums)
    pivot = next((k for k in range(n - 2, -1, -1) if nums[k] < nums[k + 1]), None)
    if pivot is None:
        return False

    successor = next(l for l in range(n - 1, pivot, -1) if nums[l] > nums[pivot])
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1 :] = nums[pivot + 1 :][::-1]
    return True


def deduplicate(items: Sequence[Hashable]) -> list[Hashable]:
    """Drop repeated neighbours, so a sorted input keeps each value once."""
    return [key for key, _ in groupby(items)]


def apply_permutation(items: MutableSequence[Any], perm: Sequence[int]) -> None:
    """Move ``items[i]`` to position ``perm[i]`` for every i, in place."""
    if len(items) != len(perm):
        raise ValueError("items and permutation must have the same length")
    if sorted(perm) != list(range(len(perm))):
        raise ValueError("perm is not a permutation of 0..n-1")
    arranged: list[Any] = [None] * len(items)
    for item, target in zip(items, perm):
        arranged[target] = item
    items[:] = arranged