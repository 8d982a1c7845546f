"""Three-way partitioning around a pivot (the Dutch national flag problem)."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, MutableSequence


class Color(IntEnum):
    """Colours ordered red < green < blue."""

    RED = 0
    GREEN = 1
    BLUE = 2

    def __str__(self) -> str:
        return self.name.lower()


def dutch_flag(pivot_index: int, colors: MutableSequence[Any]) -> MutableSequence[Any]:
    """Reorder ``colors`` in place into smaller, equal and larger than the pivot.

    Returns the same sequence. Raises ValueError if ``pivot_index`` is out of range.
    """
    if not 0 <= pivot_index < len(colors):
        raise ValueError(f"invalid pivot index: {pivot_index}")

    pivot = colors[pivot_index]
    smaller, equal, larger = 0, 0, len(colors)

    while equal < larger:
        current = colors[equal]
        if current < pivot:
            colors[smaller], colors[equal] = colors[equal], colors[smaller]
            smaller += 1
            equal += 1
        elif current == pivot:
            equal += 1
        else:
            larger -= 1
            colors[equal], colors[larger] = colors[larger], colors[equal]
    return colors