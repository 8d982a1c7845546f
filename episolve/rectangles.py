"""Axis-aligned rectangle intersection."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """A rectangle with its corner at (x, y) and the given width and height."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def is_valid(self) -> bool:
        """Return True if width and height are not negative."""
        return self.width >= 0 and self.height >= 0


def is_intersecting(a: Rectangle, b: Rectangle) -> bool:
    """Return True if the rectangles overlap in an area; touching edges do not count."""
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def intersect(a: Rectangle, b: Rectangle) -> Rectangle | None:
    """Return the overlapping rectangle of ``a`` and ``b``, or None if they do not overlap."""
    if not is_intersecting(a, b):
        return None
    left = max(a.x, b.x)
    top = max(a.y, b.y)
    right = min(a.x + a.width, b.x + b.width)
    bottom = min(a.y + a.height, b.y + b.height)
    return Rectangle(x=left, y=top, width=right - left, height=bottom - top)