"""Checks and traversals over two-dimensional grids."""

from __future__ import annotations

import math
from collections.abc import Sequence

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def has_duplicate(
    board: Sequence[Sequence[int]],
    start_row: int,
    start_col: int,
    end_row: int,
    end_col: int,
) -> bool:
    """Return True if a non-zero value repeats in ``board[start_row:end_row]`` x ``[start_col:end_col]``."""
    seen: set[int] = set()
    for row in board[start_row:end_row]:
        for value in row[start_col:end_col]:
            if value == 0:
                continue
            if value in seen:
                return True
            seen.add(value)
    return False


def is_valid_sudoku(board: Sequence[Sequence[int]]) -> bool:
    """Return True if the partially filled board has no conflicts; 0 marks an empty cell."""
    size = len(board)
    if any(has_duplicate(board, i, 0, i + 1, size) for i in range(size)):
        return False
    if any(has_duplicate(board, 0, j, size, j + 1) for j in range(size)):
        return False
    region = math.isqrt(size)
    return not any(
        has_duplicate(board, r * region, c * region, (r + 1) * region, (c + 1) * region)
        for r in range(region)
        for c in range(region)
    )


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the entries of ``matrix`` in clockwise spiral order from the top left."""
    if not matrix:
        raise ValueError("matrix cant be empty")
    rows, cols = len(matrix), len(matrix[0])
    visited: set[tuple[int, int]] = set()
    result: list[int] = []
    x = y = direction = 0
    for _ in range(rows * cols):
        result.append(matrix[x][y])
        visited.add((x, y))
        dx, dy = _DIRECTIONS[direction]
        nx, ny = x + dx, y + dy
        if not (0 <= nx < rows and 0 <= ny < cols) or (nx, ny) in visited:
            direction = (direction + 1) % 4
            dx, dy = _DIRECTIONS[direction]
            nx, ny = x + dx, y + dy
        x, y = nx, ny
    return result