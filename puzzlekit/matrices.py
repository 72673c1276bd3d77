"""Matrix puzzles: rotation, zeroing, ponds and maximum sub-matrices."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations_with_replacement
from typing import Sequence

Matrix = Sequence[Sequence[int]]

_NEIGHBOUR_OFFSETS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


@dataclass(frozen=True)
class SubMatrix:
    """A rectangular region of a matrix (inclusive bounds) and its sum."""

    total: int
    top: int
    bottom: int
    left: int
    right: int


def _require_rectangular(matrix: Matrix) -> tuple[int, int]:
    if not matrix or not matrix[0]:
        raise ValueError("matrix must not be empty")
    cols = len(matrix[0])
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return len(matrix), cols


def rotate90(matrix: Matrix) -> list[list[int]]:
    """Return the square ``matrix`` rotated 90 degrees counter-clockwise."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return [list(column) for column in zip(*matrix)][::-1]


def zero_rows_and_columns(matrix: Matrix) -> list[list[int]]:
    """Return a copy in which every row and column holding a zero is all zeros."""
    zero_rows = {r for r, row in enumerate(matrix) if 0 in row}
    zero_cols = {c for row in matrix for c, value in enumerate(row) if value == 0}
    return [
        [0 if r in zero_rows or c in zero_cols else value for c, value in enumerate(row)]
        for r, row in enumerate(matrix)
    ]


def _flood(land: Matrix, start: tuple[int, int], visited: set[tuple[int, int]]) -> int:
    visited.add(start)
    stack = [start]
    size = 0
    while stack:
        row, col = stack.pop()
        size += 1
        for dr, dc in _NEIGHBOUR_OFFSETS:
            r, c = row + dr, col + dc
            if (
                0 <= r < len(land)
                and 0 <= c < len(land[r])
                and land[r][c] == 0
                and (r, c) not in visited
            ):
                visited.add((r, c))
                stack.append((r, c))
    return size


def pond_sizes(land: Matrix) -> list[int]:
    """Return the size of every pond (8-connected zero cells) in scan order."""
    visited: set[tuple[int, int]] = set()
    sizes = []
    for r, row in enumerate(land):
        for c, height in enumerate(row):
            if height == 0 and (r, c) not in visited:
                sizes.append(_flood(land, (r, c), visited))
    return sizes


def kadane(values: Sequence[int]) -> tuple[int, int, int]:
    """Return ``(sum, start, end)`` of the largest-sum contiguous run (inclusive)."""
    if not values:
        raise ValueError("values must not be empty")
    best: tuple[int, int, int] | None = None
    running = 0
    local_start = 0
    for index, value in enumerate(values):
        if running > 0:
            running += value
        else:
            running = value
            local_start = index
        if best is None or running > best[0]:
            best = (running, local_start, index)
    assert best is not None
    return best


def max_submatrix_brute_force(matrix: Matrix) -> SubMatrix:
    """Find the largest-sum sub-matrix by trying every rectangle."""
    rows, cols = _require_rectangular(matrix)
    best: SubMatrix | None = None
    for top, bottom in combinations_with_replacement(range(rows), 2):
        for left, right in combinations_with_replacement(range(cols), 2):
            total = sum(sum(row[left:right + 1]) for row in matrix[top:bottom + 1])
            if best is None or total > best.total:
                best = SubMatrix(total, top, bottom, left, right)
    assert best is not None
    return best


def max_submatrix_sum(matrix: Matrix) -> SubMatrix:
    """Find the largest-sum sub-matrix using column strips and Kadane's algorithm."""
    rows, cols = _require_rectangular(matrix)
    best: SubMatrix | None = None
    for left in range(cols):
        strip = [0] * rows
        for right in range(left, cols):
            strip = [total + row[right] for total, row in zip(strip, matrix)]
            total, top, bottom = kadane(strip)
            if best is None or total >= best.total:
                best = SubMatrix(total, top, bottom, left, right)
    assert best is not None
    return best