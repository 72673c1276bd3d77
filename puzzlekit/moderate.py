"""Moderate puzzles: living people, diving boards, Master Mind, sub-sorting and more."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from puzzlekit.matrices import kadane


def year_with_most_alive(people: Iterable[tuple[int, int]]) -> tuple[int, int]:
    """Return ``(year, count)`` for the earliest year with the most people alive.

    Each person is a ``(birth, death)`` pair; both years count as alive.
    """
    events: list[tuple[int, int]] = []
    for birth, death in people:
        if death < birth:
            raise ValueError(f"death year {death} precedes birth year {birth}")
        events.append((birth, 1))
        # The year after death is when the person stops counting; sorting puts
        # that decrement (-1) ahead of any births in the same year.
        events.append((death + 1, -1))
    if not events:
        raise ValueError("people must not be empty")
    events.sort()

    alive = 0
    best_year, best_count = events[0][0], 0
    for year, change in events:
        alive += change
        if alive > best_count:
            best_year, best_count = year, alive
    return best_year, best_count


def diving_board_lengths(longer: int, shorter: int, k: int) -> list[int]:
    """Return every total length buildable from exactly ``k`` planks, ascending."""
    if k < 0:
        raise ValueError("k must not be negative")
    if k == 0:
        return []
    return sorted({shorts * shorter + (k - shorts) * longer for shorts in range(k + 1)})


def master_mind_score(actual: str, guess: str) -> tuple[int, int]:
    """Return ``(hits, pseudo_hits)`` for a Master Mind ``guess`` against ``actual``."""
    if len(actual) != len(guess):
        raise ValueError("actual and guess must be the same length")
    misses = [(a, g) for a, g in zip(actual, guess) if a != g]
    hits = len(actual) - len(misses)
    remaining = Counter(a for a, _ in misses)
    pseudo_hits = 0
    for _, colour in misses:
        if remaining[colour] > 0:
            remaining[colour] -= 1
            pseudo_hits += 1
    return hits, pseudo_hits


def sub_sort(values: Sequence[int]) -> tuple[int, int] | None:
    """Return the smallest inclusive ``(m, n)`` whose sorting sorts all of ``values``.

    Returns None when ``values`` is already in non-decreasing order.
    """
    size = len(values)
    left_end = 0
    while left_end + 1 < size and values[left_end + 1] >= values[left_end]:
        left_end += 1
    if left_end >= size - 1:
        return None

    right_start = size - 1
    while right_start > 0 and values[right_start - 1] <= values[right_start]:
        right_start -= 1

    lowest = min(values[left_end + 1:])
    highest = max(values[:right_start])

    start = next(i for i in range(left_end + 1) if values[i] > lowest)
    end = next(j for j in range(size - 1, right_start - 1, -1) if values[j] < highest)
    return start, end


def largest_contiguous_sum(values: Sequence[int]) -> int:
    """Return the largest sum of any non-empty contiguous run of ``values``."""
    return kadane(values)[0]


def build_pattern(first: str, second: str, pattern: str) -> str:
    """Spell ``pattern`` with ``first`` for each 'a' and ``second`` for each 'b'."""
    parts = {"a": first, "b": second}
    try:
        return "".join(parts[letter] for letter in pattern)
    except KeyError as error:
        raise ValueError(f"pattern may only hold 'a' and 'b', not {error.args[0]!r}") from None