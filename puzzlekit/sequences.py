"""Sequence puzzles: bookings, supersequences, histograms, towers, sampling, medians."""

from __future__ import annotations

import heapq
import random
from bisect import bisect_left
from collections import Counter
from collections.abc import Hashable, Iterable, MutableSequence, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def optimal_booking(requests: Sequence[int]) -> int:
    """Return the most minutes bookable without accepting two adjacent requests."""
    if any(minutes < 0 for minutes in requests):
        raise ValueError("request lengths must not be negative")
    best_with_previous = 0
    best_before_previous = 0
    for minutes in requests:
        best_with_previous, best_before_previous = (
            max(best_with_previous, best_before_previous + minutes),
            best_with_previous,
        )
    return best_with_previous


def shortest_supersequence(
    small: Iterable[Hashable], large: Sequence[Hashable]
) -> tuple[int, int] | None:
    """Return inclusive ``(start, end)`` of the shortest run of ``large`` holding all of ``small``.

    The earliest such run wins ties. Returns None when ``large`` lacks an element.
    """
    needed = set(small)
    if not needed:
        raise ValueError("small must not be empty")
    counts: Counter[Hashable] = Counter()
    covered = 0
    best: tuple[int, int] | None = None
    left = 0
    for right, value in enumerate(large):
        if value in needed:
            counts[value] += 1
            if counts[value] == 1:
                covered += 1
        while covered == len(needed):
            if best is None or right - left < best[1] - best[0]:
                best = (left, right)
            dropped = large[left]
            if dropped in needed:
                counts[dropped] -= 1
                if counts[dropped] == 0:
                    covered -= 1
            left += 1
    return best


def histogram_volume(heights: Sequence[int]) -> int:
    """Return the volume of water a histogram of unit-width bars can hold."""
    if any(height < 0 for height in heights):
        raise ValueError("heights must not be negative")
    left_max: list[int] = []
    highest = 0
    for height in heights:
        highest = max(highest, height)
        left_max.append(highest)
    volume = 0
    highest = 0
    for height, left in zip(reversed(heights), reversed(left_max)):
        highest = max(highest, height)
        volume += min(left, highest) - height
    return volume


def _is_letter(item: Any) -> bool:
    if isinstance(item, str):
        if item.isalpha():
            return True
        if item.isdigit():
            return False
    elif isinstance(item, int) and not isinstance(item, bool):
        return False
    raise ValueError(f"{item!r} is neither a letter nor a number")


def longest_balanced_subarray(values: Sequence[Any]) -> tuple[int, int] | None:
    """Return inclusive ``(start, end)`` of the longest run with as many letters as numbers.

    Letters are alphabetic strings; numbers are integers or digit strings.
    The earliest run wins ties. Returns None when no such run exists.
    """
    first_seen = {0: -1}
    balance = 0
    best: tuple[int, int] | None = None
    for index, item in enumerate(values):
        balance += 1 if _is_letter(item) else -1
        if balance in first_seen:
            start = first_seen[balance] + 1
            if best is None or index - start > best[1] - best[0]:
                best = (start, index)
        else:
            first_seen[balance] = index
    return best


def circus_tower_height(people: Iterable[tuple[int, int]]) -> int:
    """Return the most people that can stand in a tower of ``(height, weight)`` pairs.

    Each person must be strictly shorter and strictly lighter than the one below.
    """
    # Tallest-first ties are broken by heaviest-first so equal heights never chain.
    ordered = sorted(people, key=lambda person: (person[0], -person[1]))
    tails: list[int] = []
    for _, weight in ordered:
        position = bisect_left(tails, weight)
        if position == len(tails):
            tails.append(weight)
        else:
            tails[position] = weight
    return len(tails)


def smallest_k(values: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` smallest values in ascending order."""
    if k < 0:
        raise ValueError("k must not be negative")
    return heapq.nsmallest(k, values)


def shuffle(cards: MutableSequence[T], rng: random.Random | None = None) -> None:
    """Shuffle ``cards`` in place so that every permutation is equally likely."""
    generator = rng if rng is not None else random.Random()
    for index in range(len(cards) - 1, 0, -1):
        chosen = generator.randrange(index + 1)
        cards[index], cards[chosen] = cards[chosen], cards[index]


def random_subset(
    values: Sequence[T], m: int, rng: random.Random | None = None
) -> list[T]:
    """Return ``m`` elements of ``values``, each position equally likely to be chosen."""
    if not 0 <= m <= len(values):
        raise ValueError(f"m must be between 0 and {len(values)}")
    generator = rng if rng is not None else random.Random()
    pool = list(values)
    for index in range(m):
        chosen = generator.randrange(index, len(pool))
        pool[index], pool[chosen] = pool[chosen], pool[index]
    return pool[:m]


class ContinuousMedian:
    """Keeps the median of a growing stream of numbers using two heaps."""

    def __init__(self) -> None:
        self._lower: list[float] = []  # max-heap, stored negated
        self._upper: list[float] = []  # min-heap

    def __len__(self) -> int:
        return len(self._lower) + len(self._upper)

    def add(self, value: float) -> None:
        """Add ``value`` to the stream."""
        if self._lower and value > -self._lower[0]:
            heapq.heappush(self._upper, value)
        else:
            heapq.heappush(self._lower, -value)
        if len(self._lower) > len(self._upper) + 1:
            heapq.heappush(self._upper, -heapq.heappop(self._lower))
        elif len(self._upper) > len(self._lower):
            heapq.heappush(self._lower, -heapq.heappop(self._upper))

    def median(self) -> float:
        """Return the median of all values added so far."""
        if not self._lower:
            raise ValueError("median of an empty stream")
        if len(self._lower) == len(self._upper):
            return (-self._lower[0] + self._upper[0]) / 2
        return -self._lower[0]