"""Number puzzles: factorial zeros, differences, pair sums, bitwise add and more."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence

_INT32_MASK = 0xFFFFFFFF
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1


def factorial_trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of ``n!``."""
    if n < 0:
        raise ValueError("n must not be negative")
    zeros = 0
    power = 5
    while power <= n:
        zeros += n // power
        power *= 5
    return zeros


def smallest_difference(first: Sequence[int], second: Sequence[int]) -> int:
    """Return the smallest non-negative difference between one value from each sequence."""
    if not first or not second:
        raise ValueError("both sequences must be non-empty")
    a, b = sorted(first), sorted(second)
    i = j = 0
    best = abs(a[0] - b[0])
    while i < len(a) and j < len(b):
        best = min(best, abs(a[i] - b[j]))
        if a[i] > b[j]:
            j += 1
        else:
            i += 1
    return best


def sum_swap_pairs(first: Sequence[int], second: Sequence[int]) -> list[tuple[int, int]]:
    """Return the distinct ``(a, b)`` pairs whose swap gives both sequences equal sums."""
    gap = sum(second) - sum(first)
    if gap % 2:
        return []
    shift = gap // 2
    available = set(second)
    pairs: dict[tuple[int, int], None] = {}
    for value in first:
        if value + shift in available:
            pairs[(value, value + shift)] = None
    return list(pairs)


def pairs_with_sum(values: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Return pairs of ``values`` summing to ``target``, using each element once."""
    remaining = Counter(values)
    pairs = []
    for value in values:
        complement = target - value
        if remaining[value] <= 0:
            continue
        needed = 2 if complement == value else 1
        if remaining[complement] < needed or (complement != value and remaining[value] < 1):
            continue
        remaining[value] -= 1
        remaining[complement] -= 1
        pairs.append((value, complement))
    return pairs


def add_without_plus(a: int, b: int) -> int:
    """Add two 32-bit signed integers using only bitwise operations.

    The result wraps around like 32-bit two's-complement arithmetic.
    """
    for operand in (a, b):
        if not _INT32_MIN <= operand <= _INT32_MAX:
            raise ValueError(f"{operand} is outside the 32-bit signed range")
    a &= _INT32_MASK
    b &= _INT32_MASK
    while b:
        a, b = (a ^ b) & _INT32_MASK, ((a & b) << 1) & _INT32_MASK
    return a - (1 << 32) if a >> 31 else a


def majority_element(values: Sequence[int]) -> int | None:
    """Return the value making up more than half of ``values``, or None if there is none."""
    candidate = None
    count = 0
    for value in values:
        if count == 0:
            candidate, count = value, 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if candidate is not None and sum(1 for v in values if v == candidate) > len(values) // 2:
        return candidate
    return None


def kth_multiple(x: int, y: int, z: int, k: int) -> int:
    """Return the ``k``-th (from 1) number whose only prime factors are among ``x, y, z``.

    The sequence starts at 1, e.g. 1, 3, 5, 7, 9, 15, 21 for factors 3, 5 and 7.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    if min(x, y, z) < 2:
        raise ValueError("factors must be at least 2")
    heap = [1]
    seen = {1}
    for _ in range(k - 1):
        smallest = heapq.heappop(heap)
        for factor in (x, y, z):
            product = smallest * factor
            if product not in seen:
                seen.add(product)
                heapq.heappush(heap, product)
    return heap[0]