"""Subarray sums: maxima, counting by sum or remainder, and balanced division."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate

from sortedcontainers import SortedList

_DIVISION_UPPER_BOUND = 10**15


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous subarray."""
    if not values:
        raise ValueError("values must not be empty")
    running = 0
    best = None
    for value in values:
        running = max(running + value, value)
        best = running if best is None else max(best, running)
    return best


def max_subarray_sum_bounded(values: Sequence[int], min_length: int, max_length: int) -> int:
    """Largest sum of a subarray whose length lies in ``min_length..max_length``."""
    n = len(values)
    if min_length < 0 or min_length > max_length or min_length > n:
        raise ValueError(
            f"no subarray of length {min_length}..{max_length} in {n} values"
        )
    prefix = list(accumulate(values, initial=0))
    window = SortedList()
    best = None
    for end in range(min_length, n + 1):
        if end > max_length:
            window.remove(prefix[end - max_length - 1])
        window.add(prefix[end - min_length])
        candidate = prefix[end] - window[0]
        best = candidate if best is None else max(best, candidate)
    return best


def count_divisible_subarrays(values: Sequence[int]) -> int:
    """Number of subarrays whose sum is divisible by ``len(values)``."""
    n = len(values)
    if n == 0:
        return 0
    seen = Counter({0: 1})
    remainder = 0
    count = 0
    for value in values:
        remainder = (remainder + value) % n
        count += seen[remainder]
        seen[remainder] += 1
    return count


def count_subarrays_with_sum(values: Sequence[int], target: int) -> int:
    """Number of subarrays whose sum equals ``target``."""
    seen = Counter({0: 1})
    total = 0
    count = 0
    for value in values:
        total += value
        count += seen[total - target]
        seen[total] += 1
    return count


def min_max_division(values: Sequence[int], parts: int) -> int:
    """Smallest possible largest sum when ``values`` is cut into at most ``parts`` runs."""
    if not values:
        raise ValueError("values must not be empty")
    if parts < 1:
        raise ValueError(f"parts must be positive, got {parts}")

    def fits(limit: int) -> bool:
        groups = 1
        current = 0
        for value in values:
            if current + value > limit:
                groups += 1
                current = 0
            current += value
        return groups <= parts

    low, high = max(values), _DIVISION_UPPER_BOUND
    answer = high
    while low <= high:
        middle = (low + high) // 2
        if fits(middle):
            answer = middle
            high = middle - 1
        else:
            low = middle + 1
    return answer