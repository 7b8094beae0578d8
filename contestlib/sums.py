"""Finding two, three or four distinct positions whose values add up to a target."""

from __future__ import annotations

from collections.abc import Sequence


def two_values(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Two 1-based positions whose values sum to ``target``, or None if there are none."""
    seen: dict[int, int] = {}
    for position, value in enumerate(values, start=1):
        if target - value in seen:
            return seen[target - value], position
        seen[value] = position
    return None


def three_values(values: Sequence[int], target: int) -> tuple[int, int, int] | None:
    """Three 1-based positions whose values sum to ``target``, or None if there are none."""
    ordered = sorted((value, position) for position, value in enumerate(values, start=1))
    n = len(ordered)
    for i, (first, first_position) in enumerate(ordered):
        low, high = 0, n - 1
        remaining = target - first
        while low < high:
            if low == i:
                low += 1
            elif high == i:
                high -= 1
            else:
                pair_sum = ordered[low][0] + ordered[high][0]
                if pair_sum == remaining:
                    return first_position, ordered[low][1], ordered[high][1]
                if pair_sum < remaining:
                    low += 1
                else:
                    high -= 1
    return None


def four_values(values: Sequence[int], target: int) -> tuple[int, int, int, int] | None:
    """Four increasing 1-based positions whose values sum to ``target``, or None.

    Values are expected to be positive: pairs already reaching ``target`` are skipped.
    """
    pairs: dict[int, list[tuple[int, int]]] = {}
    for i, first in enumerate(values):
        for j in range(i):
            pair_sum = first + values[j]
            if pair_sum >= target:
                continue
            partners = pairs.get(target - pair_sum)
            if partners is not None:
                for k, m in partners:
                    indices = {i, j, k, m}
                    if len(indices) == 4:
                        a, b, c, d = sorted(index + 1 for index in indices)
                        return a, b, c, d
            else:
                pairs.setdefault(pair_sum, []).append((i, j))
    return None