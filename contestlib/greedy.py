"""Greedy answers to matching, packing and scheduling problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def count_apartment_matches(
    applicants: Iterable[int], apartments: Iterable[int], tolerance: int
) -> int:
    """Most applicants that can each get an apartment within ``tolerance`` of their wish."""
    wishes = sorted(applicants)
    sizes = sorted(apartments)
    i = j = matches = 0
    while i < len(wishes) and j < len(sizes):
        if abs(wishes[i] - sizes[j]) <= tolerance:
            i += 1
            j += 1
            matches += 1
        elif wishes[i] < sizes[j]:
            i += 1
        else:
            j += 1
    return matches


def min_gondolas(weights: Iterable[int], limit: int) -> int:
    """Fewest gondolas of at most two people and total weight ``limit`` for everyone."""
    ordered = sorted(weights)
    light, heavy = 0, len(ordered) - 1
    gondolas = 0
    while light <= heavy:
        if ordered[light] + ordered[heavy] <= limit:
            light += 1
        heavy -= 1
        gondolas += 1
    return gondolas


def smallest_missing_sum(coins: Iterable[int]) -> int:
    """Smallest positive sum that no subset of ``coins`` adds up to."""
    reachable = 1
    for coin in sorted(coins):
        if coin > reachable:
            break
        reachable += coin
    return reachable


def min_stick_cost(lengths: Sequence[int]) -> int:
    """Least total change needed to make every stick the same length."""
    if not lengths:
        raise ValueError("lengths must not be empty")
    ordered = sorted(lengths)
    median = ordered[len(ordered) // 2]
    return sum(abs(length - median) for length in ordered)


def max_task_reward(tasks: Iterable[tuple[int, int]]) -> int:
    """Best total of ``deadline - finish`` over ``(duration, deadline)`` tasks done in turn."""
    finish = 0
    reward = 0
    for duration, deadline in sorted(tasks):
        finish += duration
        reward += deadline - finish
    return reward


def max_movies(movies: Iterable[tuple[int, int]]) -> int:
    """Most ``(start, end)`` movies one person can watch from start to end."""
    watched = 0
    free_from = 0
    for end, start in sorted((end, start) for start, end in movies):
        if start >= free_from:
            watched += 1
            free_from = end
    return watched


def count_distinct(values: Iterable[int]) -> int:
    """Number of distinct values."""
    return len(set(values))