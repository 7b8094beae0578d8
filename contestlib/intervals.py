"""Interval scheduling: crowd peaks, room allocation, shared screenings, gaps, tickets."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

from sortedcontainers import SortedList, SortedSet


def max_customers(intervals: Iterable[tuple[int, int]]) -> int:
    """Largest number of ``(arrival, departure)`` customers present at once.

    A departure at the same moment as an arrival is counted first.
    """
    events = []
    for arrival, departure in intervals:
        events.append((arrival, 1))
        events.append((departure, 0))
    events.sort()
    present = 0
    peak = 0
    for _, is_arrival in events:
        present += 1 if is_arrival else -1
        peak = max(peak, present)
    return peak


def allocate_rooms(intervals: Sequence[tuple[int, int]]) -> tuple[int, list[int]]:
    """Fewest rooms for ``(arrival, departure)`` guests and each guest's room.

    Stays are inclusive, so a guest leaving on a day frees the room only
    for arrivals after that day.  Rooms are numbered from 1 and each
    arriving guest takes the smallest free one.
    """
    events = []
    for guest, (arrival, departure) in enumerate(intervals):
        events.append((arrival, -1, guest))
        events.append((departure, 1, guest))
    events.sort()

    present = 0
    rooms_needed = 0
    for _, kind, _ in events:
        present += 1 if kind == -1 else -1
        rooms_needed = max(rooms_needed, present)

    free_rooms = list(range(1, rooms_needed + 1))
    assigned = [0] * len(intervals)
    for _, kind, guest in events:
        if kind == -1:
            assigned[guest] = heapq.heappop(free_rooms)
        else:
            heapq.heappush(free_rooms, assigned[guest])
    return rooms_needed, assigned


def max_movies_with_members(movies: Iterable[tuple[int, int]], members: int) -> int:
    """Most ``(start, end)`` movies that ``members`` people can watch between them."""
    if members < 0:
        raise ValueError(f"members must not be negative, got {members}")
    free_at = SortedList([0] * members)
    watched = 0
    for end, start in sorted((end, start) for start, end in movies):
        position = free_at.bisect_right(start)
        if position == 0:
            continue
        del free_at[position - 1]
        free_at.add(end)
        watched += 1
    return watched


def longest_gaps(length: int, lights: Iterable[int]) -> list[int]:
    """Longest unlit passage on a street of ``length`` after each light is added."""
    positions = SortedSet([0, length])
    gaps = SortedList([length])
    longest = []
    for light in lights:
        if not 0 <= light < length:
            raise ValueError(f"light {light} outside 0..{length - 1}")
        index = positions.bisect_right(light)
        after = positions[index]
        before = positions[index - 1]
        gaps.remove(after - before)
        gaps.add(light - before)
        gaps.add(after - light)
        positions.add(light)
        longest.append(gaps[-1])
    return longest


def buy_tickets(prices: Iterable[int], budgets: Iterable[int]) -> list[int]:
    """Price paid by each customer in turn, or -1 when no ticket fits the budget.

    Every customer takes the dearest remaining ticket within their budget.
    """
    available = SortedList(prices)
    paid = []
    for budget in budgets:
        position = available.bisect_right(budget)
        if position == 0:
            paid.append(-1)
        else:
            paid.append(available.pop(position - 1))
    return paid