"""Sequence problems: longest run without repeats and greedy tower stacking."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sortedcontainers import SortedList


def longest_unique_run(songs: Sequence[int]) -> int:
    """Length of the longest contiguous run in which no song repeats."""
    in_window: set[int] = set()
    best = 0
    left = 0
    for song in songs:
        while song in in_window:
            in_window.discard(songs[left])
            left += 1
        in_window.add(song)
        best = max(best, len(in_window))
    return best


def count_towers(cubes: Iterable[int]) -> int:
    """Fewest towers when each cube, in order, goes on a strictly larger top."""
    tops = SortedList()
    for cube in cubes:
        position = tops.bisect_right(cube)
        if position < len(tops):
            del tops[position]
        tops.add(cube)
    return len(tops)