"""Array scans: collecting a permutation in rounds and nearest smaller values."""

from __future__ import annotations

from collections.abc import Sequence


def count_collecting_rounds(values: Sequence[int]) -> int:
    """Rounds needed to collect ``1..n`` in order when each round scans left to right.

    ``values`` must be a permutation of ``1..n``.
    """
    n = len(values)
    if sorted(values) != list(range(1, n + 1)):
        raise ValueError("values must be a permutation of 1..n")
    position = {value: index for index, value in enumerate(values)}
    rounds = 1
    for index, value in enumerate(values):
        if value != n and index > position[value + 1]:
            rounds += 1
    return rounds


def nearest_smaller_positions(values: Sequence[int]) -> list[int]:
    """For each value, the 1-based position of the nearest smaller value to its left, or 0."""
    stack: list[int] = []
    positions = []
    for index, value in enumerate(values):
        while stack and values[stack[-1]] >= value:
            stack.pop()
        positions.append(stack[-1] + 1 if stack else 0)
        stack.append(index)
    return positions