"""Range query structures: Fenwick trees and minimum segment trees."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate

INF = 1 << 60
"""Identity of :class:`MinSegmentTree`: the value of an empty range."""

INT_MAX = 2**31 - 1
"""Identity of :class:`DynamicRangeMin`: the value of an empty range."""


class FenwickTree:
    """Binary indexed tree of sums over positions ``1..size``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self.size = size
        self._tree = [0] * (size + 1)

    def add(self, index: int, delta: int) -> None:
        """Add ``delta`` to the value at 1-based ``index``."""
        if not 1 <= index <= self.size:
            raise IndexError(f"index {index} outside 1..{self.size}")
        while index <= self.size:
            self._tree[index] += delta
            index += index & -index

    def prefix_sum(self, index: int) -> int:
        """Sum of positions ``1..index``; ``index`` 0 gives 0."""
        if not 0 <= index <= self.size:
            raise IndexError(f"index {index} outside 0..{self.size}")
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total

    def range_sum(self, left: int, right: int) -> int:
        """Sum of positions ``left..right``, both 1-based and inclusive."""
        return self.prefix_sum(right) - self.prefix_sum(left - 1)


class XorFenwickTree:
    """Binary indexed tree answering xor over ranges of fixed values."""

    def __init__(self, values: Iterable[int]) -> None:
        values = list(values)
        self.size = len(values)
        self._tree = [0] * (self.size + 1)
        for position, value in enumerate(values, start=1):
            self._update(position, value)

    def _update(self, index: int, value: int) -> None:
        while index <= self.size:
            self._tree[index] ^= value
            index += index & -index

    def prefix_xor(self, index: int) -> int:
        """Xor of positions ``1..index``; ``index`` 0 gives 0."""
        if not 0 <= index <= self.size:
            raise IndexError(f"index {index} outside 0..{self.size}")
        result = 0
        while index > 0:
            result ^= self._tree[index]
            index -= index & -index
        return result

    def range_xor(self, left: int, right: int) -> int:
        """Xor of positions ``left..right``, both 1-based and inclusive."""
        return self.prefix_xor(right) ^ self.prefix_xor(left - 1)


class MinSegmentTree:
    """Top-down segment tree of minima; its width is a power of two."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        length = 1
        while length < size:
            length <<= 1
        self.length = length
        self._tree = [INF] * (2 * length)

    def update(self, index: int, value: int) -> None:
        """Set the 0-based position ``index`` to ``value``."""
        if not 0 <= index < self.length:
            raise IndexError(f"index {index} outside 0..{self.length - 1}")
        node = index + self.length
        self._tree[node] = value
        while node > 1:
            self._tree[node // 2] = min(self._tree[node], self._tree[node ^ 1])
            node //= 2

    def _query(self, node: int, node_left: int, node_right: int, left: int, right: int) -> int:
        if left > right:
            return INF
        if left == node_left and right == node_right:
            return self._tree[node]
        middle = (node_left + node_right) // 2
        return min(
            self._query(node * 2, node_left, middle, left, min(right, middle)),
            self._query(node * 2 + 1, middle + 1, node_right, max(left, middle + 1), right),
        )

    def query(self, left: int, right: int) -> int:
        """Minimum of 0-based positions ``left..right``; :data:`INF` if empty."""
        if left > right:
            return INF
        if left < 0 or right >= self.length:
            raise IndexError(f"range {left}..{right} outside 0..{self.length - 1}")
        return self._query(1, 0, self.length - 1, left, right)


class DynamicRangeMin:
    """Bottom-up segment tree of minima over exactly ``len(values)`` leaves."""

    def __init__(self, values: Iterable[int]) -> None:
        values = list(values)
        self.size = n = len(values)
        self._tree = [INT_MAX] * (2 * n + 2)
        self._tree[n : 2 * n] = values
        for node in range(n - 1, 0, -1):
            self._tree[node] = min(self._tree[2 * node], self._tree[2 * node + 1])

    def update(self, index: int, value: int) -> None:
        """Set the 0-based position ``index`` to ``value``."""
        if not 0 <= index < self.size:
            raise IndexError(f"index {index} outside 0..{self.size - 1}")
        node = index + self.size
        self._tree[node] = value
        node >>= 1
        while node >= 1:
            self._tree[node] = min(self._tree[2 * node], self._tree[2 * node + 1])
            node >>= 1

    def query(self, left: int, right: int) -> int:
        """Minimum of 0-based positions ``left..right``; :data:`INT_MAX` if empty."""
        if left <= right and (left < 0 or right >= self.size):
            raise IndexError(f"range {left}..{right} outside 0..{self.size - 1}")
        left += self.size
        right += self.size
        smallest = INT_MAX
        while left <= right:
            if left & 1:
                smallest = min(smallest, self._tree[left])
                left += 1
            if not right & 1:
                smallest = min(smallest, self._tree[right])
                right -= 1
            left >>= 1
            right >>= 1
        return smallest


def range_xor_queries(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Answer 1-based inclusive ``(left, right)`` xor queries."""
    tree = XorFenwickTree(values)
    return [tree.range_xor(left, right) for left, right in queries]


def static_range_min_queries(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Answer 1-based inclusive ``(left, right)`` minimum queries."""
    tree = MinSegmentTree(len(values))
    for index, value in enumerate(values):
        tree.update(index, value)
    return [tree.query(left - 1, right - 1) for left, right in queries]


def static_range_sum_queries(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Answer 1-based inclusive ``(left, right)`` sum queries with prefix sums."""
    prefix = list(accumulate(values, initial=0))
    return [prefix[right] - prefix[left - 1] for left, right in queries]


def dynamic_range_min_queries(
    values: Sequence[int], queries: Iterable[tuple[int, int, int]]
) -> list[int]:
    """Run ``(1, k, u)`` assignments and ``(2, l, r)`` minimum queries, 1-based."""
    tree = DynamicRangeMin(values)
    answers = []
    for kind, first, second in queries:
        if kind == 1:
            tree.update(first - 1, second)
        else:
            answers.append(tree.query(first - 1, second - 1))
    return answers


def dynamic_range_sum_queries(
    values: Sequence[int], queries: Iterable[tuple[int, int, int]]
) -> list[int]:
    """Run ``(1, k, u)`` assignments and ``(2, l, r)`` sum queries, 1-based."""
    current = list(values)
    tree = FenwickTree(len(current))
    for position, value in enumerate(current, start=1):
        tree.add(position, value)
    answers = []
    for kind, first, second in queries:
        if kind == 1:
            tree.add(first, second - current[first - 1])
            current[first - 1] = second
        else:
            answers.append(tree.range_sum(first, second))
    return answers