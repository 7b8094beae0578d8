"""Lowest common ancestors by binary lifting, and the tree queries built on them.

:class:`LcaLift` works on 0-based nodes.  The query functions take 1-based
nodes, as in the problems they answer.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_NONE = -1


class LcaLift:
    """Binary lifting table over a tree of ``size`` nodes numbered from 0."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self.size = size
        self._log = max(1, size.bit_length())
        self._depth = [0] * size
        self._edges: list[list[int]] = [[] for _ in range(size)]
        self._lift = [[_NONE] * self._log for _ in range(size)]

    def _check(self, node: int) -> None:
        if not 0 <= node < self.size:
            raise IndexError(f"node {node} outside 0..{self.size - 1}")

    def _fill(self, node: int, parent: int) -> None:
        row = self._lift[node]
        row[0] = parent
        for level in range(1, self._log):
            previous = row[level - 1]
            row[level] = _NONE if previous == _NONE else self._lift[previous][level - 1]

    def add_edge(self, a: int, b: int) -> None:
        """Join ``a`` and ``b`` by an undirected edge; call :meth:`build` afterwards."""
        self._check(a)
        self._check(b)
        self._edges[a].append(b)
        self._edges[b].append(a)

    def attach(self, node: int, parent: int) -> None:
        """Hang ``node`` below ``parent``, which must already be placed in the tree."""
        self.add_edge(node, parent)
        self._fill(node, parent)
        self._depth[node] = self._depth[parent] + 1

    def build(self, root: int = 0) -> None:
        """Root the tree at ``root`` and fill depths and ancestor tables."""
        self._check(root)
        visited = [False] * self.size
        visited[root] = True
        self._depth[root] = 0
        stack = [(root, _NONE)]
        while stack:
            node, parent = stack.pop()
            self._fill(node, parent)
            for child in self._edges[node]:
                if child != parent and not visited[child]:
                    visited[child] = True
                    self._depth[child] = self._depth[node] + 1
                    stack.append((child, node))

    def parent(self, node: int) -> int | None:
        """Parent of ``node``, or None for a root."""
        self._check(node)
        parent = self._lift[node][0]
        return None if parent == _NONE else parent

    def ancestor(self, node: int, k: int) -> int | None:
        """The ancestor ``k`` levels above ``node``, or None if the tree is not that deep."""
        self._check(node)
        if k < 0:
            raise ValueError(f"k must not be negative, got {k}")
        if k >= 1 << self._log:
            return None
        current = node
        for level in reversed(range(self._log)):
            if k >> level & 1:
                current = self._lift[current][level]
                if current == _NONE:
                    return None
        return current

    def lca(self, a: int, b: int) -> int:
        """Lowest common ancestor of ``a`` and ``b``."""
        self._check(a)
        self._check(b)
        if self._depth[a] < self._depth[b]:
            a, b = b, a
        v = self.ancestor(a, self._depth[a] - self._depth[b])
        if v is None:
            raise ValueError(f"nodes {a} and {b} are not in the same tree")
        if v == b:
            return v
        for level in reversed(range(self._log)):
            if self._lift[v][level] != self._lift[b][level]:
                v = self._lift[v][level]
                b = self._lift[b][level]
        result = self._lift[b][0]
        if result == _NONE:
            raise ValueError(f"nodes {a} and {b} are not in the same tree")
        return result

    def distance(self, a: int, b: int) -> int:
        """Number of edges on the path between ``a`` and ``b``."""
        common = self.lca(a, b)
        return self._depth[a] + self._depth[b] - 2 * self._depth[common]


def _build_tree(n: int, edges: Iterable[tuple[int, int]]) -> LcaLift:
    """Tree of ``n`` nodes from 1-based edges, rooted at node 1 (index 0)."""
    if n < 1:
        raise ValueError(f"a tree needs at least one node, got {n}")
    edges = list(edges)
    if len(edges) != n - 1:
        raise ValueError(f"a tree of {n} nodes needs {n - 1} edges, got {len(edges)}")
    tree = LcaLift(n)
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) has a node outside 1..{n}")
        tree.add_edge(u - 1, v - 1)
    tree.build(0)
    if any(tree.parent(node) is None for node in range(1, n)):
        raise ValueError("edges do not form a connected tree")
    return tree


def _boss_tree(bosses: Sequence[int]) -> LcaLift:
    edges = [(employee, boss) for employee, boss in enumerate(bosses, start=2)]
    return _build_tree(len(bosses) + 1, edges)


def boss_queries(bosses: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """For each ``(employee, k)``, the boss ``k`` levels up, or -1 if there is none.

    ``bosses`` lists the bosses of employees ``2..n``; employees are 1-based.
    """
    tree = _boss_tree(bosses)
    answers = []
    for employee, k in queries:
        boss = tree.ancestor(employee - 1, k)
        answers.append(-1 if boss is None else boss + 1)
    return answers


def common_boss_queries(bosses: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """For each ``(a, b)``, the lowest boss the two employees share (possibly one of them)."""
    tree = _boss_tree(bosses)
    return [tree.lca(a - 1, b - 1) + 1 for a, b in queries]


def counting_paths(
    n: int, edges: Iterable[tuple[int, int]], paths: Iterable[tuple[int, int]]
) -> list[int]:
    """Number of the given ``(a, b)`` paths passing through each node ``1..n``."""
    tree = _build_tree(n, edges)
    counts = [0] * n
    for a, b in paths:
        common = tree.lca(a - 1, b - 1)
        counts[a - 1] += 1
        counts[b - 1] += 1
        counts[common] -= 1
        above = tree.parent(common)
        if above is not None:
            counts[above] -= 1
    for node in sorted(range(n), key=lambda v: tree._depth[v], reverse=True):
        above = tree.parent(node)
        if above is not None:
            counts[above] += counts[node]
    return counts


def distance_queries(
    n: int, edges: Iterable[tuple[int, int]], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Number of edges between each queried ``(a, b)`` pair of 1-based nodes."""
    tree = _build_tree(n, edges)
    return [tree.distance(a - 1, b - 1) for a, b in queries]