"""Path and subtree sum queries over an Euler tour kept in a Fenwick tree.

Trees have nodes ``1..n`` rooted at node 1; ``values[i]`` belongs to node ``i + 1``.
Queries are ``(1, node, value)`` to set a node's value and ``(2, node)`` to ask.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from contestlib.range_queries import FenwickTree


def _euler_tour(n: int, edges: Iterable[tuple[int, int]]) -> tuple[list[int], list[int]]:
    """1-based entry time of each node and the last entry time inside its subtree."""
    if n < 1:
        raise ValueError(f"a tree needs at least one node, got {n}")
    edges = list(edges)
    if len(edges) != n - 1:
        raise ValueError(f"a tree of {n} nodes needs {n - 1} edges, got {len(edges)}")
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) has a node outside 1..{n}")
        adjacency[u - 1].append(v - 1)
        adjacency[v - 1].append(u - 1)
    parent = [-1] * n
    visited = [False] * n
    visited[0] = True
    order = []
    stack = [0]
    while stack:
        node = stack.pop()
        order.append(node)
        for child in reversed(adjacency[node]):
            if not visited[child]:
                visited[child] = True
                parent[child] = node
                stack.append(child)
    if len(order) != n:
        raise ValueError("edges do not form a connected tree")
    size = [1] * n
    for node in reversed(order):
        if parent[node] >= 0:
            size[parent[node]] += size[node]
    start = [0] * n
    for time, node in enumerate(order, start=1):
        start[node] = time
    end = [start[node] + size[node] - 1 for node in range(n)]
    return start, end


def _parse(query: Sequence[int], n: int) -> tuple[int, int, int | None]:
    kind, node, *rest = query
    if not 1 <= node <= n:
        raise ValueError(f"node {node} outside 1..{n}")
    if kind == 1:
        if len(rest) != 1:
            raise ValueError(f"update query needs a node and a value, got {tuple(query)}")
        return kind, node - 1, rest[0]
    if kind == 2:
        if rest:
            raise ValueError(f"sum query takes only a node, got {tuple(query)}")
        return kind, node - 1, None
    raise ValueError(f"unknown query kind {kind}")


def path_queries(
    values: Sequence[int], edges: Iterable[tuple[int, int]], queries: Iterable[Sequence[int]]
) -> list[int]:
    """Answer each ``(2, node)`` with the sum of values on the path from the root to it."""
    current = list(values)
    n = len(current)
    start, end = _euler_tour(n, edges)
    tree = FenwickTree(n + 1)
    for node, value in enumerate(current):
        tree.add(start[node], value)
        tree.add(end[node] + 1, -value)
    answers = []
    for query in queries:
        kind, node, value = _parse(query, n)
        if kind == 1:
            delta = value - current[node]
            tree.add(start[node], delta)
            tree.add(end[node] + 1, -delta)
            current[node] = value
        else:
            answers.append(tree.prefix_sum(start[node]))
    return answers


def subtree_queries(
    values: Sequence[int], edges: Iterable[tuple[int, int]], queries: Iterable[Sequence[int]]
) -> list[int]:
    """Answer each ``(2, node)`` with the sum of values in the subtree of that node."""
    current = list(values)
    n = len(current)
    start, end = _euler_tour(n, edges)
    tree = FenwickTree(n)
    for node, value in enumerate(current):
        tree.add(start[node], value)
    answers = []
    for query in queries:
        kind, node, value = _parse(query, n)
        if kind == 1:
            tree.add(start[node], value - current[node])
            current[node] = value
        else:
            answers.append(tree.range_sum(start[node], end[node]))
    return answers