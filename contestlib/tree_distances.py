"""Distances in a tree: farthest node from every node and sums of distances.

Trees have nodes ``1..n`` given by ``n - 1`` undirected edges.  Results are
lists indexed by node, so entry ``i`` belongs to node ``i + 1``.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def _rooted(
    n: int, edges: Iterable[tuple[int, int]]
) -> tuple[list[list[int]], list[int], list[int]]:
    """0-based adjacency, preorder from node 0 and parents (-1 for the root)."""
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
    return adjacency, order, parent


def _depths(adjacency: list[list[int]], start: int) -> list[int]:
    depth = [-1] * len(adjacency)
    depth[start] = 0
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if depth[neighbour] < 0:
                depth[neighbour] = depth[node] + 1
                queue.append(neighbour)
    return depth


def _subtree_sizes(order: list[int], parent: list[int]) -> list[int]:
    size = [1] * len(order)
    for node in reversed(order):
        if parent[node] >= 0:
            size[parent[node]] += size[node]
    return size


def max_distances(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Distance from each node to the node farthest from it."""
    adjacency, _, _ = _rooted(n, edges)
    from_first = _depths(adjacency, 0)
    end_a = from_first.index(max(from_first))
    from_a = _depths(adjacency, end_a)
    end_b = from_a.index(max(from_a))
    from_b = _depths(adjacency, end_b)
    return [max(a, b) for a, b in zip(from_a, from_b)]


def distance_sums(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Sum of distances from each node to all others, split into inside and outside parts."""
    adjacency, order, parent = _rooted(n, edges)
    size = [1] * n
    inward = [0] * n
    for node in reversed(order):
        above = parent[node]
        if above >= 0:
            size[above] += size[node]
            inward[above] += inward[node] + size[node]
    outward = [0] * n
    for node in order:
        children = [child for child in adjacency[node] if child != parent[node]]
        siblings_total = sum(inward[child] + 2 * size[child] for child in children)
        for child in children:
            outward[child] = (
                outward[node]
                + (n - size[node] + 1)
                + (siblings_total - inward[child] - 2 * size[child])
            )
    return [inside + outside for inside, outside in zip(inward, outward)]


def distance_sums_rerooted(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Sum of distances from each node to all others, by moving the root edge by edge."""
    adjacency, order, parent = _rooted(n, edges)
    size = _subtree_sizes(order, parent)
    totals = [0] * n
    totals[0] = sum(_depths(adjacency, 0))
    for node in order:
        above = parent[node]
        if above >= 0:
            totals[node] = totals[above] + n - 2 * size[node]
    return totals