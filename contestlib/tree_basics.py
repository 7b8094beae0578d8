"""Basic tree problems: centroid, subordinates, diameter, matching and distinct colours.

Trees have nodes ``1..n`` given by ``n - 1`` undirected edges and are rooted at node 1.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    if n < 1:
        raise ValueError(f"a tree needs at least one node, got {n}")
    edges = list(edges)
    if len(edges) != n - 1:
        raise ValueError(f"a tree of {n} nodes needs {n - 1} edges, got {len(edges)}")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) has a node outside 1..{n}")
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _preorder(adjacency: list[list[int]], root: int) -> tuple[list[int], list[int]]:
    """Nodes in depth-first preorder from ``root`` and each node's parent (0 for the root)."""
    parent = [0] * len(adjacency)
    visited = [False] * len(adjacency)
    order = []
    stack = [root]
    visited[root] = True
    while stack:
        node = stack.pop()
        order.append(node)
        for child in reversed(adjacency[node]):
            if not visited[child]:
                visited[child] = True
                parent[child] = node
                stack.append(child)
    if len(order) != len(adjacency) - 1:
        raise ValueError("edges do not form a connected tree")
    return order, parent


def _children(adjacency: list[list[int]], parent: list[int], node: int) -> list[int]:
    return [child for child in adjacency[node] if child != parent[node]]


def find_centroid(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """A node whose removal leaves no component with more than ``n // 2`` nodes."""
    adjacency = _adjacency(n, edges)
    order, parent = _preorder(adjacency, 1)
    size = [1] * (n + 1)
    for node in reversed(order):
        if parent[node]:
            size[parent[node]] += size[node]
    node = 1
    while True:
        heavy = next(
            (child for child in _children(adjacency, parent, node) if size[child] * 2 > n),
            None,
        )
        if heavy is None:
            return node
        node = heavy


def subordinate_counts(bosses: Sequence[int]) -> list[int]:
    """Number of subordinates of each employee ``1..n``; ``bosses`` lists the bosses of ``2..n``."""
    n = len(bosses) + 1
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for employee, boss in enumerate(bosses, start=2):
        if not 1 <= boss <= n:
            raise ValueError(f"boss {boss} outside 1..{n}")
        children[boss].append(employee)
    order = []
    stack = [1]
    while stack:
        node = stack.pop()
        order.append(node)
        stack.extend(children[node])
    if len(order) != n:
        raise ValueError("bosses do not form a tree rooted at employee 1")
    counts = [0] * (n + 1)
    for node in reversed(order):
        counts[node] = sum(1 + counts[child] for child in children[node])
    return counts[1:]


def _farthest(adjacency: list[list[int]], start: int) -> tuple[int, int]:
    distance = [-1] * len(adjacency)
    distance[start] = 0
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if distance[neighbour] < 0:
                distance[neighbour] = distance[node] + 1
                queue.append(neighbour)
    return max((d, node) for node, d in enumerate(distance) if d >= 0 and node)


def tree_diameter(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of edges on the longest path of the tree."""
    adjacency = _adjacency(n, edges)
    _preorder(adjacency, 1)
    _, far = _farthest(adjacency, 1)
    diameter, _ = _farthest(adjacency, far)
    return diameter


def max_matching(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Largest number of edges that share no node."""
    adjacency = _adjacency(n, edges)
    order, parent = _preorder(adjacency, 1)
    matched = [False] * (n + 1)
    pairs = 0
    for node in reversed(order):
        for child in _children(adjacency, parent, node):
            if not matched[child] and not matched[node]:
                matched[child] = matched[node] = True
                pairs += 1
    return pairs


def distinct_color_counts(colors: Sequence[int], edges: Iterable[tuple[int, int]]) -> list[int]:
    """Number of distinct colours in the subtree of each node; ``colors[i]`` is node ``i + 1``'s."""
    n = len(colors)
    adjacency = _adjacency(n, edges)
    order, parent = _preorder(adjacency, 1)
    palettes: list[set[int]] = [set()] + [{color} for color in colors]
    counts = [0] * (n + 1)
    for node in reversed(order):
        for child in _children(adjacency, parent, node):
            if len(palettes[child]) > len(palettes[node]):
                palettes[node], palettes[child] = palettes[child], palettes[node]
            palettes[node] |= palettes[child]
            palettes[child] = set()
        counts[node] = len(palettes[node])
    return counts[1:]