import random
from collections import deque

import pytest

from contestlib.tree_distances import distance_sums, distance_sums_rerooted, max_distances

EXAMPLE_EDGES = [(1, 2), (1, 3), (3, 4), (3, 5)]


def random_tree(n, seed):
    rng = random.Random(seed)
    edges = []
    for v in range(2, n + 1):
        u = rng.randint(1, v - 1)
        edges.append((u, v) if rng.random() < 0.5 else (v, u))
    rng.shuffle(edges)
    return edges


def bfs_distances(n, edges, start):
    adjacency = {node: [] for node in range(1, n + 1)}
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    distance = {start: 0}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for other in adjacency[node]:
            if other not in distance:
                distance[other] = distance[node] + 1
                queue.append(other)
    return distance


def test_max_distances_example():
    assert max_distances(5, EXAMPLE_EDGES) == [2, 3, 2, 3, 3]


def test_distance_sums_example():
    assert distance_sums(5, EXAMPLE_EDGES) == [6, 9, 5, 8, 8]


def test_single_node():
    assert max_distances(1, []) == [0]
    assert distance_sums(1, []) == distance_sums_rerooted(1, [])
    assert sum(distance_sums(1, [])) == 0


@pytest.mark.parametrize("seed", range(8))
def test_max_distances_match_breadth_first_search(seed):
    n = 2 + seed * 5
    edges = random_tree(n, seed)
    expected = [max(bfs_distances(n, edges, node).values()) for node in range(1, n + 1)]
    assert max_distances(n, edges) == expected


@pytest.mark.parametrize("seed", range(8))
def test_distance_sums_match_breadth_first_search(seed):
    n = 3 + seed * 4
    edges = random_tree(n, seed + 100)
    expected = [sum(bfs_distances(n, edges, node).values()) for node in range(1, n + 1)]
    assert distance_sums(n, edges) == expected


@pytest.mark.parametrize("seed", range(10))
def test_both_distance_sum_methods_agree(seed):
    n = 1 + seed * 7
    edges = random_tree(n, seed + 200)
    assert distance_sums_rerooted(n, edges) == distance_sums(n, edges)


def test_distance_sums_are_symmetric_in_total():
    n = 20
    edges = random_tree(n, 7)
    sums = distance_sums(n, edges)
    pairwise = sum(
        d for node in range(1, n + 1) for d in bfs_distances(n, edges, node).values()
    )
    assert sum(sums) == pairwise


def test_wrong_edge_count_is_rejected():
    with pytest.raises(ValueError):
        max_distances(3, [(1, 2)])


def test_disconnected_edges_are_rejected():
    with pytest.raises(ValueError):
        distance_sums(4, [(1, 2), (2, 1), (3, 4)])


def test_node_out_of_range_is_rejected():
    with pytest.raises(ValueError):
        distance_sums_rerooted(3, [(1, 2), (2, 4)])