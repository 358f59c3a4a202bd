import random
from collections import deque

import pytest

from contestkit.graphs import DisjointSets, eta_graph, make_cool


def _apply(n, edges, operations):
    current = {frozenset((a, b)) for a, b in edges}
    for a, b, c in operations:
        assert len({a, b, c}) == 3
        for pair in (frozenset((a, b)), frozenset((b, c)), frozenset((c, a))):
            current ^= {pair}
    return current


def _is_cool(n, current):
    if not current:
        return True
    if len(current) != n - 1:
        return False
    dsu = DisjointSets(n)
    for pair in current:
        a, b = tuple(pair)
        dsu.unite(a - 1, b - 1)
    return all(dsu.connected(0, i) for i in range(n))


def _distance_sum(n, edges):
    neighbours = {i: [] for i in range(1, n + 1)}
    for a, b in edges:
        neighbours[a].append(b)
        neighbours[b].append(a)
    dist = {1: 0}
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for other in neighbours[node]:
            if other not in dist:
                dist[other] = dist[node] + 1
                queue.append(other)
    return dist


def test_disjoint_sets_unite_and_connected():
    dsu = DisjointSets(5)
    assert dsu.unite(0, 1) is True
    assert dsu.unite(1, 0) is False
    assert dsu.connected(0, 1)
    assert not dsu.connected(0, 2)
    dsu.unite(2, 3)
    dsu.unite(3, 1)
    assert dsu.find(0) == dsu.find(2)
    assert not dsu.connected(4, 0)


def test_make_cool_empty_graph_needs_nothing():
    assert make_cool(3, []) == []


def test_make_cool_triangle():
    assert make_cool(3, [(1, 2), (2, 3), (3, 1)]) == [(1, 2, 3)]


@pytest.mark.parametrize(
    "n, edges",
    [
        (3, [(1, 2), (2, 3)]),
        (4, [(1, 2), (3, 4)]),
        (6, [(1, 2), (1, 6), (4, 5), (3, 4), (4, 6), (3, 6)]),
        (5, [(1, 2), (2, 3), (3, 4), (4, 5), (5, 1), (1, 3)]),
    ],
)
def test_make_cool_gives_tree_or_empty(n, edges):
    operations = make_cool(n, edges)
    assert _is_cool(n, _apply(n, edges, operations))
    assert len(operations) <= 2 * max(n, len(edges))


@pytest.mark.parametrize("seed", range(5))
def test_make_cool_random_graphs(seed):
    rng = random.Random(seed)
    n = rng.randint(3, 12)
    pairs = [(a, b) for a in range(1, n + 1) for b in range(a + 1, n + 1)]
    edges = rng.sample(pairs, rng.randint(1, len(pairs)))
    operations = make_cool(n, edges)
    assert _is_cool(n, _apply(n, edges, operations))
    assert len(operations) <= 2 * max(n, len(edges))


def test_make_cool_rejects_self_loop():
    with pytest.raises(ValueError):
        make_cool(3, [(2, 2)])


def test_make_cool_rejects_out_of_range():
    with pytest.raises(ValueError):
        make_cool(3, [(1, 4)])


def test_eta_graph_smallest_for_one():
    n, edges = eta_graph(1, 1)
    assert n == 3


@pytest.mark.parametrize("a, b", [(1, 1), (5, 1), (3, 2), (7, 4), (0, 1), (1, 2)])
def test_eta_graph_mean_distance(a, b):
    n, edges = eta_graph(a, b)
    assert len(edges) == n - 1
    dist = _distance_sum(n, edges)
    assert len(dist) == n
    assert sum(dist.values()) * b == a * n


def test_eta_graph_impossible():
    assert eta_graph(1, 3) is None


def test_eta_graph_zero_denominator():
    with pytest.raises(ValueError):
        eta_graph(1, 0)