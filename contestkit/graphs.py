"""Graph constructions: making a graph cool and building graphs with a given mean distance."""

from __future__ import annotations

import heapq
from collections import defaultdict
from typing import Iterable

_MAX_ETA_NODES = 1_000_000


class DisjointSets:
    """Union-find over the nodes 0..size-1 with path compression and union by size."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parents = list(range(size))
        self._sizes = [1] * size

    def find(self, x: int) -> int:
        """Return the representative of x's component."""
        root = x
        while self._parents[root] != root:
            root = self._parents[root]
        while self._parents[x] != root:
            self._parents[x], x = root, self._parents[x]
        return root

    def unite(self, x: int, y: int) -> bool:
        """Merge the components of x and y; return whether they were separate."""
        x_root, y_root = self.find(x), self.find(y)
        if x_root == y_root:
            return False
        if self._sizes[x_root] < self._sizes[y_root]:
            x_root, y_root = y_root, x_root
        self._sizes[x_root] += self._sizes[y_root]
        self._parents[y_root] = x_root
        return True

    def connected(self, x: int, y: int) -> bool:
        """Return whether x and y lie in the same component."""
        return self.find(x) == self.find(y)


class _Graph:
    """Undirected graph that keeps its nodes bucketed by degree."""

    def __init__(self, adjacency: dict[int, set[int]]) -> None:
        self.adjacency = adjacency
        self.buckets: dict[int, set[int]] = defaultdict(set)
        for node, neighbours in adjacency.items():
            self.buckets[len(neighbours)].add(node)

    def _rebucket(self, node: int, old_degree: int) -> None:
        bucket = self.buckets[old_degree]
        bucket.discard(node)
        if not bucket:
            del self.buckets[old_degree]
        self.buckets[len(self.adjacency[node])].add(node)

    def add(self, a: int, b: int) -> None:
        for x, y in ((a, b), (b, a)):
            old = len(self.adjacency[x])
            self.adjacency[x].add(y)
            self._rebucket(x, old)

    def remove(self, a: int, b: int) -> None:
        for x, y in ((a, b), (b, a)):
            old = len(self.adjacency[x])
            self.adjacency[x].discard(y)
            self._rebucket(x, old)

    def toggle(self, a: int, b: int) -> None:
        if b in self.adjacency[a]:
            self.remove(a, b)
        else:
            self.add(a, b)

    def max_degree(self) -> int:
        return max(self.buckets, default=0)


def make_cool(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int, int]]:
    """Return operations (a, b, c) that turn the graph into a tree or an empty graph.

    Nodes are numbered 1..n. Each operation toggles the edges ab, bc and ca.
    """
    adjacency: dict[int, set[int]] = defaultdict(set)
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) is outside 1..{n}")
        if a == b:
            raise ValueError(f"self-loop at node {a}")
        adjacency[a - 1].add(b - 1)
        adjacency[b - 1].add(a - 1)
    graph = _Graph(adjacency)

    operations: list[tuple[int, int, int]] = []
    # Reduce until every node has at most one neighbour.
    while (degree := graph.max_degree()) > 1:
        node = min(graph.buckets[degree])
        first, second = heapq.nsmallest(2, graph.adjacency[node])
        graph.remove(node, first)
        graph.remove(node, second)
        graph.toggle(first, second)
        operations.append((node + 1, first + 1, second + 1))

    # What is left is single edges and isolated nodes; merge them into one tree.
    if graph.max_degree() == 1:
        dsu = DisjointSets(n)
        for node, neighbours in graph.adjacency.items():
            for other in neighbours:
                dsu.unite(node, other)
        node = min(graph.buckets[1])
        for other in range(n):
            if dsu.connected(node, other):
                continue
            partner = min(graph.adjacency[node])
            dsu.unite(node, other)
            graph.add(node, other)
            graph.add(partner, other)
            graph.remove(node, partner)
            operations.append((node + 1, partner + 1, other + 1))
    return operations


def eta_graph(a: int, b: int) -> tuple[int, list[tuple[int, int]]] | None:
    """Return the smallest tree (n, edges) whose mean distance from node 1 is a/b.

    The mean is taken over all n nodes, node 1 included; None when no such
    graph exists with at most 10**6 nodes.
    """
    if b == 0:
        raise ValueError("b must not be zero")

    size = next(
        (
            n
            for n in range(1, _MAX_ETA_NODES + 1)
            if n * a % b == 0 and n * (n - 1) // 2 >= n * a // b >= n - 1
        ),
        None,
    )
    if size is None:
        return None

    target = size * a // b
    for depth in range(1, size):
        if depth * (depth + 1) // 2 + (size - 1 - depth) * depth >= target:
            break
    else:
        depth = size

    # One node per level, then spread the rest over the two deepest levels.
    target -= depth * (depth + 1) // 2
    levels = [1] * (depth + 1)
    rest = (size - 1) - depth
    target -= rest * (depth - 1)
    levels[depth - 1] += rest - target
    levels[depth] += target

    edges: list[tuple[int, int]] = []
    anchor = 1
    for count in levels[1:]:
        edges.extend((anchor, anchor + j) for j in range(1, count + 1))
        anchor += count
    return size, edges