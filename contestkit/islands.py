"""Check that memories of lifted bridges agree with some tree of islands."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Iterable


def _connected(nodes: set[int], links: dict[int, set[int]]) -> bool:
    """Return whether nodes form one connected piece using only links among themselves."""
    if not nodes:
        return True
    start = next(iter(nodes))
    seen = {start}
    queue = deque([start])
    while queue and len(seen) < len(nodes):
        current = queue.popleft()
        for neighbour in links[current]:
            if neighbour in nodes and neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return len(seen) == len(nodes)


def memories_consistent(n: int, memories: Iterable[Iterable[int]]) -> bool:
    """Return whether every memory can be one side of a bridge in a tree on islands 1..n.

    Each memory lists the islands that were cut off together when one bridge
    was lifted. Islands outside 1..n are ignored.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    # component[i]: the group island i belongs to; groups form a tree via links.
    component = [1] * (n + 1)
    component[0] = 0
    groups = 1
    links: dict[int, set[int]] = defaultdict(set)

    for memory in memories:
        chosen = set(memory)
        inside: set[int] = set()
        outside: set[int] = set()
        split = 0
        for island in range(1, n + 1):
            group = component[island]
            if island in chosen:
                inside.add(group)
                other = outside
            else:
                outside.add(group)
                other = inside
            if group in other:
                if split in (0, group):
                    split = group
                else:
                    return False

        if split:
            groups += 1
            for island in range(1, n + 1):
                if component[island] == split and island in chosen:
                    component[island] = groups
            for group in inside:
                if group in links[split]:
                    links[split].discard(group)
                    links[group].discard(split)
                    links[groups].add(group)
                    links[group].add(groups)
            inside.discard(split)
            inside.add(groups)
            outside.add(split)

        if not _connected(inside, links) or not _connected(outside, links):
            return False

        if split:
            links[split].add(groups)
            links[groups].add(split)
    return True