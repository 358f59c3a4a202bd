"""Constructive answers to small combinatorial problems."""

from __future__ import annotations

from typing import Iterable


def median_partition(n: int, k: int) -> list[int] | None:
    """Split 1..n (n odd) into an odd number of odd-length blocks whose medians
    have median k; return the blocks' left borders, or None when impossible."""
    if k % 2 == 0:
        return [1, k, k + 1]
    if k == n or k == 1:
        return [1] if n == 1 else None
    return [1, k - 1, k + 2]


def count_removals(l: int, r: int, k: int) -> int:
    """Return how many x can be removed from {l..r}, each needing k multiples present."""
    if k < 1:
        raise ValueError("k must be positive")
    return max(0, r // k - l + 1)


def mod_sequence(n: int) -> list[int]:
    """Return an increasing sequence a_1..a_n in 1..2n with all a_i mod i distinct."""
    return [2 * i - 1 for i in range(1, n + 1)]


def circuit_range(switches: Iterable[int]) -> tuple[int, int]:
    """Return the least and most lights that can be on for 2n switch states."""
    states = list(switches)
    if len(states) % 2:
        raise ValueError("the number of switches must be even")
    if any(state not in (0, 1) for state in states):
        raise ValueError("switch states must be 0 or 1")
    n = len(states) // 2
    ones = sum(states)
    return ones % 2, (ones if ones <= n else 2 * n - ones)