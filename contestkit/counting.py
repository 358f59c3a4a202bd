"""Counting problems solved by dynamic programming under a modulus."""

from __future__ import annotations

from typing import Iterable, Sequence

from contestkit.modmath import MOD

SUBSET_MOD = 998_244_353


def _check_target(target: int) -> None:
    if target < 0:
        raise ValueError("target must be non-negative")


def count_ordered_coin_ways(coins: Sequence[int], target: int) -> int:
    """Count ordered sequences of coins summing to target, modulo 1e9+7."""
    _check_target(target)
    ways = [0] * (target + 1)
    ways[0] = 1
    for total in range(target + 1):
        for coin in coins:
            if total - coin >= 0:
                ways[total] = (ways[total] + ways[total - coin]) % MOD
    return ways[target]


def count_coin_combinations(coins: Sequence[int], target: int) -> int:
    """Count unordered multisets of coins summing to target, modulo 1e9+7."""
    _check_target(target)
    ways = [0] * (target + 1)
    ways[0] = 1
    for coin in coins:
        for total in range(1, target + 1):
            if total - coin >= 0:
                ways[total] = (ways[total] + ways[total - coin]) % MOD
    return ways[target]


class SubsetSumCounter:
    """Count the subsets of a changing multiset that sum to a fixed target."""

    def __init__(self, target: int) -> None:
        _check_target(target)
        self.target = target
        self._ways = [0] * (target + 1)
        self._ways[0] = 1

    @staticmethod
    def _check_value(value: int) -> None:
        if value < 1:
            raise ValueError("values must be positive")

    def add(self, value: int) -> None:
        """Add one value to the multiset."""
        self._check_value(value)
        ways = self._ways
        for total in range(self.target, value - 1, -1):
            ways[total] = (ways[total] + ways[total - value]) % SUBSET_MOD

    def remove(self, value: int) -> None:
        """Remove one copy of a value previously added."""
        self._check_value(value)
        ways = self._ways
        using = [0] * (self.target + 1)
        for total in range(value, self.target + 1):
            using[total] = (ways[total - value] - using[total - value]) % SUBSET_MOD
        for total in range(self.target + 1):
            ways[total] = (ways[total] - using[total]) % SUBSET_MOD

    def ways(self) -> int:
        """Return the number of subsets summing to the target, modulo 998244353."""
        return self._ways[self.target]


def process_subset_sum_queries(
    target: int, queries: Iterable[tuple[str, int]]
) -> list[int]:
    """Apply ("+", v) and ("-", v) queries and return the count after each one."""
    counter = SubsetSumCounter(target)
    results = []
    for operation, value in queries:
        if operation == "+":
            counter.add(value)
        elif operation == "-":
            counter.remove(value)
        else:
            raise ValueError(f"unknown operation: {operation!r}")
        results.append(counter.ways())
    return results


def inversion_array_counts(limit: int) -> list[int]:
    """Return the answers for every n from 0 to limit, modulo 998244353.

    Element n counts the distinct arrays of length n reachable from [0, 1] by
    repeatedly inserting the current inversion count anywhere.
    """
    if limit < 0:
        raise ValueError("limit must be non-negative")
    size = max(limit, 2) + 1
    changes = [0] * size
    changes[2] = 1
    running = 2
    for n in range(3, size):
        changes[n] = (running - (n - 2)) % SUBSET_MOD
        running = (running + changes[n] * n) % SUBSET_MOD
    answers = [0] * size
    for n in range(2, size):
        answers[n] = (answers[n - 1] + changes[n]) % SUBSET_MOD
    return answers[: limit + 1]


def count_inversion_arrays(n: int) -> int:
    """Return the number of distinct arrays of length n, modulo 998244353."""
    return inversion_array_counts(n)[n]


def count_team_divisions(skills: Sequence[int], limit: int) -> int:
    """Count the ways to split people into teams with total penalty at most limit.

    A team's penalty is its largest skill minus its smallest; the result is
    taken modulo 1e9+7.
    """
    if not skills:
        raise ValueError("skills must not be empty")
    ordered = sorted(skills)
    n = len(ordered)
    total_skill = sum(ordered)

    def empty() -> list[list[int]]:
        return [[0] * (n + 1) for _ in range(total_skill + 1)]

    # dp[x][p]: ways giving partial sum x with p teams still open.
    dp = empty()
    dp[ordered[-1]][1] = 1
    dp[0][0] = 1
    for i in range(n - 2, -1, -1):
        skill = ordered[i]
        nxt = empty()
        for x, row in enumerate(dp):
            for p in range(n - i):
                ways = row[p]
                if ways == 0:
                    continue
                if x + skill <= total_skill:
                    nxt[x + skill][p + 1] = (nxt[x + skill][p + 1] + ways) % MOD
                if p > 0:
                    nxt[x][p] = (nxt[x][p] + p * ways) % MOD
                    if x - skill >= 0:
                        nxt[x - skill][p - 1] = (nxt[x - skill][p - 1] + p * ways) % MOD
                nxt[x][p] = (nxt[x][p] + ways) % MOD
        dp = nxt

    return sum(dp[x][0] for x in range(min(limit, total_skill) + 1)) % MOD