"""Problems built on divisors, gcd and lcm."""

from __future__ import annotations

import math
from functools import reduce
from typing import Iterable, Sequence

_MAX_VALUE = 1_000_000


def _gcd(a: int, b: int) -> int:
    if a < 0 or b < 0:
        return 1
    return math.gcd(a, b)


def _divisors(n: int) -> set[int]:
    found: set[int] = set()
    if n <= 0:
        return found
    for i in range(1, math.isqrt(n) + 1):
        if n % i == 0:
            found.update((i, n // i))
    return found


def boundary_divisors(w: int, l: int) -> list[int]:
    """Return, in increasing order, every tile size that can cover a w by l boundary."""
    candidates = {1, 2}
    for n in (_gcd(w, l - 2), _gcd(w - 2, l), _gcd(w - 1, l - 1)):
        candidates |= _divisors(n)
    return sorted(candidates)


def max_common_divisor(values: Iterable[int]) -> int:
    """Return the largest gcd of any two of the values (values above 10**6 are ignored)."""
    values = [v for v in values if 0 < v <= _MAX_VALUE]
    top = max(values, default=0)
    counts = [0] * (top + 1)
    for v in values:
        counts[v] += 1
    for divisor in range(top, 1, -1):
        if sum(counts[divisor::divisor]) >= 2:
            return divisor
    return 1


def fizzbuzz_parameters(start: int, end: int, words: Iterable[str]) -> tuple[int, int]:
    """Recover the Fizz and Buzz divisors from the words said for start..end."""
    fizz: list[int] = []
    buzz: list[int] = []
    for number, word in zip(range(start, end + 1), words):
        if word in ("Fizz", "FizzBuzz"):
            fizz.append(number)
        if word in ("Buzz", "FizzBuzz"):
            buzz.append(number)
    a = math.gcd(*fizz) or end + 1
    b = math.gcd(*buzz) or end + 1
    return a, b


def gcd_of_pairwise_lcms(values: Sequence[int]) -> int:
    """Return the gcd of lcm(a_i, a_j) over all pairs i < j."""
    if len(values) < 2:
        raise ValueError("at least two values are required")
    running = values[0]
    lcms = []
    for value in values[1:]:
        lcms.append(value // math.gcd(value, running) * running)
        running = math.gcd(value, running)
    return reduce(math.gcd, lcms)


def coprime_product_subset(n: int) -> list[int]:
    """Return the longest subset of 1..n-1 whose product is 1 modulo n."""
    chosen = [i for i in range(1, n) if math.gcd(i, n) == 1]
    product = 1
    for i in chosen:
        product = product * i % n
    if product != 1:
        chosen.remove(product)
    return chosen


def max_gcds_by_length(values: Sequence[int]) -> list[int]:
    """Return, for each length k from 1 to n, the largest gcd of a subarray of length k."""
    n = len(values)
    if n == 0:
        raise ValueError("values must not be empty")
    best = [0] * (n + 1)
    best[1] = values[-1]
    drops: list[int] = []
    for i in range(n - 2, -1, -1):
        new_drops = []
        current = math.gcd(values[i], values[i + 1])
        if current < values[i]:
            new_drops.append(i + 1)
        for end in drops:
            following = math.gcd(current, values[end])
            if current > following:
                new_drops.append(end)
                current = following
        drops = new_drops
        current = values[i]
        for d in drops:
            best[d - i] = max(best[d - i], current)
            current = math.gcd(current, values[d])
        best[n - i] = max(best[n - i], current)
    best[n] = reduce(math.gcd, values, 0)
    for length in range(n - 1, 0, -1):
        best[length] = max(best[length], best[length + 1])
    return best[1:]


def lexicographically_largest_array(n: int, values: Sequence[int]) -> list[int] | None:
    """Return the largest array a_1..a_n over values (given ascending) where no a_i
    divides a_j for i | j, i < j; None when no such array exists."""
    descending = list(reversed(values))
    rank = [0] * (n + 1)
    for i in range(1, n + 1):
        for j in range(2 * i, n + 1, i):
            if rank[j] <= rank[i]:
                rank[j] += 1
        if rank[i] >= len(descending):
            return None
    return [descending[r] for r in rank[1:]]