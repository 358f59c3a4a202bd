"""Knapsack-style optimisation problems."""

from __future__ import annotations

import heapq
import math
from collections import Counter
from itertools import accumulate
from typing import Iterable, Sequence


def bounded_knapsack(capacity: int, items: Iterable[tuple[int, int, int]]) -> int:
    """Return the best total value within capacity.

    items holds (value, weight, copies) triples; each copy may be taken once.
    """
    if capacity < 0:
        raise ValueError("capacity must be non-negative")

    # For each weight only the capacity // weight best copies can ever be used.
    kept: dict[int, list[int]] = {}
    for value, weight, copies in items:
        if weight < 1:
            raise ValueError("weights must be positive")
        if weight > capacity:
            continue
        limit = capacity // weight
        heap = kept.setdefault(weight, [])
        while len(heap) < limit and copies > 0:
            heapq.heappush(heap, value)
            copies -= 1
        while copies > 0 and value > heap[0]:
            heapq.heapreplace(heap, value)
            copies -= 1

    best = [0] * (capacity + 1)
    for weight, heap in kept.items():
        for value in sorted(heap, reverse=True):
            for total in range(capacity, weight - 1, -1):
                best[total] = max(best[total], best[total - weight] + value)
    return max(best)


def cloud_profit(
    computers: Iterable[tuple[int, int, int]],
    orders: Iterable[tuple[int, int, int]],
) -> int:
    """Return the largest profit from buying computers and serving orders.

    Both hold (cores, clock_rate, price) triples. An order's cores must come
    from bought computers whose clock rate is at least the order's.
    """
    computers = sorted(computers, key=lambda entry: entry[1])
    orders = sorted(orders, key=lambda entry: entry[1])
    max_cores = sum(cores for cores, _, _ in computers)

    # profit[l]: best profit while holding l unused cores, None if unreachable.
    profit: list[int | None] = [None] * (max_cores + 1)
    profit[0] = 0

    def serve(cores: int, value: int) -> None:
        for left in range(max_cores + 1):
            source = left + cores
            if source <= max_cores and profit[source] is not None:
                candidate = profit[source] + value
                if profit[left] is None or candidate > profit[left]:
                    profit[left] = candidate

    def buy(cores: int, price: int) -> None:
        for total in range(max_cores, -1, -1):
            source = total - cores
            if source >= 0 and profit[source] is not None:
                candidate = profit[source] - price
                if profit[total] is None or candidate > profit[total]:
                    profit[total] = candidate

    pending = len(orders) - 1
    for cores, rate, price in reversed(computers):
        while pending >= 0 and orders[pending][1] > rate:
            order_cores, _, value = orders[pending]
            serve(order_cores, value)
            pending -= 1
        buy(cores, price)
    while pending >= 0:
        order_cores, _, value = orders[pending]
        serve(order_cores, value)
        pending -= 1

    return max([0, *(p for p in profit if p is not None)])


def best_talent_ratio(cows: Iterable[tuple[int, int]], min_weight: int) -> int:
    """Return floor(1000 * talent / weight) for the best group weighing at least min_weight.

    cows holds (weight, talent) pairs.
    """
    cows = list(cows)
    if min_weight < 0:
        raise ValueError("min_weight must be non-negative")
    if sum(weight for weight, _ in cows) < min_weight:
        raise ValueError("the cows together are lighter than min_weight")

    def feasible(ratio: int) -> bool:
        # best[x]: best score at weight x, with best[min_weight] meaning "at least".
        best: list[int | None] = [None] * (min_weight + 1)
        best[0] = 0
        for weight, talent in cows:
            gain = 1000 * talent - ratio * weight
            for total in range(min_weight, -1, -1):
                if best[total] is None:
                    continue
                target = min(min_weight, total + weight)
                candidate = best[total] + gain
                if best[target] is None or candidate > best[target]:
                    best[target] = candidate
        return best[min_weight] is not None and best[min_weight] >= 0

    low, high = -1, 1000 * 1000
    while low < high:
        mid = low + (high - low + 1) // 2
        if feasible(mid):
            low = mid
        else:
            high = mid - 1
    return low


def _multiplicity(n: int, prime: int) -> int:
    count = 0
    while n % prime == 0:
        n //= prime
        count += 1
    return count


def max_roundness(numbers: Sequence[int], k: int) -> int:
    """Return the most trailing zeros of a product of exactly k of the numbers."""
    if k < 0:
        raise ValueError("k must be non-negative")
    if any(n < 1 for n in numbers):
        raise ValueError("numbers must be positive")
    factors = [(_multiplicity(n, 2), _multiplicity(n, 5)) for n in numbers]
    total_fives = sum(fives for _, fives in factors)

    # twos[j][f]: most factors of two using j numbers holding f factors of five.
    twos = [[-1] * (total_fives + 1) for _ in range(k + 1)]
    twos[0][0] = 0
    for seen, (two_count, five_count) in enumerate(factors):
        for used in range(min(seen + 1, k), 0, -1):
            previous, row = twos[used - 1], twos[used]
            for fives in range(total_fives, five_count - 1, -1):
                earlier = previous[fives - five_count]
                if earlier >= 0 and earlier + two_count > row[fives]:
                    row[fives] = earlier + two_count
    return max(
        (min(fives, count) for fives, count in enumerate(twos[k]) if count >= 0),
        default=0,
    )


def broadband_cost(
    top: Sequence[float],
    bottom: Sequence[float],
    access_points: int,
    width: float,
) -> float:
    """Return the least total squared distance from customers to access points.

    Customers stand at the given x positions on both sides of a street of the
    given width; access points are placed on the centre line.
    """
    if access_points < 1:
        raise ValueError("at least one access point is required")
    customers = len(top) + len(bottom)
    base = customers * (width / 2) * (width / 2)

    coords = sorted(Counter([*top, *bottom]).items())
    counts = list(accumulate((n for _, n in coords), initial=0))
    sums = list(accumulate((x * n for x, n in coords), initial=0.0))
    squares = list(accumulate((x * x * n for x, n in coords), initial=0.0))

    size = len(coords)
    cost = [[math.inf] * (access_points + 1) for _ in range(size + 1)]
    cost[0] = [0.0] * (access_points + 1)
    for end in range(1, size + 1):
        for used in range(1, access_points + 1):
            best = cost[end][used]
            for start in range(1, end + 1):
                points = counts[end] - counts[start - 1]
                total = sums[end] - sums[start - 1]
                centre = total / points
                spread = (
                    (squares[end] - squares[start - 1])
                    + points * centre * centre
                    - 2 * centre * total
                )
                best = min(best, cost[start - 1][used - 1] + spread)
            cost[end][used] = best
    return base + cost[size][access_points]