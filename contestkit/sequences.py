"""Problems on sequences: pivots, levelling, triangles, card duels, shops and ratings."""

from __future__ import annotations

import heapq
import math
from typing import Iterable, Sequence


def pivots(values: Iterable[int]) -> list[int]:
    """Return, in order, the values greater than everything before them and
    smaller than every later value.

    Later values are compared by value: once a value has been passed, its other
    occurrences no longer count as later values.
    """
    values = list(values)
    remaining = sorted(set(values))  # a sorted list is already a valid heap
    passed: set[int] = set()
    largest_before: int | None = None
    found = []
    for value in values:
        passed.add(value)
        while remaining and remaining[0] in passed:
            heapq.heappop(remaining)
        if (largest_before is None or largest_before < value) and (
            not remaining or remaining[0] > value
        ):
            found.append(value)
        largest_before = value if largest_before is None else max(largest_before, value)
    return found


def minimum_difference(values: Sequence[int]) -> int:
    """Return the least max - min reachable by moving units from a_i to a_{i+1}."""
    if not values:
        raise ValueError("values must not be empty")
    # Blocks of (level, count), levels non-increasing from the bottom of the stack.
    stack: list[tuple[int, int]] = []
    for value in reversed(values):
        total, count = value, 1
        while stack and stack[-1][0] < -(-total // count):
            level, size = stack.pop()
            total += level * size
            count += size
        quotient, remainder = divmod(total, count)
        if remainder == 0:
            stack.append((quotient, count))
        else:
            stack.append((quotient + 1, remainder))
            stack.append((quotient, count - remainder))
    return stack[0][0] - stack[-1][0]


def trinity_moves(values: Iterable[int]) -> int:
    """Return the fewest assignments a_i := a_j after which every three values
    form a non-degenerate triangle."""
    numbers = sorted(values)
    n = len(numbers)
    best = n
    reach = 0
    for i in range(n):
        if i + 1 == n:
            best = min(best, i)
            break
        smallest_pair = numbers[i] + numbers[i + 1]
        while reach + 1 < n and numbers[reach + 1] < smallest_pair:
            reach += 1
        best = min(best, i + n - 1 - reach)
    return best


def max_wins(mine: Iterable[int], theirs: Iterable[int]) -> int:
    """Return the most rounds mine can win when each card of mine meets one of theirs."""
    own = sorted(set(mine))
    other = sorted(set(theirs), reverse=True)
    if len(other) < len(own):
        raise ValueError("theirs must hold at least as many cards as mine")
    wins = 0
    low, high = 0, len(own) - 1
    for card in other:
        if low > high:
            break
        if card > own[high]:
            low += 1
        else:
            wins += 1
            high -= 1
    return wins


def duel_outcomes(n: int, hand: Iterable[int]) -> tuple[int, int]:
    """Return the fewest and most rounds a hand of n cards from 1..2n can win
    against the other n cards."""
    hand = set(hand)
    if len(hand) != n or any(not 1 <= card <= 2 * n for card in hand):
        raise ValueError(f"hand must hold {n} distinct cards from 1..{2 * n}")
    rest = set(range(1, 2 * n + 1)) - hand
    return n - max_wins(rest, hand), max_wins(hand, rest)


def max_ice_cream_customers(people: Sequence[int], shops: Iterable[int]) -> int:
    """Return the most people a new shop can serve.

    House i stands at 100 * i and holds people[i]; shops are existing positions.
    A person goes to the strictly nearest shop. Houses with a shop on them, and
    houses holding nobody, count as shops.
    """
    people = list(people)
    n = len(people)
    shops = list(shops)
    if any(x < 0 for x in shops):
        raise ValueError("shop positions must be non-negative")

    has_shop = [False] * n
    points: set[tuple[int, int]] = set()
    for x in shops:
        if x % 100 == 0 and x // 100 <= n - 1:
            has_shop[x // 100] = True
        points.add((x, 0))
    for i, count in enumerate(people):
        if not has_shop[i]:
            points.add((100 * i, count))
    ordered = sorted(points)

    shop_left = [0] * n
    shop_right = [0] * n
    last = -1
    for x, count in ordered:
        if count == 0:
            last = x
        else:
            shop_left[x // 100] = last
    last = -1
    for x, count in reversed(ordered):
        if count == 0:
            last = x
        else:
            shop_right[x // 100] = last

    def upper(index: int) -> float:
        x = ordered[index][0]
        left = shop_left[x // 100]
        return math.inf if left == -1 else x + (x - left)

    best = 0
    total = 0
    start = 0
    for i, (x, count) in enumerate(ordered):
        if count == 0:
            start = i + 1
            total = 0
            continue
        right = shop_right[x // 100]
        lower = -math.inf if right == -1 else x - (right - x)
        total += count
        high = upper(start)
        while high <= lower:
            total -= ordered[start][1]
            start += 1
            high = upper(start)
        best = max(best, total)
    return best


def _step(score: int, rating: int) -> int:
    if score < rating:
        return score + 1
    if score == rating:
        return score
    return score - 1


def best_rating(ratings: Sequence[int]) -> int:
    """Return the highest final rating after skipping one non-empty run of contests."""
    if not ratings:
        raise ValueError("ratings must not be empty")
    plain = 0  # never skipped
    skipping = 0  # inside the skipped run
    after: int | None = None  # past a skipped run
    for position, rating in enumerate(ratings, 1):
        next_skipping = max(plain, skipping)
        next_after = None
        if position >= 2:
            next_after = _step(skipping, rating)
            if after is not None:
                next_after = max(next_after, _step(after, rating))
        plain = _step(plain, rating)
        skipping, after = next_skipping, next_after
    return skipping if after is None else max(after, skipping)