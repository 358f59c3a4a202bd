"""Breadth-first search over values reached by arithmetic operations."""

from __future__ import annotations

from collections import deque
from typing import Iterable

_CAP = 1_000_000_000


def apply_operation(op: str, value: int, current: int) -> int:
    """Apply op ('+', '-', '*' or '/') with value to current.

    Results above 10**9 are reported as 10**9 + 1; division truncates toward zero.
    """
    if op == "+":
        result = current + value
        return _CAP + 1 if result > _CAP else result
    if op == "-":
        return current - value
    if op == "*":
        result = current * value
        return _CAP + 1 if result > _CAP else result
    if op == "/":
        quotient = abs(current) // abs(value)
        return -quotient if (current < 0) != (value < 0) else quotient
    raise ValueError(f"unknown operation: {op!r}")


def cheapest_escape(
    memory: Iterable[int],
    currency_index: int,
    operations: Iterable[tuple[str, int]],
) -> list[int] | None:
    """Return the fewest operation numbers (1-based) that move the currency's value
    to one held by no other memory slot, or None when that cannot be done.

    memory lists every slot's value; currency_index (1-based) picks the currency.
    """
    memory = list(memory)
    if not 1 <= currency_index <= len(memory):
        raise ValueError("currency_index is outside the memory")
    operations = list(operations)
    start = memory[currency_index - 1]
    taken = {v for i, v in enumerate(memory, 1) if i != currency_index}
    if start not in taken:
        return []

    came_from: dict[int, tuple[int, int]] = {start: (start, 0)}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for number, (op, value) in enumerate(operations, 1):
            reached = apply_operation(op, value, current)
            if reached < 0 or reached in came_from:
                continue
            came_from[reached] = (current, number)
            if reached not in taken:
                return _trace(came_from, start, reached)
            queue.append(reached)
    return None


def _trace(came_from: dict[int, tuple[int, int]], start: int, end: int) -> list[int]:
    steps = []
    node = end
    while node != start:
        node, number = came_from[node]
        steps.append(number)
    steps.reverse()
    return steps