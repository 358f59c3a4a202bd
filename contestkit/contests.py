"""Small contest-organisation problems."""

from __future__ import annotations

from collections import Counter
from typing import Iterable


def advancing_teams(teams: Iterable[tuple[int, int]], k: int, c: int) -> list[int]:
    """Return the k advancing team ids in ranking order.

    teams holds (team_id, school) pairs in ranking order. At most c teams per
    school advance first; leftover places go to the best remaining teams.
    """
    teams = list(teams)
    per_school: Counter[int] = Counter()
    qualified: set[int] = set()
    for team, school in teams:
        if len(qualified) >= k:
            break
        if per_school[school] >= c:
            continue
        qualified.add(team)
        per_school[school] += 1

    remaining = k - len(qualified)
    advancing = []
    for team, _ in teams:
        if team in qualified:
            advancing.append(team)
        elif remaining > 0:
            advancing.append(team)
            remaining -= 1
    return advancing


def swerc_beauty(problems: Iterable[tuple[int, int]]) -> int | None:
    """Return the largest total beauty of one problem for each difficulty 1..10.

    problems holds (beauty, difficulty) pairs; None when a difficulty is missing.
    """
    best: dict[int, int] = {}
    for beauty, difficulty in problems:
        best[difficulty] = max(best.get(difficulty, 0), beauty)
    chosen = [best.get(difficulty, 0) for difficulty in range(1, 11)]
    if any(beauty == 0 for beauty in chosen):
        return None
    return sum(chosen)


def arrange_bottles(n: int, requests: Iterable[tuple[int, int]]) -> str | None:
    """Return a row of n bottles ('R' and 'W') meeting every (red, white) request.

    A request asks for a run holding that many red bottles followed by that
    many white ones; None when impossible.
    """
    max_red = max_white = 0
    for red, white in requests:
        max_red = max(max_red, red)
        max_white = max(max_white, white)
    if max_red + max_white > n:
        return None
    return "R" * (n - max_white) + "W" * max_white


def cornhusker_yield(fields: Iterable[tuple[int, int]], n: int, kwf: int) -> int:
    """Return the estimated yield from five (width, length) samples."""
    fields = list(fields)
    if len(fields) != 5:
        raise ValueError("exactly five field samples are required")
    if kwf == 0:
        raise ValueError("kwf must not be zero")
    average = sum(width * length for width, length in fields) // 5
    return average * n // kwf