"""Cutting a square by a segment between two boundary points."""

from __future__ import annotations

SIDE = 2024
_CORNERS = {(0, 0), (0, SIDE), (SIDE, 0), (SIDE, SIDE)}


def triangle_diagonals(x1: int, y1: int, x2: int, y2: int) -> int:
    """Return how many more cuts split the square, cut from (x1, y1) to (x2, y2), into triangles."""
    return 2 - ((x1, y1) in _CORNERS) - ((x2, y2) in _CORNERS)