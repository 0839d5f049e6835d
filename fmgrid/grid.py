"""Grid primitives: locations, 8-connected neighbourhoods and move costs."""

from __future__ import annotations

import math
from collections.abc import Container, Mapping
from dataclasses import dataclass

Cell = tuple[int, int]

SQRT2 = math.sqrt(2.0)

_INT16_MIN = -(2**15)
_INT16_MAX = 2**15 - 1

_NEIGHBOUR_OFFSETS: tuple[Cell, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


@dataclass(frozen=True, order=True)
class XYLoc:
    """A grid location given as column ``x`` and row ``y`` (16-bit signed)."""

    x: int
    y: int

    def __post_init__(self) -> None:
        for name in ("x", "y"):
            value = getattr(self, name)
            if not _INT16_MIN <= value <= _INT16_MAX:
                raise ValueError(f"{name}={value} does not fit in a 16-bit location")


def is_in_bounds(r: int, c: int, rows: int, cols: int) -> bool:
    """Return whether row ``r`` and column ``c`` lie inside a ``rows`` x ``cols`` grid."""
    return 0 <= r < rows and 0 <= c < cols


def neighbors_8(current: Cell, grid_size: Cell, obstacles: Container[Cell]) -> list[Cell]:
    """Return the free 8-connected neighbours of a ``(row, col)`` cell.

    Diagonal moves that would cut the corner of an obstacle are left out.
    ``grid_size`` is ``(rows, cols)``.
    """
    r, c = current
    rows, cols = grid_size

    def allowed(dr: int, dc: int) -> bool:
        nr, nc = r + dr, c + dc
        if not is_in_bounds(nr, nc, rows, cols) or (nr, nc) in obstacles:
            return False
        if dr and dc and ((r, nc) in obstacles or (nr, c) in obstacles):
            return False
        return True

    return [(r + dr, c + dc) for dr, dc in _NEIGHBOUR_OFFSETS if allowed(dr, dc)]


def move_cost(a: Cell, b: Cell) -> float:
    """Cost of a single step: sqrt(2) for a diagonal move, 1 otherwise."""
    return SQRT2 if a[0] != b[0] and a[1] != b[1] else 1.0


def octile(a: Cell, b: Cell) -> float:
    """Octile distance between two cells on an 8-connected grid."""
    dr = abs(a[0] - b[0])
    dc = abs(a[1] - b[1])
    return max(dr, dc) + (SQRT2 - 1.0) * min(dr, dc)


def reconstruct_path(came_from: Mapping[Cell, Cell], current: Cell) -> list[Cell]:
    """Follow predecessor links back from ``current`` and return the path start-first."""
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path