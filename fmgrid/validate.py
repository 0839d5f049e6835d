"""Checking that a path of grid locations is legal on an 8-connected map."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

Point = tuple[int, int]


def _coords(point: Any) -> Point:
    """Return ``(x, y)`` from an object with ``x``/``y`` attributes or a pair."""
    if hasattr(point, "x") and hasattr(point, "y"):
        return int(point.x), int(point.y)
    x, y = point
    return int(x), int(y)


def _sign(value: int) -> int:
    return 1 if value > 0 else -1


class PathValidator:
    """Answers traversability questions for a row-major grid of free cells."""

    def __init__(self, grid: Sequence[bool], width: int, height: int) -> None:
        self.grid = grid
        self.width = width
        self.height = height

    def get(self, x: int, y: int) -> bool:
        """Return whether cell ``(x, y)`` is free; it must lie inside the grid."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside a {self.width}x{self.height} grid")
        return bool(self.grid[y * self.width + x])

    def valid_point(self, point: Any) -> bool:
        """Return whether the point is inside the grid and free."""
        x, y = _coords(point)
        return 0 <= x < self.width and 0 <= y < self.height and self.get(x, y)

    def valid_edge(self, u: Any, v: Any) -> bool:
        """Return whether a straight cardinal or diagonal segment from u to v is clear."""
        ux, uy = _coords(u)
        vx, vy = _coords(v)
        dx, dy = vx - ux, vy - uy
        if dx == 0 and dy == 0:
            return True
        if dx == 0 or dy == 0:
            step = (_sign(dx) if dx else 0, _sign(dy) if dy else 0)
            return self._valid_cardinal((ux, uy), (vx, vy), step)
        if abs(dx) != abs(dy):
            return False
        return self._valid_ordinal((ux, uy), (vx, vy), (_sign(dx), _sign(dy)))

    def _walk(self, u: Point, v: Point, step: Point) -> Iterable[Point]:
        x, y = u
        while (x, y) != v:
            yield x, y
            x, y = x + step[0], y + step[1]

    def _valid_cardinal(self, u: Point, v: Point, step: Point) -> bool:
        return all(self.get(x, y) for x, y in self._walk(u, v, step))

    def _valid_ordinal(self, u: Point, v: Point, step: Point) -> bool:
        sx, sy = step
        # Every 2x2 square along the diagonal must be clear.
        for x, y in self._walk(u, v, step):
            if not (self.get(x, y) and self.get(x + sx, y) and self.get(x, y + sy)):
                return False
        return self.get(*v)


def validate_path(grid: Sequence[bool], width: int, height: int, path: Sequence[Any]) -> int:
    """Return -1 if the path is valid, otherwise the index where it first fails.

    A single-point path is reported as failing at index 0; an empty path is valid.
    """
    if not path:
        return -1
    if len(path) == 1:
        return 0
    validator = PathValidator(grid, width, height)
    for i, point in enumerate(path):
        if not validator.valid_point(point):
            return i
    for i, (u, v) in enumerate(zip(path, path[1:])):
        if not validator.valid_edge(u, v):
            return i
    return -1


class GridPathChecker:
    """Holds a map and validates paths of objects with ``x`` and ``y`` attributes."""

    def __init__(self, grid: Iterable[Any], width: int, height: int) -> None:
        self.grid = [bool(cell) for cell in grid]
        self.width = width
        self.height = height

    def validate_path(self, path: Iterable[Any]) -> int:
        """Return -1 if the path is valid, otherwise the failing index."""
        return validate_path(self.grid, self.width, self.height, list(path))