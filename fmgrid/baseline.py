"""Baseline search: one shortest-path spanning tree per connected region of the grid."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from dataclasses import dataclass

Point = tuple[int, int]

COST_0 = 1_000
COST_1 = 1_414

INV = 2**32 - 1
FLOOD_FILL = INV - 1
NO_PRED = INV - 2

# Bit positions of the 3x3 neighbourhood, row by row from the top-left:
# 012
# 345
# 678
_N = 0b000_000_010
_E = 0b000_100_000
_S = 0b010_000_000
_W = 0b000_001_000
_NE = 0b000_000_100 | _N | _E
_NW = 0b000_000_001 | _N | _W
_SE = 0b100_000_000 | _S | _E
_SW = 0b001_000_000 | _S | _W

_MOVES: tuple[tuple[int, int, int, int], ...] = (
    (_N, 0, -1, COST_0),
    (_E, 1, 0, COST_0),
    (_S, 0, 1, COST_0),
    (_W, -1, 0, COST_0),
    (_NE, 1, -1, COST_1),
    (_NW, -1, -1, COST_1),
    (_SE, 1, 1, COST_1),
    (_SW, -1, 1, COST_1),
)


@dataclass(slots=True)
class Node:
    """Predecessor and path cost of one cell in the spanning forest."""

    pred: int = INV
    cost: int = INV


class Grid:
    """A row-major grid of traversable cells with per-cell search state."""

    def __init__(self, cells: Sequence[bool], width: int, height: int) -> None:
        self.cells = cells
        self.width = width
        self.height = height
        self.nodes: list[Node] = []
        self.reset_nodes()

    @property
    def size(self) -> int:
        return len(self.cells)

    def reset_nodes(self) -> None:
        """Mark every cell as unvisited."""
        self.nodes = [Node() for _ in range(self.size)]

    def pack(self, point: Point) -> int:
        """Return the row-major index of an ``(x, y)`` point inside the grid."""
        x, y = point
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f"point {point} is outside a {self.width}x{self.height} grid")
        return y * self.width + x

    def unpack(self, index: int) -> Point:
        """Return the ``(x, y)`` point of a row-major index."""
        if self.width == 0 or not 0 <= index < self.size:
            raise IndexError(f"index {index} is outside the grid")
        return index % self.width, index // self.width

    def get(self, point: Point | int) -> bool:
        """Return whether a point or index is inside the grid and traversable."""
        if isinstance(point, int):
            return 0 <= point < self.size and bool(self.cells[point])
        x, y = point
        return (
            0 <= x < self.width
            and 0 <= y < self.height
            and bool(self.cells[y * self.width + x])
        )


def flood_fill(grid: Grid, origin: int) -> list[Point]:
    """Mark and return the 4-connected region containing the unvisited cell ``origin``."""
    if not 0 <= origin < len(grid.nodes) or grid.nodes[origin].pred != INV:
        raise ValueError(f"cell {origin} is not an unvisited cell of the grid")
    out: list[Point] = []
    grid.nodes[origin].pred = FLOOD_FILL
    stack = [grid.unpack(origin)]
    while stack:
        x, y = stack.pop()
        out.append((x, y))
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            q = (x + dx, y + dy)
            if grid.get(q):
                node = grid.nodes[grid.pack(q)]
                if node.pred == INV:
                    node.pred = FLOOD_FILL
                    stack.append(q)
    return out


def dijkstra(grid: Grid, origin: int) -> None:
    """Grow a shortest-path tree from ``origin`` into ``grid.nodes``.

    Diagonal moves need both adjacent orthogonal cells to be traversable.
    """
    nodes = grid.nodes
    nodes[origin].cost = 0
    nodes[origin].pred = NO_PRED
    queue = [(0, origin)]
    while queue:
        cost, node = heapq.heappop(queue)
        if cost != nodes[node].cost:
            continue
        px, py = grid.unpack(node)
        mask = 0
        bit = 0
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if grid.get((px + dx, py + dy)):
                    mask |= 1 << bit
                bit += 1
        blocked = ~mask
        for required, dx, dy, step in _MOVES:
            if blocked & required:
                continue
            succ = node + dy * grid.width + dx
            new_cost = cost + step
            target = nodes[succ]
            if new_cost < target.cost:
                target.pred = node
                target.cost = new_cost
                heapq.heappush(queue, (new_cost, succ))


def setup_grid(grid: Grid) -> None:
    """Build one spanning tree per 4-connected region, rooted near its centre."""
    grid.reset_nodes()
    for i in range(grid.size):
        if not grid.cells[i] or grid.nodes[i].pred != INV:
            continue
        cluster = flood_fill(grid, i)
        cx = sum(p[0] for p in cluster) // len(cluster)
        cy = sum(p[1] for p in cluster) // len(cluster)
        root = min(cluster, key=lambda q: abs(q[0] - cx) + abs(q[1] - cy))
        dijkstra(grid, grid.pack(root))


class SpanningTreeSearch(Grid):
    """Answers queries by walking both ends up their spanning tree to a common ancestor."""

    def __init__(self, cells: Sequence[bool], width: int, height: int) -> None:
        super().__init__(cells, width, height)
        setup_grid(self)

    def search(self, start: Point, goal: Point) -> list[Point] | None:
        """Return a path from ``start`` to ``goal``, or ``None`` if there is none."""
        ids = [self.pack(start), self.pack(goal)]
        if self.nodes[ids[0]].pred == INV or self.nodes[ids[1]].pred == INV:
            return None
        if ids[0] == ids[1]:
            return [start, start]
        parts: tuple[list[Point], list[Point]] = ([], [])
        while True:
            progress = 0
            c0, c1 = self.nodes[ids[0]].cost, self.nodes[ids[1]].cost
            if c0 == c1:
                if ids[0] == ids[1]:
                    parts[0].append(self.unpack(ids[0]))
                    break
                if c0 == 0:
                    return None
            elif c1 > c0:
                progress = 1
            parts[progress].append(self.unpack(ids[progress]))
            ids[progress] = self.nodes[ids[progress]].pred
        return parts[0] + parts[1][::-1]