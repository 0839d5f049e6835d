"""Weighted graphs over free grid cells and shortest-path helpers."""

from __future__ import annotations

import heapq
import math
import random
from collections.abc import Callable, Container, Sequence
from dataclasses import dataclass

from fmgrid.grid import Cell, move_cost, neighbors_8

INF = math.inf

AdjList = list[list[tuple[int, float]]]


@dataclass
class Edge:
    """An undirected weighted edge between node indices ``u`` and ``v``."""

    u: int
    v: int
    w: float


def build_adj_list(edges: Sequence[Edge], n: int) -> AdjList:
    """Build an undirected adjacency list for ``n`` nodes."""
    adj: AdjList = [[] for _ in range(n)]
    for edge in edges:
        adj[edge.u].append((edge.v, edge.w))
        adj[edge.v].append((edge.u, edge.w))
    return adj


def dijkstra(adj: AdjList, src: int) -> list[float]:
    """Shortest distances from ``src``; unreachable nodes get ``math.inf``."""
    dist = [INF] * len(adj)
    dist[src] = 0.0
    queue = [(0.0, src)]
    while queue:
        d, u = heapq.heappop(queue)
        if d > dist[u]:
            continue
        for v, w in adj[u]:
            nd = d + w
            if nd < dist[v]:
                dist[v] = nd
                heapq.heappush(queue, (nd, v))
    return dist


def _farthest(dist: Sequence[float], default: int) -> int:
    """Index of the first largest finite distance, or ``default`` if none."""
    best, best_d = default, -1.0
    for i, d in enumerate(dist):
        if d < INF and d > best_d:
            best, best_d = i, d
    return best


def farthest_pair_and_distances(
    adj: AdjList, n: int, rng: random.Random, tau: int = 10
) -> tuple[int, int, list[float], list[float]]:
    """Approximate a farthest pair by ``tau`` rounds of alternating sweeps.

    Returns the pair and the distance lists of the last round's two sweeps.
    """
    a = rng.randrange(n)
    b = a
    dist_a: list[float] = []
    dist_b: list[float] = []
    for _ in range(tau):
        dist_a = dijkstra(adj, a)
        b = _farthest(dist_a, b)
        dist_b = dijkstra(adj, b)
        a = _farthest(dist_b, a)
    return a, b, dist_a, dist_b


def farthest_pair(adj: AdjList, n: int, rng: random.Random, tau: int = 10) -> tuple[int, int]:
    """Approximate a farthest pair of nodes by ``tau`` rounds of sweeps."""
    a, b, _, _ = farthest_pair_and_distances(adj, n, rng, tau)
    return a, b


def _he_pick(
    adj: AdjList,
    origin: int,
    cells: Sequence[Cell],
    heuristic: Callable[[Cell, Cell], float],
) -> int:
    dist = dijkstra(adj, origin)
    best, best_val = origin, -INF
    for v, d in enumerate(dist):
        if d == INF:
            continue
        value = 3.0 * d - 2.0 * heuristic(cells[origin], cells[v])
        if value > best_val:
            best, best_val = v, value
    return best


def farthest_pair_he(
    adj: AdjList,
    n: int,
    cells: Sequence[Cell],
    heuristic: Callable[[Cell, Cell], float],
    rng: random.Random,
) -> tuple[int, int]:
    """Pick pivots maximising ``3 * d - 2 * h`` from a random node, then from the first pivot."""
    if n == 0:
        raise ValueError("cannot pick pivots from an empty graph")
    t = rng.randrange(n)
    p1 = _he_pick(adj, t, cells, heuristic)
    p2 = _he_pick(adj, p1, cells, heuristic)
    return p1, p2


def build_graph_from_grid(
    grid_size: Cell, obstacles: Container[Cell]
) -> tuple[list[Edge], dict[Cell, int], list[Cell]]:
    """Turn the free cells of a ``(rows, cols)`` grid into an 8-connected graph.

    Returns the edge list, the cell-to-index map and the index-to-cell list.
    Cells are numbered in row-major order.
    """
    rows, cols = grid_size
    index_to_cell = [
        (r, c) for r in range(rows) for c in range(cols) if (r, c) not in obstacles
    ]
    cell_to_index = {cell: i for i, cell in enumerate(index_to_cell)}
    edges: list[Edge] = []
    for idx, cell in enumerate(index_to_cell):
        for nb in neighbors_8(cell, grid_size, obstacles):
            nb_idx = cell_to_index.get(nb)
            if nb_idx is not None and idx < nb_idx:
                edges.append(Edge(idx, nb_idx, move_cost(cell, nb)))
    return edges, cell_to_index, index_to_cell