# fmgrid

Building blocks for path planning on 8-connected octile grids. A diagonal move
may not cut the corner of an obstacle. The package provides these parts:

- grid primitives, such as neighbours, move costs and the octile distance
- a weighted graph over the free cells, with Dijkstra and pivot selection
- a spanning-tree baseline search
- a path validator
- reading and writing of benchmark scenario files
- a nanosecond stopwatch

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from fmgrid.baseline import SpanningTreeSearch
from fmgrid.validate import validate_path

width, height = 4, 3
grid = [
    True, True, True, True,
    True, False, False, True,
    True, True, True, True,
]

search = SpanningTreeSearch(grid, width, height)
path = search.search((0, 0), (3, 2))        # list of (x, y) points, or None
assert path is not None
assert validate_path(grid, width, height, path) == -1
```

## Modules

### `fmgrid.grid`

- `XYLoc(x, y)` is a frozen location. Both values must fit in a 16-bit signed
  integer. Otherwise it raises `ValueError`.
- `is_in_bounds(r, c, rows, cols)` tells whether a cell lies inside the grid.
- `neighbors_8(cell, (rows, cols), obstacles)` returns the free 8-connected
  neighbours of a `(row, col)` cell. It leaves out diagonals that cut a corner.
- `move_cost(a, b)` is `sqrt(2)` for a diagonal step and `1` otherwise.
- `octile(a, b)` returns the octile distance between two cells.
- `reconstruct_path(came_from, current)` follows the predecessor links and
  returns the path with the start first.

### `fmgrid.graph`

- `build_graph_from_grid((rows, cols), obstacles)` returns three things: the
  `Edge` list, a cell-to-index dict and an index-to-cell list. Cells are
  numbered in row-major order.
- `build_adj_list(edges, n)` builds an undirected adjacency list.
- `dijkstra(adj, src)` returns the distances from `src`. Unreachable nodes get
  `math.inf`.
- `farthest_pair(adj, n, rng, tau=10)` and
  `farthest_pair_and_distances(adj, n, rng, tau=10)` approximate a farthest pair
  of nodes. They do this with alternating sweeps driven by a `random.Random`.
- `farthest_pair_he(adj, n, cells, heuristic, rng)` picks pivots that maximise
  `3 * d - 2 * h`. It raises `ValueError` on an empty graph.

### `fmgrid.baseline`

- `Grid(cells, width, height)` is a row-major grid. It offers `pack`, `unpack`
  and `get`.
- `flood_fill`, `dijkstra` and `setup_grid` build one shortest-path spanning
  tree for each 4-connected region. Each tree is rooted near the centre of its
  region. Straight steps cost 1000 and diagonal steps cost 1414.
- `SpanningTreeSearch(cells, width, height).search(start, goal)` climbs both
  ends to their common ancestor and returns the path. It returns `None` when
  the two points are in different regions or one of them is blocked.

### `fmgrid.validate`

- `validate_path(grid, width, height, path)` returns `-1` for a valid path.
  Otherwise it returns the index where the path first fails. An empty path
  counts as valid, and a path with one point fails at index `0`. Points can be
  objects with `x`/`y` attributes, or `(x, y)` pairs.
- `PathValidator` answers questions about single points (`valid_point`) and
  single segments (`valid_edge`). A segment must be cardinal or exactly
  diagonal.
- `GridPathChecker(grid, width, height).validate_path(path)` keeps a copy of
  the map.

### `fmgrid.scenario`

- `ScenarioLoader(path)` reads files of version 0 and version 1. Any other
  version raises `ValueError`. The loader supports `len()`, indexing and
  iteration over `Experiment` records.
- `save(path)` always writes version 1.
- `add_experiment(experiment)` appends a record.

### `fmgrid.timer`

- `Timer` measures nanoseconds on a monotonic clock. Call `start()` and
  `stop()`, or use it as a context manager. `stop()` before `start()` raises
  `RuntimeError`. The last measurement is kept in `elapsed`.

## What this package does not do

- It has no command-line program. Loading `.map` files, running scenarios and
  exporting statistics are left to the caller.
- It has no A* planner guided by embeddings or landmark heuristics. The only
  complete search it ships is `SpanningTreeSearch`. Its paths are valid but are
  not guaranteed to be shortest.