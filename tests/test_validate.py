from types import SimpleNamespace

import pytest

from fmgrid.grid import XYLoc
from fmgrid.validate import GridPathChecker, PathValidator, validate_path

# 4x4 map, row-major; "." free, "@" blocked.
ROWS = [
    "....",
    ".@..",
    "....",
    "...@",
]
WIDTH = 4
HEIGHT = 4
GRID = [ch == "." for row in ROWS for ch in row]


def locs(*pairs):
    return [XYLoc(x, y) for x, y in pairs]


def test_empty_path_is_valid():
    assert validate_path(GRID, WIDTH, HEIGHT, []) == -1


def test_single_point_path_reports_zero():
    assert validate_path(GRID, WIDTH, HEIGHT, locs((0, 0))) == 0


def test_straight_path_is_valid():
    assert validate_path(GRID, WIDTH, HEIGHT, locs((0, 0), (3, 0), (3, 2))) == -1


def test_long_diagonal_through_clear_cells():
    assert validate_path(GRID, WIDTH, HEIGHT, locs((2, 0), (3, 1))) == -1


def test_blocked_point_reports_its_index():
    assert validate_path(GRID, WIDTH, HEIGHT, locs((0, 0), (0, 1), (1, 1))) == 2


def test_out_of_bounds_point_reports_its_index():
    assert validate_path(GRID, WIDTH, HEIGHT, locs((0, 0), (4, 0))) == 1


def test_cardinal_through_obstacle_fails():
    assert validate_path(GRID, WIDTH, HEIGHT, locs((0, 0), (0, 1), (3, 1))) == 1


def test_non_ordinal_segment_fails():
    assert validate_path(GRID, WIDTH, HEIGHT, locs((0, 0), (2, 1))) == 0


def test_diagonal_corner_cut_fails():
    # (0,0)->(1,1) passes the blocked cell; (0,2)->(1,1) is the blocked cell itself.
    assert validate_path(GRID, WIDTH, HEIGHT, locs((2, 2), (0, 0))) == 0


def test_repeated_point_edge_is_valid():
    validator = PathValidator(GRID, WIDTH, HEIGHT)
    assert validator.valid_edge((2, 2), (2, 2)) is True


def test_path_validator_get_and_bounds():
    validator = PathValidator(GRID, WIDTH, HEIGHT)
    assert validator.get(0, 0) is True
    assert validator.get(1, 1) is False
    with pytest.raises(IndexError):
        validator.get(WIDTH, 0)


def test_valid_point_accepts_tuples_and_locs():
    validator = PathValidator(GRID, WIDTH, HEIGHT)
    assert validator.valid_point((2, 3)) is True
    assert validator.valid_point(XYLoc(3, 3)) is False
    assert validator.valid_point((-1, 0)) is False


def test_valid_edge_is_symmetric():
    validator = PathValidator(GRID, WIDTH, HEIGHT)
    free = [(x, y) for y in range(HEIGHT) for x in range(WIDTH) if GRID[y * WIDTH + x]]
    for u in free:
        for v in free:
            assert validator.valid_edge(u, v) == validator.valid_edge(v, u)


def test_checker_uses_attribute_objects():
    checker = GridPathChecker([1 if c else 0 for c in GRID], WIDTH, HEIGHT)
    good = [SimpleNamespace(x=0, y=0), SimpleNamespace(x=0, y=3)]
    bad = [SimpleNamespace(x=0, y=0), SimpleNamespace(x=1, y=1)]
    assert checker.validate_path(good) == -1
    assert checker.validate_path(bad) == 1


def test_checker_matches_function():
    checker = GridPathChecker(GRID, WIDTH, HEIGHT)
    path = locs((0, 0), (0, 2), (2, 0))
    assert checker.validate_path(path) == validate_path(GRID, WIDTH, HEIGHT, path)