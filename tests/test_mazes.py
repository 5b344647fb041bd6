# tests/test_mazes.py
import random
from collections import deque

import pytest

from gridpath.core.grid import GridBusyError, make_grid
from gridpath.core.types import WEIGHTED_CELL
from gridpath.mazes import basic_random, density_random, dfs, recursive_division, stair
from gridpath.mazes.catalog import MAZES, generate_maze
from gridpath.mazes.common import WallPlan

GENERATORS = [recursive_division.generate, basic_random.generate,
              density_random.generate, stair.generate, dfs.generate]

BOARDS = [
    (30, 74, (15, 25), (15, 51)),
    (15, 21, (7, 3), (7, 17)),
    (11, 11, (1, 1), (9, 9)),
    (20, 33, (0, 0), (19, 32)),
]


def _board(rows=30, cols=74, start=(15, 25), end=(15, 51), checkpoint=None):
    return make_grid(rows, cols, start, end, checkpoint)


def _reachable(grid, src):
    """Open cells 4-connected to src."""
    seen = {src}
    queue = deque([src])
    while queue:
        r, c = queue.popleft()
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            n = (r + dr, c + dc)
            if grid.in_bounds(n) and n not in seen and not grid.node_at(n).is_wall:
                seen.add(n)
                queue.append(n)
    return seen


def _open_cells(grid):
    return {n.cell for n in grid.all_nodes() if not n.is_wall}


@pytest.mark.parametrize("gen", GENERATORS)
def test_placements_are_unique_walls_off_special_nodes(gen):
    grid = _board(checkpoint=(15, 38))
    placements = gen(grid, random.Random(1))

    assert placements
    assert len(placements) == len(set(placements))
    assert set(placements) == set(grid.walls())
    for c in placements:
        assert grid.in_bounds(c)
        assert not grid.node_at(c).is_special
    for c in grid.special_cells():
        assert not grid.node_at(c).is_wall


@pytest.mark.parametrize("gen", [recursive_division.generate, basic_random.generate,
                                 density_random.generate, stair.generate])
def test_radius_two_around_special_nodes_is_open(gen):
    grid = _board(checkpoint=(15, 38))
    gen(grid, random.Random(2))

    for sr, sc in grid.special_cells():
        for r in range(sr - 2, sr + 3):
            for c in range(sc - 2, sc + 3):
                node = grid.node_at((r, c))
                assert not node.is_wall
                assert node.weight == 0


@pytest.mark.parametrize("gen", [recursive_division.generate, basic_random.generate,
                                 density_random.generate, dfs.generate])
def test_same_seed_same_maze(gen):
    a = gen(_board(), random.Random(42))
    b = gen(_board(), random.Random(42))
    assert a == b


@pytest.mark.parametrize("seed", range(20))
@pytest.mark.parametrize("rows,cols,start,end", BOARDS)
def test_recursive_division_keeps_every_open_cell_connected(seed, rows, cols, start, end):
    grid = make_grid(rows, cols, start, end)
    recursive_division.generate(grid, random.Random(seed))

    reachable = _reachable(grid, grid.start)
    assert grid.end in reachable
    assert reachable == _open_cells(grid)


def test_recursive_division_draws_border_and_interior_lines():
    grid = _board()
    placements = recursive_division.generate(grid, random.Random(0))

    border = [(r, c) for r in range(30) for c in range(74)
              if r in (0, 29) or c in (0, 73)]
    assert placements[:len(border)] == border
    assert len(placements) > len(border)
    # the one-cell gutter inside the border is never walled
    for c in range(1, 73):
        assert not grid.node_at((1, c)).is_wall
        assert not grid.node_at((28, c)).is_wall


def test_recursive_division_surrounding_walls_skips_border():
    grid = _board()
    placements = recursive_division.generate(grid, random.Random(0), surrounding_walls=True)

    assert not grid.node_at((0, 0)).is_wall
    assert all(0 < r < 29 and 0 < c < 73 for r, c in placements)


def test_recursive_division_degenerate_region_is_a_base_case():
    grid = _board()
    placements = recursive_division.generate(grid, random.Random(0), row_start=10, row_end=5,
                                             surrounding_walls=True)
    assert placements == []
    assert grid.walls() == []


def test_recursive_division_weight_kind_tags_weights_not_walls():
    grid = _board()
    placements = recursive_division.generate(grid, random.Random(5), kind="weight")

    assert placements
    assert grid.walls() == []
    assert all(grid.node_at(c).weight == WEIGHTED_CELL for c in placements)


def test_basic_random_shape():
    grid = _board()
    placements = basic_random.generate(grid, random.Random(3))

    seeds = set()
    for r, c in placements:
        on_border = r in (0, 29) or c in (0, 73)
        if on_border:
            continue
        # every interior wall is a stride-2 seed or one step away from one
        if r % 2 == 0 and c % 2 == 0:
            seeds.add((r, c))
        else:
            assert (r % 2 == 0) != (c % 2 == 0)
    assert seeds
    for r, c in seeds:
        assert 2 <= r < 28 and 2 <= c < 72


def test_density_random_starts_from_a_clean_grid():
    grid = _board()
    grid.set_wall(1, 1)
    for r in range(30):
        grid.set_wall(r, 60)

    placements = density_random.generate(grid, random.Random(9))

    assert set(placements) == set(grid.walls())
    assert 0.2 < len(placements) / (30 * 74) < 0.7


def test_stair_is_deterministic_and_diagonal():
    a = stair.generate(_board(), random.Random(1))
    b = stair.generate(_board(), random.Random(99))
    assert a == b

    assert a[:5] == [(2, 2), (2, 3), (2, 4), (3, 4), (4, 4)]
    assert a[5:10] == [(5, 5), (5, 6), (5, 7), (6, 7), (7, 7)]
    assert (26, 28) in a and (27, 28) in a
    assert (28, 28) not in a
    assert (0, 0) in a and (29, 73) in a


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("rows,cols,start,end", BOARDS)
def test_dfs_carves_a_connected_lattice(seed, rows, cols, start, end):
    grid = make_grid(rows, cols, start, end)
    placements = dfs.generate(grid, random.Random(seed))

    assert set(placements) == set(grid.walls())
    for r in range(0, rows, 2):
        for c in range(0, cols, 2):
            assert not grid.node_at((r, c)).is_wall
    reachable = _reachable(grid, grid.start)
    assert grid.end in reachable
    assert reachable == _open_cells(grid)
    assert not any(n.is_visited for n in grid.all_nodes())


def test_wall_plan_skips_specials_and_forgets_cleared_cells():
    grid = make_grid(3, 3, (0, 0), (2, 2))
    plan = WallPlan(grid)

    assert plan.place((0, 0)) is False
    assert plan.place((1, 1)) is True
    assert plan.place((0, 1)) is True
    plan.place((1, 1))
    assert plan.placements == [(1, 1), (0, 1)]

    plan.clear((1, 1))
    assert plan.placements == [(0, 1)]
    assert not grid.node_at((1, 1)).is_wall

    with pytest.raises(ValueError):
        WallPlan(grid, kind="lava")


def test_generate_maze_replaces_old_walls():
    grid = _board()
    grid.set_wall(1, 1)

    placements = generate_maze(grid, "stair")

    assert not grid.node_at((1, 1)).is_wall
    assert set(placements) == set(grid.walls())
    assert not grid.busy


def test_generate_maze_seed_is_reproducible():
    for name in MAZES:
        assert generate_maze(_board(), name, seed=11) == generate_maze(_board(), name, seed=11)


def test_generate_maze_refuses_busy_grid_and_unknown_names():
    grid = _board()
    owner = object()
    grid.claim(owner)
    grid.set_wall(3, 3)

    with pytest.raises(GridBusyError):
        generate_maze(grid, "recursive", seed=1)
    assert grid.walls() == [(3, 3)]

    grid.release(owner)
    with pytest.raises(ValueError):
        generate_maze(grid, "spiral")
