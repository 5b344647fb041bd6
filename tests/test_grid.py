# tests/test_grid.py
from math import inf

import pytest

from gridpath.core.grid import (
    GridBusyError,
    make_grid,
    manhattan,
    neighbors,
    reset_search_fields,
)
from gridpath.core.types import Role


def _roles(grid, role):
    return [n.cell for n in grid.all_nodes() if n.role is role]


def test_make_grid_assigns_roles_and_defaults():
    grid = make_grid(4, 6, (1, 1), (2, 4), checkpoint=(3, 0))

    assert (grid.height, grid.width) == (4, 6)
    assert _roles(grid, Role.START) == [(1, 1)]
    assert _roles(grid, Role.END) == [(2, 4)]
    assert _roles(grid, Role.CHECKPOINT) == [(3, 0)]
    for node in grid.all_nodes():
        assert not node.is_wall
        assert not node.is_visited
        assert node.distance == inf
        assert node.total_distance == inf
        assert node.previous_node is None
        assert node.weight == 0


def test_make_grid_rejects_bad_special_positions():
    with pytest.raises(AssertionError):
        make_grid(3, 3, (0, 0), (0, 0))
    with pytest.raises(AssertionError):
        make_grid(3, 3, (0, 0), (3, 0))


def test_node_at_out_of_bounds_raises():
    grid = make_grid(3, 3, (0, 0), (2, 2))
    with pytest.raises(IndexError):
        grid.node_at((3, 0))
    with pytest.raises(IndexError):
        grid.node_at((0, -1))


def test_walls_never_land_on_special_nodes():
    grid = make_grid(3, 3, (0, 0), (2, 2))

    assert grid.set_wall(0, 0) is False
    assert grid.toggle_wall(2, 2) is False
    assert not grid.node_at((0, 0)).is_wall
    assert not grid.node_at((2, 2)).is_wall

    assert grid.set_wall(1, 1) is True
    assert grid.node_at((1, 1)).is_wall
    assert grid.toggle_wall(1, 1) is True
    assert not grid.node_at((1, 1)).is_wall


def test_boost_brush_paints_plus_shape_and_skips_specials():
    grid = make_grid(5, 5, (0, 0), (4, 4))

    assert grid.set_walls_boost(0, 0) == [(1, 0), (0, 1)]
    assert sorted(grid.set_walls_boost(2, 2)) == [(1, 2), (2, 1), (2, 2), (2, 3), (3, 2)]
    assert len(grid.walls()) == 7

    grid.clear_walls()
    assert grid.walls() == []


def test_move_special_node_updates_role_and_pointer_together():
    grid = make_grid(3, 4, (0, 0), (2, 3))

    assert grid.move_special_node(Role.START, (0, 0), (1, 1)) is True
    assert grid.start == (1, 1)
    assert grid.node_at((1, 1)).role is Role.START
    assert grid.node_at((0, 0)).role is Role.NORMAL
    assert _roles(grid, Role.START) == [(1, 1)]


def test_move_special_node_refusals_change_nothing():
    grid = make_grid(3, 4, (0, 0), (2, 3))
    grid.set_wall(1, 1)

    assert grid.move_special_node(Role.START, (0, 0), (1, 1)) is False   # onto a wall
    assert grid.move_special_node(Role.START, (0, 0), (2, 3)) is False   # onto the end
    assert grid.move_special_node(Role.START, (0, 1), (0, 2)) is False   # not the holder
    assert grid.move_special_node(Role.CHECKPOINT, (0, 0), (0, 2)) is False

    assert grid.start == (0, 0)
    assert grid.end == (2, 3)
    assert _roles(grid, Role.START) == [(0, 0)]
    assert _roles(grid, Role.END) == [(2, 3)]


def test_checkpoint_add_and_remove():
    grid = make_grid(3, 3, (0, 0), (2, 2))

    assert grid.add_checkpoint((1, 1)) is True
    assert grid.checkpoint == (1, 1)
    assert grid.add_checkpoint((0, 1)) is False
    assert grid.special_cells() == [(0, 0), (2, 2), (1, 1)]

    assert grid.remove_checkpoint() is True
    assert grid.checkpoint is None
    assert grid.node_at((1, 1)).role is Role.NORMAL
    assert grid.remove_checkpoint() is False

    grid.set_wall(0, 1)
    assert grid.add_checkpoint((0, 1)) is False


def test_random_empty_cell_falls_back_to_scan():
    import random

    grid = make_grid(3, 3, (0, 0), (0, 1))
    for r in range(3):
        for c in range(3):
            grid.set_wall(r, c)
    grid.set_wall(2, 2, False)

    assert grid.random_empty_cell(random.Random(0)) == (2, 2)
    assert grid.add_checkpoint(rng=random.Random(0)) is True
    assert grid.checkpoint == (2, 2)
    assert grid.random_empty_cell(random.Random(0)) is None


def test_randomize_special_nodes_keeps_one_of_each():
    import random

    grid = make_grid(6, 6, (0, 0), (5, 5), checkpoint=(3, 3))
    grid.set_wall(1, 1)
    grid.randomize_special_nodes(random.Random(4))

    assert len(set(grid.special_cells())) == 3
    for role, cell in ((Role.START, grid.start), (Role.END, grid.end),
                       (Role.CHECKPOINT, grid.checkpoint)):
        assert _roles(grid, role) == [cell]
        assert not grid.node_at(cell).is_wall


def test_claim_and_release():
    grid = make_grid(2, 2, (0, 0), (1, 1))
    a, b = object(), object()

    assert grid.claim(a) is True
    assert grid.claim(a) is False
    with pytest.raises(GridBusyError):
        grid.claim(b)

    grid.release(b)
    assert grid.busy
    grid.release(a)
    assert not grid.busy
    assert grid.claim(b) is True


def test_neighbors_order_bounds_and_visited_filter():
    grid = make_grid(5, 5, (0, 0), (4, 4))

    assert [n.cell for n in neighbors(grid.node_at((2, 2)), grid)] == [(1, 2), (3, 2), (2, 1), (2, 3)]
    assert [n.cell for n in neighbors(grid.node_at((0, 0)), grid)] == [(1, 0), (0, 1)]

    grid.node_at((1, 0)).is_visited = True
    assert [n.cell for n in neighbors(grid.node_at((0, 0)), grid, exclude_visited=True)] == [(0, 1)]

    assert [n.cell for n in neighbors(grid.node_at((2, 2)), grid, step=2)] == [(0, 2), (4, 2), (2, 0), (2, 4)]


def test_reset_search_fields_keeps_walls_and_sets_heuristic():
    grid = make_grid(4, 4, (0, 0), (3, 3))
    grid.set_wall(1, 2)
    node = grid.node_at((2, 1))
    node.is_visited = True
    node.distance = 3
    node.previous_node = (1, 1)

    reset_search_fields(grid, target=(3, 3))

    assert grid.node_at((1, 2)).is_wall
    assert not node.is_visited
    assert node.distance == inf
    assert node.previous_node is None
    assert node.heuristic == manhattan((2, 1), (3, 3)) == 3

    reset_search_fields(grid)
    assert all(n.heuristic == 0 for n in grid.all_nodes())
