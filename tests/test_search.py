# tests/test_search.py
import pytest

from gridpath.core.astar import AStarAlgo, astar
from gridpath.core.dijkstra import DijkstraAlgo, dijkstra, reconstruct_path
from gridpath.core.grid import GridBusyError, make_grid, manhattan
from gridpath.mazes.catalog import generate_maze


def _assert_valid_path(grid, path, start, end):
    assert path[0] == start
    assert path[-1] == end
    for a, b in zip(path, path[1:]):
        assert manhattan(a, b) == 1
        assert not grid.node_at(b).is_wall


def _chains(grid):
    return {n.cell: n.previous_node for n in grid.all_nodes()}


def test_astar_open_grid_goes_straight_to_the_target(open_5x5):
    visited = astar(open_5x5, (0, 0), (4, 4))

    assert visited == [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0), (4, 1), (4, 2), (4, 3), (4, 4)]
    path = reconstruct_path(open_5x5, (4, 4))
    assert len(path) == 9
    _assert_valid_path(open_5x5, path, (0, 0), (4, 4))


def test_dijkstra_open_grid_finalizes_every_closer_node_first(open_5x5):
    visited = dijkstra(open_5x5, (0, 0), (4, 4))

    # all 24 nodes closer than the target come first
    assert len(visited) == 25
    assert visited[0] == (0, 0)
    assert visited[-1] == (4, 4)
    distances = [manhattan((0, 0), c) for c in visited]
    assert distances == sorted(distances)

    path = reconstruct_path(open_5x5, (4, 4))
    assert len(path) == 9
    _assert_valid_path(open_5x5, path, (0, 0), (4, 4))


@pytest.mark.parametrize("cls", [DijkstraAlgo, AStarAlgo])
def test_walls_are_never_finalized(cls):
    grid = make_grid(5, 5, (0, 0), (0, 4))
    for r in range(4):
        grid.set_wall(r, 2)

    algo = cls()
    algo.init(grid)
    visited = algo.run()

    assert not any(grid.node_at(c).is_wall for c in visited)
    path = algo.path()
    assert len(path) == 13
    _assert_valid_path(grid, path, (0, 0), (0, 4))
    assert (4, 2) in path


@pytest.mark.parametrize("fn", [dijkstra, astar])
def test_unreachable_target_is_not_an_error(fn):
    grid = make_grid(5, 5, (0, 0), (4, 4))
    grid.set_wall(3, 4)
    grid.set_wall(4, 3)

    visited = fn(grid, (0, 0), (4, 4))

    assert not grid.node_at((4, 4)).is_visited
    assert len(visited) == 22
    assert set(visited) == {n.cell for n in grid.all_nodes()} - {(3, 4), (4, 3), (4, 4)}
    assert reconstruct_path(grid, (4, 4)) == [(4, 4)]


@pytest.mark.parametrize("cls", [DijkstraAlgo, AStarAlgo])
def test_no_path_status_and_release(cls):
    grid = make_grid(3, 3, (0, 0), (2, 2))
    grid.set_wall(1, 2)
    grid.set_wall(2, 1)

    algo = cls()
    algo.init(grid)
    statuses = []
    while True:
        res = algo.step()
        statuses.append(res.status)
        if res.finished:
            break

    assert statuses[-1] == "no_path"
    assert algo.path() == []
    assert not grid.busy
    assert algo.step().status == "no_path"


@pytest.mark.parametrize("cls", [DijkstraAlgo, AStarAlgo])
def test_stepping_matches_synchronous_call(cls):
    grid_a = make_grid(30, 74, (15, 25), (15, 51))
    grid_b = make_grid(30, 74, (15, 25), (15, 51))
    generate_maze(grid_a, "recursive", seed=3)
    generate_maze(grid_b, "recursive", seed=3)

    fn = dijkstra if cls is DijkstraAlgo else astar
    visited_sync = fn(grid_a, grid_a.start, grid_a.end)

    algo = cls()
    algo.init(grid_b)
    stepped = []
    while True:
        res = algo.step()
        stepped.extend(res.closed)
        if res.finished:
            break

    assert stepped == visited_sync
    assert _chains(grid_a) == _chains(grid_b)


def test_dijkstra_twice_on_same_grid_is_identical():
    grid = make_grid(30, 74, (15, 25), (15, 51))
    generate_maze(grid, "recursive", seed=11)

    first = dijkstra(grid, grid.start, grid.end)
    first_chains = _chains(grid)
    second = dijkstra(grid, grid.start, grid.end)

    assert second == first
    assert _chains(grid) == first_chains


@pytest.mark.parametrize("fn", [dijkstra, astar])
def test_out_of_bounds_cell_leaves_grid_free(open_5x5, fn):
    with pytest.raises(IndexError):
        fn(open_5x5, (9, 9), (4, 4))
    with pytest.raises(IndexError):
        fn(open_5x5, (0, 0), (4, -1))

    assert not open_5x5.busy
    assert fn(open_5x5, (0, 0), (4, 4))[-1] == (4, 4)


def test_failing_callback_releases_the_grid(open_5x5):
    def boom(cell):
        raise RuntimeError(cell)

    with pytest.raises(RuntimeError):
        dijkstra(open_5x5, (0, 0), (4, 4), on_visit=boom)
    assert not open_5x5.busy


def test_run_pushes_every_finalized_cell_to_callback(open_5x5):
    seen = []
    visited = dijkstra(open_5x5, (0, 0), (2, 2), on_visit=seen.append)

    assert seen == visited
    assert open_5x5.node_at((2, 2)).is_visited


@pytest.mark.parametrize("seed", range(5))
def test_astar_is_optimal_and_never_visits_more_than_dijkstra(seed):
    grid = make_grid(30, 74, (15, 25), (15, 51))
    generate_maze(grid, "recursive", seed=seed)

    d_visited = dijkstra(grid, grid.start, grid.end)
    d_path = reconstruct_path(grid, grid.end)
    a_visited = astar(grid, grid.start, grid.end)
    a_path = reconstruct_path(grid, grid.end)

    assert len(a_path) == len(d_path)
    assert len(a_visited) <= len(d_visited)
    _assert_valid_path(grid, a_path, grid.start, grid.end)


def test_astar_heuristic_follows_the_current_target(open_5x5):
    astar(open_5x5, (0, 0), (4, 4))
    assert open_5x5.node_at((0, 0)).heuristic == 8

    astar(open_5x5, (0, 0), (0, 2))
    assert open_5x5.node_at((0, 0)).heuristic == 2
    assert open_5x5.node_at((4, 4)).heuristic == 6
    assert reconstruct_path(open_5x5, (0, 2)) == [(0, 0), (0, 1), (0, 2)]


def test_start_equal_to_goal_finishes_in_one_step(open_5x5):
    algo = AStarAlgo()
    algo.init(open_5x5, (2, 2), (2, 2))
    res = algo.step()

    assert res.status == "done"
    assert res.path == [(2, 2)]


def test_done_is_sticky(open_5x5):
    algo = DijkstraAlgo()
    algo.init(open_5x5, (0, 0), (0, 1))
    algo.run()

    res = algo.step()
    assert res.status == "done"
    assert res.path == [(0, 0), (0, 1)]
    assert res.metrics["path_len"] == 2


def test_second_search_on_busy_grid_fails_fast(open_5x5):
    first = DijkstraAlgo()
    first.init(open_5x5)
    first.step()

    with pytest.raises(GridBusyError):
        AStarAlgo().init(open_5x5)

    first.cancel()
    assert not open_5x5.busy
    second = AStarAlgo()
    second.init(open_5x5)
    second.run()
    assert not open_5x5.busy


def test_reset_restarts_the_run(open_5x5):
    algo = AStarAlgo()
    algo.init(open_5x5)
    first = algo.run()

    algo.reset()
    assert algo.visited_order == []
    assert open_5x5.busy
    assert algo.run() == first
    assert not open_5x5.busy
