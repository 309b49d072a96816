import itertools
import logging

import pytest

from astar_grid.config import CONFIG
from astar_grid.domain.astar import SearchEngine, find_path, run_search
from astar_grid.domain.errors import InvalidQuery
from astar_grid.domain.fsm import SearchState
from astar_grid.domain.heuristics import EuclideanEstimator, ManhattanEstimator, ZeroEstimator
from astar_grid.domain.path import validate_path
from astar_grid.domain.types import CellKind, Coord, Grid


def manhattan(a, b):
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def test_open_grid_corner_to_corner(grid):
    path = run_search(grid, (0, 0), (9, 9))
    assert len(path) == 19
    assert path[0] == (9, 9)
    assert path[-1] == (0, 0)
    assert validate_path(path)
    assert all(grid.is_valid_coord(c) for c in path)


def test_open_grid_length_is_manhattan_plus_one():
    g = Grid(6, 7)
    cells = [(0, 0), (6, 5), (3, 2), (0, 5), (6, 0), (2, 4)]
    for start, goal in itertools.permutations(cells, 2):
        path = run_search(g, start, goal)
        assert len(path) == manhattan(start, goal) + 1
        assert validate_path(path)


def test_routes_through_gap_in_wall(column_wall_grid):
    path = run_search(column_wall_grid, (0, 0), (9, 0))
    assert (5, 9) in path
    assert len(path) == 28
    assert validate_path(path)
    assert not any(column_wall_grid.classify(c) == CellKind.WALL for c in path)


def test_approaches_goal_through_only_open_neighbor():
    g = Grid(3, 3)
    g.set((2, 1), CellKind.WALL)
    path = run_search(g, (0, 0), (2, 2))
    assert path[0] == (2, 2)
    assert path[1] == (1, 2)
    assert len(path) == 5


def test_walled_in_goal_has_no_path(grid):
    for wall in [(4, 5), (6, 5), (5, 4), (5, 6)]:
        grid.set(wall, CellKind.WALL)
    assert run_search(grid, (0, 0), (5, 5)) == []


def test_walled_in_start_has_no_path(grid):
    grid.set((1, 0), CellKind.WALL)
    grid.set((0, 1), CellKind.WALL)
    result = find_path(grid, (0, 0), (9, 9))
    assert result.path == []
    assert not result.found
    assert not result.success
    assert result.nodes_expanded == 1


def test_penalty_walls_are_crossed_when_nothing_else_remains():
    g = Grid(3, 3)
    g.set((1, 2), CellKind.WALL)
    g.set((2, 1), CellKind.WALL)
    assert run_search(g, (0, 0), (2, 2), walls_block=True) == []

    path = run_search(g, (0, 0), (2, 2), walls_block=False)
    assert len(path) == 5
    assert path[1] in {(1, 2), (2, 1)}


def test_penalty_walls_avoided_while_a_detour_exists(column_wall_grid):
    path = run_search(column_wall_grid, (0, 0), (9, 0), walls_block=False)
    assert (5, 9) in path
    assert not any(column_wall_grid.classify(c) == CellKind.WALL for c in path)


def test_start_equals_goal_returns_single_cell(grid):
    assert run_search(grid, (4, 4), (4, 4)) == [(4, 4)]
    result = find_path(grid, (4, 4), (4, 4))
    assert result.found
    assert result.state == SearchState.FOUND


@pytest.mark.parametrize("start, goal", [
    ((-1, 0), (3, 3)),
    ((0, 0), (10, 3)),
    ((0, 0), (3, 10)),
    (None, (3, 3)),
    ((0, 0), None),
    ((-0.5, 0), (3, 0)),
    ((0, 0), (2.0, 3)),
    ("12", (3, 0)),
    ((0, 0, 0), (3, 0)),
    ((True, 0), (3, 0)),
])
def test_invalid_queries(grid, start, goal):
    with pytest.raises(InvalidQuery):
        run_search(grid, start, goal)


def test_invalid_query_is_a_value_error(grid):
    with pytest.raises(ValueError):
        run_search(grid, (0, 0), (99, 99))


def test_engine_rejects_equal_endpoints(grid):
    engine = SearchEngine(grid)
    with pytest.raises(InvalidQuery):
        engine.initialize((2, 2), (2, 2))


def test_repeated_search_is_identical(column_wall_grid):
    first = run_search(column_wall_grid, (0, 0), (9, 0))
    second = run_search(column_wall_grid, (0, 0), (9, 0))
    assert first == second


@pytest.mark.parametrize("estimator", [EuclideanEstimator(), ManhattanEstimator(), ZeroEstimator()])
def test_every_estimator_finds_a_shortest_path(column_wall_grid, estimator):
    path = run_search(column_wall_grid, (0, 0), (9, 0), estimator=estimator)
    assert len(path) == 28


def test_engine_state_machine(grid):
    engine = SearchEngine(grid)
    assert engine.state == SearchState.INITIALIZING
    with pytest.raises(RuntimeError):
        engine.step()

    engine.initialize((0, 0), (3, 0))
    assert engine.state == SearchState.EXPANDING
    assert Coord(0, 0) in engine.open_cells

    result = engine.run()
    assert engine.state == SearchState.FOUND
    assert result.path == [(3, 0), (2, 0), (1, 0), (0, 0)]
    assert result.path_cost == 3
    assert result.state == SearchState.FOUND
    assert engine.step() is result


def test_engine_reports_exhausted(grid):
    grid.set((1, 0), CellKind.WALL)
    grid.set((0, 1), CellKind.WALL)
    engine = SearchEngine(grid)
    engine.initialize((0, 0), (5, 5))
    result = engine.run()
    assert engine.state == SearchState.EXHAUSTED
    assert result.path == []
    assert result.state == SearchState.EXHAUSTED
    assert not result.found


def test_goal_g_score_matches_path_length(column_wall_grid):
    engine = SearchEngine(column_wall_grid)
    engine.initialize((0, 0), (9, 0))
    result = engine.run()
    assert engine.costs.g_of(Coord(9, 0)) == len(result.path) - 1
    assert engine.costs.g_of(Coord(0, 0)) == 0


def test_predecessor_map_is_acyclic(column_wall_grid):
    engine = SearchEngine(column_wall_grid)
    engine.initialize((0, 0), (9, 0))
    engine.run()
    limit = column_wall_grid.rows * column_wall_grid.cols
    for cell in engine.came_from:
        seen = {cell}
        current = cell
        while current in engine.came_from:
            current = engine.came_from[current]
            assert current not in seen
            seen.add(current)
            assert len(seen) <= limit
        assert current == (0, 0)


def test_predecessors_are_one_step_apart(grid):
    engine = SearchEngine(grid)
    engine.initialize((0, 0), (9, 9))
    engine.run()
    for cell, parent in engine.came_from.items():
        assert validate_path([cell, parent])


def test_expansion_budget_stops_search(grid, caplog):
    engine = SearchEngine(grid, max_expansions=3)
    engine.initialize((0, 0), (9, 9))
    with caplog.at_level(logging.WARNING, logger="astar_grid.domain.astar"):
        result = engine.run()
    assert result.path == []
    assert result.nodes_expanded == 3
    assert engine.state == SearchState.EXHAUSTED
    assert "stopped after 3 expansions" in caplog.text


def test_search_does_not_touch_the_grid(column_wall_grid):
    before = column_wall_grid.copy()
    run_search(column_wall_grid, (0, 0), (9, 0))
    assert column_wall_grid == before


def test_engine_defaults_follow_config(column_wall_grid):
    CONFIG.search.heuristic = "zero"
    CONFIG.search.walls_block = False
    engine = SearchEngine(column_wall_grid)
    assert isinstance(engine.estimator, ZeroEstimator)
    assert engine.walls_block is False

    engine.initialize((0, 0), (9, 0))
    assert engine.run().path == find_path(column_wall_grid, (0, 0), (9, 0)).path


def test_explicit_options_override_config(grid):
    CONFIG.search.walls_block = False
    engine = SearchEngine(grid, ManhattanEstimator(), walls_block=True)
    assert isinstance(engine.estimator, ManhattanEstimator)
    assert engine.walls_block is True
