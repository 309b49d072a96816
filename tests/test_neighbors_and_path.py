from astar_grid.domain.neighbors import get_neighbors, is_orthogonal_step
from astar_grid.domain.path import path_cost, reconstruct_path, to_start_first, validate_path
from astar_grid.domain.types import CellKind, Coord


def test_corner_has_two_neighbors(grid):
    assert set(get_neighbors(Coord(0, 0), grid)) == {(1, 0), (0, 1)}
    assert set(get_neighbors(Coord(9, 9), grid)) == {(8, 9), (9, 8)}


def test_interior_has_four_orthogonal_neighbors(grid):
    neighbors = get_neighbors(Coord(4, 4), grid)
    assert set(neighbors) == {(3, 4), (5, 4), (4, 3), (4, 5)}
    assert all(is_orthogonal_step(Coord(4, 4), n) for n in neighbors)


def test_walls_filtered_only_when_blocking(grid):
    grid.set((5, 4), CellKind.WALL)
    assert (5, 4) not in get_neighbors(Coord(4, 4), grid)
    assert (5, 4) in get_neighbors(Coord(4, 4), grid, walls_block=False)


def test_orthogonal_step():
    assert is_orthogonal_step((0, 0), (0, 1))
    assert not is_orthogonal_step((0, 0), (1, 1))
    assert not is_orthogonal_step((0, 0), (0, 0))
    assert not is_orthogonal_step((0, 0), (2, 0))


def test_reconstruct_path_goal_first():
    came_from = {Coord(1, 0): Coord(0, 0), Coord(1, 1): Coord(1, 0)}
    path = reconstruct_path(came_from, Coord(1, 1))
    assert path == [(1, 1), (1, 0), (0, 0)]
    assert to_start_first(path) == [(0, 0), (1, 0), (1, 1)]


def test_reconstruct_path_without_predecessor_is_goal_alone():
    assert reconstruct_path({}, Coord(3, 3)) == [(3, 3)]


def test_path_cost():
    assert path_cost([]) == 0
    assert path_cost([Coord(0, 0)]) == 0
    assert path_cost([Coord(0, 0), Coord(0, 1), Coord(1, 1)]) == 2


def test_validate_path():
    assert validate_path([Coord(0, 0)])
    assert validate_path([Coord(0, 0), Coord(1, 0), Coord(1, 1)])
    assert not validate_path([])
    assert not validate_path([Coord(0, 0), Coord(1, 1)])
