"""Neighbor generation for 4-directional grid movement."""

from typing import List, Tuple

from .types import CellKind, Coord, Grid

# Orthogonal moves only; every step costs one unit
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
STEP_COST = 1


def get_neighbors(coord: Coord, grid: Grid, walls_block: bool = True) -> List[Coord]:
    """
    Get the in-bounds orthogonal neighbors of ``coord``.

    With ``walls_block`` off, wall cells are returned too and only the
    heuristic's wall penalty keeps the search away from them.
    """
    neighbors = []
    for dx, dy in DIRECTIONS:
        candidate = coord.offset(dx, dy)
        if not grid.is_valid_coord(candidate):
            continue
        if walls_block and grid.classify(candidate) == CellKind.WALL:
            continue
        neighbors.append(candidate)
    return neighbors


def is_orthogonal_step(from_coord: Coord, to_coord: Coord) -> bool:
    """True when the two cells differ by exactly one unit along one axis."""
    dx = abs(to_coord[0] - from_coord[0])
    dy = abs(to_coord[1] - from_coord[1])
    return dx + dy == 1
