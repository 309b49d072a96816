"""Path reconstruction and validation utilities."""

from typing import Dict, List, Sequence

from .neighbors import STEP_COST, is_orthogonal_step
from .types import Coord, Path


def reconstruct_path(came_from: Dict[Coord, Coord], goal: Coord) -> Path:
    """
    Walk the predecessor map back from ``goal``.

    Returns the path in goal-to-start order: the first element is the goal
    and the last is the cell with no predecessor, i.e. the start.
    """
    path = [goal]
    current = goal
    while current in came_from:
        current = came_from[current]
        path.append(current)
    return path


def to_start_first(path: Sequence[Coord]) -> List[Coord]:
    """Reverse a goal-to-start path for callers that want start first."""
    return list(reversed(path))


def path_cost(path: Sequence[Coord]) -> int:
    """Movement cost of a path: one unit per step."""
    if len(path) < 2:
        return 0
    return (len(path) - 1) * STEP_COST


def validate_path(path: Sequence[Coord]) -> bool:
    """
    Validate that a path is non-empty and connected.
    Every consecutive pair must be one orthogonal step apart.
    """
    if not path:
        return False
    return all(is_orthogonal_step(a, b) for a, b in zip(path, path[1:]))
