"""Cost estimators for A* pathfinding."""

import math
from typing import Callable, Dict, Protocol

from .types import CellKind, Coord, Grid

DEFAULT_WALL_PENALTY = 10000


class CostEstimator(Protocol):
    """Estimates the remaining cost from ``candidate`` to ``goal``."""

    def estimate(self, grid: Grid, goal: Coord, candidate: Coord) -> int:
        ...


def euclidean_distance(start: Coord, target: Coord) -> float:
    """Euclidean (L2) distance."""
    dx = start[0] - target[0]
    dy = start[1] - target[1]
    return math.sqrt(dx * dx + dy * dy)


def manhattan_distance(start: Coord, target: Coord) -> float:
    """
    Manhattan (L1) distance.
    Exact on an empty 4-directional grid.
    """
    return abs(start[0] - target[0]) + abs(start[1] - target[1])


class _PenalisedEstimator:
    """Shared wall handling: a wall candidate always costs ``wall_penalty``."""

    def __init__(self, wall_penalty: int = DEFAULT_WALL_PENALTY):
        if wall_penalty <= 0:
            raise ValueError(f"Wall penalty must be positive, got {wall_penalty}")
        self.wall_penalty = wall_penalty

    def estimate(self, grid: Grid, goal: Coord, candidate: Coord) -> int:
        if grid.classify(candidate) == CellKind.WALL:
            return self.wall_penalty
        return self._distance(goal, candidate)

    def _distance(self, goal: Coord, candidate: Coord) -> int:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(wall_penalty={self.wall_penalty})"


class EuclideanEstimator(_PenalisedEstimator):
    """
    Straight-line distance truncated to whole cost units.

    Never overestimates on a 4-directional grid, so paths stay shortest.
    """

    def _distance(self, goal: Coord, candidate: Coord) -> int:
        return int(euclidean_distance(goal, candidate))


class ManhattanEstimator(_PenalisedEstimator):
    """Manhattan distance; exact on open ground, expands fewer cells."""

    def _distance(self, goal: Coord, candidate: Coord) -> int:
        return int(manhattan_distance(goal, candidate))


class ZeroEstimator(_PenalisedEstimator):
    """No distance guidance at all, turning the search into Dijkstra."""

    def _distance(self, goal: Coord, candidate: Coord) -> int:
        return 0


# Mapping from heuristic IDs to estimator classes
HEURISTICS: Dict[str, Callable[[int], CostEstimator]] = {
    "euclidean": EuclideanEstimator,
    "manhattan": ManhattanEstimator,
    "zero": ZeroEstimator,
}


def get_heuristic(heuristic_id: str, wall_penalty: int = DEFAULT_WALL_PENALTY) -> CostEstimator:
    """Build an estimator by ID."""
    try:
        factory = HEURISTICS[heuristic_id]
    except KeyError:
        raise ValueError(
            f"Unknown heuristic {heuristic_id!r}, expected one of {sorted(HEURISTICS)}"
        ) from None
    return factory(wall_penalty)
