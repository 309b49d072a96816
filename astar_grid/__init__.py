"""A* Grid Search - shortest paths on an editable cell grid.

The pathfinding core lives in ``astar_grid.domain``; ``astar_grid.app`` and
``astar_grid.ui`` provide the interactive PySide6 editor on top of it.
"""

from .domain.astar import SearchEngine, find_path, run_search
from .domain.errors import EmptyFrontier, GridSearchError, InvalidQuery, OutOfBounds
from .domain.heuristics import (
    CostEstimator, EuclideanEstimator, ManhattanEstimator, ZeroEstimator, get_heuristic
)
from .domain.types import CellKind, Coord, Grid, Path, SearchResult
from .utils.grid_factory import configure_grid

__version__ = "1.0.0"

__all__ = [
    "CellKind",
    "Coord",
    "CostEstimator",
    "EmptyFrontier",
    "EuclideanEstimator",
    "Grid",
    "GridSearchError",
    "InvalidQuery",
    "ManhattanEstimator",
    "OutOfBounds",
    "Path",
    "SearchEngine",
    "SearchResult",
    "ZeroEstimator",
    "configure_grid",
    "find_path",
    "get_heuristic",
    "run_search",
]
