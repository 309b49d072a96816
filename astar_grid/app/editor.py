"""Grid editing collaborator: paints cells and keeps the path current."""

import logging
from typing import Optional

from ..config import CONFIG, check_wall_penalty
from ..domain.astar import run_search
from ..domain.heuristics import CostEstimator
from ..domain.types import CellKind, Coord, Grid, Path
from ..utils.grid_factory import configure_grid

logger = logging.getLogger(__name__)


class GridEditor:
    """
    Owns a grid plus its start and goal, and re-runs the search after every edit.

    This is the only component that mutates the grid, so it is the one that
    keeps at most one START and one GOAL on it: placing a new endpoint clears
    the cell of the previous one first.
    """

    def __init__(self, grid: Optional[Grid] = None,
                 estimator: Optional[CostEstimator] = None,
                 walls_block: Optional[bool] = None):
        self._grid = grid if grid is not None else configure_grid()
        for kind in (CellKind.START, CellKind.GOAL):
            if len(self._grid.coords_of(kind)) > 1:
                raise ValueError(f"Grid holds more than one {kind.name} cell")
        self._check_wall_penalty(self._grid.rows, self._grid.cols, estimator, walls_block)
        self._estimator = estimator
        self._walls_block = walls_block
        self._start: Optional[Coord] = self._grid.find(CellKind.START)
        self._goal: Optional[Coord] = self._grid.find(CellKind.GOAL)
        self._path: Path = []
        self.recompute()

    # Properties

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def start(self) -> Optional[Coord]:
        return self._start

    @property
    def goal(self) -> Optional[Coord]:
        return self._goal

    @property
    def path(self) -> Path:
        """Current goal-to-start path; empty when there is none."""
        return list(self._path)

    @property
    def estimator(self) -> Optional[CostEstimator]:
        return self._estimator

    @estimator.setter
    def estimator(self, estimator: Optional[CostEstimator]):
        self._check_wall_penalty(self._grid.rows, self._grid.cols, estimator, self._walls_block)
        self._estimator = estimator
        self.recompute()

    @property
    def walls_block(self) -> Optional[bool]:
        return self._walls_block

    @walls_block.setter
    def walls_block(self, value: Optional[bool]):
        self._check_wall_penalty(self._grid.rows, self._grid.cols, self._estimator, value)
        self._walls_block = value
        self.recompute()

    # Editing

    def toggle_wall(self, coord) -> CellKind:
        """
        Flip a cell between EMPTY and WALL.
        Toggling an endpoint clears it and forgets it.
        """
        kind = self._grid.classify(coord)
        coord = Coord.of(coord)
        if kind == CellKind.EMPTY:
            new_kind = CellKind.WALL
        else:
            new_kind = CellKind.EMPTY
            self._forget_endpoint(coord)
        self._grid.set(coord, new_kind)
        logger.debug("Cell %s toggled %s -> %s", tuple(coord), kind.name, new_kind.name)
        self.recompute()
        return new_kind

    def place_start(self, coord):
        """Move START to ``coord``."""
        self._place_endpoint(coord, CellKind.START)

    def place_goal(self, coord):
        """Move GOAL to ``coord``."""
        self._place_endpoint(coord, CellKind.GOAL)

    def clear_cell(self, coord):
        """Reset a single cell to EMPTY."""
        self._grid.classify(coord)
        coord = Coord.of(coord)
        self._forget_endpoint(coord)
        self._grid.set(coord, CellKind.EMPTY)
        self.recompute()

    def handle_click(self, coord, shift: bool = False, ctrl: bool = False):
        """
        Apply a pointer click the way the editor window binds it:
        shift places START, ctrl places GOAL, a plain click toggles a wall.
        """
        if shift:
            self.place_start(coord)
        elif ctrl:
            self.place_goal(coord)
        else:
            self.toggle_wall(coord)

    def reset(self, rows: Optional[int] = None, cols: Optional[int] = None):
        """Start over on a fresh empty grid, optionally resized."""
        rows = rows if rows is not None else self._grid.rows
        cols = cols if cols is not None else self._grid.cols
        self._check_wall_penalty(rows, cols, self._estimator, self._walls_block)
        self._grid = Grid(rows, cols)
        self._start = None
        self._goal = None
        logger.info("New %dx%d grid", self._grid.cols, self._grid.rows)
        self.recompute()

    def recompute(self) -> Path:
        """Re-run the search if both endpoints are placed."""
        if self._start is None or self._goal is None:
            self._path = []
        else:
            self._path = run_search(self._grid, self._start, self._goal,
                                    self._estimator, self._walls_block)
            if not self._path:
                logger.info("Goal %s is unreachable from %s", tuple(self._goal), tuple(self._start))
        return self.path

    def _place_endpoint(self, coord, kind: CellKind):
        self._grid.classify(coord)
        coord = Coord.of(coord)
        previous = self._start if kind == CellKind.START else self._goal
        if previous is not None:
            self._grid.set(previous, CellKind.EMPTY)
        # Overwriting the other endpoint removes it
        self._forget_endpoint(coord)
        self._grid.set(coord, kind)
        if kind == CellKind.START:
            self._start = coord
        else:
            self._goal = coord
        logger.debug("%s placed at %s", kind.name, tuple(coord))
        self.recompute()

    def _forget_endpoint(self, coord: Coord):
        if coord == self._start:
            self._start = None
        if coord == self._goal:
            self._goal = None

    @staticmethod
    def _check_wall_penalty(rows: int, cols: int, estimator: Optional[CostEstimator],
                            walls_block: Optional[bool]):
        if walls_block is None:
            walls_block = CONFIG.search.walls_block
        if estimator is None:
            wall_penalty = CONFIG.search.wall_penalty
        else:
            # Custom estimators without a wall penalty are taken as they are
            wall_penalty = getattr(estimator, "wall_penalty", None)
            if wall_penalty is None:
                return
        check_wall_penalty(rows, cols, wall_penalty, walls_block)
