"""Application controller connecting the Qt UI to the grid editor."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from ..config import CONFIG
from ..domain.errors import GridSearchError
from ..domain.heuristics import get_heuristic
from ..domain.types import CellKind, Coord, Grid, Path
from .editor import GridEditor

logger = logging.getLogger(__name__)


class GridController(QObject):
    """
    Controller that owns the GridEditor and tells the UI when to redraw.

    Signals:
        grid_updated: Emitted when the grid needs to be redrawn
        path_changed: Emitted with the new goal-to-start path after each edit
        error_occurred: Emitted when an edit or search fails
    """

    grid_updated = Signal()
    path_changed = Signal(object)  # List[Coord]
    error_occurred = Signal(str)

    def __init__(self, rows: Optional[int] = None, cols: Optional[int] = None):
        super().__init__()
        self._heuristic_id = CONFIG.search.heuristic
        self._editor = GridEditor(
            estimator=get_heuristic(self._heuristic_id, CONFIG.search.wall_penalty),
            walls_block=CONFIG.search.walls_block,
        )
        if rows is not None or cols is not None:
            self._editor.reset(rows, cols)

    # Properties

    @property
    def grid(self) -> Grid:
        return self._editor.grid

    @property
    def start_coord(self) -> Optional[Coord]:
        return self._editor.start

    @property
    def goal_coord(self) -> Optional[Coord]:
        return self._editor.goal

    @property
    def path(self) -> Path:
        return self._editor.path

    @property
    def heuristic_id(self) -> str:
        return self._heuristic_id

    @property
    def walls_block(self) -> bool:
        return bool(self._editor.walls_block)

    # Grid Management

    def create_new_grid(self, rows: int, cols: int) -> bool:
        """Replace the grid with an empty one."""
        return self._apply(lambda: self._editor.reset(rows, cols), "create grid")

    def handle_click(self, coord: Coord, shift: bool = False, ctrl: bool = False) -> bool:
        """Apply a click on a tile."""
        return self._apply(lambda: self._editor.handle_click(coord, shift, ctrl), "edit cell")

    def set_cell(self, coord: Coord, kind: CellKind) -> bool:
        """Set a cell to a specific kind through the editor."""
        def edit():
            if kind == CellKind.START:
                self._editor.place_start(coord)
            elif kind == CellKind.GOAL:
                self._editor.place_goal(coord)
            elif kind == CellKind.WALL:
                if self._editor.grid.classify(coord) != CellKind.WALL:
                    self._editor.clear_cell(coord)
                    self._editor.toggle_wall(coord)
            else:
                self._editor.clear_cell(coord)
        return self._apply(edit, "set cell")

    # Configuration

    def set_heuristic(self, heuristic_id: str) -> bool:
        """Swap the cost estimator and recompute."""
        def edit():
            self._editor.estimator = get_heuristic(heuristic_id, CONFIG.search.wall_penalty)
            self._heuristic_id = heuristic_id
        return self._apply(edit, "change heuristic")

    def set_walls_block(self, walls_block: bool) -> bool:
        """Switch between impassable walls and penalty-only walls."""
        def edit():
            self._editor.walls_block = walls_block
        return self._apply(edit, "change wall policy")

    def _apply(self, edit, action: str) -> bool:
        try:
            edit()
        except (GridSearchError, ValueError) as e:
            logger.error("Failed to %s: %s", action, e)
            self.error_occurred.emit(f"Failed to {action}: {e}")
            return False
        self.grid_updated.emit()
        self.path_changed.emit(self._editor.path)
        return True
