"""Grid factory for creating grids and converting them to and from text."""

from typing import Iterable, List, Optional, Sequence, Tuple

from ..config import CONFIG, check_wall_penalty
from ..domain.types import CellKind, Coord, Grid

# Text symbols for each cell kind
SYMBOLS = {
    CellKind.EMPTY: ".",
    CellKind.WALL: "#",
    CellKind.START: "S",
    CellKind.GOAL: "G",
}
PATH_SYMBOL = "*"
_KINDS = {symbol: kind for kind, symbol in SYMBOLS.items()}


def configure_grid(rows: Optional[int] = None, cols: Optional[int] = None) -> Grid:
    """
    Create a new empty grid with the specified dimensions.

    Args:
        rows: Number of rows (configured default when None)
        cols: Number of columns (configured default when None)

    Returns:
        New Grid instance with every cell EMPTY

    Raises:
        ValueError: If rows or cols <= 0
        ConfigError: If the configured wall penalty is too small for penalty-only
            walls on a grid this size
    """
    if rows is None:
        rows = CONFIG.grid.rows
    if cols is None:
        cols = CONFIG.grid.cols
    check_wall_penalty(rows, cols, CONFIG.search.wall_penalty, CONFIG.search.walls_block)
    return Grid(rows, cols)


def grid_from_text(lines: Iterable[str]) -> Tuple[Grid, Optional[Coord], Optional[Coord]]:
    """
    Build a grid from rows of ``.``, ``#``, ``S`` and ``G`` characters.

    Returns:
        Tuple of (grid, start_coord, goal_coord); missing endpoints are None

    Raises:
        ValueError: on ragged rows, unknown symbols or repeated endpoints
    """
    rows = [line.strip() for line in lines if line.strip()]
    if not rows:
        raise ValueError("Grid text is empty")

    width = len(rows[0])
    grid = Grid(len(rows), width)
    endpoints = {CellKind.START: None, CellKind.GOAL: None}

    for y, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"Row {y} has {len(row)} cells, expected {width}")
        for x, symbol in enumerate(row):
            if symbol not in _KINDS:
                raise ValueError(f"Unknown cell symbol {symbol!r} at ({x}, {y})")
            kind = _KINDS[symbol]
            if kind in endpoints:
                if endpoints[kind] is not None:
                    raise ValueError(f"More than one {kind.name} cell in grid text")
                endpoints[kind] = Coord(x, y)
            grid.set((x, y), kind)

    return grid, endpoints[CellKind.START], endpoints[CellKind.GOAL]


def render_text(grid: Grid, path: Sequence[Coord] = ()) -> str:
    """Draw the grid as text, marking path cells that are not endpoints."""
    on_path = set(Coord.of(c) for c in path)
    lines: List[str] = []
    for y in range(grid.rows):
        row = []
        for x in range(grid.cols):
            kind = grid.classify((x, y))
            if (x, y) in on_path and kind not in (CellKind.START, CellKind.GOAL):
                row.append(PATH_SYMBOL)
            else:
                row.append(SYMBOLS[kind])
        lines.append("".join(row))
    return "\n".join(lines)
