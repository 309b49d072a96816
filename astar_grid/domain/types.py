"""Core type definitions for the grid pathfinding engine."""

import numbers
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from .errors import OutOfBounds
from .fsm import SearchState


class Coord(NamedTuple):
    """A grid cell identified by (column, row)."""
    x: int
    y: int

    @classmethod
    def of(cls, value) -> "Coord":
        """
        Normalise a plain ``(x, y)`` pair into a Coord.

        Raises:
            TypeError: if ``value`` is not a sequence of integers
            ValueError: if ``value`` does not have exactly two components
        """
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise TypeError(f"Coordinate must be an (x, y) pair, got {value!r}")
        if len(value) != 2:
            raise ValueError(f"Coordinate must have two components, got {value!r}")
        for part in value:
            # bool is an Integral but never a cell index
            if isinstance(part, bool) or not isinstance(part, numbers.Integral):
                raise TypeError(f"Coordinate components must be integers, got {value!r}")
        if isinstance(value, Coord):
            return value
        return cls(int(value[0]), int(value[1]))

    def offset(self, dx: int, dy: int) -> "Coord":
        return Coord(self.x + dx, self.y + dy)


# Ordered sequence of cells; goal first, start last
Path = List[Coord]


class CellKind(IntEnum):
    """Classification of a single grid cell."""
    EMPTY = 0
    WALL = 1
    START = 2
    GOAL = 3


class Grid:
    """
    Fixed-size rectangular grid of cell classifications.

    Cells are stored in a numpy array indexed ``[row, col]``; every public
    method takes ``(x, y)`` coordinates. The grid does not enforce the
    single-start/single-goal rule, the editor that mutates it does.
    """

    def __init__(self, rows: int = 10, cols: int = 10):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {cols}x{rows}")
        self._cells = np.full((rows, cols), int(CellKind.EMPTY), dtype=np.int8)

    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def cols(self) -> int:
        return self._cells.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid shape as (rows, cols)."""
        return self._cells.shape

    def is_valid_coord(self, coord) -> bool:
        """Check if coordinate is within grid bounds."""
        x, y = coord
        return 0 <= x < self.cols and 0 <= y < self.rows

    def _checked(self, coord) -> Coord:
        try:
            normalised = Coord.of(coord)
        except (TypeError, ValueError):
            raise OutOfBounds(coord, self.rows, self.cols) from None
        coord = normalised
        if not self.is_valid_coord(coord):
            raise OutOfBounds(coord, self.rows, self.cols)
        return coord

    def classify(self, coord) -> CellKind:
        """Return the kind of the cell at ``coord``."""
        c = self._checked(coord)
        return CellKind(int(self._cells[c.y, c.x]))

    def set(self, coord, kind: CellKind) -> None:
        """Overwrite the cell at ``coord``."""
        c = self._checked(coord)
        self._cells[c.y, c.x] = int(CellKind(kind))

    def find(self, kind: CellKind) -> Optional[Coord]:
        """Return the first cell holding ``kind`` in row-major order, or None."""
        rows, cols = np.nonzero(self._cells == int(kind))
        if len(rows) == 0:
            return None
        return Coord(int(cols[0]), int(rows[0]))

    def coords_of(self, kind: CellKind) -> List[Coord]:
        """Return every cell holding ``kind`` in row-major order."""
        rows, cols = np.nonzero(self._cells == int(kind))
        return [Coord(int(x), int(y)) for y, x in zip(rows, cols)]

    def cells(self) -> Iterator[Tuple[Coord, CellKind]]:
        """Iterate over all (coord, kind) pairs in row-major order."""
        for y in range(self.rows):
            for x in range(self.cols):
                yield Coord(x, y), CellKind(int(self._cells[y, x]))

    def clear(self) -> None:
        """Reset every cell to EMPTY."""
        self._cells.fill(int(CellKind.EMPTY))

    def copy(self) -> "Grid":
        clone = Grid(self.rows, self.cols)
        clone._cells[:] = self._cells
        return clone

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols})"


@dataclass
class CostRecord:
    """
    Per-search g and f scores for every cell.

    Both arrays start at infinity; the start cell is seeded by ``allocate``.
    """
    g: np.ndarray
    f: np.ndarray

    @classmethod
    def allocate(cls, grid: Grid, start: Coord, start_h: int) -> "CostRecord":
        g = np.full(grid.shape, np.inf)
        f = np.full(grid.shape, np.inf)
        g[start.y, start.x] = 0
        f[start.y, start.x] = start_h
        return cls(g=g, f=f)

    def g_of(self, coord: Coord) -> float:
        return float(self.g[coord.y, coord.x])

    def f_of(self, coord: Coord) -> float:
        return float(self.f[coord.y, coord.x])

    def update(self, coord: Coord, g: float, f: float) -> None:
        self.g[coord.y, coord.x] = g
        self.f[coord.y, coord.x] = f


@dataclass
class SearchResult:
    """Result of a search invocation."""
    path: Path = field(default_factory=list)
    found: bool = False
    nodes_expanded: int = 0
    path_cost: int = 0
    state: SearchState = SearchState.EXHAUSTED

    @property
    def success(self) -> bool:
        """Whether a non-empty path was found."""
        return self.found and len(self.path) > 0
