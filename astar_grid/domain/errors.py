"""Exceptions raised by the pathfinding core."""


class GridSearchError(Exception):
    """Base class for all grid search errors."""


class OutOfBounds(GridSearchError, IndexError):
    """A coordinate lies outside the grid extent."""

    def __init__(self, coord, rows: int, cols: int):
        self.coord = coord
        self.rows = rows
        self.cols = cols
        shown = tuple(coord) if isinstance(coord, tuple) else repr(coord)
        super().__init__(f"Coordinate {shown} is outside the {cols}x{rows} grid")


class InvalidQuery(GridSearchError, ValueError):
    """Start/goal missing, equal or out of bounds when a search is requested."""


class EmptyFrontier(GridSearchError, IndexError):
    """Pop or peek on a frontier with nothing left in it."""
