import copy

import pytest

from astar_grid.config import CONFIG
from astar_grid.domain.types import CellKind, Grid


@pytest.fixture(autouse=True)
def restore_config():
    """Undo any CONFIG changes a test (or the CLI under test) makes."""
    saved = copy.deepcopy(CONFIG)
    yield
    CONFIG.grid, CONFIG.search, CONFIG.logging = saved.grid, saved.search, saved.logging


@pytest.fixture
def grid():
    return Grid(10, 10)


@pytest.fixture
def column_wall_grid():
    """10x10 grid with column x=5 walled for rows 0-8; only (5, 9) is open."""
    g = Grid(10, 10)
    for y in range(9):
        g.set((5, y), CellKind.WALL)
    return g
