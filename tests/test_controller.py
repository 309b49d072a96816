import pytest

pytest.importorskip("PySide6")

from astar_grid.app.controller import GridController  # noqa: E402
from astar_grid.domain.types import CellKind  # noqa: E402


@pytest.fixture
def controller():
    return GridController(5, 5)


def test_click_emits_updates(controller):
    paths = []
    updates = []
    controller.path_changed.connect(paths.append)
    controller.grid_updated.connect(lambda: updates.append(True))

    assert controller.handle_click((0, 0), shift=True)
    assert controller.handle_click((4, 0), ctrl=True)
    assert len(updates) == 2
    assert paths[-1] == [(4, 0), (3, 0), (2, 0), (1, 0), (0, 0)]
    assert controller.start_coord == (0, 0)
    assert controller.goal_coord == (4, 0)


def test_bad_edit_reports_error(controller):
    errors = []
    controller.error_occurred.connect(errors.append)
    assert not controller.handle_click((9, 9))
    assert len(errors) == 1
    assert "edit cell" in errors[0]


def test_set_cell_kinds(controller):
    controller.set_cell((1, 1), CellKind.WALL)
    controller.set_cell((1, 1), CellKind.WALL)
    assert controller.grid.classify((1, 1)) == CellKind.WALL
    controller.set_cell((1, 1), CellKind.START)
    assert controller.start_coord == (1, 1)
    controller.set_cell((1, 1), CellKind.EMPTY)
    assert controller.start_coord is None


def test_new_grid_and_settings(controller):
    assert controller.create_new_grid(3, 4)
    assert controller.grid.shape == (3, 4)
    assert controller.set_heuristic("manhattan")
    assert controller.heuristic_id == "manhattan"
    assert not controller.set_heuristic("nonsense")
    assert controller.heuristic_id == "manhattan"
    assert controller.set_walls_block(False)
    assert controller.walls_block is False
