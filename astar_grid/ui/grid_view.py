"""Grid view for editing cells and showing the current path."""

from typing import Dict, Optional, Tuple

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QPainter
from PySide6.QtWidgets import QGraphicsScene, QGraphicsView

from ..app.controller import GridController
from ..domain.types import Coord
from .tiles import BACKGROUND_COLOR, GridTile


class GridView(QGraphicsView):
    """
    Graphics view for the grid.

    Left click toggles a wall, shift-click places the start and ctrl-click
    places the goal.
    """

    def __init__(self, controller: GridController):
        super().__init__()

        self.controller = controller
        self.scene = QGraphicsScene()
        self.setScene(self.scene)
        self.setBackgroundBrush(QBrush(BACKGROUND_COLOR))

        self.tiles: Dict[Tuple[int, int], GridTile] = {}
        self.tile_size = 75.0
        self.tile_spacing = 15.0

        self.setRenderHint(QPainter.Antialiasing)
        self.controller.grid_updated.connect(self.update_grid)
        self.update_grid()

    def update_grid(self):
        """Rebuild the tiles from the controller's grid and path."""
        grid = self.controller.grid
        on_path = set(self.controller.path)

        self.scene.clear()
        self.tiles.clear()

        pitch = self.tile_size + self.tile_spacing
        self.scene.setSceneRect(0, 0, grid.cols * pitch, grid.rows * pitch)

        for coord, kind in grid.cells():
            tile = GridTile(coord.x, coord.y, self.tile_size, self.tile_spacing,
                            kind, coord in on_path)
            self.scene.addItem(tile)
            self.tiles[coord] = tile

    def tile_at(self, scene_x: float, scene_y: float) -> Optional[Coord]:
        """Map a scene position to a cell, ignoring the gaps between tiles."""
        pitch = self.tile_size + self.tile_spacing
        x, y = int(scene_x // pitch), int(scene_y // pitch)
        if scene_x - x * pitch > self.tile_size or scene_y - y * pitch > self.tile_size:
            return None
        coord = Coord(x, y)
        if scene_x < 0 or scene_y < 0 or not self.controller.grid.is_valid_coord(coord):
            return None
        return coord

    def mousePressEvent(self, event):
        """Handle mouse press events for cell editing."""
        if event.button() == Qt.LeftButton:
            scene_pos = self.mapToScene(event.position().toPoint())
            coord = self.tile_at(scene_pos.x(), scene_pos.y())
            if coord is not None:
                modifiers = event.modifiers()
                self.controller.handle_click(
                    coord,
                    shift=bool(modifiers & Qt.ShiftModifier),
                    ctrl=bool(modifiers & Qt.ControlModifier),
                )
        super().mousePressEvent(event)

    def wheelEvent(self, event):
        """Handle mouse wheel for zooming."""
        zoom_factor = 1.15
        if event.angleDelta().y() > 0:
            self.scale(zoom_factor, zoom_factor)
        else:
            self.scale(1 / zoom_factor, 1 / zoom_factor)

    def fit_in_view(self):
        """Fit the entire grid in the view."""
        if self.scene.items():
            self.fitInView(self.scene.itemsBoundingRect(), Qt.KeepAspectRatio)
