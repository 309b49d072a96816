"""Grid tile graphics items."""

from PySide6.QtGui import QBrush, QColor, QPen
from PySide6.QtWidgets import QGraphicsRectItem
from PySide6.QtCore import Qt

from ..domain.types import CellKind

BACKGROUND_COLOR = QColor(28, 48, 37)
PATH_COLOR = QColor(0, 191, 163)


class GridTile(QGraphicsRectItem):
    """Graphics item representing a single grid cell."""

    # Color scheme for the cell kinds
    COLORS = {
        CellKind.EMPTY: QColor(68, 117, 91),
        CellKind.WALL: QColor(194, 48, 61),
        CellKind.START: QColor(48, 75, 175),
        CellKind.GOAL: QColor(175, 175, 48),
    }

    def __init__(self, x: int, y: int, size: float, spacing: float,
                 kind: CellKind, on_path: bool = False):
        super().__init__(0, 0, size, size)
        self.grid_x = x
        self.grid_y = y
        self.kind = kind
        self.on_path = on_path

        self.setPos(x * (size + spacing), y * (size + spacing))
        self.setAcceptHoverEvents(True)
        self.update_appearance()

    def update_appearance(self):
        """Update the tile colour from its kind and path membership."""
        # Endpoints keep their own colour even though they lie on the path
        if self.on_path and self.kind not in (CellKind.START, CellKind.GOAL):
            color = PATH_COLOR
        else:
            color = self.COLORS[self.kind]
        self.setBrush(QBrush(color))
        self.setPen(QPen(Qt.NoPen))

    def hoverEnterEvent(self, event):
        self.setBrush(QBrush(self.brush().color().lighter(120)))
        super().hoverEnterEvent(event)

    def hoverLeaveEvent(self, event):
        self.update_appearance()
        super().hoverLeaveEvent(event)
