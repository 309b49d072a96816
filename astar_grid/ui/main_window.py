"""Main window for the A* grid editor."""

from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QCheckBox, QComboBox, QGroupBox, QHBoxLayout, QLabel, QMainWindow,
    QPushButton, QSpinBox, QStatusBar, QVBoxLayout, QWidget
)

from ..app.controller import GridController
from ..domain.heuristics import HEURISTICS
from .grid_view import GridView


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, controller: GridController):
        super().__init__()
        self.controller = controller

        self.setWindowTitle("A* Search")
        self.setMinimumSize(1000, 800)

        self._create_ui()
        self._setup_connections()
        self._setup_shortcuts()
        self._on_path_changed(self.controller.path)

    def _create_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout(central_widget)
        main_layout.addLayout(self._create_controls())

        self.grid_view = GridView(self.controller)
        main_layout.addWidget(self.grid_view, 1)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

    def _create_controls(self) -> QHBoxLayout:
        """Create the control panel."""
        layout = QHBoxLayout()

        grid_group = QGroupBox("Grid")
        grid_layout = QHBoxLayout(grid_group)

        grid_layout.addWidget(QLabel("Size:"))
        self.cols_spin = QSpinBox()
        self.cols_spin.setRange(2, 99)
        self.cols_spin.setValue(self.controller.grid.cols)
        grid_layout.addWidget(self.cols_spin)

        grid_layout.addWidget(QLabel("×"))
        self.rows_spin = QSpinBox()
        self.rows_spin.setRange(2, 99)
        self.rows_spin.setValue(self.controller.grid.rows)
        grid_layout.addWidget(self.rows_spin)

        self.new_grid_btn = QPushButton("New Grid")
        grid_layout.addWidget(self.new_grid_btn)

        search_group = QGroupBox("Search")
        search_layout = QHBoxLayout(search_group)

        search_layout.addWidget(QLabel("Heuristic:"))
        self.heuristic_combo = QComboBox()
        self.heuristic_combo.addItems(sorted(HEURISTICS))
        self.heuristic_combo.setCurrentText(self.controller.heuristic_id)
        search_layout.addWidget(self.heuristic_combo)

        self.walls_block_check = QCheckBox("Walls block")
        self.walls_block_check.setChecked(self.controller.walls_block)
        search_layout.addWidget(self.walls_block_check)

        help_label = QLabel("Click: wall  |  Shift+click: start  |  Ctrl+click: goal")

        layout.addWidget(grid_group)
        layout.addWidget(search_group)
        layout.addWidget(help_label)
        layout.addStretch()
        return layout

    def _setup_connections(self):
        self.new_grid_btn.clicked.connect(self._on_new_grid)
        self.heuristic_combo.currentTextChanged.connect(self.controller.set_heuristic)
        self.walls_block_check.toggled.connect(self.controller.set_walls_block)
        self.controller.path_changed.connect(self._on_path_changed)
        self.controller.error_occurred.connect(self._on_error)

    def _setup_shortcuts(self):
        QShortcut(QKeySequence("Ctrl+N"), self, self._on_new_grid)
        QShortcut(QKeySequence("Q"), self, self.close)
        QShortcut(QKeySequence("F"), self, self.grid_view.fit_in_view)

    def _on_new_grid(self):
        self.controller.create_new_grid(self.rows_spin.value(), self.cols_spin.value())

    def _on_path_changed(self, path):
        if self.controller.start_coord is None or self.controller.goal_coord is None:
            self.status_bar.showMessage("Place a start (Shift+click) and a goal (Ctrl+click)")
        elif path:
            self.status_bar.showMessage(f"Path found: {len(path)} cells, {len(path) - 1} steps")
        else:
            self.status_bar.showMessage("No path exists")

    def _on_error(self, error_msg: str):
        self.status_bar.showMessage(error_msg, 5000)
