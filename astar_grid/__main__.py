"""Main entry point for the A* grid editor."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import CONFIG, ConfigError, load_config, validate_config
from .domain.astar import run_search
from .domain.errors import GridSearchError
from .domain.path import to_start_first
from .domain.heuristics import HEURISTICS
from .domain.types import CellKind, Coord
from .utils.grid_factory import configure_grid, render_text

logger = logging.getLogger("astar_grid")


def _coord(text: str) -> Coord:
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {text!r}") from None
    return Coord(x, y)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="astar_grid", description="A* shortest path on a cell grid")
    parser.add_argument("--config", type=str, help="Path to a YAML config file")
    parser.add_argument("--rows", type=int, help="Grid rows")
    parser.add_argument("--cols", type=int, help="Grid columns")
    parser.add_argument("--heuristic", choices=sorted(HEURISTICS), help="Cost estimator")
    parser.add_argument("--penalty-walls", action="store_true",
                        help="Let the search enter walls, discouraged only by the wall penalty")
    parser.add_argument("--log-level", type=str, help="Global log level, e.g. DEBUG")
    parser.add_argument("--print", dest="headless", action="store_true",
                        help="Print the path as text instead of opening a window")
    parser.add_argument("--start", type=_coord, help="Start cell as X,Y (with --print)")
    parser.add_argument("--goal", type=_coord, help="Goal cell as X,Y (with --print)")
    parser.add_argument("--wall", type=_coord, action="append", default=[],
                        help="Wall cell as X,Y; repeatable (with --print)")
    return parser


def apply_overrides(args: argparse.Namespace) -> None:
    """Fold the config file and command line flags into CONFIG."""
    if args.config:
        loaded = load_config(args.config)
        CONFIG.grid, CONFIG.search, CONFIG.logging = loaded.grid, loaded.search, loaded.logging
    if args.rows is not None:
        CONFIG.grid.rows = args.rows
    if args.cols is not None:
        CONFIG.grid.cols = args.cols
    if args.heuristic:
        CONFIG.search.heuristic = args.heuristic
    if args.penalty_walls:
        CONFIG.search.walls_block = False
    if args.log_level:
        CONFIG.logging.global_level = args.log_level.upper()
    validate_config(CONFIG)


def configure_logging() -> None:
    numeric_level = getattr(logging, CONFIG.logging.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )
    for module_name, level_str in CONFIG.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if module_numeric_level is not None:
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def run_headless(args: argparse.Namespace) -> int:
    """Build the grid from flags, search once and print the result."""
    grid = configure_grid()
    for wall in args.wall:
        grid.set(wall, CellKind.WALL)
    if args.start is not None:
        grid.set(args.start, CellKind.START)
    if args.goal is not None:
        grid.set(args.goal, CellKind.GOAL)

    path = run_search(grid, args.start, args.goal)
    print(render_text(grid, path))
    if path:
        print(f"Path: {len(path)} cells, {len(path) - 1} steps")
        print(" -> ".join(f"({x},{y})" for x, y in to_start_first(path)))
        return 0
    print("No path exists")
    return 1


def run_gui() -> int:
    """Open the editor window and run the Qt event loop."""
    from PySide6.QtWidgets import QApplication

    os.environ.setdefault('QT_LOGGING_RULES', 'qt.qpa.backingstore=false')
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("A* Search")

    # Import UI components (after QApplication is created)
    from .app.controller import GridController
    from .ui.main_window import MainWindow

    controller = GridController(CONFIG.grid.rows, CONFIG.grid.cols)
    window = MainWindow(controller)
    window.show()
    return app.exec()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        apply_overrides(args)
    except (ConfigError, OSError) as e:
        parser.error(str(e))
    configure_logging()

    if not args.headless:
        return run_gui()
    try:
        return run_headless(args)
    except GridSearchError as e:
        logger.error("%s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
