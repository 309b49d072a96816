"""Configuration loader for astar_grid."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from .domain.heuristics import DEFAULT_WALL_PENALTY, HEURISTICS

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


class ConfigError(ValueError):
    """Configuration file contents are unusable."""


@dataclass
class GridConfig:
    """Grid dimensions for a session."""

    rows: int = 10
    cols: int = 10


@dataclass
class SearchConfig:
    """Search behaviour.

    ``walls_block`` excludes walls from expansion entirely. With it off, walls
    are only discouraged through ``wall_penalty`` in the heuristic.
    """

    heuristic: str = "euclidean"
    wall_penalty: int = DEFAULT_WALL_PENALTY
    walls_block: bool = True


@dataclass
class LoggingConfig:
    """Log levels applied by the entry point."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig = field(default_factory=GridConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def check_wall_penalty(rows: int, cols: int, wall_penalty: int, walls_block: bool) -> None:
    """
    Raise :class:`ConfigError` if penalty-only walls could look cheaper than
    a real detour on a ``cols`` x ``rows`` grid.
    """

    # A real path never visits more cells than the grid holds
    if not walls_block and wall_penalty <= rows * cols:
        raise ConfigError(
            f"wall_penalty {wall_penalty} must exceed the largest "
            f"possible path cost {rows * cols} on a {cols}x{rows} grid"
        )


def validate_config(config: Config) -> Config:
    """Raise :class:`ConfigError` if ``config`` cannot drive a search."""

    rows, cols = config.grid.rows, config.grid.cols
    if rows <= 0 or cols <= 0:
        raise ConfigError(f"Grid dimensions must be positive, got {cols}x{rows}")
    if config.search.heuristic not in HEURISTICS:
        raise ConfigError(
            f"Unknown heuristic {config.search.heuristic!r}, expected one of {sorted(HEURISTICS)}"
        )
    check_wall_penalty(rows, cols, config.search.wall_penalty, config.search.walls_block)
    return config


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    if not isinstance(data, dict):
        raise ConfigError(f"Top level of the config must be a mapping, got {type(data).__name__}")

    grid_data = data.get("grid", {}) or {}
    search_data = data.get("search", {}) or {}
    logging_data = data.get("logging", {}) or {}

    walls_block = search_data.get("walls_block", True)
    if not isinstance(walls_block, bool):
        raise ConfigError(f"walls_block must be true or false, got {walls_block!r}")

    try:
        grid = GridConfig(
            rows=int(grid_data.get("rows", 10)),
            cols=int(grid_data.get("cols", 10)),
        )
        search = SearchConfig(
            heuristic=str(search_data.get("heuristic", "euclidean")),
            wall_penalty=int(search_data.get("wall_penalty", DEFAULT_WALL_PENALTY)),
            walls_block=walls_block,
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid config value: {e}") from e

    log_config = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return validate_config(Config(grid=grid, search=search, logging=log_config))


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        try:
            raw = yaml.safe_load(path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse {path}: {e}") from e
        logger.debug("Loaded configuration from %s", path)
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "ConfigError",
    "GridConfig",
    "LoggingConfig",
    "SearchConfig",
    "check_wall_penalty",
    "load_config",
    "validate_config",
]
