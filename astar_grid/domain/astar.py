"""Core A* search engine over a cell grid."""

import logging
from typing import Dict, Optional, Set, Tuple

from ..config import CONFIG
from .errors import InvalidQuery
from .fsm import SearchState, SearchStateMachine
from .heuristics import CostEstimator, get_heuristic
from .neighbors import STEP_COST, get_neighbors
from .path import path_cost, reconstruct_path
from .priority_queue import PriorityFrontier
from .types import CostRecord, Coord, Grid, Path, SearchResult

logger = logging.getLogger(__name__)


def validate_query(grid: Grid, start, goal, allow_same: bool = False) -> Tuple[Coord, Coord]:
    """
    Normalise and check a start/goal pair against ``grid``.

    Raises:
        InvalidQuery: if either endpoint is missing or out of bounds, or if
            they coincide and ``allow_same`` is off
    """
    if start is None or goal is None:
        raise InvalidQuery("Start and goal must both be set before searching")
    try:
        start, goal = Coord.of(start), Coord.of(goal)
    except (TypeError, ValueError) as e:
        raise InvalidQuery(f"Malformed start/goal coordinates: {e}") from e

    for name, coord in (("Start", start), ("Goal", goal)):
        if not grid.is_valid_coord(coord):
            raise InvalidQuery(
                f"{name} coordinate {tuple(coord)} is outside the {grid.cols}x{grid.rows} grid"
            )
    if start == goal and not allow_same:
        raise InvalidQuery(f"Start and goal are the same cell {tuple(start)}")
    return start, goal


class SearchEngine:
    """
    A* search over a Grid, one invocation at a time.

    The grid is only read. Cost arrays, predecessor map, frontier and the
    open-cell presence set all belong to the current invocation and are
    rebuilt by ``initialize``.
    """

    def __init__(self, grid: Grid, estimator: Optional[CostEstimator] = None,
                 walls_block: Optional[bool] = None, max_expansions: Optional[int] = None):
        # Unset options fall back to the configured search
        if estimator is None:
            estimator = get_heuristic(CONFIG.search.heuristic, CONFIG.search.wall_penalty)
        if walls_block is None:
            walls_block = CONFIG.search.walls_block
        self.grid = grid
        self.estimator = estimator
        self.walls_block = walls_block
        self.max_expansions = max_expansions
        self._state_machine = SearchStateMachine()
        self._state_machine.on_state_enter(SearchState.FOUND, self._on_found_entered)
        self._state_machine.on_state_enter(SearchState.EXHAUSTED, self._on_exhausted_entered)
        self.reset()

    def reset(self):
        """Drop all per-search state."""
        self.start: Optional[Coord] = None
        self.goal: Optional[Coord] = None
        self.costs: Optional[CostRecord] = None
        self.came_from: Dict[Coord, Coord] = {}
        self.frontier: Optional[PriorityFrontier] = None
        self.open_cells: Set[Coord] = set()
        self.nodes_expanded = 0
        self.result: Optional[SearchResult] = None
        self._state_machine.reset()

    @property
    def state(self) -> SearchState:
        return self._state_machine.current_state

    def initialize(self, start, goal):
        """Seed a new search from ``start`` towards ``goal``."""
        start, goal = validate_query(self.grid, start, goal)

        self.reset()
        self.start = start
        self.goal = goal
        self.costs = CostRecord.allocate(self.grid, start, self._heuristic(start))
        self.frontier = PriorityFrontier(key=self.costs.f_of)
        self.frontier.push(start)
        self.open_cells.add(start)
        self._state_machine.transition_to(SearchState.EXPANDING)

    def step(self) -> Optional[SearchResult]:
        """
        Execute one expansion.
        Returns the SearchResult once the search is over, None otherwise.
        """
        if self.state == SearchState.INITIALIZING:
            raise RuntimeError("Search engine not initialized")
        if self._state_machine.is_finished():
            return self.result

        if self.frontier.is_empty():
            return self._finish(SearchState.EXHAUSTED, [])
        if self.max_expansions is not None and self.nodes_expanded >= self.max_expansions:
            logger.warning("Search stopped after %d expansions without reaching %s",
                           self.nodes_expanded, tuple(self.goal))
            return self._finish(SearchState.EXHAUSTED, [])

        current = self.frontier.pop_best()
        self.open_cells.discard(current)
        if current == self.goal:
            return self._finish(SearchState.FOUND, reconstruct_path(self.came_from, current))

        self.nodes_expanded += 1
        tentative_g = self.costs.g_of(current) + STEP_COST
        for neighbor in get_neighbors(current, self.grid, self.walls_block):
            if tentative_g >= self.costs.g_of(neighbor):
                continue
            self.came_from[neighbor] = current
            self.costs.update(neighbor, tentative_g, tentative_g + self._heuristic(neighbor))
            # Queued cells get their entry re-prioritised, new ones are added
            self.frontier.push(neighbor)
            self.open_cells.add(neighbor)
        return None

    def run(self) -> SearchResult:
        """Run until FOUND or EXHAUSTED and return the result."""
        result = self.step()
        while result is None:
            result = self.step()
        return result

    def _finish(self, state: SearchState, path: Path) -> SearchResult:
        self.result = SearchResult(
            path=path,
            found=state == SearchState.FOUND,
            nodes_expanded=self.nodes_expanded,
            path_cost=path_cost(path),
            state=state,
        )
        self._state_machine.transition_to(state, {"result": self.result})
        return self.result

    def _heuristic(self, coord: Coord) -> int:
        return self.estimator.estimate(self.grid, self.goal, coord)

    def _on_found_entered(self, context):
        result = context["result"]
        logger.debug("Path %s -> %s found: %d cells, %d expansions",
                     tuple(self.start), tuple(self.goal), len(result.path), result.nodes_expanded)

    def _on_exhausted_entered(self, context):
        logger.debug("No path %s -> %s after %d expansions",
                     tuple(self.start), tuple(self.goal), self.nodes_expanded)


def find_path(grid: Grid, start, goal, estimator: Optional[CostEstimator] = None,
              walls_block: Optional[bool] = None,
              max_expansions: Optional[int] = None) -> SearchResult:
    """
    Run a complete search and return the full result.

    Args:
        grid: Grid to search in
        start: Starting coordinate
        goal: Goal coordinate
        estimator: Cost estimator; the configured heuristic when omitted
        walls_block: Whether walls are excluded from expansion; the configured
            policy when omitted
        max_expansions: Optional expansion budget

    Returns:
        SearchResult with the goal-to-start path and statistics
    """
    start, goal = validate_query(grid, start, goal, allow_same=True)
    if start == goal:
        return SearchResult(path=[start], found=True, state=SearchState.FOUND)

    engine = SearchEngine(grid, estimator, walls_block=walls_block, max_expansions=max_expansions)
    engine.initialize(start, goal)
    return engine.run()


def run_search(grid: Grid, start, goal, estimator: Optional[CostEstimator] = None,
               walls_block: Optional[bool] = None) -> Path:
    """
    Shortest path from ``start`` to ``goal``, goal first.

    An empty list means the goal is unreachable. ``start == goal`` yields a
    single-element path.
    """
    return find_path(grid, start, goal, estimator, walls_block).path
