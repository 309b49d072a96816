"""Open-set priority structure for A* with lazy priority updates."""

import heapq
import itertools
from typing import Any, Callable, Dict, List

from .errors import EmptyFrontier
from .types import Coord


class PriorityFrontier:
    """
    Min-priority collection of frontier cells.

    The priority of a cell is read from ``key`` when it is pushed. Pushing a
    cell that is already queued replaces the old entry only when the new
    priority is strictly better; the superseded heap entry is skipped when it
    surfaces. Equal priorities pop in insertion order.
    """

    _REMOVED = object()  # Sentinel for superseded entries

    def __init__(self, key: Callable[[Coord], Any]):
        self._key = key
        self._heap: List[list] = []
        self._entries: Dict[Coord, list] = {}
        self._counter = itertools.count()

    def push(self, coord: Coord) -> None:
        """Insert ``coord`` or lower its priority if already queued."""
        priority = self._key(coord)
        existing = self._entries.get(coord)
        if existing is not None:
            if existing[0] <= priority:
                return
            existing[-1] = self._REMOVED

        entry = [priority, next(self._counter), coord]
        self._entries[coord] = entry
        heapq.heappush(self._heap, entry)

    def pop_best(self) -> Coord:
        """Remove and return the cell with the lowest priority."""
        while self._heap:
            priority, _, coord = heapq.heappop(self._heap)
            if coord is not self._REMOVED:
                del self._entries[coord]
                return coord
        raise EmptyFrontier("pop from an empty frontier")

    def peek_best(self) -> Coord:
        """Return the cell with the lowest priority without removing it."""
        while self._heap:
            coord = self._heap[0][-1]
            if coord is not self._REMOVED:
                return coord
            # Drop stale entry and keep looking
            heapq.heappop(self._heap)
        raise EmptyFrontier("peek at an empty frontier")

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, coord) -> bool:
        return coord in self._entries

    def clear(self) -> None:
        self._heap.clear()
        self._entries.clear()
