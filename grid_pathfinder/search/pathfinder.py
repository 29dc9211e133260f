"""Incremental, time-gated path search over a weighted tile map."""

from __future__ import annotations

import logging
import time
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Set, Tuple

from ..core.map import Coord, Map
from ..core.search_node import SearchNode, SearchStatus
from ..utils.observer import log_event, record_step
from .strategies import SearchStrategy, get_strategy

logger = logging.getLogger(__name__)

DEFAULT_STEP_INTERVAL = 5.0


class PathFinder:
    """Search a :class:`Map` for a route from its start to its end tile.

    The search advances one step at a time. Callers feed elapsed time to
    :meth:`advance`; once ``step_interval`` seconds have accumulated a single
    step is performed. Which frontier node is expanded is decided by the
    injected :class:`SearchStrategy`.

    The caller seeds the open list (:meth:`seed`) and arms the search
    (``is_searching = True``), or uses :meth:`start_search` to do both.
    """

    def __init__(
        self,
        tile_map: Map,
        strategy: SearchStrategy | str,
        step_interval: float = DEFAULT_STEP_INTERVAL,
        event_log: List[Dict[str, Any]] | None = None,
    ) -> None:
        if isinstance(strategy, str):
            strategy = get_strategy(strategy)
        self.map = tile_map
        self.strategy: SearchStrategy = strategy
        self.event_log = event_log

        self._status = SearchStatus.STOPPED
        self._step_interval = 0.0
        self.step_interval = step_interval
        self._total_steps = 0
        self._time_since_last_step = 0.0

        self._open: List[SearchNode] = []
        self._open_positions: Set[Coord] = set()
        self._closed: List[SearchNode] = []
        self._closed_positions: Set[Coord] = set()
        self._paths: Dict[Coord, Coord] = {}

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def status(self) -> SearchStatus:
        return self._status

    @property
    def step_interval(self) -> float:
        """Seconds of elapsed time required between two search steps."""

        return self._step_interval

    @step_interval.setter
    def step_interval(self, value: float) -> None:
        if value < 0:
            raise ValueError("step_interval must not be negative")
        self._step_interval = float(value)

    @property
    def is_searching(self) -> bool:
        return self._status is SearchStatus.SEARCHING

    @is_searching.setter
    def is_searching(self, value: bool) -> None:
        # Only STOPPED <-> SEARCHING; terminal states are left untouched.
        if value and self._status is SearchStatus.STOPPED:
            self._set_status(SearchStatus.SEARCHING)
        elif not value and self._status is SearchStatus.SEARCHING:
            self._set_status(SearchStatus.STOPPED)

    @property
    def total_steps(self) -> int:
        return self._total_steps

    @property
    def open_list(self) -> Tuple[SearchNode, ...]:
        return tuple(self._open)

    @property
    def closed_list(self) -> Tuple[SearchNode, ...]:
        return tuple(self._closed)

    @property
    def predecessors(self) -> Mapping[Coord, Coord]:
        return MappingProxyType(self._paths)

    @property
    def time_since_last_step(self) -> float:
        return self._time_since_last_step

    def _set_status(self, status: SearchStatus) -> None:
        if status is self._status:
            return
        logger.info(
            "[PathFinder] %s: %s -> %s (step %d)",
            self.strategy.name,
            self._status.value,
            status.value,
            self._total_steps,
        )
        self._status = status
        self._emit("status_changed", {"status": status.value})

    def _emit(self, event_type: str, data: Dict[str, Any]) -> None:
        if self.event_log is not None:
            log_event(event_type, data, self.event_log)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Clear the open/closed lists, predecessors and the step timer.

        ``status`` and ``total_steps`` are left as they are.
        """

        self._open.clear()
        self._open_positions.clear()
        self._closed.clear()
        self._closed_positions.clear()
        self._paths.clear()
        self._time_since_last_step = 0.0
        logger.debug("[PathFinder] %s: search state reset", self.strategy.name)

    def seed(self, position: Coord | None = None) -> SearchNode:
        """Add the start node at ``position`` (default ``map.start_tile``) to the open list."""

        if position is None:
            position = self.map.start_tile
        if not self.map.contains(position):
            raise ValueError(f"start position {position} is outside the map")
        node = SearchNode(position, self._estimate(position), 0)
        if position not in self._open_positions and position not in self._closed_positions:
            self._open.append(node)
            self._open_positions.add(position)
        return node

    def start_search(self, start: Coord | None = None) -> None:
        """Reset, seed the start node and begin searching."""

        self.reset()
        self.seed(start)
        self._set_status(SearchStatus.SEARCHING)

    def advance(self, elapsed: float) -> None:
        """Accumulate ``elapsed`` seconds and step once the interval is reached.

        At most one step runs per call; surplus time is discarded.
        """

        if self._status is not SearchStatus.SEARCHING:
            return

        self._time_since_last_step += elapsed
        if self._time_since_last_step >= self._step_interval:
            if self._open:
                self.step()
            self._time_since_last_step = 0.0

    def step(self) -> bool:
        """Perform one expansion attempt now, ignoring the step timer.

        Returns ``True`` if at least one node was expanded. Does nothing, and
        counts no step, unless the status is ``SEARCHING``.
        """

        if self._status is not SearchStatus.SEARCHING:
            return False

        started = time.perf_counter()
        self._total_steps += 1
        expanded = False
        for node in self.strategy.expansions(tuple(self._open)):
            self._expand(node)
            expanded = True
            if self._status is SearchStatus.PATH_FOUND:
                break

        if not expanded:
            logger.debug("[PathFinder] %s: no node to expand", self.strategy.name)
            self._set_status(SearchStatus.NO_PATH)
        elif self._status is not SearchStatus.PATH_FOUND and not self._open:
            self._set_status(SearchStatus.NO_PATH)

        record_step(time.perf_counter() - started)
        return expanded

    # ------------------------------------------------------------------
    # Expansion
    # ------------------------------------------------------------------
    def _estimate(self, position: Coord) -> int:
        """Manhattan distance to the end tile scaled by the tile's own weight."""

        distance = Map.step_distance(position, self.map.end_tile)
        return int(self.map.get_tile_weight(position) * distance)

    def _expand(self, node: SearchNode) -> None:
        current = node.position
        for point in self.map.open_map_tiles(current):
            if point in self._open_positions or point in self._closed_positions:
                continue
            tile = SearchNode(point, self._estimate(point), node.distance_traveled + 1)
            self._open.append(tile)
            self._open_positions.add(point)
            self._paths[point] = current

        if current == self.map.end_tile:
            self._set_status(SearchStatus.PATH_FOUND)

        if current in self._open_positions:
            self._open.remove(node)
            self._open_positions.discard(current)
        if current not in self._closed_positions:
            self._closed.append(node)
            self._closed_positions.add(current)
            logger.debug(
                "[PathFinder] %s: expanded %s (traveled=%d, to_goal=%d)",
                self.strategy.name,
                current,
                node.distance_traveled,
                node.distance_to_goal,
            )
            self._emit("node_expanded", {"pos": current})

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------
    def get_path(self) -> Tuple[bool, List[Coord]]:
        """Return ``(found, path)`` leading from the start up to the end tile.

        The end tile itself is not part of ``path``. ``found`` is ``False``
        and ``path`` empty unless the status is ``PATH_FOUND`` and the end
        tile is in the closed list. After :meth:`reset` there is no path until
        the search runs again.
        """

        if (
            self._status is not SearchStatus.PATH_FOUND
            or self.map.end_tile not in self._closed_positions
        ):
            return False, []

        path: List[Coord] = []
        current = self.map.end_tile
        while current in self._paths:
            current = self._paths[current]
            path.append(current)
        path.reverse()
        return True, path

    def __repr__(self) -> str:
        return (
            f"PathFinder(strategy={self.strategy!r}, status={self._status.value}, "
            f"total_steps={self._total_steps})"
        )


def breadth_first(tile_map: Map, **kwargs: Any) -> PathFinder:
    """Create a breadth-first :class:`PathFinder` for ``tile_map``."""

    return PathFinder(tile_map, "breadth_first", **kwargs)


def best_first(tile_map: Map, **kwargs: Any) -> PathFinder:
    """Create a greedy best-first :class:`PathFinder` for ``tile_map``."""

    return PathFinder(tile_map, "best_first", **kwargs)


def astar(tile_map: Map, **kwargs: Any) -> PathFinder:
    """Create an A*-like :class:`PathFinder` for ``tile_map``."""

    return PathFinder(tile_map, "astar", **kwargs)


__all__ = ["DEFAULT_STEP_INTERVAL", "PathFinder", "breadth_first", "best_first", "astar"]
