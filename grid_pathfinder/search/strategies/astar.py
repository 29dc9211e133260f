"""A*-like frontier selection."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from ...core.search_node import SearchNode
from .base import SearchStrategy


class AStarStrategy(SearchStrategy):
    """Expand the node with the lowest ``distance_traveled + distance_to_goal``.

    Among equal costs the deeper node (larger ``distance_traveled``) wins.
    Unlike the other strategies, a step expands the current best candidate
    once for every open node scanned, so a single step may expand several
    nodes as better candidates turn up further down the list.
    """

    name = "astar"

    def _scan(self, open_nodes: Sequence[SearchNode]) -> Iterator[Optional[SearchNode]]:
        """Yield the running best candidate after each scanned node."""

        candidate: Optional[SearchNode] = None
        smallest = float("inf")
        for node in open_nodes:
            cost = node.cost
            if cost < smallest:
                candidate = node
                smallest = cost
            elif cost == smallest:
                if (candidate is not None and node.distance_traveled > candidate.distance_traveled) or (
                    candidate is None and node.distance_traveled > 0
                ):
                    candidate = node
            yield candidate

    def select_next(self, open_nodes: Sequence[SearchNode]) -> Optional[SearchNode]:
        best: Optional[SearchNode] = None
        for best in self._scan(open_nodes):
            pass
        return best

    def expansions(self, open_nodes: Sequence[SearchNode]) -> Iterator[SearchNode]:
        for candidate in self._scan(open_nodes):
            if candidate is not None:
                yield candidate


__all__ = ["AStarStrategy"]
