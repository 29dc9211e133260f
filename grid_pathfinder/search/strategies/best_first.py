"""Greedy best-first frontier selection."""

from __future__ import annotations

from typing import Optional, Sequence

from ...core.search_node import SearchNode
from .base import SearchStrategy


class BestFirstStrategy(SearchStrategy):
    """Expand the node that looks closest to the goal.

    Only ``distance_to_goal`` is considered. Ties keep the earliest node in
    the open list.
    """

    name = "best_first"

    def select_next(self, open_nodes: Sequence[SearchNode]) -> Optional[SearchNode]:
        best: Optional[SearchNode] = None
        smallest = float("inf")
        for node in open_nodes:
            if node.distance_to_goal < smallest:
                best = node
                smallest = node.distance_to_goal
        return best


__all__ = ["BestFirstStrategy"]
