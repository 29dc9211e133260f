"""Breadth-first frontier selection."""

from __future__ import annotations

from typing import Optional, Sequence

from ...core.search_node import SearchNode
from .base import SearchStrategy


class BreadthFirstStrategy(SearchStrategy):
    """Expand nodes in the order they were discovered.

    Heuristic values are ignored, so on uniform grids the result has the
    fewest possible hops.
    """

    name = "breadth_first"

    def select_next(self, open_nodes: Sequence[SearchNode]) -> Optional[SearchNode]:
        if not open_nodes:
            return None
        return open_nodes[0]


__all__ = ["BreadthFirstStrategy"]
