"""Incremental grid path finding with pluggable search strategies."""

from .core.map import Coord, Map
from .core.search_node import SearchNode, SearchStatus
from .search.pathfinder import PathFinder, astar, best_first, breadth_first
from .search.strategies import (
    AStarStrategy,
    BestFirstStrategy,
    BreadthFirstStrategy,
    SearchStrategy,
    get_strategy,
)

__all__ = [
    "Coord",
    "Map",
    "SearchNode",
    "SearchStatus",
    "PathFinder",
    "breadth_first",
    "best_first",
    "astar",
    "SearchStrategy",
    "BreadthFirstStrategy",
    "BestFirstStrategy",
    "AStarStrategy",
    "get_strategy",
]
