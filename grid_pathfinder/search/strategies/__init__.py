"""Package exposing frontier selection strategies."""

from __future__ import annotations

from typing import Dict, Type

from .base import SearchStrategy
from .breadth_first import BreadthFirstStrategy
from .best_first import BestFirstStrategy
from .astar import AStarStrategy

STRATEGIES: Dict[str, Type[SearchStrategy]] = {
    "breadth_first": BreadthFirstStrategy,
    "bfs": BreadthFirstStrategy,
    "best_first": BestFirstStrategy,
    "gbfs": BestFirstStrategy,
    "astar": AStarStrategy,
    "a_star": AStarStrategy,
}


def get_strategy(name: str) -> SearchStrategy:
    """Return a strategy instance for ``name`` (case-insensitive)."""

    key = name.strip().lower().replace("-", "_")
    try:
        return STRATEGIES[key]()
    except KeyError:
        known = ", ".join(sorted(STRATEGIES))
        raise ValueError(f"Unknown search strategy '{name}'. Expected one of: {known}") from None


__all__ = [
    "SearchStrategy",
    "BreadthFirstStrategy",
    "BestFirstStrategy",
    "AStarStrategy",
    "STRATEGIES",
    "get_strategy",
]
