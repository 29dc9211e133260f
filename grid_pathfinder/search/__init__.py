"""Search engine and frontier strategies."""

from .pathfinder import DEFAULT_STEP_INTERVAL, PathFinder, astar, best_first, breadth_first

__all__ = ["DEFAULT_STEP_INTERVAL", "PathFinder", "breadth_first", "best_first", "astar"]
