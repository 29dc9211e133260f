"""Search node value type and search lifecycle states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .map import Coord


@dataclass(frozen=True, slots=True, eq=False)
class SearchNode:
    """One discovered tile together with its search distances.

    Nodes compare and hash by ``position`` only.
    """

    position: Coord
    distance_to_goal: int
    distance_traveled: int

    @property
    def cost(self) -> int:
        """Distance travelled plus the estimated distance left."""

        return self.distance_traveled + self.distance_to_goal

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchNode):
            return NotImplemented
        return self.position == other.position

    def __hash__(self) -> int:
        return hash(self.position)


class SearchStatus(Enum):
    """Lifecycle state of a path search."""

    STOPPED = "stopped"
    SEARCHING = "searching"
    NO_PATH = "no_path"
    PATH_FOUND = "path_found"

    @property
    def is_terminal(self) -> bool:
        return self in (SearchStatus.NO_PATH, SearchStatus.PATH_FOUND)


__all__ = ["SearchNode", "SearchStatus"]
