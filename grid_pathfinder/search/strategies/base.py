"""Base interface for frontier selection strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, Optional, Sequence

from ...core.search_node import SearchNode


class SearchStrategy(ABC):
    """Choose which frontier node a :class:`PathFinder` expands next.

    Strategies are stateless; one instance may be shared by many engines.
    """

    name: str = "strategy"

    @abstractmethod
    def select_next(self, open_nodes: Sequence[SearchNode]) -> Optional[SearchNode]:
        """Return the node to expand, or ``None`` when there is none."""

    def expansions(self, open_nodes: Sequence[SearchNode]) -> Iterator[SearchNode]:
        """Yield every node to expand during a single search step.

        ``open_nodes`` is a snapshot of the open list taken before the step.
        The engine expands each yielded node before resuming the iterator.
        """

        node = self.select_next(open_nodes)
        if node is not None:
            yield node

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["SearchStrategy"]
