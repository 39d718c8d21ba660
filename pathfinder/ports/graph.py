"""Graph ports - Abstractions for edge loading and routing.

These protocols define the contracts between the query service and the
collaborators that feed it edges and answer path queries.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Hashable, List, Protocol, Union

if TYPE_CHECKING:
    from ..domain.models import EdgeRecord, ShortestPathResult


class EdgeSourcePort(Protocol):
    """Port for reading weighted edges from persistent storage.

    Implementation: adapters/graph/dot_repository.py
    """

    def read_edges(self, file_path: Union[str, Path]) -> List[EdgeRecord]:
        """Read every edge described in a file.

        Args:
            file_path: Path to the edge-list file.

        Returns:
            EdgeRecord for every edge line, in file order.
        """
        ...


class PathSolverPort(Protocol):
    """Port for shortest-path computation.

    Implementation: graph/dijkstra.py (DijkstraEngine)
    """

    def shortest_path(self, start: Hashable, end: Hashable) -> ShortestPathResult:
        """Find the shortest path between two nodes.

        Args:
            start: Departure node identity.
            end: Arrival node identity.

        Returns:
            ShortestPathResult with path, segment costs and total cost.
        """
        ...
