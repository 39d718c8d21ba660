"""Immutable domain models for the campus path finder.

All models are frozen dataclasses with slots. They carry the data that
moves between the DOT reader, the graph engine and the front-end.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable


@dataclass(frozen=True, slots=True)
class EdgeRecord:
    """A weighted connection read from the edge list.

    Attributes:
        source: Predecessor node identity (e.g. a building name)
        target: Successor node identity
        weight: Non-negative cost of the connection (walking seconds)
    """

    source: Hashable
    target: Hashable
    weight: float


@dataclass(frozen=True, slots=True)
class ShortestPathResult:
    """Result of a shortest-path query.

    Attributes:
        path: Node identities from start to end (inclusive)
        segment_costs: Cost of each traversed edge, in path order
        total_cost: Sum of the segment costs
    """

    path: tuple[Any, ...]
    segment_costs: tuple[float, ...] = field(default_factory=tuple)
    total_cost: float = 0.0

    @property
    def num_stops(self) -> int:
        """Return the number of nodes on the path."""
        return len(self.path)

    @property
    def segments(self) -> tuple[tuple[Any, Any, float], ...]:
        """Return (from, to, cost) triples for every traversed edge."""
        return tuple(
            (self.path[i], self.path[i + 1], cost)
            for i, cost in enumerate(self.segment_costs)
        )


@dataclass(frozen=True, slots=True)
class DatasetStats:
    """Summary of the loaded campus graph.

    Attributes:
        node_count: Number of buildings
        edge_count: Number of directed paths between buildings
        total_weight: Walking time summed once per connection
    """

    node_count: int
    edge_count: int
    total_weight: float

    def format(self) -> str:
        """Render the statistics report shown by the front-end."""
        return (
            f"Number of Buildings (Nodes): {self.node_count}\n"
            f"Number of Paths (Edges): {self.edge_count}\n"
            f"Total Walking Time: {self.total_weight:.2f} seconds"
        )
