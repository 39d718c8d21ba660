"""Shortest-path computation using Dijkstra's algorithm.

The engine runs a greedy search over a GraphStore. Every node reached
gets a SearchLabel holding the best known cost from the start and a
link to the label it was reached from. When the end node is extracted
from the frontier, the labels are followed back to the start to build
the path and its per-segment costs.

Labels only live for the duration of one query.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Any, Hashable, List, Optional

from ..domain.errors import NoPathFoundError, UnknownNodeError
from ..domain.models import ShortestPathResult
from ..index import HashTableMap
from .store import GraphStore


@dataclass(slots=True, eq=False)
class SearchLabel:
    """Best known way to reach one node during a query.

    Attributes:
        node: Identity of the node this label belongs to
        cost: Cumulative cost from the start node
        predecessor: Label of the previous node (None for the start)
        weight: Weight of the edge that reached this node from predecessor
    """

    node: Hashable
    cost: float
    predecessor: Optional[SearchLabel] = None
    weight: float = 0.0


class _Frontier:
    """Min-priority queue of labels ordered by cost.

    Follows the heapq "mark removed" recipe: removing a label flags its
    heap entry, and re-adding pushes a fresh entry with the new cost.
    Flagged entries are discarded when they reach the top of the heap.
    """

    _REMOVED = None

    def __init__(self, capacity: int, load_factor: float) -> None:
        self._heap: List[list] = []
        self._entries: HashTableMap[Hashable, list] = HashTableMap(capacity, load_factor)
        self._counter = itertools.count()

    def __bool__(self) -> bool:
        return len(self._entries) > 0

    def add(self, label: SearchLabel) -> None:
        if self._entries.contains_key(label.node):
            self.remove(label)
        entry = [label.cost, next(self._counter), label]
        self._entries.put(label.node, entry)
        heapq.heappush(self._heap, entry)

    def remove(self, label: SearchLabel) -> None:
        entry = self._entries.remove(label.node)
        entry[-1] = self._REMOVED

    def pop(self) -> SearchLabel:
        while self._heap:
            _, _, label = heapq.heappop(self._heap)
            if label is not self._REMOVED:
                self._entries.remove(label.node)
                return label
        raise IndexError("pop from an empty frontier")


@dataclass
class DijkstraEngine:
    """Single-source shortest-path search over a GraphStore.

    The engine only reads the graph; it keeps no state between queries.
    """

    graph: GraphStore = field(default_factory=GraphStore)

    def _compute_shortest_path(self, start: Hashable, end: Hashable) -> SearchLabel:
        """Run the search and return the label of the end node.

        Raises:
            UnknownNodeError: If start or end is not in the graph.
            NoPathFoundError: If end cannot be reached from start.
        """
        for node_id in (start, end):
            if not self.graph.contains_node(node_id):
                raise UnknownNodeError(
                    f"Node not in graph: {node_id!r}", node_id=node_id
                )

        capacity, load_factor = self.graph.index_capacity, self.graph.load_factor
        frontier = _Frontier(capacity, load_factor)
        visited: HashTableMap[Hashable, SearchLabel] = HashTableMap(
            capacity, load_factor
        )

        start_label = SearchLabel(start, 0.0)
        frontier.add(start_label)
        visited.put(start, start_label)

        while frontier:
            current = frontier.pop()
            if current.node == end:
                return current

            for neighbor, weight in self.graph.neighbors_of(current.node):
                candidate = current.cost + weight
                if not visited.contains_key(neighbor):
                    label = SearchLabel(neighbor, candidate, current, weight)
                    frontier.add(label)
                    visited.put(neighbor, label)
                    continue

                existing = visited.get(neighbor)
                if candidate < existing.cost:
                    existing.cost = candidate
                    existing.predecessor = current
                    existing.weight = weight
                    frontier.add(existing)

        raise NoPathFoundError(
            f"There's no path from {start!r} to {end!r}", start=start, end=end
        )

    def shortest_path(self, start: Hashable, end: Hashable) -> ShortestPathResult:
        """Find the cheapest directed walk between two nodes.

        Args:
            start: Identity of the departure node.
            end: Identity of the arrival node.

        Returns:
            ShortestPathResult with the path (start first, end last), the
            weight of every traversed edge and the total cost. When start
            equals end the path has a single node and costs nothing.

        Raises:
            UnknownNodeError: If start or end is not in the graph.
            NoPathFoundError: If end cannot be reached from start.
        """
        label: Optional[SearchLabel] = self._compute_shortest_path(start, end)
        total = label.cost

        path: List[Any] = []
        costs: List[float] = []
        while label is not None:
            path.append(label.node)
            if label.predecessor is not None:
                costs.append(label.weight)
            label = label.predecessor

        path.reverse()
        costs.reverse()
        return ShortestPathResult(
            path=tuple(path),
            segment_costs=tuple(costs),
            total_cost=total,
        )

    def shortest_path_data(self, start: Hashable, end: Hashable) -> List[Any]:
        """Return the node identities along the shortest path."""
        return list(self.shortest_path(start, end).path)

    def shortest_path_segment_costs(self, start: Hashable, end: Hashable) -> List[float]:
        """Return the cost of each segment of the shortest path."""
        return list(self.shortest_path(start, end).segment_costs)

    def shortest_path_cost(self, start: Hashable, end: Hashable) -> float:
        """Return the total cost of the shortest path."""
        return self.shortest_path(start, end).total_cost
