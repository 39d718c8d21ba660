"""Node and edge storage for the campus graph.

Nodes and edges live in two list arenas owned by the store. Every cross
reference (edge to node, node to edges) is an integer handle into those
arenas, and node identities are resolved to handles through a
HashTableMap. Removed slots are set to None and never reused.

The store is directed: an undirected connection is two edges inserted
by the caller with the same weight.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Hashable, Iterator, List, Optional, Tuple

from ..domain.errors import EdgeNotFoundError, InvalidWeightError, UnknownNodeError
from ..domain.models import EdgeRecord
from ..index import DEFAULT_CAPACITY, DEFAULT_LOAD_FACTOR, HashTableMap


@dataclass(slots=True)
class _Node:
    data: Hashable
    leaving: List[int] = field(default_factory=list)
    entering: List[int] = field(default_factory=list)


@dataclass(slots=True)
class _Edge:
    weight: float
    predecessor: int
    successor: int


class NeighborView:
    """Restartable view over the outgoing edges of one node.

    Each iteration walks the node's current leaving edges and yields
    (successor identity, weight) pairs.
    """

    __slots__ = ("_store", "_handle")

    def __init__(self, store: GraphStore, handle: int) -> None:
        self._store = store
        self._handle = handle

    def __iter__(self) -> Iterator[Tuple[Any, float]]:
        return self._store._iter_leaving(self._handle)

    def __len__(self) -> int:
        node = self._store._nodes[self._handle]
        return len(node.leaving) if node is not None else 0


@dataclass
class GraphStore:
    """Directed weighted graph keyed by caller-supplied node identities.

    Attributes:
        index_capacity: Initial bucket count of the node index
        load_factor: Growth threshold of the node index
    """

    index_capacity: int = DEFAULT_CAPACITY
    load_factor: float = DEFAULT_LOAD_FACTOR

    _index: HashTableMap[Hashable, int] = field(init=False, repr=False)
    _nodes: List[Optional[_Node]] = field(default_factory=list, init=False, repr=False)
    _edges: List[Optional[_Edge]] = field(default_factory=list, init=False, repr=False)
    _edge_count: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        self._index = HashTableMap(self.index_capacity, self.load_factor)

    # Handle helpers

    def _handle_of(self, node_id: Any) -> int:
        if not self._index.contains_key(node_id):
            raise UnknownNodeError(f"Node not in graph: {node_id!r}", node_id=node_id)
        return self._index.get(node_id)

    def _node(self, handle: int) -> _Node:
        node = self._nodes[handle]
        assert node is not None
        return node

    def _edge(self, handle: int) -> _Edge:
        edge = self._edges[handle]
        assert edge is not None
        return edge

    def _find_edge(self, pred: int, succ: int) -> Optional[int]:
        for handle in self._node(pred).leaving:
            if self._edge(handle).successor == succ:
                return handle
        return None

    def _detach_edge(self, handle: int) -> None:
        edge = self._edge(handle)
        self._node(edge.predecessor).leaving.remove(handle)
        self._node(edge.successor).entering.remove(handle)
        self._edges[handle] = None
        self._edge_count -= 1

    def _iter_leaving(self, handle: int) -> Iterator[Tuple[Any, float]]:
        node = self._nodes[handle]
        if node is None:
            return
        for edge_handle in node.leaving:
            edge = self._edge(edge_handle)
            yield self._node(edge.successor).data, edge.weight

    @staticmethod
    def check_weight(weight: float) -> float:
        try:
            value = float(weight)
        except (TypeError, ValueError) as e:
            raise InvalidWeightError(
                f"Edge weight is not a number: {weight!r}", cause=e, weight=weight
            )
        if math.isnan(value) or value < 0:
            raise InvalidWeightError(
                f"Edge weight must be non-negative, got {weight!r}", weight=weight
            )
        return value

    # Nodes

    def insert_node(self, node_id: Hashable) -> bool:
        """Insert a node.

        Returns:
            True if a new node was created, False if it was already present.
        """
        if self._index.contains_key(node_id):
            return False
        self._index.put(node_id, len(self._nodes))
        self._nodes.append(_Node(node_id))
        return True

    def remove_node(self, node_id: Hashable) -> bool:
        """Remove a node and every edge that enters or leaves it.

        Returns:
            True if the node existed, False otherwise.
        """
        if not self._index.contains_key(node_id):
            return False
        handle = self._index.remove(node_id)
        node = self._node(handle)
        # A self-loop shows up in both lists; detach it once.
        for edge_handle in list(dict.fromkeys(node.leaving + node.entering)):
            self._detach_edge(edge_handle)
        self._nodes[handle] = None
        return True

    def contains_node(self, node_id: Any) -> bool:
        return self._index.contains_key(node_id)

    def node_count(self) -> int:
        return self._index.size()

    def nodes(self) -> Iterator[Hashable]:
        """Iterate node identities in insertion order."""
        for node in self._nodes:
            if node is not None:
                yield node.data

    # Edges

    def insert_edge(self, from_id: Hashable, to_id: Hashable, weight: float) -> bool:
        """Insert a directed edge or overwrite the weight of an existing one.

        Args:
            from_id: Predecessor node identity.
            to_id: Successor node identity.
            weight: Non-negative edge weight.

        Returns:
            True if a new edge was created, False if an existing edge's
            weight was replaced.

        Raises:
            UnknownNodeError: If either endpoint was never inserted.
            InvalidWeightError: If the weight is negative or NaN.
        """
        pred = self._handle_of(from_id)
        succ = self._handle_of(to_id)
        value = self.check_weight(weight)

        existing = self._find_edge(pred, succ)
        if existing is not None:
            self._edge(existing).weight = value
            return False

        handle = len(self._edges)
        self._edges.append(_Edge(value, pred, succ))
        self._node(pred).leaving.append(handle)
        self._node(succ).entering.append(handle)
        self._edge_count += 1
        return True

    def remove_edge(self, from_id: Hashable, to_id: Hashable) -> bool:
        """Remove the directed edge from ``from_id`` to ``to_id``.

        Returns:
            True if the edge existed, False otherwise.
        """
        if not (self.contains_node(from_id) and self.contains_node(to_id)):
            return False
        handle = self._find_edge(self._index.get(from_id), self._index.get(to_id))
        if handle is None:
            return False
        self._detach_edge(handle)
        return True

    def contains_edge(self, from_id: Any, to_id: Any) -> bool:
        if not (self.contains_node(from_id) and self.contains_node(to_id)):
            return False
        return (
            self._find_edge(self._index.get(from_id), self._index.get(to_id))
            is not None
        )

    def get_edge(self, from_id: Hashable, to_id: Hashable) -> float:
        """Return the weight of the directed edge.

        Raises:
            UnknownNodeError: If either endpoint was never inserted.
            EdgeNotFoundError: If the nodes exist but are not connected.
        """
        handle = self._find_edge(self._handle_of(from_id), self._handle_of(to_id))
        if handle is None:
            raise EdgeNotFoundError(
                f"No edge from {from_id!r} to {to_id!r}",
                source=from_id,
                target=to_id,
            )
        return self._edge(handle).weight

    def edge_count(self) -> int:
        return self._edge_count

    def edges(self) -> Iterator[EdgeRecord]:
        """Iterate every directed edge in insertion order."""
        for edge in self._edges:
            if edge is not None:
                yield EdgeRecord(
                    source=self._node(edge.predecessor).data,
                    target=self._node(edge.successor).data,
                    weight=edge.weight,
                )

    def total_weight(self) -> float:
        return sum(edge.weight for edge in self._edges if edge is not None)

    def neighbors_of(self, node_id: Hashable) -> NeighborView:
        """Return the outgoing (successor, weight) pairs of a node.

        The returned view is lazy and can be iterated more than once.

        Raises:
            UnknownNodeError: If the node was never inserted.
        """
        return NeighborView(self, self._handle_of(node_id))
