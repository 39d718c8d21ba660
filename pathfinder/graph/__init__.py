"""Graph engine for the campus network.

This subpackage contains the node/edge store and the Dijkstra search
that runs on top of it.
"""

from .dijkstra import DijkstraEngine, SearchLabel
from .store import GraphStore, NeighborView

__all__ = ["GraphStore", "NeighborView", "DijkstraEngine", "SearchLabel"]
