"""Top-level package for the campus path finder.

The package loads campus buildings and walking times from a DOT edge
list into a custom graph store and answers shortest-path queries with
Dijkstra's algorithm.
"""

__version__ = "0.1.0"
