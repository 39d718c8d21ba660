"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- DotEdgeRepository: Reads weighted edges from DOT files
"""

from .dot_repository import DotEdgeRepository

__all__ = ["DotEdgeRepository"]
