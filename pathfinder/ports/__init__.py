"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the query service and the adapters
that read edge lists or compute routes. They make the service testable
with stand-in implementations.
"""

from .graph import EdgeSourcePort, PathSolverPort

__all__ = ["EdgeSourcePort", "PathSolverPort"]
