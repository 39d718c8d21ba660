"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DuplicateKeyError,
    EdgeNotFoundError,
    GraphLoadError,
    InvalidWeightError,
    KeyNotFoundError,
    NoPathFoundError,
    PathFinderError,
    UnknownNodeError,
)
from .models import DatasetStats, EdgeRecord, ShortestPathResult

__all__ = [
    # Models
    "EdgeRecord",
    "ShortestPathResult",
    "DatasetStats",
    # Errors
    "PathFinderError",
    "DuplicateKeyError",
    "KeyNotFoundError",
    "UnknownNodeError",
    "EdgeNotFoundError",
    "InvalidWeightError",
    "NoPathFoundError",
    "GraphLoadError",
    "ConfigurationError",
]
