"""Typed domain errors for the campus path finder.

Every failure the graph engine can report has its own error type so
callers can tell "bad input identity" apart from "no route exists".

All errors inherit from PathFinderError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class PathFinderError(Exception):
    """Base error for the path finder domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DuplicateKeyError(PathFinderError):
    """A key was put into the hash table twice.

    Attributes:
        key: The key that is already present
    """

    key: Any = None


@dataclass
class KeyNotFoundError(PathFinderError):
    """A key was looked up or removed but is not in the hash table.

    Attributes:
        key: The missing key
    """

    key: Any = None


@dataclass
class UnknownNodeError(PathFinderError):
    """A node identity was never inserted into the graph.

    Attributes:
        node_id: The identity that was not found
    """

    node_id: Any = None


@dataclass
class EdgeNotFoundError(PathFinderError):
    """No directed edge exists between two nodes.

    Attributes:
        source: Predecessor node identity
        target: Successor node identity
    """

    source: Any = None
    target: Any = None


@dataclass
class InvalidWeightError(PathFinderError):
    """Edge weight is negative or not a number.

    Attributes:
        weight: The rejected weight
    """

    weight: Any = None


@dataclass
class NoPathFoundError(PathFinderError):
    """Both nodes exist but no directed walk connects them.

    Attributes:
        start: Start node identity
        end: End node identity
    """

    start: Any = None
    end: Any = None


@dataclass
class GraphLoadError(PathFinderError):
    """The edge-list file could not be read or parsed.

    Attributes:
        file_path: Path to the graph data file if relevant
        line_number: 1-based line of the malformed record, if any
    """

    file_path: Optional[str] = None
    line_number: Optional[int] = None


@dataclass
class ConfigurationError(PathFinderError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
