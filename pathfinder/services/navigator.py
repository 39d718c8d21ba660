"""Campus navigator service - Query façade over the graph engine.

This service turns DOT edge records into graph insertions and exposes
shortest-path queries and dataset statistics to the front-end.

All public calls are serialised with one re-entrant lock so a query
never runs while a file is being loaded into the store.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Hashable, Tuple, Union

from ..domain.errors import NoPathFoundError, UnknownNodeError
from ..domain.models import DatasetStats, ShortestPathResult
from ..graph.store import GraphStore
from ..index import HashTableMap
from ..ports.graph import EdgeSourcePort, PathSolverPort


@dataclass
class CampusNavigator:
    """Backend for the campus path finder.

    Attributes:
        graph: Store receiving the loaded buildings and paths
        edge_source: Reads edge records from data files
        path_solver: Answers shortest-path queries over ``graph``
    """

    graph: GraphStore
    edge_source: EdgeSourcePort
    path_solver: PathSolverPort

    _logger: logging.Logger = field(init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def read_data_from_file(self, file_path: Union[str, Path]) -> int:
        """Load a DOT file and insert every connection in both directions.

        Args:
            file_path: Path to the DOT file containing buildings and paths.

        Returns:
            Number of edge records read from the file.

        Raises:
            GraphLoadError: If the file cannot be read or parsed.
            InvalidWeightError: If any connection has a negative weight. The
                store is left unchanged in that case.
        """
        records = self.edge_source.read_edges(file_path)
        # Reject the whole file before touching the store.
        weights = [GraphStore.check_weight(record.weight) for record in records]

        with self._lock:
            for record, weight in zip(records, weights):
                self.graph.insert_node(record.source)
                self.graph.insert_node(record.target)
                self.graph.insert_edge(record.source, record.target, weight)
                self.graph.insert_edge(record.target, record.source, weight)

            self._logger.info(
                "Graph loaded",
                extra={
                    "file_path": str(file_path),
                    "records": len(records),
                    "nodes": self.graph.node_count(),
                    "edges": self.graph.edge_count(),
                },
            )
        return len(records)

    def get_shortest_path(self, start: Hashable, end: Hashable) -> ShortestPathResult:
        """Find the shortest walk between two buildings.

        Raises:
            UnknownNodeError: If either building is not in the graph.
            NoPathFoundError: If the buildings are not connected.
        """
        self._logger.debug("Solving route", extra={"start": start, "end": end})

        with self._lock:
            try:
                result = self.path_solver.shortest_path(start, end)
            except UnknownNodeError as e:
                self._logger.warning(
                    "Unknown building", extra={"node_id": e.node_id}
                )
                raise
            except NoPathFoundError:
                self._logger.warning(
                    "No route found", extra={"start": start, "end": end}
                )
                raise

        self._logger.info(
            "Route found",
            extra={
                "start": start,
                "end": end,
                "stops": result.num_stops,
                "total_cost": result.total_cost,
            },
        )
        return result

    def get_dataset_stats(self) -> DatasetStats:
        """Return node count, edge count and total walking time."""
        with self._lock:
            return DatasetStats(
                node_count=self.graph.node_count(),
                edge_count=self.graph.edge_count(),
                total_weight=self._walking_time(),
            )

    def _walking_time(self) -> float:
        """Sum each connection once, whichever directions are stored."""
        counted: HashTableMap[Tuple[Hashable, Hashable], bool] = HashTableMap()
        total = 0.0
        for edge in self.graph.edges():
            if counted.contains_key((edge.target, edge.source)):
                continue
            counted.put((edge.source, edge.target), True)
            total += edge.weight
        return total
