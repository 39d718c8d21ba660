"""Tests for the CampusNavigator query service."""

from pathlib import Path

import pytest

from pathfinder.adapters.graph import DotEdgeRepository
from pathfinder.domain.errors import (
    GraphLoadError,
    InvalidWeightError,
    NoPathFoundError,
    UnknownNodeError,
)
from pathfinder.domain.models import EdgeRecord
from pathfinder.graph import DijkstraEngine, GraphStore
from pathfinder.services import CampusNavigator

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


class FakeEdgeSource:
    def __init__(self, records):
        self.records = records
        self.paths = []

    def read_edges(self, file_path):
        self.paths.append(file_path)
        return list(self.records)


def make_navigator(edge_source=None):
    graph = GraphStore()
    return CampusNavigator(
        graph=graph,
        edge_source=edge_source or DotEdgeRepository(),
        path_solver=DijkstraEngine(graph),
    )


@pytest.fixture
def campus():
    navigator = make_navigator()
    navigator.read_data_from_file(DATA_DIR / "campus.dot")
    return navigator


def test_load_inserts_both_directions():
    source = FakeEdgeSource([EdgeRecord("A", "B", 2.0), EdgeRecord("B", "C", 3.0)])
    navigator = make_navigator(source)

    assert navigator.read_data_from_file("campus.dot") == 2

    assert source.paths == ["campus.dot"]
    assert navigator.graph.node_count() == 3
    assert navigator.graph.edge_count() == 4
    assert navigator.graph.get_edge("B", "A") == 2.0
    assert navigator.graph.get_edge("C", "B") == 3.0


def test_reloading_same_file_does_not_duplicate(campus):
    campus.read_data_from_file(DATA_DIR / "campus.dot")

    stats = campus.get_dataset_stats()
    assert stats.node_count == 8
    assert stats.edge_count == 22


def test_dataset_stats(campus):
    stats = campus.get_dataset_stats()

    assert stats.node_count == 8
    assert stats.edge_count == 22
    assert stats.total_weight == pytest.approx(1798.8)
    assert stats.format() == (
        "Number of Buildings (Nodes): 8\n"
        "Number of Paths (Edges): 22\n"
        "Total Walking Time: 1798.80 seconds"
    )


def test_shortest_path_across_campus(campus):
    result = campus.get_shortest_path("Memorial Union", "Bascom Hall")

    assert result.path == (
        "Memorial Union",
        "Science Hall",
        "Education Building",
        "Bascom Hall",
    )
    assert result.segment_costs == (105.8, 113.4, 128.6)
    assert result.total_cost == pytest.approx(347.8)


def test_shortest_path_is_symmetric_in_cost(campus):
    there = campus.get_shortest_path("Memorial Union", "Computer Sciences and Statistics")
    back = campus.get_shortest_path("Computer Sciences and Statistics", "Memorial Union")

    assert there.path == ("Memorial Union", "Brat Stand", "Computer Sciences and Statistics")
    assert back.path == tuple(reversed(there.path))
    assert back.total_cost == pytest.approx(there.total_cost)


def test_unknown_building(campus):
    with pytest.raises(UnknownNodeError):
        campus.get_shortest_path("Memorial Union", "Camp Randall")


def test_disconnected_building(campus):
    campus.graph.insert_node("Picnic Point")

    with pytest.raises(NoPathFoundError):
        campus.get_shortest_path("Memorial Union", "Picnic Point")


def test_negative_weight_in_file_propagates():
    navigator = make_navigator(FakeEdgeSource([EdgeRecord("A", "B", -1.0)]))

    with pytest.raises(InvalidWeightError):
        navigator.read_data_from_file("bad.dot")


def test_missing_file_propagates(tmp_path):
    navigator = make_navigator()

    with pytest.raises(GraphLoadError):
        navigator.read_data_from_file(tmp_path / "missing.dot")

    assert navigator.get_dataset_stats().node_count == 0


def test_walking_time_counts_each_connection_once():
    navigator = make_navigator(FakeEdgeSource([EdgeRecord("A", "B", 10.0)]))
    navigator.read_data_from_file("one.dot")

    stats = navigator.get_dataset_stats()

    assert stats.edge_count == 2
    assert stats.format().endswith("Total Walking Time: 10.00 seconds")


def test_overwritten_connection_is_counted_with_new_weight():
    navigator = make_navigator(
        FakeEdgeSource([EdgeRecord("A", "B", 10.0), EdgeRecord("B", "A", 4.0)])
    )
    navigator.read_data_from_file("twice.dot")

    assert navigator.get_dataset_stats().total_weight == 4.0


def test_failed_load_leaves_graph_untouched(campus):
    before = campus.get_dataset_stats()
    campus.edge_source = FakeEdgeSource(
        [
            EdgeRecord("Union South", "Camp Randall", 1.0),
            EdgeRecord("Camp Randall", "Field House", -2.0),
        ]
    )

    with pytest.raises(InvalidWeightError):
        campus.read_data_from_file("bad.dot")

    assert campus.get_dataset_stats() == before
    assert not campus.graph.contains_node("Union South")
    assert not campus.graph.contains_node("Camp Randall")
