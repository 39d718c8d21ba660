import math

import pytest

from pathfinder.domain.errors import (
    EdgeNotFoundError,
    InvalidWeightError,
    UnknownNodeError,
)
from pathfinder.domain.models import EdgeRecord
from pathfinder.graph import GraphStore


@pytest.fixture
def store():
    graph = GraphStore()
    for node in ("A", "B", "C"):
        graph.insert_node(node)
    return graph


def test_insert_node_twice_is_a_no_op():
    graph = GraphStore()

    assert graph.insert_node("Memorial Union") is True
    assert graph.insert_node("Memorial Union") is False
    assert graph.node_count() == 1
    assert graph.contains_node("Memorial Union")


def test_insert_edge_requires_both_endpoints(store):
    with pytest.raises(UnknownNodeError) as exc_info:
        store.insert_edge("A", "Z", 1.0)

    assert exc_info.value.node_id == "Z"
    assert store.edge_count() == 0

    with pytest.raises(UnknownNodeError):
        store.insert_edge("Z", "A", 1.0)


def test_reinserting_edge_overwrites_weight(store):
    assert store.insert_edge("A", "B", 10.0) is True
    assert store.insert_edge("A", "B", 4.5) is False

    assert store.edge_count() == 1
    assert store.get_edge("A", "B") == 4.5
    assert list(store.neighbors_of("A")) == [("B", 4.5)]


def test_edges_are_directed(store):
    store.insert_edge("A", "B", 1.0)

    assert store.contains_edge("A", "B")
    assert not store.contains_edge("B", "A")
    with pytest.raises(EdgeNotFoundError) as exc_info:
        store.get_edge("B", "A")
    assert (exc_info.value.source, exc_info.value.target) == ("B", "A")


def test_zero_and_decimal_weights_allowed(store):
    store.insert_edge("A", "B", 0)
    store.insert_edge("B", "C", 156.49999999999997)

    assert store.get_edge("A", "B") == 0.0
    assert store.get_edge("B", "C") == 156.49999999999997


@pytest.mark.parametrize("weight", [-1.0, float("nan"), "far"])
def test_invalid_weights_rejected(store, weight):
    with pytest.raises(InvalidWeightError):
        store.insert_edge("A", "B", weight)

    assert store.edge_count() == 0
    assert list(store.neighbors_of("A")) == []


def test_neighbors_of_is_restartable(store):
    store.insert_edge("A", "B", 1.0)
    store.insert_edge("A", "C", 2.0)

    neighbors = store.neighbors_of("A")

    assert list(neighbors) == [("B", 1.0), ("C", 2.0)]
    assert list(neighbors) == [("B", 1.0), ("C", 2.0)]
    assert len(neighbors) == 2


def test_neighbors_of_unknown_node_fails_immediately(store):
    with pytest.raises(UnknownNodeError):
        store.neighbors_of("Z")


def test_remove_node_detaches_incident_edges(store):
    store.insert_edge("A", "B", 1.0)
    store.insert_edge("B", "A", 1.0)
    store.insert_edge("C", "B", 2.0)
    store.insert_edge("A", "C", 3.0)

    assert store.remove_node("B") is True

    assert store.node_count() == 2
    assert store.edge_count() == 1
    assert not store.contains_node("B")
    assert list(store.neighbors_of("A")) == [("C", 3.0)]
    assert list(store.neighbors_of("C")) == []
    assert store.remove_node("B") is False


def test_remove_node_with_self_loop(store):
    store.insert_edge("A", "A", 1.0)
    store.insert_edge("A", "B", 1.0)

    store.remove_node("A")

    assert store.edge_count() == 0
    assert list(store.edges()) == []


def test_removed_node_can_be_inserted_again(store):
    store.insert_edge("A", "B", 1.0)
    store.remove_node("B")

    assert store.insert_node("B") is True
    assert store.insert_edge("A", "B", 2.0) is True
    assert store.get_edge("A", "B") == 2.0


def test_remove_edge(store):
    store.insert_edge("A", "B", 1.0)

    assert store.remove_edge("A", "B") is True
    assert store.remove_edge("A", "B") is False
    assert store.remove_edge("A", "Z") is False
    assert store.edge_count() == 0
    assert not store.contains_edge("A", "B")


def test_edges_and_total_weight(store):
    store.insert_edge("A", "B", 1.5)
    store.insert_edge("B", "A", 1.5)
    store.insert_edge("B", "C", 2.0)

    assert list(store.edges()) == [
        EdgeRecord("A", "B", 1.5),
        EdgeRecord("B", "A", 1.5),
        EdgeRecord("B", "C", 2.0),
    ]
    assert math.isclose(store.total_weight(), 5.0)
    assert list(store.nodes()) == ["A", "B", "C"]


def test_node_index_grows_with_many_nodes():
    graph = GraphStore(index_capacity=4)
    for i in range(200):
        graph.insert_node(i)
    for i in range(199):
        graph.insert_edge(i, i + 1, 1.0)

    assert graph.node_count() == 200
    assert graph.edge_count() == 199
    assert all(graph.contains_node(i) for i in range(200))
    assert list(graph.neighbors_of(150)) == [(151, 1.0)]


def test_internal_state_is_not_a_constructor_argument():
    with pytest.raises(TypeError):
        GraphStore(_nodes=[None])
    with pytest.raises(TypeError):
        GraphStore(_edge_count=5)


def test_check_weight_normalises_to_float():
    assert GraphStore.check_weight(3) == 3.0
    with pytest.raises(InvalidWeightError):
        GraphStore.check_weight(-0.5)
