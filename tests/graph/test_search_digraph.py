import networkx as nx
import pytest

from graphsearch.config import SEARCH_CONFIG
from graphsearch.graph.base import AbstractGraph, NeighborProvider
from graphsearch.graph.digraph import SearchDiGraph


def test_is_a_networkx_digraph_and_provider():
    g = SearchDiGraph()
    assert isinstance(g, nx.DiGraph)
    assert isinstance(g, AbstractGraph)
    assert isinstance(g, NeighborProvider)


def test_neighbors_in_insertion_order():
    g = SearchDiGraph.from_edges([("A", "C"), ("A", "B"), ("A", "D")])
    assert list(g.neighbors("A")) == ["C", "B", "D"]
    assert g.neighbors("A") == {"B", "C", "D"}


def test_neighbors_empty_for_sink_and_unknown():
    g = SearchDiGraph.from_edges([("A", "B")])
    assert len(g.neighbors("B")) == 0
    assert len(g.neighbors("Z")) == 0


def test_from_edges_weights():
    g = SearchDiGraph.from_edges([("A", "B", 3), ("B", "C")])
    assert g.edge_weight("A", "B") == 3
    assert g.edge_weight("B", "C") == SEARCH_CONFIG.default_weight
    assert g["A"]["B"]["weight"] == 3


def test_from_edges_custom_attr():
    g = SearchDiGraph.from_edges([("A", "B", 7)], weight_attr="distance")
    assert g["A"]["B"] == {"distance": 7}
    assert g.edge_weight("A", "B") == 7
    assert g.weight_func()("A", "B") == 7


def test_from_edges_rejects_bad_tuple():
    with pytest.raises(ValueError, match="Edge must be"):
        SearchDiGraph.from_edges([("A",)])


def test_edge_weight_missing_edge():
    g = SearchDiGraph.from_edges([("A", "B", 1)])
    with pytest.raises(KeyError, match="No edge from 'B' to 'A'"):
        g.edge_weight("B", "A")


def test_weight_func_other_attribute():
    g = SearchDiGraph()
    g.add_edge("A", "B", weight=1, latency=10)
    g.add_edge("B", "C", weight=1)
    latency = g.weight_func("latency")
    assert latency("A", "B") == 10
    assert latency("B", "C") == SEARCH_CONFIG.default_weight
    assert g.weight_func()("A", "B") == 1


def test_weight_func_other_attribute_missing_edge():
    g = SearchDiGraph()
    g.add_edge("A", "B", latency=10)
    with pytest.raises(KeyError, match="No edge from 'B' to 'A'"):
        g.weight_func("latency")("B", "A")


def test_weight_attr_survives_networkx_copies():
    g = SearchDiGraph.from_edges([("A", "B", 7), ("B", "C", 2)], weight_attr="distance")
    assert g.graph["weight_attr"] == "distance"

    copied = g.copy()
    assert copied.weight_attr == "distance"
    assert copied.edge_weight("A", "B") == 7

    reversed_g = g.reverse()
    assert reversed_g.edge_weight("B", "A") == 7
    assert reversed_g.dijkstra("C", "A", reversed_g.weight_func()).total_weight == 9

    sub = g.subgraph(["A", "B"]).copy()
    assert sub.edge_weight("A", "B") == 7
    assert g.subgraph(["A", "B"]).edge_weight("A", "B") == 7


def test_weight_attr_setter():
    g = SearchDiGraph.from_edges([("A", "B")])
    g.add_edge("A", "B", cost=3)
    g.weight_attr = "cost"
    assert g.edge_weight("A", "B") == 3
    assert g.copy().edge_weight("A", "B") == 3


def test_default_weight_from_config():
    SEARCH_CONFIG.default_weight = 2.5
    g = SearchDiGraph.from_edges([("A", "B"), ("B", "C")])
    assert g.dijkstra("A", "C", g.weight_func()).total_weight == 5.0


def test_searches_as_methods():
    g = SearchDiGraph.from_edges([("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])
    assert g.all_vertices("A") == {"A", "B", "C"}
    assert g.format_adjacency("A").splitlines()[1] == "A: [B,C]"
    assert g.dfs("A", "C").vertices == ("A", "B", "C")
    assert g.bfs("A", "C").vertices == ("A", "C")
    assert g.dijkstra("A", "C", g.weight_func()).total_weight == 2


def test_networkx_algorithms_still_work():
    g = SearchDiGraph.from_edges([("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])
    assert nx.dijkstra_path(g, "A", "C") == ["A", "B", "C"]
    assert nx.has_path(g, "A", "C")
