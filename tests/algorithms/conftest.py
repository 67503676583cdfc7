"""Sample graphs shared by the algorithm tests."""

import pytest

from graphsearch.graph.digraph import SearchDiGraph


@pytest.fixture
def triangle1():
    # Weights:
    #       [1]        [1]
    #   A────────►B────────►C
    #   │                   ▲
    #   │        [5]        │
    #   └───────────────────┘
    #
    return SearchDiGraph.from_edges([("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])


@pytest.fixture
def disconnected1():
    #   A────────►B        C
    g = SearchDiGraph.from_edges([("A", "B")])
    g.add_node("C")
    return g


@pytest.fixture
def single1():
    #   A
    g = SearchDiGraph()
    g.add_node("A")
    return g


@pytest.fixture
def cycle1():
    #   A────────►B
    #   ▲         │
    #   │         ▼
    #   └─────────C
    #
    return SearchDiGraph.from_edges([("A", "B"), ("B", "C"), ("C", "A")])


@pytest.fixture
def diamond1():
    #   ┌────────►B─────────┐
    #   │                   ▼
    #   A                   D────────►E
    #   │                   ▲
    #   └────────►C─────────┘
    #
    return SearchDiGraph.from_edges(
        [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D"), ("D", "E")]
    )


@pytest.fixture
def detour1():
    # A's first neighbor B leads to D the long way round.
    #
    #   A────────►B────────►C
    #   │                   │
    #   │                   ▼
    #   └──────────────────►D
    #
    return SearchDiGraph.from_edges([("A", "B"), ("B", "C"), ("C", "D"), ("A", "D")])


@pytest.fixture
def dead_end1():
    #   A────────►B────────►X
    #   │
    #   └────────►C────────►T
    #
    return SearchDiGraph.from_edges([("A", "B"), ("A", "C"), ("B", "X"), ("C", "T")])


@pytest.fixture
def square1():
    # Undirected, weights:
    #          [1]
    #     A◄────────►B
    #     ▲          ▲
    #  [4]│          │[1]
    #     ▼   [1]    ▼
    #     D◄────────►C
    #
    edges = [("A", "B", 1), ("B", "C", 1), ("C", "D", 1), ("A", "D", 4)]
    both_ways = edges + [(v, u, w) for u, v, w in edges]
    return SearchDiGraph.from_edges(both_ways)


@pytest.fixture
def chain_long():
    # 0 ─► 1 ─► 2 ─► ... ─► 19999
    return SearchDiGraph.from_edges((i, i + 1) for i in range(19999))
