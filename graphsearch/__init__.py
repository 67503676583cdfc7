"""graphsearch: generic graph traversal and shortest-path search.

The algorithms work on any vertex type. A graph is described only by a
neighbor lookup, ``neighbors(vertex) -> set of vertices``, supplied either as
a `NeighborProvider`, an `AbstractGraph` subclass, or one of the ready-made
graphs below.

Primary API:
    all_vertices() - Vertices reachable from a start vertex
    format_adjacency() - Adjacency listing of the reachable sub-graph
    dfs(), bfs(), dijkstra() - Path searches returning a PathResult or None
    AbstractGraph, NeighborProvider - Neighbor lookup abstractions
    SearchDiGraph - Directed graph backed by networkx
    NxGraphView - Search view over an existing networkx graph

Example:
    from graphsearch import SearchDiGraph

    g = SearchDiGraph.from_edges([("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])

    g.bfs("A", "C").vertices                         # ('A', 'C')
    g.dijkstra("A", "C", g.weight_func()).vertices   # ('A', 'B', 'C')
"""

from __future__ import annotations

from graphsearch import logging
from graphsearch._version import __version__
from graphsearch.algorithms import all_vertices, bfs, dfs, dijkstra, format_adjacency
from graphsearch.config import SEARCH_CONFIG, SearchConfig
from graphsearch.graph import AbstractGraph, NeighborProvider, SearchDiGraph
from graphsearch.lib.nx import NxGraphView
from graphsearch.model.path import PathResult
from graphsearch.types.base import INF_COST, Cost, WeightFunc

__all__ = [
    # Version
    "__version__",
    # Graphs
    "NeighborProvider",
    "AbstractGraph",
    "SearchDiGraph",
    "NxGraphView",
    # Algorithms
    "all_vertices",
    "format_adjacency",
    "dfs",
    "bfs",
    "dijkstra",
    # Results and types
    "PathResult",
    "Cost",
    "WeightFunc",
    "INF_COST",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Utilities
    "logging",
]
