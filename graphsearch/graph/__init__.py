"""Graph primitives.

This package provides the `NeighborProvider` protocol the algorithms run
against, the `AbstractGraph` base class, and the networkx-backed
`SearchDiGraph`.
"""

from graphsearch.graph.base import AbstractGraph, NeighborProvider
from graphsearch.graph.digraph import SearchDiGraph

__all__ = ["AbstractGraph", "NeighborProvider", "SearchDiGraph"]
