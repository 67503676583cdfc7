"""Neighbor-lookup abstraction the search algorithms run against.

The algorithms never see a concrete graph structure. They only ask a
`NeighborProvider` for the vertices one edge away from a given vertex, so any
object with a suitable ``neighbors`` method can be searched. `AbstractGraph`
is a convenience base class: subclasses implement ``neighbors`` and inherit
the search operations as methods.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import AbstractSet, Generic, Optional, Protocol, Set, runtime_checkable

from graphsearch.algorithms.adjacency import format_adjacency
from graphsearch.algorithms.bfs import bfs
from graphsearch.algorithms.dfs import dfs
from graphsearch.algorithms.dijkstra import dijkstra
from graphsearch.algorithms.reachability import all_vertices
from graphsearch.model.path import PathResult
from graphsearch.types.base import V, WeightFunc


@runtime_checkable
class NeighborProvider(Protocol[V]):
    """Anything that can list the direct successors of a vertex.

    For directed graphs ``neighbors`` follows outgoing edges only. Undirected
    graphs must return symmetric neighbor sets.
    """

    def neighbors(self, vertex: V) -> AbstractSet[V]:
        """Return the vertices reachable from ``vertex`` via one edge.

        Must return an empty set (never None) for a vertex without outgoing
        edges, and must return the same result every time it is called during
        a single search. Searches expand neighbors in iteration order.
        """
        ...


class AbstractGraph(ABC, Generic[V]):
    """Base class for graphs defined solely by their neighbor lookup.

    Subclasses implement `neighbors`; everything else is derived from it.
    """

    @abstractmethod
    def neighbors(self, vertex: V) -> AbstractSet[V]:
        """Return the vertices reachable from ``vertex`` via one edge."""
        raise NotImplementedError

    def all_vertices(self, start: V) -> Set[V]:
        """Return all vertices reachable from ``start``, ``start`` included."""
        return all_vertices(self, start)

    def format_adjacency(self, start: V) -> str:
        """Return the adjacency listing of the sub-graph reachable from ``start``."""
        return format_adjacency(self, start)

    def dfs(self, start: V, target: V) -> Optional[PathResult[V]]:
        """Depth-first search for some path from ``start`` to ``target``."""
        return dfs(self, start, target)

    def bfs(self, start: V, target: V) -> Optional[PathResult[V]]:
        """Breadth-first search for a path with the fewest edges."""
        return bfs(self, start, target)

    def dijkstra(
        self,
        start: V,
        target: V,
        weight: WeightFunc,
        stop_at_target: Optional[bool] = None,
    ) -> Optional[PathResult[V]]:
        """Dijkstra search for the path with the least total ``weight``."""
        return dijkstra(self, start, target, weight, stop_at_target=stop_at_target)
