"""Directed graph that can be searched by the graphsearch algorithms.

`SearchDiGraph` extends `networkx.DiGraph` with the `AbstractGraph` interface:
neighbors are the successors of a vertex, in the order their edges were added,
and edge weights are read from an edge attribute.
"""

from __future__ import annotations

from typing import AbstractSet, Any, Hashable, Iterable, Optional, Sequence

import networkx as nx

from graphsearch.config import SEARCH_CONFIG
from graphsearch.graph.base import AbstractGraph
from graphsearch.types.base import Cost, WeightFunc

VertexID = Hashable


class SearchDiGraph(AbstractGraph, nx.DiGraph):
    """A networkx DiGraph exposing the neighbor lookup used by the searches.

    Undirected graphs are modelled by adding an edge in both directions.
    """

    def __init__(self, *args: Any, weight_attr: str = "weight", **kwargs: Any) -> None:
        """Initialize a SearchDiGraph.

        Args:
            *args: Positional arguments forwarded to the DiGraph constructor.
            weight_attr: Edge attribute holding the edge weight. Stored in the
                graph attribute dict, so networkx copies and views keep it.
            **kwargs: Keyword arguments forwarded to the DiGraph constructor.
        """
        super().__init__(*args, **kwargs)
        self.graph.setdefault("weight_attr", weight_attr)

    @property
    def weight_attr(self) -> str:
        """Edge attribute holding the edge weight."""
        return self.graph["weight_attr"]

    @weight_attr.setter
    def weight_attr(self, value: str) -> None:
        self.graph["weight_attr"] = value

    @classmethod
    def from_edges(
        cls, edges: Iterable[Sequence[Any]], weight_attr: str = "weight"
    ) -> SearchDiGraph:
        """Build a graph from ``(u, v)`` or ``(u, v, weight)`` tuples.

        Args:
            edges: Edge tuples, in the order neighbors should be expanded.
            weight_attr: Edge attribute holding the edge weight.

        Returns:
            A new SearchDiGraph.

        Raises:
            ValueError: If an edge tuple has neither 2 nor 3 elements.
        """
        graph = cls(weight_attr=weight_attr)
        for edge in edges:
            if len(edge) == 2:
                graph.add_edge(edge[0], edge[1])
            elif len(edge) == 3:
                graph.add_edge(edge[0], edge[1], **{weight_attr: edge[2]})
            else:
                raise ValueError(f"Edge must be (u, v) or (u, v, weight), got {edge!r}")
        return graph

    def neighbors(self, vertex: VertexID) -> AbstractSet[VertexID]:  # type: ignore[override]
        """Return the successors of ``vertex`` in edge insertion order.

        Unlike networkx, a vertex that is not in the graph has no neighbors
        instead of raising an error.
        """
        successors = self._succ.get(vertex)
        if successors is None:
            return frozenset()
        return successors.keys()

    def edge_weight(self, u: VertexID, v: VertexID, attr: Optional[str] = None) -> Cost:
        """Return the weight of edge ``u -> v``.

        Edges without the weight attribute weigh ``SEARCH_CONFIG.default_weight``.

        Args:
            u: Source vertex.
            v: Target vertex.
            attr: Edge attribute to read. Defaults to the graph's ``weight_attr``.

        Raises:
            KeyError: If there is no edge from ``u`` to ``v``.
        """
        try:
            attrs = self._succ[u][v]
        except KeyError:
            raise KeyError(f"No edge from '{u}' to '{v}'.") from None
        if attr is None:
            attr = self.weight_attr
        return attrs.get(attr, SEARCH_CONFIG.default_weight)

    def weight_func(self, attr: Optional[str] = None) -> WeightFunc:
        """Return a ``(u, v) -> weight`` function for `dijkstra`.

        Args:
            attr: Edge attribute to read. Defaults to the graph's ``weight_attr``.
        """
        if attr is None or attr == self.weight_attr:
            return self.edge_weight

        def _weight(u: VertexID, v: VertexID) -> Cost:
            return self.edge_weight(u, v, attr)

        return _weight
