"""NetworkX integration.

`NxGraphView` lets the graphsearch algorithms run on a graph that was built
with NetworkX, without copying it.

Example:
    >>> import networkx as nx
    >>> from graphsearch.lib.nx import NxGraphView
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=1)
    >>> G.add_edge("B", "C", weight=1)
    >>> G.add_edge("A", "C", weight=5)
    >>>
    >>> view = NxGraphView(G)
    >>> view.dijkstra("A", "C", view.weight_func()).vertices
    ('A', 'B', 'C')
"""

from __future__ import annotations

from typing import TYPE_CHECKING, AbstractSet, Any, Hashable, Union

from graphsearch.config import SEARCH_CONFIG
from graphsearch.graph.base import AbstractGraph
from graphsearch.types.base import Cost, WeightFunc

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


class NxGraphView(AbstractGraph):
    """Read-only search view over a NetworkX graph.

    Directed graphs expose successors as neighbors; undirected graphs expose
    their (symmetric) adjacency. Neighbors come in the order NetworkX stores
    them, which is edge insertion order.

    Attributes:
        graph: The wrapped NetworkX graph. It is never modified.
    """

    def __init__(self, graph: NxGraph) -> None:
        self.graph = graph
        self._adj = graph.succ if graph.is_directed() else graph.adj

    def neighbors(self, vertex: Hashable) -> AbstractSet[Hashable]:
        if vertex not in self._adj:
            return frozenset()
        return self._adj[vertex].keys()

    def weight_func(self, attr: str = "weight", default: Any = None) -> WeightFunc:
        """Return a ``(u, v) -> weight`` function reading edge attribute ``attr``.

        For multigraphs the lightest of the parallel edges is used.

        Args:
            attr: Edge attribute holding the weight.
            default: Weight of edges without ``attr``. Defaults to
                ``SEARCH_CONFIG.default_weight``.
        """
        fallback = SEARCH_CONFIG.default_weight if default is None else default
        adj = self._adj

        if self.graph.is_multigraph():

            def _multi_weight(u: Hashable, v: Hashable) -> Cost:
                return min(d.get(attr, fallback) for d in adj[u][v].values())

            return _multi_weight

        def _weight(u: Hashable, v: Hashable) -> Cost:
            return adj[u][v].get(attr, fallback)

        return _weight

    def __repr__(self) -> str:
        return (
            f"NxGraphView({type(self.graph).__name__}, "
            f"nodes={self.graph.number_of_nodes()}, "
            f"edges={self.graph.number_of_edges()})"
        )
