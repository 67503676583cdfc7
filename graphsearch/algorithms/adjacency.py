"""Adjacency listing of the sub-graph reachable from a vertex."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Set

from graphsearch.config import SEARCH_CONFIG
from graphsearch.types.base import V

if TYPE_CHECKING:
    from graphsearch.graph.base import NeighborProvider


def format_adjacency(provider: NeighborProvider[V], start: Optional[V]) -> str:
    """
    Format the adjacency list of the sub-graph reachable from ``start``.

    The listing follows a pre-order traversal of a spanning tree rooted at
    ``start``::

        Graph adjacency list:
        vertex1: [neighbour11,neighbour12,...]
        vertex2: [neighbour21,neighbour22,...]

    Child sub-trees are visited in the order ``neighbors()`` yields them. A
    single visited set spans the whole traversal, so every reachable vertex is
    listed exactly once, under the first branch that reaches it.

    Args:
        provider: Neighbor lookup for the graph.
        start: Root of the spanning tree.

    Returns:
        The header line followed by one line per reachable vertex. Only the
        header if ``start`` is None.
    """
    lines: List[str] = [SEARCH_CONFIG.adjacency_header]
    if start is None:
        return lines[0] + "\n"

    visited: Set[V] = set()
    stack: List[V] = [start]
    while stack:
        vertex = stack.pop()
        if vertex in visited:
            continue
        visited.add(vertex)

        neighbors = list(provider.neighbors(vertex))
        lines.append(f"{vertex}: [{','.join(str(n) for n in neighbors)}]")

        # Reversed so the first neighbor is popped (and listed) first
        for neighbor in reversed(neighbors):
            if neighbor not in visited:
                stack.append(neighbor)

    return "\n".join(lines) + "\n"
