from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Deque, Dict, List, Optional, Set

from graphsearch.logging import get_logger
from graphsearch.model.path import PathResult
from graphsearch.types.base import V

if TYPE_CHECKING:
    from graphsearch.graph.base import NeighborProvider

logger = get_logger(__name__)


def bfs(
    provider: NeighborProvider[V],
    start: Optional[V],
    target: Optional[V],
) -> Optional[PathResult[V]]:
    """
    Breadth-first search for a path from ``start`` to ``target`` with the fewest edges.

    Vertices are expanded layer by layer from a FIFO queue. Each vertex enqueued
    is recorded in ``visited_from`` with the vertex it was discovered from, and
    is never enqueued again. The search stops as soon as ``target`` shows up
    among the neighbors of the vertex being expanded; the path is then rebuilt
    by following the predecessor links back to ``start``.

    Args:
        provider: Neighbor lookup for the graph.
        start: First vertex of the path.
        target: Last vertex of the path.

    Returns:
        A PathResult with ``total_weight`` 0 and ``visited`` holding every
        enqueued vertex, or None if either argument is None or the target is
        unreachable.
    """
    if start is None or target is None:
        return None

    if start == target:
        return PathResult((start,), 0, frozenset((start,)))

    visited_from: Dict[V, Optional[V]] = {start: None}
    visited: Set[V] = {start}
    queue: Deque[V] = deque([start])

    while queue:
        current = queue.popleft()
        for neighbor in provider.neighbors(current):
            if neighbor == target:
                vertices = _walk_back(visited_from, current)
                vertices.append(target)
                logger.debug(
                    "BFS %r -> %r: %d edges, %d visited",
                    start,
                    target,
                    len(vertices) - 1,
                    len(visited),
                )
                return PathResult(tuple(vertices), 0, frozenset(visited))
            if neighbor not in visited_from:
                visited_from[neighbor] = current
                visited.add(neighbor)
                queue.append(neighbor)

    logger.debug("BFS %r -> %r: no path, %d visited", start, target, len(visited))
    return None


def _walk_back(visited_from: Dict[V, Optional[V]], vertex: V) -> List[V]:
    """Return the vertices from the search root to ``vertex``, in that order."""
    chain: List[V] = []
    current: Optional[V] = vertex
    while current is not None:
        chain.append(current)
        current = visited_from[current]
    chain.reverse()
    return chain
