from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Optional, Set, Tuple

from graphsearch.logging import get_logger
from graphsearch.model.path import PathResult
from graphsearch.types.base import V

if TYPE_CHECKING:
    from graphsearch.graph.base import NeighborProvider

logger = get_logger(__name__)


def dfs(
    provider: NeighborProvider[V],
    start: Optional[V],
    target: Optional[V],
) -> Optional[PathResult[V]]:
    """
    Depth-first search for a path from ``start`` to ``target``.

    Backtracking search over an explicit stack of frames, one per vertex on the
    current path, each holding the iterator over that vertex's remaining
    neighbors. Neighbors are tried in the order ``neighbors()`` yields them;
    the first one from which the target can be reached determines the path.
    A single visited set is shared by the whole search, so no vertex is
    expanded twice, even when reached from a different predecessor.

    The returned path is not necessarily the shortest, by edge count or by
    weight.

    Args:
        provider: Neighbor lookup for the graph.
        start: First vertex of the path.
        target: Last vertex of the path.

    Returns:
        A PathResult with ``total_weight`` 0 and ``visited`` holding every
        vertex entered, or None if either argument is None or the target is
        unreachable.
    """
    if start is None or target is None:
        return None

    visited: Set[V] = {start}
    if start == target:
        return PathResult((start,), 0, frozenset(visited))

    stack: List[Tuple[V, Iterator[V]]] = [(start, iter(provider.neighbors(start)))]
    while stack:
        _, remaining = stack[-1]
        for neighbor in remaining:
            if neighbor in visited:
                continue
            visited.add(neighbor)
            if neighbor == target:
                vertices = tuple(frame[0] for frame in stack) + (neighbor,)
                logger.debug(
                    "DFS %r -> %r: %d edges, %d visited",
                    start,
                    target,
                    len(vertices) - 1,
                    len(visited),
                )
                return PathResult(vertices, 0, frozenset(visited))
            stack.append((neighbor, iter(provider.neighbors(neighbor))))
            break
        else:
            # all neighbors exhausted, backtrack
            stack.pop()

    logger.debug("DFS %r -> %r: no path, %d visited", start, target, len(visited))
    return None
