from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Set

from graphsearch.logging import get_logger
from graphsearch.types.base import V

if TYPE_CHECKING:
    from graphsearch.graph.base import NeighborProvider

logger = get_logger(__name__)


def all_vertices(provider: NeighborProvider[V], start: Optional[V]) -> Set[V]:
    """
    Collect every vertex reachable from ``start``, following neighbors transitively.

    Uses an explicit stack, so the depth of the graph is not limited by the
    interpreter's recursion limit. Each vertex is expanded once, which also
    guarantees termination on cyclic graphs.

    Args:
        provider: Neighbor lookup for the graph.
        start: Vertex to start from.

    Returns:
        The reachable set, including ``start`` itself. Empty if ``start`` is None.
    """
    if start is None:
        return set()

    reached: Set[V] = {start}
    stack: List[V] = [start]
    while stack:
        vertex = stack.pop()
        for neighbor in provider.neighbors(vertex):
            if neighbor not in reached:
                reached.add(neighbor)
                stack.append(neighbor)

    logger.debug("Reachable from %r: %d vertices", start, len(reached))
    return reached
