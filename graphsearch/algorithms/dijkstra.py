from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import TYPE_CHECKING, Dict, List, Optional, Set, Tuple

from graphsearch.algorithms.reachability import all_vertices
from graphsearch.algorithms.types import SpanningRecord
from graphsearch.config import SEARCH_CONFIG
from graphsearch.logging import get_logger
from graphsearch.model.path import PathResult
from graphsearch.types.base import Cost, V, WeightFunc

if TYPE_CHECKING:
    from graphsearch.graph.base import NeighborProvider

logger = get_logger(__name__)


def dijkstra(
    provider: NeighborProvider[V],
    start: Optional[V],
    target: Optional[V],
    weight: WeightFunc,
    stop_at_target: Optional[bool] = None,
) -> Optional[PathResult[V]]:
    """
    Find the path of least total weight from ``start`` to ``target``.

    Every vertex reachable from ``start`` gets a SpanningRecord. Vertices are
    taken from a min-heap ordered by their best known weight and settled; the
    weights of their unsettled neighbors are then relaxed. Improved neighbors
    are pushed again rather than updated in place, and outdated heap entries
    are skipped when popped (lazy deletion). Heap entries carry an insertion
    counter so that vertices themselves are never compared.

    Args:
        provider: Neighbor lookup for the graph.
        start: First vertex of the path.
        target: Last vertex of the path.
        weight: Weight of the edge between two neighboring vertices. Must be
            non-negative.
        stop_at_target: Stop once ``target`` is settled instead of settling the
            whole reachable set. Defaults to ``SEARCH_CONFIG.dijkstra_stop_at_target``.

    Returns:
        A PathResult whose ``total_weight`` is the minimal path weight and whose
        ``visited`` holds every settled vertex, or None if either argument is
        None or the target is unreachable.

    Raises:
        ValueError: If ``weight`` returns a negative value.
    """
    if start is None or target is None:
        return None
    if stop_at_target is None:
        stop_at_target = SEARCH_CONFIG.dijkstra_stop_at_target

    records: Dict[V, SpanningRecord[V]] = {
        vertex: SpanningRecord() for vertex in all_vertices(provider, start)
    }
    records[start].weight_sum_to = 0

    sequence = count()
    frontier: List[Tuple[Cost, int, V]] = [(0, next(sequence), start)]
    settled: Set[V] = set()

    while frontier:
        current_weight, _, vertex = heappop(frontier)
        record = records[vertex]
        if record.settled:
            continue
        record.settled = True
        settled.add(vertex)

        if stop_at_target and vertex == target:
            break

        for neighbor in provider.neighbors(vertex):
            neighbor_record = records[neighbor]
            if neighbor_record.settled:
                continue
            edge_weight = weight(vertex, neighbor)
            if edge_weight < 0:
                raise ValueError(
                    f"Negative weight {edge_weight} on edge {vertex!r} -> {neighbor!r}."
                )
            candidate = current_weight + edge_weight
            if candidate < neighbor_record.weight_sum_to:
                neighbor_record.weight_sum_to = candidate
                neighbor_record.parent = vertex
                heappush(frontier, (candidate, next(sequence), neighbor))

    target_record = records.get(target)
    if target_record is None or not target_record.reached:
        logger.debug(
            "Dijkstra %r -> %r: no path, %d settled", start, target, len(settled)
        )
        return None

    vertices: List[V] = [target]
    while vertices[-1] != start:
        parent = records[vertices[-1]].parent
        assert parent is not None
        vertices.append(parent)
    vertices.reverse()

    logger.debug(
        "Dijkstra %r -> %r: weight %s over %d edges, %d settled",
        start,
        target,
        target_record.weight_sum_to,
        len(vertices) - 1,
        len(settled),
    )
    return PathResult(tuple(vertices), target_record.weight_sum_to, frozenset(settled))
