"""Bookkeeping structures used internally by the search algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional

from graphsearch.types.base import INF_COST, Cost, V


@dataclass
class SpanningRecord(Generic[V]):
    """Per-vertex state of Dijkstra's shortest-path spanning tree.

    Attributes:
        parent: Vertex this one was reached from on the best path found so far.
            None for the start vertex and for vertices not reached yet.
        weight_sum_to: Total weight of the best path found so far.
        settled: True once ``weight_sum_to`` is final. A settled record is
            never updated again.
    """

    parent: Optional[V] = None
    weight_sum_to: Cost = INF_COST
    settled: bool = False

    @property
    def reached(self) -> bool:
        return self.weight_sum_to != INF_COST
