"""Result of a path search.

``PathResult`` stores the ordered vertex sequence found by a search, its
accumulated weight, and the set of vertices the search examined. Instances are
immutable; helpers derive new results instead of mutating in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Generic, Iterator, Tuple

from graphsearch.config import SEARCH_CONFIG
from graphsearch.types.base import Cost, V, WeightFunc


@dataclass(frozen=True)
class PathResult(Generic[V]):
    """A path between two vertices as returned by the search algorithms.

    Representation invariants:
      1. Consecutive vertices are neighbors: for all i,
         ``vertices[i + 1] in neighbors(vertices[i])``.
      2. A single vertex means the start is the target.
      3. An empty path has neither start nor target. It denotes "not searched";
         searches signal "no path" with ``None`` instead.

    Attributes:
        vertices: Vertices from start to target, inclusive.
        total_weight: Sum of edge weights along the path; 0 for unweighted
            searches and single-vertex paths.
        visited: Vertices examined by the search, for analysis only. Not
            guaranteed to contain ``vertices``.
    """

    vertices: Tuple[V, ...] = ()
    total_weight: Cost = 0
    visited: FrozenSet[V] = field(default_factory=frozenset, compare=False)

    def __len__(self) -> int:
        """Return the number of vertices in the path."""
        return len(self.vertices)

    def __iter__(self) -> Iterator[V]:
        return iter(self.vertices)

    def __getitem__(self, idx: int) -> V:
        return self.vertices[idx]

    def __lt__(self, other: Any) -> bool:
        """Order paths by total weight."""
        if not isinstance(other, PathResult):
            return NotImplemented
        return self.total_weight < other.total_weight

    @property
    def is_empty(self) -> bool:
        return not self.vertices

    @property
    def start(self) -> V:
        """Return the first vertex of the path.

        Raises:
            ValueError: If the path is empty.
        """
        if not self.vertices:
            raise ValueError("Empty path has no start vertex.")
        return self.vertices[0]

    @property
    def target(self) -> V:
        """Return the last vertex of the path.

        Raises:
            ValueError: If the path is empty.
        """
        if not self.vertices:
            raise ValueError("Empty path has no target vertex.")
        return self.vertices[-1]

    @property
    def edge_count(self) -> int:
        """Return the number of edges traversed; 0 for empty or one-vertex paths."""
        return max(len(self.vertices) - 1, 0)

    def edges(self) -> Iterator[Tuple[V, V]]:
        """Yield each (u, v) pair of consecutive vertices."""
        return zip(self.vertices, self.vertices[1:])

    def with_weights(self, weight: WeightFunc) -> PathResult[V]:
        """Return a copy whose total weight is recomputed from ``weight``.

        Args:
            weight: Function giving the weight of the edge between two
                neighboring vertices.

        Returns:
            A new PathResult with the same vertices and visited set.
        """
        total: Cost = 0
        for u, v in self.edges():
            total += weight(u, v)
        return PathResult(self.vertices, total, self.visited)

    def __str__(self) -> str:
        # Long paths show only the head and the tail around an ellipsis
        cut = SEARCH_CONFIG.path_display_cut
        count = len(self.vertices)
        tail_cut = count - 1 - cut
        shown = []
        for idx, vertex in enumerate(self.vertices):
            if idx < cut or idx > tail_cut:
                shown.append(str(vertex))
            elif idx == cut:
                shown.append("...")
        return (
            f"Weight={self.total_weight:.2f} Length={count} "
            f"visited={len(self.visited)} ({', '.join(shown)})"
        )
