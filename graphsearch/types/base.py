"""Base type aliases shared by graph search algorithms."""

from __future__ import annotations

from typing import Callable, Hashable, TypeVar, Union

#: Represents numeric cost along a path (e.g. distance, latency, etc.).
Cost = Union[int, float]

#: Cumulative weight of a vertex that has not been reached (yet).
INF_COST: float = float("inf")

#: Opaque vertex type supplied by the caller. Must be hashable.
V = TypeVar("V", bound=Hashable)

#: Weight of the edge between two neighboring vertices.
WeightFunc = Callable[[V, V], Cost]
