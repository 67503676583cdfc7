"""Shared type aliases."""

from graphsearch.types.base import INF_COST, Cost, V, WeightFunc

__all__ = ["Cost", "INF_COST", "V", "WeightFunc"]
