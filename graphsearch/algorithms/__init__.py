"""Traversal and path search algorithms.

All functions take a neighbor provider as their first argument and never
build a concrete graph structure of their own.
"""

from graphsearch.algorithms.adjacency import format_adjacency
from graphsearch.algorithms.bfs import bfs
from graphsearch.algorithms.dfs import dfs
from graphsearch.algorithms.dijkstra import dijkstra
from graphsearch.algorithms.reachability import all_vertices

__all__ = ["all_vertices", "bfs", "dfs", "dijkstra", "format_adjacency"]
