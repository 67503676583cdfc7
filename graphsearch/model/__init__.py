"""Result types returned by the search algorithms."""

from graphsearch.model.path import PathResult

__all__ = ["PathResult"]
