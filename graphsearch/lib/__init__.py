"""Library utilities for graphsearch.

This package contains integration modules for external libraries.
"""

from graphsearch.lib.nx import NxGraphView

__all__ = ["NxGraphView"]
