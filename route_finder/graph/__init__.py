"""Graph-related utilities for representing the location network.

This subpackage contains the frontier priority queue, the weighted
graph with its path-finding and traversal algorithms, and the builder
that turns location/route records into a graph.
"""

from .builder import build_graph
from .graph import Graph
from .priority_queue import PriorityQueue

__all__ = ["Graph", "PriorityQueue", "build_graph"]
