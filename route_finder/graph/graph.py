"""In-memory weighted graph of locations.

The graph owns a node map (id -> ``GraphNode``) and a directed adjacency
map (id -> {neighbor id -> distance}). It is populated by
``build_graph`` and queried for shortest paths and for the full node and
edge lists used by the renderer.
"""

from __future__ import annotations

import math
from collections import deque
from typing import Dict, List, Optional

from ..domain.errors import UnknownNodeError
from ..domain.models import GraphEdge, GraphNode, PathResult, PathStatus
from .priority_queue import PriorityQueue


class Graph:
    """Directed weighted graph with Dijkstra shortest-path search.

    Edge distances must be non-negative. They are not validated here;
    the store and service layers only accept positive distances.
    """

    def __init__(self) -> None:
        self._nodes: Dict[str, GraphNode] = {}
        self._adjacency: Dict[str, Dict[str, float]] = {}

    def add_node(self, node: GraphNode) -> None:
        """Insert or overwrite a node, keeping its existing edges."""
        self._nodes[node.id] = node
        self._adjacency.setdefault(node.id, {})

    def add_edge(self, source: str, target: str, distance: float) -> None:
        """Insert or overwrite the directed edge ``source -> target``.

        Raises:
            UnknownNodeError: If either endpoint is not a registered node.
        """
        for node_id in (source, target):
            if node_id not in self._nodes:
                raise UnknownNodeError(
                    f"Edge {source} -> {target} references unknown node {node_id}",
                    node_id=node_id,
                )
        self._adjacency[source][target] = distance

    def has_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        return self._nodes.get(node_id)

    def neighbors(self, node_id: str) -> Dict[str, float]:
        """Return a copy of the outgoing edges of ``node_id``."""
        return dict(self._adjacency.get(node_id, {}))

    def dijkstra(self, start_id: str, end_id: str) -> PathResult:
        """Compute the shortest path from ``start_id`` to ``end_id``.

        Returns:
            A ``PathResult`` with status FOUND, UNREACHABLE, or
            UNKNOWN_ENDPOINT when either id is not in the graph.
        """
        if start_id not in self._nodes or end_id not in self._nodes:
            return PathResult.unknown_endpoint()

        if start_id == end_id:
            return self._path_result([start_id], 0.0)

        distances: Dict[str, float] = {node_id: math.inf for node_id in self._nodes}
        previous: Dict[str, Optional[str]] = {node_id: None for node_id in self._nodes}
        distances[start_id] = 0.0

        frontier: PriorityQueue[str] = PriorityQueue()
        frontier.enqueue(start_id, 0.0)

        while not frontier.is_empty():
            entry = frontier.dequeue_with_priority()
            if entry is None:
                break
            current_id, priority = entry

            # Stale entry: a shorter distance was recorded after it was queued.
            if priority > distances[current_id]:
                continue

            if current_id == end_id:
                break

            current_distance = distances[current_id]
            for neighbor_id, weight in self._adjacency[current_id].items():
                candidate = current_distance + weight
                if candidate < distances[neighbor_id]:
                    distances[neighbor_id] = candidate
                    previous[neighbor_id] = current_id
                    frontier.enqueue(neighbor_id, candidate)

        if math.isinf(distances[end_id]):
            return PathResult.unreachable()

        path: List[str] = []
        current: Optional[str] = end_id
        while current is not None:
            path.append(current)
            current = previous[current]
        path.reverse()

        if path[0] != start_id:
            return PathResult.unreachable()

        return self._path_result(path, distances[end_id])

    def breadth_first(self, start_id: str) -> List[str]:
        """Return the breadth-first visitation order from ``start_id``."""
        if start_id not in self._nodes:
            return []

        visited = {start_id}
        order: List[str] = []
        queue = deque([start_id])
        while queue:
            node_id = queue.popleft()
            order.append(node_id)
            for neighbor_id in self._adjacency[node_id]:
                if neighbor_id not in visited:
                    visited.add(neighbor_id)
                    queue.append(neighbor_id)
        return order

    def depth_first(self, start_id: str) -> List[str]:
        """Return the depth-first (pre-order) visitation order from ``start_id``."""
        if start_id not in self._nodes:
            return []

        visited = set()
        order: List[str] = []
        stack = [start_id]
        while stack:
            node_id = stack.pop()
            if node_id in visited:
                continue
            visited.add(node_id)
            order.append(node_id)
            # Reversed so neighbors are visited in insertion order.
            for neighbor_id in reversed(list(self._adjacency[node_id])):
                if neighbor_id not in visited:
                    stack.append(neighbor_id)
        return order

    def get_nodes(self) -> List[GraphNode]:
        return list(self._nodes.values())

    def get_edges(self) -> List[GraphEdge]:
        """Return one edge per directed adjacency pair."""
        return [
            GraphEdge(source=source, target=target, distance=distance)
            for source, neighbors in self._adjacency.items()
            for target, distance in neighbors.items()
        ]

    @property
    def edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self._adjacency.values())

    def _path_result(self, path: List[str], distance: float) -> PathResult:
        return PathResult(
            status=PathStatus.FOUND,
            path=tuple(path),
            distance=distance,
            locations=tuple(self._nodes[node_id].to_location() for node_id in path),
        )

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)
