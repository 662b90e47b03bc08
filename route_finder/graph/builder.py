"""Graph construction from location and route records.

This module replaces CSV-driven graph loading: the records come from
whichever store the caller injected, and a fresh ``Graph`` is built on
every call.
"""

from __future__ import annotations

import logging
from typing import Iterable

from ..domain.errors import UnknownNodeError
from ..domain.models import GraphNode, Location, Route
from .graph import Graph

logger = logging.getLogger(__name__)


def build_graph(
    locations: Iterable[Location],
    routes: Iterable[Route],
    *,
    skip_dangling: bool = False,
) -> Graph:
    """Build a graph with one node per location and two edges per route.

    Every route is inserted in both directions, whether or not its mirror
    row is also stored. Duplicate inserts simply overwrite the same edge.

    Args:
        locations: Location records; each becomes a node.
        routes: Route records; each becomes ``from -> to`` and ``to -> from``.
        skip_dangling: Skip (and log) routes that reference unknown
            locations instead of raising.

    Returns:
        A newly allocated graph.

    Raises:
        UnknownNodeError: If a route references an unknown location and
            ``skip_dangling`` is False.
    """
    graph = Graph()

    for location in locations:
        graph.add_node(GraphNode.from_location(location))

    for route in routes:
        source = str(route.from_location_id)
        target = str(route.to_location_id)
        if skip_dangling and (source not in graph or target not in graph):
            logger.warning(
                "Skipping route with unknown endpoint",
                extra={"route_id": route.id, "from": source, "to": target},
            )
            continue
        try:
            graph.add_edge(source, target, route.distance)
            graph.add_edge(target, source, route.distance)
        except UnknownNodeError:
            logger.error(
                "Route references unknown location",
                extra={"route_id": route.id, "from": source, "to": target},
            )
            raise

    logger.debug(
        "Graph built",
        extra={"nodes": len(graph), "edges": graph.edge_count},
    )
    return graph
