"""Route finder service - Main orchestrator.

Ties the injected store to the graph: every query rebuilds the graph
from the current locations and routes, then runs the shortest-path
search. Location and route management goes through here so input is
validated before it reaches the store.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ..domain.errors import (
    InvalidInputError,
    LocationNotFoundError,
    NoPathFoundError,
    RenderingError,
)
from ..domain.models import GraphEdge, GraphNode, Location, PathResult, PathStatus, Route
from ..graph import Graph, build_graph
from ..ports.rendering import GraphRendererPort
from ..ports.store import LocationStorePort, RouteRow


@dataclass
class RouteFinderService:
    """Main service for managing the network and finding routes.

    Attributes:
        store: Source of truth for locations and routes
        renderer: Optional network renderer
        skip_dangling: Skip routes pointing at unknown locations when
            building the graph instead of failing
    """

    store: LocationStorePort
    renderer: Optional[GraphRendererPort] = None
    skip_dangling: bool = False

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def build_graph(self) -> Graph:
        """Build a fresh graph from the store's current contents."""
        locations = self.store.list_locations()
        routes = self.store.list_routes()
        graph = build_graph(locations, routes, skip_dangling=self.skip_dangling)
        self._logger.debug(
            "Graph rebuilt",
            extra={"nodes": len(graph), "edges": graph.edge_count},
        )
        return graph

    def find_path(self, from_id: str, to_id: str) -> PathResult:
        """Find the shortest path between two locations.

        Unknown ids and disconnected locations are reported through
        ``PathResult.status`` rather than raised.

        Raises:
            UnknownNodeError: If the store holds a route pointing at a
                missing location and ``skip_dangling`` is False.
        """
        self._logger.debug(
            "Finding path",
            extra={"from_id": from_id, "to_id": to_id},
        )
        result = self.build_graph().dijkstra(from_id, to_id)

        if result.found:
            self._logger.info(
                "Path found",
                extra={
                    "from_id": from_id,
                    "to_id": to_id,
                    "stops": result.num_stops,
                    "distance": result.distance,
                },
            )
        else:
            self._logger.warning(
                "No path found",
                extra={"from_id": from_id, "to_id": to_id, "status": result.status.name},
            )
        return result

    def find_path_or_raise(self, from_id: str, to_id: str) -> PathResult:
        """Find the shortest path, raising when there is none.

        Raises:
            LocationNotFoundError: If either id is not a known location.
            NoPathFoundError: If the locations are not connected.
        """
        result = self.find_path(from_id, to_id)
        if result.status is PathStatus.UNKNOWN_ENDPOINT:
            missing = from_id if self.store.get_location(from_id) is None else to_id
            raise LocationNotFoundError(
                f"Location not found: {missing}",
                location_id=missing,
            )
        if result.status is PathStatus.UNREACHABLE:
            raise NoPathFoundError(
                f"No path from {from_id} to {to_id}",
                source=from_id,
                target=to_id,
            )
        return result

    def network(self) -> Tuple[List[GraphNode], List[GraphEdge]]:
        """Return all nodes and directed edges for visualization."""
        graph = self.build_graph()
        return graph.get_nodes(), graph.get_edges()

    def list_locations(self) -> Sequence[Location]:
        return self.store.list_locations()

    def list_routes(self) -> Sequence[Route]:
        return self.store.list_routes()

    # ------------------------------------------------------------------
    # Management
    # ------------------------------------------------------------------

    def add_location(
        self,
        name: str,
        x: float,
        y: float,
        description: str = "",
    ) -> Location:
        """Create a location after validating its fields.

        Raises:
            InvalidInputError: If the name is blank or a coordinate is not finite.
        """
        name, x, y = self._validate_location(name, x, y)
        location = self.store.add_location(name, x, y, (description or "").strip())
        self._logger.info("Location added", extra={"location_id": location.id})
        return location

    def update_location(
        self,
        location_id: str,
        name: str,
        x: float,
        y: float,
        description: str = "",
    ) -> Location:
        """Update a location's name, coordinates and description.

        Raises:
            InvalidInputError: If the new values are invalid.
            LocationNotFoundError: If the location does not exist.
        """
        name, x, y = self._validate_location(name, x, y)
        location = self.store.update_location(
            location_id, name, x, y, (description or "").strip()
        )
        self._logger.info("Location updated", extra={"location_id": location_id})
        return location

    def delete_location(self, location_id: str) -> None:
        """Delete a location and all routes connected to it.

        Raises:
            LocationNotFoundError: If the location does not exist.
        """
        if not self.store.delete_location(location_id):
            raise LocationNotFoundError(
                f"Location not found: {location_id}",
                location_id=location_id,
            )
        self._logger.info("Location deleted", extra={"location_id": location_id})

    def add_route(
        self,
        from_id: str,
        to_id: str,
        distance: float,
        bidirectional: bool = True,
    ) -> Sequence[Route]:
        """Store a route, plus its mirror row when ``bidirectional``.

        Raises:
            InvalidInputError: If the distance is not positive or the
                endpoints are the same location.
            LocationNotFoundError: If an endpoint does not exist.
            DuplicateRouteError: If the route already exists.
        """
        try:
            distance = float(distance)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(
                f"Distance must be a number, got {distance!r}",
                field_name="distance",
                cause=e,
            )
        if not math.isfinite(distance) or distance <= 0:
            raise InvalidInputError(
                f"Distance must be positive, got {distance}",
                field_name="distance",
            )
        if from_id == to_id:
            raise InvalidInputError(
                "A route must connect two different locations",
                field_name="to_location_id",
            )

        rows: List[RouteRow] = [(from_id, to_id, distance)]
        if bidirectional:
            rows.append((to_id, from_id, distance))

        routes = self.store.add_routes(rows)
        self._logger.info(
            "Route added",
            extra={
                "from_id": from_id,
                "to_id": to_id,
                "distance": distance,
                "bidirectional": bidirectional,
            },
        )
        return routes

    def delete_route(self, route_id: str) -> None:
        """Delete a single stored route row.

        Raises:
            InvalidInputError: If no route has this id.
        """
        if not self.store.delete_route(route_id):
            raise InvalidInputError(
                f"Route not found: {route_id}",
                field_name="route_id",
            )
        self._logger.info("Route deleted", extra={"route_id": route_id})

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def render_network(
        self,
        path: Sequence[str] = (),
        output_path: Optional[Path] = None,
    ) -> str:
        """Render the network with ``path`` highlighted.

        Returns:
            The HTML document, also written to ``output_path`` if given.

        Raises:
            RenderingError: If no renderer is configured or rendering fails.
        """
        if self.renderer is None:
            raise RenderingError("No renderer configured")

        nodes, edges = self.network()
        if output_path is not None:
            self.renderer.render(nodes, edges, output_path, highlighted_path=path)
        return self.renderer.render_html(nodes, edges, highlighted_path=path)

    def format_result(self, result: PathResult) -> str:
        """Format a path result as a human-readable string."""
        if result.status is PathStatus.UNKNOWN_ENDPOINT:
            return "No path found: unknown location"
        if not result.found:
            return "No path found between the selected locations"

        names = [location.name for location in result.locations]
        return (
            f"Shortest path: {' -> '.join(names)}\n"
            f"Total distance: {result.distance:,.2f} units\n"
            f"Stops: {result.num_stops}"
        )

    @staticmethod
    def _validate_location(name: str, x: float, y: float) -> Tuple[str, float, float]:
        name = (name or "").strip()
        if not name:
            raise InvalidInputError("Location name is required", field_name="name")

        coordinates = []
        for field_name, value in (("x", x), ("y", y)):
            try:
                coordinate = float(value)
            except (TypeError, ValueError) as e:
                raise InvalidInputError(
                    f"Coordinate {field_name} must be a number, got {value!r}",
                    field_name=field_name,
                    cause=e,
                )
            if not math.isfinite(coordinate):
                raise InvalidInputError(
                    f"Coordinate {field_name} must be finite",
                    field_name=field_name,
                )
            coordinates.append(coordinate)
        return name, coordinates[0], coordinates[1]
