"""Store port - Abstraction over the location/route data store.

The store is passed explicitly to the service instead of being reached
through a module-level client, so the graph inputs can be swapped for an
in-memory store in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence, Tuple

if TYPE_CHECKING:
    from ..domain.models import Location, Route

# (from_location_id, to_location_id, distance)
RouteRow = Tuple[str, str, float]


class LocationStorePort(Protocol):
    """Port for reading and mutating locations and routes.

    Implementations:
    - adapters/store/memory_store.py (InMemoryLocationStore)
    - adapters/store/csv_store.py (CSVLocationStore)
    """

    def list_locations(self) -> Sequence[Location]:
        """List all locations ordered by name."""
        ...

    def list_routes(self) -> Sequence[Route]:
        """List all stored route rows."""
        ...

    def get_location(self, location_id: str) -> Optional[Location]:
        """Get a location by id, or None if not found."""
        ...

    def add_location(
        self,
        name: str,
        x: float,
        y: float,
        description: str = "",
    ) -> Location:
        """Create a location and return it with its generated id."""
        ...

    def update_location(
        self,
        location_id: str,
        name: str,
        x: float,
        y: float,
        description: str = "",
    ) -> Location:
        """Replace the editable fields of a location.

        Raises:
            LocationNotFoundError: If the id is unknown.
        """
        ...

    def delete_location(self, location_id: str) -> bool:
        """Delete a location and every route touching it.

        Returns:
            True if the location existed.
        """
        ...

    def add_routes(self, rows: Sequence[RouteRow]) -> Sequence[Route]:
        """Insert route rows atomically.

        Raises:
            LocationNotFoundError: If an endpoint is not a stored location.
            DuplicateRouteError: If a row with the same endpoints exists.
        """
        ...

    def delete_route(self, route_id: str) -> bool:
        """Delete a single route row.

        Returns:
            True if the route existed.
        """
        ...
