"""Thread-safe in-memory location/route store.

Used directly in tests and demos, and as the working set behind the
CSV store.
"""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from ...domain.errors import DuplicateRouteError, LocationNotFoundError
from ...domain.models import Location, Route
from ...ports.store import RouteRow


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass
class InMemoryLocationStore:
    """Dict-backed store implementing LocationStorePort.

    Attributes:
        locations: Initial location records
        routes: Initial route records
        name: Store name for logging

    Example:
        store = InMemoryLocationStore()
        a = store.add_location("Depot", 0, 0)
        b = store.add_location("Market", 3, 4)
        store.add_routes([(a.id, b.id, 5.0)])
    """

    locations: Sequence[Location] = ()
    routes: Sequence[Route] = ()
    name: str = "memory"

    _locations: Dict[str, Location] = field(init=False, repr=False)
    _routes: Dict[str, Route] = field(init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"{__name__}.{self.name}")
        self._locations = {location.id: location for location in self.locations}
        self._routes = {route.id: route for route in self.routes}

    def list_locations(self) -> List[Location]:
        with self._lock:
            return sorted(self._locations.values(), key=lambda loc: loc.name)

    def list_routes(self) -> List[Route]:
        with self._lock:
            return list(self._routes.values())

    def get_location(self, location_id: str) -> Optional[Location]:
        with self._lock:
            return self._locations.get(location_id)

    def add_location(
        self,
        name: str,
        x: float,
        y: float,
        description: str = "",
    ) -> Location:
        location = Location(
            id=_new_id(),
            name=name,
            x=x,
            y=y,
            description=description,
            created_at=_now(),
        )
        with self._lock:
            self._locations[location.id] = location
        self._logger.debug("Location added", extra={"location_id": location.id})
        return location

    def update_location(
        self,
        location_id: str,
        name: str,
        x: float,
        y: float,
        description: str = "",
    ) -> Location:
        with self._lock:
            current = self._locations.get(location_id)
            if current is None:
                raise LocationNotFoundError(
                    f"Location not found: {location_id}",
                    location_id=location_id,
                )
            updated = replace(current, name=name, x=x, y=y, description=description)
            self._locations[location_id] = updated
        self._logger.debug("Location updated", extra={"location_id": location_id})
        return updated

    def delete_location(self, location_id: str) -> bool:
        with self._lock:
            if self._locations.pop(location_id, None) is None:
                return False
            connected = [
                route_id
                for route_id, route in self._routes.items()
                if location_id in (route.from_location_id, route.to_location_id)
            ]
            for route_id in connected:
                del self._routes[route_id]
        self._logger.debug(
            "Location deleted",
            extra={"location_id": location_id, "routes_removed": len(connected)},
        )
        return True

    def add_routes(self, rows: Sequence[RouteRow]) -> List[Route]:
        with self._lock:
            taken = {
                (route.from_location_id, route.to_location_id)
                for route in self._routes.values()
            }
            created: List[Route] = []
            for from_id, to_id, distance in rows:
                for location_id in (from_id, to_id):
                    if location_id not in self._locations:
                        raise LocationNotFoundError(
                            f"Location not found: {location_id}",
                            location_id=location_id,
                        )
                if (from_id, to_id) in taken:
                    raise DuplicateRouteError(
                        f"Route {from_id} -> {to_id} already exists",
                        from_location_id=from_id,
                        to_location_id=to_id,
                    )
                taken.add((from_id, to_id))
                created.append(
                    Route(
                        id=_new_id(),
                        from_location_id=from_id,
                        to_location_id=to_id,
                        distance=float(distance),
                        created_at=_now(),
                    )
                )
            for route in created:
                self._routes[route.id] = route
        self._logger.debug("Routes added", extra={"count": len(created)})
        return created

    def delete_route(self, route_id: str) -> bool:
        with self._lock:
            removed = self._routes.pop(route_id, None) is not None
        if removed:
            self._logger.debug("Route deleted", extra={"route_id": route_id})
        return removed

    def clear(self) -> int:
        """Remove every location and route.

        Returns:
            Number of locations that were removed.
        """
        with self._lock:
            count = len(self._locations)
            self._locations.clear()
            self._routes.clear()
            return count
