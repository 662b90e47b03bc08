"""CSV location/route store adapter.

Locations and routes live in two CSV files under the configured data
directory. The files are read once into an in-memory working set and
rewritten after every mutation, through a temporary file swapped into
place. A failed write drops the working set, so the store goes back to
what is on disk.
"""

from __future__ import annotations

import csv
import logging
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from ...config import StoreConfig, get_config
from ...domain.errors import DataStoreError
from ...domain.models import Location, Route
from ...ports.store import RouteRow
from .memory_store import InMemoryLocationStore

LOCATION_FIELDS = ["id", "name", "description", "x_coordinate", "y_coordinate", "created_at"]
ROUTE_FIELDS = ["id", "from_location_id", "to_location_id", "distance", "created_at"]


@dataclass
class CSVLocationStore:
    """Store that persists locations and routes to CSV files.

    This adapter implements LocationStorePort.

    Attributes:
        config: Store configuration (paths, file names)
    """

    config: StoreConfig = field(default_factory=lambda: get_config().store)
    _logger: logging.Logger = field(init=False, repr=False)

    _memory: Optional[InMemoryLocationStore] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def list_locations(self) -> List[Location]:
        return self._load().list_locations()

    def list_routes(self) -> List[Route]:
        return self._load().list_routes()

    def get_location(self, location_id: str) -> Optional[Location]:
        return self._load().get_location(location_id)

    def add_location(
        self,
        name: str,
        x: float,
        y: float,
        description: str = "",
    ) -> Location:
        location = self._load().add_location(name, x, y, description)
        self._persist(self._write_locations)
        return location

    def update_location(
        self,
        location_id: str,
        name: str,
        x: float,
        y: float,
        description: str = "",
    ) -> Location:
        location = self._load().update_location(location_id, name, x, y, description)
        self._persist(self._write_locations)
        return location

    def delete_location(self, location_id: str) -> bool:
        removed = self._load().delete_location(location_id)
        if removed:
            # Routes first: a failure after that leaves no dangling route rows.
            self._persist(self._write_routes, self._write_locations)
        return removed

    def add_routes(self, rows: Sequence[RouteRow]) -> List[Route]:
        created = self._load().add_routes(rows)
        self._persist(self._write_routes)
        return created

    def delete_route(self, route_id: str) -> bool:
        removed = self._load().delete_route(route_id)
        if removed:
            self._persist(self._write_routes)
        return removed

    def reload(self) -> None:
        """Drop the working set so the next access re-reads the files."""
        self._memory = None
        self._logger.debug("Store cache cleared")

    def _persist(self, *writers: Callable[[], None]) -> None:
        """Run the file writers, discarding the unsaved change on failure."""
        try:
            for write in writers:
                write()
        except DataStoreError:
            self.reload()
            raise

    def _load(self) -> InMemoryLocationStore:
        if self._memory is not None:
            return self._memory

        self._logger.debug(
            "Loading store",
            extra={
                "locations_path": str(self.config.locations_path),
                "routes_path": str(self.config.routes_path),
            },
        )

        locations = self._read_locations()
        routes = self._read_routes()
        self._memory = InMemoryLocationStore(locations=locations, routes=routes, name="csv")
        self._logger.info(
            "Store loaded",
            extra={"locations": len(locations), "routes": len(routes)},
        )
        return self._memory

    def _read_locations(self) -> List[Location]:
        path = self.config.locations_path
        locations: List[Location] = []
        for row in self._read_rows(path):
            location_id = (row.get("id") or "").strip()
            if not location_id:
                continue
            try:
                locations.append(
                    Location(
                        id=location_id,
                        name=(row.get("name") or "").strip() or location_id,
                        description=(row.get("description") or "").strip(),
                        x=float(row.get("x_coordinate") or 0.0),
                        y=float(row.get("y_coordinate") or 0.0),
                        created_at=(row.get("created_at") or "").strip() or None,
                    )
                )
            except ValueError as e:
                raise DataStoreError(
                    f"Invalid coordinates for location {location_id}",
                    file_path=str(path),
                    cause=e,
                )
        return locations

    def _read_routes(self) -> List[Route]:
        path = self.config.routes_path
        routes: List[Route] = []
        for row in self._read_rows(path):
            route_id = (row.get("id") or "").strip()
            from_id = (row.get("from_location_id") or "").strip()
            to_id = (row.get("to_location_id") or "").strip()
            distance_str = (row.get("distance") or "").strip()

            if not route_id or not from_id or not to_id or not distance_str:
                continue

            try:
                distance = float(distance_str)
            except ValueError as e:
                raise DataStoreError(
                    f"Invalid distance for route {route_id}",
                    file_path=str(path),
                    cause=e,
                )
            routes.append(
                Route(
                    id=route_id,
                    from_location_id=from_id,
                    to_location_id=to_id,
                    distance=distance,
                    created_at=(row.get("created_at") or "").strip() or None,
                )
            )
        return routes

    def _read_rows(self, path: Path) -> List[Dict[str, str]]:
        if not path.exists():
            return []
        try:
            with path.open(newline="", encoding="utf-8") as f:
                return list(csv.DictReader(f))
        except OSError as e:
            raise DataStoreError(
                f"Failed to read {path.name}",
                file_path=str(path),
                cause=e,
            )

    def _write_locations(self) -> None:
        rows = [
            {
                "id": location.id,
                "name": location.name,
                "description": location.description,
                "x_coordinate": location.x,
                "y_coordinate": location.y,
                "created_at": location.created_at or "",
            }
            for location in self._load().list_locations()
        ]
        self._write_rows(self.config.locations_path, LOCATION_FIELDS, rows)

    def _write_routes(self) -> None:
        rows = [
            {
                "id": route.id,
                "from_location_id": route.from_location_id,
                "to_location_id": route.to_location_id,
                "distance": route.distance,
                "created_at": route.created_at or "",
            }
            for route in self._load().list_routes()
        ]
        self._write_rows(self.config.routes_path, ROUTE_FIELDS, rows)

    def _write_rows(
        self, path: Path, fieldnames: List[str], rows: List[Dict[str, object]]
    ) -> None:
        tmp_path: Optional[Path] = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                newline="",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_path = Path(f.name)
                writer = csv.DictWriter(f, fieldnames=fieldnames)
                writer.writeheader()
                writer.writerows(rows)
            tmp_path.replace(path)
        except OSError as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            self._logger.error(
                "Failed to write store file",
                extra={"path": str(path), "error": str(e)},
            )
            raise DataStoreError(
                f"Failed to write {path.name}",
                file_path=str(path),
                cause=e,
            )
        self._logger.debug("Store file written", extra={"path": str(path), "rows": len(rows)})
