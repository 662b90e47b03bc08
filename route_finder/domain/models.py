"""Immutable domain models for the route finder.

All models are frozen dataclasses with slots. ``Location`` and ``Route``
mirror the rows held by the data store; ``GraphNode``, ``GraphEdge`` and
``PathResult`` are derived by the graph and never persisted.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional


class PathStatus(Enum):
    """Outcome of a shortest-path query."""

    FOUND = auto()
    UNREACHABLE = auto()
    UNKNOWN_ENDPOINT = auto()


@dataclass(frozen=True, slots=True)
class Location:
    """A named place with planar layout coordinates.

    Attributes:
        id: Unique location identifier (uuid string)
        name: Display name
        x: Horizontal coordinate, arbitrary unit
        y: Vertical coordinate, arbitrary unit
        description: Optional free text
        created_at: ISO timestamp set by the store
    """

    id: str
    name: str
    x: float
    y: float
    description: str = ""
    created_at: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Route:
    """A stored, directed connection between two locations.

    Attributes:
        id: Unique route identifier
        from_location_id: Source location id
        to_location_id: Destination location id
        distance: Positive route length
        created_at: ISO timestamp set by the store
    """

    id: str
    from_location_id: str
    to_location_id: str
    distance: float
    created_at: Optional[str] = None


@dataclass(frozen=True, slots=True)
class GraphNode:
    """Graph vertex built from a location."""

    id: str
    name: str
    x: float
    y: float

    @classmethod
    def from_location(cls, location: Location) -> GraphNode:
        return cls(id=location.id, name=location.name, x=location.x, y=location.y)

    def to_location(self) -> Location:
        """Rebuild a location-like record (no description, no timestamp)."""
        return Location(id=self.id, name=self.name, x=self.x, y=self.y)


@dataclass(frozen=True, slots=True)
class GraphEdge:
    """Directed weighted edge."""

    source: str
    target: str
    distance: float


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path query.

    Attributes:
        status: Whether a path was found, and if not, why
        path: Ordered location ids from source to target inclusive
        distance: Cumulative distance along the path (inf when not found)
        locations: Location records along the path
    """

    status: PathStatus
    path: tuple[str, ...] = field(default_factory=tuple)
    distance: float = math.inf
    locations: tuple[Location, ...] = field(default_factory=tuple)

    @classmethod
    def unreachable(cls) -> PathResult:
        return cls(status=PathStatus.UNREACHABLE)

    @classmethod
    def unknown_endpoint(cls) -> PathResult:
        return cls(status=PathStatus.UNKNOWN_ENDPOINT)

    @property
    def found(self) -> bool:
        """Check if a path exists."""
        return self.status is PathStatus.FOUND

    @property
    def is_empty(self) -> bool:
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of locations on the path."""
        return len(self.path)
