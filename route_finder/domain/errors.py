"""Typed domain errors for the route finder.

The graph itself reports a missing path by return value (see
``PathResult``). These errors are raised by the store, the service
management use cases and the ``*_or_raise`` query variants.

All errors inherit from RouteFinderError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RouteFinderError(Exception):
    """Base error for the route finder domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(RouteFinderError):
    """Graph construction or integrity error."""


@dataclass
class UnknownNodeError(GraphError):
    """An edge referenced a node id that is not registered in the graph.

    Attributes:
        node_id: The id that could not be resolved
    """

    node_id: str = ""


@dataclass
class LocationNotFoundError(RouteFinderError):
    """Location id not found in the store or graph.

    Attributes:
        location_id: The id that was not found
    """

    location_id: str = ""


@dataclass
class NoPathFoundError(RouteFinderError):
    """No path exists between the requested locations.

    Attributes:
        source: Departure location id
        target: Arrival location id
    """

    source: str = ""
    target: str = ""


@dataclass
class DataStoreError(RouteFinderError):
    """Reading or writing the location/route store failed.

    Attributes:
        file_path: Path to the backing file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class DuplicateRouteError(DataStoreError):
    """A route with the same endpoints already exists."""

    from_location_id: str = ""
    to_location_id: str = ""


@dataclass
class InvalidInputError(RouteFinderError):
    """User-supplied data failed validation.

    Attributes:
        field_name: Name of the offending field
    """

    field_name: str = ""


@dataclass
class RenderingError(RouteFinderError):
    """Network map rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""


@dataclass
class ConfigurationError(RouteFinderError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
