"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DataStoreError,
    DuplicateRouteError,
    GraphError,
    InvalidInputError,
    LocationNotFoundError,
    NoPathFoundError,
    RenderingError,
    RouteFinderError,
    UnknownNodeError,
)
from .models import GraphEdge, GraphNode, Location, PathResult, PathStatus, Route

__all__ = [
    # Models
    "Location",
    "Route",
    "GraphNode",
    "GraphEdge",
    "PathResult",
    "PathStatus",
    # Errors
    "RouteFinderError",
    "GraphError",
    "UnknownNodeError",
    "LocationNotFoundError",
    "NoPathFoundError",
    "DataStoreError",
    "DuplicateRouteError",
    "InvalidInputError",
    "RenderingError",
    "ConfigurationError",
]
