"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.
"""

from .rendering import GraphRendererPort
from .store import LocationStorePort, RouteRow

__all__ = [
    # Store
    "LocationStorePort",
    "RouteRow",
    # Rendering
    "GraphRendererPort",
]
