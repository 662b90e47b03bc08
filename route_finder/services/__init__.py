"""Services layer - Application orchestration.

Available services:
- RouteFinderService: network management and shortest-path queries
"""

from .route_finder import RouteFinderService

__all__ = ["RouteFinderService"]
