"""Route finder - locations, routes and shortest paths between them."""

__version__ = "0.1.0"
