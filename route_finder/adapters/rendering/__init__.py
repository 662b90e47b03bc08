"""Rendering adapters - Implementations of GraphRendererPort.

Available implementations:
- FoliumGraphRenderer: Folium-based interactive network rendering
"""

from .folium_adapter import FoliumGraphRenderer

__all__ = ["FoliumGraphRenderer"]
