"""Rendering port - Abstraction for network visualization.

This protocol defines the contract for drawing the location network,
allowing different implementations (Folium, Plotly, etc.) to be used.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import GraphEdge, GraphNode


class GraphRendererPort(Protocol):
    """Port for network rendering.

    Implementation: adapters/rendering/folium_adapter.py
    """

    def render_html(
        self,
        nodes: Sequence[GraphNode],
        edges: Sequence[GraphEdge],
        highlighted_path: Sequence[str] = (),
    ) -> str:
        """Render the network as a standalone HTML document."""
        ...

    def render(
        self,
        nodes: Sequence[GraphNode],
        edges: Sequence[GraphEdge],
        output_path: Path,
        highlighted_path: Sequence[str] = (),
    ) -> Path:
        """Render the network and save it to ``output_path``.

        Returns:
            Path to the generated file.
        """
        ...
