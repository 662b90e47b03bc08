"""Folium network renderer adapter.

Draws the location network on a planar Folium map (``crs="Simple"``,
no tiles): one circle marker per location, one line per connected pair,
with the edges of the highlighted path drawn in the path colour.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, List, Sequence, Set, Tuple

from ...config import RenderingConfig, get_config
from ...domain.errors import RenderingError
from ...domain.models import GraphEdge, GraphNode


def _path_pairs(path: Sequence[str]) -> Set[FrozenSet[str]]:
    return {frozenset(pair) for pair in zip(path, path[1:])}


@dataclass
class FoliumGraphRenderer:
    """Folium-based network renderer.

    This adapter implements GraphRendererPort.
    """

    config: RenderingConfig = field(default_factory=lambda: get_config().rendering)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render_html(
        self,
        nodes: Sequence[GraphNode],
        edges: Sequence[GraphEdge],
        highlighted_path: Sequence[str] = (),
    ) -> str:
        """Render the network as a standalone HTML document.

        Raises:
            RenderingError: If there is nothing to draw or Folium fails.
        """
        network_map = self._build_map(nodes, edges, highlighted_path)
        try:
            return network_map.get_root().render()
        except Exception as e:
            raise RenderingError(
                f"Map rendering failed: {e}",
                renderer_type="folium",
                cause=e,
            )

    def render(
        self,
        nodes: Sequence[GraphNode],
        edges: Sequence[GraphEdge],
        output_path: Path,
        highlighted_path: Sequence[str] = (),
    ) -> Path:
        """Render the network and save it as HTML.

        Raises:
            RenderingError: If there is nothing to draw or saving fails.
        """
        network_map = self._build_map(nodes, edges, highlighted_path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            network_map.save(str(output_path))
        except Exception as e:
            self._logger.error(
                "Map saving failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise RenderingError(
                f"Map rendering failed: {e}",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )

        self._logger.info(
            "Map rendered successfully",
            extra={"output_path": str(output_path)},
        )
        return output_path

    def _build_map(
        self,
        nodes: Sequence[GraphNode],
        edges: Sequence[GraphEdge],
        highlighted_path: Sequence[str],
    ):
        if not nodes:
            raise RenderingError(
                "No locations to display",
                renderer_type="folium",
            )

        self._logger.debug(
            "Rendering network map",
            extra={
                "nodes": len(nodes),
                "edges": len(edges),
                "path_stops": len(highlighted_path),
            },
        )

        try:
            import folium
        except ImportError as e:
            raise RenderingError(
                "Folium not installed",
                renderer_type="folium",
                cause=e,
            )

        by_id: Dict[str, GraphNode] = {node.id: node for node in nodes}
        on_path = set(highlighted_path)
        path_pairs = _path_pairs(highlighted_path)

        xs = [node.x for node in nodes]
        ys = [node.y for node in nodes]
        # Simple CRS takes [y, x] like [lat, lon].
        center = [(min(ys) + max(ys)) / 2, (min(xs) + max(xs)) / 2]

        try:
            m = folium.Map(
                location=center,
                crs="Simple",
                tiles=None,
                zoom_start=1,
                control_scale=False,
            )

            # Each bidirectional pair is stored as two directed edges; draw it once.
            drawn: Set[FrozenSet[str]] = set()
            for edge in edges:
                source = by_id.get(edge.source)
                target = by_id.get(edge.target)
                pair = frozenset((edge.source, edge.target))
                if source is None or target is None or pair in drawn:
                    continue
                drawn.add(pair)

                highlighted = pair in path_pairs
                folium.PolyLine(
                    locations=[[source.y, source.x], [target.y, target.x]],
                    color=self.config.path_color if highlighted else self.config.edge_color,
                    weight=5 if highlighted else 2,
                    opacity=0.9 if highlighted else 0.7,
                    tooltip=f"{source.name} - {target.name}: {edge.distance:,.2f} units",
                ).add_to(m)

            start_id = highlighted_path[0] if highlighted_path else None
            end_id = highlighted_path[-1] if highlighted_path else None
            for node in nodes:
                if node.id == start_id:
                    color = "green"
                elif node.id == end_id:
                    color = "red"
                elif node.id in on_path:
                    color = self.config.path_color
                else:
                    color = self.config.node_color
                folium.CircleMarker(
                    location=[node.y, node.x],
                    radius=8,
                    color=color,
                    fill=True,
                    fill_opacity=0.9,
                    tooltip=node.name,
                    popup=f"{node.name} ({node.x:g}, {node.y:g})",
                ).add_to(m)

            if len(nodes) >= 2:
                m.fit_bounds(self._bounds(xs, ys))
        except Exception as e:
            self._logger.error("Map building failed", extra={"error": str(e)})
            raise RenderingError(
                f"Map rendering failed: {e}",
                renderer_type="folium",
                cause=e,
            )

        return m

    @staticmethod
    def _bounds(xs: List[float], ys: List[float]) -> List[Tuple[float, float]]:
        return [(min(ys), min(xs)), (max(ys), max(xs))]
