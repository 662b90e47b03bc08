# -*- coding: utf-8 -*-
import html
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import gradio as gr

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from route_finder.container import get_container
from route_finder.domain.errors import RouteFinderError
from route_finder.logging_setup import configure_logging
from route_finder.services import RouteFinderService

configure_logging()
logger = logging.getLogger("route_finder.app")

CONTAINER = get_container()
SERVICE: RouteFinderService = CONTAINER.resolve(RouteFinderService)
MAP_HEIGHT_PX: int = CONTAINER.config.rendering.map_height_px
MAP_PATH: Path = CONTAINER.config.rendering.map_path

LOCATION_HEADERS = ["Name", "X", "Y", "Description", "Id"]
ROUTE_HEADERS = ["From", "To", "Distance", "Id"]


def _map_iframe_from_html(document_html: str, *, height_px: int = MAP_HEIGHT_PX) -> str:
    escaped = html.escape(document_html, quote=True)
    return (
        f'<iframe srcdoc="{escaped}" '
        f'style="width: 100%; height: {height_px}px; border: 0;" '
        f'loading="lazy"></iframe>'
    )


def _network_html(path: Tuple[str, ...] = ()) -> str:
    try:
        return _map_iframe_from_html(SERVICE.render_network(path, output_path=MAP_PATH))
    except RouteFinderError as e:
        return f"<p style='text-align:center;color:#9ca3af'>{html.escape(e.message)}</p>"


def _location_choices() -> List[Tuple[str, str]]:
    return [(location.name, location.id) for location in SERVICE.list_locations()]


def _route_choices() -> List[Tuple[str, str]]:
    names = {location.id: location.name for location in SERVICE.list_locations()}
    return [
        (
            f"{names.get(route.from_location_id, 'Unknown')} → "
            f"{names.get(route.to_location_id, 'Unknown')} ({route.distance:,.2f})",
            route.id,
        )
        for route in SERVICE.list_routes()
    ]


def _location_rows() -> List[list]:
    return [
        [location.name, location.x, location.y, location.description, location.id]
        for location in SERVICE.list_locations()
    ]


def _route_rows() -> List[list]:
    names = {location.id: location.name for location in SERVICE.list_locations()}
    return [
        [
            names.get(route.from_location_id, "Unknown"),
            names.get(route.to_location_id, "Unknown"),
            route.distance,
            route.id,
        ]
        for route in SERVICE.list_routes()
    ]


def _refresh(status: str):
    """Outputs shared by every management action."""
    locations = _location_choices()
    return (
        status,
        _location_rows(),
        _route_rows(),
        gr.update(choices=locations, value=None),
        gr.update(choices=locations, value=None),
        gr.update(choices=locations, value=None),
        gr.update(choices=locations, value=None),
        gr.update(choices=locations, value=None),
        gr.update(choices=_route_choices(), value=None),
        _network_html(),
    )


def find_path(from_id: Optional[str], to_id: Optional[str]) -> Tuple[str, str]:
    if not from_id or not to_id:
        return "Select both a start and a destination.", _network_html()

    try:
        result = SERVICE.find_path(from_id, to_id)
    except RouteFinderError as e:
        logger.warning("Path search failed", extra={"error": str(e)})
        return f"⚠️ {e.message}", _network_html()
    return SERVICE.format_result(result), _network_html(result.path)


def swap(from_id: Optional[str], to_id: Optional[str]):
    return to_id, from_id


def save_location(
    location_id: Optional[str],
    name: str,
    x: Optional[float],
    y: Optional[float],
    description: str,
):
    try:
        if location_id:
            location = SERVICE.update_location(location_id, name, x, y, description)
            status = f"✅ Updated {location.name}"
        else:
            location = SERVICE.add_location(name, x, y, description)
            status = f"✅ Added {location.name}"
    except RouteFinderError as e:
        logger.warning("Saving location failed", extra={"error": str(e)})
        status = f"⚠️ {e.message}"
    return _refresh(status)


def delete_location(location_id: Optional[str]):
    if not location_id:
        return _refresh("Select a location to delete.")
    try:
        SERVICE.delete_location(location_id)
        status = "🗑️ Location and its routes deleted"
    except RouteFinderError as e:
        status = f"⚠️ {e.message}"
    return _refresh(status)


def add_route(
    from_id: Optional[str],
    to_id: Optional[str],
    distance: Optional[float],
    bidirectional: bool,
):
    if not from_id or not to_id:
        return _refresh("Select both route endpoints.")
    try:
        SERVICE.add_route(from_id, to_id, distance, bidirectional=bidirectional)
        status = "✅ Route added" + (" in both directions" if bidirectional else "")
    except RouteFinderError as e:
        logger.warning("Adding route failed", extra={"error": str(e)})
        status = f"⚠️ {e.message}"
    return _refresh(status)


def delete_route(route_id: Optional[str]):
    if not route_id:
        return _refresh("Select a route to delete.")
    try:
        SERVICE.delete_route(route_id)
        status = "🗑️ Route deleted"
    except RouteFinderError as e:
        status = f"⚠️ {e.message}"
    return _refresh(status)


# ============================ UI ============================
with gr.Blocks(title="Smart Route Finder") as app:
    gr.Markdown(
        """
# 🗺️ Smart Route Finder
Graph-based pathfinding with Dijkstra's algorithm
"""
    )

    with gr.Row():
        with gr.Column(scale=2):
            map_view = gr.HTML(value=_network_html())

        with gr.Column(scale=1):
            with gr.Tab("Find Routes"):
                from_dd = gr.Dropdown(_location_choices(), label="📍 From")
                to_dd = gr.Dropdown(_location_choices(), label="🏁 To")
                with gr.Row():
                    btn_swap = gr.Button("🔁 Swap")
                    btn_find = gr.Button("🚀 Find shortest path", variant="primary")
                result_box = gr.Textbox(label="Result", lines=4)

            with gr.Tab("Manage Data"):
                gr.Markdown("### Locations")
                edit_dd = gr.Dropdown(
                    _location_choices(), label="Edit existing (leave empty to add)"
                )
                name_box = gr.Textbox(label="Name")
                with gr.Row():
                    x_num = gr.Number(label="X")
                    y_num = gr.Number(label="Y")
                description_box = gr.Textbox(label="Description", lines=2)
                with gr.Row():
                    btn_save_location = gr.Button("💾 Save location")
                    btn_delete_location = gr.Button("🗑️ Delete selected", variant="stop")

                gr.Markdown("### Routes")
                with gr.Row():
                    route_from_dd = gr.Dropdown(_location_choices(), label="From")
                    route_to_dd = gr.Dropdown(_location_choices(), label="To")
                distance_num = gr.Number(label="Distance", minimum=0.01)
                bidirectional_cb = gr.Checkbox(
                    value=True, label="Bidirectional (create route in both directions)"
                )
                btn_add_route = gr.Button("➕ Add route")
                route_dd = gr.Dropdown(_route_choices(), label="Route to delete")
                btn_delete_route = gr.Button("🗑️ Delete route", variant="stop")

                status_box = gr.Textbox(label="Status", lines=1)

    with gr.Row():
        locations_table = gr.Dataframe(
            value=_location_rows(), headers=LOCATION_HEADERS, label="Locations"
        )
        routes_table = gr.Dataframe(
            value=_route_rows(), headers=ROUTE_HEADERS, label="Routes"
        )

    refresh_outputs = [
        status_box,
        locations_table,
        routes_table,
        from_dd,
        to_dd,
        edit_dd,
        route_from_dd,
        route_to_dd,
        route_dd,
        map_view,
    ]

    btn_find.click(find_path, inputs=[from_dd, to_dd], outputs=[result_box, map_view])
    btn_swap.click(swap, inputs=[from_dd, to_dd], outputs=[from_dd, to_dd])

    btn_save_location.click(
        save_location,
        inputs=[edit_dd, name_box, x_num, y_num, description_box],
        outputs=refresh_outputs,
    )
    btn_delete_location.click(delete_location, inputs=[edit_dd], outputs=refresh_outputs)
    btn_add_route.click(
        add_route,
        inputs=[route_from_dd, route_to_dd, distance_num, bidirectional_cb],
        outputs=refresh_outputs,
    )
    btn_delete_route.click(delete_route, inputs=[route_dd], outputs=refresh_outputs)


if __name__ == "__main__":
    app.launch()
