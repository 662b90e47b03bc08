"""Tests for RouteFinderService."""

import math
import os
import sys
from unittest.mock import MagicMock

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from route_finder.adapters.store import InMemoryLocationStore
from route_finder.domain.errors import (
    DuplicateRouteError,
    InvalidInputError,
    LocationNotFoundError,
    NoPathFoundError,
    RenderingError,
    UnknownNodeError,
)
from route_finder.domain.models import Location, PathStatus, Route
from route_finder.services import RouteFinderService


class TestRouteFinderService:
    """Test suite for RouteFinderService."""

    @pytest.fixture
    def service(self):
        return RouteFinderService(store=InMemoryLocationStore())

    @pytest.fixture
    def network(self, service):
        a = service.add_location("A", 0, 0)
        b = service.add_location("B", 3, 4)
        c = service.add_location("C", 10, 10)
        d = service.add_location("D", 20, 20)
        service.add_route(a.id, b.id, 5, bidirectional=False)
        service.add_route(b.id, c.id, 5)
        return service, a, b, c, d

    def test_find_path_across_routes(self, network):
        service, a, b, c, _ = network

        result = service.find_path(a.id, c.id)

        assert result.found
        assert result.path == (a.id, b.id, c.id)
        assert result.distance == 10

    def test_single_direction_row_is_traversable_backwards(self, network):
        service, a, b, _, _ = network

        assert service.find_path(b.id, a.id).distance == 5

    def test_find_path_to_isolated_location(self, network):
        service, a, _, _, d = network

        result = service.find_path(a.id, d.id)

        assert result.status is PathStatus.UNREACHABLE
        assert math.isinf(result.distance)

    def test_find_path_to_self(self, network):
        service, _, _, _, d = network

        result = service.find_path(d.id, d.id)

        assert result.path == (d.id,)
        assert result.distance == 0

    def test_find_path_unknown_location(self, network):
        service, a, *_ = network

        assert service.find_path(a.id, "nope").status is PathStatus.UNKNOWN_ENDPOINT

    def test_find_path_or_raise(self, network):
        service, a, _, c, d = network

        assert service.find_path_or_raise(a.id, c.id).found

        with pytest.raises(NoPathFoundError) as no_path:
            service.find_path_or_raise(a.id, d.id)
        assert (no_path.value.source, no_path.value.target) == (a.id, d.id)

        with pytest.raises(LocationNotFoundError) as not_found:
            service.find_path_or_raise("nope", a.id)
        assert not_found.value.location_id == "nope"

    def test_graph_reflects_latest_store_contents(self, network):
        service, a, _, c, d = network

        service.add_route(c.id, d.id, 1.5)

        assert service.find_path(a.id, d.id).distance == 11.5

        service.delete_location(c.id)

        assert not service.find_path(a.id, d.id).found

    def test_network_lists_both_directions(self, network):
        service, *_ = network

        nodes, edges = service.network()

        assert len(nodes) == 4
        assert len(edges) == 4

    def test_add_route_bidirectional_stores_mirror(self, network):
        service, *_ = network

        rows = {(r.from_location_id, r.to_location_id) for r in service.list_routes()}

        assert len(rows) == 3

    @pytest.mark.parametrize("distance", [0, -1, "far", float("nan"), float("inf")])
    def test_add_route_rejects_bad_distance(self, network, distance):
        service, a, _, _, d = network

        with pytest.raises(InvalidInputError) as exc_info:
            service.add_route(a.id, d.id, distance)

        assert exc_info.value.field_name == "distance"

    def test_add_route_rejects_self_loop(self, network):
        service, a, *_ = network

        with pytest.raises(InvalidInputError):
            service.add_route(a.id, a.id, 1)

    def test_add_route_rejects_unknown_location(self, network):
        service, a, *_ = network

        with pytest.raises(LocationNotFoundError):
            service.add_route(a.id, "ghost", 1)

    def test_add_route_rejects_duplicate(self, network):
        service, a, b, _, _ = network

        with pytest.raises(DuplicateRouteError):
            service.add_route(a.id, b.id, 2)

    @pytest.mark.parametrize(
        "name, x, y, field_name",
        [("  ", 0, 0, "name"), ("P", "abc", 0, "x"), ("P", 0, None, "y")],
    )
    def test_add_location_validation(self, service, name, x, y, field_name):
        with pytest.raises(InvalidInputError) as exc_info:
            service.add_location(name, x, y)

        assert exc_info.value.field_name == field_name

    def test_add_location_strips_and_converts(self, service):
        location = service.add_location("  Pier  ", "1.5", 2, description="  dock ")

        assert location.name == "Pier"
        assert location.x == 1.5
        assert location.description == "dock"

    def test_update_location(self, network):
        service, a, *_ = network

        service.update_location(a.id, "Alpha", 1, 1)

        assert service.find_path(a.id, a.id).locations[0].name == "Alpha"

    def test_delete_missing_location_or_route_raises(self, service):
        with pytest.raises(LocationNotFoundError):
            service.delete_location("missing")
        with pytest.raises(InvalidInputError):
            service.delete_route("missing")

    def test_delete_route(self, network):
        service, a, b, _, _ = network
        (route,) = [r for r in service.list_routes() if r.from_location_id == a.id]

        service.delete_route(route.id)

        assert not service.find_path(a.id, b.id).found

    def test_dangling_store_rows(self):
        store = InMemoryLocationStore(
            routes=[Route(id="r", from_location_id="x", to_location_id="y", distance=1.0)]
        )

        with pytest.raises(UnknownNodeError):
            RouteFinderService(store=store).network()

        nodes, edges = RouteFinderService(store=store, skip_dangling=True).network()
        assert nodes == [] and edges == []

    def test_find_path_with_dangling_store_row_raises(self):
        a = Location(id="a", name="A", x=0.0, y=0.0)
        b = Location(id="b", name="B", x=1.0, y=1.0)
        store = InMemoryLocationStore(
            locations=[a, b],
            routes=[
                Route(id="r1", from_location_id="a", to_location_id="b", distance=1.0),
                Route(id="r2", from_location_id="b", to_location_id="gone", distance=1.0),
            ],
        )

        with pytest.raises(UnknownNodeError):
            RouteFinderService(store=store).find_path("a", "b")

        result = RouteFinderService(store=store, skip_dangling=True).find_path("a", "b")
        assert result.path == ("a", "b")

    def test_render_network_delegates_to_renderer(self, network, tmp_path):
        service, a, b, c, _ = network
        renderer = MagicMock()
        renderer.render_html.return_value = "<html></html>"
        service.renderer = renderer
        path = service.find_path(a.id, c.id).path

        document = service.render_network(path, output_path=tmp_path / "map.html")

        assert document == "<html></html>"
        renderer.render.assert_called_once()
        _, kwargs = renderer.render_html.call_args
        assert kwargs["highlighted_path"] == (a.id, b.id, c.id)

    def test_render_network_without_renderer(self, service):
        with pytest.raises(RenderingError):
            service.render_network()

    def test_format_result(self, network):
        service, a, _, c, d = network

        text = service.format_result(service.find_path(a.id, c.id))

        assert text.startswith("Shortest path: A -> B -> C")
        assert "Total distance: 10.00 units" in text
        assert "No path found" in service.format_result(service.find_path(a.id, d.id))
        assert "unknown location" in service.format_result(service.find_path("x", "y"))

    def test_format_result_keeps_large_distances_exact(self, service):
        a = service.add_location("A", 0, 0)
        b = service.add_location("B", 1, 1)
        service.add_route(a.id, b.id, 1234567)

        text = service.format_result(service.find_path(a.id, b.id))

        assert "Total distance: 1,234,567.00 units" in text
