"""Tests for the in-memory location/route store."""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../..")))

from route_finder.adapters.store import InMemoryLocationStore
from route_finder.domain.errors import DuplicateRouteError, LocationNotFoundError
from route_finder.domain.models import Location


class TestInMemoryLocationStore:
    """Test suite for InMemoryLocationStore."""

    @pytest.fixture
    def store(self):
        return InMemoryLocationStore()

    @pytest.fixture
    def seeded(self, store):
        market = store.add_location("Market", 10, 10)
        depot = store.add_location("Depot", 0, 0, description="start here")
        harbor = store.add_location("Harbor", 3, 4)
        return store, depot, harbor, market

    def test_add_location_generates_id_and_timestamp(self, store):
        location = store.add_location("Depot", 1.5, -2.0)

        assert location.id
        assert location.created_at is not None
        assert store.get_location(location.id) == location

    def test_list_locations_ordered_by_name(self, seeded):
        store, *_ = seeded

        assert [loc.name for loc in store.list_locations()] == ["Depot", "Harbor", "Market"]

    def test_update_location(self, seeded):
        store, depot, *_ = seeded

        updated = store.update_location(depot.id, "Main Depot", 1, 1, "moved")

        assert updated.id == depot.id
        assert updated.created_at == depot.created_at
        assert store.get_location(depot.id).name == "Main Depot"

    def test_update_unknown_location_raises(self, store):
        with pytest.raises(LocationNotFoundError):
            store.update_location("missing", "x", 0, 0)

    def test_delete_location_cascades_routes(self, seeded):
        store, depot, harbor, market = seeded
        store.add_routes([(depot.id, harbor.id, 5.0), (harbor.id, depot.id, 5.0)])
        store.add_routes([(harbor.id, market.id, 9.0)])

        assert store.delete_location(depot.id) is True

        remaining = store.list_routes()
        assert len(remaining) == 1
        assert remaining[0].from_location_id == harbor.id
        assert store.delete_location(depot.id) is False

    def test_add_routes_rejects_duplicates_atomically(self, seeded):
        store, depot, harbor, market = seeded
        store.add_routes([(depot.id, harbor.id, 5.0)])

        with pytest.raises(DuplicateRouteError):
            store.add_routes([(harbor.id, market.id, 1.0), (depot.id, harbor.id, 5.0)])

        assert len(store.list_routes()) == 1

    def test_add_routes_rejects_duplicates_within_batch(self, seeded):
        store, depot, harbor, _ = seeded

        with pytest.raises(DuplicateRouteError):
            store.add_routes([(depot.id, harbor.id, 5.0), (depot.id, harbor.id, 6.0)])

    def test_add_routes_rejects_unknown_endpoint(self, seeded):
        store, depot, harbor, _ = seeded

        with pytest.raises(LocationNotFoundError) as exc_info:
            store.add_routes([(depot.id, harbor.id, 5.0), (harbor.id, "missing", 2.0)])

        assert exc_info.value.location_id == "missing"
        assert store.list_routes() == []

    def test_add_routes_after_endpoint_deleted(self, seeded):
        store, depot, harbor, _ = seeded
        store.delete_location(harbor.id)

        with pytest.raises(LocationNotFoundError):
            store.add_routes([(depot.id, harbor.id, 5.0)])

        assert store.list_routes() == []

    def test_delete_route(self, seeded):
        store, depot, harbor, _ = seeded
        (route,) = store.add_routes([(depot.id, harbor.id, 5.0)])

        assert store.delete_route(route.id) is True
        assert store.delete_route(route.id) is False
        assert store.list_routes() == []

    def test_initial_records(self):
        location = Location(id="a", name="A", x=0.0, y=0.0)
        store = InMemoryLocationStore(locations=[location])

        assert store.list_locations() == [location]
        assert store.clear() == 1
        assert store.list_locations() == []
