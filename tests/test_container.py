import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from route_finder.adapters.store import CSVLocationStore, InMemoryLocationStore
from route_finder.config import AppConfig, StoreConfig
from route_finder.container import Container, get_container, reset_container
from route_finder.domain.errors import ConfigurationError
from route_finder.ports.store import LocationStorePort
from route_finder.services import RouteFinderService


def test_register_and_resolve_singleton():
    container = Container(config=AppConfig())
    container.register(LocationStorePort, lambda: InMemoryLocationStore())

    assert container.is_registered(LocationStorePort)
    assert container.resolve(LocationStorePort) is container.resolve(LocationStorePort)


def test_register_non_singleton():
    container = Container(config=AppConfig())
    container.register(LocationStorePort, lambda: InMemoryLocationStore(), singleton=False)

    assert container.resolve(LocationStorePort) is not container.resolve(LocationStorePort)


def test_resolve_unregistered_raises():
    with pytest.raises(KeyError):
        Container(config=AppConfig()).resolve(RouteFinderService)


def test_default_container_wires_memory_backend():
    config = AppConfig(store=StoreConfig(backend="memory"))
    container = Container.create_default(config)

    service = container.resolve(RouteFinderService)

    assert isinstance(service.store, InMemoryLocationStore)
    assert service.renderer is not None
    a = service.add_location("A", 0, 0)
    assert service.find_path(a.id, a.id).found


def test_default_container_wires_csv_backend(tmp_path):
    config = AppConfig(store=StoreConfig(backend="csv", data_dir=tmp_path))

    store = Container.create_default(config).resolve(LocationStorePort)

    assert isinstance(store, CSVLocationStore)
    assert store.config.data_dir == tmp_path


def test_unknown_backend_is_a_configuration_error():
    config = AppConfig(store=StoreConfig(backend="memory"))
    config.store.backend = "postgres"

    with pytest.raises(ConfigurationError):
        Container.create_default(config).resolve(LocationStorePort)


def test_clear_all():
    container = Container(config=AppConfig())
    container.register(LocationStorePort, lambda: InMemoryLocationStore())

    container.clear_all()

    assert not container.is_registered(LocationStorePort)


def test_get_container_is_cached():
    reset_container()
    try:
        assert get_container() is get_container()
    finally:
        reset_container()
